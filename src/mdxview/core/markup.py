"""Markdown-to-markup compilation with a fixed markdown-it extension set

Raw HTML in the body (custom component tags included) passes through untouched.
"""

import logging
import re
from html import escape

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline
from mdit_py_plugins.deflist import deflist_plugin
from mdit_py_plugins.footnote import footnote_plugin
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from mdxview.exceptions import MarkupCompileError


logger = logging.getLogger(__name__)

PRESET = "gfm-like"             # commonmark + html + table + strikethrough + linkify
HIGHLIGHT_THEME = "friendly"

_WHITESPACE_RE = re.compile(r'(^|[^\\])(\\\\)*\s')
_UNESCAPE_RE = re.compile(r'\\([ \\!"#$%&\'()*+,./:;<=>?@\[\]^_`{|}~-])')

_formatter = HtmlFormatter(style=HIGHLIGHT_THEME, noclasses=True, nowrap=True)


def highlight_code(code: str, lang: str, attrs: str = "") -> str:
    """markdown-it highlight hook: Pygments markup for known languages, '' to fall back."""
    if not lang:
        return ""
    try:
        lexer = get_lexer_by_name(lang)
    except ClassNotFound:
        logger.debug("no lexer for fence language %r", lang)
        return ""
    spans = highlight(code, lexer, _formatter)
    background = _formatter.style.background_color or "#ffffff"
    return (
        f'<pre style="background-color: {background}">'
        f'<code class="language-{escape(lang)}">{spans}</code></pre>'
    )


def _superscript_rule(state: StateInline, silent: bool) -> bool:
    """Match ^text^; spaces inside must be backslash-escaped."""
    start = state.pos
    maximum = state.posMax

    if state.src[start] != "^":
        return False
    if silent:
        return False
    if start + 2 >= maximum:
        return False

    state.pos = start + 1
    found = False
    while state.pos < maximum:
        if state.src[state.pos] == "^":
            found = True
            break
        state.md.inline.skipToken(state)

    if not found or state.pos == start + 1:
        state.pos = start
        return False

    content = state.src[start + 1:state.pos]
    if _WHITESPACE_RE.search(content):
        state.pos = start
        return False

    end = state.pos
    token = state.push("sup_open", "sup", 1)
    token.markup = "^"
    token = state.push("text", "", 0)
    token.content = _UNESCAPE_RE.sub(r"\1", content)
    token = state.push("sup_close", "sup", -1)
    token.markup = "^"

    state.pos = end + 1
    state.posMax = maximum
    return True


def superscript_plugin(md: MarkdownIt) -> None:
    """Register the ^superscript^ inline rule."""
    md.inline.ruler.after("emphasis", "superscript", _superscript_rule)


def make_parser() -> MarkdownIt:
    """Build the MarkdownIt instance with every supported extension enabled."""
    return (
        MarkdownIt(PRESET, options_update={"highlight": highlight_code})
        .use(footnote_plugin)
        .use(deflist_plugin)
        .use(superscript_plugin)
    )


_parser = make_parser()


def compile_markdown(body: str) -> str:
    """Convert a markdown body into markup."""
    try:
        return _parser.render(body)
    except Exception as e:
        raise MarkupCompileError(f"Markdown compilation failed: {e}", e) from e

"""Strict markup parsing into an Element / Text / Comment tree"""

import re
from html.parser import HTMLParser
from typing import Optional

from mdxview.core.models import Comment, Element, Node, Text
from mdxview.exceptions import MarkupParseError


VOID_ELEMENTS = frozenset({
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'keygen', 'link', 'meta', 'param', 'source', 'track', 'wbr',
})

_TAG_NAME_RE = re.compile(r'<\s*([^\s/>]+)')


class TreeBuilder(HTMLParser):
    """HTMLParser that assembles nodes and rejects markup that is not well-formed."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.roots: list[Node] = []
        self._open: list[tuple[Element, tuple[int, int]]] = []

    def _siblings(self) -> list[Node]:
        return self._open[-1][0].children if self._open else self.roots

    def _source_name(self, tag: str) -> str:
        """Tag name as written in the source; the tokenizer lower-cases it."""
        m = _TAG_NAME_RE.match(self.get_starttag_text() or "")
        if m and m.group(1).lower() == tag:
            return m.group(1)
        return tag

    def _element(self, tag: str, attrs: list[tuple[str, Optional[str]]]) -> Element:
        el = Element(name=self._source_name(tag))
        for key, value in attrs:
            if key == 'id':
                el.id = value
            elif key == 'class':
                el.classes = list(dict.fromkeys((value or "").split()))
            else:
                el.attributes[key] = value
        self._siblings().append(el)
        return el

    def handle_starttag(self, tag, attrs):
        el = self._element(tag, attrs)
        if tag not in VOID_ELEMENTS:
            self._open.append((el, self.getpos()))

    def handle_startendtag(self, tag, attrs):
        self._element(tag, attrs)

    def handle_endtag(self, tag):
        if tag in VOID_ELEMENTS:
            return
        line, column = self.getpos()
        if not self._open:
            raise MarkupParseError(f"unexpected closing tag </{tag}>", line, column)
        el, _ = self._open[-1]
        if el.name.lower() != tag:
            raise MarkupParseError(f"closing tag </{tag}> does not match open <{el.name}>", line, column)
        self._open.pop()

    def handle_data(self, data):
        siblings = self._siblings()
        if siblings and isinstance(siblings[-1], Text):
            siblings[-1].text += data
        else:
            siblings.append(Text(data))

    def handle_comment(self, data):
        self._siblings().append(Comment(data))

    def close(self) -> None:
        super().close()
        if self._open:
            el, (line, column) = self._open[-1]
            raise MarkupParseError(f"unclosed tag <{el.name}>", line, column)


def parse_markup(markup: str) -> list[Node]:
    """Parse markup into its ordered top-level nodes."""
    builder = TreeBuilder()
    try:
        builder.feed(markup)
        builder.close()
    except MarkupParseError:
        raise
    except Exception as e:
        raise MarkupParseError(f"invalid markup: {e}", original_error=e) from e
    return builder.roots

"""Frontmatter extraction: split an optional YAML front-block from the document body"""

import re
from typing import Any, Optional

import yaml

from mdxview.exceptions import FrontmatterError


FRONTMATTER_OPEN_RE = re.compile(r'\A---[ \t]*\r?\n')
FRONTMATTER_RE = re.compile(r'\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)', re.DOTALL | re.MULTILINE)


def split_frontmatter(source: str) -> tuple[Optional[dict[str, Any]], str]:
    """Return (frontmatter, body); frontmatter is None when the source has no front-block.

    The body is the exact text following the closing delimiter line.
    """
    if not FRONTMATTER_OPEN_RE.match(source):
        return None, source

    m = FRONTMATTER_RE.match(source)
    if m is None:
        raise FrontmatterError("Invalid YAML frontmatter: opening '---' is never closed")

    try:
        fm = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML frontmatter: {e}", e) from e
    if fm is None:
        fm = {}
    if not isinstance(fm, dict):
        raise FrontmatterError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
    return fm, source[m.end():]

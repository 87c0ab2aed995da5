"""Data models shared by the split, parse, and render stages"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from bs4 import BeautifulSoup


@dataclass
class Element:
    """A markup element; id and class are lifted out of attributes."""
    name:       str                                   # source case preserved
    id:         Optional[str] = None
    classes:    list[str] = field(default_factory=list)
    attributes: dict[str, Optional[str]] = field(default_factory=dict)   # None = present without a value
    children:   list["Node"] = field(default_factory=list)


@dataclass
class Text:
    text: str


@dataclass
class Comment:
    text: str


Node = Union[Element, Text, Comment]


@dataclass
class PropertyBundle:
    """Normalized input handed to every custom component (or to its props adapter)."""
    id:         Optional[str]
    classes:    list[str]
    attributes: dict[str, Optional[str]]
    children:   list          # child views, already built in document order


@dataclass
class RenderedDocument:
    """Result of rendering one source: its frontmatter, intermediate markup, and view fragment."""
    frontmatter: Optional[dict[str, Any]]
    markup:      str
    fragment:    BeautifulSoup

    def __str__(self) -> str:
        return str(self.fragment)

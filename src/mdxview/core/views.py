"""Tree-to-view compilation: markup nodes -> BeautifulSoup views

Every element resolves, in order, to a registered custom component, a
structural tag from STRUCTURAL_TAGS, or (with a warning) an empty view.
The soup passed to each call is the render context that owns every view
built for one document.
"""

import logging
from typing import Callable, Iterable, Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from mdxview.core.components import Components
from mdxview.core.models import Element, Node, PropertyBundle, Text


logger = logging.getLogger(__name__)

View = Union[Tag, NavigableString]
Builder = Callable[[BeautifulSoup], Tag]

_VOCABULARY: dict[str, tuple[str, ...]] = {
    'document':   ('html', 'base', 'head', 'link', 'meta', 'style', 'title', 'body'),
    'sectioning': ('address', 'article', 'aside', 'footer', 'header', 'hgroup',
                   'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'main', 'nav', 'section'),
    'text':       ('blockquote', 'dd', 'div', 'dl', 'dt', 'figcaption', 'figure',
                   'hr', 'li', 'ol', 'p', 'pre', 'ul'),
    'inline':     ('a', 'abbr', 'b', 'bdi', 'bdo', 'br', 'cite', 'code', 'data', 'dfn',
                   'em', 'i', 'kbd', 'mark', 'q', 'rp', 'rt', 'ruby', 's', 'samp', 'small',
                   'span', 'strong', 'sub', 'sup', 'time', 'u', 'var', 'wbr'),
    'media':      ('area', 'audio', 'img', 'map', 'track', 'video', 'embed', 'iframe',
                   'object', 'param', 'picture', 'portal', 'source', 'svg', 'math', 'canvas'),
    'scripting':  ('noscript', 'script'),
    'edits':      ('del', 'ins'),
    'table':      ('caption', 'col', 'colgroup', 'table', 'tbody', 'td', 'tfoot', 'th',
                   'thead', 'tr'),
    'forms':      ('button', 'datalist', 'fieldset', 'form', 'input', 'label', 'legend',
                   'meter', 'optgroup', 'option', 'output', 'progress', 'select', 'textarea'),
    'interactive': ('details', 'dialog', 'menu', 'summary'),
    'components': ('slot', 'template'),
}


def _builder(name: str) -> Builder:
    def build(soup: BeautifulSoup) -> Tag:
        return soup.new_tag(name)
    build.__name__ = f"build_{name}"
    return build


STRUCTURAL_TAGS: dict[str, Builder] = {
    name: _builder(name) for group in _VOCABULARY.values() for name in group
}


def empty_view() -> NavigableString:
    return NavigableString("")


def _as_view(value) -> View:
    """Coerce a component's return value into a view."""
    if value is None:
        return empty_view()
    if isinstance(value, (Tag, NavigableString)):
        return value
    if isinstance(value, str):
        return NavigableString(value)
    if isinstance(value, (list, tuple)):
        # appending a BeautifulSoup splices its contents into the parent
        fragment = BeautifulSoup("", "html.parser")
        for item in value:
            fragment.append(_as_view(item))
        return fragment
    raise TypeError(
        f"component returned {type(value).__name__}, expected a bs4 Tag, string, list of views, or None"
    )


def render_node(node: Node, components: Components, soup: BeautifulSoup) -> Optional[View]:
    """Render one node; comments and other non-element, non-text nodes produce None."""
    if isinstance(node, Element):
        return render_element(node, components, soup)
    if isinstance(node, Text):
        return NavigableString(node.text)
    return None


def structural_view(element: Element, children: list[View], tag: Tag) -> Tag:
    """Copy id, valued attributes, and classes onto tag, then append children in order."""
    if element.id is not None:
        tag['id'] = element.id
    for key, value in element.attributes.items():
        if value is not None:
            tag[key] = value
    if element.classes:
        tag['class'] = " ".join(element.classes)
    for child in children:
        tag.append(child)
    return tag


def render_element(element: Element, components: Components, soup: BeautifulSoup) -> View:
    """Render element's children first, then resolve the element itself."""
    children = [
        view for child in element.children
        if (view := render_node(child, components, soup)) is not None
    ]

    component = components.lookup(element.name)
    if component is not None:
        return _as_view(component(PropertyBundle(
            id=element.id,
            classes=list(element.classes),
            attributes=dict(element.attributes),
            children=children,
        )))

    builder = STRUCTURAL_TAGS.get(element.name)
    if builder is None:
        logger.warning("unknown element `%s`", element.name)
        return empty_view()
    return structural_view(element, children, builder(soup))


def render_tree(
    nodes: Iterable[Node],
    components: Components,
    soup: Optional[BeautifulSoup] = None,
    ) -> BeautifulSoup:
    """Render every top-level element into soup (a fresh one by default) and return it as the fragment."""
    if soup is None:
        soup = BeautifulSoup("", "html.parser")
    for node in nodes:
        if isinstance(node, Element):
            soup.append(render_element(node, components, soup))
    return soup

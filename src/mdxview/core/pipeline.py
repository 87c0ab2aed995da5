"""Render pipeline: source -> frontmatter + body -> markup -> tree -> view fragment"""

import logging
from pathlib import Path
from typing import Optional

from bs4 import BeautifulSoup

from mdxview.core.components import Components
from mdxview.core.frontmatter import split_frontmatter
from mdxview.core.markup import compile_markdown
from mdxview.core.models import RenderedDocument
from mdxview.core.tree import parse_markup
from mdxview.core.utils.files import discover_files, output_path, slugify
from mdxview.core.views import render_tree
from mdxview.exceptions import MdxError, SourceReadError


logger = logging.getLogger(__name__)


def render_document(source: str, components: Optional[Components] = None) -> RenderedDocument:
    """Render source and keep its frontmatter and intermediate markup alongside the fragment."""
    if components is None:
        components = Components()

    frontmatter, body = split_frontmatter(source)
    if frontmatter is not None:
        logger.debug("frontmatter keys: %s", sorted(frontmatter))

    markup = compile_markdown(body)
    logger.debug("compiled %d chars of markup", len(markup))

    nodes = parse_markup(markup)
    logger.debug("parsed %d top-level nodes", len(nodes))

    fragment = render_tree(nodes, components, BeautifulSoup("", "html.parser"))
    return RenderedDocument(frontmatter=frontmatter, markup=markup, fragment=fragment)


def render(source: str, components: Optional[Components] = None) -> BeautifulSoup:
    """Render an MDX source into a view fragment."""
    return render_document(source, components).fragment


def read_source(path: Path) -> str:
    """Read a document as UTF-8, raising SourceReadError with the path on failure."""
    try:
        return path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Cannot read {path}: {e}", original_error=e) from e


def run_render(
    path: str,
    components: Optional[Components],
    output_dir: Path,
    suffix: str = ".html",
    ) -> list[tuple[Path, Path]]:
    """Render every .md/.mdx file under path into output_dir. Returns (source_path, output_file) pairs."""
    root = Path(path)
    results = []
    for p in discover_files(root):
        try:
            doc = render_document(read_source(p), components)
        except MdxError as e:
            raise type(e)(f"Failed to render {p}: {e.message}", original_error=e) from e
        slug = slugify(str((doc.frontmatter or {}).get('slug') or p.stem))
        out_file = output_path(p, root, output_dir, slug, suffix)
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(str(doc), encoding='utf-8')
        results.append((p, out_file))
    return results

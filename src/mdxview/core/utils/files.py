"""Source discovery and output naming for batch rendering"""

import re
from pathlib import Path


MD_EXTENSIONS = {'.md', '.mdx'}


def slugify(text: str) -> str:
    """Convert text to a lowercase, hyphen-separated URL-safe slug."""
    text = text.lower()
    text = re.sub(r'[^\w\s-]', '', text)
    text = re.sub(r'[\s_]+', '-', text)
    return re.sub(r'-+', '-', text).strip('-') or 'document'


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def output_path(src: Path, root: Path, output_dir: Path, slug: str, suffix: str) -> Path:
    """Mirror src's directory relative to root under output_dir, named slug + suffix."""
    base = root if root.is_dir() else root.parent
    return output_dir / src.parent.relative_to(base) / f"{slug}{suffix}"

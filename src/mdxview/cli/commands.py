"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdxview.config import Settings, load_config
from mdxview.core.components import Components
from mdxview.core.frontmatter import split_frontmatter
from mdxview.core.loader import load_components
from mdxview.core.markup import compile_markdown
from mdxview.core.pipeline import read_source, render, run_render
from mdxview.core.utils.files import discover_files
from mdxview.exceptions import MdxError
from mdxview.logging_utils import configure_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and configure logging with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    try:
        configure_logging(settings.log_level, log_file=settings.log_file, trace_mode=settings.trace_logging)
    except OSError as e:
        _fail(f"Cannot open log file {settings.log_file}", e)
    return settings


def _components(settings: Settings) -> Components:
    if not settings.components:
        return Components()
    try:
        return load_components(settings.components)
    except ValueError as e:
        _fail(str(e))


def _read_source(path: str) -> str:
    p = Path(path)
    if not p.is_file():
        _fail(f"Not a file: {path}")
    try:
        return read_source(p)
    except MdxError as e:
        _fail(e.message)


def render_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to render")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Write rendered HTML here instead of stdout")] = None,
    components: Annotated[Optional[str], typer.Option("--components", help="Component registry as 'module:attr'")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    log_file: Annotated[Optional[str], typer.Option("--log-file", help="Also append log lines to this file")] = None,
    ):
    """Render .md/.mdx documents to HTML, substituting registered components."""
    settings = _settings(overrides={
        "output_dir": out, "components": components, "log_level": log_level, "log_file": log_file,
    })
    registry = _components(settings)

    if settings.output_dir:
        output_dir = Path(settings.output_dir)
        try:
            results = run_render(path, registry, output_dir, settings.output_suffix)
        except MdxError as e:
            _fail(e.message)
        except Exception as e:
            _fail("Render failed", e)
        for src, out_file in results:
            typer.echo(f"  {src} -> {out_file}")
        typer.echo(f"Rendered {len(results)} document(s) to {output_dir}/")
        return

    files = discover_files(Path(path))
    if not files:
        _fail(f"No .md/.mdx files found at {path}")
    for p in files:
        try:
            fragment = render(read_source(p), registry)
        except Exception as e:
            _fail(f"Failed to render {p}", e)
        typer.echo(str(fragment))


def frontmatter_cmd(
    path: Annotated[str, typer.Argument(help="Document to read")],
    ):
    """Print a document's frontmatter as JSON."""
    _settings()
    try:
        fm, _ = split_frontmatter(_read_source(path))
    except MdxError as e:
        _fail(e.message)
    typer.echo(json.dumps(fm or {}, indent=2, default=str, ensure_ascii=False))


def markup_cmd(
    path: Annotated[str, typer.Argument(help="Document to compile")],
    ):
    """Print the intermediate markup compiled from a document body."""
    _settings()
    try:
        _, body = split_frontmatter(_read_source(path))
        typer.echo(compile_markdown(body), nl=False)
    except MdxError as e:
        _fail(e.message)

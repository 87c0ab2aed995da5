"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdxview.cli.commands import frontmatter_cmd, markup_cmd, render_cmd


app = typer.Typer(name="mdxview", no_args_is_help=True, help="Render MDX documents into HTML view trees")

app.command(name="render")(render_cmd)
app.command(name="frontmatter")(frontmatter_cmd)
app.command(name="markup")(markup_cmd)

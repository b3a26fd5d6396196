"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdfolder.cli.commands import build_cmd, paths_cmd, render_cmd, serve_cmd


app = typer.Typer(name="mdfolder", no_args_is_help=True, help="Serve and pre-render folders of markdown files")

app.command(name="render")(render_cmd)
app.command(name="paths")(paths_cmd)
app.command(name="build")(build_cmd)
app.command(name="serve")(serve_cmd)

"""CLI command implementations"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer

from mdfolder.config import Settings, load_config
from mdfolder.core.build import build_site
from mdfolder.core.errors import NotFoundError
from mdfolder.core.files import read_markdown_file
from mdfolder.core.folder import static_paths
from mdfolder.core.page import load_template


Verbose = Annotated[bool, typer.Option("--verbose", "-v", help="Verbose logging")]


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _fail(msg: str, cause: Exception = None) -> NoReturn:
    """Report msg on stderr, with the cause on the same line, and exit 1."""
    typer.echo(f"Error: {msg}: {cause}" if cause else f"Error: {msg}", err=True)
    raise typer.Exit(1)


def _settings(**overrides) -> Settings:
    """Load config with CLI flags layered on top; bad config.yaml or values exit 1."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail("Invalid configuration", e)


def _template(settings: Settings) -> Optional[str]:
    try:
        return load_template(settings.template)
    except OSError as e:
        _fail(f"Cannot read template {settings.template}", e)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to convert")],
    meta: Annotated[bool, typer.Option("--meta", help="Print the frontmatter as JSON instead of HTML")] = False,
    verbose: Verbose = False,
    ):
    """Convert a single markdown file and print its HTML fragment."""
    _setup_logging(verbose)
    try:
        md = asyncio.run(read_markdown_file(path))
    except NotFoundError:
        _fail(f"No such file: {path}")
    except OSError as e:
        _fail(f"Cannot read {path}", e)
    if meta:
        typer.echo(json.dumps(md.meta, indent=2, default=str))
    else:
        typer.echo(md.content)


def paths_cmd(
    root: Annotated[Optional[str], typer.Argument(help="Content folder")] = None,
    verbose: Verbose = False,
    ):
    """List every URL path servable from the content folder."""
    _setup_logging(verbose)
    settings = _settings(root=root)
    for url_path in asyncio.run(static_paths(settings.root)):
        typer.echo(url_path)


def build_cmd(
    root: Annotated[Optional[str], typer.Argument(help="Content folder")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    template: Annotated[Optional[str], typer.Option("--template", help="Jinja2 page template file")] = None,
    verbose: Verbose = False,
    ):
    """Pre-render every servable path to <out-dir>/<path>/index.html."""
    _setup_logging(verbose)
    settings = _settings(root=root, output_dir=out, template=template)
    page_template = _template(settings)
    output_dir = Path(settings.output_dir)
    try:
        results = asyncio.run(build_site(settings.root, output_dir, page_template))
    except (NotFoundError, OSError) as e:
        _fail("Build failed", e)
    for url_path, html_file in results:
        typer.echo(f"  {url_path} -> {html_file}")
    typer.echo(f"Built {len(results)} page(s) to {output_dir}/")


def serve_cmd(
    root: Annotated[Optional[str], typer.Argument(help="Content folder")] = None,
    host: Annotated[Optional[str], typer.Option("--host", help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Bind port")] = None,
    template: Annotated[Optional[str], typer.Option("--template", help="Jinja2 page template file")] = None,
    verbose: Verbose = False,
    ):
    """Serve the content folder over HTTP."""
    import uvicorn

    from mdfolder.web.app import create_app

    _setup_logging(verbose)
    settings = _settings(root=root, host=host, port=port, template=template)
    app = create_app(settings.root, _template(settings))
    typer.echo(f"Serving {settings.root} at http://{settings.host}:{settings.port}/")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="debug" if verbose else "info")

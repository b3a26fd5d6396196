"""Static build: pre-render every servable path of a folder to HTML files"""

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Optional

from mdfolder.core.files import Converter
from mdfolder.core.folder import serve_markdown_folder
from mdfolder.core.models import Markdown
from mdfolder.core.page import render_page
from mdfolder.core.render import markdown_to_html


LOGGER = logging.getLogger(__name__)


def _request(url_path: str) -> SimpleNamespace:
    """Minimal request stand-in exposing url.path."""
    return SimpleNamespace(url=SimpleNamespace(path=url_path))


def output_file(output_dir: Path, url_path: str) -> Path:
    """Return output_dir/<url_path>/index.html."""
    parts = [p for p in url_path.split("/") if p]
    return output_dir.joinpath(*parts, "index.html")


async def build_site(
    root: str,
    output_dir: Path,
    template: Optional[str] = None,
    converter: Converter = markdown_to_html,
    ) -> list[tuple[str, Path]]:
    """Render every static path under root into output_dir. Returns (url_path, html_file) pairs."""

    def _render(md: Markdown, _req) -> str:
        return render_page(md, template)

    folder = serve_markdown_folder(root, _render, converter)
    results = []
    for url_path in await folder.list_static_paths():
        page = await folder.handler(_request(url_path))
        out = output_file(output_dir, url_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(page, encoding="utf-8")
        LOGGER.debug("Wrote %s -> %s", url_path, out)
        results.append((url_path, out))
    return results

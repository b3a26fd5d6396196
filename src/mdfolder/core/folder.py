"""Folder serving: URL path to markdown file resolution and static route listing

A folder maps URL paths (always ending in ``/``) to markdown files:

  /          -> <root>/index.md
  /foo/      -> <root>/foo.md, else <root>/foo/index.md
  /foo/bar/  -> <root>/foo/bar.md, else <root>/foo/bar/index.md
"""

import glob
import logging
import re
from pathlib import Path, PurePosixPath
from typing import Any, Awaitable, Callable, NamedTuple, Union

from mdfolder.core.errors import NotFoundError
from mdfolder.core.files import Converter, find_files, maybe_await, read_text_file
from mdfolder.core.models import Markdown
from mdfolder.core.render import markdown_to_html


LOGGER = logging.getLogger(__name__)

RenderFn = Callable[[Markdown, Any], Union[Any, Awaitable[Any]]]

_DOT_SEGMENTS = {".", ".."}


class MarkdownFolder(NamedTuple):
    """Request handler and static route lister for one content folder."""
    handler:           Callable[[Any], Awaitable[Any]]
    list_static_paths: Callable[[], Awaitable[list[str]]]


def candidate_files(root: str, url_path: str) -> list[str]:
    """Return the files backing url_path, in lookup order.

    Dot segments are refused so a request can never leave root.
    """
    if not url_path.endswith("/"):
        raise NotFoundError("NotFound: path must end with a /", path=url_path)
    if _DOT_SEGMENTS.intersection(re.split(r"[/\\]", url_path)):
        raise NotFoundError("NotFound: path must not contain . or .. segments", path=url_path)
    path = url_path[:-1]
    if not path.startswith("/"):
        path = "/" + path
    base = root.rstrip("/") + path
    if path == "/":
        return [base + "index.md"]
    return [base + ".md", base + "/index.md"]


async def read_folder_page(root: str, url_path: str) -> str:
    """Read the markdown source for url_path under root.

    Only a missing file moves on to the next candidate; any other error
    (permissions, a directory in the way) is raised as is.
    """
    candidates = candidate_files(root, url_path)
    for path in candidates[:-1]:
        try:
            return await read_text_file(path)
        except NotFoundError:
            LOGGER.debug("No %s, trying next candidate", path)
    return await read_text_file(candidates[-1])


def static_path_for(root: str, file: str) -> str:
    """Derive the public URL path of a markdown file under root."""
    rel = PurePosixPath(Path(file).as_posix()).relative_to(PurePosixPath(Path(root).as_posix()))
    stem = rel.parent if rel.name == "index.md" else rel.with_suffix("")
    return "/" if str(stem) == "." else f"/{stem}/"


async def static_paths(root: str) -> list[str]:
    """List the URL path of every markdown file under root (fresh scan on each call)."""
    files = await find_files(f"{glob.escape(Path(root).as_posix())}/**/*.md")
    return [static_path_for(root, f) for f in files]


def serve_markdown_folder(
    root: str,
    render: RenderFn,
    converter: Converter = markdown_to_html,
    ) -> MarkdownFolder:
    """Serve a folder of (possibly nested) markdown files.

    ``handler(request)`` reads the file for ``request.url.path``, converts it
    and returns whatever ``render(converted, request)`` returns. Only URLs with
    a trailing slash are servable; others raise NotFoundError.
    """

    async def handler(request):
        text = await read_folder_page(root, request.url.path)
        converted = await maybe_await(converter(text))
        return await maybe_await(render(converted, request))

    async def list_static_paths() -> list[str]:
        return await static_paths(root)

    return MarkdownFolder(handler=handler, list_static_paths=list_static_paths)

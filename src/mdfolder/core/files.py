"""Async file reading and discovery for markdown content"""

import asyncio
import glob
import inspect
from pathlib import Path
from typing import Awaitable, Callable, Union

from mdfolder.core.errors import NotFoundError
from mdfolder.core.models import Markdown, MarkdownFile
from mdfolder.core.render import markdown_to_html


Converter = Callable[[str], Union[Markdown, Awaitable[Markdown]]]


async def maybe_await(value):
    """Return value, awaiting it first when it is awaitable."""
    if inspect.isawaitable(value):
        return await value
    return value


async def read_text_file(path: str) -> str:
    """Read a UTF-8 file. A missing file raises NotFoundError; other OSErrors propagate."""
    try:
        return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    except FileNotFoundError as e:
        raise NotFoundError(f"NotFound: {path}", path=path) from e


def _find_files(pattern: str) -> list[str]:
    return sorted(
        Path(p).as_posix() for p in glob.glob(pattern, recursive=True) if Path(p).is_file()
    )


async def find_files(pattern: str) -> list[str]:
    """Return sorted file paths matching a recursive glob pattern (``**`` spans directories)."""
    return await asyncio.to_thread(_find_files, pattern)


async def read_markdown_file(path: str, converter: Converter = markdown_to_html) -> Markdown:
    """Read a markdown file and convert it to HTML and metadata."""
    return await maybe_await(converter(await read_text_file(path)))


async def read_markdown_files(pattern: str, converter: Converter = markdown_to_html) -> list[MarkdownFile]:
    """Read and convert every file matching pattern concurrently.

    Results are returned in the order of the matched paths, not in completion order.
    """
    paths = await find_files(pattern)

    async def _read(path: str) -> MarkdownFile:
        md = await read_markdown_file(path, converter)
        return MarkdownFile(path=path, content=md.content, meta=md.meta)

    return list(await asyncio.gather(*(_read(p) for p in paths)))

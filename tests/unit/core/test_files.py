"""Unit tests for core/files.py"""

import asyncio
from pathlib import Path

import pytest
from markupsafe import Markup

from mdfolder.core.errors import NotFoundError
from mdfolder.core.files import find_files, read_markdown_file, read_markdown_files, read_text_file
from mdfolder.core.models import Markdown


@pytest.mark.asyncio
async def test_read_text_file(tmp_path):
    f = tmp_path / "doc.md"
    f.write_text("héllo", encoding="utf-8")
    assert await read_text_file(str(f)) == "héllo"


@pytest.mark.asyncio
async def test_read_text_file_missing_is_not_found(tmp_path):
    """A missing file is classified as NotFoundError carrying the path."""
    missing = str(tmp_path / "nope.md")
    with pytest.raises(NotFoundError) as exc:
        await read_text_file(missing)
    assert exc.value.path == missing
    assert exc.value.name == "NotFound"


@pytest.mark.asyncio
async def test_read_text_file_other_errors_propagate(tmp_path):
    """Errors other than file-not-found are not reclassified."""
    with pytest.raises(IsADirectoryError):
        await read_text_file(str(tmp_path))


@pytest.mark.asyncio
async def test_find_files_recursive_and_sorted(content_dir):
    files = await find_files(f"{content_dir.as_posix()}/**/*.md")
    rel = [f[len(content_dir.as_posix()):] for f in files]
    assert rel == [
        "/about.md",
        "/blog/hello-world.md",
        "/blog/index.md",
        "/docs/intro/index.md",
        "/index.md",
    ]


@pytest.mark.asyncio
async def test_read_markdown_file(content_dir):
    md = await read_markdown_file(str(content_dir / "about.md"))
    assert md.meta == {"title": "About"}
    assert md.content == "<p>About <em>us</em>.</p>"


@pytest.mark.asyncio
async def test_read_markdown_file_custom_converters(content_dir):
    """Sync and async converters are both accepted."""
    def sync_conv(text):
        return Markdown(content=Markup(text.upper()), meta={"kind": "sync"})

    async def async_conv(text):
        return Markdown(content=Markup(text.lower()), meta={"kind": "async"})

    path = str(content_dir / "docs/intro/index.md")
    assert (await read_markdown_file(path, sync_conv)).content == "NO FRONTMATTER HERE.\n"
    assert (await read_markdown_file(path, async_conv)).meta == {"kind": "async"}


@pytest.mark.asyncio
async def test_read_markdown_files_preserves_path_order(content_dir):
    """Results follow the matched path order even when conversions finish out of order."""
    delays = iter([0.05, 0.04, 0.03, 0.02, 0.01])

    async def slow_conv(text):
        await asyncio.sleep(next(delays))
        return Markdown(content=Markup(text), meta={})

    files = await read_markdown_files(f"{content_dir.as_posix()}/**/*.md", slow_conv)
    assert [f.path for f in files] == sorted(f.path for f in files)
    for f in files:
        assert f.content == Path(f.path).read_text(encoding="utf-8")


@pytest.mark.asyncio
async def test_read_markdown_files_default_converter(content_dir):
    files = await read_markdown_files(f"{content_dir.as_posix()}/blog/*.md")
    assert [f.meta["title"] for f in files] == ["Hello World", "Blog"]
    assert files[0].meta["date"] == "2024-01-02"

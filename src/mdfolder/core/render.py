"""GFM markdown rendering with markdown-it"""

from typing import Any, Optional

from markdown_it import MarkdownIt
from markupsafe import Markup
from mdit_py_plugins.tasklists import tasklists_plugin

from mdfolder.core.frontmatter import parse_yaml_frontmatter
from mdfolder.core.models import Markdown


PRESET = "gfm-like"
GFM_OPTIONS: dict[str, Any] = {"linkify": True}


def _make_parser(options: Optional[dict[str, Any]] = None) -> MarkdownIt:
    """Build a GFM parser (tables, strikethrough, autolinks, task lists); options override defaults."""
    return MarkdownIt(PRESET, options_update={**GFM_OPTIONS, **(options or {})}).use(tasklists_plugin)


def render_markdown(body: str, options: Optional[dict[str, Any]] = None) -> str:
    """Render a markdown body to an HTML string, without sanitizing it."""
    return _make_parser(options).render(body).rstrip("\n")


def markdown_to_html(text: str, options: Optional[dict[str, Any]] = None) -> Markdown:
    """Convert a markdown document with optional YAML frontmatter to trusted HTML and metadata."""
    fm = parse_yaml_frontmatter(text)
    return Markdown(content=Markup(render_markdown(fm.body, options)), meta=fm.meta)

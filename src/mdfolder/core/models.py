"""Result types for frontmatter splitting and markdown conversion"""

from dataclasses import dataclass, field
from typing import Any, Optional

from markupsafe import Markup


@dataclass(frozen=True)
class FrontmatterResult:
    """Body text with the frontmatter block removed, plus its parsed metadata."""
    body: str
    meta: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class YamlLoad:
    """Outcome of a restricted YAML parse; error is set when ok is False."""
    ok:    bool
    value: Any = None
    error: Optional[str] = None


@dataclass(frozen=True)
class Markdown:
    """Converted document: trusted HTML fragment and frontmatter metadata."""
    content: Markup
    meta:    dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class MarkdownFile:
    """A converted document together with the file it was read from."""
    path:    str
    content: Markup
    meta:    dict[str, Any] = field(default_factory=dict)

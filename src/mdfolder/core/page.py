"""Jinja2 page templates wrapping converted markdown"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, select_autoescape

from mdfolder.core.models import Markdown


PAGE_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{{ title or "" }}</title>
</head>
<body>
<main>{{ content }}</main>
</body>
</html>
"""

_env = Environment(autoescape=select_autoescape(default=True, default_for_string=True))


def load_template(path: Optional[str]) -> Optional[str]:
    """Read a template file, or return None to use the built-in page."""
    return Path(path).read_text(encoding="utf-8") if path else None


def render_page(md: Markdown, template: Optional[str] = None) -> str:
    """Render md into a full HTML page; meta is escaped, content is trusted."""
    return _env.from_string(template or PAGE_TEMPLATE).render(
        content=md.content,
        meta=md.meta,
        title=md.meta.get("title"),
    )

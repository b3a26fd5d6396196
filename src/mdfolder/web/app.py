"""FastAPI application serving a markdown folder"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse

from mdfolder.core.errors import NotFoundError
from mdfolder.core.folder import serve_markdown_folder
from mdfolder.core.models import Markdown
from mdfolder.core.page import render_page


LOGGER = logging.getLogger(__name__)


def create_app(root: str, template: Optional[str] = None) -> FastAPI:
    """Build an app answering GET for every trailing-slash URL backed by a markdown file."""
    app = FastAPI(title="mdfolder")

    def _render(md: Markdown, _req: Request) -> HTMLResponse:
        return HTMLResponse(render_page(md, template))

    folder = serve_markdown_folder(root, _render)

    @app.get("/{path:path}", response_class=HTMLResponse)
    async def get_page(request: Request):
        try:
            return await folder.handler(request)
        except NotFoundError as e:
            LOGGER.debug("404 %s (%s)", request.url.path, e)
            raise HTTPException(status_code=404, detail="Not Found") from e

    return app

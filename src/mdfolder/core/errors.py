"""Error kinds surfaced by path resolution and file reads"""


class NotFoundError(LookupError):
    """A servable markdown file does not exist (maps to an HTTP 404)."""
    name = "NotFound"

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path

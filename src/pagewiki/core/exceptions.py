"""Application error types."""


class WikiError(Exception):
    """Base class for PageWiki errors."""


class PageNotFoundError(WikiError):
    """Raised when a page file is absent or cannot be read."""

    def __init__(self, title: str, reason: str = ""):
        self.title = title
        message = f"page not found: {title}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TemplateRenderError(WikiError):
    """Raised when composing or rendering a template fails."""

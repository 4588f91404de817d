"""Request handlers for viewing, editing, saving and listing pages."""

import logging

from fastapi import Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse, Response

from pagewiki.core.exceptions import PageNotFoundError, TemplateRenderError
from pagewiki.core.models import Layout, Page, PageListView, PageView
from pagewiki.core.storage import Storage
from pagewiki.core.templates import TemplateRegistry

logger = logging.getLogger(__name__)


def server_error(message: str) -> Response:
    """Plain-text 500 carrying the raw error message."""
    return PlainTextResponse(message, status_code=500)


class WikiHandlers:
    """Route handlers bound to one storage backend and template registry."""

    def __init__(
        self,
        storage: Storage,
        templates: TemplateRegistry,
        default_title: str = "home",
    ):
        self.storage = storage
        self.templates = templates
        self.default_title = default_title

    def render(self, layout: Layout, content_name: str) -> Response:
        try:
            html = self.templates.render_with_layout(layout, content_name)
        except TemplateRenderError as exc:
            logger.exception("Failed to render %s", content_name)
            return server_error(str(exc))
        return HTMLResponse(html)

    def render_page(self, content_name: str, page: Page) -> Response:
        layout = Layout(
            title=f"{content_name}: {page.title}",
            child=PageView(page=page),
        )
        return self.render(layout, content_name)

    async def view(self, request: Request, title: str) -> Response:
        """Show a page, or send the user to create it."""
        try:
            page = await self.storage.load(title)
        except PageNotFoundError:
            return RedirectResponse(url=f"/edit/{title}", status_code=302)
        return self.render_page("view", page)

    async def edit(self, request: Request, title: str) -> Response:
        """Edit form; a missing page starts out blank."""
        try:
            page = await self.storage.load(title)
        except PageNotFoundError:
            page = Page(title=title)
        return self.render_page("edit", page)

    async def save(self, request: Request, title: str) -> Response:
        form = await request.form()
        body = form.get("body")
        if body is None:
            body = request.query_params.get("body", "")
        if not isinstance(body, str):
            # file uploads are not page text
            body = ""
        page = Page(title=title, body=body.encode("utf-8"))
        try:
            await self.storage.save(page)
        except OSError as exc:
            logger.exception("Failed to save %s", title)
            return server_error(str(exc))
        return RedirectResponse(url=f"/view/{title}", status_code=302)

    async def list_pages(self, request: Request) -> Response:
        try:
            pages = await self.storage.list_pages()
        except OSError as exc:
            logger.exception("Failed to list pages")
            return server_error(str(exc))
        layout = Layout(title="List", child=PageListView(pages=pages))
        return self.render(layout, "list")

    async def root(self, request: Request) -> Response:
        return RedirectResponse(url=f"/view/{self.default_title}", status_code=301)

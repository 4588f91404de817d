"""URL routing: path validation, title extraction and dispatch."""

import re
from collections.abc import Awaitable, Callable, Mapping
from types import MappingProxyType

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from pagewiki.core.handlers import WikiHandlers

VALID_PATH = re.compile(r"^/(edit|save|view)/([a-zA-Z0-9]+)$")

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

TitleHandler = Callable[[Request, str], Awaitable[Response]]
RouteTable = Mapping[str, TitleHandler]


def not_found() -> Response:
    return PlainTextResponse("404 page not found", status_code=404)


def build_route_table(handlers: WikiHandlers) -> RouteTable:
    """Map each titled action to its handler."""
    return MappingProxyType(
        {
            "view": handlers.view,
            "edit": handlers.edit,
            "save": handlers.save,
        }
    )


def match_path(path: str) -> tuple[str, str] | None:
    """Split a request path into (action, title), or None if invalid."""
    m = VALID_PATH.fullmatch(path)
    if m is None:
        return None
    return m.group(1), m.group(2)


def build_router(table: RouteTable, handlers: WikiHandlers) -> APIRouter:
    """Build the application router from an explicit route table."""
    router = APIRouter()

    router.add_api_route(
        "/", handlers.root, methods=["GET", "HEAD"], include_in_schema=False
    )
    router.add_api_route(
        "/list", handlers.list_pages, methods=["GET", "HEAD"], include_in_schema=False
    )

    async def dispatch(request: Request, path: str) -> Response:
        matched = match_path(request.url.path)
        if matched is None:
            return not_found()
        action, title = matched
        handler = table.get(action)
        if handler is None:
            return not_found()
        return await handler(request, title)

    router.add_api_route(
        "/{path:path}", dispatch, methods=ALL_METHODS, include_in_schema=False
    )
    return router

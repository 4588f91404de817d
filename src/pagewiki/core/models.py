"""Data models for PageWiki."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Page(BaseModel):
    """A titled unit of text content, stored as one file."""

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded for display."""
        return self.body.decode("utf-8", errors="replace")


class PageView(BaseModel):
    """View-model for routes that show a single page."""

    kind: Literal["page"] = "page"
    page: Page


class PageListView(BaseModel):
    """View-model for the page listing."""

    kind: Literal["list"] = "list"
    pages: list[Page] = Field(default_factory=list)


ChildView = Annotated[Union[PageView, PageListView], Field(discriminator="kind")]


class Layout(BaseModel):
    """Shared chrome around a content template."""

    title: str
    child: ChildView

"""Storage abstraction for wiki pages."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from pagewiki.core.exceptions import PageNotFoundError
from pagewiki.core.models import Page

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    async def load(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if missing."""
        ...

    @abstractmethod
    async def save(self, page: Page) -> None:
        """Save a page. Creates or truncates it."""
        ...

    @abstractmethod
    async def list_pages(self) -> list[Page]:
        """Load every stored page, sorted by title."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Pages are stored as raw bytes, one file per page.
    File naming: <title>.txt

    Titles are used as-is; callers are expected to validate them.
    """

    SUFFIX = ".txt"
    FILE_MODE = 0o600

    def __init__(self, base_path: Path, placeholder: str = ".gitkeep"):
        self.base_path = base_path
        self.placeholder = placeholder
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / (title + self.SUFFIX)

    async def load(self, title: str) -> Page:
        """Load a page by title."""
        try:
            body = self._get_path(title).read_bytes()
        except OSError as exc:
            raise PageNotFoundError(title, str(exc)) from exc
        return Page(title=title, body=body)

    async def save(self, page: Page) -> None:
        """Save a page, owner read/write only when newly created."""
        path = self._get_path(page.title)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(page.body)
        logger.debug("Saved %s (%d bytes)", path, len(page.body))

    async def list_pages(self) -> list[Page]:
        """Load every page in the base directory.

        Directories, the placeholder file and files without the page
        suffix are ignored. Entries that fail to load are logged and
        skipped.
        """
        pages = []
        for path in self.base_path.iterdir():
            if path.is_dir() or path.name == self.placeholder:
                continue
            if path.suffix != self.SUFFIX:
                logger.debug("Ignoring %s", path.name)
                continue
            try:
                pages.append(await self.load(path.stem))
            except PageNotFoundError as exc:
                logger.warning("Skipping %s: %s", path.name, exc)
        return sorted(pages, key=lambda p: p.title)

"""Unit tests for FileStorage."""

import logging
import stat

import pytest

from pagewiki.core.exceptions import PageNotFoundError
from pagewiki.core.models import Page
from pagewiki.core.storage import FileStorage


@pytest.fixture
def storage(tmp_path):
    return FileStorage(tmp_path)


class TestPaths:
    def test_get_path(self, storage, tmp_path):
        assert storage._get_path("home") == tmp_path / "home.txt"

    def test_creates_missing_base_dir(self, tmp_path):
        base = tmp_path / "nested" / "data"
        FileStorage(base)
        assert base.is_dir()


class TestLoadSave:
    @pytest.mark.asyncio
    async def test_save_then_load(self, storage):
        await storage.save(Page(title="home", body=b"Hello, World!"))
        page = await storage.load("home")
        assert page.title == "home"
        assert page.body == b"Hello, World!"

    @pytest.mark.asyncio
    async def test_save_writes_raw_bytes(self, storage, tmp_path):
        await storage.save(Page(title="raw", body=b"\x00\xffbytes"))
        assert (tmp_path / "raw.txt").read_bytes() == b"\x00\xffbytes"

    @pytest.mark.asyncio
    async def test_save_truncates(self, storage, tmp_path):
        await storage.save(Page(title="p", body=b"a much longer body"))
        await storage.save(Page(title="p", body=b"short"))
        assert (tmp_path / "p.txt").read_bytes() == b"short"

    @pytest.mark.asyncio
    async def test_save_owner_only_permissions(self, storage, tmp_path):
        await storage.save(Page(title="secret", body=b"x"))
        mode = stat.S_IMODE((tmp_path / "secret.txt").stat().st_mode)
        assert mode & 0o077 == 0

    @pytest.mark.asyncio
    async def test_load_missing_raises(self, storage):
        with pytest.raises(PageNotFoundError) as excinfo:
            await storage.load("NoSuchPage")
        assert excinfo.value.title == "NoSuchPage"
        assert isinstance(excinfo.value.__cause__, OSError)

    @pytest.mark.asyncio
    async def test_load_directory_raises(self, storage, tmp_path):
        (tmp_path / "dir.txt").mkdir()
        with pytest.raises(PageNotFoundError):
            await storage.load("dir")

    @pytest.mark.asyncio
    async def test_save_into_missing_dir_raises_oserror(self, tmp_path):
        storage = FileStorage(tmp_path / "gone")
        (tmp_path / "gone").rmdir()
        with pytest.raises(OSError):
            await storage.save(Page(title="home", body=b"x"))


class TestListPages:
    @pytest.mark.asyncio
    async def test_empty(self, storage):
        assert await storage.list_pages() == []

    @pytest.mark.asyncio
    async def test_lists_each_page_once_sorted(self, storage):
        for title in ("Zebra", "Apple", "Mango"):
            await storage.save(Page(title=title, body=title.encode()))
        pages = await storage.list_pages()
        assert [p.title for p in pages] == ["Apple", "Mango", "Zebra"]
        assert pages[0].body == b"Apple"

    @pytest.mark.asyncio
    async def test_skips_placeholder_and_directories(self, storage, tmp_path):
        (tmp_path / ".gitkeep").write_bytes(b"")
        (tmp_path / "subdir").mkdir()
        await storage.save(Page(title="home", body=b"hi"))
        pages = await storage.list_pages()
        assert [p.title for p in pages] == ["home"]

    @pytest.mark.asyncio
    async def test_custom_placeholder(self, tmp_path):
        storage = FileStorage(tmp_path, placeholder="KEEP")
        (tmp_path / "KEEP").write_bytes(b"")
        assert await storage.list_pages() == []

    @pytest.mark.asyncio
    async def test_ignores_files_without_page_suffix(self, storage, tmp_path):
        await storage.save(Page(title="home", body=b"hi"))
        (tmp_path / "home.bak").write_bytes(b"old")
        (tmp_path / "notes.md").write_text("stray")
        pages = await storage.list_pages()
        assert [p.title for p in pages] == ["home"]

    @pytest.mark.asyncio
    async def test_skips_unloadable_entries(self, storage, tmp_path, caplog):
        # dangling symlink: listed as a file, but reading it fails
        (tmp_path / "broken.txt").symlink_to(tmp_path / "missing-target")
        await storage.save(Page(title="home", body=b"hi"))
        with caplog.at_level(logging.WARNING, logger="pagewiki.core.storage"):
            pages = await storage.list_pages()
        assert [p.title for p in pages] == ["home"]
        assert "broken.txt" in caplog.text

    @pytest.mark.asyncio
    async def test_missing_dir_raises_oserror(self, tmp_path):
        storage = FileStorage(tmp_path / "gone")
        (tmp_path / "gone").rmdir()
        with pytest.raises(OSError):
            await storage.list_pages()

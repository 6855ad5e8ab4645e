# Tests for browser/lister.py
# Created: 2026-10-09

import os
from unittest.mock import patch

import pytest

from filejail.browser.errors import FileOpsError, NotFoundError
from filejail.browser.lister import list_directory
from filejail.browser.models import EntryKind


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "b.txt").write_text("bb")
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "zdir").mkdir()
    (tmp_path / "adir").mkdir()
    (tmp_path / "adir" / "nested.txt").write_text("not listed")
    return tmp_path


class TestListDirectory:
    def test_folders_then_files(self, tree):
        entries = list_directory(tree)
        assert [e.name for e in entries] == ["adir/", "zdir/", "a.txt", "b.txt"]

    def test_folder_marker_and_kinds(self, tree):
        entries = list_directory(tree)
        folders = [e for e in entries if e.kind is EntryKind.FOLDER]
        assert len(folders) == 2
        assert all(e.name.endswith("/") for e in folders)
        assert all(e.size is None for e in folders)
        assert [e.real_name for e in folders] == ["adir", "zdir"]

    def test_file_sizes(self, tree):
        sizes = {e.name: e.size for e in list_directory(tree) if e.kind is EntryKind.FILE}
        assert sizes == {"a.txt": 1, "b.txt": 2}

    def test_not_recursive(self, tree):
        assert "nested.txt" not in [e.name for e in list_directory(tree)]

    def test_empty(self, tmp_path):
        assert list_directory(tmp_path) == []

    def test_missing_directory(self, tmp_path):
        with pytest.raises(NotFoundError):
            list_directory(tmp_path / "missing")

    def test_file_is_not_a_directory(self, tree):
        with pytest.raises(NotFoundError):
            list_directory(tree / "a.txt")

    def test_permission_error_is_surfaced(self, tree):
        with patch("filejail.browser.lister.os.scandir", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(FileOpsError) as exc_info:
                list_directory(tree)
        assert "Permission denied" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_dangling_symlink_is_skipped(self, tree):
        os.symlink(tree / "gone", tree / "dangling")
        names = [e.name for e in list_directory(tree)]
        assert "dangling" not in names
        assert "a.txt" in names

    def test_symlink_loop_is_skipped(self, tree):
        os.symlink("loop", tree / "loop")
        names = [e.name for e in list_directory(tree)]
        assert "loop" not in names
        assert names == ["adir/", "zdir/", "a.txt", "b.txt"]

# Tests for browser/view.py
# Created: 2026-10-10

from datetime import UTC, datetime, timedelta

import pytest

from filejail.browser.errors import InvalidArgumentError
from filejail.browser.models import Entry, EntryKind
from filejail.browser.view import build_view, sort_entries

T0 = datetime(2026, 1, 1, tzinfo=UTC)


def _file(name, size, minutes=0):
    return Entry(name, EntryKind.FILE, size, T0 + timedelta(minutes=minutes))


def _folder(name, minutes=0):
    return Entry(name, EntryKind.FOLDER, None, T0 + timedelta(minutes=minutes))


def _names(entries):
    return [e.name for e in entries]


class TestSorting:
    def test_size_desc(self):
        entries = [_file("b", 5), _file("a", 10)]
        assert _names(sort_entries(entries, "size", "desc")) == ["a", "b"]

    def test_name(self):
        entries = [_file("b", 5), _file("a", 10)]
        assert _names(sort_entries(entries, "name", "asc")) == ["a", "b"]

    def test_name_desc(self):
        entries = [_file("a", 1), _file("c", 1), _file("b", 1)]
        assert _names(sort_entries(entries, "name", "desc")) == ["c", "b", "a"]

    def test_name_uses_display_name_with_marker(self):
        # "docs/" > "docs.txt" because "/" (0x2f) sorts after "." (0x2e)
        entries = [_folder("docs/"), _file("docs.txt", 1), _file("a.txt", 1)]
        assert _names(sort_entries(entries, "name", "asc")) == ["a.txt", "docs.txt", "docs/"]

    def test_date(self):
        entries = [_file("new", 1, minutes=10), _file("old", 1, minutes=0)]
        assert _names(sort_entries(entries, "date", "asc")) == ["old", "new"]
        assert _names(sort_entries(entries, "date", "desc")) == ["new", "old"]

    def test_folders_sort_as_zero_size(self):
        entries = [_file("big", 100), _folder("dir/"), _file("small", 1)]
        assert _names(sort_entries(entries, "size", "asc")) == ["dir/", "small", "big"]

    def test_stable_for_equal_keys(self):
        entries = [_folder("z/"), _folder("a/"), _file("m", 0)]
        assert _names(sort_entries(entries, "size", "asc")) == ["z/", "a/", "m"]
        assert _names(sort_entries(entries, "size", "desc")) == ["z/", "a/", "m"]

    def test_unknown_direction_is_ascending(self):
        entries = [_file("b", 5), _file("a", 10)]
        assert _names(sort_entries(entries, "size", "sideways")) == ["b", "a"]

    def test_unknown_sort_by_is_name_ascending_regardless_of_direction(self):
        entries = [_file("b", 5), _file("c", 1), _file("a", 10)]
        assert _names(sort_entries(entries, "colour", "desc")) == ["a", "b", "c"]


class TestPagination:
    @pytest.fixture
    def entries(self):
        return [_file(f"f{i:03d}", i) for i in range(250)]

    def test_last_partial_page(self, entries):
        view = build_view(entries, "name", "asc", page=3, page_size=100)
        assert len(view.items) == 50
        assert view.items[0].name == "f200"
        assert view.items[-1].name == "f249"
        assert view.total_pages == 3

    def test_page_past_end_is_empty(self, entries):
        view = build_view(entries, "name", "asc", page=9, page_size=100)
        assert view.items == []
        assert view.page == 9

    @pytest.mark.parametrize("page", [0, -3])
    def test_non_positive_page_is_clamped(self, entries, page):
        view = build_view(entries, "name", "asc", page=page, page_size=100)
        assert view.items[0].name == "f000"
        assert len(view.items) == 100
        assert view.page == page

    @pytest.mark.parametrize("page_size", [0, -1])
    def test_non_positive_page_size_is_rejected(self, entries, page_size):
        with pytest.raises(InvalidArgumentError):
            build_view(entries, "name", "asc", page=1, page_size=page_size)

    def test_empty_set(self):
        view = build_view([], "size", "asc", page=1, page_size=100)
        assert view.items == []
        assert view.total_pages == 0
        assert view.total_items == 0


class TestAggregates:
    def test_totals_cover_full_set(self):
        entries = [_folder(f"d{i}/") for i in range(3)] + [_file(f"f{i}", 10) for i in range(7)]
        view = build_view(entries, "name", "asc", page=2, page_size=4)
        assert len(view.items) == 4
        assert view.file_count == 7
        assert view.folder_count == 3
        assert view.total_size == 70
        assert view.total_items == 10
        assert view.total_pages == 3

    def test_echoes_sort_parameters(self):
        view = build_view([_file("a", 1)], "bogus", "up", page=1, page_size=10)
        assert view.sort_by == "bogus"
        assert view.sort_direction == "up"
        assert view.page_size == 10


class TestEntryInvariant:
    def test_file_requires_size(self):
        with pytest.raises(ValueError):
            Entry("a", EntryKind.FILE, None, T0)

    def test_folder_has_no_size(self):
        with pytest.raises(ValueError):
            Entry("a/", EntryKind.FOLDER, 0, T0)

    def test_immutable(self):
        entry = _file("a", 1)
        with pytest.raises(AttributeError):
            entry.name = "b"

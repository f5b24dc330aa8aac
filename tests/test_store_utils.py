import json

import pytest

from unistore.meta import Meta
from unistore.store import Store
from unistore.store_entry import StoreEntry
from unistore.store_utils import (
    SortType,
    installed_updates,
    load_entries,
    refresh_update_available,
    search,
    sort_entries,
)


def write_store(tmp_path, content, version=4):
    data = {"storeInfo": {"title": "Shop", "version": version}, "storeContent": content}
    path = tmp_path / "s.unistore"
    path.write_text(json.dumps(data), encoding="utf-8")
    return Store(path, "s.unistore")


def write_meta(tmp_path, data):
    path = tmp_path / "meta.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return Meta(path)


@pytest.fixture
def entries():
    return [
        StoreEntry(title="banana", author="Zed", last_updated="2021-01-01",
                   categories=["Game"], consoles=["3DS"], marks=1),
        StoreEntry(title="Apple", author="amy", last_updated="2022-01-01",
                   categories=["Utility"], consoles=["DS"], marks=3,
                   update_available=True),
        StoreEntry(title="cherry", author="Bob", last_updated="2020-01-01",
                   categories=["Emulator"], consoles=["3DS"], marks=0),
    ]


def titles(items):
    return [item.title for item in items]


def test_sort_by_title_ascending(entries):
    assert titles(sort_entries(entries, True, SortType.TITLE)) == ["Apple", "banana", "cherry"]


def test_sort_by_title_descending(entries):
    assert titles(sort_entries(entries, False, SortType.TITLE)) == ["cherry", "banana", "Apple"]


def test_sort_by_author_ascending(entries):
    result = sort_entries(entries, True, SortType.AUTHOR)
    assert [e.author for e in result] == ["amy", "Bob", "Zed"]


def test_sort_by_last_updated_descending(entries):
    result = sort_entries(entries, False, SortType.LAST_UPDATED)
    assert [e.last_updated for e in result] == ["2022-01-01", "2021-01-01", "2020-01-01"]


def test_search_title_case_insensitive(entries):
    assert titles(search(entries, "APP", True, False, False, False, 0, False, True)) == ["Apple"]


def test_search_without_fields_keeps_all(entries):
    result = search(entries, "nothing", False, False, False, False, 0, False, True)
    assert titles(result) == titles(entries)


def test_search_category_and_console(entries):
    assert titles(search(entries, "emu", False, False, True, False, 0, False, False)) == ["cherry"]
    assert titles(search(entries, "3ds", False, False, False, True, 0, False, False)) == [
        "banana", "cherry"]


def test_search_marks_and_mode(entries):
    result = search(entries, "", True, False, False, False, 3, False, True)
    assert titles(result) == ["Apple"]


def test_search_marks_or_mode(entries):
    result = search(entries, "", True, False, False, False, 3, False, False)
    assert titles(result) == ["banana", "Apple"]


def test_search_update_filter(entries):
    result = search(entries, "", True, False, False, False, 0, True, False)
    assert titles(result) == ["Apple"]


def test_load_entries_and_refresh(tmp_path):
    store = write_store(tmp_path, [
        {"info": {"title": "One", "last_updated": "2021-02-02"}},
        {"info": {"title": "Two", "last_updated": "2021-03-03"}},
    ])
    meta = write_meta(tmp_path, {})
    loaded = load_entries(store, meta)
    assert titles(loaded) == ["One", "Two"]
    assert not any(e.update_available for e in loaded)

    meta.set_updated("Shop", "Two", "2021-01-01")
    refresh_update_available(loaded, store, meta)
    assert [e.update_available for e in loaded] == [False, True]


def test_load_entries_invalid_store(tmp_path):
    store = write_store(tmp_path, [{"info": {"title": "One"}}], version=1)
    meta = write_meta(tmp_path, {})
    assert load_entries(store, meta) == []


def test_installed_updates(tmp_path):
    store = write_store(tmp_path, [
        {
            "info": {"title": "One", "last_updated": "2021-02-02"},
            "app.cia": {"script": [{"type": "deleteFile"}]},
            "other.3dsx": [{"type": "downloadFile"}],
            "broken": {"size": "1 MB"},
        }
    ])
    meta = write_meta(tmp_path, {"Shop": {"One": {"installed": ["app.cia", "broken"]}}})
    requests = installed_updates(store, meta, load_entries(store, meta))
    assert len(requests) == 1
    request = requests[0]
    assert request.download == "app.cia"
    assert request.script == [{"type": "deleteFile"}]
    assert request.store_title == "Shop"
    assert request.entry_title == "One"
    assert request.last_updated == "2021-02-02"
    assert request.entry_index == 0


def test_installed_updates_without_meta(tmp_path):
    store = write_store(tmp_path, [{"info": {"title": "One"}, "a": []}])
    assert installed_updates(store, None, [StoreEntry(title="One")]) == []
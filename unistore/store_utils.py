"""Operations on the entries of a store: loading, sorting, searching, updates."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any, NamedTuple

from .meta import Meta
from .store import Store
from .store_entry import StoreEntry


class SortType(Enum):
    """The field entries are sorted by."""

    TITLE = "title"
    AUTHOR = "author"
    LAST_UPDATED = "last_updated"


class QueueRequest(NamedTuple):
    """A download that should be queued for installation."""

    entry_index: int
    download: str
    script: list[Any]
    store_title: str
    entry_title: str
    last_updated: str


def _fold(text: str) -> bytes:
    """Lower-case ASCII letters only, as a byte string for comparison."""
    return text.encode("utf-8").lower()


def _lower(text: str) -> str:
    return _fold(text).decode("utf-8")


def load_entries(store: Store | None, meta: Meta) -> list[StoreEntry]:
    """Return every entry of a valid store; an empty list otherwise."""
    if store is None or not store.valid:
        return []
    return [StoreEntry.from_store(store, meta, index) for index in range(len(store))]


_SORT_FIELDS = {
    SortType.TITLE: lambda entry: entry.title,
    SortType.AUTHOR: lambda entry: entry.author,
    SortType.LAST_UPDATED: lambda entry: entry.last_updated,
}


def sort_entries(
    entries: Iterable[StoreEntry], ascending: bool, sort_type: SortType
) -> list[StoreEntry]:
    """Return the entries sorted by a field, ignoring ASCII case."""
    getter = _SORT_FIELDS[SortType(sort_type)]
    return sorted(entries, key=lambda entry: _fold(getter(entry)), reverse=not ascending)


def _text_matches(
    entry: StoreEntry, query: str, title: bool, author: bool, category: bool, console: bool
) -> bool:
    if not (title or author or category or console):
        return True
    return (
        (title and query in _lower(entry.title))
        or (author and query in _lower(entry.author))
        or (category and any(query in _lower(item) for item in entry.categories))
        or (console and any(query in _lower(item) for item in entry.consoles))
    )


def search(
    entries: Iterable[StoreEntry],
    query: str,
    title: bool,
    author: bool,
    category: bool,
    console: bool,
    selected_marks: int,
    update_available: bool,
    match_all: bool,
) -> list[StoreEntry]:
    """Return the entries matching a query and the selected filters.

    With ``match_all`` an entry must carry every selected mark (and have an
    update, if asked); otherwise any selected mark or an update suffices.
    """
    query = _lower(query)
    no_filter = selected_marks == 0 and not update_available

    def filters_match(entry: StoreEntry) -> bool:
        if no_filter:
            return True
        if match_all:
            return (entry.marks & selected_marks) == selected_marks and (
                not update_available or entry.update_available
            )
        return bool(entry.marks & selected_marks) or (
            update_available and entry.update_available
        )

    return [
        entry
        for entry in entries
        if _text_matches(entry, query, title, author, category, console)
        and filters_match(entry)
    ]


def refresh_update_available(
    entries: Iterable[StoreEntry], store: Store, meta: Meta
) -> None:
    """Recompute the update-available flag of every entry."""
    store_title = store.title()
    for entry in entries:
        entry.update_available = meta.update_available(
            store_title, entry.title, entry.last_updated
        )


def installed_updates(
    store: Store | None, meta: Meta | None, entries: Iterable[StoreEntry]
) -> list[QueueRequest]:
    """Return a queue request for every installed download of the entries."""
    if store is None or not store.valid or meta is None:
        return []

    store_title = store.title()
    requests = []
    for entry in entries:
        downloads = store.download_list(entry.entry_index)
        installed = meta.installed(store_title, entry.title)
        for name in downloads:
            for installed_name in installed:
                if name != installed_name:
                    continue
                script = store.entry_script(entry.entry_index, name)
                if script is None:
                    continue
                requests.append(
                    QueueRequest(
                        entry_index=entry.entry_index,
                        download=name,
                        script=script,
                        store_title=store_title,
                        entry_title=entry.title,
                        last_updated=entry.last_updated,
                    )
                )
    return requests
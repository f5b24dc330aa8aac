"""A single UniStore entry with the information shown for it."""

from __future__ import annotations

from dataclasses import dataclass, field

from .meta import Meta
from .store import Store


@dataclass
class StoreEntry:
    """Everything known about one entry of a store, gathered at once."""

    title: str = ""
    author: str = ""
    description: str = ""
    version: str = ""
    last_updated: str = ""
    license: str | None = None
    categories: list[str] = field(default_factory=list)
    consoles: list[str] = field(default_factory=list)
    entry_index: int = 0
    sheet_index: int = 0
    update_available: bool = False
    marks: int = 0
    sizes: list[str] = field(default_factory=list)
    types: list[str] = field(default_factory=list)
    screenshots: list[str] = field(default_factory=list)
    screenshot_names: list[str] = field(default_factory=list)
    release_notes: str = ""

    @classmethod
    def from_store(cls, store: Store, meta: Meta, index: int) -> StoreEntry:
        """Read the entry at ``index`` of ``store``, with its metadata."""
        store_title = store.title()
        title = store.title_entry(index)
        last_updated = store.last_updated_entry(index)
        downloads = store.download_list(index)

        return cls(
            title=title,
            author=store.author_entry(index),
            description=store.description_entry(index),
            version=store.version_entry(index),
            last_updated=last_updated,
            license=store.license_entry(index),
            categories=store.category_entry(index),
            consoles=store.console_entry(index),
            entry_index=index,
            sheet_index=0,
            update_available=meta.update_available(store_title, title, last_updated),
            marks=meta.marks(store_title, title),
            sizes=[store.file_size(index, name) for name in downloads],
            types=[store.file_type(index, name) for name in downloads],
            screenshots=store.screenshot_list(index),
            screenshot_names=store.screenshot_names(index),
            release_notes=store.release_notes(index),
        )
"""Per-store metadata: update dates, marks and installed downloads."""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any

_MISSING = object()


class Meta:
    """A JSON metadata file keyed by store title, then entry title."""

    def __init__(self, path: str | PathLike[str]) -> None:
        self.path = Path(path)
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("{}", encoding="utf-8")

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            data = {}
        self._data: dict[str, Any] = data if isinstance(data, dict) else {}

    def __enter__(self) -> Meta:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.save()

    def _lookup(self, store_name: str, entry: str, key: str) -> Any:
        store = self._data.get(store_name)
        if not isinstance(store, dict):
            return _MISSING
        item = store.get(entry)
        if not isinstance(item, dict):
            return _MISSING
        return item.get(key, _MISSING)

    def updated(self, store_name: str, entry: str) -> str:
        """Return the recorded last-updated value, or "" if there is none."""
        value = self._lookup(store_name, entry, "updated")
        return value if isinstance(value, str) else ""

    def set_updated(self, store_name: str, entry: str, updated: str) -> None:
        """Record the last-updated value of an entry."""
        store = self._data.get(store_name)
        if not isinstance(store, dict):
            store = self._data[store_name] = {}
        item = store.get(entry)
        if not isinstance(item, dict):
            item = store[entry] = {}
        item["updated"] = updated

    def marks(self, store_name: str, entry: str) -> int:
        """Return the mark flags of an entry, 0 if none are recorded."""
        value = self._lookup(store_name, entry, "marks")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return int(value)
        return 0

    def update_available(self, store_name: str, entry: str, updated: str) -> bool:
        """Return whether ``updated`` is later than the recorded value.

        Values are compared case-insensitively; an empty value on either
        side means no update.
        """
        recorded = self.updated(store_name, entry)
        if recorded and updated:
            return updated.encode("utf-8").lower() > recorded.encode("utf-8").lower()
        return False

    def installed(self, store_name: str, entry: str) -> list[str]:
        """Return the names of the downloads installed from an entry."""
        value = self._lookup(store_name, entry, "installed")
        if isinstance(value, list):
            return [name for name in value if isinstance(name, str)]
        return []

    def save(self) -> None:
        """Write the metadata back to its file."""
        self.path.write_text(
            json.dumps(self._data, indent="\t", ensure_ascii=False), encoding="utf-8"
        )
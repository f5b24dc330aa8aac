"""Reading UniStore files: store information and the entries they offer."""

from __future__ import annotations

import json
import logging
from os import PathLike
from pathlib import Path
from typing import Any

UNISTORE_VERSION = 4
MIN_UNISTORE_VERSION = 3

TOO_OLD = "UniStore is too old"
TOO_NEW = "UniStore is too new"
INVALID = "UniStore is invalid"
UNREADABLE = "UniStore could not be read"
REJECTED = "UniStore file name is not accepted"

_REJECTED_SUFFIX = "shop"

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Store:
    """A UniStore loaded from a JSON file.

    ``valid`` tells whether the file could be used; when it could not,
    ``problem`` holds the reason and every query returns its empty value.
    """

    def __init__(self, path: str | PathLike[str], file_name: str | None = None) -> None:
        self.path = Path(path)
        self.file_name = file_name if file_name is not None else self.path.name
        self.valid = False
        self.problem: str | None = None
        self.json: Any = {}

        text = str(path)
        if len(text) > 4 and text.endswith(_REJECTED_SUFFIX):
            self.problem = REJECTED
            return

        self.load_from_file(path)

    def load_from_file(self, path: str | PathLike[str]) -> None:
        """Read and validate a UniStore file, replacing what was loaded."""
        self.valid = False
        self.problem = None
        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            self.json = {}
            self.problem = UNREADABLE
            return

        try:
            self.json = json.loads(text)
        except ValueError:
            self.json = {}

        data = self.json
        if not (isinstance(data, dict) and "storeInfo" in data and "storeContent" in data):
            self.problem = INVALID
            logger.warning("%s: %s", path, INVALID)
            return

        info = data["storeInfo"]
        version = info.get("version") if isinstance(info, dict) else None
        if not _is_number(version):
            return
        if version < MIN_UNISTORE_VERSION:
            self.problem = TOO_OLD
            logger.warning("%s: %s", path, TOO_OLD)
        elif version > UNISTORE_VERSION:
            self.problem = TOO_NEW
            logger.warning("%s: %s", path, TOO_NEW)
        elif version in (MIN_UNISTORE_VERSION, UNISTORE_VERSION):
            self.valid = True

    # ------------------------------------------------------------------
    # Internal access

    @property
    def _store_info(self) -> dict[str, Any]:
        info = self.json.get("storeInfo") if self.valid else None
        return info if isinstance(info, dict) else {}

    @property
    def _content(self) -> list[Any]:
        content = self.json.get("storeContent") if self.valid else None
        return content if isinstance(content, list) else []

    def _in_range(self, index: int) -> bool:
        return self.valid and 0 <= index < len(self._content)

    def _entry(self, index: int) -> dict[str, Any]:
        if not self._in_range(index):
            return {}
        entry = self._content[index]
        return entry if isinstance(entry, dict) else {}

    def _info(self, index: int, key: str) -> Any:
        info = self._entry(index).get("info")
        return info.get(key) if isinstance(info, dict) else None

    def _string(self, index: int, key: str) -> str:
        value = self._info(index, key)
        return value if isinstance(value, str) else ""

    def _strings(self, index: int, key: str) -> list[str]:
        if not self._in_range(index):
            return [""]
        value = self._info(index, key)
        if isinstance(value, list):
            return [item for item in value if isinstance(item, str)]
        if isinstance(value, str):
            return [value]
        return [""]

    def _download(self, index: int, entry: str, key: str) -> str:
        download = self._entry(index).get(entry)
        if isinstance(download, dict):
            value = download.get(key)
            if isinstance(value, str):
                return value
        return ""

    def _screenshot_field(self, index: int, key: str) -> list[str]:
        shots = self._info(index, "screenshots")
        if not isinstance(shots, list):
            return []
        result = []
        for item in shots:
            value = item.get(key) if isinstance(item, dict) else None
            result.append(value if isinstance(value, str) else "")
        return result

    # ------------------------------------------------------------------
    # Store information

    def __len__(self) -> int:
        return len(self._content)

    def title(self) -> str:
        """Return the store's title."""
        value = self._store_info.get("title")
        return value if isinstance(value, str) else ""

    def sheet_names(self) -> list[str]:
        """Return the sprite sheet file names the store refers to."""
        sheet = self._store_info.get("sheet")
        if isinstance(sheet, list):
            return [name for name in sheet if isinstance(name, str)]
        if isinstance(sheet, str):
            return [sheet]
        return []

    # ------------------------------------------------------------------
    # Entry information

    def title_entry(self, index: int) -> str:
        """Return the title of an entry."""
        return self._string(index, "title")

    def author_entry(self, index: int) -> str:
        """Return the author of an entry."""
        return self._string(index, "author")

    def description_entry(self, index: int) -> str:
        """Return the description of an entry."""
        return self._string(index, "description")

    def category_entry(self, index: int) -> list[str]:
        """Return the categories of an entry; [""] when it has none."""
        return self._strings(index, "category")

    def version_entry(self, index: int) -> str:
        """Return the version of an entry."""
        return self._string(index, "version")

    def console_entry(self, index: int) -> list[str]:
        """Return the consoles of an entry; [""] when it has none."""
        return self._strings(index, "console")

    def last_updated_entry(self, index: int) -> str:
        """Return the last-updated value of an entry."""
        return self._string(index, "last_updated")

    def license_entry(self, index: int) -> str | None:
        """Return the licence of an entry, or None if it names none."""
        value = self._string(index, "license")
        return value or None

    def download_list(self, index: int) -> list[str]:
        """Return the download names of an entry, sorted ignoring ASCII case."""
        if not self.valid:
            return [""]
        names = [key for key in self._entry(index) if key != "info"]
        return sorted(names, key=lambda name: name.encode("utf-8").upper())

    def file_size(self, index: int, entry: str) -> str:
        """Return the size text of one download."""
        return self._download(index, entry, "size")

    def file_type(self, index: int, entry: str) -> str:
        """Return the type text of one download."""
        return self._download(index, entry, "type")

    def screenshot_list(self, index: int) -> list[str]:
        """Return the screenshot URLs of an entry, "" where one has none."""
        return self._screenshot_field(index, "url")

    def screenshot_names(self, index: int) -> list[str]:
        """Return the screenshot descriptions of an entry."""
        return self._screenshot_field(index, "description")

    def release_notes(self, index: int) -> str:
        """Return the release notes of an entry."""
        return self._string(index, "releasenotes")

    def entry_script(self, index: int, entry: str) -> list[Any] | None:
        """Return the install script of a download, or None if it has none.

        A download is either the script itself (a list) or an object whose
        "script" member is the list.
        """
        download = self._entry(index).get(entry)
        if isinstance(download, list):
            return download
        if isinstance(download, dict):
            script = download.get("script")
            if isinstance(script, list):
                return script
        return None
# unistore

A pure-Python toolkit with two parts:

* reading UniStore catalogue files (JSON), keeping per-store metadata, and
  sorting and searching the entries of a store;
* building blocks for QR-code recognition: the shared data types, adaptive
  thresholding and flood filling of greyscale images, and perspective
  transforms between a code's grid and image coordinates.

It needs nothing beyond the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Working with a UniStore

```python
from unistore.meta import Meta
from unistore.store import Store
from unistore.store_utils import SortType, load_entries, search, sort_entries

store = Store("stores/universal-db.unistore", "universal-db.unistore")
meta = Meta("stores/metadata.json")

entries = load_entries(store, meta)
entries = sort_entries(entries, False, SortType.LAST_UPDATED)
found = search(entries, "updater", True, False, False, False, 0, False, True)

for entry in found:
    print(entry.title, entry.author, entry.last_updated)
```

### `unistore.store`

`Store(path, file_name=None)` reads a UniStore file. It is `valid` only when
the JSON holds both `storeInfo` and `storeContent` and `storeInfo.version`
is 3 or 4; otherwise `problem` names the reason (`TOO_OLD`, `TOO_NEW`,
`INVALID`, `UNREADABLE`, or `REJECTED` for a path ending in `shop`). An
invalid store answers every lookup with an empty result.

`len(store)` is the number of entries. Per store: `title()`,
`sheet_names()`. Per entry index: `title_entry`, `author_entry`,
`description_entry`, `version_entry`, `last_updated_entry`,
`release_notes`, `category_entry` and `console_entry` (lists, `[""]` when
absent), `license_entry` (`None` when none is named), `download_list`
(download names sorted ignoring ASCII case), `file_size(index, name)`,
`file_type(index, name)`, `screenshot_list`, `screenshot_names` and
`entry_script(index, name)`, which returns a download's install script list
or `None`.

### `unistore.meta`

`Meta(path)` opens a JSON metadata file keyed by store title, then entry
title, creating it as `{}` if missing. It offers `updated`, `set_updated`,
`marks`, `installed` and `update_available(store, entry, updated)`, which is
true when `updated` compares later, ignoring ASCII case, than the recorded
value. `save()` writes the file back; used as a context manager, `Meta`
saves on exit.

### `unistore.store_entry` and `unistore.store_utils`

`StoreEntry.from_store(store, meta, index)` gathers everything about one
entry into a dataclass. `store_utils` provides:

* `load_entries(store, meta)` — all entries of a valid store;
* `sort_entries(entries, ascending, sort_type)` — by `SortType.TITLE`,
  `AUTHOR` or `LAST_UPDATED`, ignoring ASCII case;
* `search(...)` — filter by a query in title, author, categories or
  consoles, and by mark flags and update availability; with `match_all`
  every selected mark is required, otherwise any one suffices;
* `refresh_update_available(entries, store, meta)`;
* `installed_updates(store, meta, entries)` — a `QueueRequest` for every
  installed download that has an install script.

## QR-code building blocks

* `unistore.qr_types` — `Point`, `Code` (a cell grid with `cell(x, y)` and
  `set_cell(x, y, black)`), `Data`, the `EccLevel`, `DataType` and `Eci`
  enums, `DecodeErrorCode` with `strerror(code)`, the `QRDecodeError`
  exception and `library_version()`.
* `unistore.qr_image` — `threshold(pixels, width, height)` binarises an
  8-bit greyscale image in place against a running local average;
  `flood_fill(pixels, width, height, x, y, source, target, span_func=None)`
  recolours a 4-connected area, reporting each filled span.
* `unistore.qr_geometry` — `line_intersect(p0, p1, q0, q1)` and
  `Perspective`, built with `Perspective.from_rect(rect, width, height)`,
  with `map(u, v)` and `unmap(point)`.

## What it does not do

The package does not locate QR codes in an image, and it does not read a
code's format, correct its errors or decode its payload: there is no
recognizer or decoder here, only the pieces listed above. It also does not
download stores, sprite sheets or screenshots, load images, or run install
scripts; `installed_updates` only reports what would be queued.
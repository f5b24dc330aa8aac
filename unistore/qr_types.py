"""Basic data types shared by the QR-code recognizer and decoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

MAX_BITMAP = 3917
MAX_PAYLOAD = 8896

_LIBRARY_VERSION = "1.0"


class EccLevel(IntEnum):
    """Error-correction level, in the order the format bits encode it."""

    M = 0
    L = 1
    H = 2
    Q = 3


class DataType(IntEnum):
    """Segment data types found in a QR-code payload."""

    NUMERIC = 1
    ALPHA = 2
    BYTE = 4
    KANJI = 8


class Eci(IntEnum):
    """Common ECI character-encoding assignment numbers."""

    ISO_8859_1 = 1
    IBM437 = 2
    ISO_8859_2 = 4
    ISO_8859_3 = 5
    ISO_8859_4 = 6
    ISO_8859_5 = 7
    ISO_8859_6 = 8
    ISO_8859_7 = 9
    ISO_8859_8 = 10
    ISO_8859_9 = 11
    WINDOWS_874 = 13
    ISO_8859_13 = 15
    ISO_8859_15 = 17
    SHIFT_JIS = 20
    UTF_8 = 26


@dataclass
class Point:
    """A location in the input image."""

    x: int = 0
    y: int = 0


class DecodeErrorCode(IntEnum):
    """Reasons a QR-code fails to decode."""

    SUCCESS = 0
    INVALID_GRID_SIZE = 1
    INVALID_VERSION = 2
    FORMAT_ECC = 3
    DATA_ECC = 4
    UNKNOWN_DATA_TYPE = 5
    DATA_OVERFLOW = 6
    DATA_UNDERFLOW = 7


_ERROR_MESSAGES = {
    DecodeErrorCode.SUCCESS: "Success",
    DecodeErrorCode.INVALID_GRID_SIZE: "Invalid grid size",
    DecodeErrorCode.INVALID_VERSION: "Invalid version",
    DecodeErrorCode.FORMAT_ECC: "Format data ECC failure",
    DecodeErrorCode.DATA_ECC: "ECC failure",
    DecodeErrorCode.UNKNOWN_DATA_TYPE: "Unknown data type",
    DecodeErrorCode.DATA_OVERFLOW: "Data overflow",
    DecodeErrorCode.DATA_UNDERFLOW: "Data underflow",
}


def strerror(err: int) -> str:
    """Return a human-readable message for a decode error code."""
    try:
        return _ERROR_MESSAGES[DecodeErrorCode(err)]
    except ValueError:
        return "Unknown error"


def library_version() -> str:
    """Return the recognizer library version string."""
    return _LIBRARY_VERSION


class QRDecodeError(Exception):
    """Raised when a QR-code cannot be decoded."""

    def __init__(self, code: DecodeErrorCode) -> None:
        self.code = DecodeErrorCode(code)
        super().__init__(strerror(self.code))


def _default_corners() -> list[Point]:
    return [Point() for _ in range(4)]


@dataclass
class Code:
    """A grid of cells extracted from an image.

    Cell (x, y) is stored in bit ``i & 7`` of byte ``i >> 3`` of the
    bitmap, where ``i = y * size + x``; a set bit means a black cell.
    """

    size: int = 0
    corners: list[Point] = field(default_factory=_default_corners)
    cell_bitmap: bytearray = field(default_factory=lambda: bytearray(MAX_BITMAP))

    def __post_init__(self) -> None:
        if self.size < 0 or self.size * self.size > MAX_BITMAP * 8:
            raise ValueError(f"grid size {self.size} does not fit the cell bitmap")
        if len(self.cell_bitmap) < MAX_BITMAP:
            self.cell_bitmap = bytearray(self.cell_bitmap) + bytearray(
                MAX_BITMAP - len(self.cell_bitmap)
            )

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) outside a {self.size}x{self.size} grid")
        return y * self.size + x

    def cell(self, x: int, y: int) -> int:
        """Return 1 if the cell at (x, y) is black, otherwise 0."""
        p = self._index(x, y)
        return (self.cell_bitmap[p >> 3] >> (p & 7)) & 1

    def set_cell(self, x: int, y: int, black: bool) -> None:
        """Mark the cell at (x, y) black or white."""
        p = self._index(x, y)
        if black:
            self.cell_bitmap[p >> 3] |= 1 << (p & 7)
        else:
            self.cell_bitmap[p >> 3] &= ~(1 << (p & 7)) & 0xFF


@dataclass
class Data:
    """Decoded contents and parameters of a QR-code."""

    version: int = 0
    ecc_level: int = 0
    mask: int = 0
    data_type: int = 0
    payload: bytes = b""
    eci: int = 0
import pytest

from unistore.qr_types import (
    MAX_BITMAP,
    Code,
    Data,
    DecodeErrorCode,
    Point,
    QRDecodeError,
    library_version,
    strerror,
)


def test_library_version():
    assert library_version() == "1.0"


@pytest.mark.parametrize(
    "code, message",
    [
        (DecodeErrorCode.SUCCESS, "Success"),
        (DecodeErrorCode.INVALID_GRID_SIZE, "Invalid grid size"),
        (DecodeErrorCode.INVALID_VERSION, "Invalid version"),
        (DecodeErrorCode.FORMAT_ECC, "Format data ECC failure"),
        (DecodeErrorCode.DATA_ECC, "ECC failure"),
        (DecodeErrorCode.UNKNOWN_DATA_TYPE, "Unknown data type"),
        (DecodeErrorCode.DATA_OVERFLOW, "Data overflow"),
        (DecodeErrorCode.DATA_UNDERFLOW, "Data underflow"),
    ],
)
def test_strerror_messages(code, message):
    assert strerror(code) == message
    assert strerror(int(code)) == message


@pytest.mark.parametrize("value", [8, 100, -1])
def test_strerror_unknown(value):
    assert strerror(value) == "Unknown error"


def test_decode_error_carries_code_and_message():
    err = QRDecodeError(DecodeErrorCode.DATA_ECC)
    assert err.code is DecodeErrorCode.DATA_ECC
    assert str(err) == "ECC failure"
    with pytest.raises(QRDecodeError) as info:
        raise QRDecodeError(DecodeErrorCode.DATA_UNDERFLOW)
    assert info.value.code == DecodeErrorCode.DATA_UNDERFLOW


def test_code_defaults():
    code = Code(size=21)
    assert len(code.cell_bitmap) == MAX_BITMAP
    assert len(code.corners) == 4
    assert all(c == Point(0, 0) for c in code.corners)
    assert code.cell(0, 0) == 0


def test_code_bit_layout():
    code = Code(size=21)
    code.set_cell(1, 0, True)
    assert code.cell_bitmap[0] == 2
    code.set_cell(0, 1, True)
    index = 21
    assert code.cell_bitmap[index >> 3] & (1 << (index & 7))


def test_code_set_and_clear_round_trip():
    code = Code(size=25)
    cells = [(0, 0), (24, 24), (3, 17), (12, 5)]
    for x, y in cells:
        code.set_cell(x, y, True)
    for x, y in cells:
        assert code.cell(x, y) == 1
    black = sum(code.cell(x, y) for y in range(25) for x in range(25))
    assert black == len(cells)
    code.set_cell(3, 17, False)
    assert code.cell(3, 17) == 0
    assert code.cell(12, 5) == 1


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (21, 0), (0, 21)])
def test_code_out_of_range(x, y):
    code = Code(size=21)
    with pytest.raises(IndexError):
        code.cell(x, y)
    with pytest.raises(IndexError):
        code.set_cell(x, y, True)


def test_code_rejects_oversized_grid():
    with pytest.raises(ValueError):
        Code(size=178)
    assert Code(size=177).size == 177


def test_data_defaults():
    data = Data()
    assert data.payload == b""
    assert (data.version, data.ecc_level, data.mask, data.data_type, data.eci) == (0, 0, 0, 0, 0)
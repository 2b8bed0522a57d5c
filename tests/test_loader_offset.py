import io
import struct

import pytest

from innoread.loader_offset import SetupLoaderOffset


def encode(offset: int, complement: int, magic: bytes = b"Inno") -> io.BytesIO:
    return io.BytesIO(magic + struct.pack("<II", offset, complement))


def test_round_trip():
    offset = 0x0001_2345
    parsed = SetupLoaderOffset.read_from(encode(offset, ~offset & 0xFFFF_FFFF))
    assert parsed.table_offset == offset
    assert parsed.is_valid()


def test_zero_offset():
    parsed = SetupLoaderOffset.read_from(encode(0, 0xFFFF_FFFF))
    assert parsed.table_offset == 0


def test_reads_exactly_twelve_bytes():
    src = io.BytesIO(encode(5, ~5 & 0xFFFF_FFFF).getvalue() + b"tail")
    SetupLoaderOffset.read_from(src)
    assert src.read() == b"tail"


def test_mismatched_complement_raises():
    with pytest.raises(ValueError):
        SetupLoaderOffset.read_from(encode(100, 100))


def test_bad_magic_raises():
    with pytest.raises(ValueError):
        SetupLoaderOffset.read_from(encode(1, ~1 & 0xFFFF_FFFF, magic=b"Nope"))


def test_short_input_raises():
    with pytest.raises(EOFError):
        SetupLoaderOffset.read_from(io.BytesIO(b"Inno\x00\x00"))


def test_is_valid_invariant():
    assert SetupLoaderOffset(7, ~7 & 0xFFFF_FFFF).is_valid()
    assert not SetupLoaderOffset(7, 7).is_valid()
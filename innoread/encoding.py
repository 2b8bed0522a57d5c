"""Reading of length-prefixed strings stored in setup headers."""

from __future__ import annotations

import codecs
import struct
from typing import BinaryIO

WINDOWS_1252 = "cp1252"
UTF_16LE = "utf-16-le"

_CP1252_FALLBACK = "innoread-cp1252-fallback"


def _cp1252_fallback(exc: UnicodeError) -> tuple[str, int]:
    # Bytes undefined in Windows-1252 decode to the matching C1 control characters.
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    undecodable = exc.object[exc.start : exc.end]
    return "".join(map(chr, undecodable)), exc.end


codecs.register_error(_CP1252_FALLBACK, _cp1252_fallback)

_BOMS = (
    (codecs.BOM_UTF8, "utf-8"),
    (codecs.BOM_UTF16_LE, "utf-16-le"),
    (codecs.BOM_UTF16_BE, "utf-16-be"),
)


def _read_exact(src: BinaryIO, size: int) -> bytes:
    data = src.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes but only {len(data)} were available")
    return data


def decode(data: bytes, codepage: str) -> str:
    """Decode bytes with a codepage, honouring a leading byte order mark.

    Malformed sequences are replaced rather than raising.
    """
    for bom, bom_encoding in _BOMS:
        if data.startswith(bom):
            return data[len(bom) :].decode(bom_encoding, errors="replace")
    if codecs.lookup(codepage).name == WINDOWS_1252:
        return data.decode(WINDOWS_1252, errors=_CP1252_FALLBACK)
    return data.decode(codepage, errors="replace")


def read_raw(src: BinaryIO) -> bytes | None:
    """Read a u32 length-prefixed byte string; None when the length is zero."""
    (length,) = struct.unpack("<I", _read_exact(src, 4))
    if length == 0:
        return None
    return _read_exact(src, length)


def read_string(src: BinaryIO, codepage: str) -> str | None:
    """Read a u32 length-prefixed string and decode it with the codepage."""
    raw = read_raw(src)
    return None if raw is None else decode(raw, codepage)


def read_sized_string(src: BinaryIO, length: int, codepage: str) -> str | None:
    """Read a string of a known byte length; None when the length is zero."""
    if length == 0:
        return None
    return decode(_read_exact(src, length), codepage)
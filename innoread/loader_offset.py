"""The legacy pointer to the setup loader offset table."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO

_MAGIC = b"Inno"
_LAYOUT = struct.Struct("<4sII")


@dataclass(frozen=True)
class SetupLoaderOffset:
    """Offset of the setup loader table, stored with its bitwise complement."""

    table_offset: int
    not_table_offset: int

    @classmethod
    def read_from(cls, src: BinaryIO) -> SetupLoaderOffset:
        """Read and validate the offset header.

        Raises EOFError on short input and ValueError on a bad magic or a
        complement that does not match.
        """
        data = src.read(_LAYOUT.size)
        if len(data) != _LAYOUT.size:
            raise EOFError("unexpected end of data while reading setup loader offset")
        magic, table_offset, not_table_offset = _LAYOUT.unpack(data)
        if magic != _MAGIC:
            raise ValueError(f"invalid setup loader offset magic: {magic!r}")
        offset = cls(table_offset, not_table_offset)
        if not offset.is_valid():
            raise ValueError("Setup loader table offset does not equal the NOT table offset")
        return offset

    def is_valid(self) -> bool:
        """Return True if the stored complement matches the table offset."""
        return self.table_offset == (~self.not_table_offset & 0xFFFF_FFFF)
"""Compression method and size of a stored data chunk."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CompressionMethod(enum.Enum):
    """How a chunk of setup data is compressed."""

    STORED = "Stored"
    ZLIB = "Zlib"
    LZMA1 = "LZMA1"


@dataclass
class Compression:
    """A compression method together with the size of the data it applies to."""

    method: CompressionMethod
    size: int

    def is_stored(self) -> bool:
        """Return True if the data is stored without compression."""
        return self.method is CompressionMethod.STORED

    def is_zlib(self) -> bool:
        """Return True if the data is Zlib compressed."""
        return self.method is CompressionMethod.ZLIB

    def is_lzma1(self) -> bool:
        """Return True if the data is LZMA1 compressed."""
        return self.method is CompressionMethod.LZMA1

    def __str__(self) -> str:
        return self.method.value
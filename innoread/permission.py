"""Permission entries of a setup."""

from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO

from innoread.encoding import read_string


@dataclass(frozen=True)
class Permission:
    """A permission string, referenced by index from other entries."""

    value: str = ""

    @classmethod
    def read_from(cls, src: BinaryIO, codepage: str) -> Permission:
        """Read a permission entry; an empty entry gives an empty string."""
        return cls(read_string(src, codepage) or "")

    def __str__(self) -> str:
        return self.value
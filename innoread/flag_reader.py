"""Reading of packed flag sets whose members depend on the setup version."""

from __future__ import annotations

import enum
from typing import BinaryIO, Generic, Iterable, Iterator, TypeVar, Union

F = TypeVar("F", bound=enum.Flag)


def _expand(flags: Union[enum.Flag, Iterable[enum.Flag]]) -> Iterator[enum.Flag]:
    """Yield a single flag's set bits in ascending order, or an iterable's items."""
    if isinstance(flags, enum.Flag):
        flag_type = type(flags)
        value = flags.value
        while value:
            lowest = value & -value
            yield flag_type(lowest)
            value ^= lowest
    else:
        yield from flags


class FlagReader(Generic[F]):
    """Reads flags packed as bits, one byte for every eight flags.

    Bitfields of three bytes are padded to four.
    """

    def __init__(self, reader: BinaryIO, flag_type: type[F]) -> None:
        self._reader = reader
        self._flags: F = flag_type(0)
        self._bit_pos = 0
        self._current_byte = 0
        self._bytes_read = 0

    def add(self, flags: Union[F, Iterable[F]]) -> None:
        """Consume one bit for each flag, setting the flag when the bit is set."""
        for flag in _expand(flags):
            if self._next_bit():
                self._flags |= flag

    def finalize(self) -> F:
        """Skip any padding and return the flags read."""
        if self._bytes_read == 3:
            self._read_byte()
        return self._flags

    def _read_byte(self) -> int:
        data = self._reader.read(1)
        if len(data) != 1:
            raise EOFError("unexpected end of data while reading flags")
        return data[0]

    def _next_bit(self) -> bool:
        if self._bit_pos % 8 == 0:
            self._current_byte = self._read_byte()
            self._bit_pos = 0
            self._bytes_read += 1
        bit = (self._current_byte >> self._bit_pos) & 1 != 0
        self._bit_pos += 1
        return bit
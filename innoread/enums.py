"""Single-valued settings stored in the setup header and entries."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import BinaryIO, TypeVar

from innoread.header_flags import HeaderFlags

_E = TypeVar("_E", bound=enum.IntEnum)


def _read_exact(src: BinaryIO, size: int) -> bytes:
    data = src.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes but only {len(data)} were available")
    return data


def _read_member(cls: type[_E], src: BinaryIO) -> _E:
    """Read one byte; raise ValueError if it names no member of cls."""
    value = _read_exact(src, 1)[0]
    try:
        return cls(value)
    except ValueError:
        raise ValueError(f"invalid {cls.__name__} value: {value}") from None


class AutoBool(enum.IntEnum):
    """A yes/no setting that may also be left to Setup to decide."""

    AUTO = 0
    NO = 1
    YES = 2

    @classmethod
    def read_from(cls, src: BinaryIO) -> AutoBool:
        return _read_member(cls, src)

    @classmethod
    def from_header_flags(cls, flags: HeaderFlags, flag: HeaderFlags) -> AutoBool:
        """YES if the flag is set in flags, otherwise NO."""
        return cls.YES if flags & flag == flag else cls.NO

    @classmethod
    def from_bool(cls, value: bool) -> AutoBool:
        return cls.YES if value else cls.NO


class SetupCompression(enum.IntEnum):
    """Compression method used for the setup data."""

    STORED = 0
    ZLIB = 1
    BZIP2 = 2
    LZMA1 = 3
    LZMA2 = 4
    UNKNOWN = 255

    @classmethod
    def read_from(cls, src: BinaryIO) -> SetupCompression:
        return _read_member(cls, src)

    @classmethod
    def from_header_flags(cls, flags: HeaderFlags) -> SetupCompression:
        """Derive the method from the flags of older setups."""
        if flags & HeaderFlags.BZIP_USED:
            return cls.BZIP2
        return cls.ZLIB


class ImageAlphaFormat(enum.IntEnum):
    """How the alpha channel of wizard images is interpreted."""

    IGNORED = 0
    DEFINED = 1
    PREMULTIPLIED = 2

    @classmethod
    def read_from(cls, src: BinaryIO) -> ImageAlphaFormat:
        return _read_member(cls, src)


class InnoStyle(enum.IntEnum):
    """Wizard or uninstaller style."""

    CLASSIC = 0
    MODERN = 1

    @classmethod
    def read_from(cls, src: BinaryIO) -> InnoStyle:
        return _read_member(cls, src)


class InstallVerbosity(enum.IntEnum):
    NORMAL = 0
    SILENT = 1
    VERY_SILENT = 2

    @classmethod
    def read_from(cls, src: BinaryIO) -> InstallVerbosity:
        return _read_member(cls, src)


class LanguageDetection(enum.IntEnum):
    """How Setup picks the default language."""

    UI_LANGUAGE = 0
    LOCALE_LANGUAGE = 1
    NONE = 2

    @classmethod
    def read_from(cls, src: BinaryIO) -> LanguageDetection:
        return _read_member(cls, src)

    @classmethod
    def from_header_flags(cls, flags: HeaderFlags) -> LanguageDetection:
        if flags & HeaderFlags.DETECT_LANGUAGE_USING_LOCALE:
            return cls.LOCALE_LANGUAGE
        return cls.UI_LANGUAGE


class LogMode(enum.IntEnum):
    """How the uninstall log is written; NEW is the default."""

    APPEND = 0
    NEW = 1
    OVERWRITE = 2

    @classmethod
    def read_from(cls, src: BinaryIO) -> LogMode:
        return _read_member(cls, src)


class PrivilegeLevel(enum.IntEnum):
    NONE = 0
    POWER_USER = 1
    ADMIN = 2
    LOWEST = 3

    @classmethod
    def read_from(cls, src: BinaryIO) -> PrivilegeLevel:
        return _read_member(cls, src)

    @classmethod
    def from_header_flags(cls, flags: HeaderFlags) -> PrivilegeLevel:
        if flags & HeaderFlags.ADMIN_PRIVILEGES_REQUIRED:
            return cls.ADMIN
        return cls.NONE


@dataclass(frozen=True)
class Color:
    """A colour stored as a little-endian 32-bit value."""

    value: int = 0

    @classmethod
    def read_from(cls, src: BinaryIO) -> Color:
        (value,) = struct.unpack("<I", _read_exact(src, 4))
        return cls(value)

    def __str__(self) -> str:
        return f"#{self.value:06X}"


class RegRoot(enum.IntEnum):
    """Root key of a registry entry."""

    SHELL_CONTEXT = 0
    HKEY_CLASSES_ROOT = 0x8000_0000
    HKEY_CURRENT_USER = 0x8000_0001
    HKEY_LOCAL_MACHINE = 0x8000_0002
    HKEY_USERS = 0x8000_0003
    HKEY_PERFORMANCE_DATA = 0x8000_0004
    HKEY_CURRENT_CONFIG = 0x8000_0005
    HKEY_DYNAMIC_DATA = 0x8000_0006
    HKEY_PERFORMANCE_TEXT = 0x8000_0050
    HKEY_PERFORMANCE_NLSTEXT = 0x8000_0060

    @classmethod
    def from_raw(cls, value: int) -> RegRoot:
        """Map a stored root, whose high bit is implied; unknown roots give SHELL_CONTEXT."""
        try:
            return cls((value | 0x8000_0000) & 0xFFFF_FFFF)
        except ValueError:
            return cls.SHELL_CONTEXT

    def __str__(self) -> str:
        if self is RegRoot.HKEY_PERFORMANCE_TEXT:
            return "HKEY_PERFORMANCE"
        return self.name
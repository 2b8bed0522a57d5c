"""Flags and copy modes of file entries."""

from __future__ import annotations

import enum
from typing import BinaryIO


class FileFlags(enum.IntFlag):
    """Options of a [Files] entry; the top bit holds an obsolete flag."""

    CONFIRM_OVERWRITE = 1
    NEVER_UNINSTALL = 1 << 1
    RESTART_REPLACE = 1 << 2
    DELETE_AFTER_INSTALL = 1 << 3
    REGISTER_SERVER = 1 << 4
    REGISTER_TYPE_LIB = 1 << 5
    SHARED_FILE = 1 << 6
    COMPARE_TIME_STAMP = 1 << 7
    FONT_IS_NOT_TRUE_TYPE = 1 << 8
    SKIP_IF_SOURCE_DOESNT_EXIST = 1 << 9
    OVERWRITE_READ_ONLY = 1 << 10
    OVERWRITE_SAME_VERSION = 1 << 11
    CUSTOM_DEST_NAME = 1 << 12
    ONLY_IF_DEST_FILE_EXISTS = 1 << 13
    NO_REG_ERROR = 1 << 14
    UNINS_RESTART_DELETE = 1 << 15
    ONLY_IF_DOESNT_EXIST = 1 << 16
    IGNORE_VERSION = 1 << 17
    PROMPT_IF_OLDER = 1 << 18
    DONT_COPY = 1 << 19
    UNINS_REMOVE_READ_ONLY = 1 << 20
    RECURSE_SUB_DIRS_EXTERNAL = 1 << 21
    REPLACE_SAME_VERSION_IF_CONTENTS_DIFFER = 1 << 22
    DONT_VERIFY_CHECKSUM = 1 << 23
    UNINS_NO_SHARED_FILE_PROMPT = 1 << 24
    CREATE_ALL_SUB_DIRS = 1 << 25
    BITS_32 = 1 << 26
    BITS_64 = 1 << 27
    EXTERNAL_SIZE_PRESET = 1 << 28
    SET_NTFS_COMPRESSION = 1 << 29
    UNSET_NTFS_COMPRESSION = 1 << 30
    GAC_INSTALL = 1 << 31
    DOWNLOAD = 1 << 32
    EXTRACT_ARCHIVE = 1 << 33

    # Obsolete flags
    IS_README_FILE = 1 << 63


class FileCopyMode(enum.IntEnum):
    """Copy mode stored by setups older than 3.0.5."""

    NORMAL = 0
    IF_DOESNT_EXIST = 1
    ALWAYS_OVERWRITE = 2
    ALWAYS_SKIP_IF_SAME_OR_OLDER = 3

    @classmethod
    def read_from(cls, src: BinaryIO) -> FileCopyMode:
        """Read one byte; raise EOFError on short input, ValueError on an unknown mode."""
        data = src.read(1)
        if len(data) != 1:
            raise EOFError("unexpected end of data while reading file copy mode")
        value = data[0]
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"invalid {cls.__name__} value: {value}") from None
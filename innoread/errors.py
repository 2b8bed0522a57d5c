"""Errors raised while reading Inno Setup installers."""

from __future__ import annotations

MAX_SUPPORTED_VERSION = (6, 4, 255, 255)
"""Newest Inno Setup version whose format this package understands."""


def _format_version(version: tuple[int, ...]) -> str:
    return ".".join(str(part) for part in version)


class InnoError(Exception):
    """Base class of all errors reading an installer."""


class NotInnoFileError(InnoError):
    """The file is not an Inno Setup installer."""

    def __init__(self) -> None:
        super().__init__("File is not an Inno installer")


class InvalidSetupHeaderError(InnoError):
    """The setup header version is invalid."""

    def __init__(self) -> None:
        super().__init__("Invalid Inno header version")


class UnsupportedVersionError(InnoError):
    """The installer was built by a newer Inno Setup than is supported."""

    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(
            f"Inno Setup version {version} is newer than the maximum supported version "
            f"{_format_version(MAX_SUPPORTED_VERSION)}"
        )


class UnknownVersionError(InnoError):
    """The setup version string is not recognised."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Unknown Inno setup version: {version}")


class UnknownLoaderSignatureError(InnoError):
    """The setup loader signature is not one of the known signatures."""

    def __init__(self, signature: bytes) -> None:
        self.signature = bytes(signature)
        listing = ", ".join(str(byte) for byte in self.signature)
        super().__init__(f"Unknown Inno Setup loader signature: [{listing}]")


class CrcChecksumMismatchError(InnoError):
    """A CRC32 checksum did not match the value stored in the file."""

    def __init__(self, *, actual: int, expected: int) -> None:
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Inno CRC32 checksum mismatch. Expected {expected} but calculated {actual}"
        )
import io

import pytest

from innoread.enums import (
    AutoBool,
    Color,
    ImageAlphaFormat,
    InnoStyle,
    InstallVerbosity,
    LanguageDetection,
    LogMode,
    PrivilegeLevel,
    RegRoot,
    SetupCompression,
)
from innoread.header_flags import HeaderFlags


def _src(value):
    return io.BytesIO(bytes([value]))


def test_read_round_trip():
    assert [AutoBool.read_from(_src(m)) for m in AutoBool] == list(AutoBool)
    assert [SetupCompression.read_from(_src(m)) for m in SetupCompression] == list(SetupCompression)
    assert [ImageAlphaFormat.read_from(_src(m)) for m in ImageAlphaFormat] == list(ImageAlphaFormat)
    assert [InnoStyle.read_from(_src(m)) for m in InnoStyle] == list(InnoStyle)
    assert [InstallVerbosity.read_from(_src(m)) for m in InstallVerbosity] == list(InstallVerbosity)
    assert [LanguageDetection.read_from(_src(m)) for m in LanguageDetection] == list(
        LanguageDetection
    )
    assert [LogMode.read_from(_src(m)) for m in LogMode] == list(LogMode)
    assert [PrivilegeLevel.read_from(_src(m)) for m in PrivilegeLevel] == list(PrivilegeLevel)


def test_read_wire_values():
    assert AutoBool.read_from(_src(0)) is AutoBool.AUTO
    assert SetupCompression.read_from(_src(3)) is SetupCompression.LZMA1
    assert ImageAlphaFormat.read_from(_src(2)) is ImageAlphaFormat.PREMULTIPLIED
    assert InstallVerbosity.read_from(_src(2)) is InstallVerbosity.VERY_SILENT
    assert LanguageDetection.read_from(_src(2)) is LanguageDetection.NONE
    assert LogMode.read_from(_src(1)) is LogMode.NEW
    assert PrivilegeLevel.read_from(_src(3)) is PrivilegeLevel.LOWEST


def test_read_empty_raises_eof():
    with pytest.raises(EOFError):
        AutoBool.read_from(io.BytesIO(b""))
    with pytest.raises(EOFError):
        SetupCompression.read_from(io.BytesIO(b""))
    with pytest.raises(EOFError):
        ImageAlphaFormat.read_from(io.BytesIO(b""))
    with pytest.raises(EOFError):
        InnoStyle.read_from(io.BytesIO(b""))
    with pytest.raises(EOFError):
        InstallVerbosity.read_from(io.BytesIO(b""))
    with pytest.raises(EOFError):
        LanguageDetection.read_from(io.BytesIO(b""))
    with pytest.raises(EOFError):
        LogMode.read_from(io.BytesIO(b""))
    with pytest.raises(EOFError):
        PrivilegeLevel.read_from(io.BytesIO(b""))


def test_read_invalid_raises_value_error():
    with pytest.raises(ValueError):
        AutoBool.read_from(_src(200))
    with pytest.raises(ValueError):
        SetupCompression.read_from(_src(200))
    with pytest.raises(ValueError):
        ImageAlphaFormat.read_from(_src(200))
    with pytest.raises(ValueError):
        InnoStyle.read_from(_src(200))
    with pytest.raises(ValueError):
        InstallVerbosity.read_from(_src(200))
    with pytest.raises(ValueError):
        LanguageDetection.read_from(_src(200))
    with pytest.raises(ValueError):
        LogMode.read_from(_src(200))
    with pytest.raises(ValueError):
        PrivilegeLevel.read_from(_src(200))


def test_read_consumes_one_byte():
    src = io.BytesIO(bytes([AutoBool.YES, InnoStyle.MODERN]))
    assert AutoBool.read_from(src) is AutoBool.YES
    assert InnoStyle.read_from(src) is InnoStyle.MODERN


def test_setup_compression_unknown_is_readable():
    assert SetupCompression.read_from(io.BytesIO(b"\xff")) is SetupCompression.UNKNOWN


def test_auto_bool_from_header_flags():
    flags = HeaderFlags.SHOW_LANGUAGE_DIALOG | HeaderFlags.PASSWORD
    assert AutoBool.from_header_flags(flags, HeaderFlags.SHOW_LANGUAGE_DIALOG) is AutoBool.YES
    assert AutoBool.from_header_flags(flags, HeaderFlags.DISABLE_DIR_PAGE) is AutoBool.NO


def test_auto_bool_from_bool():
    assert AutoBool.from_bool(True) is AutoBool.YES
    assert AutoBool.from_bool(False) is AutoBool.NO


def test_setup_compression_from_header_flags():
    assert SetupCompression.from_header_flags(HeaderFlags.BZIP_USED) is SetupCompression.BZIP2
    assert SetupCompression.from_header_flags(HeaderFlags(0)) is SetupCompression.ZLIB


def test_language_detection_from_header_flags():
    flags = HeaderFlags.DETECT_LANGUAGE_USING_LOCALE
    assert LanguageDetection.from_header_flags(flags) is LanguageDetection.LOCALE_LANGUAGE
    assert LanguageDetection.from_header_flags(HeaderFlags(0)) is LanguageDetection.UI_LANGUAGE


def test_privilege_level_from_header_flags():
    flags = HeaderFlags.ADMIN_PRIVILEGES_REQUIRED
    assert PrivilegeLevel.from_header_flags(flags) is PrivilegeLevel.ADMIN
    assert PrivilegeLevel.from_header_flags(HeaderFlags.PASSWORD) is PrivilegeLevel.NONE


def test_color_read_little_endian():
    color = Color.read_from(io.BytesIO(b"\x56\x34\x12\x00"))
    assert color.value == 0x123456
    assert str(color) == "#123456"


def test_color_pads_to_six_digits():
    assert str(Color(0xFF)) == "#0000FF"


def test_color_short_read_raises():
    with pytest.raises(EOFError):
        Color.read_from(io.BytesIO(b"\x01\x02"))


def test_reg_root_from_raw_sets_high_bit():
    assert RegRoot.from_raw(2) is RegRoot.HKEY_LOCAL_MACHINE
    assert RegRoot.from_raw(0x8000_0001) is RegRoot.HKEY_CURRENT_USER


def test_reg_root_unknown_gives_default():
    assert RegRoot.from_raw(0x42) is RegRoot.SHELL_CONTEXT


def test_reg_root_str():
    assert str(RegRoot.from_raw(0x42)) == "SHELL_CONTEXT"
    assert str(RegRoot.from_raw(0)) == "HKEY_CLASSES_ROOT"
    assert str(RegRoot.from_raw(0x50)) == "HKEY_PERFORMANCE"
    assert str(RegRoot.from_raw(0x60)) == "HKEY_PERFORMANCE_NLSTEXT"
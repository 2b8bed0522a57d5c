# innoread

Building blocks for reading the data stored inside Inno Setup installer
executables: length-prefixed strings, packed flag sets, the legacy setup
loader offset, header enumerations and flags, architecture expressions,
registry roots, permission entries and file entry flags.

The package has no dependencies outside the standard library.

## Installation

```
pip install innoread
```

## Usage

### Strings

Strings in Inno Setup data are stored with a little-endian 32-bit length
prefix. A zero length reads as `None`:

```python
import io
from innoread.encoding import read_string, read_raw, read_sized_string

print(read_string(io.BytesIO(b"\x05\x00\x00\x00hello"), "cp1252"))  # hello
print(read_raw(io.BytesIO(b"\x00\x00\x00\x00")))                    # None
print(read_sized_string(io.BytesIO(b"abc"), 3, "cp1252"))           # abc
```

`innoread.encoding.decode(data, codepage)` does the decoding: a leading
UTF-8 or UTF-16 byte order mark overrides the codepage, malformed sequences
are replaced instead of raising, and with `cp1252` the five undefined bytes
decode to the matching control characters. The module provides the
constants `WINDOWS_1252` and `UTF_16LE`.

### Packed flags

Flag sets are packed one bit per flag, and which flags are present depends
on the installer version. `FlagReader` consumes one bit for every flag added,
in order, and `finalize()` skips the padding byte of a three-byte bitfield:

```python
import io
from innoread.flag_reader import FlagReader
from innoread.header_flags import HeaderFlags

reader = FlagReader(io.BytesIO(b"\x05"), HeaderFlags)
reader.add([HeaderFlags.DISABLE_STARTUP_PROMPT, HeaderFlags.CREATE_APP_DIR,
            HeaderFlags.ALLOW_NO_ICONS])
flags = reader.finalize()
# HeaderFlags.DISABLE_STARTUP_PROMPT | HeaderFlags.ALLOW_NO_ICONS
```

`add` also accepts a single flag value; its set bits are taken in ascending
order.

### Architectures

Expressions from the `ArchitecturesAllowed` directive evaluate to a pair of
allowed and disallowed architectures. An expression that allows nothing
allows `X86_COMPATIBLE`:

```python
from innoread.architecture import Architecture, StoredArchitecture

allowed, disallowed = Architecture.from_expression("x64compatible and not arm64")
# (Architecture.X64_COMPATIBLE, Architecture.ARM64)

StoredArchitecture.AMD64.to_architecture()  # Architecture.X64_OS
```

### Other readers

- `innoread.loader_offset.SetupLoaderOffset.read_from(src)` reads the
  `Inno` magic, the table offset and its complement, and checks them.
- `innoread.permission.Permission.read_from(src, codepage)` reads a
  permission string (empty when absent).
- `innoread.enums` holds the one-byte settings `AutoBool`,
  `SetupCompression`, `ImageAlphaFormat`, `InnoStyle`, `InstallVerbosity`,
  `LanguageDetection`, `LogMode` and `PrivilegeLevel`, each with
  `read_from(src)`; some derive a value from older `HeaderFlags` with
  `from_header_flags`. `Color.read_from(src)` reads a 32-bit colour shown as
  `#RRGGBB`-style hex, and `RegRoot.from_raw(value)` maps a stored registry
  root (unknown roots give `SHELL_CONTEXT`).
- `innoread.header_flags` defines `HeaderFlags` and
  `PrivilegesRequiredOverrides`.
- `innoread.file_flags` defines `FileFlags` and `FileCopyMode`, with
  `FileCopyMode.read_from(src)`.
- `innoread.compression.Compression` pairs a `CompressionMethod` with a
  data size.

Malformed data raises `ValueError`; input that ends too early raises
`EOFError`. `innoread.errors` defines `InnoError` and its subclasses
(`NotInnoFileError`, `InvalidSetupHeaderError`, `UnsupportedVersionError`,
`UnknownVersionError`, `UnknownLoaderSignatureError`,
`CrcChecksumMismatchError`) for code built on these readers.

## What it does not do

The package reads individual structures only. It does not open an installer
executable as a whole: it does not locate the setup loader through the PE
resources, read the setup version or the full setup header, decompress
header blocks, or parse language, message, type, component, task, directory,
file, icon, INI or registry entries. It does not extract installed files.

## Tests

```
pip install "innoread[test]"
pytest
```
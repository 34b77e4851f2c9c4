# basekit

Low-level building blocks for Python code:

- `basekit.flags`: `Flags` is an unsigned integer of fixed bit width (32 bits unless you pick
  another) that is used as a set of flags. It supports `~`, `|`, `&`, `^`, `<<`, `>>`, comparisons
  and `has_flag`. Every result is truncated to the width.
- `basekit.build`: the `IntFlag` sets `BuildConfig`, `BuildSystem`, `BuildToolset` and
  `BuildPlatform`, and `get_build_config()`, `get_build_system()`, `get_build_toolset()` and
  `get_build_platform()`. These describe the running interpreter. The config is `DEBUG`, or `DIST`
  under `python -O`. The system comes from `sys.platform`, the toolset from the compiler the
  interpreter was built with, and the platform from the machine architecture.
- `basekit.utf_base`: the `Encoding` enum (`UTF8`, `UTF16`, `UTF32`, with `unit_size()`), block
  size constants, `WIDE_ENCODING`, and the `UTFError` exception hierarchy.
- `basekit.utf_generic`: the portable sizing functions (`required_size_8_to_16` and the others) and
  the single-block converters (`convert_block_8_to_16` and the others).
- `basekit.utf`: the front end. It has `Impl` (`GENERIC`, `SIMD`, `FASTEST`), `fastest_impl()`,
  `required_size()`, `convert_block()` and `convert()`.

All text is handled as little-endian bytes.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Examples

Flags:

```python
from basekit.flags import Flags

f = Flags(0b0101)
f.has_flag(0b0100)        # True
~Flags(0, width=8)        # Flags(0xFF, width=8)
```

Build description:

```python
from basekit.build import BuildSystem, get_build_system

if get_build_system() & BuildSystem.UNIX:
    ...
```

Encoding conversion:

```python
from basekit.utf import convert, required_size
from basekit.utf_base import Encoding

data = "héllo".encode("utf-8")
required_size(data, Encoding.UTF8, Encoding.UTF16)   # 10
convert(data, Encoding.UTF8, Encoding.UTF16)         # UTF-16LE bytes
```

`convert` first sizes the whole input, which validates it. It then converts the input in 64-byte
blocks. If the source and target encodings are the same, it returns the input bytes unchanged.
Input that is not a whole number of code units raises `ValueError`.

Invalid input raises a subclass of `basekit.utf_base.UTFError`:

- `InvalidLeadingError` for a unit that cannot start a character.
- `InvalidContinuationError` for a malformed multi-unit sequence.
- `OutOfBoundsError` for a code point beyond U+10FFFF.
- `MissingImplError` when there is no implementation for the request.

## Limitations

- Only the generic implementation exists. Asking for `Impl.SIMD` raises `MissingImplError`, and
  `fastest_impl()` returns `Impl.GENERIC`.
- Malformed input is rejected. It is never replaced with U+FFFD.
- The package provides no memory alignment helpers and no locking primitives.
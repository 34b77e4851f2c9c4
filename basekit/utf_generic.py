"""Portable UTF-8/16/32 sizing and block conversion.

Every multi-byte value is little-endian. The ``required_size_*``
functions return the size in bytes that the converted text will need.
The ``convert_block_*`` functions convert the first ``size`` bytes of
one input block. A sequence that starts before ``size`` but runs past it
is still converted in full from the bytes that follow in the block.
Continuation units at the very start of a block are skipped, because
they belong to a sequence that the previous block finished.
"""

from __future__ import annotations

import struct
from typing import Iterator, Tuple

from basekit.utf_base import (
    INPUT_BLOCK_SIZE,
    InvalidContinuationError,
    InvalidLeadingError,
    OutOfBoundsError,
)

__all__ = [
    "required_size_8_to_16",
    "required_size_8_to_32",
    "required_size_16_to_8",
    "required_size_16_to_32",
    "required_size_32_to_8",
    "required_size_32_to_16",
    "convert_block_8_to_16",
    "convert_block_8_to_32",
    "convert_block_16_to_8",
    "convert_block_16_to_32",
    "convert_block_32_to_8",
    "convert_block_32_to_16",
]

# Sequence length by bits 3..8 of the first four bytes; 5 marks a byte
# that cannot start a sequence.
_UTF8_CLASS = (
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    5, 5, 5, 5, 5, 5, 5, 5, 2, 2, 2, 2, 3, 3, 4, 5,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    5, 5, 5, 5, 5, 5, 5, 5, 2, 2, 2, 2, 3, 3, 4, 5,
)

# Unit count by the top six bits of a UTF-16 unit; 3 marks a lone low
# surrogate, which cannot start a character.
_UTF16_CLASS = (
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1,
    1, 1, 1, 1, 1, 1, 2, 3, 1, 1, 1, 1, 1, 1, 1, 1,
)

_UTF8_CONTINUATION_MASKS = {2: 0x80C0, 3: 0x8080C0, 4: 0x808080C0}
_UTF16_PAIR_MASK = 0xDC00D800

_UTF8_TO_UTF16_COST = {1: 2, 2: 2, 3: 2, 4: 4}

_MAX_CODE_POINT = 0x10FFFF

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")


def _as_bytes(data) -> bytes:
    return memoryview(data).tobytes()


def _word(buf: bytes, pos: int) -> int:
    """Four bytes at ``pos`` as a little-endian integer; missing bytes are zero."""
    return int.from_bytes(buf[pos:pos + 4], "little")


def _block(block, size: int) -> bytes:
    if not isinstance(size, int) or isinstance(size, bool):
        raise TypeError("size must be an integer")
    if not 0 <= size <= INPUT_BLOCK_SIZE:
        raise ValueError(f"size must lie between 0 and {INPUT_BLOCK_SIZE}")
    buf = _as_bytes(block)
    if len(buf) > INPUT_BLOCK_SIZE:
        raise ValueError(f"a block holds at most {INPUT_BLOCK_SIZE} bytes")
    return buf


def _utf8_length(code_point: int) -> int:
    if code_point < 0x80:
        return 1
    if code_point < 0x800:
        return 2
    if code_point < 0x10000:
        return 3
    return 4


def _check_in_range(code_point: int, pos: int) -> int:
    if code_point > _MAX_CODE_POINT:
        raise OutOfBoundsError(
            f"code point 0x{code_point:X} at offset {pos} is beyond U+10FFFF"
        )
    return code_point


# Scanning whole inputs (validation included).


def _scan_utf8(buf: bytes) -> Iterator[int]:
    """Yield the length of every UTF-8 sequence in ``buf``."""
    pos = 0
    while pos < len(buf):
        word = _word(buf, pos)
        length = _UTF8_CLASS[(word >> 3) & 0x3F]
        if length == 5:
            raise InvalidLeadingError(
                f"byte 0x{buf[pos]:02X} at offset {pos} cannot start a sequence"
            )
        mask = _UTF8_CONTINUATION_MASKS.get(length)
        if mask is not None and word & mask != mask:
            raise InvalidContinuationError(
                f"malformed continuation in sequence at offset {pos}"
            )
        yield length
        pos += length


def _scan_utf16(buf: bytes) -> Iterator[Tuple[int, int]]:
    """Yield ``(unit count, first unit)`` for every UTF-16 character."""
    pos = 0
    while pos < len(buf):
        word = _word(buf, pos)
        kind = _UTF16_CLASS[(word >> 10) & 0x3F]
        if kind == 1:
            yield 1, word & 0xFFFF
            pos += 2
        elif kind == 2:
            if word & _UTF16_PAIR_MASK != _UTF16_PAIR_MASK:
                raise InvalidContinuationError(
                    f"high surrogate at offset {pos} is not followed by a low surrogate"
                )
            yield 2, word & 0xFFFF
            pos += 4
        else:
            raise InvalidLeadingError(
                f"unit 0x{word & 0xFFFF:04X} at offset {pos} cannot start a character"
            )


def _scan_utf32(buf: bytes) -> Iterator[int]:
    """Yield every code point, rejecting those beyond U+10FFFF."""
    for pos in range(0, len(buf), 4):
        yield _check_in_range(_word(buf, pos), pos)


def required_size_8_to_16(data) -> int:
    """Bytes needed to hold UTF-8 ``data`` as UTF-16."""
    return sum(_UTF8_TO_UTF16_COST[length] for length in _scan_utf8(_as_bytes(data)))


def required_size_8_to_32(data) -> int:
    """Bytes needed to hold UTF-8 ``data`` as UTF-32."""
    return 4 * sum(1 for _ in _scan_utf8(_as_bytes(data)))


def required_size_16_to_8(data) -> int:
    """Bytes needed to hold UTF-16 ``data`` as UTF-8."""
    return sum(
        _utf8_length(unit) if units == 1 else 4
        for units, unit in _scan_utf16(_as_bytes(data))
    )


def required_size_16_to_32(data) -> int:
    """Bytes needed to hold UTF-16 ``data`` as UTF-32."""
    return 4 * sum(1 for _ in _scan_utf16(_as_bytes(data)))


def required_size_32_to_8(data) -> int:
    """Bytes needed to hold UTF-32 ``data`` as UTF-8."""
    return sum(_utf8_length(cp) for cp in _scan_utf32(_as_bytes(data)))


def required_size_32_to_16(data) -> int:
    """Bytes needed to hold UTF-32 ``data`` as UTF-16."""
    return sum(2 if cp < 0x10000 else 4 for cp in _scan_utf32(_as_bytes(data)))


# Decoding single blocks.


def _decode_block_utf8(buf: bytes, size: int) -> Iterator[int]:
    pos = 0
    while pos < size:
        word = _word(buf, pos)
        length = _UTF8_CLASS[(word >> 3) & 0x3F]
        if length == 1:
            code_point = word & 0x7F
        elif length == 2:
            code_point = (word & 0x1F) << 6 | ((word >> 8) & 0x3F)
        elif length == 3:
            code_point = (
                (word & 0x0F) << 12
                | ((word >> 8) & 0x3F) << 6
                | ((word >> 16) & 0x3F)
            )
        elif length == 4:
            code_point = (
                (word & 0x07) << 18
                | ((word >> 8) & 0x3F) << 12
                | ((word >> 16) & 0x3F) << 6
                | ((word >> 24) & 0x3F)
            )
        else:
            if pos >= 3:
                raise InvalidLeadingError(
                    f"byte 0x{word & 0xFF:02X} at offset {pos} cannot start a sequence"
                )
            pos += 1
            continue
        yield code_point
        pos += length


def _decode_block_utf16(buf: bytes, size: int) -> Iterator[int]:
    # A skipped leading unit advances the counter by one but the read
    # position by a whole unit.
    count = 0
    pos = 0
    while count < size:
        word = _word(buf, pos)
        kind = _UTF16_CLASS[(word >> 10) & 0x3F]
        if kind == 1:
            yield word & 0xFFFF
            pos += 2
            count += 2
        elif kind == 2:
            yield ((word & 0x3FF) << 10 | ((word >> 16) & 0x3FF)) + 0x10000
            pos += 4
            count += 4
        else:
            if count >= 2:
                raise InvalidLeadingError(
                    f"unit 0x{word & 0xFFFF:04X} at offset {pos} cannot start a character"
                )
            count += 1
            pos += 2


def _decode_block_utf32(buf: bytes, size: int) -> Iterator[int]:
    for pos in range(0, size, 4):
        yield _check_in_range(_word(buf, pos), pos)


# Encoding.


def _encode_utf8(code_point: int) -> bytes:
    if code_point < 0x80:
        return bytes((code_point & 0x7F,))
    if code_point < 0x800:
        return bytes((
            0xC0 | ((code_point >> 6) & 0x1F),
            0x80 | (code_point & 0x3F),
        ))
    if code_point < 0x10000:
        return bytes((
            0xE0 | ((code_point >> 12) & 0x0F),
            0x80 | ((code_point >> 6) & 0x3F),
            0x80 | (code_point & 0x3F),
        ))
    return bytes((
        0xF0 | ((code_point >> 18) & 0x07),
        0x80 | ((code_point >> 12) & 0x3F),
        0x80 | ((code_point >> 6) & 0x3F),
        0x80 | (code_point & 0x3F),
    ))


def _encode_utf16(code_point: int) -> bytes:
    if code_point > 0xFFFF:
        offset = code_point - 0x10000
        return _U16.pack(0xD800 | ((offset >> 10) & 0x3FF)) + _U16.pack(
            0xDC00 | (offset & 0x3FF)
        )
    return _U16.pack(code_point & 0xFFFF)


def _encode_utf32(code_point: int) -> bytes:
    return _U32.pack(code_point)


def _convert(decode, encode, block, size: int) -> bytes:
    buf = _block(block, size)
    return b"".join(encode(cp) for cp in decode(buf, size))


def convert_block_8_to_16(block, size) -> bytes:
    """Convert the first ``size`` bytes of a UTF-8 block to UTF-16."""
    return _convert(_decode_block_utf8, _encode_utf16, block, size)


def convert_block_8_to_32(block, size) -> bytes:
    """Convert the first ``size`` bytes of a UTF-8 block to UTF-32."""
    return _convert(_decode_block_utf8, _encode_utf32, block, size)


def convert_block_16_to_8(block, size) -> bytes:
    """Convert the first ``size`` bytes of a UTF-16 block to UTF-8."""
    return _convert(_decode_block_utf16, _encode_utf8, block, size)


def convert_block_16_to_32(block, size) -> bytes:
    """Convert the first ``size`` bytes of a UTF-16 block to UTF-32."""
    return _convert(_decode_block_utf16, _encode_utf32, block, size)


def convert_block_32_to_8(block, size) -> bytes:
    """Convert the first ``size`` bytes of a UTF-32 block to UTF-8."""
    return _convert(_decode_block_utf32, _encode_utf8, block, size)


def convert_block_32_to_16(block, size) -> bytes:
    """Convert the first ``size`` bytes of a UTF-32 block to UTF-16."""
    return _convert(_decode_block_utf32, _encode_utf16, block, size)
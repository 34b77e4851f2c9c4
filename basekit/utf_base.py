"""Encodings, block sizes and errors shared by the UTF converters."""

from __future__ import annotations

from enum import IntEnum

from basekit.build import BuildSystem, get_build_system

__all__ = [
    "Encoding",
    "ENCODING_COUNT",
    "BLOCK_ALIGNMENT",
    "INPUT_BLOCK_SIZE",
    "OUTPUT_BLOCK_SIZE",
    "WIDE_ENCODING",
    "UTFError",
    "MissingImplError",
    "OutOfBoundsError",
    "InvalidLeadingError",
    "InvalidContinuationError",
]


class Encoding(IntEnum):
    UTF8 = 0
    UTF16 = 1
    UTF32 = 2

    def unit_size(self) -> int:
        """Size in bytes of one code unit of this encoding."""
        return _UNIT_SIZES[self]


_UNIT_SIZES = {Encoding.UTF8: 1, Encoding.UTF16: 2, Encoding.UTF32: 4}

ENCODING_COUNT = len(Encoding)

BLOCK_ALIGNMENT = 64
INPUT_BLOCK_SIZE = 128
OUTPUT_BLOCK_SIZE = 256

# Encoding of the platform's wide character type.
WIDE_ENCODING = (
    Encoding.UTF16
    if get_build_system() & BuildSystem.WINDOWS
    else Encoding.UTF32
)


class UTFError(ValueError):
    """Base class for failures while sizing or converting text."""


class MissingImplError(UTFError):
    """No implementation exists for the requested conversion."""


class OutOfBoundsError(UTFError):
    """A code point lies beyond U+10FFFF."""


class InvalidLeadingError(UTFError):
    """A code unit cannot start a character."""


class InvalidContinuationError(UTFError):
    """A multi-unit sequence has a malformed continuation unit."""
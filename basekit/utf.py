"""Conversion between UTF-8, UTF-16 and UTF-32 with selectable implementations.

Text is handled as little-endian bytes. Conversion runs in blocks of
``BLOCK_ALIGNMENT`` input bytes. Each block is handed the bytes that follow
it as well, so a sequence that starts near the end of a block is finished
there. The next block then skips the continuation units it starts with.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Dict, Iterator, Tuple

from basekit import utf_generic as generic
from basekit.utf_base import (
    BLOCK_ALIGNMENT,
    INPUT_BLOCK_SIZE,
    Encoding,
    MissingImplError,
)

__all__ = [
    "Impl",
    "SIMD_SUPPORTED",
    "fastest_impl",
    "required_size",
    "convert_block",
    "convert",
]

SIMD_SUPPORTED = False


class Impl(IntEnum):
    GENERIC = 0
    SIMD = 1
    FASTEST = 2


RequiredSizeFn = Callable[[bytes], int]
ConvertBlockFn = Callable[[bytes, int], bytes]


def _simd_required_size(data) -> int:
    raise MissingImplError("no SIMD implementation for sizing")


def _simd_convert_block(block, size) -> bytes:
    raise MissingImplError("no SIMD implementation for block conversion")


_E8, _E16, _E32 = Encoding.UTF8, Encoding.UTF16, Encoding.UTF32

_GENERIC_FUNCS: Dict[Tuple[Encoding, Encoding], Tuple[RequiredSizeFn, ConvertBlockFn]] = {
    (_E8, _E16): (generic.required_size_8_to_16, generic.convert_block_8_to_16),
    (_E8, _E32): (generic.required_size_8_to_32, generic.convert_block_8_to_32),
    (_E16, _E8): (generic.required_size_16_to_8, generic.convert_block_16_to_8),
    (_E16, _E32): (generic.required_size_16_to_32, generic.convert_block_16_to_32),
    (_E32, _E8): (generic.required_size_32_to_8, generic.convert_block_32_to_8),
    (_E32, _E16): (generic.required_size_32_to_16, generic.convert_block_32_to_16),
}

_IMPLS: Dict[Tuple[Encoding, Encoding, Impl], Tuple[RequiredSizeFn, ConvertBlockFn]] = {}
for (_source, _target), _funcs in _GENERIC_FUNCS.items():
    _IMPLS[(_source, _target, Impl.GENERIC)] = _funcs
    _IMPLS[(_source, _target, Impl.SIMD)] = (_simd_required_size, _simd_convert_block)


def fastest_impl() -> Impl:
    """The fastest implementation available here."""
    return Impl.SIMD if SIMD_SUPPORTED else Impl.GENERIC


def _lookup(source, target, impl) -> Tuple[RequiredSizeFn, ConvertBlockFn]:
    source, target, impl = Encoding(source), Encoding(target), Impl(impl)
    if impl is Impl.FASTEST:
        impl = fastest_impl()
    try:
        return _IMPLS[(source, target, impl)]
    except KeyError:
        raise MissingImplError(
            f"no {impl.name} implementation from {source.name} to {target.name}"
        ) from None


def required_size(data, source, target, impl=Impl.FASTEST) -> int:
    """Bytes needed to hold ``data`` (in ``source``) encoded as ``target``."""
    size_fn, _ = _lookup(source, target, impl)
    return size_fn(data)


def convert_block(block, size, source, target, impl=Impl.FASTEST) -> bytes:
    """Convert the first ``size`` bytes of one input block."""
    _, block_fn = _lookup(source, target, impl)
    return block_fn(block, size)


def _blocks(buf: bytes) -> Iterator[Tuple[bytes, int]]:
    for offset in range(0, len(buf), BLOCK_ALIGNMENT):
        size = min(BLOCK_ALIGNMENT, len(buf) - offset)
        yield buf[offset:offset + INPUT_BLOCK_SIZE], size


def convert(data, source, target, impl=Impl.FASTEST) -> bytes:
    """Convert the whole of ``data`` from ``source`` to ``target`` encoding."""
    source, target = Encoding(source), Encoding(target)
    buf = memoryview(data).tobytes()
    if len(buf) % source.unit_size():
        raise ValueError(
            f"{source.name} text must be a whole number of {source.unit_size()}-byte units"
        )
    if source is target:
        return buf
    size_fn, block_fn = _lookup(source, target, impl)
    size_fn(buf)
    return b"".join(block_fn(block, size) for block, size in _blocks(buf))
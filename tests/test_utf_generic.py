import pytest

from basekit import utf_generic as g
from basekit.utf_base import (
    InvalidContinuationError,
    InvalidLeadingError,
    OutOfBoundsError,
)

U8 = (
    b"\x7f" * 15
    + b"\xdf\xbf" * 15
    + b"\xef\xbf\xbf" * 16
    + b"\xf4\x8f\xbf\xbf" * 13
)
U16 = (
    b"\x7f\x00" * 15
    + b"\xff\x07" * 15
    + b"\xff\xff" * 16
    + b"\xff\xdb\xff\xdf" * 13
)
U32 = (
    b"\x7f\x00\x00\x00" * 15
    + b"\xff\x07\x00\x00" * 15
    + b"\xff\xff\x00\x00" * 16
    + b"\xff\xff\x10\x00" * 13
)


@pytest.mark.parametrize(
    "func, data, expected",
    [
        (g.required_size_8_to_16, U8, 144),
        (g.required_size_8_to_32, U8, 236),
        (g.required_size_16_to_8, U16, 145),
        (g.required_size_16_to_32, U16, 236),
        (g.required_size_32_to_8, U32, 145),
        (g.required_size_32_to_16, U32, 144),
    ],
)
def test_required_size(func, data, expected):
    assert func(data) == expected


@pytest.mark.parametrize(
    "func, source, input_size, size, expected, expected_size",
    [
        (g.convert_block_8_to_16, U8, 67, 64, U16, 74),
        (g.convert_block_8_to_32, U8, 67, 64, U32, 148),
        (g.convert_block_16_to_8, U16, 66, 64, U8, 51),
        (g.convert_block_16_to_32, U16, 66, 64, U32, 128),
        (g.convert_block_32_to_8, U32, 64, 64, U8, 17),
        (g.convert_block_32_to_16, U32, 64, 64, U16, 32),
    ],
)
def test_convert_block_full(func, source, input_size, size, expected, expected_size):
    out = func(source[:input_size], size)
    assert len(out) == expected_size
    assert out == expected[:expected_size]


@pytest.mark.parametrize(
    "func, source, input_size, size, expected, expected_size",
    [
        (g.convert_block_8_to_16, U8, 13, 10, U16, 20),
        (g.convert_block_8_to_32, U8, 13, 10, U32, 40),
        (g.convert_block_16_to_8, U16, 12, 10, U8, 5),
        (g.convert_block_16_to_32, U16, 12, 10, U32, 20),
        (g.convert_block_32_to_8, U32, 10, 10, U8, 3),
        (g.convert_block_32_to_16, U32, 10, 10, U16, 6),
    ],
)
def test_convert_block_partial(func, source, input_size, size, expected, expected_size):
    out = func(source[:input_size], size)
    assert len(out) == expected_size
    assert out == expected[:expected_size]


def test_required_size_empty_is_zero():
    assert g.required_size_8_to_16(b"") == 0
    assert g.required_size_32_to_8(b"") == 0


def test_required_size_utf8_invalid_leading():
    with pytest.raises(InvalidLeadingError):
        g.required_size_8_to_32(b"A\x80")


def test_required_size_utf8_invalid_lead_byte_ff():
    with pytest.raises(InvalidLeadingError):
        g.required_size_8_to_16(b"\xff")


def test_required_size_utf8_invalid_continuation():
    with pytest.raises(InvalidContinuationError):
        g.required_size_8_to_16(b"\xc3\x41")


def test_required_size_utf16_lone_low_surrogate():
    with pytest.raises(InvalidLeadingError):
        g.required_size_16_to_8(b"\x00\xdc")


def test_required_size_utf16_unpaired_high_surrogate():
    with pytest.raises(InvalidContinuationError):
        g.required_size_16_to_32(b"\x00\xd8A\x00")


def test_required_size_utf32_out_of_bounds():
    with pytest.raises(OutOfBoundsError):
        g.required_size_32_to_16(b"\x00\x00\x11\x00")


def test_convert_block_matches_codecs():
    text = "aé€😀z"
    data = text.encode("utf-32-le")
    assert g.convert_block_32_to_8(data, len(data)) == text.encode("utf-8")
    assert g.convert_block_32_to_16(data, len(data)) == text.encode("utf-16-le")


def test_convert_block_round_trip_8_16_32():
    text = "héllo wörld ✓ 𝄞"
    utf8 = text.encode("utf-8")
    utf16 = g.convert_block_8_to_16(utf8, len(utf8))
    utf32 = g.convert_block_16_to_32(utf16, len(utf16))
    assert utf32 == text.encode("utf-32-le")
    assert g.convert_block_16_to_8(utf16, len(utf16)) == utf8
    assert g.convert_block_8_to_32(utf8, len(utf8)) == utf32


def test_convert_block_skips_leading_continuation_bytes():
    assert g.convert_block_8_to_32(b"\x80\x80A", 3) == b"A\x00\x00\x00"


def test_convert_block_invalid_leading_after_start():
    with pytest.raises(InvalidLeadingError):
        g.convert_block_8_to_16(b"AAA\x80", 4)


def test_convert_block_utf16_invalid_leading_after_start():
    with pytest.raises(InvalidLeadingError):
        g.convert_block_16_to_8(b"A\x00A\x00\x00\xdc", 6)


def test_convert_block_utf32_out_of_bounds():
    with pytest.raises(OutOfBoundsError):
        g.convert_block_32_to_8(b"A\x00\x00\x00\x00\x00\x11\x00", 8)


def test_convert_block_rejects_oversized_size():
    with pytest.raises(ValueError):
        g.convert_block_8_to_16(b"A", 129)


def test_convert_block_rejects_oversized_block():
    with pytest.raises(ValueError):
        g.convert_block_8_to_32(b"A" * 129, 10)


def test_convert_block_rejects_text():
    with pytest.raises(TypeError):
        g.convert_block_8_to_32("A", 1)
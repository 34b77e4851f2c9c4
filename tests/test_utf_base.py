import pytest

from basekit.build import BuildSystem, get_build_system
from basekit.utf_base import (
    ENCODING_COUNT,
    INPUT_BLOCK_SIZE,
    OUTPUT_BLOCK_SIZE,
    WIDE_ENCODING,
    Encoding,
    InvalidContinuationError,
    InvalidLeadingError,
    MissingImplError,
    OutOfBoundsError,
    UTFError,
)


@pytest.mark.parametrize(
    "encoding, size",
    [(Encoding.UTF8, 1), (Encoding.UTF16, 2), (Encoding.UTF32, 4)],
)
def test_unit_size(encoding, size):
    assert encoding.unit_size() == size


def test_encoding_order_and_count():
    by_index = [Encoding(index) for index in range(ENCODING_COUNT)]
    assert by_index == [Encoding.UTF8, Encoding.UTF16, Encoding.UTF32]
    assert [encoding.unit_size() for encoding in by_index] == [1, 2, 4]
    with pytest.raises(ValueError):
        Encoding(ENCODING_COUNT)


def test_block_sizes():
    assert INPUT_BLOCK_SIZE // Encoding.UTF32.unit_size() == 32
    assert OUTPUT_BLOCK_SIZE // Encoding.UTF16.unit_size() == 128
    assert OUTPUT_BLOCK_SIZE == 2 * INPUT_BLOCK_SIZE


def test_wide_encoding_follows_system():
    on_windows = bool(get_build_system() & BuildSystem.WINDOWS)
    expected = Encoding.UTF16 if on_windows else Encoding.UTF32
    assert WIDE_ENCODING == expected


@pytest.mark.parametrize(
    "error_class",
    [MissingImplError, OutOfBoundsError, InvalidLeadingError, InvalidContinuationError],
)
def test_errors_are_utf_errors(error_class):
    error = error_class("bad input")
    assert str(error) == "bad input"
    assert isinstance(error, UTFError)
    assert isinstance(error, ValueError)


def test_errors_are_distinct():
    error = InvalidLeadingError("x")
    assert error.args == ("x",)
    assert not isinstance(error, InvalidContinuationError)
    assert not isinstance(InvalidContinuationError("y"), InvalidLeadingError)
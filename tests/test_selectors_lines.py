import pytest

from onewriter_actions.buffer import BufferValidationError
from onewriter_actions.selectors import (
    line_range_for_selection,
    location_to_offset,
    next_line_range,
    offset_to_location,
    previous_line_range,
    trim_trailing_newline,
)

TEXT = "a\nb\nc"


def test_line_range_for_caret_excludes_newline() -> None:
    assert line_range_for_selection(TEXT, 2, 2) == (2, 3)
    assert line_range_for_selection(TEXT, 3, 3) == (2, 3)


def test_line_range_can_include_newline() -> None:
    assert line_range_for_selection(TEXT, 2, 2, include_newline=True) == (2, 4)
    # last line has no terminator to include
    assert line_range_for_selection(TEXT, 4, 4, include_newline=True) == (4, 5)


def test_line_range_spans_every_touched_line() -> None:
    assert line_range_for_selection(TEXT, 0, 3) == (0, 3)
    assert line_range_for_selection(TEXT, 2, 5) == (2, 5)


def test_selection_ending_after_newline_stays_on_its_line() -> None:
    assert line_range_for_selection(TEXT, 0, 2) == (0, 1)


def test_previous_line_range() -> None:
    assert previous_line_range(TEXT, 2) == (0, 1)
    assert previous_line_range(TEXT, 4) == (2, 3)
    assert previous_line_range(TEXT, 0) is None


def test_empty_first_line_is_not_a_previous_line() -> None:
    assert previous_line_range("\nb", 1) is None


def test_next_line_range() -> None:
    assert next_line_range(TEXT, 1) == (2, 3)
    assert next_line_range(TEXT, 3) == (4, 5)
    assert next_line_range(TEXT, 5) is None


def test_line_after_final_newline_is_not_a_next_line() -> None:
    assert next_line_range("a\n", 1) is None
    assert next_line_range("a\nb\n", 3) is None


def test_trim_trailing_newline() -> None:
    assert trim_trailing_newline(TEXT, (2, 4)) == (2, 3)
    assert trim_trailing_newline(TEXT, (4, 5)) == (4, 5)
    assert trim_trailing_newline(TEXT, (2, 2)) == (2, 2)


def test_trim_treats_end_as_offset_not_length() -> None:
    with pytest.raises(BufferValidationError):
        trim_trailing_newline(TEXT, (4, 9))


def test_offset_location_conversions() -> None:
    assert offset_to_location(TEXT, 0) == (0, 0)
    assert offset_to_location(TEXT, 3) == (1, 1)
    assert offset_to_location(TEXT, 5) == (2, 1)
    assert location_to_offset(TEXT, (1, 1)) == 3
    assert location_to_offset(TEXT, (2, 0)) == 4


def test_location_to_offset_clamps() -> None:
    assert location_to_offset(TEXT, (1, 9)) == 3
    assert location_to_offset(TEXT, (9, 0)) == 4


def test_reversed_selection_is_rejected() -> None:
    with pytest.raises(BufferValidationError) as excinfo:
        line_range_for_selection(TEXT, 4, 2)
    assert excinfo.value.range == (4, 2)

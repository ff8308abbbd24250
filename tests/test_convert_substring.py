import pytest

from dockgrid.convert_substring import BadConversion, convert_substring, substring_is_blank


def test_int_with_leading_spaces():
    assert convert_substring("  42", 1, 4, int) == 42


def test_int_inside_line():
    assert convert_substring("abc 7 ", 4, 5, int) == 7


def test_negative_int():
    assert convert_substring("x -15", 2, 5, int) == -15


def test_float():
    assert convert_substring("  1.5", 1, 5, float) == 1.5


def test_float_exponent():
    assert convert_substring("2e3", 1, 3, float) == 2000.0


def test_str_keeps_trailing_whitespace():
    assert convert_substring("  ab ", 1, 5, str) == "ab "


def test_unsigned_accepts_positive():
    assert convert_substring(" 12", 1, 3, "unsigned") == 12


def test_unsigned_rejects_negative():
    with pytest.raises(BadConversion):
        convert_substring("-3", 1, 2, "unsigned")


@pytest.mark.parametrize("i,j", [(0, 2), (4, 2), (1, 10)])
def test_bad_ranges(i, j):
    with pytest.raises(BadConversion):
        convert_substring("1234", i, j, int)


@pytest.mark.parametrize("text", ["x1", "12 ", "", "   ", "1_000", "1.5"])
def test_bad_integers(text):
    with pytest.raises(BadConversion):
        convert_substring(text, 1, len(text), int)


def test_bad_float():
    with pytest.raises(BadConversion):
        convert_substring("abc", 1, 3, float)


def test_int_overflow():
    with pytest.raises(BadConversion):
        convert_substring("99999999999", 1, 11, int)


def test_bad_conversion_is_value_error():
    with pytest.raises(ValueError):
        convert_substring("zz", 1, 2, int)


def test_blank_substring():
    assert substring_is_blank("ab   cd", 3, 5) is True


def test_non_blank_substring():
    assert substring_is_blank("ab   cd", 2, 5) is False


def test_empty_range_is_blank():
    assert substring_is_blank("abc", 2, 1) is True


def test_blank_bad_range():
    with pytest.raises(BadConversion):
        substring_is_blank("abc", 1, 4)
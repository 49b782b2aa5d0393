import pytest

from algokit.linked import (
    NestedList,
    is_palindrome,
    largest_palindrome,
    palindrome_digits,
)

SAMPLE = [1, 100, 121, 432, 4235, 909, 12321, 35, 9009, 454, 67, 666]


def test_palindrome_digits():
    assert palindrome_digits(12321) == len("12321")
    assert palindrome_digits(9009) == len("9009")
    assert palindrome_digits(432) == 0
    assert palindrome_digits(0) == 0


@pytest.mark.parametrize("num", [0, 7, 121, 9009, -121])
def test_is_palindrome_true(num):
    assert is_palindrome(num) is True


@pytest.mark.parametrize("num", [10, 123, 4235, -12])
def test_is_palindrome_false(num):
    assert is_palindrome(num) is False


def test_largest_palindrome_sample():
    assert largest_palindrome(SAMPLE) == (12321, 5)


def test_largest_palindrome_first_on_tie():
    assert largest_palindrome([454, 666]) == (454, 3)


def test_largest_palindrome_empty():
    with pytest.raises(ValueError):
        largest_palindrome([])


@pytest.fixture
def sample_list():
    nested = NestedList()
    for key in range(6):
        nested.append(key)
    for key, value in [
        (0, 1), (0, 1), (0, 4), (0, 7), (1, 6), (1, 3), (2, 3),
        (2, 1), (2, 3), (3, 4), (3, 4), (4, 9), (4, 8), (5, 6),
    ]:
        nested.add_nested(key, value)
    return nested


def test_keys_and_nested(sample_list):
    assert sample_list.keys() == [0, 1, 2, 3, 4, 5]
    assert sample_list.nested(0) == [1, 1, 4, 7]
    assert sample_list.nested(5) == [6]
    assert len(sample_list) == 6


def test_converted(sample_list):
    assert sample_list.converted().keys() == [1147, 63, 313, 44, 98, 6]


def test_converted_drops_trailing_zero():
    nested = NestedList()
    nested.append(1)
    nested.add_nested(1, 5)
    nested.add_nested(1, 0)
    assert nested.converted().keys() == [5]


def test_add_nested_to_duplicate_keys():
    nested = NestedList()
    nested.append(3)
    nested.append(3)
    nested.add_nested(3, 9)
    assert nested.converted().keys() == [9, 9]


def test_add_nested_missing_key():
    nested = NestedList()
    nested.append(1)
    with pytest.raises(KeyError):
        nested.add_nested(2, 5)


def test_nested_missing_key():
    with pytest.raises(KeyError):
        NestedList().nested(0)


def test_nested_returns_copy(sample_list):
    sample_list.nested(1).append(99)
    assert sample_list.nested(1) == [6, 3]
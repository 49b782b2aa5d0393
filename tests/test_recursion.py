import pytest

from algokit.recursion import (
    count_ones,
    digit_count,
    escape_ways,
    min_max,
    reverse_string,
    say_digits,
    subsequences,
    subset_sums,
    words_of_length,
)


@pytest.mark.parametrize("k", [0, 1, 5, 12])
def test_count_ones_of_all_ones_and_powers(k):
    assert count_ones(2**k - 1) == k
    assert count_ones(2**k) == 1


@pytest.mark.parametrize("num", [0, -7])
def test_count_ones_non_positive(num):
    assert count_ones(num) == 0


@pytest.mark.parametrize("k", [0, 1, 2, 9])
def test_digit_count_of_powers_of_ten(k):
    assert digit_count(10**k) == k + 1
    assert digit_count(10 ** (k + 1) - 1) == k + 1


def test_digit_count_non_positive():
    assert digit_count(0) == 0
    assert digit_count(-155) == 0


def test_min_max():
    assert min_max([42, 7, 99, 13]) == (7, 99)


def test_min_max_empty():
    with pytest.raises(ValueError):
        min_max([])


def test_escape_ways_base_cases():
    assert escape_ways(0) == 1
    assert escape_ways(-1) == 0
    assert escape_ways(1) == 1


@pytest.mark.parametrize("n", range(4, 15))
def test_escape_ways_recurrence(n):
    assert escape_ways(n) == escape_ways(n - 1) + escape_ways(n - 2) + escape_ways(n - 4)


def test_say_digits():
    assert say_digits(112) == ["One", "One", "Two"]
    assert say_digits(0) == []


def test_say_digits_negative():
    with pytest.raises(ValueError):
        say_digits(-3)


def test_subsequences_cover_all_subsets():
    result = list(subsequences("abc"))
    assert len(result) == 8
    assert len(set(result)) == 8
    assert result[0] == ""
    assert result[-1] == "abc"
    assert {"a", "b", "c", "ab", "ac", "bc"} <= set(result)


def test_words_of_length():
    words = list(words_of_length("abc", 3))
    assert len(words) == 27
    assert len(set(words)) == 27
    assert words[0] == "aaa"
    assert words[-1] == "ccc"
    assert words == sorted(words)


def test_words_of_length_negative():
    with pytest.raises(ValueError):
        list(words_of_length("ab", -1))


@pytest.mark.parametrize("text", ["", "a", "racecar", "hello world"])
def test_reverse_string_is_an_involution(text):
    assert reverse_string(reverse_string(text)) == text
    assert len(reverse_string(text)) == len(text)


def test_reverse_string_value():
    assert reverse_string("abc") == "cba"


def test_subset_sums():
    result = list(subset_sums([1, 2, 3, 4], 5))
    assert all(sum(subset) == 5 for subset in result)
    assert sorted(result) == [[1, 4], [2, 3]]


def test_subset_sums_zero_target():
    assert list(subset_sums([1, 2], 0)) == [[]]
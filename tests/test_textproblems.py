import pytest

from cfsolutions.textproblems import (
    abbreviate,
    bit_plus_plus,
    can_break_balance,
    can_form_palindrome,
    can_make_smaller_than_reverse,
    digits_to_remove,
    hq9_produces_output,
    is_dangerous,
)


@pytest.mark.parametrize("program", ["H", "xQx", "abc9", "Hi!"])
def test_hq9_with_output_command(program):
    assert hq9_produces_output(program) is True


@pytest.mark.parametrize("program", ["", "Codeforces", "hq+", "q"])
def test_hq9_without_output_command(program):
    assert hq9_produces_output(program) is False


@pytest.mark.parametrize("k", [0, 1, 5])
def test_uniform_string_never_smaller(k):
    assert can_make_smaller_than_reverse("aaaa", k) is False
    assert can_make_smaller_than_reverse("z", k) is False


def test_swaps_allow_any_mixed_string():
    assert can_make_smaller_than_reverse("ba", 1) is True
    assert can_make_smaller_than_reverse("aba", 3) is True


def test_no_swaps_depends_on_order():
    assert can_make_smaller_than_reverse("ab", 0) is True
    assert can_make_smaller_than_reverse("ba", 0) is False
    assert can_make_smaller_than_reverse("aba", 0) is False


@pytest.mark.parametrize("number", ["5", "7", "9"])
def test_single_digit_needs_nothing(number):
    assert digits_to_remove(number) == 0


@pytest.mark.parametrize("number", ["1", "203", "10405", "990"])
def test_appending_zero_adds_one_removal(number):
    assert digits_to_remove(number + "0") == digits_to_remove(number) + 1


@pytest.mark.parametrize("number", ["1", "30", "1002"])
def test_prepending_nonzero_adds_one_removal(number):
    assert digits_to_remove("7" + number) == digits_to_remove(number) + 1


def test_all_zero_number_is_rejected():
    with pytest.raises(ValueError):
        digits_to_remove("000")


def test_balance_can_break():
    assert can_break_balance("()()") is True
    assert can_break_balance("(())") is False
    assert can_break_balance("()") is False


def test_balance_rejects_unmatched_close():
    with pytest.raises(ValueError):
        can_break_balance(")(")


def test_palindrome_all_pairs_good():
    assert can_form_palindrome(4, 2, "0000") is True
    assert can_form_palindrome(4, 2, "0001") is False


def test_palindrome_all_pairs_mismatched():
    assert can_form_palindrome(6, 0, "000111") is True
    assert can_form_palindrome(6, 0, "000000") is False


def test_bit_plus_plus_cancels_out():
    assert bit_plus_plus(["X++", "--X"]) == 0


def test_bit_plus_plus_counts_increments_and_decrements():
    statements = ["++X"] * 4
    assert bit_plus_plus(statements) == len(statements)
    assert bit_plus_plus(["X--"] * 3) == -3


@pytest.mark.parametrize("word", ["word", "abcdefghij", ""])
def test_short_words_unchanged(word):
    assert abbreviate(word) == word


def test_long_words_abbreviated():
    assert abbreviate("localization") == "l10n"
    assert abbreviate("internationalization") == "i18n"


def test_dangerous_positions():
    assert is_dangerous("0000000") is True
    assert is_dangerous("1000000001") is True
    assert is_dangerous("000000") is False
    assert is_dangerous("001001") is False
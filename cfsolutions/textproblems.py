"""Problems whose input is mostly text: strings, statements and words."""

from itertools import groupby

_HQ9_OUTPUT_COMMANDS = frozenset("HQ9")
_INCREMENTS = frozenset({"++X", "X++"})
_ABBREVIATE_OVER = 10
_DANGER_RUN = 7


def hq9_produces_output(program):
    """Return True if an HQ9+ program prints anything."""
    return any(ch in _HQ9_OUTPUT_COMMANDS for ch in program)


def can_make_smaller_than_reverse(s, k):
    """Decide whether ``s`` can be made lexicographically smaller than its reverse.

    A string of one repeated character never can. With no swaps left
    (``k == 0``) the string must already be smaller than its reverse.
    """
    if len(set(s)) <= 1:
        return False
    if k == 0 and s >= s[::-1]:
        return False
    return True


def digits_to_remove(number):
    """Count the digits to delete so that ``number`` becomes a single non-zero digit
    followed by its trailing zeros removed."""
    significant = number.rstrip("0")
    if not significant:
        raise ValueError("number must contain a non-zero digit")
    trailing_zeros = len(number) - len(significant)
    return trailing_zeros + sum(ch != "0" for ch in significant[:-1])


def can_break_balance(s):
    """Return True if a balanced bracket sequence returns to depth zero more than once."""
    depth = 0
    returns = 0
    for ch in s:
        if ch == "(":
            depth += 1
        else:
            if depth == 0:
                raise ValueError("closing bracket without a matching opening one")
            depth -= 1
        if depth == 0:
            returns += 1
    return returns > 1


def can_form_palindrome(n, k, s):
    """Decide whether the first ``n`` bits of ``s`` can be paired into exactly ``k`` good pairs."""
    prefix = s[:n]
    zeros = sum(ch == "0" for ch in prefix)
    ones = len(prefix) - zeros
    mismatched = n // 2 - k
    return (
        zeros >= mismatched
        and ones >= mismatched
        and (zeros - mismatched) % 2 == 0
        and (ones - mismatched) % 2 == 0
    )


def bit_plus_plus(statements):
    """Run Bit++ statements on ``x = 0`` and return the final value."""
    return sum(1 if statement in _INCREMENTS else -1 for statement in statements)


def abbreviate(word):
    """Shorten words longer than ten letters to first letter, count, last letter."""
    if len(word) > _ABBREVIATE_OVER:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def is_dangerous(position):
    """Return True if seven or more equal players stand in a row."""
    return any(sum(1 for _ in run) >= _DANGER_RUN for _, run in groupby(position))
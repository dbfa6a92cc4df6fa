"""Command line front end: read a problem's input and print its answer."""

import argparse
import sys

from cfsolutions.arithmetic import (
    can_meet_requirement,
    can_split_watermelon,
    count_solved_problems,
    is_sum_of_2020_2021,
    longest_divisor_interval,
    moves_to_one,
    odd_then_even,
)
from cfsolutions.sequences import (
    count_kept,
    count_valid_b,
    max_earnings,
    median_check,
    min_coins_to_take,
    min_groups,
    min_removals_balanced,
    prefix_max_sums,
    recover_permutation,
    shifted_permutation,
)
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

_VERDICT = {True: "YES", False: "NO"}


class _Tokens:
    """Whitespace separated input tokens."""

    def __init__(self, text):
        self._tokens = iter(text.split())

    def word(self):
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended early") from None

    def integer(self):
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count):
        return [self.integer() for _ in range(count)]


def _joined(values):
    return " ".join(map(str, values))


def _per_case(case):
    def handler(tokens):
        return [case(tokens) for _ in range(tokens.integer())]

    return handler


def _single(case):
    def handler(tokens):
        return [case(tokens)]

    return handler


def _p115a(tokens):
    return str(min_groups(tokens.integers(tokens.integer())))


def _p160a(tokens):
    return str(min_coins_to_take(tokens.integers(tokens.integer())))


def _p1850d(tokens):
    n = tokens.integer()
    k = tokens.integer()
    return str(min_removals_balanced(tokens.integers(n), k))


def _p2085a(tokens):
    tokens.integer()
    k = tokens.integer()
    return _VERDICT[bool(can_make_smaller_than_reverse(tokens.word(), k))]


def _p2094c(tokens):
    n = tokens.integer()
    grid = [tokens.integers(n) for _ in range(n)]
    return _joined(recover_permutation(grid))


def _p2102a(tokens):
    n, m, p, q = tokens.integers(4)
    return _VERDICT[bool(can_meet_requirement(n, m, p, q))]


def _p2102b(tokens):
    ok, needed = median_check(tokens.integers(tokens.integer()))
    return f"{_VERDICT[bool(ok)]}\n{needed}"


def _p2104b(tokens):
    return _joined(prefix_max_sums(tokens.integers(tokens.integer())))


def _p2106b(tokens):
    n, x = tokens.integers(2)
    return _joined(shifted_permutation(n, x))


def _p2106c(tokens):
    n, k = tokens.integers(2)
    a = tokens.integers(n)
    b = tokens.integers(n)
    return str(count_valid_b(a, b, k))


def _p2114b(tokens):
    n, k = tokens.integers(2)
    return _VERDICT[bool(can_form_palindrome(n, k, tokens.word()))]


def _p2114c(tokens):
    return str(count_kept(tokens.integers(tokens.integer())))


def _p231a(tokens):
    votes = [tuple(tokens.integers(3)) for _ in range(tokens.integer())]
    return str(count_solved_problems(votes))


def _p282a(tokens):
    statements = [tokens.word() for _ in range(tokens.integer())]
    return str(bit_plus_plus(statements))


def _p318a(tokens):
    n, k = tokens.integers(2)
    return str(odd_then_even(n, k))


def _p34b(tokens):
    n, m = tokens.integers(2)
    return str(max_earnings(tokens.integers(n), m))


def _p71a(tokens):
    return [abbreviate(tokens.word()) for _ in range(tokens.integer())]


_PROBLEMS = {
    "115A": _single(_p115a),
    "133A": _single(lambda t: _VERDICT[bool(hq9_produces_output(t.word()))]),
    "1374B": _per_case(lambda t: str(moves_to_one(t.integer()))),
    "1475B": _per_case(lambda t: _VERDICT[bool(is_sum_of_2020_2021(t.integer()))]),
    "160A": _single(_p160a),
    "1850D": _per_case(_p1850d),
    "1855B": _per_case(lambda t: str(longest_divisor_interval(t.integer()))),
    "2085A": _per_case(_p2085a),
    "2093B": _per_case(lambda t: str(digits_to_remove(t.word()))),
    "2094C": _per_case(_p2094c),
    "2102A": _per_case(_p2102a),
    "2102B": _per_case(_p2102b),
    "2104B": _per_case(_p2104b),
    "2106B": _per_case(_p2106b),
    "2106C": _per_case(_p2106c),
    "2110B": _per_case(lambda t: _VERDICT[bool(can_break_balance(t.word()))]),
    "2114B": _per_case(_p2114b),
    "2114C": _per_case(_p2114c),
    "231A": _single(_p231a),
    "282A": _single(_p282a),
    "318A": _single(_p318a),
    "34B": _single(_p34b),
    "4A": _single(lambda t: _VERDICT[bool(can_split_watermelon(t.integer()))]),
    "71A": _p71a,
    "96A": _single(lambda t: _VERDICT[bool(is_dangerous(t.word()))]),
}


def solve(problem, text):
    """Answer ``problem`` for the input ``text`` and return the output text."""
    handler = _PROBLEMS.get(problem.upper())
    if handler is None:
        raise ValueError(f"unknown problem {problem!r}")
    lines = handler(_Tokens(text))
    return "".join(f"{line}\n" for line in lines)


def main(argv=None):
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="cfsolutions", description="Solve a contest problem from standard input."
    )
    parser.add_argument("problem", type=str.upper, choices=sorted(_PROBLEMS))
    args = parser.parse_args(argv)
    try:
        output = solve(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"cfsolutions: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0
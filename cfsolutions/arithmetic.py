"""Problems that reduce to integer arithmetic."""

_SMALL_COIN = 2020


def moves_to_one(n):
    """Moves (multiply by two or divide by six) needed to reach one, or -1 if impossible."""
    twos = threes = 0
    while n > 1:
        if n % 2 == 0:
            twos += 1
            n //= 2
        elif n % 3 == 0:
            threes += 1
            n //= 3
        else:
            return -1
    if threes < twos:
        return -1
    return 2 * threes - twos


def is_sum_of_2020_2021(n):
    """Return True if ``n`` is a sum of some 2020s and some 2021s."""
    quotient, remainder = divmod(n, _SMALL_COIN)
    return quotient >= remainder


def _small_divisors(n):
    i = 1
    while i * i <= n:
        if n % i == 0:
            yield i
        i += 1


def longest_divisor_interval(n):
    """Longest run of divisors up to the square root of ``n``, counted from the last run start."""
    last = 0
    current = best = 0
    for divisor in _small_divisors(n):
        if divisor == last + 1:
            current += 1
        else:
            last = divisor
            current = 1
        best = max(best, current)
    return best


def can_meet_requirement(n, m, p, q):
    """Decide whether an array of length ``n`` and sum ``m`` can have every ``p``-block sum ``q``."""
    return n % p != 0 or (n // p) * q == m


def odd_then_even(n, k):
    """The ``k``-th number when 1..n is listed odd numbers first, then even numbers."""
    odd_count = (n + 1) // 2
    if k > odd_count:
        return 2 * (k - odd_count)
    return 2 * k - 1


def can_split_watermelon(w):
    """Return True if ``w`` splits into two positive even parts."""
    return w % 2 == 0 and w != 2


def count_solved_problems(votes):
    """Count problems that at least two of three friends are sure about."""
    return sum(1 for vote in votes if sum(map(bool, vote)) >= 2)
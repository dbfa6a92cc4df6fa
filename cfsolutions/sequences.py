"""Problems over arrays, grids and permutations."""

from itertools import accumulate, islice, pairwise, takewhile


def min_groups(managers):
    """Minimum number of groups so that no one shares a group with a superior.

    ``managers`` holds each employee's 1-based manager, or -1 for none.
    """
    size = len(managers)
    parents = []
    for manager in managers:
        if manager != -1 and not 1 <= manager <= size:
            raise ValueError(f"manager {manager} is out of range")
        parents.append(manager - 1 if manager != -1 else -1)

    depth = [0] * size
    for start, _ in enumerate(parents):
        if depth[start]:
            continue
        path = []
        on_path = set()
        node = start
        while depth[node] == 0:
            if node in on_path:
                raise ValueError("management chain contains a cycle")
            path.append(node)
            on_path.add(node)
            if parents[node] == -1:
                node = -1
                break
            node = parents[node]
        base = 0 if node == -1 else depth[node]
        for level, member in enumerate(reversed(path), start=1):
            depth[member] = base + level
    return max(depth, default=0)


def min_coins_to_take(coins):
    """Fewest coins, largest first, whose sum exceeds what is left."""
    remaining = sum(coins)
    taken = 0
    count = 0
    for coin in sorted(coins, reverse=True):
        if remaining < taken:
            break
        taken += coin
        remaining -= coin
        count += 1
    return count


def min_removals_balanced(values, k):
    """Removals needed so sorted neighbours differ by at most ``k``."""
    if not values:
        raise ValueError("values must not be empty")
    best = current = 1
    for previous, following in pairwise(sorted(values)):
        current = current + 1 if abs(following - previous) <= k else 1
        best = max(best, current)
    return len(values) - best


def recover_permutation(grid):
    """Recover a permutation of 1..2n from the grid of its entries ``p[i + j]``."""
    if not grid:
        return []
    size = len(grid)
    present = {value for row in grid for value in row}
    missing = next((v for v in range(1, 2 * size + 1) if v not in present), None)
    head = [missing] if missing is not None else []
    return head + list(grid[0]) + [row[-1] for row in grid[1:]]


def median_check(values):
    """Check whether the first element can become the median.

    Returns the verdict together with the required count ``(n - 1) // 2``.
    """
    if not values:
        raise ValueError("values must not be empty")
    first = abs(values[0])
    at_least = sum(abs(v) >= first for v in values[1:])
    needed = (len(values) - 1) // 2
    return at_least >= needed, needed


def prefix_max_sums(values):
    """For k = 1..n, sum of the last k - 1 values plus the maximum of the rest."""
    prefix_max = list(accumulate(values, max, initial=-1))
    results = []
    suffix = 0
    for value, left_max in zip(reversed(values), reversed(prefix_max[:-1])):
        results.append(suffix + max(left_max, value))
        suffix += value
    return results


def shifted_permutation(n, x):
    """Permutation of 0..n-1 with ``x`` moved to the end."""
    tail = [x] if x != n else []
    return list(range(x)) + list(range(x + 1, n)) + tail


def count_valid_b(a, b, k):
    """Count arrays that fill the -1 entries of ``b`` so every ``a[i] + b[i]`` is equal."""
    if len(a) != len(b):
        raise ValueError("a and b must have the same length")
    if all(v == -1 for v in b):
        return min(a) + k - max(a) + 1
    sums = {x + y for x, y in zip(a, b) if y != -1}
    if len(sums) != 1:
        return 0
    (target,) = sums
    return int(all(0 <= target - x <= k for x, y in zip(a, b) if y == -1))


def count_kept(values):
    """Count values kept when each one within one of the last kept value is dropped."""
    remaining = iter(values)
    try:
        top = next(remaining)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    kept = 1
    for value in remaining:
        if value > top + 1:
            top = value
            kept += 1
    return kept


def max_earnings(prices, m):
    """Most money earned by carrying away at most ``m`` negatively priced items."""
    cheapest = islice(sorted(prices), m)
    return abs(sum(takewhile(lambda price: price < 0, cheapest)))
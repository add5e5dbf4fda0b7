"""Array problems from the 900-rated problem set."""

from collections import Counter
from functools import reduce
from itertools import groupby, pairwise
from math import gcd

_MAX_HALVING_ROUNDS = 60


def _as_list(values, minimum=0):
    items = list(values)
    if len(items) < minimum:
        raise ValueError(f"expected at least {minimum} value(s), got {len(items)}")
    return items


def _strictly_increasing(values):
    return all(a < b for a, b in pairwise(values))


def _halve(value):
    """Halve an integer, rounding towards zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def array_cloning(values):
    """Return the fewest clone and swap operations that make one copy all-equal."""
    items = _as_list(values, 1)
    n = len(items)
    largest = max(Counter(items).values())
    if largest == n:
        return 0
    operations = 0
    while 2 * largest < n:
        operations += largest + 1
        largest *= 2
    return operations + (n - largest) + 1


def balanced_round(values, k):
    """Return the fewest removals so that sorted neighbours differ by at most k."""
    items = sorted(_as_list(values, 1))
    longest = run = 1
    for previous, current in pairwise(items):
        run = 1 if current - previous > k else run + 1
        longest = max(longest, run)
    return len(items) - longest


def jellyfish_and_undertale(a, b, tools):
    """Return the longest time the bomb can be kept from exploding."""
    return b + sum(min(tool, a - 1) for tool in tools)


def luntik_subsequences(values):
    """Return how many subsequences sum to the total minus one."""
    items = list(values)
    zeros = items.count(0)
    ones = items.count(1)
    if ones == 0:
        return 0
    return ones << zeros


def mainak_and_array(values):
    """Return the largest last-minus-first after rotating one subsegment."""
    items = _as_list(values, 1)
    first, last = items[0], items[-1]
    candidates = [last - first]
    candidates.extend(value - first for value in items[1:])
    candidates.extend(last - value for value in items[:-1])
    candidates.extend(a - b for a, b in pairwise(items))
    return max(candidates)


def make_it_increasing(values):
    """Return the halvings needed to make the array strictly increasing, or -1."""
    items = list(values)
    operations = 0
    for _ in range(_MAX_HALVING_ROUNDS):
        changed = False
        halved = []
        for current, following in pairwise(items):
            if current >= following and current != 0:
                halved.append(_halve(current))
                operations += 1
                changed = True
            else:
                halved.append(current)
        if items:
            halved.append(items[-1])
        items = halved
        if not changed:
            break
    if not _strictly_increasing(items):
        return -1
    return operations


def make_it_zero(n):
    """Return (l, r) segment operations that turn any array of length n into zeros."""
    if n % 2 == 0:
        return [(1, n), (1, n)]
    return [(1, n - 1), (1, n - 1), (n - 1, n), (n - 1, n)]


def nit_destroys_the_universe(values):
    """Return the fewest operations that turn every value into zero."""
    nonzero_runs = sum(1 for nonzero, _ in groupby(values, key=lambda v: v != 0) if nonzero)
    return min(nonzero_runs, 2)


def permutation_swap(values):
    """Return the largest step k that lets the permutation be sorted by k-apart swaps."""
    items = _as_list(values, 1)
    return reduce(gcd, (abs(value - position) for position, value in enumerate(items, 1)), 0)


def strange_partition(values, x):
    """Return the smallest and largest beauty reachable by merging neighbours."""
    items = list(values)
    smallest = -(-sum(items) // x)
    largest = sum(-(-value // x) for value in items)
    return smallest, largest


def sum_of_medians(values, n, k):
    """Return the largest total of medians over k groups of n sorted values."""
    items = list(values)
    if len(items) != n * k:
        raise ValueError(f"expected {n * k} values, got {len(items)}")
    step = n // 2 + 1
    return sum(items[len(items) - step :: -step][:k])


def three_indices(values):
    """Return 1-based indices (i, j, k) of the first peak p[i] < p[j] > p[k], or None."""
    items = list(values)
    for position, (a, b, c) in enumerate(zip(items, items[1:], items[2:]), 1):
        if a < b > c:
            return position, position + 1, position + 2
    return None
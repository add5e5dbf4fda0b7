"""Array problems from the 800-rated problem set."""

from collections import Counter
from functools import reduce
from itertools import accumulate, combinations, pairwise
from math import gcd
from operator import xor


def _as_list(values, minimum=0):
    items = list(values)
    if len(items) < minimum:
        raise ValueError(f"expected at least {minimum} value(s), got {len(items)}")
    return items


def _is_sorted(values):
    return all(a <= b for a, b in pairwise(values))


def halloumi_boxes(values, k):
    """Return whether the boxes can be sorted by reversing segments of length up to k."""
    return _is_sorted(values) or k >= 2


def ambitious_kid(values):
    """Return the fewest unit steps needed to make the product of the values zero."""
    items = _as_list(values, 1)
    return min(abs(value) for value in items)


def array_coloring(values):
    """Return whether the values split into two non-empty colours with sums of equal parity."""
    return sum(values) % 2 == 0


def blank_space(values):
    """Return the length of the longest run of zeros in a 0/1 array."""
    groups = Counter()
    ones_seen = 0
    for value in values:
        if value == 1:
            ones_seen += 1
        elif value == 0:
            groups[ones_seen] += 1
    return max(groups.values(), default=0)


def desorting(values):
    """Return the fewest operations needed to make the array unsorted."""
    items = _as_list(values, 2)
    if not _is_sorted(items):
        return 0
    smallest_gap = min(b - a for a, b in pairwise(items))
    return smallest_gap // 2 + 1


def doremy_paint(values):
    """Return whether the array can be rearranged so that adjacent pair sums are all equal."""
    items = list(values)
    n = len(items)
    singles = sum(1 for count in Counter(items).values() if count == 1)
    if n == 2:
        return True
    if n == 3:
        return singles != 3
    if n > 3:
        return singles == 0
    return False


def goals_of_victory(efficiencies):
    """Return the efficiency of the team whose value is missing."""
    return -sum(efficiencies)


def daytona_cost(values, k):
    """Return whether some subsegment has k as its most common element."""
    return k in values


def jagged_swaps(values):
    """Return whether the permutation can be sorted by the allowed swaps."""
    items = _as_list(values, 1)
    return items[0] == 1


def line_trip(stations, x):
    """Return the smallest tank volume that makes the round trip to x possible."""
    items = _as_list(stations, 1)
    return_leg = (x - items[-1]) * 2
    gaps = [items[0], *(b - a for a, b in pairwise(items))]
    return max(return_leg, max(gaps))


def make_beautiful(values):
    """Return an ordering where no element equals the sum of those before it, or None."""
    ordered = _as_list(values, 2)[::-1]
    if ordered[0] == ordered[1]:
        ordered[1], ordered[-1] = ordered[-1], ordered[1]
    for prefix, following in zip(accumulate(ordered), ordered[1:]):
        if prefix == following:
            return None
    return ordered


def one_and_two(values):
    """Return the smallest split point with equal products on both sides, or -1."""
    items = _as_list(values, 1)
    twos = items.count(2)
    if twos % 2:
        return -1
    half = twos // 2
    seen = 0
    for position, value in enumerate(items, 1):
        if value == 2:
            seen += 1
        if seen == half:
            return position
    return -1


def sequence_game(values):
    """Return a sequence from which the game's filtering yields the given values."""
    items = _as_list(values, 1)
    result = [items[0]]
    for previous, current in pairwise(items):
        if current < previous:
            result.append(current)
        result.append(current)
    return result


def serval_and_mocha(values):
    """Return whether some pair of values has a greatest common divisor of at most 2."""
    return any(gcd(a, b) <= 2 for a, b in combinations(values, 2))


def twin_permutation(values):
    """Return the permutation whose element-wise sums with the given one are all n + 1."""
    items = list(values)
    total = len(items) + 1
    return [total - value for value in items]


def unit_array(values):
    """Return the fewest sign flips that make a +1/-1 array good."""
    items = list(values)
    n = len(items)
    ones = items.count(1)
    minus_ones = items.count(-1)
    if ones >= minus_ones:
        return minus_ones % 2
    if n == 3:
        return minus_ones
    if n % 2 == 0:
        return minus_ones - n // 2
    return minus_ones - 2


def we_need_the_zero(values):
    """Return x such that XOR of all values XOR x gives zero, or -1 if none exists."""
    items = _as_list(values, 1)
    combined = reduce(xor, items, 0)
    if len(items) % 2 == 1:
        return combined
    if combined == 0:
        return items[-1]
    return -1
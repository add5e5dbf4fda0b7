"""Number and string problems from the 900-rated problem set."""

from collections import Counter
from itertools import pairwise

_KNIGHT_DIRECTIONS = ((-1, -1), (1, -1), (-1, 1), (1, 1))
_DIVISIBLE_ENDINGS = (("0", "05"), ("5", "27"))


def bad_boy(n, m, i, j):
    """Return two cells (x1, y1, x2, y2) that make the walk from (i, j) longest."""
    return 1, 1, n, m


def comparison_string(s):
    """Return the fewest distinct values in an array compatible with the '<'/'>' string."""
    levels = [0] * (len(s) + 1)
    for i, sign in enumerate(s):
        if sign == "<":
            levels[i + 1] = levels[i] + 1
    for i, sign in reversed(list(enumerate(s))):
        if sign == ">":
            levels[i] = max(levels[i], levels[i + 1] + 1)
    return len(set(levels))


def deletive_editing(s, t):
    """Return whether t can be obtained from s by deleting first occurrences of letters."""
    remaining = Counter(t)
    kept = []
    for letter in reversed(s):
        if remaining[letter] > 0:
            remaining[letter] -= 1
            kept.append(letter)
    return "".join(reversed(kept)) == t


def exciting_bets(a, b):
    """Return the largest reachable gcd and the fewest moves to reach it."""
    a, b = max(a, b), min(a, b)
    if a == b:
        return 0, 0
    divisor = a - b
    remainder = b % divisor
    return divisor, min(remainder, divisor - remainder)


def _attacked(a, b, position):
    x, y = position
    return {
        (x + dx * p, y + dy * q)
        for dx, dy in _KNIGHT_DIRECTIONS
        for p, q in ((a, b), (b, a))
    }


def forked(a, b, king, queen):
    """Return how many squares attack both the king and the queen with an (a, b) knight."""
    return len(_attacked(a, b, king) & _attacked(a, b, queen))


def game01(s):
    """Return 'DA' if the first player wins the removal game, otherwise 'NET'."""
    moves = 0
    while True:
        position = next((i for i, (x, y) in enumerate(pairwise(s)) if x != y), None)
        if position is None:
            break
        s = s[:position] + s[position + 2 :]
        moves += 1
    return "DA" if moves % 2 else "NET"


def longest_divisors_interval(n):
    """Return the largest r such that every integer from 1 to r divides n."""
    if n == 0:
        raise ValueError("n must be non-zero")
    divisor = 1
    while n % divisor == 0:
        divisor += 1
    return divisor - 1


def make_ap(a, b, c):
    """Return whether multiplying one of a, b, c by a positive integer yields an arithmetic progression."""
    return (
        2 * b == a + c
        or (2 * b - c > 0 and (2 * b - c) % a == 0)
        or ((a + c) % 2 == 0 and ((a + c) // 2) % b == 0)
        or (2 * b - a > 0 and (2 * b - a) % c == 0)
    )


def divisible_by_25(s):
    """Return the fewest digit deletions that make the number divisible by 25, or -1."""
    if len(s) < 2:
        raise ValueError("number must have at least two digits")
    best = None
    for last, partners in _DIVISIBLE_ENDINGS:
        last_position = s.rfind(last)
        if last_position < 0:
            continue
        partner_position = max(s.rfind(ch, 0, last_position) for ch in partners)
        if partner_position >= 0:
            cost = len(s) - partner_position - 2
            best = cost if best is None else min(best, cost)
    return -1 if best is None else best


def has_odd_divisor(n):
    """Return whether n has an odd divisor greater than one."""
    return (n & (n - 1)) != 0


def vasilije_in_cacak(n, k, x):
    """Return whether k distinct integers from 1 to n can sum to x."""
    smallest = k * (k + 1) // 2
    largest = n * (n + 1) // 2 - (n - k) * (n - k + 1) // 2
    return smallest <= x <= largest


def multiply_by_two_divide_by_six(n):
    """Return the fewest multiply-by-2 or divide-by-6 moves to reach 1, or -1."""
    threes = 0
    twos = 0
    while n > 0 and n % 3 == 0:
        threes += 1
        n //= 3
    while n > 0 and n % 2 == 0:
        twos += 1
        n //= 2
    if n > 1 or twos > threes:
        return -1
    return threes + (threes - twos)
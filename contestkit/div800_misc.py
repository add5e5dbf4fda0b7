"""Number and string problems from the 800-rated problem set."""

from bisect import bisect_right
from math import gcd

_ROUND_NUMBERS = tuple(
    sorted(digit * 10**power for power in range(6) for digit in range(1, 10))
)
_GRID_SIZE = 10


def raspberries(values, k):
    """Return the fewest increments that make the product of the values divisible by k."""
    items = list(values)
    if not items:
        raise ValueError("expected at least one value")
    if k == 4:
        if any(value % 4 == 0 for value in items):
            return 0
        evens = sum(1 for value in items if value % 2 == 0)
        if evens >= 2:
            return 0
        if evens == 1:
            return 1
        if any(value % 4 == 3 for value in items):
            return 1
        return 2
    if any(value % k == 0 for value in items):
        return 0
    return min(k - value % k for value in items)


def buttons(a, b, c):
    """Return 'First' if Anna wins the button game, otherwise 'Second'."""
    anna = a + (c + 1) // 2
    katie = b + c // 2
    return "First" if anna > katie else "Second"


def coins(n, k):
    """Return whether n burles can be paid with coins of 2 and k."""
    return n % gcd(2, k) == 0


def cover_in_water(cells):
    """Return the fewest water pours needed to fill every empty cell."""
    if "..." in cells:
        return 2
    return cells.count(".")


def dont_try_to_count(x, s):
    """Return how many doublings of x make s a substring, or -1 if five are not enough."""
    for doublings in range(6):
        if s in x:
            return doublings
        x += x
    return -1


def extremely_round(n):
    """Return how many numbers from 1 to n have exactly one non-zero digit."""
    return bisect_right(_ROUND_NUMBERS, n)


def forbidden_integer(n, k, x):
    """Return summands from 1..k, avoiding x, that add up to n, or None if impossible."""
    if x != 1:
        return [1] * n
    if k == 1 or (k == 2 and n % 2 == 1):
        return None
    if n % 2 == 0:
        return [2] * (n // 2)
    return [2] * ((n - 3) // 2) + [3]


def game_with_integers(n):
    """Return the winner of the game: 'First' or 'Second'."""
    remainder = n % 3
    if remainder == 0:
        # The second player can always restore divisibility by three.
        return "Second"
    return "First"


def grasshopper(n, x):
    """Return jumps summing to n where no jump is divisible by x."""
    if n % x != 0:
        return [n]
    return [n - (x + 1), x + 1]


def prepend_and_append(s):
    """Return the shortest possible length of the original binary string."""
    size = len(s)
    for front, back in zip(s, reversed(s)):
        if {front, back} != {"0", "1"}:
            break
        size -= 2
    return max(size, 0)


def target_practice(grid):
    """Return the score of the arrows marked 'X' on a 10x10 target."""
    rows = list(grid)
    if len(rows) != _GRID_SIZE or any(len(row) != _GRID_SIZE for row in rows):
        raise ValueError("target must be a 10x10 grid")
    last = _GRID_SIZE - 1
    return sum(
        min(i, j, last - i, last - j) + 1
        for i, row in enumerate(rows)
        for j, cell in enumerate(row)
        if cell == "X"
    )
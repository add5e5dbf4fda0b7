"""Command-line runner that feeds contest-style input to the problem solvers."""

import argparse
import sys

from contestkit import div800_arrays as a800
from contestkit import div800_misc as m800
from contestkit import div900_arrays as a900
from contestkit import div900_misc as m900

_GRID_CELLS = 100
_GRID_WIDTH = 10
_YES = "YES"
_NO = "NO"


class _Tokens:
    """Whitespace-separated tokens of an input text, consumed in order."""

    def __init__(self, text):
        self._words = iter(text.split())

    def word(self):
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def number(self):
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count):
        return [self.number() for _ in range(count)]

    def chars(self, count):
        """Collect exactly count non-whitespace characters, however they are spaced."""
        collected = ""
        while len(collected) < count:
            collected += self.word()
        if len(collected) != count:
            raise ValueError(f"expected {count} characters, got more")
        return collected


def _yes_no(flag):
    """Render a verdict in contest form."""
    if bool(flag):
        return _YES
    return _NO


def _join(values):
    return " ".join(map(str, values))


def _counted(values):
    return f"{len(values)}\n{_join(values)}"


def _yes_counted(values):
    return _NO if values is None else f"{_YES}\n{_counted(values)}"


def _yes_listed(values):
    return _NO if values is None else f"{_YES}\n{_join(values)}"


def _segments(pairs):
    return "\n".join([str(len(pairs)), *(_join(pair) for pair in pairs)])


def _sized(func, fmt=str):
    """Case: n, then n integers."""

    def handle(tokens):
        n = tokens.number()
        return fmt(func(tokens.numbers(n)))

    return handle


def _sized_with(func, fmt=str):
    """Case: n and a parameter, then n integers."""

    def handle(tokens):
        n, parameter = tokens.numbers(2)
        return fmt(func(tokens.numbers(n), parameter))

    return handle


def _scalars(func, count, fmt=str):
    """Case: a fixed number of integers."""

    def handle(tokens):
        return fmt(func(*tokens.numbers(count)))

    return handle


def _sized_word(func, fmt=str):
    """Case: a length, then a word."""

    def handle(tokens):
        tokens.number()
        return fmt(func(tokens.word()))

    return handle


def _word(func, fmt=str):
    def handle(tokens):
        return fmt(func(tokens.word()))

    return handle


def _goals_of_victory(tokens):
    n = tokens.number()
    return str(a800.goals_of_victory(tokens.numbers(n - 1)))


def _dont_try_to_count(tokens):
    tokens.numbers(2)
    x = tokens.word()
    s = tokens.word()
    return str(m800.dont_try_to_count(x, s))


def _target_practice(tokens):
    cells = tokens.chars(_GRID_CELLS)
    rows = [cells[start : start + _GRID_WIDTH] for start in range(0, _GRID_CELLS, _GRID_WIDTH)]
    return str(m800.target_practice(rows))


def _jellyfish(tokens):
    a, b, n = tokens.numbers(3)
    return str(a900.jellyfish_and_undertale(a, b, tokens.numbers(n)))


def _make_it_zero(tokens):
    n = tokens.number()
    tokens.numbers(n)
    return _segments(a900.make_it_zero(n))


def _sum_of_medians(tokens):
    n, k = tokens.numbers(2)
    return str(a900.sum_of_medians(tokens.numbers(n * k), n, k))


def _deletive_editing(tokens):
    s = tokens.word()
    t = tokens.word()
    return _yes_no(m900.deletive_editing(s, t))


def _forked(tokens):
    a, b = tokens.numbers(2)
    king = tuple(tokens.numbers(2))
    queen = tuple(tokens.numbers(2))
    return str(m900.forked(a, b, king, queen))


# name -> (handler for one case, whether input starts with a case count)
_PROBLEMS = {
    "raspberries": (_sized_with(m800.raspberries), True),
    "halloumi_boxes": (_sized_with(a800.halloumi_boxes, _yes_no), True),
    "ambitious_kid": (_sized(a800.ambitious_kid), False),
    "array_coloring": (_sized(a800.array_coloring, _yes_no), True),
    "blank_space": (_sized(a800.blank_space), True),
    "buttons": (_scalars(m800.buttons, 3), True),
    "coins": (_scalars(m800.coins, 2, _yes_no), True),
    "cover_in_water": (_sized_word(m800.cover_in_water), True),
    "desorting": (_sized(a800.desorting), True),
    "dont_try_to_count": (_dont_try_to_count, True),
    "doremy_paint": (_sized(a800.doremy_paint, _yes_no), True),
    "extremely_round": (_scalars(m800.extremely_round, 1), True),
    "forbidden_integer": (_scalars(m800.forbidden_integer, 3, _yes_counted), True),
    "game_with_integers": (_scalars(m800.game_with_integers, 1), True),
    "goals_of_victory": (_goals_of_victory, True),
    "grasshopper": (_scalars(m800.grasshopper, 2, _counted), True),
    "daytona_cost": (_sized_with(a800.daytona_cost, _yes_no), True),
    "jagged_swaps": (_sized(a800.jagged_swaps, _yes_no), True),
    "line_trip": (_sized_with(a800.line_trip), True),
    "make_beautiful": (_sized(a800.make_beautiful, _yes_listed), True),
    "one_and_two": (_sized(a800.one_and_two), True),
    "prepend_and_append": (_sized_word(m800.prepend_and_append), True),
    "sequence_game": (_sized(a800.sequence_game, _counted), True),
    "serval_and_mocha": (_sized(a800.serval_and_mocha, _yes_no), True),
    "target_practice": (_target_practice, True),
    "twin_permutation": (_sized(a800.twin_permutation, _join), True),
    "unit_array": (_sized(a800.unit_array), True),
    "we_need_the_zero": (_sized(a800.we_need_the_zero), True),
    "array_cloning": (_sized(a900.array_cloning), True),
    "bad_boy": (_scalars(m900.bad_boy, 4, _join), True),
    "balanced_round": (_sized_with(a900.balanced_round), True),
    "comparison_string": (_sized_word(m900.comparison_string), True),
    "deletive_editing": (_deletive_editing, True),
    "exciting_bets": (_scalars(m900.exciting_bets, 2, _join), True),
    "forked": (_forked, True),
    "game01": (_word(m900.game01), True),
    "jellyfish_and_undertale": (_jellyfish, True),
    "longest_divisors_interval": (_scalars(m900.longest_divisors_interval, 1), True),
    "luntik_subsequences": (_sized(a900.luntik_subsequences), True),
    "mainak_and_array": (_sized(a900.mainak_and_array), True),
    "make_ap": (_scalars(m900.make_ap, 3, _yes_no), True),
    "make_it_increasing": (_sized(a900.make_it_increasing), True),
    "make_it_zero": (_make_it_zero, True),
    "divisible_by_25": (_word(m900.divisible_by_25), True),
    "nit_destroys_the_universe": (_sized(a900.nit_destroys_the_universe), True),
    "has_odd_divisor": (_scalars(m900.has_odd_divisor, 1, _yes_no), True),
    "permutation_swap": (_sized(a900.permutation_swap), True),
    "strange_partition": (_sized_with(a900.strange_partition, _join), True),
    "sum_of_medians": (_sum_of_medians, True),
    "vasilije_in_cacak": (_scalars(m900.vasilije_in_cacak, 3, _yes_no), True),
    "multiply_by_two_divide_by_six": (_scalars(m900.multiply_by_two_divide_by_six, 1), True),
    "three_indices": (_sized(a900.three_indices, _yes_listed), True),
}


def solve(name, text):
    """Run the named problem on contest-format input text and return its output."""
    try:
        handler, has_case_count = _PROBLEMS[name]
    except KeyError:
        raise ValueError(f"unknown problem {name!r}") from None
    tokens = _Tokens(text)
    cases = tokens.number() if has_case_count else 1
    answers = [handler(tokens) for _ in range(cases)]
    return "".join(f"{answer}\n" for answer in answers)


def main(argv=None):
    """Read input for a problem from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest problem from its input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS), help="problem to solve")
    parser.add_argument(
        "input", nargs="?", default="-", help="input file, or '-' for standard input"
    )
    args = parser.parse_args(argv)

    if args.input == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as error:
            print(f"contestkit: {error}", file=sys.stderr)
            return 1

    try:
        output = solve(args.problem, text)
    except ValueError as error:
        print(f"contestkit: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
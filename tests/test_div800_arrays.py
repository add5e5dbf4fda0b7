from functools import reduce
from itertools import accumulate
from operator import xor

import pytest

from contestkit.div800_arrays import (
    ambitious_kid,
    array_coloring,
    blank_space,
    daytona_cost,
    desorting,
    doremy_paint,
    goals_of_victory,
    halloumi_boxes,
    jagged_swaps,
    line_trip,
    make_beautiful,
    one_and_two,
    sequence_game,
    serval_and_mocha,
    twin_permutation,
    unit_array,
    we_need_the_zero,
)


def _filter_game(sequence):
    kept = [sequence[0]]
    for previous, current in zip(sequence, sequence[1:]):
        if current >= previous:
            kept.append(current)
    return kept


def test_halloumi_sorted_input_is_always_possible():
    assert halloumi_boxes([1, 2, 3, 4], 1) is True


def test_halloumi_unsorted_needs_k_at_least_two():
    assert halloumi_boxes([3, 1, 2], 1) is False
    assert halloumi_boxes([3, 1, 2], 2) is True


def test_ambitious_kid_zero_present():
    assert ambitious_kid([5, 0, -7]) == 0


def test_ambitious_kid_uses_absolute_values():
    assert ambitious_kid([-3, 8, 4]) == 3


def test_ambitious_kid_empty_raises():
    with pytest.raises(ValueError):
        ambitious_kid([])


@pytest.mark.parametrize("values", [[1, 1], [2, 3, 5], [4]])
def test_array_coloring_follows_sum_parity(values):
    assert array_coloring(values) is (sum(values) % 2 == 0)


def test_blank_space_no_zeros():
    assert blank_space([1, 1, 1]) == 0


def test_blank_space_all_zeros():
    assert blank_space([0, 0, 0, 0]) == 4


def test_blank_space_picks_longest_run():
    assert blank_space([0, 1, 0, 0, 0, 1, 0, 0]) == 3


def test_desorting_unsorted_is_zero():
    assert desorting([5, 1, 9]) == 0


def test_desorting_equal_neighbours_need_one():
    assert desorting([4, 4, 10]) == 1


def test_desorting_too_short_raises():
    with pytest.raises(ValueError):
        desorting([1])


def test_doremy_paint_pair_always_works():
    assert doremy_paint([1, 2]) is True


def test_doremy_paint_three_distinct_fails():
    assert doremy_paint([1, 2, 3]) is False


def test_doremy_paint_larger_without_singles():
    assert doremy_paint([1, 1, 2, 2]) is True
    assert doremy_paint([1, 1, 2, 2, 3]) is False


def test_goals_of_victory_total_is_zero():
    efficiencies = [3, -4, 5]
    missing = goals_of_victory(efficiencies)
    assert sum(efficiencies) + missing == 0


def test_daytona_cost_membership():
    assert daytona_cost([1, 2, 3], 2) is True
    assert daytona_cost([1, 2, 3], 4) is False


def test_jagged_swaps_first_element_decides():
    assert jagged_swaps([1, 3, 2]) is True
    assert jagged_swaps([2, 1, 3]) is False


def test_jagged_swaps_empty_raises():
    with pytest.raises(ValueError):
        jagged_swaps([])


@pytest.mark.parametrize(
    "stations, x",
    [([1, 2, 4], 5), ([3], 10), ([7], 8), ([1, 8], 9)],
)
def test_line_trip_covers_every_leg(stations, x):
    volume = line_trip(stations, x)
    gaps = [stations[0]] + [b - a for a, b in zip(stations, stations[1:])]
    candidates = gaps + [2 * (x - stations[-1])]
    assert all(volume >= leg for leg in candidates)
    assert volume in candidates


def test_line_trip_empty_raises():
    with pytest.raises(ValueError):
        line_trip([], 3)


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [3, 3, 6], [1, 1, 2, 5]])
def test_make_beautiful_result_is_beautiful(values):
    result = make_beautiful(values)
    assert result is not None
    assert sorted(result) == sorted(values)
    assert all(p != nxt for p, nxt in zip(accumulate(result), result[1:]))


def test_make_beautiful_all_equal_is_impossible():
    assert make_beautiful([5, 5, 5]) is None


def test_make_beautiful_too_short_raises():
    with pytest.raises(ValueError):
        make_beautiful([1])


def test_one_and_two_odd_twos():
    assert one_and_two([2, 1, 1]) == -1


def test_one_and_two_no_twos_splits_after_first():
    assert one_and_two([1, 1, 1]) == 1


@pytest.mark.parametrize("values", [[2, 2, 1, 2, 1, 2], [1, 2, 1, 2, 1], [2, 2]])
def test_one_and_two_split_balances_twos(values):
    k = one_and_two(values)
    assert values[:k].count(2) == values[k:].count(2)
    assert 1 <= k < len(values)


@pytest.mark.parametrize("values", [[4, 6, 3], [1, 2, 3], [5, 4, 3, 2, 1], [7]])
def test_sequence_game_round_trip(values):
    result = sequence_game(values)
    assert _filter_game(result) == values
    assert len(result) <= 2 * len(values)


def test_serval_and_mocha():
    assert serval_and_mocha([2, 4, 6]) is True
    assert serval_and_mocha([3, 6, 9]) is False


@pytest.mark.parametrize("values", [[1], [2, 1, 3], [4, 1, 3, 2]])
def test_twin_permutation_sums(values):
    twin = twin_permutation(values)
    assert sorted(twin) == sorted(values)
    assert {a + b for a, b in zip(values, twin)} == {len(values) + 1}


def test_unit_array_already_good():
    assert unit_array([1, 1, -1, -1]) == 0


def test_unit_array_odd_negatives_need_one():
    assert unit_array([1, 1, -1]) == 1


def test_unit_array_too_many_negatives():
    assert unit_array([-1, -1, -1, -1]) == 2


@pytest.mark.parametrize("values", [[1, 2, 3], [5], [4, 7, 2, 9, 1]])
def test_we_need_the_zero_odd_length(values):
    x = we_need_the_zero(values)
    assert reduce(xor, (v ^ x for v in values), 0) == 0


def test_we_need_the_zero_even_length_nonzero_xor():
    assert we_need_the_zero([1, 2]) == -1


def test_we_need_the_zero_even_length_zero_xor_returns_last():
    assert we_need_the_zero([3, 3]) == 3


def test_we_need_the_zero_empty_raises():
    with pytest.raises(ValueError):
        we_need_the_zero([])
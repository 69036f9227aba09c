from math import factorial

import pytest

from algokit.dynamic_programming import (
    MOD,
    best_team_score,
    combination_sum4,
    count_arrangement,
    count_special_numbers,
    job_scheduling,
    length_of_lis,
    max_envelopes,
    max_two_events,
    num_factored_binary_trees,
    paint_grid_ways,
    valid_partition,
)


def test_job_scheduling_disjoint_jobs_take_everything():
    profits = [10, 20, 30]
    assert job_scheduling([1, 3, 5], [3, 5, 7], profits) == sum(profits)


def test_job_scheduling_overlapping_jobs_pick_best():
    profits = [5, 50, 7]
    assert job_scheduling([1, 1, 1], [10, 9, 8], profits) == max(profits)


def test_job_scheduling_single_job():
    assert job_scheduling([2], [4], [17]) == 17


def test_job_scheduling_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        job_scheduling([1, 2], [3], [4, 5])


def test_job_scheduling_rejects_empty_interval():
    with pytest.raises(ValueError):
        job_scheduling([3], [3], [1])


def test_paint_grid_single_row():
    assert paint_grid_ways(1) == 12


def test_paint_grid_large():
    assert paint_grid_ways(5000) == 30228214


@pytest.mark.parametrize("n", [10, 50, 200])
def test_paint_grid_within_modulus(n):
    assert 0 <= paint_grid_ways(n) < MOD


def test_paint_grid_rejects_negative():
    with pytest.raises(ValueError):
        paint_grid_ways(-1)


def test_best_team_same_age_takes_everyone():
    scores = [4, 9, 2, 7]
    assert best_team_score(scores, [30] * len(scores)) == sum(scores)


def test_best_team_bounds():
    scores = [4, 5, 6, 5]
    ages = [2, 1, 2, 1]
    result = best_team_score(scores, ages)
    assert max(scores) <= result <= sum(scores)


def test_best_team_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        best_team_score([1, 2], [1])


def test_valid_partition_concatenation_stays_valid():
    pair = [4, 4]
    triple = [7, 8, 9]
    assert valid_partition(pair)
    assert valid_partition(triple)
    assert valid_partition(pair + triple)


def test_valid_partition_single_element_fails():
    assert not valid_partition([7])


@pytest.mark.parametrize("n", range(1, 11))
def test_special_numbers_all_single_digits(n):
    assert count_special_numbers(n) == n


def test_special_numbers_steps_match_distinct_digits():
    for m in range(1, 300):
        text = str(m)
        step = count_special_numbers(m) - count_special_numbers(m - 1)
        assert step == int(len(set(text)) == len(text))


def test_lis_of_sorted_distinct_is_length():
    values = [1, 3, 8, 20, 41]
    assert length_of_lis(values) == len(values)


def test_lis_decreasing_matches_single():
    assert length_of_lis([9, 7, 4, 1]) == length_of_lis([5])


def test_lis_grows_by_appending_maximum():
    values = [10, 9, 2, 5, 3, 7, 101, 18]
    assert length_of_lis(values + [max(values) + 1]) == length_of_lis(values) + 1


def test_envelopes_chain_nests_fully():
    chain = [[i, i] for i in range(1, 6)]
    assert max_envelopes(chain) == len(chain)


def test_envelopes_same_width_do_not_nest():
    assert max_envelopes([[3, 1], [3, 5], [3, 9]]) == max_envelopes([[3, 4]])


def test_combination_sum_fibonacci_recurrence():
    for target in range(2, 20):
        assert combination_sum4([1, 2], target) == (
            combination_sum4([1, 2], target - 1) + combination_sum4([1, 2], target - 2)
        )


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum4([0, 1], 3)


@pytest.mark.parametrize("n", [1, 2, 3])
def test_count_arrangement_small(n):
    assert count_arrangement(n) == n


@pytest.mark.parametrize("n", range(1, 9))
def test_count_arrangement_bounds(n):
    assert 1 <= count_arrangement(n) <= factorial(n)


def test_factored_trees_primes_are_leaves():
    primes = [2, 3, 5, 7, 11]
    assert num_factored_binary_trees(primes) == len(primes)


def test_factored_trees_example():
    assert num_factored_binary_trees([2, 4]) == 3


def test_factored_trees_within_modulus():
    values = [2 ** i for i in range(1, 40)]
    assert 0 <= num_factored_binary_trees(values) < MOD


def test_two_events_single():
    assert max_two_events([[1, 3, 5]]) == 5


def test_two_events_disjoint_sum():
    assert max_two_events([[1, 2, 4], [3, 4, 6]]) == 4 + 6


def test_two_events_touching_count_as_overlap():
    assert max_two_events([[1, 3, 4], [3, 5, 6]]) == max(4, 6)
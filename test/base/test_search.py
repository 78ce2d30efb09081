import numpy as np
import pytest

from sortsearch import (
    InvalidArgument,
    by_key,
    find_first,
    find_insertion_point,
    find_last,
    reverse_order,
    search,
    search_recursive,
)

ARR = [2, 4, 6, 8, 10, 12, 14]
WITH_DUPLICATES = [1, 2, 2, 2, 3, 4, 4, 5]
SORTED_ARR = [1, 3, 5, 7, 9]
STRINGS = ["apple", "banana", "cherry", "date", "elderberry"]


class TestSearch:
    @pytest.mark.parametrize("search_fn", [search, search_recursive])
    @pytest.mark.parametrize(
        ("seq", "target", "expected"),
        [
            (ARR, 10, 4),
            (ARR, 5, -1),
            (ARR, 2, 0),
            (ARR, 14, 6),
            (ARR, 1, -1),
            (ARR, 15, -1),
            ([], 5, -1),
            ([5], 5, 0),
            ([5], 3, -1),
            ([3, 7], 3, 0),
            ([3, 7], 7, 1),
            ([3, 7], 5, -1),
        ],
    )
    def test_scenarios(self, search_fn, seq, target, expected) -> None:
        assert search_fn(seq, target) == expected
        assert search_fn(tuple(seq), target) == expected

    @pytest.mark.parametrize("search_fn", [search, search_recursive, find_insertion_point])
    def test_none_raises(self, search_fn) -> None:
        with pytest.raises(InvalidArgument):
            search_fn(None, 5)
        with pytest.raises(ValueError):
            search_fn(None, 5)

    def test_duplicates_return_some_occurrence(self) -> None:
        index = search(WITH_DUPLICATES, 2)
        assert 1 <= index <= 3
        assert search_recursive(WITH_DUPLICATES, 2) == index

    def test_strings(self) -> None:
        assert search(STRINGS, "cherry") == 2
        assert search(STRINGS, "grape") == -1
        assert search_recursive(STRINGS, "elderberry") == 4

    def test_comparator(self) -> None:
        descending = [14, 12, 10, 8, 6, 4, 2]
        assert search(descending, 10, cmp=reverse_order()) == 2
        assert search(descending, 9, cmp=reverse_order()) == -1
        assert search_recursive(descending, 2, cmp=reverse_order()) == 6
        records = [("a", 1), ("b", 3), ("c", 3), ("d", 7)]
        assert search(records, 7, cmp=by_key(lambda r: r[1])) == 3
        assert search(records, 2, cmp=by_key(lambda r: r[1])) == -1

    def test_comparator_with_arbitrary_magnitude(self) -> None:
        seq = [1.5, 2.5, 7.25, 9.0]
        assert search(seq, 7.25, cmp=lambda a, b: a - b) == 2
        assert search_recursive(seq, 7.0, cmp=lambda a, b: a - b) == -1

    def test_comparator_error_propagates(self) -> None:
        def broken_cmp(a, b):
            raise KeyError("broken")

        with pytest.raises(KeyError):
            search([1, 2, 3], 2, cmp=broken_cmp)

    def test_range(self) -> None:
        seq = range(0, 10**12, 7)
        assert search(seq, 7 * 123456789) == 123456789
        assert search(seq, 7 * 123456789 + 1) == -1
        assert find_insertion_point(seq, 15) == 3

    def test_input_not_mutated(self) -> None:
        seq = list(WITH_DUPLICATES)
        for fn in (search, search_recursive, find_first, find_last, find_insertion_point):
            first = fn(seq, 4)
            assert fn(seq, 4) == first
        assert seq == WITH_DUPLICATES


class TestFindFirstLast:
    def test_scenarios(self) -> None:
        assert find_first(WITH_DUPLICATES, 2) == 1
        assert find_last(WITH_DUPLICATES, 2) == 3
        assert find_first(WITH_DUPLICATES, 4) == 5
        assert find_last(WITH_DUPLICATES, 4) == 6
        assert find_first(WITH_DUPLICATES, 1) == 0
        assert find_last(WITH_DUPLICATES, 5) == 7
        assert find_first(WITH_DUPLICATES, 6) == -1
        assert find_last(WITH_DUPLICATES, 0) == -1

    def test_none_and_empty_are_not_found(self) -> None:
        assert find_first(None, 5) == -1
        assert find_last(None, 5) == -1
        assert find_first([], 5) == -1
        assert find_last([], 5) == -1

    def test_all_equal(self) -> None:
        seq = [3] * 9
        assert find_first(seq, 3) == 0
        assert find_last(seq, 3) == 8

    def test_comparator(self) -> None:
        words = ["a", "bb", "cc", "dd", "eee"]
        assert find_first(words, 2, cmp=by_key(len)) == 1
        assert find_last(words, 2, cmp=by_key(len)) == 3


class TestFindInsertionPoint:
    @pytest.mark.parametrize(
        ("target", "expected"),
        [(0, 0), (1, 0), (2, 1), (4, 2), (5, 2), (9, 4), (10, 5)],
    )
    def test_scenarios(self, target, expected) -> None:
        assert find_insertion_point(SORTED_ARR, target) == expected

    def test_empty(self) -> None:
        assert find_insertion_point([], 42) == 0

    def test_leftmost_among_duplicates(self) -> None:
        assert find_insertion_point(WITH_DUPLICATES, 2) == 1
        assert find_insertion_point(WITH_DUPLICATES, 4) == 5

    def test_strings(self) -> None:
        assert find_insertion_point(STRINGS, "blueberry") == 2
        assert find_insertion_point(STRINGS, "zucchini") == 5


def test_random_against_linear_scan() -> None:
    for _ in range(1000):
        length = np.random.randint(0, 40)
        seq = sorted(np.random.randint(-10, 11, size=length).tolist())
        target = np.random.randint(-12, 13)
        occurrences = [i for i, x in enumerate(seq) if x == target]
        index = search(seq, target)
        if occurrences:
            assert seq[index] == target
            assert find_first(seq, target) == occurrences[0]
            assert find_last(seq, target) == occurrences[-1]
            first = find_first(seq, target)
            assert first == 0 or seq[first - 1] < target
            last = find_last(seq, target)
            assert last == len(seq) - 1 or seq[last + 1] > target
        else:
            assert index == -1
            assert find_first(seq, target) == -1
            assert find_last(seq, target) == -1
        assert search_recursive(seq, target) == index
        point = find_insertion_point(seq, target)
        assert 0 <= point <= len(seq)
        assert all(x < target for x in seq[:point])
        assert all(x >= target for x in seq[point:])

# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for list helpers."""

import pytest

from ultra_utils.array_utils import (
    chunk,
    compact,
    count_by,
    difference,
    drop,
    drop_last,
    fill,
    find_index,
    find_last_index,
    flatten_deep,
    flatten_list,
    group_by,
    intersection,
    max_value,
    mean,
    median,
    min_value,
    partition,
    range_list,
    sample,
    sample_size,
    shuffle,
    sort_by,
    sum_values,
    take,
    take_last,
    transpose,
    union,
    unique,
    zip_lists,
)


class TestUnique:
    """Tests for unique."""

    def test_first_seen_order(self):
        assert unique([3, 1, 3, 2, 1]) == [3, 1, 2]

    def test_unhashable_elements(self):
        assert unique([{"a": 1}, [1], {"a": 1}, [1], [2]]) == [{"a": 1}, [1], [2]]

    def test_each_element_once(self):
        data = ["a", "b", "a", "c", "b", "a"]
        result = unique(data)
        assert len(result) == len(set(data))
        assert all(result.count(item) == 1 for item in result)

    def test_input_untouched(self):
        data = [1, 1, 2]
        unique(data)
        assert data == [1, 1, 2]

    def test_booleans_distinct_from_numbers(self):
        result = unique([1, True, 0, False, 1.0, True])
        assert [(type(x), x) for x in result] == [(int, 1), (bool, True), (int, 0), (bool, False)]


class TestShape:
    """Tests for chunk, shuffle and flattening."""

    def test_chunk_even(self):
        assert chunk([1, 2, 3, 4, 5, 6], 2) == [[1, 2], [3, 4], [5, 6]]

    def test_chunk_remainder(self):
        assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
        assert chunk([], 3) == []

    @pytest.mark.parametrize("size", [0, -1])
    def test_chunk_invalid_size(self, size):
        with pytest.raises(ValueError):
            chunk([1, 2], size)

    def test_shuffle_keeps_elements(self):
        data = list(range(20))
        result = shuffle(data)
        assert sorted(result) == data
        assert data == list(range(20))

    def test_flatten_one_level(self):
        assert flatten_list([1, [2, [3]], (4, 5)]) == [1, 2, [3], 4, 5]

    def test_flatten_deep(self):
        assert flatten_deep([1, [2, [3, [4]]], 5]) == [1, 2, 3, 4, 5]


class TestSetAlgebra:
    """Tests for intersection, difference, union and compact."""

    def test_intersection(self):
        assert intersection([1, 2, 3, 2], [2, 3, 4], [3, 2]) == [2, 3]

    def test_difference(self):
        assert difference([1, 2, 3, 4, 1], [2], [4]) == [1, 3, 1]

    def test_union(self):
        assert union([1, 2], [2, 3], [3, 4]) == [1, 2, 3, 4]

    def test_union_with_dicts(self):
        assert union([{"a": 1}], [{"a": 1}, {"b": 2}]) == [{"a": 1}, {"b": 2}]

    def test_booleans_in_set_algebra(self):
        assert [type(x) for x in union([1, 0], [True, False])] == [int, int, bool, bool]
        assert intersection([1, True], [True])[0] is True
        assert [type(x) for x in difference([0, False, 1], [False])] == [int, int]

    def test_compact(self):
        assert compact([0, 1, "", "a", None, False, [], [0], {}]) == [1, "a", [0]]


class TestSlicing:
    """Tests for take/drop and zipping."""

    def test_take(self):
        assert take([1, 2, 3]) == [1]
        assert take([1, 2, 3], 2) == [1, 2]
        assert take([1, 2, 3], -1) == []

    def test_take_last(self):
        assert take_last([1, 2, 3], 2) == [2, 3]
        assert take_last([1, 2, 3], 0) == []

    def test_drop(self):
        assert drop([1, 2, 3], 2) == [3]
        assert drop_last([1, 2, 3], 2) == [1]
        assert drop_last([1, 2, 3], 0) == [1, 2, 3]

    def test_zip_pads_with_none(self):
        assert zip_lists([1, 2, 3], ["a", "b"]) == [[1, "a"], [2, "b"], [3, None]]

    def test_transpose(self):
        assert transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


class TestGrouping:
    """Tests for group_by, count_by, partition, sort_by and searching."""

    people = [
        {"name": "Ann", "role": "dev", "age": 31},
        {"name": "Bob", "role": "ops", "age": 25},
        {"name": "Cid", "role": "dev", "age": 28},
    ]

    def test_group_by_key_name(self):
        groups = group_by(self.people, "role")
        assert [p["name"] for p in groups["dev"]] == ["Ann", "Cid"]
        assert [p["name"] for p in groups["ops"]] == ["Bob"]

    def test_group_by_callable(self):
        assert group_by([1.2, 1.5, 2.1], int) == {1: [1.2, 1.5], 2: [2.1]}

    def test_count_by(self):
        assert count_by(["apple", "avocado", "banana"], lambda s: s[0]) == {"a": 2, "b": 1}

    def test_partition(self):
        assert partition([1, 2, 3, 4], lambda n: n % 2 == 0) == ([2, 4], [1, 3])

    def test_sort_by(self):
        assert [p["name"] for p in sort_by(self.people, "age")] == ["Bob", "Cid", "Ann"]
        assert [p["name"] for p in sort_by(self.people, "age", reverse=True)] == [
            "Ann",
            "Cid",
            "Bob",
        ]

    def test_find_index(self):
        assert find_index([5, 8, 12, 8], lambda n: n > 6) == 1
        assert find_last_index([5, 8, 12, 8], lambda n: n == 8) == 3
        assert find_index([1, 2], lambda n: n > 10) == -1
        assert find_last_index([], lambda n: True) == -1

    def test_sample(self):
        assert sample([7]) == 7
        assert sample([]) is None
        assert sample([1, 2, 3]) in (1, 2, 3)

    def test_sample_size(self):
        picked = sample_size([1, 2, 3, 4], 2)
        assert len(picked) == 2
        assert set(picked) <= {1, 2, 3, 4}
        assert sorted(sample_size([1, 2], 10)) == [1, 2]


class TestAggregates:
    """Tests for builders and numeric aggregates."""

    def test_fill(self):
        assert fill(3, "x") == ["x", "x", "x"]
        assert fill(0) == []

    def test_range_list(self):
        assert range_list(3) == [0, 1, 2]
        assert range_list(1, 7, 2) == [1, 3, 5]
        assert range_list(5, 0, -2) == [5, 3, 1]

    def test_range_list_zero_step(self):
        with pytest.raises(ValueError):
            range_list(0, 5, 0)

    def test_min_max_sum(self):
        assert max_value([3, 9, 1]) == 9
        assert min_value([3, 9, 1]) == 1
        assert sum_values([1, 2, 3.5]) == 6.5

    def test_empty_aggregates(self):
        assert max_value([]) is None
        assert min_value([]) is None
        assert sum_values([]) == 0
        assert mean([]) is None
        assert median([]) is None

    def test_mean_and_median(self):
        assert mean([1, 2, 3, 4]) == 2.5
        assert median([3, 1, 2]) == 2
        assert median([4, 1, 2, 3]) == 2.5

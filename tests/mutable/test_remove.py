"""Tests for IntervalSet.remove."""

import pytest

from rangelist import IntervalSet, InvalidRangeError


def test_split_scenario():
    """Interior split, then truncation and deletion in one call."""
    s = IntervalSet([(1, 8), (10, 21)])

    s.remove(15, 17)
    assert list(s.ranges()) == [(1, 8), (10, 15), (17, 21)]

    s.remove(3, 19)
    assert list(s.ranges()) == [(1, 3), (19, 21)]


def test_remove_whole_interval():
    s = IntervalSet([(1, 5), (10, 20)])
    s.remove(1, 5)

    assert list(s.ranges()) == [(10, 20)]


def test_remove_superset_of_interval():
    s = IntervalSet([(1, 5), (10, 20), (30, 40)])
    s.remove(8, 25)

    assert list(s.ranges()) == [(1, 5), (30, 40)]


def test_remove_left_part():
    s = IntervalSet([(10, 21)])
    s.remove(10, 11)

    assert list(s.ranges()) == [(11, 21)]


def test_remove_left_part_starting_before_interval():
    s = IntervalSet([(10, 21)])
    s.remove(5, 12)

    assert list(s.ranges()) == [(12, 21)]


def test_remove_right_part():
    s = IntervalSet([(10, 21)])
    s.remove(18, 30)

    assert list(s.ranges()) == [(10, 18)]


def test_remove_interior_split():
    s = IntervalSet([(0, 100)])
    s.remove(40, 60)

    assert list(s.ranges()) == [(0, 40), (60, 100)]


def test_remove_single_integer():
    s = IntervalSet([(0, 3)])
    s.remove(1, 2)

    assert list(s.ranges()) == [(0, 1), (2, 3)]
    assert list(s.enumerate()) == [0, 2]


def test_remove_touching_ranges_is_noop():
    """Ranges that only touch a stored interval remove nothing."""
    s = IntervalSet([(10, 20)])
    s.remove(5, 10)
    s.remove(20, 25)

    assert list(s.ranges()) == [(10, 20)]


def test_remove_in_gap_is_noop():
    s = IntervalSet([(1, 5), (10, 20)])
    s.remove(6, 9)

    assert list(s.ranges()) == [(1, 5), (10, 20)]


def test_remove_from_empty_set():
    s = IntervalSet()
    s.remove(0, 10)

    assert list(s.ranges()) == []


def test_add_then_remove_leaves_empty_set():
    s = IntervalSet()
    s.add(3, 17)
    s.remove(3, 17)

    assert list(s.ranges()) == []
    assert not s


@pytest.mark.parametrize("point", [-5, 1, 5, 10, 15, 20])
def test_remove_empty_range_is_noop(point):
    s = IntervalSet([(1, 5), (10, 20)])
    s.remove(point, point)

    assert list(s.ranges()) == [(1, 5), (10, 20)]


def test_remove_inverted_range_fails_without_mutation():
    s = IntervalSet([(1, 20)])

    with pytest.raises(InvalidRangeError, match="greater than end"):
        s.remove(15, 5)

    assert list(s.ranges()) == [(1, 20)]


def test_remove_rejects_non_integers():
    s = IntervalSet([(1, 20)])

    with pytest.raises(InvalidRangeError, match="integers"):
        s.remove(2, 3.5)

    assert list(s.ranges()) == [(1, 20)]

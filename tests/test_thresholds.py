import math

import pytest
from hypothesis import given, strategies as st

from zonekit.numbers import ZNumber
from zonekit.thresholds import Thresholds, WtoThresholds
from zonekit.wto import Wto

PAPER_GRAPH = {
    1: [2],
    2: [3, 8],
    3: [4],
    4: [5, 7],
    5: [6],
    6: [5, 7],
    7: [3, 8],
    8: [],
}


def test_initial_thresholds():
    t = Thresholds()
    assert list(t) == [-math.inf, 0, math.inf]
    assert len(t) == 3


def test_initial_rendering():
    assert str(Thresholds()) == "{-oo,0,+oo}"


def test_add_inserts_sorted():
    t = Thresholds()
    t.add(10)
    t.add(-20)
    assert list(t) == [-math.inf, -20, 0, 10, math.inf]


def test_add_duplicate_is_ignored():
    t = Thresholds()
    t.add(10)
    t.add(10)
    t.add(0)
    assert list(t) == [-math.inf, 0, 10, math.inf]


def test_consecutive_positive_replaces_previous():
    t = Thresholds()
    t.add(5)
    t.add(6)
    assert list(t) == [-math.inf, 0, 6, math.inf]


def test_one_replaces_zero():
    t = Thresholds()
    t.add(1)
    assert list(t) == [-math.inf, 1, math.inf]


def test_consecutive_negative_replaces_next():
    t = Thresholds()
    t.add(-1)
    assert list(t) == [-math.inf, -1, math.inf]


def test_accepts_znumber():
    t = Thresholds()
    t.add(ZNumber(42))
    assert 42 in list(t)


def test_rejects_finite_float():
    with pytest.raises(TypeError):
        Thresholds().add(1.5)


def test_capacity_is_respected():
    t = Thresholds(3)
    t.add(10)
    assert list(t) == [-math.inf, 0, math.inf]


@given(st.integers(0, 10), st.lists(st.integers(-1000, 1000)))
def test_values_stay_sorted_unique_and_bounded(size, values):
    t = Thresholds(size)
    for v in values:
        t.add(v)
    items = list(t)
    assert items == sorted(items)
    assert len(set(items)) == len(items)
    assert items[0] == -math.inf and items[-1] == math.inf
    assert len(t) <= max(3, size)


def test_wto_thresholds_one_entry_per_head():
    wt = WtoThresholds(Wto(PAPER_GRAPH, 1), 10)
    assert str(wt) == "3={-oo,0,+oo}\n5={-oo,0,+oo}\n"


def test_wto_thresholds_empty_without_cycles():
    wt = WtoThresholds(Wto({"a": ["b"], "b": []}, "a"), 10)
    assert str(wt) == ""


def test_visiting_top_level_label_changes_nothing():
    wt = WtoThresholds(Wto(PAPER_GRAPH, 1), 10)
    before = str(wt)
    wt.visit(8)
    assert str(wt) == before
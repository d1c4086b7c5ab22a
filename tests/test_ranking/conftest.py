"""Shared fixtures for ranking tests."""

import pytest
from tests.conftest import make_skaters


@pytest.fixture
def linear():
    """Scenario A: linear ranking, no ties.

    Judge totals (A + B):
              J1   J2   J3
    Anna     7.8  7.9  8.1
    Ben      8.0  7.7  7.8
    Clara    7.5  8.0  7.9
    David    7.4  7.6  7.5

    Anna beats everyone 2-1 or 3-0, Clara beats Ben 2-1.
    Expected: Anna (3), Clara (2), Ben (1), David (0).
    """
    return make_skaters({
        "Anna": ([3.9, 4.0, 4.1], [3.9, 3.9, 4.0]),
        "Ben": ([4.0, 3.8, 3.9], [4.0, 3.9, 3.9]),
        "Clara": ([3.8, 4.0, 4.0], [3.7, 4.0, 3.9]),
        "David": ([3.7, 3.8, 3.8], [3.7, 3.8, 3.7]),
    })


@pytest.fixture
def b_score_decides():
    """Scenario B: every judge total is 3.0, SkaterA has the higher B mark."""
    return make_skaters({
        "SkaterA": ([1.0, 1.0, 1.0], [2.0, 2.0, 2.0]),
        "SkaterB": ([1.5, 1.5, 1.5], [1.5, 1.5, 1.5]),
    })


@pytest.fixture
def perfect_pair_tie():
    """Scenario C: identical marks, pair score 1.5 each."""
    return make_skaters({
        "SkaterA": ([3.0, 3.0, 3.0], [2.0, 2.0, 2.0]),
        "SkaterB": ([3.0, 3.0, 3.0], [2.0, 2.0, 2.0]),
    })


@pytest.fixture
def direct_comparison_tie():
    """Two pairs tied on majority victories, both split by direct comparison.

    Judge orders (best first), every B mark is 2.0:
        J1: X T Y Z
        J2: Y Z T X
        J3: Z T X Y

    Every pair is decided 2-1:
        X > Y, Y > Z, Z > X, T > X, T > Y, Z > T
    M.V.: Z 2, T 2, X 1, Y 1.
    Z beats T and X beats Y directly.
    """
    return make_skaters({
        "X": ([4.0, 1.0, 2.0], [2.0, 2.0, 2.0]),
        "Y": ([2.0, 4.0, 1.0], [2.0, 2.0, 2.0]),
        "Z": ([1.0, 3.0, 4.0], [2.0, 2.0, 2.0]),
        "T": ([3.0, 2.0, 3.0], [2.0, 2.0, 2.0]),
    })


@pytest.fixture
def b_score_sum_tie():
    """Pair tie decided by the sum of B marks.

    Judge totals:
              J1   J2   J3    B sum
    Y        4.0  5.5  4.0     6.5
    X        6.0  4.0  4.0     7.0

    X wins J1, Y wins J2, J3 is an exact tie: pair score 1.5 each.
    """
    return make_skaters({
        "Y": ([2.0, 3.0, 2.0], [2.0, 2.5, 2.0]),
        "X": ([3.0, 2.0, 2.0], [3.0, 2.0, 2.0]),
    })


@pytest.fixture
def comparison_all_tie():
    """Pair tie decided by comparison against all skaters.

    Judge totals (every B sum of X and Y is 6.0):
              J1   J2   J3
    Y        3.0  5.0  4.0
    X        5.0  3.0  4.0
    W        4.0  2.0  3.0

    X and Y tie 1.5 each. X beats W 3-0, Y beats W only 2-1.
    M.V.: X 1.5, Y 1.5, W 0. Comparison with all: X 4.5, Y 3.5.
    """
    return make_skaters({
        "Y": ([1.0, 3.0, 2.0], [2.0, 2.0, 2.0]),
        "X": ([3.0, 1.0, 2.0], [2.0, 2.0, 2.0]),
        "W": ([2.0, 1.0, 1.0], [2.0, 1.0, 2.0]),
    })


@pytest.fixture
def total_score_tie():
    """Pair tie with equal B sums, decided by total score.

    Judge totals:
              J1   J2   J3   Total
    Y        3.0  4.5  4.0    11.5
    X        5.0  3.0  4.0    12.0
    """
    return make_skaters({
        "Y": ([1.0, 2.5, 2.0], [2.0, 2.0, 2.0]),
        "X": ([3.0, 1.0, 2.0], [2.0, 2.0, 2.0]),
    })


@pytest.fixture
def perfect_tie():
    """Two identical skaters above a third: unresolved on every level."""
    return make_skaters({
        "SkaterA": ([5.0, 5.0, 5.0], [5.0, 5.0, 5.0]),
        "SkaterB": ([5.0, 5.0, 5.0], [5.0, 5.0, 5.0]),
        "SkaterC": ([3.0, 3.0, 3.0], [3.0, 3.0, 3.0]),
    })


@pytest.fixture
def ten_skaters():
    """Ten skaters where the highest total score finishes third.

    Julia wins J1 against Anna because 2.5 + 2.7 > 2.3 + 2.9 in floating
    point, even though both are 5.2 on paper.
    """
    return make_skaters({
        "Anna": ([2.3, 3.1, 3.0], [2.9, 2.7, 1.9]),
        "Ben": ([2.4, 3.3, 2.3], [2.2, 3.0, 2.3]),
        "Clara": ([1.5, 3.2, 2.7], [2.7, 1.6, 2.9]),
        "David": ([1.6, 2.3, 2.2], [2.7, 1.7, 1.7]),
        "Emma": ([1.9, 1.8, 3.0], [2.1, 2.6, 3.4]),
        "Felix": ([1.7, 1.5, 2.6], [2.2, 1.8, 2.1]),
        "Grace": ([3.2, 1.6, 2.4], [2.9, 2.5, 3.1]),
        "Hannah": ([3.0, 3.4, 3.1], [1.6, 2.5, 2.2]),
        "Iris": ([2.5, 2.1, 1.9], [3.0, 1.8, 2.1]),
        "Julia": ([2.5, 1.8, 2.3], [2.7, 2.9, 3.3]),
    })


@pytest.fixture
def rounded_total_tie():
    """Pair tie whose totals differ only below the rounding precision.

    Judge totals:
              J1    J2    J3   Total  Rounded
    Y        3.0   4.52  4.0   11.52   11.5
    X        4.53  3.0   4.0   11.53   11.5

    Every earlier level is equal too, so the pair stays unresolved.
    """
    return make_skaters({
        "Y": ([1.0, 2.52, 2.0], [2.0, 2.0, 2.0]),
        "X": ([2.53, 1.0, 2.0], [2.0, 2.0, 2.0]),
    })

"""Per-judge totals and score sums derived from raw marks."""

import math

from majority.models import SkaterInput


def accumulate(values: list[float]) -> float:
    """Add values strictly left to right.

    The built-in sum() uses compensated summation for floats on Python 3.12+,
    which can differ in the last bit from plain sequential addition.
    """
    total = 0.0
    for value in values:
        total += value
    return total


def judge_totals(skater: SkaterInput) -> list[float]:
    """Compute A + B for each judge, up to the skater's effective judge count.

    Missing marks count as 0. Indices at or beyond the effective judge count
    are not part of the result.
    """
    totals = []
    for i in range(skater.num_judges):
        a = _mark(skater.a_scores, i)
        b = _mark(skater.b_scores, i)
        totals.append(a + b)
    return totals


def b_score(skater: SkaterInput, judge: int) -> float:
    """Get the artistic mark a judge gave, or 0 if missing."""
    return _mark(skater.b_scores, judge)


def b_score_sum(skater: SkaterInput) -> float:
    """Sum of all non-missing artistic marks."""
    return accumulate([s for s in skater.b_scores if s is not None])


def total_score(totals: list[float]) -> float:
    """Sum of judge totals (unrounded)."""
    return accumulate(totals)


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, with halves rounding up."""
    return math.floor(value * 10 + 0.5) / 10


def _mark(marks: list[float | None], i: int) -> float:
    if i < len(marks) and marks[i] is not None:
        return marks[i]
    return 0

"""Tie-break cascade for skaters with equal majority victories.

The cascade is expressed as a progressive refinement: a tied group is
ordered by an ordered list of criteria, and for every member we record
which criteria had to be consulted before it stood apart from the rest of
the group.
"""

from dataclasses import dataclass

from majority.models import (
    B_SCORE_SUM,
    COMPARISON_ALL,
    DIRECT_COMPARISON,
    TOTAL_SCORE,
    SkaterInput,
    TieBreakRecord,
)
from majority.ranking.normalize import accumulate, b_score_sum

# (criterion name, member index -> value); higher values rank better
Criterion = tuple[str, dict[int, float]]


@dataclass
class Refinement:
    """Outcome of refining a tied group.

    Attributes:
        order: Members from best to worst
        trails: member -> criteria consulted, in order, until the member was
            separated from every other member (or the criteria ran out)
        summaries: member -> first criterion on which it differs from its
            neighbour in `order`, or None if it matches on all of them
    """
    order: list[int]
    trails: dict[int, list[TieBreakRecord]]
    summaries: dict[int, TieBreakRecord | None]


def refine(group: list[int], criteria: list[Criterion]) -> Refinement:
    """Order a tied group by successive criteria, tracking provenance.

    Members are sorted descending by the first criterion, then the second,
    and so on. Members equal on every criterion keep their order in `group`.

    Only criteria on which the group as a whole shows any variation appear
    in the trails. Each member's trail follows those criteria in order and
    stops as soon as no other member shares all of its values so far.
    """
    order = sorted(
        group,
        key=lambda m: tuple(values[m] for _, values in criteria),
        reverse=True,
    )

    varying = [
        (name, values) for name, values in criteria
        if len({values[m] for m in group}) > 1
    ]

    trails: dict[int, list[TieBreakRecord]] = {}
    for member in order:
        still_tied_with = [m for m in group if m != member]
        trail = []
        for name, values in varying:
            trail.append(TieBreakRecord(level=name, value=values[member]))
            still_tied_with = [
                m for m in still_tied_with if values[m] == values[member]
            ]
            if not still_tied_with:
                break
        trails[member] = trail

    summaries: dict[int, TieBreakRecord | None] = {}
    for k, member in enumerate(order):
        neighbour = order[k + 1] if k < len(order) - 1 else order[k - 1]
        summaries[member] = None
        for name, values in criteria:
            if values[member] != values[neighbour]:
                summaries[member] = TieBreakRecord(level=name, value=values[member])
                break

    return Refinement(order=order, trails=trails, summaries=summaries)


def tie_break_criteria(
    group: list[int],
    matrix: list[list[float]],
    skaters: list[SkaterInput],
    total_scores: list[float],
) -> list[Criterion]:
    """Compute the four tie-break criteria for every member of a tied group.

    1. direct-comparison: pair scores against the other tied skaters only
    2. b-score-sum: sum of the skater's artistic marks
    3. comparison-all: pair scores against every other skater
    4. total-score: the rounded total score
    """
    direct = {
        x: accumulate([matrix[x][y] for y in group if y != x])
        for x in group
    }
    b_sums = {x: b_score_sum(skaters[x]) for x in group}
    against_all = {
        x: accumulate([matrix[x][y] for y in range(len(skaters)) if y != x])
        for x in group
    }
    totals = {x: total_scores[x] for x in group}

    return [
        (DIRECT_COMPARISON, direct),
        (B_SCORE_SUM, b_sums),
        (COMPARISON_ALL, against_all),
        (TOTAL_SCORE, totals),
    ]


def break_tie(
    group: list[int],
    matrix: list[list[float]],
    skaters: list[SkaterInput],
    total_scores: list[float],
) -> tuple[Refinement, list[Criterion]]:
    """Resolve a group of skaters with equal majority victories.

    Returns the refinement together with the criterion values it used.
    """
    criteria = tie_break_criteria(group, matrix, skaters, total_scores)
    return refine(group, criteria), criteria

"""Core data models for skater scores and ranking results."""

from dataclasses import dataclass, field
from typing import Any, Literal

TieBreakLevel = Literal[
    "direct-comparison", "b-score-sum", "comparison-all", "total-score"
]

DIRECT_COMPARISON: TieBreakLevel = "direct-comparison"
B_SCORE_SUM: TieBreakLevel = "b-score-sum"
COMPARISON_ALL: TieBreakLevel = "comparison-all"
TOTAL_SCORE: TieBreakLevel = "total-score"

# Order in which the tie-break cascade consults the criteria
TIE_BREAK_LEVELS: tuple[TieBreakLevel, ...] = (
    DIRECT_COMPARISON,
    B_SCORE_SUM,
    COMPARISON_ALL,
    TOTAL_SCORE,
)


@dataclass
class SkaterInput:
    """Raw marks for one skater.

    Attributes:
        name: Skater identifier (not required to be unique)
        a_scores: Technical marks, one per judge; None marks a missing entry
        b_scores: Artistic marks, one per judge; None marks a missing entry

    Example:
        >>> skater = SkaterInput(
        ...     name="Anna",
        ...     a_scores=[3.9, 4.0, 4.1],
        ...     b_scores=[3.9, 3.9, 4.0],
        ... )
    """
    name: str
    a_scores: list[float | None]
    b_scores: list[float | None]

    @property
    def num_judges(self) -> int:
        """Effective judge count: the larger number of non-missing marks."""
        return max(
            sum(1 for s in self.a_scores if s is not None),
            sum(1 for s in self.b_scores if s is not None),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "a_scores": list(self.a_scores),
            "b_scores": list(self.b_scores),
        }


@dataclass
class TieBreakRecord:
    """One tie-break criterion consulted for a skater, and its value."""
    level: TieBreakLevel
    value: float

    def to_dict(self) -> dict[str, Any]:
        return {"level": self.level, "value": self.value}


@dataclass
class HeadToHead:
    """A skater's judge-by-judge record against one opponent.

    Judge ties count for neither side, so votes_for + votes_against can be
    less than the number of judges.
    """
    opponent: str
    opponent_index: int
    won: bool
    votes_for: int
    votes_against: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "opponent": self.opponent,
            "opponent_index": self.opponent_index,
            "won": self.won,
            "votes_for": self.votes_for,
            "votes_against": self.votes_against,
        }


@dataclass
class SkaterResult:
    """A skater's final placement.

    Attributes:
        index: Position of the skater in the input (stable identifier)
        name: Skater identifier
        a_scores: Technical marks as given
        b_scores: Artistic marks as given
        total_score: Sum of all judge totals, rounded to one decimal
        majority_victories: Pairwise majority wins (ties count 0.5)
        rank: 1-indexed final rank
        tie_break_level: First criterion separating this skater from its
            neighbour in the final order, if any
        tie_break_value: This skater's value for tie_break_level
        tie_break_info: Criteria consulted for this skater, in order, until
            it was separated from the rest of its tied group. None if the
            skater was never tied on majority victories.
        head_to_head: One entry per opponent, in input order
    """
    index: int
    name: str
    a_scores: list[float | None]
    b_scores: list[float | None]
    total_score: float
    majority_victories: float
    rank: int = 0
    tie_break_level: TieBreakLevel | None = None
    tie_break_value: float | None = None
    tie_break_info: list[TieBreakRecord] | None = None
    head_to_head: list[HeadToHead] = field(default_factory=list)

    def get_head_to_head(self, opponent_index: int) -> HeadToHead | None:
        """Get the head-to-head entry against the opponent at the given index."""
        for h2h in self.head_to_head:
            if h2h.opponent_index == opponent_index:
                return h2h
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "name": self.name,
            "a_scores": list(self.a_scores),
            "b_scores": list(self.b_scores),
            "total_score": self.total_score,
            "majority_victories": self.majority_victories,
            "rank": self.rank,
            "tie_break_level": self.tie_break_level,
            "tie_break_value": self.tie_break_value,
            "tie_break_info": (
                None if self.tie_break_info is None
                else [r.to_dict() for r in self.tie_break_info]
            ),
            "head_to_head": [h.to_dict() for h in self.head_to_head],
        }


@dataclass
class RankingResult:
    """Result from the ranking system.

    Attributes:
        system_name: Human-readable name of the ranking system
        final_ranking: Skaters in order from 1st to last place
        details: Intermediate values for transparency/debugging
                 (e.g., pair scores, tie-break criterion values)
    """
    system_name: str
    final_ranking: list[SkaterResult]
    details: dict[str, Any] = field(default_factory=dict)

    def get_rank(self, name: str) -> int | None:
        """Get the rank of the first skater with this name, or None if not found."""
        for r in self.final_ranking:
            if r.name == name:
                return r.rank
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "system_name": self.system_name,
            "final_ranking": [r.to_dict() for r in self.final_ranking],
            "details": self.details,
        }

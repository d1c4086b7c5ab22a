"""Orchestrator: parse score text and rank the skaters."""

import logging
from dataclasses import dataclass
from typing import Any

from majority.models import RankingResult, SkaterInput
from majority.parser import ScoreTextParser
from majority.ranking import MajoritySystem

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Parsed skaters together with their ranking."""
    skaters: list[SkaterInput]
    result: RankingResult

    @property
    def num_judges(self) -> int:
        return max((s.num_judges for s in self.skaters), default=0)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "competitors": [s.name for s in self.skaters],
            "num_competitors": len(self.skaters),
            "num_judges": self.num_judges,
            "result": self.result.to_dict(),
        }


class AnalysisError(Exception):
    """Error during score analysis."""
    pass


def analyze_scores(
    content: str | bytes, judges: int = ScoreTextParser.DEFAULT_JUDGES
) -> AnalysisResult:
    """Parse score text and rank the skaters with the majority system.

    Args:
        content: Score text, one skater per line
        judges: Number of judges (marks per side) on each line

    Returns:
        AnalysisResult with the parsed skaters and their ranking. Blank input
        gives an empty ranking.

    Raises:
        AnalysisError: If the input is not blank but contains no valid scores
    """
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")

    try:
        parser = ScoreTextParser(judges=judges)
    except ValueError as e:
        raise AnalysisError(str(e)) from e

    system = MajoritySystem()

    if not content.strip():
        return AnalysisResult(skaters=[], result=system.calculate([]))

    skaters = parser.parse(content)
    if not skaters:
        raise AnalysisError(
            "We couldn't find any valid scores. "
            "Make sure each line has at least one number!"
        )

    logger.info("Ranking %d skaters", len(skaters))
    return AnalysisResult(skaters=skaters, result=system.calculate(skaters))

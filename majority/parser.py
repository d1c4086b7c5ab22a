"""Parser for free-text score entry."""

import logging
import re

from majority.models import SkaterInput

logger = logging.getLogger(__name__)


class ScoreTextParser:
    """Parse one skater per line from free text.

    Each line looks like:

        Name: a1 a2 a3 <anything> b1 b2 b3

    The first `judges` numbers are technical (A) marks, the next `judges`
    are artistic (B) marks. Anything between numbers ("und", "and", "/",
    "-", ...) is ignored, and a comma works as a decimal point. Lines
    without a colon are named "Skater 1", "Skater 2", and so on. Blank lines,
    comment lines (# or //) and lines without any number are skipped.

    Missing trailing marks are padded with None; numbers beyond 2 * judges
    are dropped.
    """

    DEFAULT_JUDGES = 3
    COMMENT_PREFIXES = ("#", "//")
    NUMBER_PATTERN = re.compile(r"\d+\.?\d*|\.\d+")

    def __init__(self, judges: int = DEFAULT_JUDGES):
        if judges < 1:
            raise ValueError(f"Need at least one judge, got {judges}")
        self.judges = judges

    def parse(self, content: str | bytes) -> list[SkaterInput]:
        """Parse text content into a list of SkaterInput, in line order."""
        if isinstance(content, bytes):
            content = content.decode("utf-8", errors="replace")

        skaters = []
        unnamed_counter = 1

        for line in content.strip().split("\n"):
            stripped = line.strip()
            if not stripped or stripped.startswith(self.COMMENT_PREFIXES):
                continue

            name, colon, scores_text = stripped.partition(":")
            if colon:
                name = name.strip()
            else:
                name = f"Skater {unnamed_counter}"
                unnamed_counter += 1
                scores_text = stripped

            marks = self._parse_numbers(scores_text)
            if not marks:
                logger.warning("Skipping line %r - no numbers found", line)
                continue

            skaters.append(SkaterInput(
                name=name,
                a_scores=marks[:self.judges],
                b_scores=marks[self.judges:],
            ))

        return skaters

    def _parse_numbers(self, text: str) -> list[float | None]:
        """Extract up to 2 * judges numbers, padded with None."""
        normalized = text.replace(",", ".")
        numbers = self.NUMBER_PATTERN.findall(normalized)
        if not numbers:
            return []

        marks: list[float | None] = [float(n) for n in numbers[:2 * self.judges]]
        marks.extend([None] * (2 * self.judges - len(marks)))
        return marks

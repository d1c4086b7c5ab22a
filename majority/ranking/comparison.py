"""Pairwise judge comparisons, majority victories and head-to-head tallies."""

from majority.models import HeadToHead, SkaterInput
from majority.ranking.normalize import accumulate, b_score, judge_totals

WIN = 1.0
LOSS = 0.0
TIE = 0.5


def compare_by_judge(
    total_a: float, b_score_a: float, total_b: float, b_score_b: float
) -> float:
    """Compare two skaters for one judge, from skater A's point of view.

    Returns 1 if A wins, 0 if B wins and 0.5 if the judge has them exactly
    level. Totals decide first, then the artistic (B) marks. Comparisons are
    exact: no tolerance is applied.
    """
    if total_a > total_b:
        return WIN
    if total_b > total_a:
        return LOSS

    if b_score_a > b_score_b:
        return WIN
    if b_score_b > b_score_a:
        return LOSS

    return TIE


class ScoreTable:
    """Judge totals for a fixed list of skaters, computed once.

    Skaters are addressed by their index in the input list everywhere, so
    duplicate names never collide.
    """

    def __init__(self, skaters: list[SkaterInput]):
        self.skaters = skaters
        self.totals = [judge_totals(s) for s in skaters]

    def __len__(self) -> int:
        return len(self.skaters)

    def judge_count(self, i: int) -> int:
        return len(self.totals[i])

    def num_judges(self, i: int, j: int) -> int:
        """Number of judges considered when comparing skaters i and j."""
        return max(len(self.totals[i]), len(self.totals[j]))

    def judge_outcomes(self, i: int, j: int) -> list[float]:
        """Per-judge comparator results for skater i against skater j."""
        totals_i = self.totals[i]
        totals_j = self.totals[j]
        outcomes = []
        for judge in range(self.num_judges(i, j)):
            total_i = totals_i[judge] if judge < len(totals_i) else 0
            total_j = totals_j[judge] if judge < len(totals_j) else 0
            outcomes.append(compare_by_judge(
                total_i, b_score(self.skaters[i], judge),
                total_j, b_score(self.skaters[j], judge),
            ))
        return outcomes

    def pair_score(self, i: int, j: int) -> float:
        """Sum of per-judge outcomes for skater i against skater j."""
        return accumulate(self.judge_outcomes(i, j))

    def pair_score_matrix(self) -> list[list[float]]:
        """Build the pair-score matrix.

        matrix[i][j] is PairScore(i, j). Only the upper triangle is compared
        directly; matrix[j][i] is always num_judges - matrix[i][j], so each
        pair's two scores add up to exactly its judge count.
        """
        n = len(self.skaters)
        matrix = [[0.0] * n for _ in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                score = self.pair_score(i, j)
                matrix[i][j] = score
                matrix[j][i] = self.num_judges(i, j) - score
        return matrix

    def majority_victories(self, matrix: list[list[float]]) -> list[float]:
        """Count majority victories for each skater from the pair-score matrix.

        A pair awards 1 point to the skater with the higher pair score, or
        0.5 to each if their scores are equal. Points are accumulated in
        input order.
        """
        n = len(self.skaters)
        victories = [0.0] * n
        for i in range(n):
            for j in range(i + 1, n):
                if matrix[i][j] > matrix[j][i]:
                    victories[i] += WIN
                elif matrix[j][i] > matrix[i][j]:
                    victories[j] += WIN
                else:
                    victories[i] += TIE
                    victories[j] += TIE
        return victories

    def head_to_head(self, i: int) -> list[HeadToHead]:
        """Tally judge votes for skater i against every other skater.

        A judge tie gives a vote to neither side.
        """
        results = []
        for j, opponent in enumerate(self.skaters):
            if j == i:
                continue

            votes_for = 0
            votes_against = 0
            for outcome in self.judge_outcomes(i, j):
                if outcome == WIN:
                    votes_for += 1
                elif outcome == LOSS:
                    votes_against += 1

            results.append(HeadToHead(
                opponent=opponent.name,
                opponent_index=j,
                won=votes_for > votes_against,
                votes_for=votes_for,
                votes_against=votes_against,
            ))

        return results

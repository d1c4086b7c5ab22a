"""Majority system (Majoritätssystem) for ranking skaters."""

import logging

from majority.models import RankingResult, SkaterInput, SkaterResult
from majority.ranking.comparison import ScoreTable
from majority.ranking.normalize import round_one_decimal, total_score
from majority.ranking.tiebreak import Criterion, Refinement, break_tie

logger = logging.getLogger(__name__)


class MajoritySystem:
    """Majority system as used in roller figure skating.

    Skaters are not ranked by their total marks. Instead every pair of
    skaters is compared judge by judge, and a skater earns a majority
    victory for every opponent it beats on a majority of judges.

    Algorithm:
    1. For each judge, the higher total (A + B) wins; equal totals are
       decided by the B mark; equal B marks are a judge tie (0.5 each)
    2. Pair score = sum of judge outcomes; the higher pair score earns a
       majority victory (equal pair scores give 0.5 each)
    3. Rank by majority victories
    4. Skaters with equal majority victories are separated by, in order:
       direct comparison among the tied skaters, sum of B marks, comparison
       against all skaters, and total score

    Skaters equal on every criterion still receive consecutive ranks, in
    input order.

    Complexity: O(n² · j) for n skaters and j judges.
    """

    @property
    def name(self) -> str:
        return "Majority System"

    @property
    def description(self) -> str:
        return "Pairwise judge-by-judge comparison: rank by number of majority victories"

    def calculate(self, skaters: list[SkaterInput]) -> RankingResult:
        n = len(skaters)
        table = ScoreTable(skaters)

        # Step 1: pair scores and majority victories
        matrix = table.pair_score_matrix()
        victories = table.majority_victories(matrix)
        total_scores = [
            round_one_decimal(total_score(totals)) for totals in table.totals
        ]

        results = [
            SkaterResult(
                index=i,
                name=skater.name,
                a_scores=list(skater.a_scores),
                b_scores=list(skater.b_scores),
                total_score=total_scores[i],
                majority_victories=victories[i],
                head_to_head=table.head_to_head(i),
            )
            for i, skater in enumerate(skaters)
        ]

        # Step 2: sort by majority victories (stable, so input order is kept)
        ordered = sorted(range(n), key=lambda i: victories[i], reverse=True)

        # Step 3: walk groups of equal majority victories and assign ranks
        final_order: list[int] = []
        tiebreakers = []
        current_rank = 1
        i = 0
        while i < n:
            j = i + 1
            while j < n and victories[ordered[j]] == victories[ordered[i]]:
                j += 1
            group = ordered[i:j]

            if len(group) == 1:
                results[group[0]].rank = current_rank
                final_order.append(group[0])
            else:
                refinement, criteria = break_tie(group, matrix, skaters, total_scores)
                for k, member in enumerate(refinement.order):
                    result = results[member]
                    result.rank = current_rank + k
                    result.tie_break_info = refinement.trails[member]
                    summary = refinement.summaries[member]
                    if summary is not None:
                        result.tie_break_level = summary.level
                        result.tie_break_value = summary.value
                final_order.extend(refinement.order)
                tiebreakers.append(
                    self._tiebreak_details(group, refinement, criteria, results)
                )
                logger.debug(
                    "Tie on %s majority victories between %s resolved as %s",
                    victories[group[0]],
                    [skaters[m].name for m in group],
                    [skaters[m].name for m in refinement.order],
                )

            current_rank += len(group)
            i = j

        return RankingResult(
            system_name=self.name,
            final_ranking=[results[k] for k in final_order],
            details={
                "competitors": [s.name for s in skaters],
                "pair_scores": matrix,
                "majority_victories": victories,
                "tiebreakers": tiebreakers,
                "explanation": (
                    "Each cell pair_scores[i][j] sums the judge-by-judge "
                    "comparison of skater i against skater j (1 per judge won, "
                    "0.5 per judge tie). The higher pair score earns a majority "
                    "victory; equal pair scores give half a victory to each. "
                    "Ties in majority victories are broken by direct comparison, "
                    "B-score sum, comparison with all skaters, then total score."
                ),
            },
        )

    @staticmethod
    def _tiebreak_details(
        group: list[int],
        refinement: Refinement,
        criteria: list[Criterion],
        results: list[SkaterResult],
    ) -> dict:
        """Describe how one tied group was resolved.

        Criterion values are listed in the same order as tied_indices.
        Members equal on every criterion are reported under "unresolved".
        """
        unresolved: list[list[int]] = []
        run = [refinement.order[0]]
        for member in refinement.order[1:]:
            if all(values[member] == values[run[0]] for _, values in criteria):
                run.append(member)
                continue
            if len(run) > 1:
                unresolved.append(run)
            run = [member]
        if len(run) > 1:
            unresolved.append(run)

        return {
            "tied_competitors": [results[m].name for m in group],
            "tied_indices": list(group),
            "majority_victories": results[group[0]].majority_victories,
            "values": {
                name: [values[m] for m in group] for name, values in criteria
            },
            "order": list(refinement.order),
            "unresolved": unresolved,
        }

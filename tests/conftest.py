"""Shared test helpers."""

from faker import Faker

from majority.models import RankingResult, SkaterInput


def make_skaters(
    table: dict[str, tuple[list[float | None], list[float | None]]]
) -> list[SkaterInput]:
    """Build skaters from a compact table.

    Args:
        table: {name: (a_scores, b_scores)}, in input order

    Returns:
        List of SkaterInput in the same order.
    """
    return [
        SkaterInput(name=name, a_scores=list(a), b_scores=list(b))
        for name, (a, b) in table.items()
    ]


def ranking_names(result: RankingResult) -> list[str]:
    """Names in final ranking order."""
    return [r.name for r in result.final_ranking]


def random_skaters(seed: int, count: int, judges: int = 3) -> list[SkaterInput]:
    """Random skaters with marks between 1.0 and 5.0, one decimal.

    Marks are drawn on a coarse grid so that judge ties and tied majority
    victories are common.
    """
    fake = Faker()
    Faker.seed(seed)
    return [
        SkaterInput(
            name=fake.unique.first_name(),
            a_scores=[fake.random_int(10, 50) / 10 for _ in range(judges)],
            b_scores=[fake.random_int(10, 50) / 10 for _ in range(judges)],
        )
        for _ in range(count)
    ]

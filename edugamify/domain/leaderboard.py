from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class Standing:
    """Public slice of a user needed for ranking; never carries email or credentials"""

    name: str
    points: int
    badge_count: int


@dataclass(frozen=True)
class RankedStanding:
    rank: int
    name: str
    points: int
    badge_count: int


def rank_standings(standings: Iterable[Standing], limit: int = 10) -> List[RankedStanding]:
    """
    Order by points descending and keep the first `limit`.

    `standings` must arrive in creation order; sorted() is stable so ties
    keep that order.
    """
    ordered = sorted(standings, key=lambda s: -(s.points or 0))
    return [
        RankedStanding(
            rank=index + 1,
            name=standing.name,
            points=standing.points or 0,
            badge_count=standing.badge_count,
        )
        for index, standing in enumerate(ordered[:limit])
    ]

# league/scoring.py

from typing import Dict, Iterable, List, Optional

from league.config import PointsTable
from league.models import FilteredResultSet, RankingEntry


class PointsAggregator:
    """Sum points per player across every source's filtered results."""

    def __init__(self, points_table: Optional[PointsTable] = None):
        self.points_table = points_table or PointsTable()

    def aggregate(self, result_sets: Iterable[FilteredResultSet]) -> Dict[str, int]:
        """
        Accumulate weekly points in source order.

        Points come from each entry's index in the filtered list, so the best
        registered player on a track scores first place even if they were
        ranked lower on the full leaderboard. Dict insertion order records the
        first time each player was seen, which the ranking uses for ties.
        """
        points: Dict[str, int] = {}
        for result_set in result_sets:
            for index, entry in enumerate(result_set.entries):
                awarded = self.points_table.points_for(index)
                points[entry.player] = points.get(entry.player, 0) + awarded
        return points


class WeeklyRankingBuilder:
    """Order weekly points into numbered standings."""

    def build(self, points: Dict[str, int]) -> List[RankingEntry]:
        # sorted() is stable: ties keep first-seen order.
        ordered = sorted(points.items(), key=lambda item: item[1], reverse=True)
        return [
            RankingEntry(position=i, player=player, points=total)
            for i, (player, total) in enumerate(ordered, start=1)
        ]

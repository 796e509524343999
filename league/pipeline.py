# league/pipeline.py

from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import AbstractSet, Dict, Iterable, List, Optional

from league.config import LeagueConfig
from league.models import FilteredResultSet, RankingEntry
from league.scoring import PointsAggregator, WeeklyRankingBuilder
from league.scraper.source import SessionFactory, SourceScraper
from league.storage import RosterStore

LOGGER = logging.getLogger(__name__)


def league_week(now: Optional[datetime] = None) -> int:
    """Week number shown in the league title (counts from Jan 1, shifted by weekday)."""
    now = now or datetime.now()
    start = datetime(now.year, 1, 1, tzinfo=now.tzinfo)
    elapsed_days = (now - start).total_seconds() / 86400
    sunday_based_weekday = (now.weekday() + 1) % 7
    return math.ceil((elapsed_days + sunday_based_weekday + 1) / 7)


@dataclass
class WeeklyReport:
    week: int
    tracks: List[FilteredResultSet] = field(default_factory=list)
    points: Dict[str, int] = field(default_factory=dict)
    ranking: List[RankingEntry] = field(default_factory=list)

    def ranking_lines(self) -> List[str]:
        return [entry.as_line() for entry in self.ranking]

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "tracks": [
                {
                    "name": track.name,
                    "scenario": track.scenario,
                    "track": track.track,
                    "error": track.error,
                    "lines": track.result_lines(),
                    "entries": [
                        {"position": e.position, "time": e.time, "player": e.player}
                        for e in track.entries
                    ],
                }
                for track in self.tracks
            ],
            "ranking": [
                {"position": r.position, "player": r.player, "points": r.points}
                for r in self.ranking
            ],
            "ranking_lines": self.ranking_lines(),
        }


class WeeklyPipeline:
    """Scrape every configured source, then score and rank the week."""

    def __init__(
        self,
        config: Optional[LeagueConfig] = None,
        session_factory: Optional[SessionFactory] = None,
    ):
        self.config = config or LeagueConfig()
        self.scraper = SourceScraper(self.config, session_factory=session_factory)
        self.aggregator = PointsAggregator(self.config.points_table)
        self.ranking_builder = WeeklyRankingBuilder()

    async def scrape_sources(self, known_players: AbstractSet[str]) -> List[FilteredResultSet]:
        """Results per source, always in configured order."""
        urls = list(self.config.sources)
        if self.config.concurrent_scrapes:
            # gather() returns in submission order regardless of completion order.
            return list(await asyncio.gather(*(self.scraper.scrape(url, known_players) for url in urls)))

        results = []
        for url in urls:
            results.append(await self.scraper.scrape(url, known_players))
        return results

    async def run(self, known_players: Iterable[str], now: Optional[datetime] = None) -> WeeklyReport:
        players = frozenset(known_players)
        LOGGER.info("Scraping %s sources for %s registered players", len(self.config.sources), len(players))

        tracks = await self.scrape_sources(players)
        points = self.aggregator.aggregate(tracks)
        ranking = self.ranking_builder.build(points)

        failed = sum(1 for t in tracks if t.is_error)
        if failed:
            LOGGER.warning("%s of %s sources failed this cycle", failed, len(tracks))

        return WeeklyReport(week=league_week(now), tracks=tracks, points=points, ranking=ranking)


async def run_weekly(
    config: LeagueConfig,
    roster: Optional[RosterStore] = None,
    session_factory: Optional[SessionFactory] = None,
) -> WeeklyReport:
    """Read the roster fresh and compute this week's report."""
    roster = roster or RosterStore(config.roster_path)
    pipeline = WeeklyPipeline(config, session_factory=session_factory)
    return await pipeline.run(roster.list())

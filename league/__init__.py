"""
Weekly racing league built from external leaderboard standings.

Scrapes each configured leaderboard with a headless browser, keeps the rows of
registered players and turns their finishing places into a weekly points table.
"""

from .config import LeagueConfig, PointsTable
from .models import FilteredResultSet, RaceResult, RankingEntry
from .pipeline import WeeklyPipeline, WeeklyReport, league_week, run_weekly

__all__ = [
    'LeagueConfig',
    'PointsTable',
    'FilteredResultSet',
    'RaceResult',
    'RankingEntry',
    'WeeklyPipeline',
    'WeeklyReport',
    'league_week',
    'run_weekly',
]

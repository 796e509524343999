# league/config.py

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

DEFAULT_SOURCES = (
    "https://www.velocidrone.com/leaderboard/33/1527/All",
    "https://www.velocidrone.com/leaderboard/16/1795/All",
)


@dataclass(frozen=True)
class PointsTable:
    """Points by zero-indexed place, with a flat value past the explicit entries."""

    values: Tuple[int, ...] = (10, 8, 6, 4, 2)
    default: int = 1

    def points_for(self, index: int) -> int:
        if index < 0:
            raise ValueError(f"Place index must be >= 0, got {index}")
        if index < len(self.values):
            return self.values[index]
        return self.default


@dataclass
class LeagueConfig:
    sources: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))
    points_table: PointsTable = field(default_factory=PointsTable)
    top_n: int = 50

    # Browser protocol
    headless: bool = True
    navigation_timeout_ms: int = 30000
    content_timeout_ms: int = 10000
    tab_label: str = "Race Mode"
    row_selector: str = "tbody tr"
    scenario_selector: str = "h2.text-center"
    track_selector: str = "div.container h3"
    concurrent_scrapes: bool = False

    # Text-file collaborators
    roster_path: str = "jugadores.txt"
    rules_path: str = "reglamento.txt"
    annual_ranking_path: str = "rankinganual.txt"

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "LeagueConfig":
        """Build a config from LEAGUE_* environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        config = cls()

        raw_sources = env.get("LEAGUE_SOURCES", "")
        sources = [s.strip() for s in raw_sources.split(",") if s.strip()]
        if sources:
            config.sources = sources

        raw_points = env.get("LEAGUE_POINTS", "").strip()
        if raw_points:
            values = tuple(int(p) for p in raw_points.split(",") if p.strip())
            default = int(env.get("LEAGUE_POINTS_DEFAULT", config.points_table.default))
            config.points_table = PointsTable(values=values, default=default)

        config.top_n = int(env.get("LEAGUE_TOP_N", config.top_n))
        config.navigation_timeout_ms = int(env.get("LEAGUE_NAVIGATION_TIMEOUT_MS", config.navigation_timeout_ms))
        config.content_timeout_ms = int(env.get("LEAGUE_CONTENT_TIMEOUT_MS", config.content_timeout_ms))
        config.headless = _env_flag(env.get("LEAGUE_HEADLESS"), config.headless)
        config.concurrent_scrapes = _env_flag(env.get("LEAGUE_CONCURRENT_SCRAPES"), config.concurrent_scrapes)
        config.roster_path = env.get("LEAGUE_ROSTER_PATH", config.roster_path)
        config.rules_path = env.get("LEAGUE_RULES_PATH", config.rules_path)
        config.annual_ranking_path = env.get("LEAGUE_ANNUAL_RANKING_PATH", config.annual_ranking_path)
        return config


def _env_flag(raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")

# league/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

ERROR_LABEL = "Error"


@dataclass(frozen=True)
class RaceResult:
    """One leaderboard row kept for a registered player."""

    position: int  # 1-based row index on the source page, before filtering
    time: str
    player: str


@dataclass
class FilteredResultSet:
    scenario: str
    track: str
    entries: List[RaceResult] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failed(cls, reason: str) -> "FilteredResultSet":
        """Sentinel for a source that could not be scraped this cycle."""
        return cls(scenario=ERROR_LABEL, track=ERROR_LABEL, entries=[], error=reason)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def name(self) -> str:
        return f"{self.scenario} - {self.track}"

    def result_lines(self) -> List[str]:
        # Numbered by place among registered players.
        return [f"{i}\t{entry.time}\t{entry.player}" for i, entry in enumerate(self.entries, start=1)]


@dataclass(frozen=True)
class RankingEntry:
    position: int
    player: str
    points: int

    def as_line(self) -> str:
        return f"{self.position}. {self.player} - {self.points} pts"

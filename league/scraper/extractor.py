# league/scraper/extractor.py

from __future__ import annotations

from typing import AbstractSet, List, Optional

from bs4 import BeautifulSoup

from league.models import FilteredResultSet, RaceResult
from .errors import ExtractionError


class ResultExtractor:
    """Parse a rendered leaderboard page into the rows of registered players."""

    TIME_CELL = 1
    PLAYER_CELL = 2

    def __init__(
        self,
        scenario_selector: str = "h2.text-center",
        track_selector: str = "div.container h3",
        row_selector: str = "tbody tr",
        top_n: int = 50,
    ):
        self.scenario_selector = scenario_selector
        self.track_selector = track_selector
        self.row_selector = row_selector
        self.top_n = top_n

    def extract(self, html: str, known_players: AbstractSet[str]) -> FilteredResultSet:
        soup = BeautifulSoup(html, "html.parser")
        scenario = self._label(soup, self.scenario_selector, "scenario")
        track = self._label(soup, self.track_selector, "track")

        entries: List[RaceResult] = []
        seen = set()
        for position, row in enumerate(soup.select(self.row_selector)[:self.top_n], start=1):
            parsed = self._parse_row(row, position)
            if parsed is None:
                continue
            if parsed.player not in known_players or parsed.player in seen:
                continue
            seen.add(parsed.player)
            entries.append(parsed)

        return FilteredResultSet(scenario=scenario, track=track, entries=entries)

    def _label(self, soup: BeautifulSoup, selector: str, what: str) -> str:
        node = soup.select_one(selector)
        if node is None:
            raise ExtractionError(f"Missing {what} label ('{selector}')")
        return node.get_text().strip()

    def _parse_row(self, row, position: int) -> Optional[RaceResult]:
        cells = row.select("td")
        if len(cells) <= max(self.TIME_CELL, self.PLAYER_CELL):
            return None
        return RaceResult(
            position=position,
            time=cells[self.TIME_CELL].get_text().strip(),
            player=cells[self.PLAYER_CELL].get_text().strip(),
        )

# league/scraper/source.py

from __future__ import annotations

import logging
from typing import AbstractSet, Callable, Optional

from league.config import LeagueConfig
from league.models import FilteredResultSet
from .errors import ScrapeError
from .extractor import ResultExtractor
from .session import BrowserSession, PlaywrightSession

LOGGER = logging.getLogger(__name__)

SessionFactory = Callable[[], BrowserSession]


class SourceScraper:
    """Scrape one leaderboard URL per call with its own browser session."""

    def __init__(
        self,
        config: Optional[LeagueConfig] = None,
        session_factory: Optional[SessionFactory] = None,
        extractor: Optional[ResultExtractor] = None,
    ):
        self.config = config or LeagueConfig()
        self.session_factory = session_factory or (lambda: PlaywrightSession(headless=self.config.headless))
        self.extractor = extractor or ResultExtractor(
            scenario_selector=self.config.scenario_selector,
            track_selector=self.config.track_selector,
            row_selector=self.config.row_selector,
            top_n=self.config.top_n,
        )

    async def scrape(self, url: str, known_players: AbstractSet[str]) -> FilteredResultSet:
        """Return the filtered results for `url`, or the "Error" set if anything fails."""
        try:
            html = await self._fetch(url)
            results = self.extractor.extract(html, known_players)
        except ScrapeError as exc:
            LOGGER.warning("Scrape failed for %s: %s", url, exc)
            return FilteredResultSet.failed(f"{type(exc).__name__}: {exc}")
        except Exception as exc:
            LOGGER.exception("Unexpected error scraping %s", url)
            return FilteredResultSet.failed(f"{type(exc).__name__}: {exc}")

        LOGGER.info("%s: %s registered players in top %s", results.name, len(results.entries), self.config.top_n)
        return results

    async def _fetch(self, url: str) -> str:
        async with self.session_factory() as session:
            await session.navigate(url, self.config.navigation_timeout_ms)
            await session.trigger_tab(self.config.tab_label)
            await session.wait_for_content(self.config.row_selector, self.config.content_timeout_ms)
            return await session.content()

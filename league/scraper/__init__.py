# league/scraper/__init__.py
"""
Leaderboard scraping: browser sessions, HTML extraction and per-source isolation.
"""

from .errors import ContentTimeout, ExtractionError, LaunchError, NavigationTimeout, ScrapeError
from .extractor import ResultExtractor
from .session import BrowserSession, FixtureSession, PlaywrightSession
from .source import SourceScraper

__all__ = [
    'ScrapeError',
    'LaunchError',
    'NavigationTimeout',
    'ContentTimeout',
    'ExtractionError',
    'ResultExtractor',
    'BrowserSession',
    'FixtureSession',
    'PlaywrightSession',
    'SourceScraper',
]

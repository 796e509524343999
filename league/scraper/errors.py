# league/scraper/errors.py
"""
Failures local to scraping a single leaderboard source.

SourceScraper turns every one of these into the "Error" result set, so none of
them reach aggregation or the web layer.
"""


class ScrapeError(Exception):
    """Base class for per-source scraping failures."""


class LaunchError(ScrapeError):
    """Raised when a browser instance cannot be started."""


class NavigationTimeout(ScrapeError):
    """Raised when the leaderboard page does not respond in time."""


class ContentTimeout(ScrapeError):
    """Raised when result rows never render within the content wait."""


class ExtractionError(ScrapeError):
    """Raised when expected page structure (scenario/track labels) is absent."""

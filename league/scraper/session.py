# league/scraper/session.py
"""
Browser session management for leaderboard scraping.

Two interchangeable sessions share one async interface:
  - PlaywrightSession: real headless Chromium through playwright.async_api
  - FixtureSession:    replays recorded HTML snapshots (tests, offline runs)

A session is an async context manager; leaving the block always closes it,
including on failure and cancellation.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout
from playwright.async_api import async_playwright

from .errors import ContentTimeout, LaunchError, NavigationTimeout

LOGGER = logging.getLogger(__name__)


class BrowserSession:
    """Interface shared by live and replay sessions."""

    async def open(self) -> None:
        raise NotImplementedError

    async def navigate(self, url: str, timeout_ms: int) -> None:
        raise NotImplementedError

    async def trigger_tab(self, label: str) -> bool:
        """Activate the first link whose text contains `label`. Returns False if none exists."""
        raise NotImplementedError

    async def wait_for_content(self, selector: str, timeout_ms: int) -> None:
        raise NotImplementedError

    async def content(self) -> str:
        raise NotImplementedError

    async def close(self) -> None:
        raise NotImplementedError

    async def __aenter__(self) -> "BrowserSession":
        await self.open()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


class PlaywrightSession(BrowserSession):
    """One isolated headless Chromium instance."""

    USER_AGENT = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    )
    VIEWPORT = {"width": 1280, "height": 720}
    LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

    def __init__(self, headless: bool = True):
        self.headless = headless
        self._playwright = None
        self.browser = None
        self.context = None
        self.page = None

    async def open(self) -> None:
        if self.browser:
            return

        try:
            self._playwright = await async_playwright().start()
            self.browser = await self._playwright.chromium.launch(
                headless=self.headless,
                args=self.LAUNCH_ARGS,
            )
            self.context = await self.browser.new_context(
                user_agent=self.USER_AGENT,
                viewport=self.VIEWPORT,
                locale="en-US",
            )
            self.page = await self.context.new_page()
        except Exception as exc:
            await self.close()
            raise LaunchError(f"Failed to launch browser: {exc}") from exc

    async def navigate(self, url: str, timeout_ms: int) -> None:
        try:
            await self.page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
        except PlaywrightTimeout as exc:
            raise NavigationTimeout(f"No response from {url} within {timeout_ms} ms") from exc
        except PlaywrightError as exc:
            raise NavigationTimeout(f"Navigation to {url} failed: {exc}") from exc

    async def trigger_tab(self, label: str) -> bool:
        tabs = self.page.locator("a").filter(has_text=re.compile(re.escape(label)))
        if await tabs.count() == 0:
            LOGGER.debug("No '%s' tab on page, keeping default view", label)
            return False
        # DOM click: the tab may sit in a collapsed menu and not be "visible".
        await tabs.first.dispatch_event("click")
        return True

    async def wait_for_content(self, selector: str, timeout_ms: int) -> None:
        try:
            await self.page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeout as exc:
            raise ContentTimeout(f"'{selector}' did not render within {timeout_ms} ms") from exc

    async def content(self) -> str:
        return await self.page.content()

    async def close(self) -> None:
        """Release context, browser and driver; safe to call repeatedly."""
        if self.context:
            try:
                await self.context.close()
            except Exception as exc:
                LOGGER.debug("Ignoring context close failure: %s", exc)
        if self.browser:
            try:
                await self.browser.close()
            except Exception as exc:
                LOGGER.debug("Ignoring browser close failure: %s", exc)
        if self._playwright:
            try:
                await self._playwright.stop()
            except Exception as exc:
                LOGGER.debug("Ignoring playwright stop failure: %s", exc)

        self._playwright = None
        self.browser = None
        self.context = None
        self.page = None


class FixtureSession(BrowserSession):
    """
    Replay session backed by recorded page snapshots.

    Args:
        pages: URL -> HTML of the page as first loaded
        tab_pages: URL -> HTML after the tab has been activated (optional)
        fail_launch: If True, open() raises LaunchError
    """

    def __init__(
        self,
        pages: Dict[str, str],
        tab_pages: Optional[Dict[str, str]] = None,
        fail_launch: bool = False,
    ):
        self.pages = pages
        self.tab_pages = tab_pages or {}
        self.fail_launch = fail_launch
        self.opened = False
        self.closed = False
        self.visited: List[str] = []
        self._url: Optional[str] = None
        self._html = ""

    async def open(self) -> None:
        if self.fail_launch:
            raise LaunchError("Fixture configured to fail launch")
        self.opened = True

    async def navigate(self, url: str, timeout_ms: int) -> None:
        self.visited.append(url)
        if url not in self.pages:
            raise NavigationTimeout(f"No response from {url} within {timeout_ms} ms")
        self._url = url
        self._html = self.pages[url]

    async def trigger_tab(self, label: str) -> bool:
        soup = BeautifulSoup(self._html, "html.parser")
        if not any(label in a.get_text() for a in soup.find_all("a")):
            return False
        if self._url in self.tab_pages:
            self._html = self.tab_pages[self._url]
        return True

    async def wait_for_content(self, selector: str, timeout_ms: int) -> None:
        soup = BeautifulSoup(self._html, "html.parser")
        if soup.select_one(selector) is None:
            raise ContentTimeout(f"'{selector}' did not render within {timeout_ms} ms")

    async def content(self) -> str:
        return self._html

    async def close(self) -> None:
        self.closed = True

# league/storage.py
"""
Plain-text collaborators: player roster, rule text and the annual ranking.

Each file is one entry per line. Missing files read as empty so a fresh
install serves a page before anything has been registered.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

LOGGER = logging.getLogger(__name__)

RULES_UNAVAILABLE = "Could not load the rules."


class RosterStore:
    """Registered player names, read fresh on every call."""

    def __init__(self, path: str):
        self.path = Path(path)

    def list(self) -> List[str]:
        if not self.path.exists():
            return []
        text = self.path.read_text(encoding="utf-8")
        return [line.strip() for line in text.split("\n") if line.strip()]

    def add(self, name: str) -> bool:
        """Append `name` unless already registered. Returns True if it was added."""
        name = name.strip()
        if not name:
            raise ValueError("Player name must not be empty")
        if name in self.list():
            return False

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as f:
            f.write(f"\n{name}")
        LOGGER.info("Registered player '%s'", name)
        return True


def read_rules(path: str) -> List[str]:
    """Rule lines with trailing whitespace removed; leading tabs mark sub-items."""
    rules_path = Path(path)
    if not rules_path.exists():
        LOGGER.warning("Rules file not found: %s", rules_path)
        return [RULES_UNAVAILABLE]
    return [line.rstrip() for line in rules_path.read_text(encoding="utf-8").split("\n")]


def read_annual_ranking(path: str) -> List[str]:
    ranking_path = Path(path)
    if not ranking_path.exists():
        return []
    text = ranking_path.read_text(encoding="utf-8")
    return [line.strip() for line in text.split("\n") if line.strip()]

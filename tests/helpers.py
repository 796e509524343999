# tests/helpers.py

from typing import Iterable, Optional, Sequence

from league.scraper.session import FixtureSession


def leaderboard_html(
    rows: Iterable[Optional[Sequence[str]]],
    scenario: Optional[str] = "Drone Racing League",
    track: Optional[str] = "Bando Warehouse",
    tab_label: str = "Race Mode",
    with_table: bool = True,
) -> str:
    """
    Build a leaderboard page like the one rendered after the tab switch.

    Each row is a sequence of cell texts (rank, time, player, ...); pass a
    shorter sequence to simulate missing cells.
    """
    body_rows = "".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in (row or ())) + "</tr>"
        for row in rows
    )
    scenario_html = f'<h2 class="text-center">{scenario}</h2>' if scenario is not None else ""
    track_html = f"<h3>{track}</h3>" if track is not None else ""
    table_html = f"<table><tbody>{body_rows}</tbody></table>" if with_table else "<p>Loading...</p>"
    return (
        "<html><body>"
        f'<nav><a href="#">{tab_label}</a></nav>'
        f"{scenario_html}"
        f'<div class="container">{track_html}{table_html}</div>'
        "</body></html>"
    )


def ranked_rows(players: Sequence[str], start_time: float = 40.0):
    """Rows for `players` in finishing order with increasing times."""
    return [
        (str(i), f"{start_time + i:.3f}", player)
        for i, player in enumerate(players, start=1)
    ]


class SessionRecorder:
    """Session factory handing out FixtureSessions and keeping them for inspection."""

    def __init__(self, pages, tab_pages=None, fail_launch=False):
        self.pages = pages
        self.tab_pages = tab_pages
        self.fail_launch = fail_launch
        self.sessions = []

    def __call__(self) -> FixtureSession:
        session = FixtureSession(self.pages, tab_pages=self.tab_pages, fail_launch=self.fail_launch)
        self.sessions.append(session)
        return session

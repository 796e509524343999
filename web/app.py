import os
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from league.config import LeagueConfig
from league.pipeline import run_weekly
from league.scraper.source import SessionFactory
from league.storage import RosterStore, read_annual_ranking, read_rules

static_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "static")


def create_app(config: Optional[LeagueConfig] = None, session_factory: Optional[SessionFactory] = None) -> FastAPI:
    config = config or LeagueConfig.from_env()
    roster = RosterStore(config.roster_path)

    app = FastAPI(title="Weekly League")
    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    print(f"[LEAGUE] Roster file: {os.path.abspath(config.roster_path)} ({len(config.sources)} sources)")

    @app.get("/")
    async def root() -> HTMLResponse:
        with open(os.path.join(static_dir, "index.html"), encoding="utf-8") as f:
            return HTMLResponse(
                content=f.read(),
                headers={"Cache-Control": "no-store, no-cache, must-revalidate, max-age=0"},
            )

    @app.get("/api/weekly")
    async def weekly() -> dict:
        report = await run_weekly(config, roster=roster, session_factory=session_factory)
        payload = report.to_dict()
        payload["annual_ranking"] = read_annual_ranking(config.annual_ranking_path)
        payload["rules"] = read_rules(config.rules_path)
        return payload

    @app.post("/api/players")
    async def register_player(request: Request) -> dict:
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="Expected a JSON body")
        if not isinstance(body, dict):
            raise HTTPException(status_code=400, detail="Expected a JSON object")

        name = str(body.get("name") or "").strip()
        if not name:
            raise HTTPException(status_code=400, detail="Player name is required")
        if body.get("human") is not True:
            raise HTTPException(status_code=400, detail="Please confirm you are not a robot")

        added = roster.add(name)
        print(f"[LEAGUE] Registration: {name} (added={added})")
        return {"name": name, "added": added}

    @app.get("/api/players/list")
    async def players_list() -> PlainTextResponse:
        return PlainTextResponse("\n".join(roster.list()))

    return app


app = create_app()

"""Ski report JSON API: FastAPI app over the forecast service."""

import os
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from skireport.config.loader import load_config
from skireport.config.schema import SkillConfig
from skireport.forecast.service import ForecastService, build_forecast_service
from skireport.ingest.gridpoints import GridpointResolver
from skireport.models.common import ForecastError
from skireport.skill import SkillHandler
from skireport.speech import responses
from skireport.storage import resort_repo
from skireport.storage.database import open_db

ERROR_STATUS = {
    ForecastError.NOT_SUPPORTED: 404,
    ForecastError.TERMINAL_ERROR: 502,
    ForecastError.INVALID_DAY: 422,
    ForecastError.NO_DATA_FOR_DAY: 404,
}


class IntentRequest(BaseModel):
    intent: str
    slots: dict[str, Any] = {}


def _raise_for(error: ForecastError) -> None:
    raise HTTPException(
        status_code=ERROR_STATUS[error],
        detail={"error": str(error), "message": responses.error_message(error)},
    )


def create_app(
    config: SkillConfig, service: ForecastService | None = None
) -> FastAPI:
    resolver = GridpointResolver(config.resorts)
    if service is None:
        service = build_forecast_service(resolver, config.weather_api)

    app = FastAPI(title="Ski Report", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    def record(resort_id: str | None, synonym_value: str | None = None) -> None:
        if not config.storage.track_resorts:
            return
        conn = open_db(config.storage.db_path)
        try:
            resort_repo.increment_resort_counter(conn, resort_id, synonym_value)
        finally:
            conn.close()

    skill = SkillHandler(service, record)

    # ── Forecast endpoints ──────────────────────────────────────────

    @app.get("/api/resorts")
    def get_resorts():
        """All resorts in the gridpoint table."""
        return [
            {"id": r.id, "name": r.name, "supported": r.gridpoint is not None}
            for r in resolver.resorts()
        ]

    @app.get("/api/resorts/{resort_id}/today")
    def get_today(resort_id: str):
        record(resort_id)
        result = service.forecast_today(resort_id)
        if result.error is not None:
            _raise_for(result.error)
        return {"resort": resort_id, "detailed_forecast": result.detailed_forecast}

    @app.get("/api/resorts/{resort_id}/week")
    def get_week(resort_id: str):
        record(resort_id)
        result = service.forecast_week(resort_id)
        if result.error is not None:
            _raise_for(result.error)
        return {"resort": resort_id, "days": [asdict(s) for s in result.summaries]}

    @app.get("/api/resorts/{resort_id}/day/{day}")
    def get_day(resort_id: str, day: str):
        record(resort_id)
        result = service.forecast_week_day(resort_id, day)
        if result.error is not None:
            _raise_for(result.error)
        return {"resort": resort_id, **asdict(result.summary)}

    # ── Voice intents ───────────────────────────────────────────────

    @app.post("/api/intent")
    def post_intent(req: IntentRequest):
        """Answer a voice intent with the text to speak."""
        return asdict(skill.handle(req.intent, req.slots))

    # ── Usage ───────────────────────────────────────────────────────

    @app.get("/api/stats")
    def get_stats(limit: int = 50):
        """Resort request counters, most requested first."""
        conn = open_db(config.storage.db_path)
        try:
            return resort_repo.get_resort_counts(conn, limit)
        finally:
            conn.close()

    return app


app = create_app(load_config(os.environ.get("SKIREPORT_CONFIG")))

"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Load .env from the project root or backend/
_backend_dir = Path(__file__).resolve().parent.parent.parent
load_dotenv(_backend_dir.parent / ".env")
load_dotenv(_backend_dir / ".env")

from tameer.exceptions import InvalidEnumValueError, InvalidInputError
from tameer.models.enums import (
    BeamReinforcement,
    FloorFinish,
    FloorOption,
    FoundationType,
    QualityTier,
    SteelGrade,
    UnitType,
    label_for,
)
from tameer.models.inputs import ProjectInputs  # noqa: TCH001 (FastAPI resolves at runtime)

if TYPE_CHECKING:
    from enum import StrEnum

    from tameer.engine import CostEngine

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"

_OPTION_ENUMS: dict[str, type[StrEnum]] = {
    "unit_type": UnitType,
    "floors": FloorOption,
    "quality": QualityTier,
    "steel_grade": SteelGrade,
    "floor_finish": FloorFinish,
    "foundation_type": FoundationType,
    "beam_reinforcement": BeamReinforcement,
}


def _cors_origins() -> list[str]:
    raw = os.environ.get("TAMEER_CORS_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def create_app(*, cost_engine: CostEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built cost engine (e.g. for tests). If not provided,
        one is created via create_default_engine on first request.
    """
    app = FastAPI(title="Tameer", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject engines
    app.state.cost_engine = cost_engine

    def _get_cost_engine() -> CostEngine:
        eng: CostEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        from tameer.factory import create_default_engine

        eng = create_default_engine()
        app.state.cost_engine = eng
        return eng

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(
        request: Request, exc: InvalidInputError,
    ) -> JSONResponse:
        logger.info("Rejected estimate input: %s", exc)
        content: dict[str, Any] = {"detail": str(exc)}
        if isinstance(exc, InvalidEnumValueError):
            content["field"] = exc.field
            content["allowed"] = exc.allowed
        else:
            content["field"] = "unit_type"
        return JSONResponse(status_code=422, content=content)

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # GET /api/options
    # ------------------------------------------------------------------

    @app.get("/api/options")
    def options() -> dict[str, list[dict[str, str]]]:
        return {
            field: [
                {"value": member.value, "label": label_for(member)}
                for member in enum_cls
            ]
            for field, enum_cls in _OPTION_ENUMS.items()
        }

    # ------------------------------------------------------------------
    # Market data
    # ------------------------------------------------------------------

    @app.get("/api/cities")
    def cities() -> list[str]:
        return _get_cost_engine().repository.cities()

    @app.get("/api/prices")
    def prices(city: str | None = None) -> dict[str, Any]:
        repo = _get_cost_engine().repository
        if city is None:
            table, is_default = repo.default_prices(), True
        else:
            table, is_default = repo.get_price_table(city)
        return {
            "city": city,
            "is_default": is_default,
            "prices": [row.model_dump(mode="json") for row in table],
        }

    @app.get("/api/price-history")
    def price_history() -> list[dict[str, Any]]:
        repo = _get_cost_engine().repository
        return [point.model_dump(mode="json") for point in repo.price_history()]

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(inputs: ProjectInputs) -> dict[str, Any]:
        try:
            result = _get_cost_engine().estimate(inputs)
        except InvalidInputError:
            raise
        except Exception as exc:
            logger.exception("Estimation failed for %s", inputs.city)
            raise HTTPException(
                status_code=500, detail="Estimation failed",
            ) from exc
        return {
            "estimate": result.model_dump(mode="json"),
            "summary": result.to_summary_dict(),
        }

    return app

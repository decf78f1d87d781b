"""Starlette web adapter exposing the timetable API."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from train_timetable.adapters.serializers import (
    classification_to_dict,
    schedule_view_to_dict,
    validity_dates_to_dict,
)
from train_timetable.domain.errors import ScheduleNotFoundError

if TYPE_CHECKING:
    from starlette.requests import Request

    from train_timetable.adapters.config import AppConfig
    from train_timetable.domain.ports import TimetableService

logger = logging.getLogger(__name__)


def _parse_date_param(request: Request) -> date | None:
    """Parse the optional ?date=YYYY-MM-DD query parameter."""
    raw = request.query_params.get("date")
    if not raw:
        return None
    return date.fromisoformat(raw)


def create_app(service: TimetableService, config: AppConfig) -> Starlette:
    """Create the Starlette application.

    Args:
        service: Timetable service answering the queries.
        config: Application configuration (CORS origins).

    Returns:
        The ASGI application.
    """

    async def validity(_request: Request) -> Response:
        """Classify today against the dataset validity and holidays."""
        try:
            result = await service.compute_validity()
        except Exception:
            logger.exception("Error in /api/validity")
            return JSONResponse({"error": "Internal server error"}, status_code=500)
        return JSONResponse(classification_to_dict(result))

    async def validity_dates(_request: Request) -> Response:
        """Return the raw validity dates, or null."""
        try:
            result = await service.load_validity_dates()
        except Exception:
            logger.exception("Error in /api/validity-dates")
            return JSONResponse({"error": "Failed to fetch validity dates"}, status_code=500)
        return JSONResponse(validity_dates_to_dict(result))

    async def schedules(request: Request) -> Response:
        """Return the per-station timetable of a line and direction."""
        line = request.path_params["line"]
        direction = request.path_params["direction"]
        try:
            reference_date = _parse_date_param(request)
        except ValueError:
            return JSONResponse(
                {"error": "Invalid date", "details": "Use the YYYY-MM-DD format"},
                status_code=400,
            )

        logger.info(f"Fetching schedules for line {line}, direction {direction}")
        try:
            view = await service.compute_schedules(line, direction, reference_date)
        except ScheduleNotFoundError as e:
            logger.warning(f"Schedule not found: {e}")
            return JSONResponse(
                {
                    "error": "Schedule not found",
                    "details": str(e),
                    "line": e.line,
                    "direction": e.direction,
                },
                status_code=404,
            )
        except Exception as e:
            logger.exception(f"Error in /api/schedules/{line}/{direction}")
            return JSONResponse(
                {"error": "Failed to load schedules", "details": str(e)}, status_code=500
            )
        return JSONResponse(schedule_view_to_dict(view))

    async def announcements(_request: Request) -> Response:
        """Return the dataset announcements unchanged."""
        try:
            result: Any = await service.load_announcements()
        except Exception:
            logger.exception("Error in /api/announcements")
            return JSONResponse({"error": "Failed to fetch announcements"}, status_code=500)
        if not result:
            logger.warning("No announcements found in dataset")
        return JSONResponse(result)

    async def stations(_request: Request) -> Response:
        """Return the dataset station metadata unchanged."""
        try:
            result: Any = await service.load_stations()
        except Exception:
            logger.exception("Error in /api/stations")
            return JSONResponse({"error": "Failed to fetch stations"}, status_code=500)
        return JSONResponse(result)

    async def healthz(_request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    routes = [
        Route("/api/validity", validity, methods=["GET"]),
        Route("/api/validity-dates", validity_dates, methods=["GET"]),
        Route("/api/schedules/{line}/{direction}", schedules, methods=["GET"]),
        Route("/api/announcements", announcements, methods=["GET"]),
        Route("/api/stations", stations, methods=["GET"]),
        Route("/healthz", healthz, methods=["GET"]),
    ]
    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=config.cors_allow_origins,
            allow_methods=["GET"],
            allow_headers=["*"],
        )
    ]
    return Starlette(routes=routes, middleware=middleware)

"""Mini README: FastAPI service exposing route planning and a drift session.

Structure:
    * create_application - application factory wiring routes to one route
      engine and one ``DriftReconciler`` session.
    * Request models - pydantic bodies for planning and session updates.

The service holds a single flight session in memory: planning a route
stores its events, and the ``/flight`` endpoints reconcile those events
against the live clock. Hosting several concurrent flights means creating
several applications (or reconcilers); the factory accepts both
collaborators so tests can inject deterministic clocks.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..alerts import alert_delay_seconds, next_event
from ..catalog import route_pack_from_dict
from ..configuration import get_settings
from ..drift import DriftReconciler
from ..logging_utils import get_logger
from ..route_planning import LandmarkEvent, RouteEngine, RouteMetrics
from .. import __version__

LOGGER = get_logger(__name__)


class PlanRequest(BaseModel):
    """Route pack plus the schedule of the flight being planned."""

    route_pack: Dict[str, Any]
    scheduled_departure: datetime
    scheduled_arrival: datetime
    aircraft_type: str = Field("B737", min_length=1)


class ScheduleRequest(BaseModel):
    scheduled_departure: datetime
    scheduled_arrival: datetime


class StartRequest(BaseModel):
    actual_departure_time: Optional[datetime] = None


class ManualAdjustmentRequest(BaseModel):
    minutes: float


def _metrics_payload(metrics: RouteMetrics) -> Dict[str, float]:
    return {
        "airborne_minutes": metrics.airborne_minutes,
        "distance_nm": metrics.distance_nm,
        "cruise_speed_kt": metrics.cruise_speed_kt,
    }


def _events_payload(events: List[LandmarkEvent], lead_minutes: float) -> List[Dict[str, Any]]:
    payload = []
    for event in events:
        entry = event.as_dict()
        entry["alert_delay_seconds"] = alert_delay_seconds(event, lead_minutes)
        payload.append(entry)
    return payload


def create_application(
    *,
    engine: Optional[RouteEngine] = None,
    reconciler: Optional[DriftReconciler] = None,
) -> FastAPI:
    """Create the FastAPI application with routes and collaborators."""

    settings = get_settings()
    app = FastAPI(title="SkyWindow", version=__version__)

    engine = engine or RouteEngine.from_settings(settings)
    reconciler = reconciler or DriftReconciler()
    lead_minutes = settings.alert_lead_minutes
    flight_state: Dict[str, Any] = {"events": [], "metrics": None}
    app.state.engine = engine
    app.state.reconciler = reconciler

    @app.get("/health")
    async def health() -> JSONResponse:
        """Report liveness and the session phase."""

        return JSONResponse({"status": "ok", "phase": reconciler.phase.value})

    @app.post("/routes/plan")
    async def plan_route(request: PlanRequest) -> JSONResponse:
        """Plan a route and annotate the landmarks of its route pack."""

        try:
            pack = route_pack_from_dict(request.route_pack)
        except ValueError as error:
            raise HTTPException(status_code=400, detail=str(error)) from error

        origin = pack.origin.coordinate
        destination = pack.destination.coordinate
        metrics = engine.plan_route(
            origin,
            destination,
            request.scheduled_departure,
            request.scheduled_arrival,
            request.aircraft_type,
        )
        events = engine.annotate_landmarks(metrics, origin, destination, pack.landmarks)
        flight_state["events"] = events
        flight_state["metrics"] = metrics
        LOGGER.info(
            "Planned %s (%s -> %s) with %s events",
            pack.pack_id,
            pack.origin.code,
            pack.destination.code,
            len(events),
        )
        return JSONResponse(
            {
                "route_pack": pack.pack_id,
                "metrics": _metrics_payload(metrics),
                "events": _events_payload(events, lead_minutes),
            }
        )

    @app.post("/flight/initialize")
    async def initialize_flight(request: ScheduleRequest) -> JSONResponse:
        """Load a schedule into the drift session."""

        reconciler.initialize(request.scheduled_departure, request.scheduled_arrival)
        return JSONResponse({"phase": reconciler.phase.value})

    @app.post("/flight/start")
    async def start_flight(request: StartRequest) -> JSONResponse:
        """Record takeoff, defaulting to the current time."""

        reconciler.start_flight(request.actual_departure_time)
        return JSONResponse(
            {"phase": reconciler.phase.value, "drift": reconciler.get_current_drift().as_dict()}
        )

    @app.post("/flight/manual-adjustment")
    async def manual_adjustment(request: ManualAdjustmentRequest) -> JSONResponse:
        """Replace the manual timeline correction."""

        reconciler.apply_manual_adjustment(request.minutes)
        return JSONResponse({"drift": reconciler.get_current_drift().as_dict()})

    @app.post("/flight/reset")
    async def reset_flight() -> JSONResponse:
        """Discard the session and any planned events."""

        reconciler.reset()
        flight_state["events"] = []
        flight_state["metrics"] = None
        return JSONResponse({"phase": reconciler.phase.value})

    @app.get("/flight/drift")
    async def current_drift() -> JSONResponse:
        return JSONResponse(reconciler.get_current_drift().as_dict())

    @app.get("/flight/progress")
    async def flight_progress() -> JSONResponse:
        return JSONResponse(reconciler.get_flight_progress().as_dict())

    @app.get("/flight/stats")
    async def flight_stats() -> JSONResponse:
        return JSONResponse(reconciler.get_stats().as_dict())

    @app.get("/flight/timeline")
    async def flight_timeline() -> JSONResponse:
        """Return the planned events with drift-corrected ETAs."""

        if flight_state["metrics"] is None:
            raise HTTPException(status_code=409, detail="Plan a route before requesting a timeline.")
        adjusted = reconciler.adjust_timeline(flight_state["events"])
        elapsed = reconciler.get_flight_progress().actual_elapsed
        upcoming = next_event(adjusted, elapsed)
        return JSONResponse(
            {
                "events": _events_payload(adjusted, lead_minutes),
                "next_landmark": upcoming.landmark.name if upcoming else None,
            }
        )

    @app.get("/flight/suggestion")
    async def timeline_suggestion(passed: int, total: int) -> JSONResponse:
        """Advise a manual correction from how many landmarks were spotted."""

        if passed < 0 or total < 0:
            raise HTTPException(status_code=400, detail="Landmark counts must be non-negative.")
        minutes = reconciler.suggest_timeline_adjustment(passed, total)
        return JSONResponse({"suggested_minutes": minutes})

    return app

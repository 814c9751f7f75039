"""Mini README: Route pack parsing for landmark catalogs.

Structure:
    * Airport - endpoint of a route pack.
    * RoutePack - origin, destination and the landmarks along the way.
    * route_pack_from_dict - validate a decoded payload.
    * route_pack_from_json / load_route_pack - decode text or a file first.

Route packs are produced by the content service as JSON using its own
camelCase keys (``kidFacts``) and a ``type`` field for the landmark
category. Validation failures raise ``ValueError`` so callers (CLI, web
handlers) can report them. Caching and expiry belong to the storage layer,
not here.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from ..logging_utils import get_logger
from ..route_planning import Coordinate, Landmark, LandmarkCategory

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Airport:
    """Route pack endpoint."""

    code: str
    name: str
    coordinate: Coordinate


@dataclass(slots=True)
class RoutePack:
    """Landmark catalog for a single origin/destination pair."""

    pack_id: str
    origin: Airport
    destination: Airport
    landmarks: List[Landmark] = field(default_factory=list)


def _require(payload: Mapping[str, Any], key: str, context: str) -> Any:
    if key not in payload or payload[key] is None:
        raise ValueError(f"{context} is missing required field '{key}'")
    return payload[key]


def _coordinate(payload: Mapping[str, Any], context: str) -> Coordinate:
    try:
        latitude = float(_require(payload, "lat", context))
        longitude = float(_require(payload, "lon", context))
    except (TypeError, ValueError) as error:
        raise ValueError(f"{context} has an invalid coordinate") from error
    if not -90.0 <= latitude <= 90.0 or not -180.0 <= longitude <= 180.0:
        raise ValueError(f"{context} coordinate ({latitude}, {longitude}) is out of range")
    return Coordinate(latitude=latitude, longitude=longitude)


def _airport(payload: Any, context: str) -> Airport:
    if not isinstance(payload, Mapping):
        raise ValueError(f"{context} must be an object")
    return Airport(
        code=str(_require(payload, "code", context)),
        name=str(payload.get("name", "")),
        coordinate=_coordinate(payload, context),
    )


def _landmark(payload: Any, index: int) -> Landmark:
    context = f"Landmark #{index}"
    if not isinstance(payload, Mapping):
        raise ValueError(f"{context} must be an object")
    name = str(_require(payload, "name", context))
    context = f"Landmark '{name}'"
    facts = payload.get("kidFacts", [])
    if not isinstance(facts, list):
        raise ValueError(f"{context} kidFacts must be a list of strings")
    return Landmark(
        name=name,
        coordinate=_coordinate(payload, context),
        landmark_id=str(payload.get("id", "")),
        category=LandmarkCategory.from_str(str(payload.get("type", "city"))),
        description=str(payload.get("description", "")),
        child_facts=tuple(str(fact) for fact in facts),
    )


def route_pack_from_dict(payload: Mapping[str, Any]) -> RoutePack:
    """Validate a decoded route pack payload."""

    if not isinstance(payload, Mapping):
        raise ValueError("Route pack must be a JSON object")
    landmarks_payload = payload.get("landmarks", [])
    if not isinstance(landmarks_payload, list):
        raise ValueError("Route pack landmarks must be a list")

    pack = RoutePack(
        pack_id=str(_require(payload, "id", "Route pack")),
        origin=_airport(_require(payload, "origin", "Route pack"), "Origin"),
        destination=_airport(_require(payload, "destination", "Route pack"), "Destination"),
        landmarks=[_landmark(item, index) for index, item in enumerate(landmarks_payload)],
    )
    LOGGER.debug(
        "Parsed route pack %s (%s -> %s) with %s landmarks",
        pack.pack_id,
        pack.origin.code,
        pack.destination.code,
        len(pack.landmarks),
    )
    return pack


def route_pack_from_json(text: Union[str, bytes]) -> RoutePack:
    """Decode and validate a route pack JSON document."""

    try:
        payload: Dict[str, Any] = json.loads(text)
    except json.JSONDecodeError as error:
        raise ValueError("Route pack payload is invalid JSON") from error
    return route_pack_from_dict(payload)


def load_route_pack(path: Union[str, Path]) -> RoutePack:
    """Read a route pack from disk."""

    path = Path(path).expanduser()
    LOGGER.info("Loading route pack from %s", path)
    return route_pack_from_json(path.read_text(encoding="utf-8"))

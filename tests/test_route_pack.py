"""Mini README: Tests for route pack parsing.

Confirms the bundled LAX-JFK pack loads, and that malformed payloads are
rejected with ``ValueError`` before they reach route planning.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from skywindow.catalog import load_route_pack, route_pack_from_dict, route_pack_from_json
from skywindow.route_planning import LandmarkCategory

PACK_PATH = Path(__file__).resolve().parents[1] / "data" / "route_packs" / "lax-jfk.json"


def _payload() -> dict:
    return json.loads(PACK_PATH.read_text(encoding="utf-8"))


def test_load_bundled_route_pack() -> None:
    pack = load_route_pack(PACK_PATH)

    assert pack.pack_id == "lax-jfk"
    assert pack.origin.code == "LAX"
    assert pack.destination.coordinate.latitude == pytest.approx(40.6413)
    assert [landmark.name for landmark in pack.landmarks] == [
        "Grand Canyon",
        "Denver",
        "Chicago",
        "Toronto",
    ]
    canyon = pack.landmarks[0]
    assert canyon.category is LandmarkCategory.NATURAL
    assert canyon.landmark_id == "grand-canyon"
    assert len(canyon.child_facts) == 2


def test_category_is_case_insensitive() -> None:
    payload = _payload()
    payload["landmarks"][0]["type"] = "Water"
    assert route_pack_from_dict(payload).landmarks[0].category is LandmarkCategory.WATER


def test_missing_landmarks_means_empty_catalog() -> None:
    payload = _payload()
    del payload["landmarks"]
    assert route_pack_from_dict(payload).landmarks == []


def test_invalid_json_is_rejected() -> None:
    with pytest.raises(ValueError, match="invalid JSON"):
        route_pack_from_json("{not json")


@pytest.mark.parametrize(
    "mutate",
    [
        lambda payload: payload.pop("id"),
        lambda payload: payload.pop("origin"),
        lambda payload: payload["destination"].pop("lat"),
        lambda payload: payload["landmarks"][1].update({"type": "volcano"}),
        lambda payload: payload["landmarks"][2].update({"lat": 123.0}),
        lambda payload: payload["landmarks"][2].update({"lon": "east"}),
        lambda payload: payload["landmarks"][3].update({"kidFacts": "not a list"}),
        lambda payload: payload.update({"landmarks": {"name": "Denver"}}),
    ],
)
def test_malformed_payloads_raise_value_error(mutate) -> None:
    payload = _payload()
    mutate(payload)
    with pytest.raises(ValueError):
        route_pack_from_dict(payload)

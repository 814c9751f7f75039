"""Mini README: Tests for the Typer command line entry point."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from main_flight_companion import cli

PACK_PATH = Path(__file__).resolve().parents[1] / "data" / "route_packs" / "lax-jfk.json"

runner = CliRunner()


def test_plan_prints_visible_landmarks() -> None:
    result = runner.invoke(
        cli,
        [
            "plan",
            str(PACK_PATH),
            "--departure",
            "2024-01-01T10:00:00Z",
            "--arrival",
            "2024-01-01T15:30:00Z",
            "--aircraft",
            "A320",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "LAX -> JFK" in result.output
    assert "305 min airborne" in result.output
    assert "cruise 447 kt" in result.output
    assert "Grand Canyon" in result.output
    assert "Toronto" not in result.output


def test_plan_rejects_bad_timestamp() -> None:
    result = runner.invoke(
        cli,
        ["plan", str(PACK_PATH), "--departure", "yesterday", "--arrival", "2024-01-01T15:30:00Z"],
    )
    assert result.exit_code != 0


def test_plan_reports_invalid_pack(tmp_path: Path) -> None:
    broken = tmp_path / "broken.json"
    broken.write_text('{"id": "x"}', encoding="utf-8")
    result = runner.invoke(
        cli,
        [
            "plan",
            str(broken),
            "--departure",
            "2024-01-01T10:00:00Z",
            "--arrival",
            "2024-01-01T15:30:00Z",
        ],
    )
    assert result.exit_code == 1


def test_plan_accepts_naive_and_aware_timestamps() -> None:
    result = runner.invoke(
        cli,
        [
            "plan",
            str(PACK_PATH),
            "--departure",
            "2024-01-01T10:00:00",
            "--arrival",
            "2024-01-01T15:30:00Z",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "305 min airborne" in result.output

"""Mini README: Entry point CLI for SkyWindow.

Commands:
    * plan  - annotate a route pack file for a scheduled flight and print
              the predicted landmark sightings.
    * serve - run the FastAPI service with uvicorn.

Policy values (taxi allowance, visibility corridor, default cruise speed)
come from ``SKYWINDOW_`` environment variables via ``get_settings``.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import typer
import uvicorn

from skywindow.alerts import alert_delay_seconds
from skywindow.catalog import load_route_pack
from skywindow.configuration import get_settings
from skywindow.logging_utils import configure_root_logger
from skywindow.route_planning import RouteEngine

cli = typer.Typer(help="Predict window-side landmarks for a flight and serve the SkyWindow API.")


def _parse_timestamp(value: str, label: str) -> datetime:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as error:
        raise typer.BadParameter(f"{label} must be an ISO-8601 timestamp") from error


@cli.command()
def plan(
    pack_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Route pack JSON file."),
    departure: str = typer.Option(..., help="Scheduled departure (ISO-8601)."),
    arrival: str = typer.Option(..., help="Scheduled arrival (ISO-8601)."),
    aircraft: str = typer.Option("B737", help="Aircraft type code, e.g. A320."),
) -> None:
    """Print the landmark events for a route pack."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    scheduled_departure = _parse_timestamp(departure, "departure")
    scheduled_arrival = _parse_timestamp(arrival, "arrival")

    try:
        pack = load_route_pack(pack_file)
    except ValueError as error:
        typer.echo(f"Invalid route pack: {error}", err=True)
        raise typer.Exit(code=1) from error

    engine = RouteEngine.from_settings(settings)
    origin = pack.origin.coordinate
    destination = pack.destination.coordinate
    metrics = engine.plan_route(origin, destination, scheduled_departure, scheduled_arrival, aircraft)
    events = engine.annotate_landmarks(metrics, origin, destination, pack.landmarks)

    typer.echo(
        f"{pack.origin.code} -> {pack.destination.code}: {metrics.distance_nm:.0f} nm, "
        f"{metrics.airborne_minutes:.0f} min airborne, cruise {metrics.cruise_speed_kt} kt"
    )
    if not events:
        typer.echo("No landmarks fall within view of this route.")
        return
    for event in events:
        alert_at = alert_delay_seconds(event, settings.alert_lead_minutes) / 60.0
        typer.echo(
            f"  {event.eta_minutes:6.1f} min  {event.side.value:<5}  "
            f"{event.landmark.name} ({event.cross_track_km:.0f} km off track, alert at {alert_at:.1f} min)"
        )


@cli.command()
def serve(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting SkyWindow on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "skywindow.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


if __name__ == "__main__":
    cli()

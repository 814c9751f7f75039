"""Mini README: Interfaces (HTTP) for SkyWindow.

Exports the FastAPI application factory. The Typer CLI lives in
``main_flight_companion.py`` at the repository root.
"""

from .web_app import create_application

__all__ = ["create_application"]

"""Mini README: Core package initializer for SkyWindow.

SkyWindow predicts which landmarks a passenger will see out of the window
during a flight and keeps those predictions in step with the real flight
timeline. The heavy lifting lives in ``route_planning`` (great-circle
geometry and landmark annotation) and ``drift`` (schedule reconciliation);
this module only re-exports the logging helper so sub-packages share one
configuration.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]

__version__ = "0.1.0"

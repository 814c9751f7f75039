"""Mini README: Landmark catalog input.

Parses the route packs supplied by the content service into the landmark
records consumed by route planning.
"""

from .route_pack import (
    Airport,
    RoutePack,
    load_route_pack,
    route_pack_from_dict,
    route_pack_from_json,
)

__all__ = [
    "Airport",
    "RoutePack",
    "load_route_pack",
    "route_pack_from_dict",
    "route_pack_from_json",
]

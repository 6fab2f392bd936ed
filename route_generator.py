import logging
from typing import List, NamedTuple, Optional

from models import Coordinate, RouteResult, WaypointLoop
from utils.geo import (
    LOOP_SHAPES,
    build_fallback_loop,
    build_loop_variations,
    duration_minutes_for_distance,
    loop_perimeter_km,
    target_distance_km,
)

logger = logging.getLogger(__name__)


class RouteAttempt(NamedTuple):
    variation: str
    route: Optional[RouteResult]

    @property
    def ok(self) -> bool:
        return self.route is not None


def _attempt(client, variation: str, loop: WaypointLoop) -> RouteAttempt:
    logger.debug("Requesting %s loop | Waypoints: %d | Straight-line length: %.2f km",
                 variation, len(loop) - 2, loop_perimeter_km(loop))
    try:
        route = client.request_route(loop)
    except Exception:
        logger.warning("Route request for %s loop raised, skipping.", variation, exc_info=True)
        return RouteAttempt(variation, None)
    if route is None:
        logger.debug("No route for %s loop, skipping.", variation)
    return RouteAttempt(variation, route)


def generate_loop_routes(start: Coordinate, duration_minutes: float, client) -> List[RouteResult]:
    """
    Generates candidate walking loops of roughly `duration_minutes` from `start` (lon, lat).

    Each loop shape is requested from `client` one after another. If none of them
    comes back, a single rectangular loop is tried. An empty list means no route
    could be generated; it is not an error.
    """
    start_lon, start_lat = start
    target_km = target_distance_km(duration_minutes)

    logger.info("Generating loop routes | Duration: %s min | Target: %.2f km", duration_minutes, target_km)

    variations = build_loop_variations(start_lat, start_lon, target_km)
    attempts = [
        _attempt(client, name, loop)
        for (name, _divisor, _n), loop in zip(LOOP_SHAPES, variations)
    ]

    if not any(a.ok for a in attempts):
        logger.info("All %d loop variations failed, trying fallback rectangle.", len(attempts))
        fallback = build_fallback_loop(start_lon, start_lat, target_km)
        attempts.append(_attempt(client, "fallback", fallback))

    routes = [a.route for a in attempts if a.ok]
    logger.info("Generated %d route(s) from %d attempt(s).", len(routes), len(attempts))
    return routes


def generate_loop_routes_for_distance(start: Coordinate, distance_km: float, client) -> List[RouteResult]:
    """Same as generate_loop_routes, with the walk given as a distance instead of a duration."""
    return generate_loop_routes(start, duration_minutes_for_distance(distance_km), client)

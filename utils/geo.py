import math
from typing import List

from models import Coordinate, WaypointLoop

WALKING_SPEED_KMH = 5  # average walking speed
EARTH_RADIUS_KM = 6371
KM_PER_DEGREE = 111  # 1 degree of latitude is roughly 111 km
DIAGONAL_SCALE = 0.7  # pulls diagonal waypoints back towards the same radius

# (lat, lon) unit offsets: N, E, S, W, NE, SE, SW, NW
COMPASS_DIRECTIONS = [
    (1, 0),
    (0, 1),
    (-1, 0),
    (0, -1),
    (DIAGONAL_SCALE, DIAGONAL_SCALE),
    (-DIAGONAL_SCALE, DIAGONAL_SCALE),
    (-DIAGONAL_SCALE, -DIAGONAL_SCALE),
    (DIAGONAL_SCALE, -DIAGONAL_SCALE),
]

# (name, radius divisor, number of waypoints)
LOOP_SHAPES = [
    ("square", 4, 4),
    ("triangle", 3, 3),
    ("hex", 6, 6),
]


def distance_between(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Return great-circle distance in km between two points (Haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (math.sin(d_lat / 2) ** 2
         + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def target_distance_km(duration_minutes: float) -> float:
    """Distance covered in `duration_minutes` at walking speed. No range check."""
    return (duration_minutes / 60) * WALKING_SPEED_KMH


def duration_minutes_for_distance(distance_km: float) -> float:
    return (distance_km / WALKING_SPEED_KMH) * 60


def degree_offsets(center_lat: float, radius_km: float):
    """
    Convert a radius in km to (lat, lon) degree offsets around `center_lat`.

    Flat-Earth approximation: fine for a walk, wrong near the poles.
    """
    lat_offset = radius_km / KM_PER_DEGREE
    lon_offset = radius_km / (KM_PER_DEGREE * math.cos(math.radians(center_lat)))
    return lat_offset, lon_offset


def offset_waypoints(center_lat: float, center_lon: float, radius_km: float, count: int) -> List[Coordinate]:
    """
    Returns the first `count` compass-direction waypoints around a center point.

    Parameters:
        center_lat, center_lon: center point in decimal degrees
        radius_km: distance of the N/E/S/W points from the center
        count: number of directions, clamped to [0, 8]

    Waypoints come back as (lon, lat) in the fixed order N, E, S, W, NE, SE, SW, NW.
    """
    count = max(0, min(count, len(COMPASS_DIRECTIONS)))
    lat_offset, lon_offset = degree_offsets(center_lat, radius_km)

    return [
        (center_lon + d_lon * lon_offset, center_lat + d_lat * lat_offset)
        for d_lat, d_lon in COMPASS_DIRECTIONS[:count]
    ]


def build_loop_variations(start_lat: float, start_lon: float, target_distance_km: float) -> List[WaypointLoop]:
    """Square, triangle and hex loops around the start, in that order."""
    start = (start_lon, start_lat)
    loops = []
    for _name, divisor, n_waypoints in LOOP_SHAPES:
        radius_km = target_distance_km / divisor
        waypoints = offset_waypoints(start_lat, start_lon, radius_km, n_waypoints)
        loops.append([start, *waypoints, start])
    return loops


def build_fallback_loop(start_lon: float, start_lat: float, target_distance_km: float) -> WaypointLoop:
    """Simple rectangle to the north-east of the start, sides of a quarter of the target."""
    lat_offset, lon_offset = degree_offsets(start_lat, target_distance_km / 4)
    start = (start_lon, start_lat)
    return [
        start,
        (start_lon + lon_offset, start_lat),
        (start_lon + lon_offset, start_lat + lat_offset),
        (start_lon, start_lat + lat_offset),
        start,
    ]


def loop_perimeter_km(loop: WaypointLoop) -> float:
    """Straight-line length of a waypoint loop."""
    return sum(
        distance_between(lat1, lon1, lat2, lon2)
        for (lon1, lat1), (lon2, lat2) in zip(loop[:-1], loop[1:])
    )

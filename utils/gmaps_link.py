from typing import List, Sequence

GMAPS_TRAVEL_MODE = "walking"


def sample_evenly(points: Sequence, n: int) -> list:
    """Pick `n` points at evenly spaced indices, keeping order."""
    if n <= 0 or not points:
        return []
    if n >= len(points):
        return list(points)
    return [points[int(i * len(points) / n)] for i in range(n)]


def generate_gmaps_route_url(route_coords: List[Sequence[float]], max_waypoints: int = 10) -> str:
    """
    Google Maps walking directions URL following a provider route.

    `route_coords` are (lon, lat) or (lon, lat, ele) as returned by the provider.
    The first and last points become origin and destination; the path in between
    is sampled down to what Google Maps accepts as intermediate waypoints.
    """
    if len(route_coords) < 2:
        raise ValueError("At least two route points are required to build a Google Maps link.")

    route_latlon = [(c[1], c[0]) for c in route_coords]
    max_intermediate = max_waypoints - 2  # exclude origin & destination

    o_lat, o_lon = route_latlon[0]
    d_lat, d_lon = route_latlon[-1]
    intermediate = sample_evenly(route_latlon[1:-1], max_intermediate)

    url = f"https://www.google.com/maps/dir/?api=1&origin={o_lat},{o_lon}&destination={d_lat},{d_lon}"

    waypoints_param = "|".join(f"{lat},{lon}" for lat, lon in intermediate)
    if waypoints_param:
        url += f"&waypoints={waypoints_param}"
    url += f"&travelmode={GMAPS_TRAVEL_MODE}&dir_action=navigate&avoid=highways"

    return url

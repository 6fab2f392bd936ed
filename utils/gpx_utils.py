from typing import Optional

import gpxpy
import gpxpy.gpx

from models import RouteResult


def route_to_gpx(route: RouteResult, name: Optional[str] = None) -> str:
    """
    Build a GPX document (single track, single segment) from a provider route.
    Elevation is kept when the route carries a third coordinate.
    """
    gpx = gpxpy.gpx.GPX()
    gpx_track = gpxpy.gpx.GPXTrack(name=name)
    gpx.tracks.append(gpx_track)
    gpx_segment = gpxpy.gpx.GPXTrackSegment()
    gpx_track.segments.append(gpx_segment)

    for coord in route.geometry.coordinates:
        lon, lat = coord[0], coord[1]
        ele = coord[2] if len(coord) > 2 else None
        gpx_segment.points.append(gpxpy.gpx.GPXTrackPoint(lat, lon, elevation=ele))

    return gpx.to_xml()

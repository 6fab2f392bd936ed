from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

# --- Coordinate types ---
# Everything in the core is (lon, lat), the order the directions provider speaks.
Coordinate = Tuple[float, float]
WaypointLoop = List[Coordinate]


class RouteGeometry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    coordinates: List[List[float]] = Field(..., description="Path as [lon, lat] or [lon, lat, ele]")


class RouteSummary(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    distance: float = Field(..., description="Total path length in meters")
    duration: float = Field(..., description="Estimated walking time in seconds")


class RouteProperties(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    summary: RouteSummary


class RouteResult(BaseModel):
    """First feature of a provider response: the path actually walked plus its summary."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    geometry: RouteGeometry
    properties: RouteProperties

    @property
    def distance_m(self) -> float:
        return self.properties.summary.distance

    @property
    def duration_s(self) -> float:
        return self.properties.summary.duration

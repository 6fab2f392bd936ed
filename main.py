import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse, Response
from pydantic import BaseModel, Field

import config
from logging_setup import configure_logging
from models import RouteResult
from route_generator import generate_loop_routes
from utils.formatting import format_distance, format_duration
from utils.geo import target_distance_km
from utils.gmaps_link import generate_gmaps_route_url
from utils.gpx_utils import route_to_gpx
from utils.openroute_api import OpenRouteClient

configure_logging()
logger = logging.getLogger(__name__)

NO_ROUTES_MESSAGE = "No routes could be generated for this location and duration."

# --- FastAPI setup ---
app = FastAPI(title="Loop Walk Route API", version="1.0")

# Allow requests from mobile app or frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # change to your app domain(s) in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Request size / security headers ---
@app.middleware("http")
async def limit_request_size(request: Request, call_next):
    cl = request.headers.get("content-length")
    if cl:
        try:
            if int(cl) > config.MAX_REQUEST_SIZE:
                return PlainTextResponse("Request too large", status_code=413)
        except ValueError:
            pass
    return await call_next(request)


@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("X-Frame-Options", "DENY")
    response.headers.setdefault("Referrer-Policy", "no-referrer")
    return response


# --- Data Models ---
class LoopRouteRequest(BaseModel):
    latitude: float = Field(..., description="Start latitude in decimal degrees")
    longitude: float = Field(..., description="Start longitude in decimal degrees")
    duration_minutes: int = Field(..., ge=config.MIN_DURATION_MINUTES, le=config.MAX_DURATION_MINUTES,
                                  description="Desired walk duration in minutes")


class RouteOption(BaseModel):
    index: int = Field(..., description="Position in the list, the only route reference")
    route: RouteResult
    distance_label: str = Field(..., description="Distance for display, e.g. 2.4km")
    duration_label: str = Field(..., description="Duration for display, e.g. 31min")
    gmaps_url: Optional[str] = Field(None, description="Google Maps walking URL of the route")


class LoopRouteResponse(BaseModel):
    target_distance_km: float
    count: int
    routes: List[RouteOption]
    message: Optional[str] = None


# --- Dependencies ---
# Validated once at startup; a bad OPENROUTE_TIMEOUT_S fails here with a pydantic error.
provider_config = config.ProviderConfig.from_env()


def get_route_client():
    client = OpenRouteClient(provider_config)
    try:
        yield client
    finally:
        client.close()


def _route_option(index: int, route: RouteResult) -> RouteOption:
    coords = route.geometry.coordinates
    return RouteOption(
        index=index,
        route=route,
        distance_label=format_distance(route.distance_m),
        duration_label=format_duration(route.duration_s),
        gmaps_url=generate_gmaps_route_url(coords) if len(coords) >= 2 else None,
    )


# --- Endpoints ---
@app.post("/generate-routes", response_model=LoopRouteResponse)
def generate_routes_endpoint(req: LoopRouteRequest, client: OpenRouteClient = Depends(get_route_client)):
    """
    Generate candidate loop walks starting and ending at (latitude, longitude),
    sized for duration_minutes at walking pace.
    """
    routes = generate_loop_routes((req.longitude, req.latitude), req.duration_minutes, client)

    return LoopRouteResponse(
        target_distance_km=target_distance_km(req.duration_minutes),
        count=len(routes),
        routes=[_route_option(i, r) for i, r in enumerate(routes)],
        message=None if routes else NO_ROUTES_MESSAGE,
    )


@app.post("/routes/gpx")
def route_gpx_endpoint(route: RouteResult):
    return Response(content=route_to_gpx(route, name="Loop walk"), media_type="application/gpx+xml")


@app.get("/health")
def health():
    return {"status": "ok"}

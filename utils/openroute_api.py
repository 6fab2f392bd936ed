import logging
from typing import Optional

import requests
from pydantic import ValidationError

from config import ProviderConfig
from models import RouteResult, WaypointLoop

logger = logging.getLogger(__name__)

AVOID_FEATURES = ["highways"]


class OpenRouteClient:
    """
    Walking directions from openrouteservice.

    One POST per waypoint loop, one attempt per call. Any failure (network,
    HTTP status, malformed body) is logged and reported as None so a batch of
    loops can carry on.
    """

    def __init__(self, config: ProviderConfig, log: Optional[logging.Logger] = None):
        self.config = config
        self.log = log or logger
        self.session = requests.Session()

    def close(self) -> None:
        self.session.close()

    def _headers(self) -> dict:
        return {
            "Authorization": self.config.api_key,
            "Content-Type": "application/json",
        }

    def request_route(self, loop: WaypointLoop) -> Optional[RouteResult]:
        """
        Fetches a walking route through the given closed loop of (lon, lat) points.

        Returns:
            RouteResult for the first feature of the response, or None if the
            provider returned no route or the request failed.
        """
        if len(loop) < 3:
            raise ValueError("A waypoint loop needs the start, at least one waypoint and the start again.")

        body = {
            "coordinates": [[lon, lat] for lon, lat in loop],
            "options": {"avoid_features": AVOID_FEATURES},
        }

        try:
            response = self.session.post(
                self.config.directions_url,
                json=body,
                headers=self._headers(),
                timeout=self.config.timeout_s,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            self.log.warning("Route request failed: %s", e, extra={"waypoints": len(loop)})
            return None
        except ValueError as e:
            self.log.warning("Route response was not valid JSON: %s", e)
            return None

        features = data.get("features") if isinstance(data, dict) else None
        if not isinstance(features, list) or not features:
            self.log.warning("No route found for %d waypoints.", len(loop))
            return None

        try:
            route = RouteResult.model_validate(features[0])
        except (ValidationError, TypeError, KeyError) as e:
            self.log.warning("Unexpected route feature shape: %s", e)
            return None

        self.log.debug(
            "Route fetched | Distance: %.1f m | Time: %.1f s | Waypoints: %d",
            route.distance_m, route.duration_s, len(loop),
        )
        return route

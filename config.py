import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

OPENROUTE_API_KEY = os.environ.get("OPENROUTE_API_KEY", "")
OPENROUTE_DIRECTIONS_URL = os.environ.get(
    "OPENROUTE_DIRECTIONS_URL",
    "https://api.openrouteservice.org/v2/directions/foot-walking/geojson",
)
OPENROUTE_TIMEOUT_S = os.environ.get("OPENROUTE_TIMEOUT_S") or None  # unset = wait indefinitely, parsed by ProviderConfig

MAX_REQUEST_SIZE = int(os.environ.get("MAX_REQUEST_SIZE", str(64 * 1024)))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_FORMAT = os.environ.get("LOG_FORMAT", "json")  # json or plain

MIN_DURATION_MINUTES = 1
MAX_DURATION_MINUTES = 180  # 3 hours


class ProviderConfig(BaseModel):
    """Settings handed to the directions client at construction."""
    api_key: str = ""
    directions_url: str = OPENROUTE_DIRECTIONS_URL
    timeout_s: Optional[float] = Field(None, gt=0, description="Seconds to wait for the provider, None for no limit")

    @classmethod
    def from_env(cls) -> "ProviderConfig":
        return cls(
            api_key=OPENROUTE_API_KEY,
            directions_url=OPENROUTE_DIRECTIONS_URL,
            timeout_s=OPENROUTE_TIMEOUT_S,
        )

from __future__ import annotations

import logging
from typing import Optional

import requests

logger = logging.getLogger(__name__)

NOMINATIM_URL = "https://nominatim.openstreetmap.org/reverse"
UNKNOWN_LOCATION = "Unknown location"


class ReverseGeocoder:
    """Turns browser coordinates into a short "road, suburb, city" label."""

    def __init__(self, *, user_agent: str, timeout: float = 10, session: Optional[requests.Session] = None):
        self._user_agent = user_agent
        self._timeout = timeout
        self._session = session or requests.Session()

    def describe(self, latitude: float, longitude: float) -> str:
        try:
            response = self._session.get(
                NOMINATIM_URL,
                params={"format": "json", "lat": latitude, "lon": longitude, "zoom": 18, "addressdetails": 1},
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("Reverse geocoding failed for %s,%s: %s", latitude, longitude, e)
            return UNKNOWN_LOCATION

        if not isinstance(data, dict) or not data.get("display_name"):
            return UNKNOWN_LOCATION
        address = data.get("address") or {}
        parts = [address[k] for k in ("road", "suburb", "city") if address.get(k)]
        return ", ".join(parts) or UNKNOWN_LOCATION

"""Best-effort U.S. state detection from the caller's IP address.

The tax engines never call this; it only exists so a front end can prefill
the state. Any failure is reported as :class:`LocationLookupError` and the
caller is expected to ask the user instead.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from taxapp.config import get_settings
from taxapp.core.models import LocationResult

logger = logging.getLogger("taxapp").getChild("geo")

STATE_NAME_TO_ABBR: dict[str, str] = {
    "Alabama": "AL",
    "Alaska": "AK",
    "Arizona": "AZ",
    "Arkansas": "AR",
    "California": "CA",
    "Colorado": "CO",
    "Connecticut": "CT",
    "Delaware": "DE",
    "District of Columbia": "DC",
    "Florida": "FL",
    "Georgia": "GA",
    "Hawaii": "HI",
    "Idaho": "ID",
    "Illinois": "IL",
    "Indiana": "IN",
    "Iowa": "IA",
    "Kansas": "KS",
    "Kentucky": "KY",
    "Louisiana": "LA",
    "Maine": "ME",
    "Maryland": "MD",
    "Massachusetts": "MA",
    "Michigan": "MI",
    "Minnesota": "MN",
    "Mississippi": "MS",
    "Missouri": "MO",
    "Montana": "MT",
    "Nebraska": "NE",
    "Nevada": "NV",
    "New Hampshire": "NH",
    "New Jersey": "NJ",
    "New Mexico": "NM",
    "New York": "NY",
    "North Carolina": "NC",
    "North Dakota": "ND",
    "Ohio": "OH",
    "Oklahoma": "OK",
    "Oregon": "OR",
    "Pennsylvania": "PA",
    "Rhode Island": "RI",
    "South Carolina": "SC",
    "South Dakota": "SD",
    "Tennessee": "TN",
    "Texas": "TX",
    "Utah": "UT",
    "Vermont": "VT",
    "Virginia": "VA",
    "Washington": "WA",
    "West Virginia": "WV",
    "Wisconsin": "WI",
    "Wyoming": "WY",
}


class LocationLookupError(RuntimeError):
    """Raised when the caller's state cannot be determined."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            f"Failed to detect location: {detail}. Ask the user which state they live in instead."
        )
        self.detail = detail


def location_from_payload(payload: dict[str, Any]) -> LocationResult:
    region = str(payload.get("region") or "")
    city = str(payload.get("city") or "")
    abbreviation = STATE_NAME_TO_ABBR.get(region)
    if abbreviation is None:
        raise LocationLookupError(
            f'Could not map region "{region}" to a US state. The user may be outside the US'
        )
    return LocationResult(state_name=region, state_abbreviation=abbreviation, city=city)


async def detect_user_location(client: httpx.AsyncClient, url: str | None = None) -> LocationResult:
    target = url or get_settings().geolocation_url
    try:
        response = await client.get(target)
    except httpx.HTTPError as exc:
        logger.warning("Geolocation request to %s failed: %s", target, exc)
        raise LocationLookupError(str(exc) or exc.__class__.__name__) from exc
    if response.status_code >= 400:
        raise LocationLookupError(f"Geolocation API returned {response.status_code}")
    try:
        payload = response.json()
    except ValueError as exc:
        raise LocationLookupError("Geolocation API returned a non-JSON body") from exc
    if not isinstance(payload, dict):
        raise LocationLookupError("Geolocation API returned an unexpected payload")
    return location_from_payload(payload)


__all__ = [
    "LocationLookupError",
    "STATE_NAME_TO_ABBR",
    "detect_user_location",
    "location_from_payload",
]

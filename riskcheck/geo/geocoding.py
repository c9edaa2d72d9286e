"""
Geocoding — Address search, coordinates and postal-code lookups.

Backends:
  - Google Geocoding API  → rooftop coordinates for a full address
  - Nominatim (OSM)       → as-you-type address suggestions
  - Zippopotam            → city / state for a German postal code

Every lookup returns None or an empty list on failure; network errors are
logged and never propagated to the caller.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urlencode

import httpx

from riskcheck.config import settings
from riskcheck.models.region_models import GeoResult, PlzLocation

logger = logging.getLogger("riskcheck.geo")

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
GOOGLE_STATIC_MAP_URL = "https://maps.googleapis.com/maps/api/staticmap"
NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"
ZIPPOPOTAM_URL = "https://api.zippopotam.us/de"

# viewbox=left,top,right,bottom — roughly Bavaria, used as a soft preference
BAVARIA_VIEWBOX = "9.0,50.5,14.0,47.0"
MIN_QUERY_LENGTH = 3


def format_address(raw: Any) -> str:
    """
    Format an OSM address into German postal style.

    Target: "Parchwitzerstraße 6, 82256 Fürstenfeldbruck"
    """
    if isinstance(raw, str):
        return raw
    if not isinstance(raw, dict):
        return ""

    road = _first(raw, "road", "pedestrian", "street", "footway", "path")
    house_number = raw.get("house_number") or ""
    postcode = raw.get("postcode") or ""
    city = _first(raw, "city", "town", "village", "municipality", "county")

    if road and city:
        street_part = f"{road} {house_number}" if house_number else road
        city_part = f"{postcode} {city}" if postcode else city
        return f"{street_part}, {city_part}"

    display_name = raw.get("display_name")
    if display_name:
        parts = [p.strip() for p in display_name.split(",")]
        return ", ".join(parts[:3])

    return ""


def satellite_image_url(lat: float, lon: float, zoom: int = 20, size: str = "600x400") -> str:
    params = {
        "center": f"{lat},{lon}",
        "zoom": zoom,
        "size": size,
        "maptype": "satellite",
        "key": settings.google_maps_api_key,
    }
    return f"{GOOGLE_STATIC_MAP_URL}?{urlencode(params)}"


def map_image_url(lat: float, lon: float, zoom: int = 13, size: str = "600x300") -> str:
    """Muted roadmap without labels, used as the background of the region card."""
    params = [
        ("center", f"{lat},{lon}"),
        ("zoom", zoom),
        ("size", size),
        ("maptype", "roadmap"),
        ("style", "feature:all|element:labels|visibility:off"),
        ("style", "feature:road|element:geometry|color:0xffffff"),
        ("style", "feature:landscape|element:geometry|color:0xf5f5f5"),
        ("key", settings.google_maps_api_key),
    ]
    return f"{GOOGLE_STATIC_MAP_URL}?{urlencode(params)}"


class GeoClient:
    """Async client for the geocoding backends."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._http = httpx.AsyncClient(
            timeout=settings.http_timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._http.aclose()

    async def get_coordinates(self, address: str) -> GeoResult | None:
        """High-precision coordinates for a full address via Google Geocoding."""
        try:
            resp = await self._http.get(GOOGLE_GEOCODE_URL, params={
                "address": address,
                "key": settings.google_geocoding_api_key,
            })
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Google geocoding failed: {e}")
            return None

        if not isinstance(data, dict) or data.get("status") != "OK":
            return None

        try:
            first = data["results"][0]
            location = first["geometry"]["location"]
            return GeoResult(
                lat=location["lat"],
                lon=location["lng"],
                display_name=first.get("formatted_address", address),
            )
        except (KeyError, TypeError, IndexError, ValueError) as e:
            logger.warning(f"Unexpected geocoding response shape: {e!r}")
            return None

    async def search_address(self, query: str) -> list[GeoResult]:
        """Address suggestions in Germany, preferring Bavaria."""
        if len(query) < MIN_QUERY_LENGTH:
            return []

        try:
            resp = await self._http.get(
                NOMINATIM_SEARCH_URL,
                params={
                    "format": "json",
                    "q": query,
                    "addressdetails": 1,
                    "limit": 5,
                    "countrycodes": "de",
                    "viewbox": BAVARIA_VIEWBOX,
                    "bounded": 0,
                },
                headers={
                    "User-Agent": settings.nominatim_user_agent,
                    "Accept-Language": "de-DE,de;q=0.9",
                },
            )
            if resp.status_code != 200:
                logger.warning(f"Nominatim returned HTTP {resp.status_code}")
                return []
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Address search failed: {e}")
            return []

        if not isinstance(data, list):
            return []

        results: list[GeoResult] = []
        for item in data:
            try:
                results.append(GeoResult(
                    lat=float(item["lat"]),
                    lon=float(item["lon"]),
                    display_name=format_address(item.get("address") or item),
                ))
            except (KeyError, TypeError, ValueError):
                continue
        return results

    async def get_location_from_plz(self, plz: str) -> PlzLocation | None:
        """City and state for a German postal code."""
        try:
            resp = await self._http.get(f"{ZIPPOPOTAM_URL}/{plz}")
            if resp.status_code != 200:
                return None
            data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Postal code lookup failed for {plz}: {e}")
            return None

        if not isinstance(data, dict):
            return None

        try:
            place = data["places"][0]
            return PlzLocation(city=place["place name"], state=place["state"])
        except (KeyError, TypeError, IndexError, ValueError) as e:
            logger.warning(f"Unexpected postal code response for {plz}: {e!r}")
            return None


def _first(raw: dict, *keys: str) -> str:
    for key in keys:
        value = raw.get(key)
        if value:
            return value
    return ""

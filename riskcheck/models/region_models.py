"""
Region & Geocoding Models.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class CrimeStats(BaseModel):
    """Simulated regional burglary statistics for a postal code."""

    plz: str
    burglary_trend: int = Field(..., description="Year-over-year change in percent")
    risk_score: int = Field(..., ge=1, le=10)
    incidents_last_year: int


class GeoResult(BaseModel):
    lat: float
    lon: float
    display_name: str


class PlzLocation(BaseModel):
    city: str
    state: str


class LocatedAddress(GeoResult):
    """Geocoded address plus the static map images shown on the result page."""

    satellite_image_url: str = ""
    map_image_url: str = ""

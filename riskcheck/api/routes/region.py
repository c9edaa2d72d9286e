"""
Region & Geo Routes

  GET /region/{plz}           → simulated burglary statistics
  GET /region/{plz}/location  → city / state for the postal code
  GET /geo/search?q=          → address suggestions
  GET /geo/coordinates?address= → coordinates plus static map image URLs
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from riskcheck.api.dependencies import get_geo_client
from riskcheck.core.region import get_crime_stats
from riskcheck.geo.geocoding import GeoClient, map_image_url, satellite_image_url
from riskcheck.models.region_models import CrimeStats, GeoResult, LocatedAddress, PlzLocation

router = APIRouter()

PLZ_PATTERN = r"^\d{5}$"


@router.get("/region/{plz}", response_model=CrimeStats)
async def region_stats(plz: str = Path(..., pattern=PLZ_PATTERN)):
    return get_crime_stats(plz)


@router.get("/region/{plz}/location", response_model=PlzLocation)
async def region_location(
    plz: str = Path(..., pattern=PLZ_PATTERN),
    geo: GeoClient = Depends(get_geo_client),
):
    location = await geo.get_location_from_plz(plz)
    if location is None:
        raise HTTPException(status_code=404, detail=f"No location found for {plz}")
    return location


@router.get("/geo/search", response_model=list[GeoResult])
async def geo_search(
    q: str = Query(..., max_length=200),
    geo: GeoClient = Depends(get_geo_client),
):
    return await geo.search_address(q)


@router.get("/geo/coordinates", response_model=LocatedAddress)
async def geo_coordinates(
    address: str = Query(..., min_length=1, max_length=300),
    geo: GeoClient = Depends(get_geo_client),
):
    result = await geo.get_coordinates(address)
    if result is None:
        raise HTTPException(status_code=404, detail="Address not found")
    return LocatedAddress(
        **result.model_dump(),
        satellite_image_url=satellite_image_url(result.lat, result.lon),
        map_image_url=map_image_url(result.lat, result.lon),
    )

"""Geocode lookup endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from app.application.ports.lookup_port import LocationLookupPort
from app.infrastructure.api.dependencies import get_lookup_service

router = APIRouter(prefix="/geocode", tags=["geocode"])


@router.get("/keyword/{keyword}")
async def keyword_lookup(
    keyword: str, service: LocationLookupPort = Depends(get_lookup_service)
):
    """Up to 10 records whose city, state, county or zip matches the keyword."""
    result = await service.keyword_lookup(keyword)
    return result.to_dict()


@router.get("/zipcode/{zipcode}")
async def zipcode_lookup(
    zipcode: int, service: LocationLookupPort = Depends(get_lookup_service)
):
    result = await service.zipcode_lookup(zipcode)
    return result.to_dict()


@router.get("/zipcode/{zipcode}/state")
async def state_by_zip(
    zipcode: int, service: LocationLookupPort = Depends(get_lookup_service)
):
    state = await service.get_state_by_zip(zipcode)
    return {"zipcode": zipcode, "state_name": state}


@router.get("/statecode/{state_code}")
async def statecode_lookup(
    state_code: str, service: LocationLookupPort = Depends(get_lookup_service)
):
    result = await service.statecode_lookup(state_code)
    return result.to_dict()


@router.get("/latlong")
async def lat_long_lookup(
    lat: float = Query(...),
    lng: float = Query(...),
    radius_miles: float | None = Query(default=None, gt=0),
    limit: int | None = Query(default=None, gt=0),
    service: LocationLookupPort = Depends(get_lookup_service),
):
    """Records near a point (default 4 miles, at most 10), in store order."""
    result = await service.lat_long_lookup(lat, lng, radius_miles, limit)
    return result.to_dict()


@router.get("/states")
async def get_states(service: LocationLookupPort = Depends(get_lookup_service)):
    states = await service.get_states()
    return [s.to_dict() for s in states]


@router.get("/all")
async def get_all_geo_data(service: LocationLookupPort = Depends(get_lookup_service)):
    """Entire dataset, narrow projection. Unbounded and never cached."""
    result = await service.get_all_geo_data()
    return result.to_dict()

from fastapi import APIRouter, Depends, Query, Request
from typing import List

from ...api.deps import get_registry, counts_of
from ...schemas.people import CountsResponse, PersonResponse, to_response
from ...services.registry import HospitalRegistry

router = APIRouter(prefix="/people", tags=["People"])

@router.get("/search", response_model=List[PersonResponse])
async def search_by_name(
    name: str = Query(..., min_length=1),
    registry: HospitalRegistry = Depends(get_registry)
):
    """Doctors then patients whose name matches exactly."""
    return [to_response(person) for person in registry.find_by_name(name)]

@router.get("/search/general", response_model=List[PersonResponse])
async def search_general(
    request: Request,
    registry: HospitalRegistry = Depends(get_registry)
):
    """Multi-criteria search. Answers 501 until search criteria are defined."""
    criteria = dict(request.query_params)
    return [to_response(person) for person in registry.find_general(**criteria)]

@router.get("/stats", response_model=CountsResponse)
async def people_stats(registry: HospitalRegistry = Depends(get_registry)):
    return counts_of(registry)

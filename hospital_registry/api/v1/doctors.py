from fastapi import APIRouter, Depends, Query, status
from typing import List
from uuid import UUID
import logging

from ...api.deps import get_registry, get_doctor_or_404
from ...models.doctor import Doctor
from ...schemas.people import DoctorCreate, DoctorResponse, ListingResponse, RemovalResponse
from ...services.registry import HospitalRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/doctors", tags=["Doctors"])

@router.post("", response_model=DoctorResponse, status_code=status.HTTP_201_CREATED)
async def add_doctor(
    doctor_data: DoctorCreate,
    registry: HospitalRegistry = Depends(get_registry)
):
    """Register a new doctor."""
    doctor = doctor_data.to_model()
    registry.add_doctor(doctor)
    logger.info(f"Doctor added: {doctor.name} ({doctor.specialization})")
    return DoctorResponse.model_validate(doctor)

@router.get("", response_model=List[DoctorResponse])
async def list_doctors(registry: HospitalRegistry = Depends(get_registry)):
    """List doctors in the order they were added."""
    return [DoctorResponse.model_validate(d) for d in registry.list_doctors()]

@router.get("/listing", response_model=ListingResponse)
async def render_doctors(registry: HospitalRegistry = Depends(get_registry)):
    """Doctors as a printable listing, one per line."""
    return ListingResponse(count=registry.doctor_count, listing=registry.render_doctors())

@router.get("/search", response_model=List[DoctorResponse])
async def search_by_specialization(
    specialization: str = Query(..., min_length=1),
    registry: HospitalRegistry = Depends(get_registry)
):
    """Doctors whose specialization matches exactly."""
    doctors = registry.find_by_specialization(specialization)
    return [DoctorResponse.model_validate(d) for d in doctors]

@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(doctor: Doctor = Depends(get_doctor_or_404)):
    return DoctorResponse.model_validate(doctor)

@router.delete("/{doctor_id}", response_model=RemovalResponse)
async def remove_doctor(
    doctor_id: UUID,
    registry: HospitalRegistry = Depends(get_registry)
):
    """Remove a doctor. Unknown ids are a no-op reported as not removed."""
    doctor = registry.get_doctor(doctor_id)
    removed = doctor is not None and registry.remove_doctor(doctor)
    if removed:
        logger.info(f"Doctor removed: {doctor.name}")
    return RemovalResponse(removed=removed)

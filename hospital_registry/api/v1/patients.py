from fastapi import APIRouter, Depends, status
from typing import List
from uuid import UUID
import logging

from ...api.deps import get_registry, get_patient_or_404
from ...models.patient import Patient
from ...schemas.people import PatientCreate, PatientResponse, ListingResponse, RemovalResponse
from ...services.registry import HospitalRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/patients", tags=["Patients"])

@router.post("", response_model=PatientResponse, status_code=status.HTTP_201_CREATED)
async def add_patient(
    patient_data: PatientCreate,
    registry: HospitalRegistry = Depends(get_registry)
):
    """Register a new patient."""
    patient = patient_data.to_model()
    registry.add_patient(patient)
    logger.info(f"Patient added: {patient.name}")
    return PatientResponse.model_validate(patient)

@router.get("", response_model=List[PatientResponse])
async def list_patients(registry: HospitalRegistry = Depends(get_registry)):
    return [PatientResponse.model_validate(p) for p in registry.list_patients()]

@router.get("/listing", response_model=ListingResponse)
async def render_patients(registry: HospitalRegistry = Depends(get_registry)):
    return ListingResponse(count=registry.patient_count, listing=registry.render_patients())

@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(patient: Patient = Depends(get_patient_or_404)):
    return PatientResponse.model_validate(patient)

@router.delete("/{patient_id}", response_model=RemovalResponse)
async def remove_patient(
    patient_id: UUID,
    registry: HospitalRegistry = Depends(get_registry)
):
    """Remove a patient. Unknown ids are a no-op reported as not removed."""
    patient = registry.get_patient(patient_id)
    removed = patient is not None and registry.remove_patient(patient)
    if removed:
        logger.info(f"Patient removed: {patient.name}")
    return RemovalResponse(removed=removed)

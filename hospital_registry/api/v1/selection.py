from fastapi import APIRouter, Depends
from typing import Optional

from ...api.deps import get_registry, RecordNotFoundError
from ...schemas.people import DoctorResponse, PatientResponse, SelectionRequest
from ...services.registry import HospitalRegistry

router = APIRouter(prefix="/selection", tags=["Selection"])

# The selection slots are not cleared when the selected record is removed.

@router.get("/doctor", response_model=Optional[DoctorResponse])
async def get_current_doctor(registry: HospitalRegistry = Depends(get_registry)):
    """Currently selected doctor, or null."""
    doctor = registry.current_doctor
    return DoctorResponse.model_validate(doctor) if doctor else None

@router.put("/doctor", response_model=DoctorResponse)
async def select_doctor(
    selection: SelectionRequest,
    registry: HospitalRegistry = Depends(get_registry)
):
    doctor = registry.get_doctor(selection.id)
    if doctor is None:
        raise RecordNotFoundError("doctor", selection.id)
    registry.current_doctor = doctor
    return DoctorResponse.model_validate(doctor)

@router.delete("/doctor")
async def clear_current_doctor(registry: HospitalRegistry = Depends(get_registry)):
    registry.current_doctor = None
    return {"message": "Doctor selection cleared"}

@router.get("/patient", response_model=Optional[PatientResponse])
async def get_current_patient(registry: HospitalRegistry = Depends(get_registry)):
    """Currently selected patient, or null."""
    patient = registry.current_patient
    return PatientResponse.model_validate(patient) if patient else None

@router.put("/patient", response_model=PatientResponse)
async def select_patient(
    selection: SelectionRequest,
    registry: HospitalRegistry = Depends(get_registry)
):
    patient = registry.get_patient(selection.id)
    if patient is None:
        raise RecordNotFoundError("patient", selection.id)
    registry.current_patient = patient
    return PatientResponse.model_validate(patient)

@router.delete("/patient")
async def clear_current_patient(registry: HospitalRegistry = Depends(get_registry)):
    registry.current_patient = None
    return {"message": "Patient selection cleared"}

from fastapi import Depends, HTTPException, Request, status
from uuid import UUID

from ..models.doctor import Doctor
from ..models.patient import Patient
from ..schemas.people import CountsResponse
from ..services.registry import HospitalRegistry

# HTTP exceptions
class RecordNotFoundError(HTTPException):
    def __init__(self, kind: str, record_id):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{kind.capitalize()} {record_id} not found",
        )

def get_registry(request: Request) -> HospitalRegistry:
    """Get the registry shared by every handler of the running application."""
    return request.app.state.registry

async def get_doctor_or_404(
    doctor_id: UUID,
    registry: HospitalRegistry = Depends(get_registry)
) -> Doctor:
    """Resolve a doctor id against the registry."""
    doctor = registry.get_doctor(doctor_id)
    if doctor is None:
        raise RecordNotFoundError("doctor", doctor_id)
    return doctor

async def get_patient_or_404(
    patient_id: UUID,
    registry: HospitalRegistry = Depends(get_registry)
) -> Patient:
    """Resolve a patient id against the registry."""
    patient = registry.get_patient(patient_id)
    if patient is None:
        raise RecordNotFoundError("patient", patient_id)
    return patient

def counts_of(registry: HospitalRegistry) -> CountsResponse:
    return CountsResponse(
        doctor_count=registry.doctor_count,
        patient_count=registry.patient_count,
        total_people_count=registry.total_people_count,
    )

from fastapi import APIRouter, Depends

from ...api.deps import get_registry, counts_of
from ...schemas.people import MenuAction, MenuResponse
from ...services.registry import HospitalRegistry

router = APIRouter(prefix="/menus", tags=["Menus"])

API_PREFIX = "/api/v1"

@router.get("/main", response_model=MenuResponse)
async def main_menu(registry: HospitalRegistry = Depends(get_registry)):
    """Entry screen: go to the doctors or patients menus, or search everyone."""
    return MenuResponse(
        menu="main",
        counts=counts_of(registry),
        actions=[
            MenuAction(name="doctors_menu", label="Doctors", target=f"{API_PREFIX}/menus/doctors"),
            MenuAction(name="patients_menu", label="Patients", target=f"{API_PREFIX}/menus/patients"),
            MenuAction(
                name="search_people",
                label="Search by name",
                target=f"{API_PREFIX}/people/search",
                enabled=registry.total_people_count > 0,
            ),
        ],
    )

@router.get("/doctors", response_model=MenuResponse)
async def doctors_menu(registry: HospitalRegistry = Depends(get_registry)):
    """Doctors screen: showing doctors is disabled while there are none."""
    has_doctors = registry.doctor_count > 0
    return MenuResponse(
        menu="doctors",
        counts=counts_of(registry),
        actions=[
            MenuAction(name="show_doctors", label="Show doctors", target=f"{API_PREFIX}/doctors", enabled=has_doctors),
            MenuAction(name="add_doctor", label="Add a doctor", target=f"{API_PREFIX}/doctors"),
            MenuAction(
                name="search_specialization",
                label="Search by specialization",
                target=f"{API_PREFIX}/doctors/search",
                enabled=has_doctors,
            ),
            MenuAction(name="back", label="Back", target=f"{API_PREFIX}/menus/main"),
        ],
    )

@router.get("/patients", response_model=MenuResponse)
async def patients_menu(registry: HospitalRegistry = Depends(get_registry)):
    """Patients screen: showing patients is disabled while there are none."""
    return MenuResponse(
        menu="patients",
        counts=counts_of(registry),
        actions=[
            MenuAction(
                name="show_patients",
                label="Show patients",
                target=f"{API_PREFIX}/patients",
                enabled=registry.patient_count > 0,
            ),
            MenuAction(name="add_patient", label="Add a patient", target=f"{API_PREFIX}/patients"),
            MenuAction(name="back", label="Back", target=f"{API_PREFIX}/menus/main"),
        ],
    )

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union
from uuid import UUID
import logging

from ..core.errors import GeneralSearchNotSupportedError
from ..models.doctor import Doctor
from ..models.patient import Patient
from ..models.person import Person

logger = logging.getLogger(__name__)

class ChangeAction(str, Enum):
    DOCTOR_ADDED = "doctor_added"
    DOCTOR_REMOVED = "doctor_removed"
    PATIENT_ADDED = "patient_added"
    PATIENT_REMOVED = "patient_removed"

@dataclass(frozen=True)
class RegistryChange:
    """Snapshot handed to listeners after a membership change."""
    action: ChangeAction
    record: Person
    doctor_count: int
    patient_count: int
    total_people_count: int

RegistryListener = Callable[[RegistryChange], None]

class HospitalRegistry:
    """In-memory roster of the hospital's doctors and patients.

    Doctors and patients are kept in insertion order. ``total_people_count``
    is recomputed after every membership change, before listeners run, so
    it always equals ``doctor_count + patient_count``.

    Listeners registered with ``add_listener`` are called synchronously, in
    registration order, once per effective mutation. Removing a record that
    is not registered is a no-op and notifies nobody.
    """

    def __init__(self, name: str = "Hopital", appointment_price: float = 0.0):
        self.name = name
        self.appointment_price = appointment_price
        self._doctors: List[Doctor] = []
        self._patients: List[Patient] = []
        self._total_people_count = 0
        self._listeners: List[RegistryListener] = []
        self.current_doctor: Optional[Doctor] = None
        self.current_patient: Optional[Patient] = None

    # Change notification
    def add_listener(self, listener: RegistryListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: RegistryListener) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def _changed(self, action: ChangeAction, record: Person) -> None:
        self._total_people_count = len(self._doctors) + len(self._patients)
        logger.debug(
            f"{action.value}: {record.name} ({record.id}) - "
            f"Total people: {self._total_people_count}"
        )

        change = RegistryChange(
            action=action,
            record=record,
            doctor_count=len(self._doctors),
            patient_count=len(self._patients),
            total_people_count=self._total_people_count,
        )
        for listener in list(self._listeners):
            listener(change)

    # Counts
    @property
    def doctor_count(self) -> int:
        return len(self._doctors)

    @property
    def patient_count(self) -> int:
        return len(self._patients)

    @property
    def total_people_count(self) -> int:
        return self._total_people_count

    # Mutations
    def add_doctor(self, doctor: Doctor) -> None:
        """Register a doctor. Duplicates are not checked."""
        self._doctors.append(doctor)
        self._changed(ChangeAction.DOCTOR_ADDED, doctor)

    def add_patient(self, patient: Patient) -> None:
        """Register a patient. Duplicates are not checked."""
        self._patients.append(patient)
        self._changed(ChangeAction.PATIENT_ADDED, patient)

    def remove_doctor(self, doctor: Doctor) -> bool:
        """Remove a doctor, returning whether one was removed."""
        removed = self._remove(self._doctors, doctor)
        if removed is None:
            return False
        self._changed(ChangeAction.DOCTOR_REMOVED, removed)
        return True

    def remove_patient(self, patient: Patient) -> bool:
        """Remove a patient, returning whether one was removed."""
        removed = self._remove(self._patients, patient)
        if removed is None:
            return False
        self._changed(ChangeAction.PATIENT_REMOVED, removed)
        return True

    @staticmethod
    def _remove(records: list, record: Person) -> Optional[Person]:
        for index, candidate in enumerate(records):
            if candidate.same_record(record):
                return records.pop(index)
        return None

    # Queries
    def list_doctors(self) -> List[Doctor]:
        return list(self._doctors)

    def list_patients(self) -> List[Patient]:
        return list(self._patients)

    def render_doctors(self) -> str:
        """Human readable listing, one doctor per line."""
        return "".join(f"{doctor}\n" for doctor in self._doctors)

    def render_patients(self) -> str:
        """Human readable listing, one patient per line."""
        return "".join(f"{patient}\n" for patient in self._patients)

    def get_doctor(self, doctor_id: UUID) -> Optional[Doctor]:
        return next((d for d in self._doctors if d.id == doctor_id), None)

    def get_patient(self, patient_id: UUID) -> Optional[Patient]:
        return next((p for p in self._patients if p.id == patient_id), None)

    def find_by_specialization(self, specialization: str) -> List[Doctor]:
        """Doctors whose specialization is exactly ``specialization`` (case-sensitive)."""
        return [d for d in self._doctors if d.specialization == specialization]

    def find_by_name(self, name: str) -> List[Union[Doctor, Patient]]:
        """People named exactly ``name``, doctors first, then patients."""
        found: List[Union[Doctor, Patient]] = [d for d in self._doctors if d.name == name]
        found.extend(p for p in self._patients if p.name == name)
        return found

    def find_general(self, **criteria) -> List[Person]:
        """Multi-criteria search.

        No search criteria have been defined for it, so it always raises
        rather than returning an empty result that would read as "no matches".

        Raises:
            GeneralSearchNotSupportedError: always.
        """
        logger.warning(f"General search requested with criteria {sorted(criteria)}")
        raise GeneralSearchNotSupportedError()

    def __repr__(self):
        return (
            f"<HospitalRegistry(name='{self.name}', doctors={self.doctor_count}, "
            f"patients={self.patient_count})>"
        )

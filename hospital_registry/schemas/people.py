from pydantic import BaseModel, ConfigDict, Field
from datetime import date
from typing import List, Literal, Optional, Union
from uuid import UUID

from ..models.doctor import Doctor
from ..models.patient import Patient

# Requests
class DoctorCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    specialization: str = Field(..., min_length=1)
    phone_number: Optional[str] = Field(default=None, max_length=20)

    def to_model(self) -> Doctor:
        return Doctor(**self.model_dump())

class PatientCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    date_of_birth: Optional[date] = None
    gender: Optional[str] = Field(default=None, max_length=20)
    phone_number: Optional[str] = Field(default=None, max_length=20)

    def to_model(self) -> Patient:
        return Patient(**self.model_dump())

class SelectionRequest(BaseModel):
    id: UUID

# Responses
class DoctorResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: Literal["doctor"] = "doctor"
    id: UUID
    name: str
    specialization: str
    phone_number: Optional[str] = None

class PatientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    kind: Literal["patient"] = "patient"
    id: UUID
    name: str
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    phone_number: Optional[str] = None

PersonResponse = Union[DoctorResponse, PatientResponse]

def to_response(person: Union[Doctor, Patient]) -> PersonResponse:
    if isinstance(person, Doctor):
        return DoctorResponse.model_validate(person)
    return PatientResponse.model_validate(person)

class ListingResponse(BaseModel):
    count: int
    listing: str

class RemovalResponse(BaseModel):
    removed: bool

class CountsResponse(BaseModel):
    doctor_count: int
    patient_count: int
    total_people_count: int

class MenuAction(BaseModel):
    name: str
    label: str
    target: str
    enabled: bool = True

class MenuResponse(BaseModel):
    menu: str
    counts: CountsResponse
    actions: List[MenuAction]

from pydantic import Field
from datetime import date
from typing import ClassVar, Optional

from .person import Person

class Patient(Person):
    kind: ClassVar[str] = "patient"

    # Personal information
    date_of_birth: Optional[date] = None
    gender: Optional[str] = Field(default=None, max_length=20)

    # Contact information
    phone_number: Optional[str] = Field(default=None, max_length=20)

    def __repr__(self):
        return f"<Patient(id={self.id}, name='{self.name}')>"

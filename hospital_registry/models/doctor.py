from pydantic import Field
from typing import ClassVar, Optional

from .person import Person

class Doctor(Person):
    kind: ClassVar[str] = "doctor"

    # Professional information
    specialization: str = Field(..., min_length=1)

    # Contact information
    phone_number: Optional[str] = Field(default=None, max_length=20)

    def __str__(self):
        return f"Dr {self.name} ({self.specialization})"

    def __repr__(self):
        return f"<Doctor(id={self.id}, name='{self.name}', specialization='{self.specialization}')>"

from pydantic import BaseModel, ConfigDict, Field
from typing import ClassVar
from uuid import UUID, uuid4

class Person(BaseModel):
    """Base record for anyone the hospital keeps track of.

    Identity is carried by ``id``, generated once at construction. Copies
    made with ``model_copy`` keep it, so they still refer to the same record.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    kind: ClassVar[str] = "person"

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1)

    def same_record(self, other: "Person") -> bool:
        return isinstance(other, Person) and self.id == other.id

    def __str__(self):
        return self.name

from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import InvalidPatchError
from .models.people import parse_salary


class PatchBase(BaseModel):
    model_config = ConfigDict(extra="forbid")

    @classmethod
    def parse(cls, changes):
        if isinstance(changes, cls):
            return changes
        try:
            return cls.model_validate(dict(changes))
        except ValidationError as exc:
            raise InvalidPatchError(str(exc)) from exc

    def apply(self, entity):
        for field, value in self.model_dump(exclude_none=True).items():
            setattr(entity, field, value)
        return entity


class StudentPatch(PatchBase):
    firstname: Optional[str] = None
    lastname: Optional[str] = None


class TeacherPatch(PatchBase):
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    salary: Optional[int] = None

    # unparsable salaries become 0 instead of failing the patch
    @field_validator("salary", mode="before")
    @classmethod
    def _coerce_salary(cls, v):
        if v is None:
            return None
        return parse_salary(v)

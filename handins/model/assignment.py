import pendulum as plm
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AssignmentRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    id: int
    grade: Optional[float] = None
    weight: float = Field(ge=0, le=100)
    due_date: datetime

    @field_validator('due_date')
    @classmethod
    def _offset_aware(cls, v: datetime) -> plm.DateTime:
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError('due_date must carry a UTC offset')
        return plm.instance(v)

    @property
    def graded(self) -> bool:
        return self.grade is not None

    def submission_link(self, base_url: str, course_id: int) -> str:
        return f"{base_url.rstrip('/')}/courses/{course_id}/assignments/{self.id}/submissions/new"

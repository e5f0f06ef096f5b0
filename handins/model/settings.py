from typing import Dict
from pydantic import BaseModel, Field, field_validator
from ..errors import UnknownCourse


def _default_course_aliases():
    return {
        'fundies2': 129, 'f2': 129, 'cs2510': 129,
        'fundies2accel': 126, 'f2accel': 126, 'f2a': 126, 'cs2510a': 126,
    }


class Settings(BaseModel):

    # handins server
    base_url: str = 'https://handins.ccs.neu.edu'
    # timezone used to interpret scraped dates without an offset, and for display
    time_zone: str = 'America/New_York'
    # dotted path of the Portal implementation
    portal_class: str = 'handins.interface.handins.Handins'

    # fuzzy assignment name matching
    similarity_threshold: float = Field(default=0.6, ge=0, le=1)

    # map of course name/nickname to handins course id
    course_aliases: Dict[str, int] = Field(default_factory=_default_course_aliases)

    @field_validator('course_aliases')
    @classmethod
    def _lowercase_aliases(cls, v: Dict[str, int]) -> Dict[str, int]:
        return {name.lower(): course_id for name, course_id in v.items()}

    def lookup_course(self, course: str) -> int:
        key = course.strip().lower()
        if key in self.course_aliases:
            return self.course_aliases[key]
        if key.isdigit():
            return int(key)
        raise UnknownCourse(f"Course {course} not found. Supported courses: "
                            f"{', '.join(sorted(self.course_aliases))}")

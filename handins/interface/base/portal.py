from typing import List
from pydantic import BaseModel
from abc import ABC, abstractmethod
from handins.model import AssignmentRecord


class Portal(ABC, BaseModel):
    base_url: str
    time_zone: str

    # -----------------------------------------------------------------------------------------
    @abstractmethod
    def open(self, username: str, password: str):
        pass

    # -----------------------------------------------------------------------------------------
    @abstractmethod
    def close(self):
        pass

    # -----------------------------------------------------------------------------------------
    @abstractmethod
    def get_assignments(self, course_id: int) -> List[AssignmentRecord]:
        pass

    # -----------------------------------------------------------------------------------------
    @abstractmethod
    def submit(self, course_id: int, record: AssignmentRecord, path: str):
        pass

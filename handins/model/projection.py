from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict
from ..errors import UndefinedProjection


class GradeProjection(BaseModel):
    """
    Weighted sums over a course's assignments, from which the four grade figures are derived.
    All figures are percentages (0-100).
    """
    model_config = ConfigDict(frozen=True)

    scaled_points: float
    graded_weight: float
    ungraded_weight: float

    @property
    def current(self) -> float:
        """grade implied by the graded work alone"""
        if self.graded_weight == 0:
            raise UndefinedProjection()
        return self.scaled_points / self.graded_weight

    @property
    def minimum(self) -> float:
        """grade if every ungraded assignment scores zero"""
        return self.scaled_points / 100

    @property
    def maximum(self) -> float:
        """grade if every ungraded assignment scores perfectly"""
        return (self.scaled_points + 100 * (100 - self.graded_weight)) / 100

    @property
    def upside(self) -> float:
        """improvement over the current grade available from ungraded work"""
        current = self.current
        if self.ungraded_weight == 0:
            return 0.0
        total_weight = self.graded_weight + self.ungraded_weight
        return (self.scaled_points + 100 * self.ungraded_weight) / total_weight - current

    def as_dict(self) -> Dict[str, Optional[float]]:
        figures = {}
        for key in ['current', 'minimum', 'maximum', 'upside']:
            try:
                figures[key] = getattr(self, key)
            except UndefinedProjection:
                figures[key] = None
        return figures

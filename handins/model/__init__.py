from .assignment import AssignmentRecord
from .projection import GradeProjection
from .settings import Settings

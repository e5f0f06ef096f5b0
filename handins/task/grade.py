from typing import List, Sequence, Tuple
from ..model import AssignmentRecord, GradeProjection
from ..util.util import get_logger


# ----------------------------------------------------------------------------------------------------------
def split_graded(records: Sequence[AssignmentRecord]) -> Tuple[List[AssignmentRecord], List[AssignmentRecord]]:
    graded = [r for r in records if r.graded]
    ungraded = [r for r in records if not r.graded]
    return graded, ungraded


# ----------------------------------------------------------------------------------------------------------
def project(records: Sequence[AssignmentRecord]) -> GradeProjection:
    """
    computes the weighted sums that the current/minimum/maximum/upside grades are derived from

    Parameters
    ----------
    records: Sequence[AssignmentRecord]
        every assignment in the course, graded or not

    Returns
    -------
    projection: GradeProjection
    """
    logger = get_logger()
    graded, ungraded = split_graded(records)

    graded_weight = sum(r.weight for r in graded)
    ungraded_weight = sum(r.weight for r in ungraded)
    scaled_points = sum(r.grade * r.weight for r in graded)

    # weights are expected to add up to 100 but are not enforced
    if abs(graded_weight + ungraded_weight - 100) > 1e-6:
        logger.warning(f"Assignment weights add up to {graded_weight + ungraded_weight:.2f}, not 100; "
                       f"the maximum and upside figures may be distorted")

    logger.info(f"Projected grade over {len(graded)} graded and {len(ungraded)} ungraded assignments")
    return GradeProjection(scaled_points=scaled_points, graded_weight=graded_weight,
                           ungraded_weight=ungraded_weight)

from datetime import datetime
from typing import Optional
import pendulum as plm
from ..model import AssignmentRecord


# ----------------------------------------------------------------------------------------------------------
def _now(now: Optional[datetime]) -> plm.DateTime:
    if now is None:
        return plm.now('UTC')
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError('now must carry a UTC offset')
    return plm.instance(now).in_timezone('UTC')


# ----------------------------------------------------------------------------------------------------------
def is_late(record: AssignmentRecord, now: Optional[datetime] = None) -> bool:
    # the due instant itself counts as late
    return _now(now) >= record.due_date.in_timezone('UTC')


# ----------------------------------------------------------------------------------------------------------
def how_late(record: AssignmentRecord, now: Optional[datetime] = None) -> plm.Duration:
    """
    returns the signed time elapsed since the due date (negative if not yet due)

    Parameters
    ----------
    record: AssignmentRecord
    now: datetime, optional
        offset-aware; defaults to the current time

    Returns
    -------
    lateness: pendulum.Duration
    """
    return _now(now) - record.due_date.in_timezone('UTC')

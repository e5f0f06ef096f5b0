from enum import Enum
from typing import List, Sequence
from ..errors import EmptyCandidateSet
from ..model import AssignmentRecord
from ..util.search import SearchIndex
from ..util.util import get_logger


class SelectionMode(Enum):
    FUZZY = 'fuzzy'
    MOST_RECENT = 'most_recent'


# ----------------------------------------------------------------------------------------------------------
def by_due_date(candidates: Sequence[AssignmentRecord]) -> List[int]:
    # stable, so assignments due at the same time keep their scraped order
    return sorted(range(len(candidates)), key=lambda i: candidates[i].due_date, reverse=True)


# ----------------------------------------------------------------------------------------------------------
def resolve(query: str, candidates: Sequence[AssignmentRecord],
            mode: SelectionMode = SelectionMode.FUZZY, threshold: float = 0.6) -> List[int]:
    """
    ranks the candidate assignments that the query may refer to

    Parameters
    ----------
    query: str
        the (possibly abbreviated) assignment name typed by the user; ignored in MOST_RECENT mode
    candidates: Sequence[AssignmentRecord]
        ungraded assignments
    mode: SelectionMode
    threshold: float
        minimum name similarity for a candidate to be returned in FUZZY mode

    Returns
    -------
    ranked: List[int]
        indices into candidates, best match first; empty if nothing matched
    """
    logger = get_logger()
    if len(candidates) == 0:
        raise EmptyCandidateSet()

    order = by_due_date(candidates)

    if mode == SelectionMode.MOST_RECENT:
        logger.debug(f"Selected most recent assignment {candidates[order[0]].name}")
        return order[:1]

    index = SearchIndex(threshold=threshold).index([candidates[i].name for i in order])
    ranked = [order[i] for i in index.search(query.strip())]
    logger.debug(f"{len(ranked)} of {len(candidates)} assignments match '{query.strip()}'")
    return ranked

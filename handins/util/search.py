from typing import List, Sequence, Tuple
import editdistance


def normalize_name(nm: str) -> str:
    return ''.join([ch for ch in nm.lower() if ch.isalnum()])


def similarity(a: str, b: str) -> float:
    """
    edit-distance similarity of two normalized strings, in [0, 1]

    Parameters
    ----------
    a: str
    b: str

    Returns
    -------
    similarity: float
        1 for identical strings, 0 for strings with nothing in common
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 0.0
    return 1.0 - editdistance.eval(a, b) / longest


class SearchIndex(object):
    """
    Fuzzy search over a list of names. A name is scored by its best
    match against the query, taking the whole name and each of its words.
    """

    def __init__(self, threshold: float = 0.6):
        self.threshold = threshold
        self.keys = []

    def index(self, names: Sequence[str]):
        self.keys = []
        for name in names:
            words = [normalize_name(w) for w in name.split()]
            self.keys.append([normalize_name(name)] + [w for w in words if w])
        return self

    def score(self, query: str) -> List[float]:
        query_key = normalize_name(query)
        return [max(similarity(query_key, key) for key in keys) for keys in self.keys]

    def search(self, query: str) -> List[int]:
        query_key = normalize_name(query)
        scored: List[Tuple[int, float, float]] = [
            (i, s, similarity(query_key, self.keys[i][0]))
            for i, s in enumerate(self.score(query)) if s >= self.threshold
        ]
        # a whole-name match beats an equally good word match;
        # sorted is stable, so full ties keep index order
        return [i for i, s, whole in sorted(scored, key=lambda x: (-x[1], -x[2]))]

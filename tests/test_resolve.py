import pytest

from handins.errors import EmptyCandidateSet
from handins.task.grade import split_graded
from handins.task.resolve import SelectionMode, by_due_date, resolve
from handins.util.search import SearchIndex, normalize_name, similarity
from tests.util import make_record


def test_normalize_name() -> None:
    assert normalize_name(' Homework 3: Lists! ') == 'homework3lists'


def test_similarity_bounds() -> None:
    assert similarity('hw2', 'hw2') == 1.0
    assert similarity('', '') == 0.0
    assert similarity('abc', 'xyz') == 0.0


def test_search_matches_words_of_a_name() -> None:
    index = SearchIndex(threshold=0.8).index(['Homework 5 Trees', 'Lab 5', 'Exam'])
    assert index.search('trees') == [0]


def test_search_ranks_by_similarity() -> None:
    index = SearchIndex(threshold=0.5).index(['HW3', 'HW2', 'Lab 2'])
    assert index.search('hw2') == [1, 0]


def test_search_never_returns_below_threshold() -> None:
    index = SearchIndex(threshold=0.6).index(['Project Proposal', 'Exam Review', 'HW10'])
    scores = index.score('hw1')
    for i in index.search('hw1'):
        assert scores[i] >= 0.6
    assert 1 not in index.search('hw1')


def test_by_due_date_is_stable() -> None:
    candidates = [
        make_record('A', due='2023-01-01T00:00:00+00:00'),
        make_record('B', due='2023-03-01T00:00:00+00:00'),
        make_record('C', due='2023-01-01T00:00:00+00:00'),
    ]
    assert by_due_date(candidates) == [1, 0, 2]


def test_fuzzy_prefers_closest_name(homework) -> None:
    _, ungraded = split_graded(homework)
    ranked = resolve('hw2', ungraded, SelectionMode.FUZZY)
    assert ungraded[ranked[0]].name == 'HW2'
    assert [ungraded[i].name for i in ranked] == ['HW2', 'HW3']


def test_fuzzy_strips_whitespace(homework) -> None:
    _, ungraded = split_graded(homework)
    assert ungraded[resolve('  HW2\n', ungraded)[0]].name == 'HW2'


def test_fuzzy_equal_scores_prefer_most_recent() -> None:
    candidates = [
        make_record('Quiz', due='2023-01-01T00:00:00+00:00', id=1),
        make_record('Quiz', due='2023-02-01T00:00:00+00:00', id=2),
        make_record('Quiz', due='2023-01-15T00:00:00+00:00', id=3),
    ]
    assert resolve('quiz', candidates) == [1, 2, 0]


def test_exact_match_ranks_first_among_equal_dates() -> None:
    candidates = [
        make_record('HW12', id=1),
        make_record('HW1', id=2),
        make_record('HW11', id=3),
    ]
    assert resolve('HW1', candidates)[0] == 1


def test_whole_name_match_beats_word_match() -> None:
    candidates = [
        make_record('HW2 Part B', id=1),
        make_record('HW2', id=2),
        make_record('HW2 Extra Credit', id=3),
    ]
    ranked = resolve('HW2', candidates)
    assert [candidates[i].name for i in ranked] == ['HW2', 'HW2 Part B', 'HW2 Extra Credit']


def test_fuzzy_no_match_is_empty(homework) -> None:
    _, ungraded = split_graded(homework)
    assert resolve('final exam', ungraded) == []


@pytest.mark.parametrize('query', ['hw2', 'anything at all', ''])
def test_most_recent_ignores_query(homework, query) -> None:
    _, ungraded = split_graded(homework)
    ranked = resolve(query, ungraded, SelectionMode.MOST_RECENT)
    assert len(ranked) == 1
    assert ungraded[ranked[0]].name == 'HW3'


def test_empty_candidates_fail() -> None:
    with pytest.raises(EmptyCandidateSet):
        resolve('hw1', [], SelectionMode.FUZZY)
    with pytest.raises(EmptyCandidateSet):
        resolve('hw1', [], SelectionMode.MOST_RECENT)

import pytest

from tests.util import make_record


@pytest.fixture
def homework():
    return [
        make_record('HW1', grade=90, weight=20, due='2023-01-20T23:59:00-05:00', id=1),
        make_record('HW2', weight=30, due='2023-02-03T23:59:00-05:00', id=2),
        make_record('HW3', weight=50, due='2023-02-10T23:59:00-05:00', id=3),
    ]

from datetime import datetime

import pendulum as plm
import pytest

from handins.task.lateness import is_late, how_late
from tests.util import make_record

DUE = '2023-02-01T23:59:00-05:00'


def test_due_instant_counts_as_late() -> None:
    record = make_record('HW1', due=DUE)
    assert is_late(record, plm.parse(DUE))


def test_one_instant_before_due_is_not_late() -> None:
    record = make_record('HW1', due=DUE)
    assert not is_late(record, plm.parse(DUE).subtract(microseconds=1))


def test_comparison_across_offsets() -> None:
    record = make_record('HW1', due=DUE)
    # same instant expressed in UTC and Pacific time
    assert is_late(record, plm.datetime(2023, 2, 2, 4, 59, tz='UTC'))
    assert not is_late(record, plm.datetime(2023, 2, 1, 20, 58, tz='America/Los_Angeles'))


def test_how_late() -> None:
    record = make_record('HW1', due=DUE)
    lateness = how_late(record, plm.parse(DUE).add(hours=2, minutes=30))
    assert lateness.total_seconds() == pytest.approx(2.5 * 3600)


def test_how_late_is_negative_before_due() -> None:
    record = make_record('HW1', due=DUE)
    assert how_late(record, plm.parse(DUE).subtract(days=1)).total_seconds() == pytest.approx(-86400)


def test_naive_now_is_rejected() -> None:
    with pytest.raises(ValueError):
        is_late(make_record('HW1', due=DUE), datetime(2023, 2, 2))


def test_default_now() -> None:
    assert is_late(make_record('HW1', due='2000-01-01T00:00:00+00:00'))
    assert not is_late(make_record('HW1', due='2999-01-01T00:00:00+00:00'))

from datetime import date

import attrs
import pytest

from room_reservation.platform.exception.exceptions import InvalidArgumentError
from room_reservation.service.reservation.domain.value_object.date_range import DateRange


pytestmark = pytest.mark.unit


def _range(start_day: int, end_day: int) -> DateRange:
    return DateRange(start_date=date(2024, 1, start_day), end_date=date(2024, 1, end_day))


@pytest.mark.parametrize(
    'first,second,expected',
    [
        ((1, 5), (4, 8), True),  # partial overlap
        ((1, 5), (2, 3), True),  # containment
        ((1, 5), (1, 5), True),  # identical
        ((1, 5), (5, 8), False),  # adjacent: checkout day is free
        ((5, 8), (1, 5), False),
        ((1, 3), (6, 8), False),  # disjoint
    ],
)
def test_overlap_is_half_open_and_symmetric(first, second, expected):
    a, b = _range(*first), _range(*second)

    assert a.overlaps(b) is expected
    assert b.overlaps(a) is expected


def test_empty_range_is_rejected():
    with pytest.raises(InvalidArgumentError):
        _range(3, 3)


def test_range_is_immutable():
    with pytest.raises(attrs.exceptions.FrozenInstanceError):
        _range(1, 2).start_date = date(2024, 1, 2)  # type: ignore[misc]

"""
Date Range Value Object

Half-open calendar range [start_date, end_date): the end date is the day the
room is free again, so a stay ending on the 5th and one starting on the 5th
do not overlap.
"""

from datetime import date

import attrs

from room_reservation.platform.exception.exceptions import InvalidArgumentError


@attrs.define(frozen=True)
class DateRange:
    """Date Range (Value Object)"""

    start_date: date
    end_date: date

    def __attrs_post_init__(self) -> None:
        if self.start_date is None or self.end_date is None:
            raise InvalidArgumentError('Start date and end date are required')
        if not self.end_date > self.start_date:
            raise InvalidArgumentError('End date must be at least one day after start date')

    def overlaps(self, other: 'DateRange') -> bool:
        return self.start_date < other.end_date and other.start_date < self.end_date

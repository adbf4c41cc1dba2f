"""
Shift validation rules.
Time ordering, same-day constraint and overlap detection.
"""

from datetime import datetime
from typing import Iterable, Optional

from shiftdesk.core.exceptions import ValidationError

from .types import Shift


def datetime_ranges_overlap(
    start1: datetime, end1: datetime,
    start2: datetime, end2: datetime
) -> bool:
    """Check if two half-open datetime ranges overlap. Touching ends do not."""
    return start1 < end2 and start2 < end1


def shifts_overlap(a: Shift, b: Shift) -> bool:
    return datetime_ranges_overlap(a.start, a.end, b.start, b.end)


def find_overlapping_shift(target: Shift, existing: Iterable[Shift]) -> Optional[Shift]:
    """First shift in ``existing`` overlapping ``target``, skipping target itself."""
    for shift in existing:
        if shift.id == target.id:
            continue
        if shifts_overlap(target, shift):
            return shift
    return None


def validate_shift_times(start: datetime, end: datetime) -> None:
    if start > end:
        raise ValidationError("start-after-end", "Start time must not be greater than end time.")
    if start.date() != end.date():
        raise ValidationError("multi-day", "Start and end time must be on the same day.")

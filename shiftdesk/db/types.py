"""
Column types shared by the table models.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

# Lexicographic order of this format matches chronological order.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


class SortableTimestamp(TypeDecorator):
    """Naive datetime stored as fixed-width sortable text.

    Values are written with ``TIMESTAMP_FORMAT`` and parsed back with
    ``datetime.strptime`` using the same format, so anything else in the
    column is a hard error rather than a best-effort guess.
    """

    impl = String(26)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect) -> Optional[str]:
        if value is None:
            return None
        if value.tzinfo is not None:
            raise ValueError("timezone-aware timestamps are not supported")
        return value.strftime(TIMESTAMP_FORMAT)

    def process_result_value(self, value: Optional[str], dialect) -> Optional[datetime]:
        if value is None:
            return None
        return datetime.strptime(value, TIMESTAMP_FORMAT)

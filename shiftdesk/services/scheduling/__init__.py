"""
Scheduling service package.

Usage:
    from shiftdesk.services.scheduling import ShiftService

    service = ShiftService(shift_store, employee_store, directory_client)
    shift = await service.create_shift(start, end)
    await service.assign_employee(shift.id, employee_id=2)
    view = await service.get_shift_view(shift.id, auth_token)
"""

from .types import (
    Shift,
    Employee,
    EmployeeDirectoryRecord,
    ShiftView,
    AssignOutcome,
)
from .ports import ShiftRepository, EmployeeLookup, EmployeeDirectory
from .validation import datetime_ranges_overlap, find_overlapping_shift, validate_shift_times
from .shift_service import ShiftService

__all__ = [
    # Types
    "Shift",
    "Employee",
    "EmployeeDirectoryRecord",
    "ShiftView",
    "AssignOutcome",
    # Ports
    "ShiftRepository",
    "EmployeeLookup",
    "EmployeeDirectory",
    # Rules
    "datetime_ranges_overlap",
    "find_overlapping_shift",
    "validate_shift_times",
    # Main entry point
    "ShiftService",
]

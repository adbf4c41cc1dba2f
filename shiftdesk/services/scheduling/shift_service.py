"""
Shift service.
Validates shift input, composes shift views with directory data and runs the
ordered checks in front of an employee assignment.
"""

import logging
from datetime import datetime
from typing import Optional

from shiftdesk.core.exceptions import ConflictError, NotFoundError

from .ports import EmployeeDirectory, EmployeeLookup, ShiftRepository
from .types import AssignOutcome, Shift, ShiftView
from .validation import find_overlapping_shift, validate_shift_times


logger = logging.getLogger(__name__)

SHIFT_NOT_FOUND = ("shift", "Shift not found.")
EMPLOYEE_NOT_FOUND = ("employee", "Employee not found.")
ALREADY_ASSIGNED = ("already-assigned", "This shift is already assigned to an employee.")
OVERLAP = ("overlap", "Employee already has a shift that overlaps with this time.")


class ShiftService:
    def __init__(
        self,
        shifts: ShiftRepository,
        employees: EmployeeLookup,
        directory: EmployeeDirectory,
    ):
        self.shifts = shifts
        self.employees = employees
        self.directory = directory

    async def create_shift(self, start: datetime, end: datetime) -> Shift:
        validate_shift_times(start, end)
        # id and employee come from the store and the assign flow, never the caller
        created = await self.shifts.create(Shift(id=0, employee_id=None, start=start, end=end))
        logger.info(f"Shift {created.id} created for {start} - {end}")
        return created

    async def list_shifts(self) -> list[Shift]:
        return await self.shifts.list_all()

    async def get_shift(self, shift_id: int) -> Shift:
        shift = await self.shifts.get_by_id(shift_id)
        if shift is None:
            raise NotFoundError(*SHIFT_NOT_FOUND)
        return shift

    async def get_shift_view(self, shift_id: int, auth_token: Optional[str] = None) -> ShiftView:
        """
        Shift plus the assigned employee's display string.

        A directory failure is not hidden behind a view without the employee;
        DirectoryUnavailableError propagates to the caller.
        """
        shift = await self.get_shift(shift_id)
        if not shift.is_assigned:
            return ShiftView(shift=shift)

        record = await self.directory.fetch_by_id(shift.employee_id, auth_token)
        return ShiftView(shift=shift, employee=record.display())

    async def assign_employee(self, shift_id: int, employee_id: int) -> Shift:
        shift = await self.shifts.get_by_id(shift_id)
        if shift is None:
            logger.warning(f"Assign rejected: shift {shift_id} not found")
            raise NotFoundError(*SHIFT_NOT_FOUND)

        employee = await self.employees.get_by_id(employee_id)
        if employee is None:
            logger.warning(f"Assign rejected: employee {employee_id} not found")
            raise NotFoundError(*EMPLOYEE_NOT_FOUND)

        if shift.is_assigned:
            logger.warning(f"Assign rejected: shift {shift_id} already has employee {shift.employee_id}")
            raise ConflictError(*ALREADY_ASSIGNED)

        existing = await self.shifts.list_by_employee(employee_id)
        clash = find_overlapping_shift(shift, existing)
        if clash is not None:
            logger.warning(f"Assign rejected: shift {shift_id} overlaps shift {clash.id} of employee {employee_id}")
            raise ConflictError(*OVERLAP)

        outcome = await self.shifts.assign_employee(shift_id, employee_id)
        # the store re-checks inside its transaction; a mismatch means a concurrent write won
        if outcome == AssignOutcome.SHIFT_MISSING:
            raise NotFoundError(*SHIFT_NOT_FOUND)
        if outcome == AssignOutcome.ALREADY_ASSIGNED:
            logger.warning(f"Assign lost race: shift {shift_id} was assigned concurrently")
            raise ConflictError(*ALREADY_ASSIGNED)
        if outcome == AssignOutcome.OVERLAP:
            logger.warning(f"Assign lost race: employee {employee_id} got an overlapping shift concurrently")
            raise ConflictError(*OVERLAP)

        logger.info(f"Shift {shift_id} assigned to employee {employee_id}")
        return shift.assigned_to(employee_id)

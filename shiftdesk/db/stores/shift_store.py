"""
Shift persistence.
Reads and writes the Shift table and converts rows to internal types.
"""

import logging
from typing import Optional

from sqlalchemy import func, select, update

from shiftdesk.db.models.employees import Employees
from shiftdesk.db.models.shifts import Shifts
from shiftdesk.services.scheduling.ports import ShiftRepository
from shiftdesk.services.scheduling.types import AssignOutcome, Shift

from .base import BaseStore


logger = logging.getLogger(__name__)


def _to_shift(row: Shifts) -> Shift:
    return Shift(id=row.id, employee_id=row.employee_id, start=row.start, end=row.end)


class ShiftStore(BaseStore, ShiftRepository):
    name = "shift"

    async def get_by_id(self, shift_id: int) -> Optional[Shift]:
        async with self.session() as session:
            row = await session.get(Shifts, shift_id)
            return _to_shift(row) if row else None

    async def list_all(self) -> list[Shift]:
        async with self.session() as session:
            rows = (await session.execute(select(Shifts).order_by(Shifts.id))).scalars().all()
            return [_to_shift(r) for r in rows]

    async def create(self, shift: Shift) -> Shift:
        async with self.session() as session:
            row = Shifts(employee_id=shift.employee_id, start=shift.start, end=shift.end)
            session.add(row)
            await session.commit()
            logger.debug(f"Shift row created: {row.id} ({row.start} - {row.end})")
            return _to_shift(row)

    async def list_by_employee(self, employee_id: int) -> list[Shift]:
        async with self.session() as session:
            stmt = (
                select(Shifts)
                .where(Shifts.employee_id == employee_id)
                .order_by(Shifts.start)
            )
            rows = (await session.execute(stmt)).scalars().all()
            return [_to_shift(r) for r in rows]

    async def assign_employee(self, shift_id: int, employee_id: int) -> AssignOutcome:
        """
        Assign an employee to a shift in a single transaction.

        The employee row is locked first (on backends with row locks) so
        concurrent assignments for the same employee run one after another.
        The shift is claimed only while its EmployeeId is still NULL, then the
        employee's other shifts are re-checked for overlap; on overlap the
        claim is rolled back.
        """
        async with self.session() as session:
            await session.execute(
                select(Employees.id).where(Employees.id == employee_id).with_for_update()
            )

            shift = (
                await session.execute(
                    select(Shifts).where(Shifts.id == shift_id).with_for_update()
                )
            ).scalar_one_or_none()
            if shift is None:
                return AssignOutcome.SHIFT_MISSING

            claimed = await session.execute(
                update(Shifts)
                .where(Shifts.id == shift_id, Shifts.employee_id.is_(None))
                .values(employee_id=employee_id)
                .execution_options(synchronize_session=False)
            )
            if claimed.rowcount == 0:
                await session.rollback()
                return AssignOutcome.ALREADY_ASSIGNED

            # Start/End are sortable text, so string comparison is chronological
            overlapping = await session.scalar(
                select(func.count())
                .select_from(Shifts)
                .where(
                    Shifts.employee_id == employee_id,
                    Shifts.id != shift_id,
                    Shifts.start < shift.end,
                    Shifts.end > shift.start,
                )
            )
            if overlapping:
                await session.rollback()
                return AssignOutcome.OVERLAP

            await session.commit()
            logger.debug(f"Shift row {shift_id} assigned to employee {employee_id}")
            return AssignOutcome.ASSIGNED

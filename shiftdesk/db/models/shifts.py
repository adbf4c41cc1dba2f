from datetime import datetime
from typing import Optional

from sqlalchemy import Index, Integer
from sqlalchemy.orm import Mapped, mapped_column

from shiftdesk.db.database import Base
from shiftdesk.db.types import SortableTimestamp


class Shifts(Base):
    __tablename__ = "Shift"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    # no foreign key; existence is checked by the service at assignment time
    employee_id: Mapped[Optional[int]] = mapped_column("EmployeeId", Integer, nullable=True)
    start: Mapped[datetime] = mapped_column("Start", SortableTimestamp, nullable=False)
    end: Mapped[datetime] = mapped_column("End", SortableTimestamp, nullable=False)


Index("ix_shift_employee_start", Shifts.employee_id, Shifts.start)

import pytest
from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shiftdesk.core.exceptions import DirectoryUnavailableError
from shiftdesk.db.database import Base
from shiftdesk.db.init_db import init_db
from shiftdesk.db.models.employees import Employees
from shiftdesk.db.stores import EmployeeStore, ShiftStore
from shiftdesk.services.scheduling import (
    AssignOutcome,
    Employee,
    EmployeeDirectory,
    EmployeeDirectoryRecord,
    EmployeeLookup,
    Shift,
    ShiftRepository,
)


TEST_DATABASE_URL = "sqlite+aiosqlite://"


def get_test_day() -> date:
    # fixed day for deterministic tests
    return date(2024, 1, 1)


def at(hour: int, minute: int = 0, day: Optional[date] = None) -> datetime:
    return datetime.combine(day or get_test_day(), time(hour, minute))


# ==================== In-memory ports ====================

class FakeShiftRepository(ShiftRepository):
    def __init__(self, shifts: tuple[Shift, ...] = ()):
        self.rows = {s.id: s for s in shifts}
        self.next_id = max(self.rows, default=0) + 1
        self.assign_calls: list[tuple[int, int]] = []

    async def get_by_id(self, shift_id: int) -> Optional[Shift]:
        return self.rows.get(shift_id)

    async def list_all(self) -> list[Shift]:
        return list(self.rows.values())

    async def create(self, shift: Shift) -> Shift:
        created = replace(shift, id=self.next_id)
        self.rows[created.id] = created
        self.next_id += 1
        return created

    async def list_by_employee(self, employee_id: int) -> list[Shift]:
        return [s for s in self.rows.values() if s.employee_id == employee_id]

    async def assign_employee(self, shift_id: int, employee_id: int) -> AssignOutcome:
        self.assign_calls.append((shift_id, employee_id))
        shift = self.rows.get(shift_id)
        if shift is None:
            return AssignOutcome.SHIFT_MISSING
        if shift.is_assigned:
            return AssignOutcome.ALREADY_ASSIGNED
        self.rows[shift_id] = shift.assigned_to(employee_id)
        return AssignOutcome.ASSIGNED


class FakeEmployeeLookup(EmployeeLookup):
    def __init__(self, employees: tuple[Employee, ...] = ()):
        self.employees = {e.id: e for e in employees}

    async def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)


class FakeDirectory(EmployeeDirectory):
    def __init__(self, records: Optional[dict[int, EmployeeDirectoryRecord]] = None, fail: bool = False):
        self.records = records or {}
        self.fail = fail
        self.calls: list[tuple[int, Optional[str]]] = []

    async def fetch_by_id(self, employee_id: int, auth_token: Optional[str]) -> EmployeeDirectoryRecord:
        self.calls.append((employee_id, auth_token))
        if self.fail or employee_id not in self.records:
            raise DirectoryUnavailableError(message="directory down")
        return self.records[employee_id]


@pytest.fixture
def employees() -> FakeEmployeeLookup:
    return FakeEmployeeLookup((Employee(id=1, name="John Doe"), Employee(id=2, name="Jane Doe")))


@pytest.fixture
def directory() -> FakeDirectory:
    return FakeDirectory({2: EmployeeDirectoryRecord(name="Jane Doe", email="jane@doe.com")})


# ==================== Database ====================

@pytest.fixture
async def engine():
    engine = create_async_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await init_db(engine)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_maker(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def seeded_session_maker(session_maker):
    async with session_maker() as session:
        session.add_all([Employees(id=1, name="John Doe"), Employees(id=2, name="Jane Doe")])
        await session.commit()
    return session_maker


@pytest.fixture
def shift_store(seeded_session_maker) -> ShiftStore:
    return ShiftStore(seeded_session_maker)


@pytest.fixture
def employee_store(seeded_session_maker) -> EmployeeStore:
    return EmployeeStore(seeded_session_maker)

"""
Seed script for the shift schedule development database.

Creates the tables if needed and inserts a small set of employees so shifts
can be assigned locally. Existing rows with the same ids are left alone.

Run with: python -m scripts.seed_data
"""

import asyncio

from shiftdesk.db.database import async_session_maker, engine
from shiftdesk.db.init_db import init_db
from shiftdesk.db.models.employees import Employees


EMPLOYEES = [
    (1, "John Doe"),
    (2, "Jane Doe"),
    (3, "Alex Smith"),
]


async def seed_employees() -> int:
    added = 0
    async with async_session_maker() as session:
        for employee_id, name in EMPLOYEES:
            if await session.get(Employees, employee_id) is None:
                session.add(Employees(id=employee_id, name=name))
                added += 1
        await session.commit()
    return added


async def main() -> None:
    await init_db(engine)
    try:
        added = await seed_employees()
        print(f"Seeding complete: {added} employee(s) added")
        for employee_id, name in EMPLOYEES:
            print(f"  {employee_id} - {name}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())

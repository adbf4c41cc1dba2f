from shiftdesk.db.database import Base

# Import models
from shiftdesk.db.models.shifts import Shifts
from shiftdesk.db.models.employees import Employees

__all__ = [
    "Base",
    "Shifts",
    "Employees",
]

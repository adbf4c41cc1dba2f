from .shift_store import ShiftStore
from .employee_store import EmployeeStore

__all__ = [
    "ShiftStore",
    "EmployeeStore",
]

from typing import Optional

from pydantic import BaseModel, NaiveDatetime

from shiftdesk.services.scheduling.types import Shift, ShiftView


class ShiftCreate(BaseModel):
    # any id / employee_id in the body is ignored
    start: NaiveDatetime
    end: NaiveDatetime


class ShiftResponse(BaseModel):
    id: int
    employee_id: Optional[int] = None
    start: NaiveDatetime
    end: NaiveDatetime

    class Config:
        from_attributes = True


class ShiftViewResponse(ShiftResponse):
    employee: Optional[str] = None

    @classmethod
    def from_view(cls, view: ShiftView) -> "ShiftViewResponse":
        shift: Shift = view.shift
        return cls(
            id=shift.id,
            employee_id=shift.employee_id,
            start=shift.start,
            end=shift.end,
            employee=view.employee,
        )


class ErrorResponse(BaseModel):
    detail: str
    reason: Optional[str] = None

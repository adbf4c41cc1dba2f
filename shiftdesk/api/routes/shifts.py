from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from shiftdesk.api.deps import get_directory_token, get_shift_service
from shiftdesk.schemas.shifts import ErrorResponse, ShiftCreate, ShiftResponse, ShiftViewResponse
from shiftdesk.services.scheduling import ShiftService

router = APIRouter(prefix="/shift", tags=["shift"])


@router.get(
    "/{shift_id}",
    response_model=ShiftViewResponse,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def get_shift(
    shift_id: int,
    service: ShiftService = Depends(get_shift_service),
    auth_token: Optional[str] = Depends(get_directory_token),
):
    view = await service.get_shift_view(shift_id, auth_token)
    return ShiftViewResponse.from_view(view)


@router.post(
    "",
    response_model=ShiftResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def create_shift(
    payload: ShiftCreate,
    request: Request,
    response: Response,
    service: ShiftService = Depends(get_shift_service),
):
    shift = await service.create_shift(payload.start, payload.end)
    response.headers["Location"] = str(request.url_for("get_shift", shift_id=shift.id))
    return ShiftResponse.model_validate(shift)


@router.get("", response_model=List[ShiftResponse])
async def list_shifts(service: ShiftService = Depends(get_shift_service)):
    shifts = await service.list_shifts()
    return [ShiftResponse.model_validate(s) for s in shifts]


@router.put(
    "/{shift_id}/assign/{employee_id}",
    response_model=ShiftResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def assign_employee(
    shift_id: int,
    employee_id: int,
    service: ShiftService = Depends(get_shift_service),
):
    shift = await service.assign_employee(shift_id, employee_id)
    return ShiftResponse.model_validate(shift)

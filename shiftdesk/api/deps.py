from typing import Optional

import httpx
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from shiftdesk.core.config import settings
from shiftdesk.db.database import async_session_maker
from shiftdesk.db.stores import EmployeeStore, ShiftStore
from shiftdesk.services.directory import EmployeeDirectoryClient
from shiftdesk.services.scheduling import ShiftService

# the caller's credential is forwarded to the employee directory as-is
caller_authorization = APIKeyHeader(name="Authorization", auto_error=False)


def get_http_client(request: Request) -> httpx.AsyncClient:
    """Process-wide client created in the app lifespan."""
    return request.app.state.http_client


def get_shift_store() -> ShiftStore:
    return ShiftStore(async_session_maker)


def get_employee_store() -> EmployeeStore:
    return EmployeeStore(async_session_maker)


def get_directory_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> EmployeeDirectoryClient:
    return EmployeeDirectoryClient(http_client, settings.EMPLOYEE_API_BASE_URL)


def get_directory_token(
    authorization: Optional[str] = Depends(caller_authorization),
) -> Optional[str]:
    """Caller's Authorization header, else the configured service token."""
    return authorization or settings.EMPLOYEE_API_TOKEN


def get_shift_service(
    shifts: ShiftStore = Depends(get_shift_store),
    employees: EmployeeStore = Depends(get_employee_store),
    directory: EmployeeDirectoryClient = Depends(get_directory_client),
) -> ShiftService:
    return ShiftService(shifts, employees, directory)

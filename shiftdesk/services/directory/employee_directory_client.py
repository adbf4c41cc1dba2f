"""
Remote employee directory client.
Thin boundary over the directory's REST API: one request, no retries.
"""

import logging
from typing import Optional

import httpx
from pydantic import BaseModel, ValidationError

from shiftdesk.core.exceptions import DirectoryUnavailableError
from shiftdesk.services.scheduling.ports import EmployeeDirectory
from shiftdesk.services.scheduling.types import EmployeeDirectoryRecord


logger = logging.getLogger(__name__)


class _DirectoryPayload(BaseModel):
    name: str
    email: str


class EmployeeDirectoryClient(EmployeeDirectory):
    """Fetches employee display data from ``GET {base_url}/employee/{id}``."""

    def __init__(self, http_client: httpx.AsyncClient, base_url: str):
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")

    async def fetch_by_id(self, employee_id: int, auth_token: Optional[str]) -> EmployeeDirectoryRecord:
        url = f"{self.base_url}/employee/{employee_id}"
        headers = {"Accept": "*/*"}
        if auth_token:
            headers["Authorization"] = auth_token

        try:
            response = await self.http_client.get(url, headers=headers)
            response.raise_for_status()
            payload = _DirectoryPayload.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"Employee directory HTTP error: {e.response.status_code} for employee {employee_id}")
            raise DirectoryUnavailableError(
                message=f"Employee directory returned {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Employee directory request failed for employee {employee_id}: {e!r}")
            raise DirectoryUnavailableError(message="Employee directory request failed") from e
        except (ValueError, ValidationError) as e:
            # ValueError covers a body that is not JSON at all
            logger.error(f"Employee directory returned an invalid body for employee {employee_id}: {e}")
            raise DirectoryUnavailableError(message="Employee directory returned an invalid body") from e

        return EmployeeDirectoryRecord(name=payload.name, email=payload.email)

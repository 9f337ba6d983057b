"""Employee API Client — the table engine's fetch boundary to the REST backend.

Invariants:
    - fetch_employees() returns core Employee entities, never raw JSON
    - delete_employee() maps 404 to False (the row is already gone), 2xx to True
    - Transport errors, timeouts, 5xx answers and unreadable bodies raise
      RecordStoreUnavailableError
    - No retries: a failed call is reported once and left to the caller

Design Decisions:
    - httpx.AsyncClient injected: production builds one from settings, tests
      pass one wired to the FastAPI app through ASGITransport
    - Response parsing reuses EmployeeResponse so server and client share
      one wire contract
"""

import logging

import httpx
from pydantic import ValidationError

from staffgrid.config import Settings
from staffgrid.core.domain_types import EmployeeId
from staffgrid.core.entities import Employee
from staffgrid.core.errors import RecordStoreUnavailableError
from staffgrid.schemas.employee import EmployeeResponse

logger = logging.getLogger(__name__)

EMPLOYEES_PATH = "/api/employees"


class EmployeeApiClient:
    """Async client for the employee endpoints."""

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    @classmethod
    def from_settings(cls, settings: Settings) -> "EmployeeApiClient":
        return cls(httpx.AsyncClient(
            base_url=settings.api_base_url,
            timeout=settings.client_timeout_seconds,
        ))

    async def fetch_employees(self) -> list[Employee]:
        try:
            response = await self._http.get(EMPLOYEES_PATH)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(f"Employee fetch failed: {e}")
            raise RecordStoreUnavailableError("fetch", str(e)) from e
        try:
            rows = [
                EmployeeResponse.model_validate(item).to_entity()
                for item in response.json()
            ]
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Employee fetch returned an unreadable body: {e}")
            raise RecordStoreUnavailableError("fetch", "malformed response body") from e
        logger.debug(
            f"Fetched {len(rows)} employees", extra={"row_count": len(rows)},
        )
        return rows

    async def delete_employee(self, employee_id: EmployeeId) -> bool:
        try:
            response = await self._http.delete(f"{EMPLOYEES_PATH}/{employee_id}")
            if response.status_code == httpx.codes.NOT_FOUND:
                return False
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning(
                f"Employee delete failed: {e}",
                extra={"employee_id": employee_id},
            )
            raise RecordStoreUnavailableError("delete", str(e)) from e
        return True

    async def aclose(self) -> None:
        await self._http.aclose()

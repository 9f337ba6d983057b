"""Employee Routes — REST surface consumed by the table client.

Invariants:
    - Request bodies validated by Pydantic before reaching the store
    - Absent results from the store become ResourceNotFoundError (404)
    - DELETE returns 204 with no body on success
    - id and createdAt are never writable through this API
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from staffgrid.api.dependencies import get_employee_repository
from staffgrid.core.domain_types import EmployeeId
from staffgrid.core.errors import ResourceNotFoundError
from staffgrid.core.repository_protocols import EmployeeRepository
from staffgrid.schemas.employee import (
    EmployeeCreate, EmployeeResponse, EmployeeUpdate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    """All employees; the table client filters, sorts and paginates locally."""
    return [EmployeeResponse.from_entity(e) for e in await repo.list()]


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: str,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    employee = await repo.get(EmployeeId(employee_id))
    if employee is None:
        raise ResourceNotFoundError("Employee", employee_id)
    return EmployeeResponse.from_entity(employee)


@router.post(
    "", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED,
)
async def create_employee(
    body: EmployeeCreate,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    employee = await repo.create(body.model_dump())
    return EmployeeResponse.from_entity(employee)


@router.patch("/{employee_id}", response_model=EmployeeResponse)
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    """Partial update — only fields present in the body change."""
    employee = await repo.update(EmployeeId(employee_id), body.changes())
    if employee is None:
        raise ResourceNotFoundError("Employee", employee_id)
    return EmployeeResponse.from_entity(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    repo: EmployeeRepository = Depends(get_employee_repository),
):
    if not await repo.delete(EmployeeId(employee_id)):
        raise ResourceNotFoundError("Employee", employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

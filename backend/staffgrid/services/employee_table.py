"""Employee Table Controller — fetch, delete and refetch around the pure TableState.

Invariants:
    - TableState.rows changes only after a successful fetch; a failed fetch
      or delete leaves the cached rows exactly as they were
    - delete() drops the id from the selection before the request is sent
    - A row disappears from the table only when the refetch no longer has it
      (no optimistic row removal)
    - Every delete outcome produces exactly one notification
    - Failed requests are never retried automatically

Design Decisions:
    - Notifications collected in a list (toast queue): the rendering layer
      drains it, tests assert on it
    - Not-found on delete is reported but still refetches: another client
      removed the row, so the cached set is stale either way
"""

import logging
from dataclasses import dataclass
from enum import Enum

from staffgrid.core.domain_types import EmployeeId
from staffgrid.core.errors import RecordStoreUnavailableError
from staffgrid.core.repository_protocols import EmployeeSource
from staffgrid.core.table_state import TableState, TableView

logger = logging.getLogger(__name__)


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True)
class Notification:
    """A user-visible toast."""
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.DEFAULT


class EmployeeTableController:
    """Drives one employee table: owns its TableState and talks to the API."""

    def __init__(self, source: EmployeeSource, state: TableState | None = None):
        self.source = source
        self.state = state or TableState()
        self.notifications: list[Notification] = []
        self.is_loading = False
        self.has_loaded = False
        self.error: RecordStoreUnavailableError | None = None
        self.pending_delete: EmployeeId | None = None

    def notify(
        self,
        title: str,
        description: str,
        variant: NotificationVariant = NotificationVariant.DEFAULT,
    ) -> None:
        self.notifications.append(Notification(title, description, variant))

    def drain_notifications(self) -> list[Notification]:
        drained, self.notifications = self.notifications, []
        return drained

    async def load(self) -> bool:
        """Fetch the full row set. Returns False (rows untouched) on failure."""
        self.is_loading = True
        try:
            rows = await self.source.fetch_employees()
        except RecordStoreUnavailableError as e:
            self.error = e
            logger.error(f"Failed to load employees: {e.message}")
            self.notify(
                "Error loading data",
                "Failed to load employee data. Please try again.",
                NotificationVariant.DESTRUCTIVE,
            )
            return False
        finally:
            self.is_loading = False
        self.error = None
        self.has_loaded = True
        self.state.replace_rows(rows)
        return True

    async def invalidate(self) -> bool:
        """Discard the cached projection and refetch."""
        return await self.load()

    async def delete(self, employee_id: EmployeeId) -> bool:
        """Delete one employee; selection cleanup happens before the request."""
        self.state.forget_row(employee_id)
        self.pending_delete = employee_id
        try:
            removed = await self.source.delete_employee(employee_id)
        except RecordStoreUnavailableError:
            self.notify(
                "Error", "Failed to delete employee.",
                NotificationVariant.DESTRUCTIVE,
            )
            return False
        finally:
            self.pending_delete = None

        if removed:
            self.notify(
                "Employee deleted", "Employee has been successfully removed.",
            )
        else:
            logger.warning(
                f"Employee {employee_id} was already deleted",
                extra={"employee_id": employee_id},
            )
            self.notify(
                "Employee not found",
                "This employee was already removed.",
                NotificationVariant.DESTRUCTIVE,
            )
        await self.invalidate()
        return removed

    def view(self) -> TableView:
        return self.state.view()

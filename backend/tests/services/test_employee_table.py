"""EmployeeTableController — fetch/delete/refetch flow and failure handling.

Invariants:
    - Selection cleanup happens before the delete request is answered
    - The deleted row stays visible until the refetch drops it
    - Network failures leave the cached rows unchanged and are not retried
"""

import asyncio

import httpx
import pytest
from httpx import ASGITransport

from staffgrid.core.errors import RecordStoreUnavailableError
from staffgrid.infrastructure.employee_api_client import EmployeeApiClient
from staffgrid.main import app
from staffgrid.schemas.employee import EmployeeResponse
from staffgrid.services.employee_table import (
    EmployeeTableController,
    NotificationVariant,
)


class FakeSource:
    """Scriptable EmployeeSource."""

    def __init__(self, rows):
        self.rows = list(rows)
        self.fail_fetch = False
        self.fail_delete = False
        self.fetch_calls = 0
        self.delete_calls = []
        self.delete_gate: asyncio.Event | None = None

    async def fetch_employees(self):
        self.fetch_calls += 1
        if self.fail_fetch:
            raise RecordStoreUnavailableError("fetch", "boom")
        return list(self.rows)

    async def delete_employee(self, employee_id):
        self.delete_calls.append(employee_id)
        if self.delete_gate is not None:
            await self.delete_gate.wait()
        if self.fail_delete:
            raise RecordStoreUnavailableError("delete", "boom")
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.id != employee_id]
        return len(self.rows) < before


@pytest.fixture
def source(seeded_rows):
    return FakeSource(seeded_rows)


@pytest.fixture
async def controller(source):
    table = EmployeeTableController(source)
    await table.load()
    return table


async def test_load_populates_rows(controller, seeded_rows):
    assert controller.has_loaded is True
    assert controller.is_loading is False
    assert controller.error is None
    assert controller.view().total_count == len(seeded_rows)


async def test_failed_initial_load_reports_error(source):
    source.fail_fetch = True
    table = EmployeeTableController(source)
    assert await table.load() is False
    assert table.has_loaded is False
    assert table.error is not None
    assert table.view().rows == ()
    [note] = table.drain_notifications()
    assert note.title == "Error loading data"
    assert note.variant is NotificationVariant.DESTRUCTIVE


async def test_failed_refetch_keeps_cached_rows(controller, source, seeded_rows):
    source.fail_fetch = True
    assert await controller.invalidate() is False
    assert controller.state.rows == tuple(seeded_rows)


async def test_delete_refetches_and_notifies(controller, source):
    controller.state.toggle_row("2", True)
    controller.state.toggle_row("3", True)

    assert await controller.delete("2") is True

    assert controller.state.selected_ids == {"3"}
    assert "2" not in {r.id for r in controller.state.rows}
    assert source.fetch_calls == 2
    [note] = controller.drain_notifications()
    assert note.title == "Employee deleted"
    assert note.variant is NotificationVariant.DEFAULT


async def test_selection_cleared_while_delete_in_flight(controller, source):
    controller.state.toggle_row("1", True)
    source.delete_gate = asyncio.Event()

    task = asyncio.create_task(controller.delete("1"))
    await asyncio.sleep(0)

    assert controller.state.selected_ids == set()
    assert controller.pending_delete == "1"
    # row is still displayed until the refetch completes
    assert "1" in {r.id for r in controller.view().rows}

    source.delete_gate.set()
    await task
    assert controller.pending_delete is None
    assert "1" not in {r.id for r in controller.view().rows}


async def test_delete_failure_keeps_rows_and_does_not_retry(controller, source, seeded_rows):
    controller.state.toggle_row("4", True)
    source.fail_delete = True

    assert await controller.delete("4") is False

    assert controller.state.rows == tuple(seeded_rows)
    assert controller.state.selected_ids == set()
    assert source.delete_calls == ["4"]
    assert source.fetch_calls == 1
    [note] = controller.drain_notifications()
    assert note.description == "Failed to delete employee."


async def test_delete_of_already_removed_row_reports_not_found(controller, source):
    source.rows = [r for r in source.rows if r.id != "5"]

    assert await controller.delete("5") is False

    assert "5" not in {r.id for r in controller.state.rows}
    [note] = controller.drain_notifications()
    assert note.title == "Employee not found"


async def test_end_to_end_against_the_api(record_store):
    http = httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    table = EmployeeTableController(EmployeeApiClient(http))
    try:
        await table.load()
        table.state.set_search("ENGINEERING")
        assert [r.name for r in table.view().rows] == ["Sarah Johnson"]

        table.state.set_search("")
        table.state.toggle_page(True)
        assert table.view().selected_count == 5

        await table.delete("1")
        view = table.view()
        assert view.total_count == 4
        assert view.selected_count == 4
        assert await record_store.employees.get("1") is None
    finally:
        await http.aclose()


async def test_malformed_refetch_keeps_cached_rows(seeded_rows):
    bodies = [
        httpx.Response(200, json=[
            EmployeeResponse.from_entity(row).model_dump(mode="json", by_alias=True)
            for row in seeded_rows
        ]),
        httpx.Response(200, text="<html>proxy error</html>"),
    ]
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: bodies.pop(0)),
        base_url="http://test",
    )
    table = EmployeeTableController(EmployeeApiClient(http))
    try:
        assert await table.load() is True
        assert await table.load() is False
        assert [r.id for r in table.state.rows] == [r.id for r in seeded_rows]
        [note] = table.drain_notifications()
        assert note.title == "Error loading data"
    finally:
        await http.aclose()

"""Tests for EmployeeApiClient — wire parsing and failure mapping."""

import httpx
import pytest
from httpx import ASGITransport

from staffgrid.config import Settings
from staffgrid.core.domain_types import EmployeeStatus
from staffgrid.core.errors import RecordStoreUnavailableError
from staffgrid.infrastructure.employee_api_client import EmployeeApiClient
from staffgrid.main import app


@pytest.fixture
async def api_client(record_store):
    http = httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
    client = EmployeeApiClient(http)
    yield client
    await client.aclose()


def _client_for(handler) -> EmployeeApiClient:
    return EmployeeApiClient(httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="http://test",
    ))


async def test_fetch_returns_core_entities(api_client):
    rows = await api_client.fetch_employees()
    assert [r.name for r in rows][:2] == ["Sarah Johnson", "Michael Chen"]
    assert rows[2].status is EmployeeStatus.ON_LEAVE
    assert rows[0].employee_id == "EMP001"
    assert rows[0].created_at.tzinfo is not None


async def test_delete_existing_then_missing(api_client):
    assert await api_client.delete_employee("1") is True
    assert await api_client.delete_employee("1") is False


async def test_server_error_on_fetch_raises_unavailable():
    client = _client_for(lambda request: httpx.Response(500))
    with pytest.raises(RecordStoreUnavailableError) as exc:
        await client.fetch_employees()
    assert exc.value.operation == "fetch"


async def test_transport_failure_on_delete_raises_unavailable():
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = _client_for(refuse)
    with pytest.raises(RecordStoreUnavailableError) as exc:
        await client.delete_employee("1")
    assert exc.value.operation == "delete"


async def test_delete_sends_one_request_without_retry():
    calls = []

    def fail(request):
        calls.append(request)
        return httpx.Response(503)

    client = _client_for(fail)
    with pytest.raises(RecordStoreUnavailableError):
        await client.delete_employee("1")
    assert len(calls) == 1


async def test_from_settings_uses_base_url_and_timeout():
    client = EmployeeApiClient.from_settings(Settings(
        api_base_url="http://records.internal:9000", client_timeout_seconds=3,
    ))
    assert str(client._http.base_url) == "http://records.internal:9000"
    assert client._http.timeout.read == 3
    await client.aclose()


@pytest.mark.parametrize("response", [
    httpx.Response(200, text="<html>proxy error</html>"),
    httpx.Response(200, json=[{"id": "1", "name": "No other fields"}]),
    httpx.Response(200, json=42),
])
async def test_unreadable_fetch_body_raises_unavailable(response):
    client = _client_for(lambda request: response)
    with pytest.raises(RecordStoreUnavailableError) as exc:
        await client.fetch_employees()
    assert exc.value.operation == "fetch"

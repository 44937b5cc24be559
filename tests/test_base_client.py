"""
Tests for the base API client and the backend client
"""

import httpx
import pytest
import respx
from httpx import Response
from task_manager_web.api.base_client import BaseAPIClient
from task_manager_web.api.task_backend_client import TaskBackendClient
from task_manager_web.utils.error_handler import BackendError

BASE = "http://backend.test/api/tasks"


class JSONClient(BaseAPIClient):
    """Concrete client for exercising the base class"""
    pass


@pytest.fixture(autouse=True)
def no_retry_delay(monkeypatch):
    monkeypatch.setattr("task_manager_web.api.base_client.RETRY_DELAY", 0)


@pytest.mark.asyncio
@respx.mock
async def test_empty_endpoint_uses_base_url():
    """"" must not add a trailing slash to the resource URL"""
    route = respx.get(BASE).mock(return_value=Response(200, json=[]))

    async with JSONClient(BASE + "/") as client:
        result = await client.get()

    assert result == []
    assert str(route.calls.last.request.url) == BASE


@pytest.mark.asyncio
@respx.mock
async def test_empty_body_returns_none():
    respx.delete(f"{BASE}/1").mock(return_value=Response(200, content=b""))

    async with JSONClient(BASE) as client:
        assert await client.delete("/1") is None


@pytest.mark.asyncio
@respx.mock
async def test_http_error_carries_status_and_body():
    respx.post(BASE).mock(
        return_value=Response(400, json={"message": "Validation failed"})
    )

    async with JSONClient(BASE) as client:
        with pytest.raises(BackendError) as exc_info:
            await client.post(json_data={"title": ""})

    error = exc_info.value
    assert error.status_code == 400
    assert error.data == {"message": "Validation failed"}
    assert error.backend_message == "Validation failed"
    assert error.message == "Request failed with status code 400"


@pytest.mark.asyncio
@respx.mock
async def test_transport_error_has_no_status():
    respx.get(BASE).mock(side_effect=httpx.ConnectError("Connection refused"))

    async with JSONClient(BASE) as client:
        with pytest.raises(BackendError) as exc_info:
            await client.get()

    assert exc_info.value.status_code is None
    assert exc_info.value.message == "Connection refused"


@pytest.mark.asyncio
@respx.mock
async def test_single_attempt_by_default():
    route = respx.get(BASE).mock(return_value=Response(503))

    async with JSONClient(BASE) as client:
        with pytest.raises(BackendError):
            await client.get()

    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_retries_server_errors():
    route = respx.get(BASE).mock(
        side_effect=[Response(503), Response(200, json=[{"id": 1}])]
    )

    async with JSONClient(BASE, retries=2) as client:
        result = await client.get()

    assert result == [{"id": 1}]
    assert route.call_count == 2


@pytest.mark.asyncio
@respx.mock
async def test_client_errors_are_not_retried():
    route = respx.get(f"{BASE}/9").mock(return_value=Response(404))

    async with JSONClient(BASE, retries=3) as client:
        with pytest.raises(BackendError) as exc_info:
            await client.get("/9")

    assert exc_info.value.status_code == 404
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_shared_client_is_not_closed():
    """A client passed in belongs to the caller"""
    shared = httpx.AsyncClient()
    async with JSONClient(BASE, client=shared):
        pass

    assert not shared.is_closed
    await shared.aclose()


@pytest.mark.asyncio
@respx.mock
async def test_backend_client_routes():
    """Each backend operation hits its REST path"""
    respx.get(BASE).mock(return_value=Response(200, json=[]))
    respx.get(f"{BASE}/7").mock(return_value=Response(200, json={"id": 7}))
    respx.post(BASE).mock(return_value=Response(201, json={"id": 8}))
    respx.put(f"{BASE}/7").mock(return_value=Response(200, json={"id": 7, "title": "B"}))
    respx.patch(f"{BASE}/7/status").mock(return_value=Response(200, json={"id": 7, "status": "COMPLETED"}))
    respx.delete(f"{BASE}/7").mock(return_value=Response(204))

    async with TaskBackendClient(base_url=BASE) as backend:
        assert await backend.list_tasks() == []
        assert await backend.get_task("7") == {"id": 7}
        assert await backend.create_task({"title": "A"}) == {"id": 8}
        assert await backend.update_task("7", {"title": "B"}) == {"id": 7, "title": "B"}
        assert (await backend.update_task_status("7", {"status": "COMPLETED"}))["status"] == "COMPLETED"
        assert await backend.delete_task("7") is None

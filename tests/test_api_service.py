import asyncio
import json

import httpx
import pytest

from school_admin.config.settings import Settings
from school_admin.services.api_service import APIService, ResourceClient, ResourceRequestError, key_path


def _client(recording_transport, settings, handler, resource="fee-settings", list_key="feeSettings"):
    transport = recording_transport(handler)
    return ResourceClient(APIService(settings, transport=transport), resource, list_key), transport


def test_list_returns_the_named_collection(recording_transport, settings):
    client, transport = _client(recording_transport, settings,
                                lambda request: httpx.Response(200, json={"feeSettings": [{"feeId": "F1"}], "total": 1}))

    items = asyncio.run(client.list())

    assert items == [{"feeId": "F1"}]
    assert transport.requests[0].method == "GET"
    assert str(transport.requests[0].url) == "http://testserver/fee-settings"


@pytest.mark.parametrize("body", [{}, {"feeSettings": None}])
def test_list_without_the_collection_field_is_empty(recording_transport, settings, body):
    client, _ = _client(recording_transport, settings, lambda request: httpx.Response(200, json=body))

    assert asyncio.run(client.list()) == []


def test_list_forwards_query_parameters(recording_transport, settings):
    client, transport = _client(recording_transport, settings,
                                lambda request: httpx.Response(200, json={"users": []}), "users", "users")

    asyncio.run(client.list(params={"role": "staff"}))

    assert transport.requests[0].url.params["role"] == "staff"


def test_create_posts_the_draft(recording_transport, settings):
    client, transport = _client(recording_transport, settings, lambda request: httpx.Response(201, json={"feeId": "F9"}))

    asyncio.run(client.create({"feeType": "Exam Fee", "amount": 300}))

    request = transport.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/fee-settings"
    assert json.loads(request.content) == {"feeType": "Exam Fee", "amount": 300}


def test_composite_keys_become_ordered_path_segments(recording_transport, settings):
    client, transport = _client(recording_transport, settings,
                                lambda request: httpx.Response(200, json={"success": True}),
                                "custom-student-fees", "customFees")

    asyncio.run(client.update(("STU001", "FEE-TUITION"), {"newAmount": 900}))
    asyncio.run(client.delete(("STU001", "FEE-TUITION")))

    assert [r.method for r in transport.requests] == ["PUT", "DELETE"]
    assert all(r.url.path == "/custom-student-fees/STU001/FEE-TUITION" for r in transport.requests)


def test_key_parts_are_escaped():
    assert key_path(("a/b", "c d")) == "a%2Fb/c%20d"
    assert key_path(7) == "7"


@pytest.mark.parametrize("status_code", [400, 404, 409, 500, 503])
def test_non_success_status_raises_the_generic_error(recording_transport, settings, status_code):
    client, _ = _client(recording_transport, settings, lambda request: httpx.Response(status_code, text="nope"))

    with pytest.raises(ResourceRequestError) as exc_info:
        asyncio.run(client.delete("F1"))

    assert exc_info.value.method == "DELETE"
    assert exc_info.value.reason == f"HTTP {status_code}"


def test_connection_failure_raises_the_generic_error(recording_transport, settings):
    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    client, _ = _client(recording_transport, settings, refuse)

    with pytest.raises(ResourceRequestError):
        asyncio.run(client.list())


def test_timeout_raises_the_generic_error(recording_transport, settings):
    def too_slow(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client, _ = _client(recording_transport, settings, too_slow)

    with pytest.raises(ResourceRequestError) as exc_info:
        asyncio.run(client.list())

    assert exc_info.value.reason == "timeout"


def test_undecodable_body_raises_the_generic_error(recording_transport, settings):
    client, _ = _client(recording_transport, settings, lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(ResourceRequestError):
        asyncio.run(client.list())


def test_base_url_and_timeout_come_from_settings():
    api = APIService(Settings(BACKEND_URL="http://school.local/", REQUEST_TIMEOUT_SECONDS=12, CONNECT_TIMEOUT_SECONDS=3))
    assert api.backend_url == "http://school.local"
    assert api.timeout.read == 12
    assert api.timeout.connect == 3

    unbounded = APIService(Settings(REQUEST_TIMEOUT_SECONDS=0))
    assert unbounded.timeout.read is None


@pytest.mark.parametrize("value", [5, True, "configs", {"id": "E1"}])
def test_list_field_that_is_not_a_list_raises_the_generic_error(recording_transport, settings, value):
    client, _ = _client(recording_transport, settings,
                        lambda request: httpx.Response(200, json={"configs": value}), "exam-configs", "configs")

    with pytest.raises(ResourceRequestError) as exc_info:
        asyncio.run(client.list())

    assert exc_info.value.reason == "invalid collection"

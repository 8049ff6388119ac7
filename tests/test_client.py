import httpx
import pytest

from core.client import ApiClient
from core.errors import ApiRequestError, SerializationError, TransportError
from utils import Endpoint, get_endpoint


def test_get_endpoint_joins_base_and_path():
    assert get_endpoint("https://api.test/v1/", Endpoint.PROPERTY_LOOKUP) == "https://api.test/v1/property/lookup/sync"
    assert get_endpoint("https://api.test/v1", "/address/geocode") == "https://api.test/v1/address/geocode"


def test_get_endpoint_rejects_unknown_path():
    with pytest.raises(ValueError):
        get_endpoint("https://api.test/v1", "/property/delete")


@pytest.mark.asyncio
async def test_execute_posts_json_with_bearer_token(client, recorder):
    recorder.body = {"results": {"ok": True}}

    result = await client.execute(Endpoint.ADDRESS_GEOCODE, {"requests": [{"address": "x"}]})

    assert result == {"results": {"ok": True}}
    request = recorder.requests[-1]
    assert request.method == "POST"
    assert str(request.url) == "https://api.test/v1/address/geocode"
    assert request.headers["Authorization"] == "Bearer test-key"
    assert request.headers["Content-Type"] == "application/json"
    assert recorder.last_json == {"requests": [{"address": "x"}]}


@pytest.mark.asyncio
async def test_non_success_status_raises_api_request_error(client, recorder):
    recorder.status_code = 404
    recorder.body = {"message": "missing"}

    with pytest.raises(ApiRequestError) as excinfo:
        await client.execute(Endpoint.PROPERTY_SEARCH, {})

    assert excinfo.value.status_code == 404
    assert excinfo.value.reason == "Not Found"
    assert str(excinfo.value) == "API request failed: 404 Not Found"
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_invalid_json_raises_serialization_error(client, recorder):
    recorder.body = "<html>gateway</html>"

    with pytest.raises(SerializationError) as excinfo:
        await client.execute(Endpoint.PROPERTY_SEARCH, {})

    assert isinstance(excinfo.value, ApiRequestError)
    assert excinfo.value.status_code == 200


@pytest.mark.asyncio
async def test_network_failure_raises_transport_error(client, recorder):
    recorder.error = httpx.ConnectError("connection refused")

    with pytest.raises(TransportError, match="connection refused"):
        await client.execute(Endpoint.ADDRESS_VERIFY, {})


@pytest.mark.asyncio
async def test_timeout_raises_transport_error(settings):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = ApiClient(settings, transport=httpx.MockTransport(handler))
    with pytest.raises(TransportError):
        await client.execute(Endpoint.ADDRESS_VERIFY, {})

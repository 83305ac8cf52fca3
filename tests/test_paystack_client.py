import httpx
import pytest

from src.error_handler import TransportError
from src.integrations.clients.real_http.payments import PaystackClient


def _client(handler) -> PaystackClient:
    return PaystackClient(
        secret_key="sk_test_456",
        base_url="https://gateway.test/",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_verify_sends_bearer_token_to_reference_url():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(
            200,
            json={"status": True, "message": "Verification successful", "data": {"status": "success", "amount": 500000, "currency": "NGN"}},
        )

    result = await _client(handler).verify_transaction("T123")

    assert seen == {
        "method": "GET",
        "url": "https://gateway.test/transaction/verify/T123",
        "auth": "Bearer sk_test_456",
    }
    assert result.is_successful
    assert result.amount == 500000
    assert result.display_amount == 5000
    assert result.currency == "NGN"


@pytest.mark.asyncio
async def test_reference_is_escaped_in_the_path():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.raw_path
        return httpx.Response(200, json={"status": False, "message": "not found"})

    await _client(handler).verify_transaction("../admin")

    assert seen["path"] == b"/transaction/verify/..%2Fadmin"


@pytest.mark.asyncio
async def test_declined_reply_without_data_is_not_successful():
    def handler(request):
        return httpx.Response(200, json={"status": False, "message": "Transaction reference not found"})

    result = await _client(handler).verify_transaction("T404")

    assert result.status is False
    assert result.is_successful is False
    assert result.message == "Transaction reference not found"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401, 404, 500, 503])
async def test_non_2xx_is_a_transport_error(status_code):
    def handler(request):
        return httpx.Response(status_code, json={"status": False, "message": "Invalid key"})

    with pytest.raises(TransportError) as exc_info:
        await _client(handler).verify_transaction("T123")

    assert exc_info.value.status_code == 500
    assert exc_info.value.detail == {"status": False, "message": "Invalid key"}


@pytest.mark.asyncio
async def test_non_json_body_is_a_transport_error():
    def handler(request):
        return httpx.Response(200, text="<html>gateway maintenance</html>")

    with pytest.raises(TransportError):
        await _client(handler).verify_transaction("T123")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error_type",
    [httpx.ConnectError, httpx.ReadTimeout],
)
async def test_network_failure_is_a_transport_error(error_type):
    def handler(request):
        raise error_type("boom", request=request)

    with pytest.raises(TransportError):
        await _client(handler).verify_transaction("T123")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [
        ["not", "an", "object"],
        {"message": "no status flag"},
        {"status": "true", "data": {"status": "success", "amount": 1}},
        {"status": True, "data": {"status": "success"}},
        {"status": True, "message": "Verification successful"},
    ],
)
async def test_malformed_reply_is_a_transport_error(body):
    def handler(request):
        return httpx.Response(200, json=body)

    with pytest.raises(TransportError):
        await _client(handler).verify_transaction("T123")

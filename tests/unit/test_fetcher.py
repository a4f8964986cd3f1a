import httpx
import pytest

from anyparser.exceptions import TransportFailure
from anyparser.fetcher import build_auth_headers, wrapped_post

URL = "https://api.example.com/parse/v1"


class TestBuildAuthHeaders:
    def test_with_api_key(self):
        assert build_auth_headers("secret")["Authorization"] == "Bearer secret"

    @pytest.mark.parametrize("api_key", [None, ""])
    def test_without_api_key(self, api_key):
        assert "Authorization" not in build_auth_headers(api_key)


class TestWrappedPost:
    @pytest.mark.asyncio
    async def test_success_returns_response(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))

        async with httpx.AsyncClient(transport=transport) as client:
            response = await wrapped_post(client, URL)

        assert response.text == "ok"

    @pytest.mark.asyncio
    async def test_error_keeps_status_and_body(self):
        transport = httpx.MockTransport(
            lambda request: httpx.Response(401, text='{"error": "invalid key"}')
        )

        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(TransportFailure) as exc_info:
                await wrapped_post(client, URL)

        failure = exc_info.value
        assert failure.status_code == 401
        assert str(failure) == f"HTTP 401 Unauthorized: {URL}"
        assert failure.body == '{"error": "invalid key"}'
        assert failure.__cause__ is failure.cause

    @pytest.mark.asyncio
    async def test_server_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(503, text="down"))

        async with httpx.AsyncClient(transport=transport) as client:
            with pytest.raises(TransportFailure) as exc_info:
                await wrapped_post(client, URL)

        assert exc_info.value.status_code == 503
        assert URL in exc_info.value.message

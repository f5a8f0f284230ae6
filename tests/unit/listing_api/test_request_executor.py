"""Tests for listing_api request_executor."""

import asyncio
import socket
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import orjson
import pytest

from catalog_feed.listing_api.errors import FetchError, NetworkError, ServerError
from catalog_feed.listing_api.request_builder import JSON_HEADERS
from catalog_feed.listing_api.request_executor import RequestExecutor

URL = "https://catalog.example.com/xdeal/Xchange"


def _response_cm(status=200, body=b"{}"):
    mock_response = MagicMock()
    mock_response.status = status
    mock_response.read = AsyncMock(return_value=body)

    mock_cm = MagicMock()
    mock_cm.__aenter__ = AsyncMock(return_value=mock_response)
    mock_cm.__aexit__ = AsyncMock(return_value=None)
    return mock_cm


@pytest.fixture
def mock_session():
    return MagicMock()


@pytest.fixture
def mock_session_manager(mock_session):
    manager = MagicMock()
    manager.initialize = AsyncMock()
    manager.get_session = MagicMock(return_value=mock_session)
    return manager


@pytest.fixture
def executor(mock_session_manager):
    return RequestExecutor(mock_session_manager)


@pytest.mark.asyncio
async def test_post_json_success(executor, mock_session, mock_session_manager):
    mock_session.post.return_value = _response_cm(body=b'{"xchange": [{"listing_id": 1}]}')
    body = {"last_listing_id": "", "token": "t"}

    result = await executor.post_json(URL, body)

    assert result == {"xchange": [{"listing_id": 1}]}
    mock_session_manager.initialize.assert_awaited_once()
    args, kwargs = mock_session.post.call_args
    assert args == (URL,)
    assert orjson.loads(kwargs["data"]) == body
    assert kwargs["headers"] == JSON_HEADERS


@pytest.mark.asyncio
async def test_non_success_status_raises_server_error(executor, mock_session):
    mock_session.post.return_value = _response_cm(status=503, body=b"Service Unavailable")

    with pytest.raises(ServerError, match="returned 503") as exc_info:
        await executor.post_json(URL, {})

    assert exc_info.value.status == 503


@pytest.mark.asyncio
async def test_malformed_json_raises_server_error(executor, mock_session):
    mock_session.post.return_value = _response_cm(body=b"<html>oops</html>")

    with pytest.raises(ServerError, match="not JSON"):
        await executor.post_json(URL, {})


@pytest.mark.asyncio
async def test_json_array_body_is_returned_as_is(executor, mock_session):
    mock_session.post.return_value = _response_cm(body=b"[1, 2]")

    assert await executor.post_json(URL, {}) == [1, 2]


@pytest.mark.asyncio
async def test_connection_failure_raises_network_error(executor, mock_session):
    connection_key = MagicMock()
    mock_session.post.side_effect = aiohttp.ClientConnectorError(connection_key, OSError(111, "Connection refused"))

    with pytest.raises(NetworkError, match="unreachable"):
        await executor.post_json(URL, {})


@pytest.mark.asyncio
async def test_timeout_raises_network_error(executor, mock_session):
    mock_session.post.side_effect = asyncio.TimeoutError()

    with pytest.raises(NetworkError):
        await executor.post_json(URL, {})


@pytest.mark.asyncio
async def test_payload_error_raises_server_error(executor, mock_session):
    mock_cm = _response_cm()
    mock_cm.__aenter__.return_value.read.side_effect = aiohttp.ClientPayloadError("truncated")
    mock_session.post.return_value = mock_cm

    with pytest.raises(ServerError, match="request failed"):
        await executor.post_json(URL, {})


@pytest.mark.asyncio
async def test_errors_share_fetch_error_base(executor, mock_session):
    mock_session.post.return_value = _response_cm(status=500, body=b"")

    with pytest.raises(FetchError):
        await executor.post_json(URL, {})


def test_long_bodies_are_truncated_in_messages():
    from catalog_feed.listing_api.request_executor import _preview

    assert _preview(b"x" * 500).endswith("...")
    assert len(_preview(b"x" * 500)) == 203


class _WrappedOSError(aiohttp.ClientError):
    def __init__(self) -> None:
        super().__init__("wrapped")
        self.os_error = OSError("Network issue")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [
        aiohttp.ClientConnectorError(connection_key=MagicMock(), os_error=OSError("Connection failed")),
        aiohttp.ServerTimeoutError(),
        aiohttp.ServerDisconnectedError(),
        socket.gaierror("DNS resolution failed"),
        OSError("Network unreachable"),
        _WrappedOSError(),
    ],
)
async def test_connectivity_failures_raise_network_error(executor, mock_session, error):
    mock_session.post.side_effect = error

    with pytest.raises(NetworkError, match="unreachable"):
        await executor.post_json(URL, {})


@pytest.mark.asyncio
async def test_response_level_client_error_raises_server_error(executor, mock_session):
    mock_session.post.side_effect = aiohttp.ClientResponseError(MagicMock(), (), status=400, message="Bad Request")

    with pytest.raises(ServerError, match="request failed"):
        await executor.post_json(URL, {})

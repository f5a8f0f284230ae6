"""Single-shot request execution for the listing search endpoint."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict

import aiohttp
import orjson

from ..http_utils import is_success_status
from .errors import NetworkError, ServerError
from .request_builder import JSON_HEADERS
from .session_manager import SessionManager

logger = logging.getLogger(__name__)

_MAX_LOGGED_BODY_CHARS = 200

# Failures where the catalog server never produced a response. Proxy, SSL
# and certificate connector errors subclass ClientConnectorError; DNS
# failures are OSError.
_CONNECTIVITY_ERRORS = (
    aiohttp.ClientConnectorError,
    aiohttp.ServerTimeoutError,
    aiohttp.ServerDisconnectedError,
    asyncio.TimeoutError,
    OSError,
)


def _is_connectivity_failure(exc: BaseException) -> bool:
    if isinstance(exc, _CONNECTIVITY_ERRORS):
        return True
    return isinstance(getattr(exc, "os_error", None), OSError)


class RequestExecutor:
    """POST a JSON body once and decode the JSON reply.

    Connectivity failures raise NetworkError; non-2xx statuses and bodies
    that are not JSON raise ServerError. Nothing is retried here.
    """

    def __init__(self, session_manager: SessionManager) -> None:
        self._session_manager = session_manager

    async def post_json(self, url: str, body: Dict[str, Any]) -> Any:
        await self._session_manager.initialize()
        session = self._session_manager.get_session()
        try:
            async with session.post(url, data=orjson.dumps(body), headers=JSON_HEADERS) as response:
                status = response.status
                raw = await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as exc:
            if _is_connectivity_failure(exc):
                raise NetworkError(f"Catalog endpoint unreachable: {exc}") from exc
            raise ServerError(f"Catalog request failed: {exc}") from exc

        if not is_success_status(status):
            raise ServerError(f"Catalog request returned {status}: {_preview(raw)}", status=status)

        try:
            return orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise ServerError(f"Catalog response was not JSON: {_preview(raw)}", status=status) from exc


def _preview(raw: bytes) -> str:
    text = raw.decode("utf-8", errors="replace")
    if len(text) > _MAX_LOGGED_BODY_CHARS:
        return text[:_MAX_LOGGED_BODY_CHARS] + "..."
    return text

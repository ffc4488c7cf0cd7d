"""
httpx-backed implementation of the Transport port.
"""
from __future__ import annotations

from typing import Mapping, Optional

import httpx

from checkout_gateway.application.ports.transport import TransportResponse
from checkout_gateway.core.logging_config import get_logger


logger = get_logger(__name__)


class HttpxTransport:
    def __init__(
        self,
        *,
        timeouts: Optional[dict[str, float]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeouts_cfg = timeouts or {"connect": 1.0, "read": 3.0, "write": 3.0, "total": 5.0}
        self._client = client

    @property
    def timeouts(self) -> httpx.Timeout:
        return httpx.Timeout(
            self._timeouts_cfg["total"],
            connect=self._timeouts_cfg["connect"],
            read=self._timeouts_cfg["read"],
            write=self._timeouts_cfg["write"],
        )

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeouts)
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[str] = None,
    ) -> TransportResponse:
        client = self._get_client()
        content = body.encode("utf-8") if body is not None else None
        response = await client.request(method, url, headers=dict(headers), content=content)
        logger.debug("transport_response", method=method, url=url, status_code=response.status_code)
        return TransportResponse(
            status_code=response.status_code,
            headers=dict(response.headers.items()),
            body=response.text,
        )

    async def aclose(self) -> None:
        """Close underlying HTTP client if created."""
        if self._client is not None:
            try:
                await self._client.aclose()
            finally:
                self._client = None

"""
HTTP transport port used by gateway clients.

The transport must hand back header values and the body text exactly as
received, since both are inputs to response signature verification.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@runtime_checkable
class Transport(Protocol):
    async def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        body: Optional[str] = None,
    ) -> TransportResponse: ...

    async def aclose(self) -> None: ...

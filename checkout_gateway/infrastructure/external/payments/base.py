"""
Base payment client implementing shared concerns: transport ownership,
status mapping and logging.

Concrete providers should subclass and implement provider-specific logic.
"""
from __future__ import annotations

from typing import Mapping, Optional

from checkout_gateway.application.dtos.payments import (
    CallbackEvent,
    CheckoutPayment,
    CheckoutPaymentOptions,
)
from checkout_gateway.application.ports.payment_gateway import PaymentGateway
from checkout_gateway.application.ports.transport import Transport
from checkout_gateway.core.logging_config import get_logger
from checkout_gateway.infrastructure.external.transport import HttpxTransport
from checkout_gateway.shared.codes.payment_codes import PROVIDER_STATUS_TO_INTERNAL


logger = get_logger(__name__)


class BasePaymentClient(PaymentGateway):
    provider: str = "base"

    def __init__(
        self,
        *,
        transport: Optional[Transport] = None,
        timeouts: Optional[dict[str, float]] = None,
    ) -> None:
        self.transport: Transport = transport or HttpxTransport(timeouts=timeouts)

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self.transport.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    # Default implementations raise to force override where needed
    async def create_payment(self, options: CheckoutPaymentOptions) -> CheckoutPayment:  # type: ignore[override]
        raise NotImplementedError

    def parse_callback(self, params: Mapping[str, str], body: Optional[str] = None) -> CallbackEvent:  # type: ignore[override]
        raise NotImplementedError

    # Helpers
    def _map_status(self, provider_status: str) -> str:
        mapping = PROVIDER_STATUS_TO_INTERNAL.get(self.provider, {})
        return mapping.get(provider_status, provider_status)

    def _log(self, event: str, **kwargs) -> None:
        logger.info(
            event,
            provider=self.provider,
            **kwargs,
        )

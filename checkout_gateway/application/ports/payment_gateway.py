"""
Payment gateway port (application/ports) exposing a replaceable protocol.

Application depends on this Protocol; infrastructure implements adapters.
"""
from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from checkout_gateway.application.dtos.payments import (
    CallbackEvent,
    CheckoutPayment,
    CheckoutPaymentOptions,
)


@runtime_checkable
class PaymentGateway(Protocol):
    """Gateway protocol for the hosted payment provider.

    Implementations should be async and side-effect free beyond IO.
    """

    provider: str

    async def create_payment(self, options: CheckoutPaymentOptions) -> CheckoutPayment: ...

    def parse_callback(self, params: Mapping[str, str], body: Optional[str] = None) -> CallbackEvent: ...

    async def aclose(self) -> None: ...

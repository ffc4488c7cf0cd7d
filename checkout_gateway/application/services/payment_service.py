"""
Application service orchestrating payment use-cases.

This class depends only on the application PaymentGateway port and DTOs.
Gateway implementations are provided by infrastructure and must be injected
from the composition root (API), keeping dependencies one-way.
"""
from __future__ import annotations

from typing import Mapping, Optional

from checkout_gateway.application.dtos.payments import (
    CallbackEvent,
    CheckoutPayment,
    CheckoutPaymentOptions,
)
from checkout_gateway.application.ports.payment_gateway import PaymentGateway
from checkout_gateway.core.logging_config import get_logger


logger = get_logger(__name__)


class PaymentService:
    def __init__(self, gateway: PaymentGateway) -> None:
        self.gateway = gateway

    async def create_payment(self, options: CheckoutPaymentOptions) -> CheckoutPayment:
        logger.info(
            "payment_create_request",
            stamp=options.stamp,
            reference=options.reference,
            amount=options.amount,
            provider=self.gateway.provider,
        )
        payment = await self.gateway.create_payment(options)
        logger.info(
            "payment_create_response",
            stamp=options.stamp,
            transaction_id=payment.transaction_id,
            providers=len(payment.providers),
        )
        return payment

    def handle_callback(self, params: Mapping[str, str], body: Optional[str] = None) -> CallbackEvent:
        event = self.gateway.parse_callback(params, body)
        logger.info(
            "payment_callback_received",
            provider=event.provider,
            transaction_id=event.transaction_id,
            status=event.status,
        )
        return event

    async def aclose(self) -> None:
        await self.gateway.aclose()

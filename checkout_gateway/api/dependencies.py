"""
FastAPI dependencies
"""
from typing import AsyncIterator

from checkout_gateway.application.ports.payment_gateway import PaymentGateway
from checkout_gateway.infrastructure.external.payments import get_payment_gateway


async def get_gateway() -> AsyncIterator[PaymentGateway]:
    """Gateway per request, closed once the response is sent."""
    gateway = get_payment_gateway()
    try:
        yield gateway
    finally:
        await gateway.aclose()


"""
Factory for payment gateway clients.
"""
from __future__ import annotations

from typing import Optional

from checkout_gateway.core.settings import payment_settings
from checkout_gateway.application.ports.payment_gateway import PaymentGateway


def get_payment_gateway(provider: Optional[str] = None) -> PaymentGateway:
    name = (provider or payment_settings.default_provider).lower()
    if name in {"checkout", "checkout.fi"}:
        from .checkout_client import CheckoutClient
        return CheckoutClient.from_settings(payment_settings)
    raise ValueError(f"Unsupported payment provider: {name}")

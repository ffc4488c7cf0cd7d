"""
Client for the Checkout Finland payment gateway.

Builds signed payment requests and verifies the gateway's signed responses
and callbacks.
"""
from checkout_gateway.domain.common.exceptions import (
    SignatureVerificationFailed,
    UnsupportedAlgorithm,
)
from checkout_gateway.domain.signing import Algorithm, Credentials, canonicalize, sign, verify
from checkout_gateway.infrastructure.external.payments.checkout_client import CheckoutClient
from checkout_gateway.infrastructure.external.payments.exceptions import GatewayHTTPError

__all__ = [
    "Algorithm",
    "CheckoutClient",
    "Credentials",
    "GatewayHTTPError",
    "SignatureVerificationFailed",
    "UnsupportedAlgorithm",
    "canonicalize",
    "sign",
    "verify",
]

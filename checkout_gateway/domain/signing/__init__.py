"""
Message authentication for the Checkout payment gateway.
"""
from .algorithms import Algorithm, DEFAULT_ALGORITHM
from .credentials import Credentials
from .signer import NAMESPACE, canonicalize, sign
from .verifier import ALGORITHM_FIELD, SIGNATURE_FIELD, verify

__all__ = [
    "Algorithm",
    "DEFAULT_ALGORITHM",
    "Credentials",
    "NAMESPACE",
    "ALGORITHM_FIELD",
    "SIGNATURE_FIELD",
    "canonicalize",
    "sign",
    "verify",
]

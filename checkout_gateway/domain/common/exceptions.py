"""Domain-level business exceptions, shared by domain and infrastructure.

The core layer only maps these to HTTP responses; the domain must not
depend on core.
"""
from __future__ import annotations

from typing import Optional

from checkout_gateway.shared.codes.payment_codes import PaymentCode


class BusinessException(Exception):
    """Base business exception"""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "BusinessError",
        details: Optional[dict] = None,
        field: Optional[str] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        self.field = field
        super().__init__(self.message)


class UnsupportedAlgorithm(BusinessException):
    """Raised when an algorithm identifier outside the supported set is seen."""

    def __init__(self, algorithm: object):
        super().__init__(
            code=PaymentCode.UNSUPPORTED_ALGORITHM,
            message=f"{algorithm} is not supported signature algorithm",
            error_type="UnsupportedAlgorithm",
            details={"algorithm": None if algorithm is None else str(algorithm)},
            field="checkout-algorithm",
        )
        self.algorithm = algorithm


class SignatureVerificationFailed(BusinessException):
    """Raised when an inbound message does not carry a valid signature."""

    def __init__(self, message: str = "Signature verification failed", *, details: Optional[dict] = None):
        super().__init__(
            code=PaymentCode.SIGNATURE_ERROR,
            message=message,
            error_type="SignatureVerificationFailed",
            details=details,
            field="signature",
        )


__all__ = [
    "BusinessException",
    "UnsupportedAlgorithm",
    "SignatureVerificationFailed",
]

"""
Exceptions for payment providers mapped to unified BusinessException variants.
"""
from __future__ import annotations

from typing import Optional

from checkout_gateway.domain.common.exceptions import BusinessException
from checkout_gateway.shared.codes import BusinessCode
from checkout_gateway.shared.codes.payment_codes import PaymentCode


class GatewayHTTPError(BusinessException):
    """The gateway answered with a non-2xx status.

    The response is neither verified nor parsed; ``body`` is kept for
    diagnostics only.
    """

    def __init__(self, status_code: int, *, provider: str, body: str = "", details: Optional[dict] = None):
        full_details = {"provider": provider, "status_code": status_code}
        if details:
            full_details.update(details)
        super().__init__(
            code=PaymentCode.PROVIDER_ERROR,
            message=f"Gateway responded with status {status_code}",
            error_type="GatewayHTTPError",
            details=full_details,
        )
        self.status_code = status_code
        self.body = body


class InvalidCallbackPayload(BusinessException):
    """A correctly signed callback carries a value that cannot be interpreted."""

    def __init__(self, field: str, value: str, *, provider: str):
        super().__init__(
            code=BusinessCode.PARAM_ERROR,
            message=f"Invalid callback value for {field}",
            error_type="InvalidCallbackPayload",
            details={"provider": provider, "value": value},
            field=field,
        )

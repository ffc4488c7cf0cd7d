"""
Payment specific codes and provider status mapping.
"""
from __future__ import annotations

from enum import IntEnum


class PaymentCode(IntEnum):
    # Generic success
    SUCCESS = 0

    # Provider/Network errors (6xxxx)
    PROVIDER_ERROR = 60000
    SIGNATURE_ERROR = 60002
    UNSUPPORTED_ALGORITHM = 60005


# Provider→internal status mapping (checkout-status on redirects/callbacks)
PROVIDER_STATUS_TO_INTERNAL = {
    "checkout": {
        "new": "created",
        "ok": "succeeded",
        "pending": "pending",
        "delayed": "pending",
        "fail": "failed",
    },
}

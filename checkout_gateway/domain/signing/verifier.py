"""
Verification of signed gateway responses and callbacks.
"""
from __future__ import annotations

import hmac
from typing import Mapping, Optional

from checkout_gateway.domain.signing.algorithms import Algorithm
from checkout_gateway.domain.signing.signer import sign

SIGNATURE_FIELD = "signature"
ALGORITHM_FIELD = "checkout-algorithm"


def verify(secret: str, fields: Mapping[str, str], body: Optional[str] = None) -> bool:
    """Recompute the signature of an inbound message and compare.

    The algorithm is taken from the message's own ``checkout-algorithm``
    field and must be one of the supported ones; anything else raises
    UnsupportedAlgorithm instead of returning False.
    """
    params = dict(fields)
    provided = params.pop(SIGNATURE_FIELD, None)
    algorithm = Algorithm.parse(params.get(ALGORITHM_FIELD))

    expected = sign(secret, algorithm, params, body)
    if provided is None:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), str(provided).encode("utf-8"))

"""
HMAC signing of gateway metadata fields.

Only ``checkout-`` prefixed fields take part in the signature. They are
sorted by key, rendered as ``key:value`` lines, followed by the body (or an
empty line when there is none), and joined with ``\\n``.
"""
from __future__ import annotations

import hmac
from typing import Mapping, Optional, Union

from checkout_gateway.domain.signing.algorithms import Algorithm

NAMESPACE = "checkout-"


def canonicalize(fields: Mapping[str, str], body: Optional[str] = None) -> str:
    keys = sorted(key for key in fields if key.startswith(NAMESPACE))
    lines = [f"{key}:{fields[key]}" for key in keys]
    lines.append(body or "")
    return "\n".join(lines)


def sign(
    secret: str,
    algorithm: Union[Algorithm, str],
    fields: Mapping[str, str],
    body: Optional[str] = None,
) -> str:
    """Compute the lowercase hex HMAC of ``fields`` and ``body``.

    Raises:
        UnsupportedAlgorithm: ``algorithm`` is not sha256/sha512. Nothing is
            hashed in that case.
    """
    algo = Algorithm.parse(algorithm)
    payload = canonicalize(fields, body)
    return hmac.new(secret.encode("utf-8"), payload.encode("utf-8"), algo.digestmod).hexdigest()

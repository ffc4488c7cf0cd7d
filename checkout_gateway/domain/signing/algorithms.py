"""
Hash algorithms accepted by the gateway for request and response signatures.
"""
from __future__ import annotations

import hashlib
from enum import Enum
from typing import Any, Callable

from checkout_gateway.domain.common.exceptions import UnsupportedAlgorithm


class Algorithm(str, Enum):
    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def is_supported(cls, value: Any) -> bool:
        return isinstance(value, str) and value in _SUPPORTED

    @classmethod
    def parse(cls, value: Any) -> "Algorithm":
        """Return the member for ``value`` or raise UnsupportedAlgorithm.

        Matching is exact and case-sensitive; there is no fallback default.
        """
        if isinstance(value, cls):
            return value
        if not cls.is_supported(value):
            raise UnsupportedAlgorithm(value)
        return cls(value)

    @property
    def digestmod(self) -> Callable[..., Any]:
        return _DIGESTS[self]


DEFAULT_ALGORITHM = Algorithm.SHA512

_SUPPORTED = frozenset(member.value for member in Algorithm)

_DIGESTS = {
    Algorithm.SHA256: hashlib.sha256,
    Algorithm.SHA512: hashlib.sha512,
}

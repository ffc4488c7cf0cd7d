from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from checkout_gateway.domain.signing.algorithms import DEFAULT_ALGORITHM, Algorithm


class Credentials(BaseModel):
    """Merchant account id, shared secret and signing algorithm.

    Immutable; the secret is kept out of ``repr`` so it cannot leak into logs.
    """

    account_id: str
    secret: str = Field(repr=False)
    algorithm: Algorithm = DEFAULT_ALGORITHM

    model_config = ConfigDict(frozen=True)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, v):
        return Algorithm.parse(v)

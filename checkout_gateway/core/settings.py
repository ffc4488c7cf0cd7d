"""
Payment-related settings using pydantic-settings v2 with nested env keys.

Kept apart from core.config so the gateway client can be configured without
the HTTP application settings.
"""
from __future__ import annotations

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, BaseModel, Field


CHECKOUT_ENDPOINT = "https://api.checkout.fi"


class PaymentTimeouts(BaseModel):
    connect: float = 1.0
    read: float = 3.0
    write: float = 3.0
    total: float = 5.0


class CheckoutSettings(BaseModel):
    account: Optional[str] = None
    secret: Optional[str] = Field(default=None, repr=False)
    # Validated when the client is built; unsupported values are rejected there.
    algorithm: str = "sha512"
    endpoint: str = CHECKOUT_ENDPOINT


class PaymentSettings(BaseSettings):
    default_provider: str = Field(
        default="checkout",
        validation_alias=AliasChoices("PAYMENT__DEFAULT_PROVIDER", "default_provider"),
    )
    timeouts: PaymentTimeouts = Field(default_factory=PaymentTimeouts)
    checkout: CheckoutSettings = Field(default_factory=CheckoutSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


payment_settings = PaymentSettings()

"""
Payment DTOs (Pydantic v2) for the gateway's payload structure.

Field names are snake_case in Python and camelCase on the wire. Values are
passed through as given; the gateway is the authority on their validity.
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> str:
        """Serialize to the JSON body sent to the gateway."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class CheckoutCommission(_WireModel):
    # Merchant who gets the commission
    merchant: str
    # Minor units, VAT not applicable
    amount: int


class CheckoutItem(_WireModel):
    # Price per unit, VAT included, in minor units (e.g. cents)
    unit_price: int
    units: int
    vat_percentage: int
    product_code: str
    delivery_date: str
    description: Optional[str] = None
    category: Optional[str] = None
    # stamp/reference/merchant/commission are for Shop-in-Shop payments
    stamp: Optional[str] = None
    reference: Optional[str] = None
    merchant: Optional[str] = None
    commission: Optional[CheckoutCommission] = None


class CheckoutCustomer(_WireModel):
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone_number: Optional[str] = None
    vat_id: Optional[str] = None


class CheckoutAddress(_WireModel):
    street_address: str
    postal_code: str
    city: str
    county: str
    # Alpha-2 country code
    country: str


class CheckoutCallbackUrls(_WireModel):
    success: str
    cancel: str


class CheckoutPaymentOptions(_WireModel):
    # Merchant unique identifier for the order
    stamp: str
    reference: str
    # Total in minor units, must match the sum of items
    amount: int
    currency: Literal["EUR"] = "EUR"
    language: Literal["FI", "SV", "EN"]
    items: list[CheckoutItem]
    customer: CheckoutCustomer
    delivery_address: Optional[CheckoutAddress] = None
    invoicing_address: Optional[CheckoutAddress] = None
    # Browser redirect after the payment is paid or cancelled
    redirect_urls: CheckoutCallbackUrls
    # Server-to-server notification
    callback_urls: Optional[CheckoutCallbackUrls] = None


class CheckoutProviderParameter(_WireModel):
    name: str
    value: str


class CheckoutProvider(_WireModel):
    url: str
    icon: str
    svg: str
    name: str
    group: str
    id: str
    parameters: list[CheckoutProviderParameter] = []


class CheckoutPayment(_WireModel):
    transaction_id: str
    href: str
    providers: list[CheckoutProvider] = []


class CallbackEvent(BaseModel):
    """A verified redirect or callback notification."""

    transaction_id: Optional[str] = None
    stamp: Optional[str] = None
    reference: Optional[str] = None
    amount: Optional[int] = None
    status: str
    provider_status: str
    payment_method: Optional[str] = None
    provider: str
    raw_params: dict[str, Any] = {}

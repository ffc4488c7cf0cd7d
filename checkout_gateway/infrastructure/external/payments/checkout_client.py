"""
Checkout Finland (api.checkout.fi) adapter.

Every request carries ``checkout-*`` metadata headers and an HMAC
``signature`` over those headers and the body. Responses and callbacks are
signed the same way by the gateway and are verified before their content
is trusted.
"""
from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from checkout_gateway.application.dtos.payments import (
    CallbackEvent,
    CheckoutPayment,
    CheckoutPaymentOptions,
)
from checkout_gateway.application.ports.transport import Transport
from checkout_gateway.core.settings import CHECKOUT_ENDPOINT, PaymentSettings, payment_settings
from checkout_gateway.domain.common.exceptions import SignatureVerificationFailed
from checkout_gateway.domain.signing import (
    DEFAULT_ALGORITHM,
    SIGNATURE_FIELD,
    Algorithm,
    Credentials,
    sign,
    verify,
)
from checkout_gateway.infrastructure.external.payments.base import BasePaymentClient
from checkout_gateway.infrastructure.external.payments.exceptions import (
    GatewayHTTPError,
    InvalidCallbackPayload,
)


CONTENT_TYPE = "application/json; charset=utf-8"


def _utc_timestamp() -> str:
    # e.g. 2018-07-06T10:01:31.904Z
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CheckoutClient(BasePaymentClient):
    provider = "checkout"

    def __init__(
        self,
        account_id: str,
        secret: str,
        algorithm: Union[Algorithm, str] = DEFAULT_ALGORITHM,
        *,
        endpoint: str = CHECKOUT_ENDPOINT,
        transport: Optional[Transport] = None,
        timeouts: Optional[dict[str, float]] = None,
    ) -> None:
        # Credentials validation raises UnsupportedAlgorithm before any transport is built.
        self._credentials = Credentials(account_id=account_id, secret=secret, algorithm=algorithm)
        super().__init__(transport=transport, timeouts=timeouts)
        self.endpoint = endpoint.rstrip("/")

    @classmethod
    def from_settings(
        cls,
        settings: Optional[PaymentSettings] = None,
        *,
        transport: Optional[Transport] = None,
    ) -> "CheckoutClient":
        cfg = settings or payment_settings
        if not (cfg.checkout.account and cfg.checkout.secret):
            raise RuntimeError("CHECKOUT configuration incomplete")
        return cls(
            cfg.checkout.account,
            cfg.checkout.secret,
            cfg.checkout.algorithm,
            endpoint=cfg.checkout.endpoint,
            transport=transport,
            timeouts=cfg.timeouts.model_dump(),
        )

    @property
    def account_id(self) -> str:
        return self._credentials.account_id

    @property
    def algorithm(self) -> Algorithm:
        return self._credentials.algorithm

    def make_headers(self, method: str) -> dict[str, str]:
        """Fresh metadata fields for one outgoing request."""
        return {
            "checkout-account": self._credentials.account_id,
            "checkout-algorithm": self._credentials.algorithm.value,
            "checkout-method": method.upper(),
            "checkout-nonce": str(uuid.uuid4()),
            "checkout-timestamp": _utc_timestamp(),
        }

    def validate_response(self, fields: Mapping[str, str], body: Optional[str] = None) -> bool:
        """Check the signature of a response or callback with this client's secret."""
        return verify(self._credentials.secret, fields, body)

    async def send_request(
        self,
        method: str,
        path: str,
        extra_headers: Optional[Mapping[str, str]] = None,
        body: Optional[str] = None,
    ) -> Any:
        """Sign, send, verify and decode one request.

        Raises:
            GatewayHTTPError: non-2xx status; the body is not parsed.
            UnsupportedAlgorithm: the response claims an unsupported algorithm.
            SignatureVerificationFailed: the response signature does not match.
        """
        method = method.upper()
        headers = {**(extra_headers or {}), **self.make_headers(method)}
        headers[SIGNATURE_FIELD] = sign(
            self._credentials.secret,
            self._credentials.algorithm,
            headers,
            body,
        )
        headers["Content-Type"] = CONTENT_TYPE

        url = self.endpoint + path
        self._log(
            "checkout_request_sent",
            method=method,
            url=url,
            nonce=headers["checkout-nonce"],
        )
        response = await self.transport.request(method, url, headers, body)

        if not response.is_success:
            self._log("checkout_request_failed", method=method, url=url, status_code=response.status_code)
            raise GatewayHTTPError(response.status_code, provider=self.provider, body=response.body)

        if not self.validate_response(response.headers, response.body):
            self._log("checkout_signature_mismatch", method=method, url=url, status_code=response.status_code)
            raise SignatureVerificationFailed(details={"provider": self.provider, "url": url})

        self._log("checkout_response_verified", method=method, url=url, status_code=response.status_code)
        return json.loads(response.body)

    async def create_payment(self, options: CheckoutPaymentOptions) -> CheckoutPayment:  # type: ignore[override]
        data = await self.send_request("POST", "/payments", body=options.to_wire())
        return CheckoutPayment.model_validate(data)

    def parse_callback(self, params: Mapping[str, str], body: Optional[str] = None) -> CallbackEvent:  # type: ignore[override]
        """Verify redirect/callback query parameters and map them to an event."""
        if not self.validate_response(params, body):
            self._log("checkout_callback_rejected", transaction_id=params.get("checkout-transaction-id"))
            raise SignatureVerificationFailed(
                "Callback signature verification failed",
                details={"provider": self.provider},
            )

        provider_status = params.get("checkout-status", "")
        amount = params.get("checkout-amount")
        if amount and not (amount.isascii() and amount.isdigit()):
            raise InvalidCallbackPayload("checkout-amount", amount, provider=self.provider)
        return CallbackEvent(
            transaction_id=params.get("checkout-transaction-id"),
            stamp=params.get("checkout-stamp"),
            reference=params.get("checkout-reference"),
            amount=int(amount) if amount else None,
            status=self._map_status(provider_status),
            provider_status=provider_status,
            payment_method=params.get("checkout-provider"),
            provider=self.provider,
            raw_params={k: v for k, v in params.items() if k != SIGNATURE_FIELD},
        )

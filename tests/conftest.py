"""Pytest bootstrap configuration.

Provides the public Checkout test account and a transport double that
records outgoing requests and answers with signed responses.
"""
import os

# Public Checkout test credentials
os.environ.setdefault("CHECKOUT__ACCOUNT", "375917")
os.environ.setdefault("CHECKOUT__SECRET", "SAIPPUAKAUPPIAS")

import pytest

from checkout_gateway.application.ports.transport import TransportResponse
from checkout_gateway.domain.signing import sign


ACCOUNT = "375917"
SECRET = "SAIPPUAKAUPPIAS"


class FakeTransport:
    def __init__(self, responder):
        self.responder = responder
        self.calls = []
        self.closed = False

    async def request(self, method, url, headers, body=None):
        self.calls.append({"method": method, "url": url, "headers": dict(headers), "body": body})
        return self.responder(method, url, dict(headers), body)

    async def aclose(self):
        self.closed = True


def make_signed_response(body, *, secret=SECRET, algorithm="sha256", status_code=200, extra=None):
    headers = {
        "checkout-account": ACCOUNT,
        "checkout-algorithm": algorithm,
        "checkout-request-id": "f5d2a34b-0e57-4cb0-9d05-d1e1d0c3f5c4",
        "content-type": "application/json; charset=utf-8",
    }
    headers.update(extra or {})
    headers["signature"] = sign(secret, algorithm, headers, body)
    return TransportResponse(status_code=status_code, headers=headers, body=body)


@pytest.fixture
def secret():
    return SECRET


@pytest.fixture
def account():
    return ACCOUNT


@pytest.fixture
def signed_response():
    return make_signed_response


@pytest.fixture
def fake_transport():
    return FakeTransport

import pytest

from checkout_gateway.domain.common.exceptions import UnsupportedAlgorithm
from checkout_gateway.domain.signing import sign, verify
from checkout_gateway.domain.signing import signer as signer_module
from checkout_gateway.domain.signing import verifier as verifier_module


SECRET = "SAIPPUAKAUPPIAS"
BODY = '{"transactionId":"5770642a-9a02-4ca2-8eaa-cc6260a78eb6","href":"https://pay.checkout.fi/pay/5770642a"}'


def _signed(fields, body=BODY, algorithm="sha256", secret=SECRET):
    fields = {**fields, "checkout-algorithm": algorithm}
    return {**fields, "signature": sign(secret, algorithm, fields, body)}


@pytest.fixture
def fields():
    return {
        "checkout-account": "375917",
        "checkout-request-id": "f5d2a34b-0e57-4cb0-9d05-d1e1d0c3f5c4",
        "checkout-transaction-id": "5770642a-9a02-4ca2-8eaa-cc6260a78eb6",
        "content-type": "application/json; charset=utf-8",
    }


@pytest.mark.parametrize("algorithm", ["sha256", "sha512"])
def test_round_trip(fields, algorithm):
    assert verify(SECRET, _signed(fields, algorithm=algorithm), BODY) is True


def test_round_trip_without_body(fields):
    signed = _signed(fields, body=None)
    assert verify(SECRET, signed) is True
    assert verify(SECRET, signed, "") is True


def test_modified_body_fails(fields):
    signed = _signed(fields)
    tampered = BODY.replace("5770642a", "5770642b", 1)
    assert verify(SECRET, signed, tampered) is False


def test_single_character_flip_anywhere_in_body_fails(fields):
    signed = _signed(fields)
    for i in (0, len(BODY) // 2, len(BODY) - 1):
        flipped = BODY[:i] + chr(ord(BODY[i]) ^ 1) + BODY[i + 1:]
        assert verify(SECRET, signed, flipped) is False


def test_changed_namespaced_field_fails(fields):
    signed = _signed(fields)
    signed["checkout-transaction-id"] = "other"
    assert verify(SECRET, signed, BODY) is False


def test_added_namespaced_field_fails(fields):
    signed = _signed(fields)
    signed["checkout-status"] = "ok"
    assert verify(SECRET, signed, BODY) is False


def test_removed_namespaced_field_fails(fields):
    signed = _signed(fields)
    del signed["checkout-request-id"]
    assert verify(SECRET, signed, BODY) is False


def test_different_secret_fails(fields):
    assert verify("another-secret", _signed(fields), BODY) is False


def test_non_namespaced_field_change_still_verifies(fields):
    signed = _signed(fields)
    signed["content-type"] = "text/plain"
    signed["x-extra"] = "1"
    assert verify(SECRET, signed, BODY) is True


def test_missing_signature_fails(fields):
    signed = _signed(fields)
    del signed["signature"]
    assert verify(SECRET, signed, BODY) is False


def test_wrong_signature_with_non_ascii_fails(fields):
    signed = _signed(fields)
    signed["signature"] = "ä" * 64
    assert verify(SECRET, signed, BODY) is False


def test_input_mapping_is_not_mutated(fields):
    signed = _signed(fields)
    snapshot = dict(signed)
    verify(SECRET, signed, BODY)
    assert signed == snapshot


@pytest.mark.parametrize("algorithm", ["md5", "sha1", "SHA512", "none"])
def test_unsupported_claimed_algorithm_raises(fields, algorithm):
    signed = _signed(fields)
    signed["checkout-algorithm"] = algorithm
    with pytest.raises(UnsupportedAlgorithm):
        verify(SECRET, signed, BODY)


def test_missing_algorithm_raises(fields):
    signed = _signed(fields)
    del signed["checkout-algorithm"]
    with pytest.raises(UnsupportedAlgorithm):
        verify(SECRET, signed, BODY)


def test_algorithm_field_is_signed(fields):
    # sha512 signature relabelled as sha256 must not verify
    signed = _signed(fields, algorithm="sha512")
    signed["checkout-algorithm"] = "sha256"
    assert verify(SECRET, signed, BODY) is False


@pytest.mark.parametrize("claimed", ["md5", None])
def test_unsupported_or_missing_algorithm_performs_no_hashing(monkeypatch, fields, claimed):
    def _boom(*args, **kwargs):
        raise AssertionError("hashing must not happen")

    signed = _signed(fields)
    if claimed is None:
        del signed["checkout-algorithm"]
    else:
        signed["checkout-algorithm"] = claimed

    monkeypatch.setattr(signer_module.hmac, "new", _boom)
    monkeypatch.setattr(verifier_module.hmac, "compare_digest", _boom)
    with pytest.raises(UnsupportedAlgorithm):
        verify(SECRET, signed, BODY)

"""Unit tests for signed flash tokens."""

import json

from petclinic.core.security import sign_value, unsign_value


def test_sign_and_unsign():
    token = sign_value(json.dumps({"message": "New Owner Created"}), secret="s3cret")
    assert json.loads(unsign_value(token, secret="s3cret")) == {"message": "New Owner Created"}


def test_token_is_cookie_safe():
    token = sign_value("Owner ID mismatch. Please try again.", secret="s3cret")
    assert not set(token) & set(' ",;=\\')


def test_wrong_secret_is_rejected():
    token = sign_value("hello", secret="one")
    assert unsign_value(token, secret="two") is None


def test_tampered_payload_is_rejected():
    scheme, payload, digest = sign_value("hello", secret="s3cret").split("$")
    assert unsign_value(f"{scheme}${payload}A${digest}", secret="s3cret") is None


def test_malformed_tokens_are_rejected():
    assert unsign_value("", secret="s3cret") is None
    assert unsign_value("plain-text", secret="s3cret") is None
    assert unsign_value("hmac_sha256$only-one-part", secret="s3cret") is None

"""Module: security."""

import base64
import hashlib
import hmac

from petclinic.core.config import settings

# Signature scheme marker prepended to every signed token.
SIGNATURE_SCHEME = "hmac_sha256"


def _digest(payload: bytes, secret: str) -> str:
    return hmac.new(secret.encode("utf-8"), payload, hashlib.sha256).hexdigest()


def sign_value(value: str, secret: str | None = None) -> str:
    """
    Sign a string so it can round-trip through a client-held cookie.

    Token format:
      hmac_sha256$<urlsafe_b64_payload>$<hex_digest>
    """
    payload = value.encode("utf-8")
    # Padding is dropped so the token needs no quoting inside a cookie.
    encoded = base64.urlsafe_b64encode(payload).rstrip(b"=").decode("ascii")
    return f"{SIGNATURE_SCHEME}${encoded}${_digest(payload, secret or settings.secret_key)}"


def unsign_value(token: str, secret: str | None = None) -> str | None:
    """
    Return the original value of a signed token, or None when the token is
    malformed or its signature does not match.
    """
    if not token or not token.startswith(f"{SIGNATURE_SCHEME}$"):
        return None

    try:
        _, encoded, signature = token.split("$", 2)
        payload = base64.urlsafe_b64decode(encoded + "=" * (-len(encoded) % 4))
    except ValueError:
        return None

    expected = _digest(payload, secret or settings.secret_key)
    if not hmac.compare_digest(expected, signature):
        return None
    return payload.decode("utf-8")

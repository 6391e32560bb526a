"""
HMAC-SHA256 request signing for UploadThing ingest URLs

The signature covers the exact URL string, so the query must not be
reordered or re-encoded between signing and sending.
"""

import hashlib
import hmac
import logging

from uploadthing.core.exceptions import SigningError

logger = logging.getLogger(__name__)

SIGNATURE_SCHEME = "hmac-sha256"
SIGNATURE_PARAM = "signature"


def sign(payload: str, secret: str) -> str:
    """
    Sign payload with secret.

    Returns:
        Lowercase hex HMAC-SHA256 digest (64 characters)

    Raises:
        SigningError: payload or secret is not UTF-8 encodable text
    """
    try:
        message = payload.encode("utf-8")
        key = secret.encode("utf-8")
    except (AttributeError, UnicodeEncodeError) as e:
        raise SigningError(f"Failed to generate signature: {e}") from e
    return hmac.new(key, message, hashlib.sha256).hexdigest()


def verify(signature: str, payload: str, secret: str) -> bool:
    """Recompute and compare case-insensitively; never raises"""
    try:
        expected = sign(payload, secret).encode("ascii")
        supplied = signature.lower().encode("utf-8", "replace")
    except (SigningError, AttributeError, TypeError) as e:
        logger.debug(f"Signature verification failed: {e}")
        return False
    return hmac.compare_digest(expected, supplied)


def sign_url(url: str, secret: str) -> str:
    """Append signature=hmac-sha256=<hex> to an already assembled URL"""
    signature = sign(url, secret)
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{SIGNATURE_PARAM}={SIGNATURE_SCHEME}={signature}"


def verify_url(signed_url: str, secret: str) -> bool:
    """Check a URL produced by sign_url; the signature must be the last parameter"""
    if not isinstance(signed_url, str):
        return False
    for separator in ("&", "?"):
        marker = f"{separator}{SIGNATURE_PARAM}="
        index = signed_url.rfind(marker)
        if index == -1:
            continue
        unsigned = signed_url[:index]
        value = signed_url[index + len(marker):]
        scheme, _, signature = value.partition("=")
        if scheme != SIGNATURE_SCHEME or not signature:
            return False
        return verify(signature, unsigned, secret)
    return False

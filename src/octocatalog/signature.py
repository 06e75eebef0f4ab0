"""Slack request signature verification.

Slack signs every request with ``v0=<hex HMAC-SHA256>`` over the base
string ``v0:<timestamp>:<raw body>`` using the app's signing secret.  The
timestamp bounds the replay window.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import re
import time

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SIGNATURE_VERSION = "v0"

# Maximum clock skew in either direction (seconds)
DEFAULT_TOLERANCE: int = 300

# Optional sign and ASCII digits only
_TIMESTAMP_RE = re.compile(r"[+-]?[0-9]+")


def compute_signature(secret: str, timestamp: str, body: bytes) -> str:
    """Compute the Slack signature for *body* sent at *timestamp*.

    Returns the signature in ``v0=<hex>`` format for the
    ``X-Slack-Signature`` header.
    """
    base = b":".join(
        (SIGNATURE_VERSION.encode("ascii"), timestamp.encode("utf-8"), body)
    )
    mac = hmac.new(secret.encode("utf-8"), base, hashlib.sha256)
    return f"{SIGNATURE_VERSION}={mac.hexdigest()}"


def verify_signature(
    secret: str,
    timestamp: str | None,
    body: bytes,
    signature: str | None,
    *,
    tolerance: int = DEFAULT_TOLERANCE,
    now: float | None = None,
) -> bool:
    """Return ``True`` if *signature* is a fresh, valid signature of *body*.

    Fails when the timestamp is not an integer, when it is more than
    *tolerance* seconds away from *now* (past or future), or when the
    HMAC does not match.  The comparison is constant-time.
    """
    if not timestamp or not signature:
        logger.debug("Missing signature or timestamp header")
        return False

    if not _TIMESTAMP_RE.fullmatch(timestamp):
        logger.debug("Unparseable request timestamp: %r", timestamp)
        return False
    request_ts = int(timestamp)

    current_ts = int(time.time() if now is None else now)
    if abs(current_ts - request_ts) > tolerance:
        logger.warning(
            "Request timestamp outside replay window: %d vs now %d",
            request_ts,
            current_ts,
        )
        return False

    expected = compute_signature(secret, timestamp, body)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))

"""octocatalog exception hierarchy.

All exceptions raised by the responder inherit from :class:`OctoCatalogError`.
Per-request failures derive from :class:`RequestError` and carry the HTTP
status and short error code the app renders for them.
"""

from __future__ import annotations


class OctoCatalogError(Exception):
    """Base exception for all octocatalog errors."""


class ConfigError(OctoCatalogError):
    """Raised at startup when settings or the catalog cannot be loaded."""


class RequestError(OctoCatalogError):
    """Base class for failures while handling a single request.

    ``detail`` is the generic, caller-safe message.  The exception's own
    message is for server-side logs only and is never sent back.
    """

    status_code: int = 400
    error: str = "bad_request"
    detail: str = "Bad request"


class BodyReadError(RequestError):
    """Raised when the request body cannot be read from the client."""


class SignatureInvalidError(RequestError):
    """Raised on a bad timestamp, a stale timestamp, or an HMAC mismatch.

    All three collapse to the same response so callers cannot tell which
    check failed.
    """

    status_code = 401
    error = "unauthorized"
    detail = "Unauthorized"


class DecodeError(RequestError):
    """Raised when the request body cannot be decoded into a request."""


class MissingPayloadError(DecodeError):
    """Raised when a form-encoded body has no ``payload`` field."""


class InvalidJSONError(DecodeError):
    """Raised when the JSON document does not match the request shape."""


class MalformedBodyError(DecodeError):
    """Raised when a form-encoded body is not UTF-8 or has a bad percent-escape."""


class UnsupportedMediaTypeError(DecodeError):
    """Raised for a content type that is neither form-encoded nor JSON."""

    status_code = 415
    error = "unsupported_media_type"
    detail = "Unsupported media type"


class SerializationError(RequestError):
    """Raised when the resolved options cannot be rendered as JSON."""

    status_code = 500
    error = "internal_error"
    detail = "Internal server error"

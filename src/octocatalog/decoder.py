"""Decode an options-load request from either of Slack's body formats.

Slack posts interactive payloads as ``application/x-www-form-urlencoded``
with the JSON document in a ``payload`` field.  Older integrations post the
JSON document directly.
"""

from __future__ import annotations

import logging
import re
import urllib.parse

from pydantic import ValidationError

from octocatalog.errors import (
    InvalidJSONError,
    MalformedBodyError,
    MissingPayloadError,
    UnsupportedMediaTypeError,
)
from octocatalog.models import IncomingRequest

logger = logging.getLogger(__name__)

FORM_MEDIA_TYPE = "application/x-www-form-urlencoded"
JSON_MEDIA_TYPE = "application/json"

# A "%" not followed by two hex digits
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def media_type(content_type: str | None) -> str:
    """Return the lower-cased base type of *content_type*, without parameters."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _is_json(base_type: str) -> bool:
    # An absent content type is read as JSON for older callers
    return (
        base_type in ("", JSON_MEDIA_TYPE)
        or (base_type.startswith("application/") and base_type.endswith("+json"))
    )


def _parse_request(document: str | bytes) -> IncomingRequest:
    try:
        return IncomingRequest.model_validate_json(document)
    except ValidationError as exc:
        raise InvalidJSONError(
            f"request JSON does not match the expected shape: {exc.error_count()} error(s)"
        ) from exc


def _decode_form(body: bytes) -> IncomingRequest:
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedBodyError("form body is not valid UTF-8") from exc
    if _BAD_ESCAPE_RE.search(text):
        raise MalformedBodyError("form body has an invalid percent-escape")

    fields = urllib.parse.parse_qs(text)
    payload = fields.get("payload")
    if not payload:
        raise MissingPayloadError("form body has no payload field")
    return _parse_request(payload[0])


def decode_request(content_type: str | None, body: bytes) -> IncomingRequest:
    """Decode *body* into an :class:`IncomingRequest`.

    Dispatches on the base media type of *content_type*:

    - form-encoded: the ``payload`` field holds the JSON document
    - JSON (``application/json``, ``application/*+json`` or no content
      type): the body is the JSON document

    Raises:
        MissingPayloadError: form body without a non-empty ``payload``.
        InvalidJSONError: malformed JSON or wrong field types.
        MalformedBodyError: form body that is not UTF-8 or has a bad escape.
        UnsupportedMediaTypeError: any other media type.
    """
    base_type = media_type(content_type)
    if base_type == FORM_MEDIA_TYPE:
        return _decode_form(body)
    if _is_json(base_type):
        return _parse_request(body)
    raise UnsupportedMediaTypeError(f"unsupported content type: {base_type}")

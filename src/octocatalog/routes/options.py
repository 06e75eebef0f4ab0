"""Slack options-load endpoint.

- ``POST /`` — verify the Slack signature, decode the payload, and return
  the catalog options matching the typed query.
- ``POST /{path}`` — same handler on any other path, so the Slack
  Options Load URL can point anywhere on the host.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from pydantic_core import PydanticSerializationError
from starlette.requests import ClientDisconnect
from starlette.responses import Response

from octocatalog.errors import BodyReadError, SerializationError
from octocatalog.models import OptionsResponse
from octocatalog.pipeline import RequestPipeline
from octocatalog.signature import SIGNATURE_HEADER, TIMESTAMP_HEADER

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/{path:path}", response_model=OptionsResponse, include_in_schema=False)
@router.post("/", response_model=OptionsResponse)
async def options_load(request: Request) -> Response:
    """Return ``{"options": [...]}`` for a signed options-load request."""
    try:
        body = await request.body()
    except ClientDisconnect as exc:
        raise BodyReadError("client disconnected while reading body") from exc

    pipeline: RequestPipeline = request.app.state.pipeline
    result = pipeline.resolve(
        request.headers.get("content-type"),
        request.headers.get(TIMESTAMP_HEADER),
        request.headers.get(SIGNATURE_HEADER),
        body,
    )

    try:
        content = result.model_dump_json()
    except PydanticSerializationError as exc:
        raise SerializationError(f"encoding response: {exc}") from exc
    return Response(content=content, media_type="application/json")

"""Options-load request pipeline: verify, decode, look up, filter."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from octocatalog.catalog import Catalog
from octocatalog.decoder import decode_request
from octocatalog.errors import SignatureInvalidError
from octocatalog.filtering import filter_options
from octocatalog.models import OptionsResponse, ResolvedOption
from octocatalog.signature import DEFAULT_TOLERANCE, verify_signature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestPipeline:
    """Resolve one signed options-load request against a catalog.

    Holds no per-request state, so one instance serves all requests.
    """

    signing_secret: str
    catalog: Catalog
    tolerance: int = DEFAULT_TOLERANCE

    def authenticate(
        self, timestamp: str | None, signature: str | None, body: bytes
    ) -> None:
        """Raise :class:`SignatureInvalidError` unless the request is authentic."""
        if not verify_signature(
            self.signing_secret,
            timestamp,
            body,
            signature,
            tolerance=self.tolerance,
        ):
            raise SignatureInvalidError("invalid Slack signature")

    def resolve(
        self,
        content_type: str | None,
        timestamp: str | None,
        signature: str | None,
        body: bytes,
    ) -> OptionsResponse:
        """Run the pipeline on an already-buffered request body.

        Raises a :class:`~octocatalog.errors.RequestError` subclass for
        an invalid signature or an undecodable body.  Unknown action ids and
        queries without matches resolve to an empty option list.
        """
        self.authenticate(timestamp, signature, body)
        request = decode_request(content_type, body)
        logger.info("Received request for action_id: %s", request.action_id)

        options = filter_options(self.catalog.lookup(request.action_id), request.value)
        logger.debug(
            "Resolved %d option(s) for action_id=%s query=%r",
            len(options),
            request.action_id,
            request.value,
        )
        return OptionsResponse(
            options=[ResolvedOption.from_option(option) for option in options]
        )

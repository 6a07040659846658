"""Entity tag generation and validation.

The entity tag of a stylesheet is an MD5 digest over the modification
times of the fonts it embeds, in resolution order. Requesting the same
fonts in a different order yields a different tag, matching the
different stylesheet.

When the response is gzip compressed for the client, "+gzip" is appended
so compressed and uncompressed variants never share a tag.
"""

import hashlib
from collections.abc import Sequence
from dataclasses import dataclass

from facesmith.domain.font import FontRecord
from facesmith.exceptions import FingerprintUnavailable
from facesmith.utils.logging import RequestLogger

GZIP_SUFFIX = "+gzip"


def gzip_negotiated(gzip_enabled: bool, accept_encoding: str) -> bool:
    """Check whether the response will be gzip compressed for this client."""
    return gzip_enabled and "gzip" in accept_encoding


def fingerprint(records: Sequence[FontRecord | None], gzip: bool = False) -> str:
    """Compute the entity tag for resolved fonts.

    Args:
        records: Resolved fonts in resolution order; None marks a lookup miss
        gzip: Whether the response is gzip compressed for the client

    Returns:
        Hex digest, with "+gzip" appended when gzip is True

    Raises:
        FingerprintUnavailable: If a font is missing or its modification
            time cannot be read
    """
    digest = hashlib.md5(usedforsecurity=False)
    for record in records:
        if record is None:
            raise FingerprintUnavailable("font not found")
        try:
            modtime = record.mod_time()
        except OSError as e:
            raise FingerprintUnavailable(f"{record.path}: {e.strerror or e}") from e
        digest.update(str(modtime).encode("ascii"))

    etag = digest.hexdigest()
    if gzip:
        etag += GZIP_SUFFIX
    return etag


@dataclass(frozen=True)
class Validation:
    """Outcome of entity tag validation.

    Attributes:
        matched: True if the client's copy is current (respond 304)
        etag: Tag to send back, or None to send no ETag header
        fresh: False if the tag could not be computed and the client's
            token was echoed instead
    """

    matched: bool
    etag: str | None
    fresh: bool = True


class CacheValidator:
    """Validates conditional requests against freshly computed entity tags."""

    def __init__(self, request_logger: RequestLogger | None = None) -> None:
        self._request_logger = request_logger or RequestLogger()

    def validate(
        self,
        records: Sequence[FontRecord | None],
        gzip: bool,
        client_token: str | None,
    ) -> Validation:
        """Compare the client's entity tag to the current one.

        A tag that cannot be computed never fails the request: validation
        reports no match and echoes the client's token so the client keeps
        a tag it can send again.

        Args:
            records: Provisionally resolved fonts in resolution order
            gzip: Whether the response is gzip compressed for the client
            client_token: Value of the If-None-Match header, if any

        Returns:
            Validation outcome
        """
        try:
            etag = fingerprint(records, gzip=gzip)
        except FingerprintUnavailable as e:
            self._request_logger.log_fingerprint_unavailable(e.reason, client_token)
            return Validation(matched=False, etag=client_token or None, fresh=False)

        return Validation(matched=client_token == etag, etag=etag)

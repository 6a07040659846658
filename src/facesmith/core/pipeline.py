"""Stylesheet request pipeline.

This module turns one stylesheet request into exactly one response,
independently of the HTTP framework serving it.

Steps, each a potential early exit:
1. Reject methods other than GET (501)
2. Reject referrers missing from the whitelist (403)
3. Require a family parameter (400)
4. Resolve the format, defaulting to WOFF (400 if unknown)
5. Parse the family specification (400 if it yields nothing)
6. Validate entity tags, answering 304 when the client's copy is current
7. Resolve every lookup in the index (400 on any miss)
8. Render the stylesheet (500 on failure)
9. Respond 200 with the stylesheet
"""

import time
from dataclasses import dataclass, field

from facesmith.config.settings import ServerConfig
from facesmith.core.etag import CacheValidator, gzip_negotiated
from facesmith.core.index import FontIndex
from facesmith.core.query import parse_queries
from facesmith.core.render import StylesheetRenderer, load_faces
from facesmith.domain.font import FontFormat, FontRecord
from facesmith.domain.lookup import LookupKey
from facesmith.exceptions import (
    EmptyQuery,
    FontNotFound,
    MethodNotSupported,
    MissingFamily,
    RefererRejected,
    RequestError,
    UnknownFormat,
)
from facesmith.io.whitelist import Whitelist
from facesmith.utils.logging import RequestLogger

CSS_CONTENT_TYPE = "text/css; charset=utf-8"
ERROR_CONTENT_TYPE = "text/plain; charset=utf-8"
DEFAULT_FORMAT = FontFormat.WOFF


@dataclass(frozen=True)
class HandlerContext:
    """Shared read-only state handed to every request.

    Built once at startup; nothing here is mutated while serving.

    Attributes:
        server: Response header and caching settings
        index: Font index
        renderer: Stylesheet renderer
        whitelist: Allowed referrer prefixes
    """

    server: ServerConfig
    index: FontIndex
    renderer: StylesheetRenderer
    whitelist: Whitelist


@dataclass(frozen=True)
class CssRequest:
    """The parts of an HTTP request the pipeline reads.

    Attributes:
        method: HTTP method
        family: Value of the family parameter (None if absent)
        format: Value of the format parameter (None if absent)
        referer: Referer header ("" if absent)
        accept_encoding: Accept-Encoding header ("" if absent)
        if_none_match: If-None-Match header (None if absent)
    """

    method: str = "GET"
    family: str | None = None
    format: str | None = None
    referer: str = ""
    accept_encoding: str = ""
    if_none_match: str | None = None


@dataclass
class CssResponse:
    """Status, headers and body produced for a request."""

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


class CssHandler:
    """Serves @font-face stylesheets.

    Example:
        handler = CssHandler(context)
        response = handler.handle(CssRequest(family="Amaranth", referer="http://example.com/"))
    """

    def __init__(self, context: HandlerContext, request_logger: RequestLogger | None = None) -> None:
        self.context = context
        self.request_logger = request_logger or RequestLogger()
        self.validator = CacheValidator(self.request_logger)

    def handle(self, request: CssRequest) -> CssResponse:
        """Run the pipeline for one request.

        Args:
            request: Request to serve

        Returns:
            Response with exactly one status code
        """
        headers: dict[str, str] = {}
        try:
            return self._serve(request, headers)
        except RequestError as e:
            self.request_logger.log_rejected(
                e.status_code,
                e,
                family=request.family,
                referer=request.referer,
            )
            headers["Content-Type"] = ERROR_CONTENT_TYPE
            return CssResponse(status_code=e.status_code, headers=headers)

    def _cache_control(self) -> str:
        return f"max-age={self.context.server.max_age}"

    def _serve(self, request: CssRequest, headers: dict[str, str]) -> CssResponse:
        start_time = time.perf_counter()
        ctx = self.context

        if request.method != "GET":
            raise MethodNotSupported(request.method)

        if not ctx.whitelist.contains(request.referer):
            raise RefererRejected(request.referer)

        family = request.family
        if not family:
            raise MissingFamily()

        font_format = DEFAULT_FORMAT
        if request.format:
            parsed_format = FontFormat.from_string(request.format)
            if parsed_format is None:
                raise UnknownFormat(request.format)
            font_format = parsed_format

        keys = parse_queries(family, font_format)
        if not keys:
            raise EmptyQuery(family)

        if ctx.server.etag:
            provisional = [ctx.index.lookup(key) for key in keys]
            gzip = gzip_negotiated(ctx.server.gzip, request.accept_encoding)
            validation = self.validator.validate(provisional, gzip, request.if_none_match)
            if validation.etag is not None:
                headers["ETag"] = validation.etag
            if validation.matched:
                headers["Cache-Control"] = self._cache_control()
                self.request_logger.log_not_modified(family, validation.etag or "")
                return CssResponse(status_code=304, headers=headers)

        records = self._resolve(keys)
        faces = load_faces(records)
        body = ctx.renderer.render(font_format, faces)

        headers["Cache-Control"] = self._cache_control()
        headers["Content-Type"] = CSS_CONTENT_TYPE
        self.request_logger.log_served(
            family,
            fonts=len(faces),
            size=len(body),
            duration_ms=(time.perf_counter() - start_time) * 1000,
        )
        return CssResponse(status_code=200, headers=headers, body=body)

    def _resolve(self, keys: list[LookupKey]) -> list[FontRecord]:
        """Look up every key; a single miss fails the whole request."""
        records = []
        for key in keys:
            record = self.context.index.lookup(key)
            if record is None:
                raise FontNotFound(key.family, key.column_key)
            records.append(record)
        return records

"""Starlette application serving stylesheets under /css/.

The endpoint is synchronous: Starlette runs it in its threadpool, so a
request blocked on font file I/O never holds up other requests.
"""

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.gzip import GZipMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Route

from facesmith.core.pipeline import CssHandler, CssRequest, HandlerContext
from facesmith.http.middleware import ResponseHeadersMiddleware
from facesmith.utils.logging import RequestLogger

CSS_PATH = "/css/{rest:path}"

# Every method reaches the handler, which answers 501 for anything but GET
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def first_param(request: Request, name: str) -> str | None:
    """Return the first value of a query parameter, or None if absent."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


def to_css_request(request: Request) -> CssRequest:
    """Extract the pipeline's view of an HTTP request."""
    return CssRequest(
        method=request.method,
        family=first_param(request, "family"),
        format=first_param(request, "format"),
        referer=request.headers.get("referer", ""),
        accept_encoding=request.headers.get("accept-encoding", ""),
        if_none_match=request.headers.get("if-none-match"),
    )


def create_app(context: HandlerContext, request_logger: RequestLogger | None = None) -> Starlette:
    """Build the ASGI application.

    Args:
        context: Shared read-only handler state
        request_logger: Request outcome logger (default logger if None)

    Returns:
        Starlette application
    """
    handler = CssHandler(context, request_logger)

    def css_endpoint(request: Request) -> Response:
        result = handler.handle(to_css_request(request))
        return Response(
            content=result.body,
            status_code=result.status_code,
            headers=result.headers,
        )

    middleware = [Middleware(ResponseHeadersMiddleware, server=context.server)]
    if context.server.gzip:
        # Empty 304 and error bodies stay uncompressed
        middleware.append(Middleware(GZipMiddleware, minimum_size=1))

    app = Starlette(
        routes=[Route(CSS_PATH, css_endpoint, methods=ALL_METHODS)],
        middleware=middleware,
    )
    app.state.handler = handler
    return app

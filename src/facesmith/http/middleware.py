"""Response header middleware."""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from facesmith.config.settings import ServerConfig


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Set the headers shared by every response, errors included.

    - Access-Control-Allow-Origin: * when cross-origin sharing is enabled
    - Server when a server name is configured
    - Vary: Accept-Encoding when gzip compression is enabled
    """

    def __init__(self, app: ASGIApp, server: ServerConfig) -> None:
        super().__init__(app)
        self.server = server

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        if self.server.cors:
            response.headers["Access-Control-Allow-Origin"] = "*"
        if self.server.server_name:
            response.headers["Server"] = self.server.server_name
        if self.server.gzip:
            # GZipMiddleware already adds it to the responses it handles
            vary = response.headers.get("Vary", "")
            if "accept-encoding" not in vary.lower():
                response.headers["Vary"] = f"{vary}, Accept-Encoding" if vary else "Accept-Encoding"
        return response

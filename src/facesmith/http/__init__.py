"""HTTP layer for facesmith.

This module adapts the framework-independent request pipeline to a
Starlette ASGI application.

Key responsibilities:
- Route /css/ requests of any method to the pipeline
- Set common response headers (CORS, Server, Vary)
- Gzip compress responses for clients that accept it

Key functions:
- create_app: Build the ASGI application from a handler context
"""

from facesmith.http.app import CSS_PATH, create_app, to_css_request
from facesmith.http.middleware import ResponseHeadersMiddleware

__all__ = [
    "CSS_PATH",
    "ResponseHeadersMiddleware",
    "create_app",
    "to_css_request",
]

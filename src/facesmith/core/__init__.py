"""Core request processing for facesmith.

This module contains the core algorithms for:

- Family specification parsing (query grammar to index lookups)
- Font indexing (two-level family / column key mapping)
- Entity tag fingerprinting and conditional request validation
- Stylesheet rendering from per-format templates
- Request orchestration from raw parameters to response

Shared state (index, whitelist, templates) is built once and read-only
afterwards, so every service here is safe to call from concurrent requests.

Key functions:
- parse_queries: Parse a family specification into lookup keys
- fingerprint: Compute the entity tag of resolved fonts
- load_faces: Read resolved fonts into template data

Key classes:
- FontIndex: Read-only (family, column key) -> font mapping
- CacheValidator: Conditional request validation
- StylesheetRenderer: Jinja2 stylesheet templates
- CssHandler: Request pipeline
"""

from facesmith.core.etag import (
    GZIP_SUFFIX,
    CacheValidator,
    Validation,
    fingerprint,
    gzip_negotiated,
)
from facesmith.core.index import FontIndex
from facesmith.core.pipeline import (
    CSS_CONTENT_TYPE,
    ERROR_CONTENT_TYPE,
    CssHandler,
    CssRequest,
    CssResponse,
    HandlerContext,
)
from facesmith.core.query import parse_queries
from facesmith.core.render import StylesheetRenderer, load_faces, template_name

__all__ = [
    "CSS_CONTENT_TYPE",
    "ERROR_CONTENT_TYPE",
    "GZIP_SUFFIX",
    # Validation
    "CacheValidator",
    # Pipeline
    "CssHandler",
    "CssRequest",
    "CssResponse",
    # Index
    "FontIndex",
    "HandlerContext",
    # Rendering
    "StylesheetRenderer",
    "Validation",
    "fingerprint",
    "gzip_negotiated",
    "load_faces",
    # Parsing
    "parse_queries",
    "template_name",
]

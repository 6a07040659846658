"""Facesmith - Serve @font-face stylesheets with embedded fonts.

Facesmith is a small HTTP service that assembles @font-face CSS stylesheets
embedding base64-encoded font files. Fonts are selected with a compact query
grammar over family name, weight and style.

Example:
    $ facesmith --library fonts/ --whitelist whitelist.json --etag --gzip

Then request:
    GET /css/?family=Amaranth:400,700italic|Open+Sans&format=woff
"""

__version__ = "0.1.0"

PROG_NAME = "facesmith"

__all__ = ["PROG_NAME", "__version__"]

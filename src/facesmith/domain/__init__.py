"""Domain models for facesmith.

This module contains the core domain models representing font files,
index lookups and stylesheet rules. All models are immutable (frozen
dataclasses) so they can be shared freely between concurrent requests.

Key classes:
- FontFormat: Supported font container formats
- FontRecord: A single font file in the library
- FontFace: Template data for one @font-face rule
- LookupKey: A (family, column key) index lookup
"""

from facesmith.domain.font import FontFace, FontFormat, FontRecord, make_column_key
from facesmith.domain.lookup import LookupKey

__all__: list[str] = [
    # Enums
    "FontFormat",
    # Core types
    "FontFace",
    "FontRecord",
    "LookupKey",
    "make_column_key",
]

"""Startup resource loading for facesmith.

This module reads the on-disk resources the server is built from.

Key responsibilities:
- Scan the font library and parse per-family metadata files
- Turn metadata into font records
- Read the referrer whitelist

Key classes:
- FontLibrary: Immutable collection of font records
- FamilyMetadata: Parsed metadata.json contents
- Whitelist: Allowed referrer prefixes
- WhitelistFile: Parsed whitelist file contents
"""

from facesmith.io.library import (
    METADATA_FILENAME,
    FamilyMetadata,
    FontLibrary,
    SubfamilyMetadata,
)
from facesmith.io.whitelist import Whitelist, WhitelistFile

__all__ = [
    "METADATA_FILENAME",
    "FamilyMetadata",
    "FontLibrary",
    "SubfamilyMetadata",
    "Whitelist",
    "WhitelistFile",
]

"""Font file representation.

This module defines the font domain model: the supported container
formats, a single font file record, and the per-rule data handed to the
stylesheet templates.
"""

import base64
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any


class FontFormat(str, Enum):
    """Supported font container formats."""

    EOT = "eot"
    WOFF = "woff"

    @classmethod
    def from_string(cls, value: str) -> "FontFormat | None":
        """Parse a format name, ignoring case.

        Args:
            value: Format name such as "woff" or "EOT"

        Returns:
            Matching format, or None if the name is not supported
        """
        try:
            return cls(value.lower())
        except ValueError:
            return None

    @property
    def mime_type(self) -> str:
        """MIME type used in data URIs for this format."""
        return _MIME_TYPES[self]

    def __str__(self) -> str:
        return self.value


_MIME_TYPES = {
    FontFormat.EOT: "application/vnd.ms-fontobject",
    FontFormat.WOFF: "application/x-font-woff",
}


def make_column_key(font_format: FontFormat, weight: int | str, style: str) -> str:
    """Build the secondary index key: format, weight and style concatenated.

    No delimiter is used; weights are numeric and styles come from a small
    vocabulary, so distinct variants never produce the same key.
    """
    return f"{font_format.value}{weight}{style}"


@dataclass(frozen=True)
class FontRecord:
    """A single font file in the library.

    Attributes:
        family: Family name (e.g., "Amaranth")
        format: Container format of the file
        style: Style name (e.g., "normal", "italic")
        weight: Numeric weight (e.g., 400, 700)
        path: Location of the font file
    """

    family: str
    format: FontFormat
    style: str
    weight: int
    path: Path

    @property
    def column_key(self) -> str:
        """Index key of this record within its family."""
        return make_column_key(self.format, self.weight, self.style)

    @property
    def mime_type(self) -> str:
        return self.format.mime_type

    def contents(self) -> bytes:
        """Read the font file.

        Raises:
            OSError: If the file cannot be read
        """
        return self.path.read_bytes()

    def mod_time(self) -> int:
        """Return the file modification time in nanoseconds.

        Raises:
            OSError: If the file cannot be stat'ed
        """
        return self.path.stat().st_mtime_ns


@dataclass(frozen=True)
class FontFace:
    """Template data for a single @font-face rule.

    Attributes:
        base64_data: Base64-encoded font file contents
        family: Family name
        format: Format string (e.g., "woff")
        mime_type: MIME type of the embedded data
        style: Style name
        weight: Numeric weight
    """

    base64_data: str
    family: str
    format: str
    mime_type: str
    style: str
    weight: int

    @classmethod
    def from_record(cls, record: FontRecord) -> "FontFace":
        """Build face data from a font record, reading its contents.

        Raises:
            OSError: If the font file cannot be read
        """
        data = record.contents()
        return cls(
            base64_data=base64.b64encode(data).decode("ascii"),
            family=record.family,
            format=record.format.value,
            mime_type=record.mime_type,
            style=record.style,
            weight=record.weight,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for template rendering.

        Returns:
            Dictionary representation of the face
        """
        return {
            "base64_data": self.base64_data,
            "family": self.family,
            "format": self.format,
            "mime_type": self.mime_type,
            "style": self.style,
            "weight": self.weight,
        }

"""Font library loader.

This module provides the FontLibrary class for reading family metadata
files from a font library directory and producing font records.

Library layout:
    fonts/
        Amaranth/
            metadata.json
            amaranth-regular.woff
            amaranth-regular.eot
        Open Sans/
            metadata.json
            ...

Each metadata.json describes one family:
    {
        "family": "Amaranth",
        "subfamilies": [
            {"basename": "amaranth-regular", "formats": ["eot", "woff"],
             "style": "normal", "weight": 400}
        ]
    }
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from facesmith.domain.font import FontFormat, FontRecord
from facesmith.exceptions import FontLibraryError, MetadataError

METADATA_FILENAME = "metadata.json"

logger = structlog.get_logger(__name__)


def lower_keys(data: Any) -> Any:
    """Lowercase the keys of a JSON object so field names match case-insensitively."""
    if isinstance(data, dict):
        return {k.lower() if isinstance(k, str) else k: v for k, v in data.items()}
    return data


class SubfamilyMetadata(BaseModel):
    """Metadata of a single subfamily (one style/weight variant)."""

    model_config = ConfigDict(frozen=True)

    basename: str
    formats: list[str]
    style: str
    weight: int

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        return lower_keys(data)


class FamilyMetadata(BaseModel):
    """Metadata of a font family, as stored in metadata.json."""

    model_config = ConfigDict(frozen=True)

    family: str
    subfamilies: list[SubfamilyMetadata] = []

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        return lower_keys(data)

    @classmethod
    def read(cls, path: Path) -> "FamilyMetadata":
        """Read and validate a metadata file.

        Args:
            path: Path to a metadata.json file

        Returns:
            Parsed family metadata

        Raises:
            MetadataError: If the file cannot be read or is invalid
        """
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise MetadataError(str(path), e.strerror or str(e)) from e
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise MetadataError(str(path), str(e)) from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise MetadataError(str(path), f"{e.error_count()} validation errors") from e

    def fonts(self, directory: Path) -> list[FontRecord]:
        """Return the font records described by this metadata.

        Font files are expected next to the metadata file, named
        ``<basename>.<format>``. Unsupported formats are skipped.

        Args:
            directory: Directory containing the family's font files

        Returns:
            Font records in metadata order
        """
        records: list[FontRecord] = []
        for subfamily in self.subfamilies:
            for name in subfamily.formats:
                font_format = FontFormat.from_string(name)
                if font_format is None:
                    logger.warning(
                        "Unsupported font format skipped",
                        family=self.family,
                        basename=subfamily.basename,
                        format=name,
                    )
                    continue
                records.append(
                    FontRecord(
                        family=self.family,
                        format=font_format,
                        style=subfamily.style,
                        weight=subfamily.weight,
                        path=directory / f"{subfamily.basename}.{name}",
                    )
                )
        return records


class FontLibrary:
    """Immutable collection of font records loaded from a library directory.

    Example:
        library = FontLibrary.load(Path("fonts"))
        for record in library:
            print(record.family, record.column_key)
    """

    def __init__(self, records: list[FontRecord], path: Path | None = None) -> None:
        self._records = tuple(records)
        self._path = path

    @classmethod
    def load(cls, directory: Path) -> "FontLibrary":
        """Load every family found in the first-level subdirectories.

        Subdirectories without a metadata file, and families whose metadata
        cannot be parsed, are skipped.

        Args:
            directory: Font library directory

        Returns:
            Loaded font library

        Raises:
            FontLibraryError: If the directory does not exist or cannot be read
        """
        if not directory.is_dir():
            raise FontLibraryError(str(directory), "not a directory")

        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise FontLibraryError(str(directory), e.strerror or str(e)) from e

        records: list[FontRecord] = []
        for entry in entries:
            metadata_path = entry / METADATA_FILENAME
            if not (entry.is_dir() and metadata_path.is_file()):
                logger.debug("No metadata file, entry skipped", entry=str(entry))
                continue
            try:
                metadata = FamilyMetadata.read(metadata_path)
            except MetadataError as e:
                logger.warning("Invalid metadata, family skipped", path=e.path, reason=e.reason)
                continue
            family_records = metadata.fonts(entry)
            logger.debug("Family loaded", family=metadata.family, fonts=len(family_records))
            records.extend(family_records)

        logger.info("Font library loaded", path=str(directory), fonts=len(records))
        return cls(records, path=directory)

    @property
    def path(self) -> Path | None:
        """Directory the library was loaded from, if any."""
        return self._path

    @property
    def families(self) -> list[str]:
        """Distinct family names, in load order."""
        return list(dict.fromkeys(record.family for record in self._records))

    def __iter__(self) -> Iterator[FontRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

"""Referrer whitelist.

The whitelist file is a JSON object listing allowed referrer prefixes:
    {"domains": ["http://example.com/", "https://example.com/"]}

An empty string entry allows every referrer, including requests without one.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from facesmith.exceptions import WhitelistError
from facesmith.io.library import lower_keys

logger = structlog.get_logger(__name__)


class WhitelistFile(BaseModel):
    """Contents of a whitelist file."""

    model_config = ConfigDict(frozen=True)

    domains: list[str] = []

    @model_validator(mode="before")
    @classmethod
    def _normalize_keys(cls, data: Any) -> Any:
        return lower_keys(data)


class Whitelist:
    """Allowed referrer prefixes."""

    def __init__(self, domains: Iterable[str] = ()) -> None:
        self._domains = tuple(domains)

    @classmethod
    def read(cls, path: Path) -> "Whitelist":
        """Read a whitelist file.

        Args:
            path: Path to the JSON whitelist file

        Returns:
            Whitelist with the listed domains

        Raises:
            WhitelistError: If the file is a directory, cannot be read,
                or is not a JSON object with a list of strings under "domains"
        """
        if path.is_dir():
            raise WhitelistError(str(path), "is a directory")
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except OSError as e:
            raise WhitelistError(str(path), e.strerror or str(e)) from e
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise WhitelistError(str(path), str(e)) from e

        try:
            contents = WhitelistFile.model_validate(raw)
        except ValidationError as e:
            raise WhitelistError(str(path), f"{e.error_count()} validation errors") from e

        logger.info("Whitelist loaded", path=str(path), domains=len(contents.domains))
        return cls(contents.domains)

    @property
    def domains(self) -> tuple[str, ...]:
        return self._domains

    def contains(self, referer: str) -> bool:
        """Check whether a referrer starts with one of the whitelisted prefixes."""
        return any(referer.startswith(domain) for domain in self._domains)

    def __contains__(self, referer: object) -> bool:
        return isinstance(referer, str) and self.contains(referer)

    def __len__(self) -> int:
        return len(self._domains)

"""Index lookup keys produced by the query parser."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LookupKey:
    """A point lookup in the font index.

    Attributes:
        family: Family name (row key)
        column_key: Format, weight and style concatenated (e.g., "woff700italic")
    """

    family: str
    column_key: str

    def __str__(self) -> str:
        return f"{self.family}:{self.column_key}"

"""Two-level font index.

Fonts are indexed by family name (row key) and by format, weight and style
concatenated (column key):

    "Amaranth" -> {"woff400normal": FontRecord, "eot700italic": FontRecord, ...}

The index is filled once by build() and only read afterwards, so any
number of concurrent requests may call lookup() without locking.
"""

from collections.abc import Iterable

from facesmith.domain.font import FontRecord
from facesmith.domain.lookup import LookupKey


class FontIndex:
    """Read-only (family, column key) -> font record mapping.

    Example:
        index = FontIndex.build(library)
        record = index.lookup(LookupKey("Amaranth", "woff400normal"))
    """

    def __init__(self) -> None:
        self._table: dict[str, dict[str, FontRecord]] = {}

    @classmethod
    def build(cls, records: Iterable[FontRecord]) -> "FontIndex":
        """Index every record under its family and column key.

        A later record with the same keys replaces an earlier one.

        Args:
            records: Font records to index

        Returns:
            Populated index
        """
        index = cls()
        for record in records:
            index._table.setdefault(record.family, {})[record.column_key] = record
        return index

    def lookup(self, key: LookupKey) -> FontRecord | None:
        """Return the font stored under the key, or None if absent."""
        row = self._table.get(key.family)
        if row is None:
            return None
        return row.get(key.column_key)

    @property
    def families(self) -> list[str]:
        """Indexed family names."""
        return list(self._table)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, LookupKey) and self.lookup(key) is not None

    def __len__(self) -> int:
        return sum(len(row) for row in self._table.values())

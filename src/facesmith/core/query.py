"""Family specification parsing.

A family specification selects fonts from one or more families:

    Amaranth                      -> Amaranth, weight 400, style normal
    Amaranth:700italic            -> Amaranth, weight 700, style italic
    Amaranth:400,700|Open Sans    -> Amaranth 400 and 700 normal,
                                     Open Sans 400 normal

Families are separated by "|", a family name is separated from its style
list by ":", and styles are separated by ",". A style token that is a bare
integer is a weight with the normal style; any other token is used as a
literal weight and style pair such as "300italic".
"""

import re

from facesmith.domain.font import FontFormat
from facesmith.domain.lookup import LookupKey

FAMILY_SEPARATOR = "|"
STYLES_SEPARATOR = ":"
STYLE_SEPARATOR = ","

DEFAULT_WEIGHT = 400
DEFAULT_STYLE = "normal"

_REJECTED_PREFIXES = (FAMILY_SEPARATOR, STYLES_SEPARATOR, STYLE_SEPARATOR)
_INTEGER = re.compile(r"[+-]?[0-9]+")
# Weights wider than 64 bits are kept as literal composites
_INTEGER_MIN, _INTEGER_MAX = -(2**63), 2**63 - 1


def _is_integer(token: str) -> bool:
    if _INTEGER.fullmatch(token) is None:
        return False
    return _INTEGER_MIN <= int(token) <= _INTEGER_MAX


def _style_composites(styles: str) -> list[str]:
    """Expand a comma separated style list into weight+style strings."""
    composites = []
    for token in styles.split(STYLE_SEPARATOR):
        if not token:
            continue
        if _is_integer(token):
            composites.append(f"{token}{DEFAULT_STYLE}")
        else:
            composites.append(token)
    return composites


def parse_queries(family_spec: str, font_format: FontFormat) -> list[LookupKey]:
    """Parse a family specification into ordered index lookups.

    Never raises; malformed input produces fewer keys, or none at all.

    Args:
        family_spec: Raw value of the family parameter
        font_format: Requested font format, prefixed to every column key

    Returns:
        Lookup keys in the order families and styles appear in the input
    """
    if family_spec.startswith(_REJECTED_PREFIXES):
        return []

    keys: list[LookupKey] = []
    for segment in family_spec.split(FAMILY_SEPARATOR):
        family, sep, styles = segment.partition(STYLES_SEPARATOR)
        if not family:
            continue
        if not sep:
            composites = [f"{DEFAULT_WEIGHT}{DEFAULT_STYLE}"]
        else:
            composites = _style_composites(styles)

        for composite in composites:
            keys.append(LookupKey(family, f"{font_format.value}{composite}"))
    return keys

"""Parse product identifiers coming from URL paths and element attributes."""

from __future__ import annotations

import re

from app.core.errors import InvalidIdentifier

_DECIMAL_ID = re.compile(r"\+?[0-9]+")

# Upper bound of the 32-bit ``Integer`` primary key column
MAX_PRODUCT_ID = 2**31 - 1


def parse_product_id(raw: object) -> int:
    """Return ``raw`` as a positive base-10 integer or raise InvalidIdentifier.

    Accepts ints (bools excluded) and strings made only of ASCII digits, with
    an optional leading ``+`` and surrounding whitespace. Partial numbers such
    as ``"4abc"`` or ``"4.0"`` are rejected rather than truncated, and so are
    values the primary key column cannot hold.
    """
    if isinstance(raw, bool):
        raise InvalidIdentifier()
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, str):
        candidate = raw.strip()
        if not _DECIMAL_ID.fullmatch(candidate):
            raise InvalidIdentifier()
        value = int(candidate, 10)
    else:
        raise InvalidIdentifier()

    if value <= 0 or value > MAX_PRODUCT_ID:
        raise InvalidIdentifier()
    return value

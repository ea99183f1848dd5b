from __future__ import annotations

import re
from typing import Any

from ..excel.cells import cell_text

"""Phone number extraction from free-form phone cells.

A single cell often holds several numbers ("555-123-4567 y 555-987-6543",
"5551234 / 5559876", one per line...). The cell is split on separator
patterns, every part is reduced to its digits and parts with at least
MIN_PHONE_DIGITS digits are kept, de-duplicated in first-seen order.

No country/area code checks and no upper bound on
the digit count.
"""

__all__ = [
    "MIN_PHONE_DIGITS",
    "extract_phone_numbers",
]

MIN_PHONE_DIGITS = 7

_SEP = "\n"

# Applied in order; each pattern is replaced by the separator token.
_SEPARATOR_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"\r\n|\r"),
    re.compile(r"\s+[-–—]\s+"),  # hyphen / en dash / em dash between spaces
    re.compile(r"[,;|/\\\t]+"),
    re.compile(r"\s+(?:y|o)\s+", re.IGNORECASE),  # "y" / "o" conjunctions
)

_NON_DIGITS = re.compile(r"\D+")


def extract_phone_numbers(raw: Any) -> list[str]:
    """Return the distinct digit-only phone numbers found in ``raw``.

    Examples:
        >>> extract_phone_numbers("555-1234, 555-1234")
        ['5551234']
        >>> extract_phone_numbers("Juan 555-123-4567 y Pedro 555-987-6543")
        ['5551234567', '5559876543']
        >>> extract_phone_numbers("abc")
        []
    """
    text = cell_text(raw).strip()
    if not text:
        return []

    for pattern in _SEPARATOR_PATTERNS:
        text = pattern.sub(_SEP, text)

    phones: list[str] = []
    seen: set[str] = set()
    for part in text.split(_SEP):
        part = part.strip()
        if not part:
            continue
        digits = _NON_DIGITS.sub("", part)
        if len(digits) < MIN_PHONE_DIGITS or digits in seen:
            continue
        seen.add(digits)
        phones.append(digits)
    return phones

from __future__ import annotations

import math
from typing import Any

__all__ = ["cell_text"]


def cell_text(value: Any) -> str:
    """Render a raw worksheet value as text without trimming it.

    Empty cells (None / NaN) become "", and integral floats lose their ".0"
    so a phone typed as a number (5551234567.0) keeps its digits intact.
    """
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)

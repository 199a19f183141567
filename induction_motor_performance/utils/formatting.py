"""Display helpers for optional, possibly non-finite quantities."""

import math
from typing import Optional

MISSING = "–"


def format_value(value: Optional[float], digits: int = 3) -> str:
    """
    Format a scalar for display.

    Returns the placeholder "–" for None, NaN and infinities so that
    undefined results never break a report.
    """
    if value is None or not math.isfinite(value):
        return MISSING
    return f"{value:,.{digits}f}"

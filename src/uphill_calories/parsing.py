from __future__ import annotations

import math
import re

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str | None) -> float:
    """Parse a decimal typed by a user; comma or period as separator.

    Anything that is not a plain decimal number parses to NaN.
    """
    if text is None:
        return math.nan
    candidate = str(text).strip().replace(",", ".", 1)
    if not _DECIMAL_RE.fullmatch(candidate):
        return math.nan
    try:
        return float(candidate)
    except ValueError:
        return math.nan


def round_half_up(value: float, decimals: int = 0) -> float:
    # Halves go towards +inf, unlike the builtin round().
    factor = 10**decimals
    return math.floor(value * factor + 0.5) / factor

"""Human-readable file sizes."""

from __future__ import annotations

import math

_UNITS = "BKMGTPE"


def human_readable(size: int) -> str:
    """Format a byte count in powers of 1024, rounded up to one decimal.

    Plain bytes read ``"<n> B"``; larger sizes read e.g. ``"1.5 KB"``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    mantissa = float(size)
    index = 0
    while mantissa >= 1024.0:
        mantissa /= 1024.0
        index += 1
    if index >= len(_UNITS):
        raise ValueError("size too large to format")
    mantissa = math.ceil(mantissa * 10.0) / 10.0
    text = f"{mantissa:g} {_UNITS[index]}"
    return text if index == 0 else text + "B"
"""Display conversions for the cluster size tool.

This module provides conversion functions from raw numbers to text:
- Byte counts to human-readable binary units (B, KB, MB, GB, TB, PB)
- Integer counts with thousands separators
"""
import math
from typing import Optional
from typing import Union

BYTE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB")

Number = Union[int, float]


def format_bytes(num: Optional[Number]) -> str:
    """Render a byte count using 1024 scaling.

    Precision depends on magnitude: >=100 -> 0 decimals, >=10 -> 1,
    otherwise 2. Plain bytes are always whole numbers. Zero, negative
    and non-finite values render as ``0 B``.
    """
    if num is None or not math.isfinite(num) or num <= 0:
        return "0 B"

    value = float(num)
    unit_index = 0
    while value >= 1024 and unit_index < len(BYTE_UNITS) - 1:
        value /= 1024
        unit_index += 1

    if unit_index == 0 or value >= 100:
        formatted = f"{value:.0f}"
    elif value >= 10:
        formatted = f"{value:.1f}"
    else:
        formatted = f"{value:.2f}"
    return f"{formatted} {BYTE_UNITS[unit_index]}"


def format_count(value: Optional[Number]) -> str:
    return f"{int(value or 0):,}"

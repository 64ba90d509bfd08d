# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Unit and value conversions for the exported document.

JSON has no literal for infinity, so unbounded radii become None.
"""
import math

import numpy as np

DEG2RAD = np.pi / 180.0
RAD2DEG = 180.0 / np.pi


def deg_to_rad(deg: float) -> float:
    return float(deg * DEG2RAD)


def rad_to_deg(rad: float) -> float:
    return float(rad * RAD2DEG)


def finite_or_none(value: float | None) -> float | None:
    """Return value, or None when it is missing, infinite or NaN."""
    if value is None or not math.isfinite(value):
        return None
    return float(value)


def color_to_hex(color) -> str | None:
    """
    Quantize an RGB(A) color with channels in [0, 1] to "rrggbb".

    Each channel is scaled to 0-255, rounded and clamped. Alpha is ignored.
    A color with fewer than three channels, or a non-finite RGB channel,
    counts as no color.

    Args:
        color: Sequence of at least three floats, or None.

    Returns:
        Six lowercase hex digits, or None when there is no usable color.
    """
    if color is None or len(color) < 3:
        return None
    rgb = np.asarray(color[:3], dtype=np.float64)
    if not np.all(np.isfinite(rgb)):
        return None
    rgb = np.clip(np.rint(rgb * 255.0), 0, 255)
    return "".join(f"{int(c):02x}" for c in rgb)


def vector_to_list(v) -> list[float] | None:
    if v is None:
        return None
    return [float(c) for c in v]

"""Unit conversion helpers for slide measurements."""
from __future__ import annotations

EMU_PER_POINT = 12700
POINTS_PER_INCH = 72
PIXELS_PER_INCH = 96


def points_to_pixels(value: float) -> float:
    """Convert typographic points to CSS pixels."""
    return round(value * PIXELS_PER_INCH / POINTS_PER_INCH, 2)


def points_to_emu(value: float) -> int:
    """Convert points to English Metric Units."""
    return int(round(value * EMU_PER_POINT))

"""Estimate text extents and pick font sizes that fit a container."""
from __future__ import annotations

from slide_formatter.model.elements import BoxGeometry, Dimensions, FontRange

AVERAGE_GLYPH_WIDTH_RATIO = 0.6
LINE_HEIGHT_RATIO = 1.2
FONT_SIZE_STEP_PT = 2


class LayoutCalculator:
    """Heuristic text metrics and font fitting.

    Widths and heights come from fixed glyph and line ratios rather than real
    font shaping, so results are deterministic for a given string.
    """

    # ------------------------------------------------------------------
    # Metric helpers
    def estimate(self, text: str, font_size: float) -> Dimensions:
        """Approximate the rendered extent of ``text`` at ``font_size`` points."""
        glyph_width = font_size * AVERAGE_GLYPH_WIDTH_RATIO
        line_height = font_size * LINE_HEIGHT_RATIO

        lines = text.split("\n")
        longest = max(len(line) for line in lines)
        return Dimensions(width=longest * glyph_width, height=len(lines) * line_height)

    def fits(self, text: str, font_size: float, width: float, height: float) -> bool:
        return self.estimate(text, font_size).fits_within(width, height)

    # ------------------------------------------------------------------
    # Font fitting
    def fit_font_size(self, text: str, width: float, height: float, font_range: FontRange) -> float:
        """Return the font size to use for ``text`` in a ``width`` x ``height`` box.

        The search first shrinks from the default towards the minimum and keeps
        the first size that fits. Only when that leaves the default in place
        (it fitted immediately, or nothing fitted) does it try growing towards
        the maximum, stopping at the first size that overflows.
        """
        optimal = font_range.default

        size = font_range.default
        while size >= font_range.minimum:
            if self.fits(text, size, width, height):
                optimal = size
                break
            size -= FONT_SIZE_STEP_PT

        if optimal == font_range.default:
            size = font_range.default + FONT_SIZE_STEP_PT
            while size <= font_range.maximum:
                if not self.fits(text, size, width, height):
                    break
                optimal = size
                size += FONT_SIZE_STEP_PT

        return optimal

    def fit_in_box(self, text: str, box: BoxGeometry, font_range: FontRange) -> float:
        return self.fit_font_size(text, box.width, box.height, font_range)

    def table_height(self, row_count: int, row_height: float, max_height: float) -> float:
        """Height for a table whose caller gave none: one row height per row, capped."""
        return min(max_height, row_count * row_height)


_CALCULATOR = LayoutCalculator()


def estimate_text_dimensions(text: str, font_size: float) -> Dimensions:
    return _CALCULATOR.estimate(text, font_size)


def calculate_optimal_font_size(text: str, width: float, height: float, font_range: FontRange) -> float:
    return _CALCULATOR.fit_font_size(text, width, height, font_range)

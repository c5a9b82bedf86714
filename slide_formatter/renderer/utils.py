"""Common helpers shared by renderer implementations."""
from __future__ import annotations

import html
from typing import Dict, Optional

from slide_formatter.model.elements import StyledSegment
from slide_formatter.utils.units import points_to_pixels


def segment_to_css(segment: StyledSegment) -> Dict[str, str]:
    """Convert the flags of a styled segment into CSS properties."""
    css: Dict[str, str] = {}
    if segment.bold:
        css["font-weight"] = "700"
    if segment.italic:
        css["font-style"] = "italic"
    if segment.underline:
        css["text-decoration"] = "underline"
    if segment.font_size:
        css["font-size"] = f"{points_to_pixels(segment.font_size)}px"
    return css


def css_declarations(style: Dict[str, str]) -> str:
    return "; ".join(f"{key}: {value}" for key, value in style.items())


def segment_to_html(segment: StyledSegment) -> str:
    """Escape the segment text and wrap it in a styled span when needed."""
    text = html.escape(segment.text)
    css = segment_to_css(segment)
    if not css:
        return text
    return f"<span style=\"{css_declarations(css)}\">{text}</span>"


def font_css(font_size: float, font_family: Optional[str] = None) -> Dict[str, str]:
    css = {"font-size": f"{points_to_pixels(font_size)}px"}
    if font_family:
        css["font-family"] = font_family
    return css

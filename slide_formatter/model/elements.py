"""In-memory representation of parsed markdown content."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class StyledSegment:
    """Contiguous run of plain text with the inline styling applied to it."""

    text: str
    bold: bool = False
    italic: bool = False
    underline: bool = False
    font_size: Optional[float] = None

    @property
    def is_styled(self) -> bool:
        """True when any flag or an explicit font size is set."""
        return self.bold or self.italic or self.underline or bool(self.font_size)


@dataclass(slots=True, frozen=True)
class ListItem:
    """Single line of a markdown list with its nesting level."""

    text: str
    level: int
    is_numbered: bool


@dataclass(slots=True)
class TableData:
    """Header row plus data rows of a pipe-delimited markdown table."""

    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    @property
    def row_count(self) -> int:
        """Number of rows including the header row."""
        return len(self.rows) + 1


@dataclass(slots=True, frozen=True)
class Dimensions:
    """Estimated width and height of rendered text, in points."""

    width: float
    height: float

    def fits_within(self, width: float, height: float) -> bool:
        return self.width <= width and self.height <= height


@dataclass(slots=True, frozen=True)
class FontRange:
    """Bounded font sizes allowed for a content kind."""

    minimum: float
    maximum: float
    default: float

    def __post_init__(self) -> None:
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError(
                f"Font range must satisfy min <= default <= max, got "
                f"{self.minimum}/{self.default}/{self.maximum}"
            )


@dataclass(slots=True, frozen=True)
class BoxGeometry:
    """Position and size of a content container on a slide, in points."""

    x: float
    y: float
    width: float
    height: float

    def replace(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> "BoxGeometry":
        """Return a copy with the given non-empty overrides applied."""
        return BoxGeometry(
            x=x or self.x,
            y=y or self.y,
            width=width or self.width,
            height=height or self.height,
        )

"""Generic directives handed to an external presentation renderer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from slide_formatter.model.elements import Dimensions

LENGTH_UNIT = "PT"


@dataclass(slots=True, frozen=True)
class AffineTransform:
    """Placement transform; the builder always emits an unscaled translation."""

    translate_x: float
    translate_y: float
    scale_x: float = 1.0
    scale_y: float = 1.0
    unit: str = LENGTH_UNIT


@dataclass(slots=True, frozen=True)
class TextRange:
    """Half-open character range ``[start, end)``; both ``None`` means the whole text."""

    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def is_all(self) -> bool:
        return self.start is None and self.end is None


WHOLE_TEXT = TextRange()


@dataclass(slots=True, frozen=True)
class CellLocation:
    row: int
    column: int


@dataclass(slots=True)
class GeometryDirective:
    """Create a container (text box or table) at a position with a size."""

    object_id: str
    page_object_id: str
    size: Dimensions
    transform: AffineTransform
    shape_type: str = "TEXT_BOX"
    rows: Optional[int] = None
    columns: Optional[int] = None


@dataclass(slots=True)
class InsertTextDirective:
    """Insert plain text into a container, or into one cell of a table."""

    object_id: str
    text: str
    insertion_index: int = 0
    cell: Optional[CellLocation] = None


@dataclass(slots=True)
class StyleDirective:
    """Apply text style flags over a character range of inserted text."""

    object_id: str
    text_range: TextRange
    bold: Optional[bool] = None
    italic: Optional[bool] = None
    underline: Optional[bool] = None
    font_size: Optional[float] = None
    font_family: Optional[str] = None
    cell: Optional[CellLocation] = None
    fields: List[str] = field(default_factory=list)


@dataclass(slots=True)
class BulletDirective:
    """Turn the paragraphs in a range into list items with a bullet preset."""

    object_id: str
    text_range: TextRange
    preset: str


@dataclass(slots=True)
class CellFillDirective:
    """Solid background fill over a rectangular block of table cells."""

    object_id: str
    origin: CellLocation
    row_span: int
    column_span: int
    rgb: Tuple[float, float, float]


@dataclass(slots=True)
class BorderDirective:
    """Solid borders around every cell in a block of table cells."""

    object_id: str
    origin: CellLocation
    row_span: int
    column_span: int
    rgb: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    weight: float = 1.0
    dash_style: str = "SOLID"


@dataclass(slots=True)
class AutofitDirective:
    """Ask the renderer to shrink text on overflow."""

    object_id: str
    autofit_type: str = "SHAPE_AUTOFIT"
    font_scale: float = 1.0
    line_spacing_reduction: float = 0.1


@dataclass(slots=True)
class CreateSlideDirective:
    object_id: str
    insertion_index: int
    layout: str


Directive = (
    GeometryDirective
    | InsertTextDirective
    | StyleDirective
    | BulletDirective
    | CellFillDirective
    | BorderDirective
    | AutofitDirective
    | CreateSlideDirective
)

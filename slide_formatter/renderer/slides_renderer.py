"""Convert directives into Google Slides ``batchUpdate`` request dictionaries."""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from slide_formatter.model.directive_model import (
    AutofitDirective,
    BorderDirective,
    BulletDirective,
    CellFillDirective,
    CellLocation,
    CreateSlideDirective,
    Directive,
    GeometryDirective,
    InsertTextDirective,
    StyleDirective,
    TextRange,
)
from slide_formatter.model.document_model import DeckModel
from slide_formatter.utils.units import points_to_emu

Request = Dict[str, object]


class SlidesRequestRenderer:
    """Serialize directives into the request shape of the Slides REST API.

    No network calls are made; the caller owns the client and sends
    ``{"requests": ...}`` itself. Lengths are emitted in points by default or
    in EMU when ``unit="EMU"``.
    """

    def __init__(self, unit: str = "PT") -> None:
        if unit not in {"PT", "EMU"}:
            raise ValueError(f"Unsupported length unit: {unit}")
        self._unit = unit

    def render(self, model: DeckModel) -> List[List[Request]]:
        """Return one request batch per slide."""
        return [self.render_directives(slide.all_directives()) for slide in model.slides]

    def render_directives(self, directives: Iterable[Directive]) -> List[Request]:
        return [self._to_request(directive) for directive in directives]

    # ------------------------------------------------------------------
    # Directive conversion
    def _to_request(self, directive: Directive) -> Request:
        if isinstance(directive, GeometryDirective):
            return self._geometry(directive)
        if isinstance(directive, InsertTextDirective):
            return self._insert_text(directive)
        if isinstance(directive, StyleDirective):
            return self._text_style(directive)
        if isinstance(directive, BulletDirective):
            return {
                "createParagraphBullets": {
                    "objectId": directive.object_id,
                    "textRange": self._text_range(directive.text_range),
                    "bulletPreset": directive.preset,
                }
            }
        if isinstance(directive, CellFillDirective):
            return self._cell_fill(directive)
        if isinstance(directive, BorderDirective):
            return self._borders(directive)
        if isinstance(directive, AutofitDirective):
            return {
                "updateShapeProperties": {
                    "objectId": directive.object_id,
                    "shapeProperties": {
                        "autofit": {
                            "autofitType": directive.autofit_type,
                            "fontScale": directive.font_scale,
                            "lineSpacingReduction": directive.line_spacing_reduction,
                        }
                    },
                    "fields": "autofit",
                }
            }
        if isinstance(directive, CreateSlideDirective):
            return {
                "createSlide": {
                    "objectId": directive.object_id,
                    "insertionIndex": directive.insertion_index,
                    "slideLayoutReference": {"predefinedLayout": directive.layout},
                }
            }
        raise TypeError(f"Unsupported directive: {type(directive).__name__}")

    def _geometry(self, directive: GeometryDirective) -> Request:
        transform = directive.transform
        element_properties = {
            "pageObjectId": directive.page_object_id,
            "size": {
                "width": self._magnitude(directive.size.width),
                "height": self._magnitude(directive.size.height),
            },
            "transform": {
                "scaleX": transform.scale_x,
                "scaleY": transform.scale_y,
                "translateX": self._length(transform.translate_x),
                "translateY": self._length(transform.translate_y),
                "unit": self._unit,
            },
        }
        if directive.shape_type == "TABLE":
            return {
                "createTable": {
                    "objectId": directive.object_id,
                    "elementProperties": element_properties,
                    "rows": directive.rows,
                    "columns": directive.columns,
                }
            }
        return {
            "createShape": {
                "objectId": directive.object_id,
                "shapeType": directive.shape_type,
                "elementProperties": element_properties,
            }
        }

    def _insert_text(self, directive: InsertTextDirective) -> Request:
        body: Dict[str, object] = {"objectId": directive.object_id}
        self._add_cell(body, directive.cell)
        body["text"] = directive.text
        body["insertionIndex"] = directive.insertion_index
        return {"insertText": body}

    def _text_style(self, directive: StyleDirective) -> Request:
        style: Dict[str, object] = {}
        if directive.bold is not None:
            style["bold"] = directive.bold
        if directive.italic is not None:
            style["italic"] = directive.italic
        if directive.underline is not None:
            style["underline"] = directive.underline
        if directive.font_size is not None:
            # the API only accepts PT for font sizes
            style["fontSize"] = {"magnitude": directive.font_size, "unit": "PT"}
        if directive.font_family is not None:
            style["fontFamily"] = directive.font_family

        body: Dict[str, object] = {"objectId": directive.object_id}
        self._add_cell(body, directive.cell)
        body["textRange"] = self._text_range(directive.text_range)
        body["style"] = style
        body["fields"] = ",".join(directive.fields)
        return {"updateTextStyle": body}

    def _cell_fill(self, directive: CellFillDirective) -> Request:
        red, green, blue = directive.rgb
        return {
            "updateTableCellProperties": {
                "objectId": directive.object_id,
                "tableRange": self._table_range(directive.origin, directive.row_span, directive.column_span),
                "tableCellProperties": {
                    "tableCellBackgroundFill": {
                        "solidFill": {"color": {"rgbColor": {"red": red, "green": green, "blue": blue}}}
                    }
                },
                "fields": "tableCellBackgroundFill",
            }
        }

    def _borders(self, directive: BorderDirective) -> Request:
        red, green, blue = directive.rgb
        return {
            "updateTableBorderProperties": {
                "objectId": directive.object_id,
                "tableRange": self._table_range(directive.origin, directive.row_span, directive.column_span),
                "borderPosition": "ALL",
                "tableBorderProperties": {
                    "tableBorderFill": {
                        "solidFill": {"color": {"rgbColor": {"red": red, "green": green, "blue": blue}}}
                    },
                    "weight": {"magnitude": directive.weight, "unit": "PT"},
                    "dashStyle": directive.dash_style,
                },
                "fields": "tableBorderFill,weight,dashStyle",
            }
        }

    # ------------------------------------------------------------------
    # Value helpers
    def _text_range(self, text_range: TextRange) -> Dict[str, object]:
        if text_range.is_all:
            return {"type": "ALL"}
        return {"type": "FIXED_RANGE", "startIndex": text_range.start, "endIndex": text_range.end}

    def _table_range(self, origin: CellLocation, row_span: int, column_span: int) -> Dict[str, object]:
        return {
            "location": {"rowIndex": origin.row, "columnIndex": origin.column},
            "rowSpan": row_span,
            "columnSpan": column_span,
        }

    def _add_cell(self, body: Dict[str, object], cell: Optional[CellLocation]) -> None:
        if cell is not None:
            body["cellLocation"] = {"rowIndex": cell.row, "columnIndex": cell.column}

    def _length(self, value: float) -> float:
        return points_to_emu(value) if self._unit == "EMU" else value

    def _magnitude(self, value: float) -> Dict[str, object]:
        return {"magnitude": self._length(value), "unit": self._unit}

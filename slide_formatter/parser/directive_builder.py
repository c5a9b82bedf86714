"""Assemble geometry and text-style directives for a content container."""
from __future__ import annotations

from typing import List, Optional, Sequence

from slide_formatter.model.directive_model import (
    WHOLE_TEXT,
    AffineTransform,
    Directive,
    GeometryDirective,
    InsertTextDirective,
    StyleDirective,
    TextRange,
)
from slide_formatter.model.elements import BoxGeometry, Dimensions, StyledSegment
from slide_formatter.model.layout_config import DEFAULT_FONT_FAMILY


class DirectiveBuilder:
    """Pure assembly of directives; no markdown is parsed here."""

    def geometry(
        self,
        object_id: str,
        page_object_id: str,
        box: BoxGeometry,
        shape_type: str = "TEXT_BOX",
        rows: Optional[int] = None,
        columns: Optional[int] = None,
    ) -> GeometryDirective:
        """Place a container at ``box`` with an unscaled transform."""
        return GeometryDirective(
            object_id=object_id,
            page_object_id=page_object_id,
            size=Dimensions(width=box.width, height=box.height),
            transform=AffineTransform(translate_x=box.x, translate_y=box.y),
            shape_type=shape_type,
            rows=rows,
            columns=columns,
        )

    def base_style(
        self,
        object_id: str,
        font_size: float,
        font_family: str = DEFAULT_FONT_FAMILY,
        bold: bool = False,
    ) -> StyleDirective:
        """Whole-range default style for a container."""
        directive = StyleDirective(
            object_id=object_id,
            text_range=WHOLE_TEXT,
            font_size=font_size,
            font_family=font_family,
            fields=["fontSize", "fontFamily"],
        )
        if bold:
            directive.bold = True
            directive.fields.append("bold")
        return directive

    def segment_styles(self, object_id: str, segments: Sequence[StyledSegment]) -> List[StyleDirective]:
        """One range directive per styled segment, offsets counted over the plain text."""
        directives: List[StyleDirective] = []
        offset = 0
        for segment in segments:
            start = offset
            offset += len(segment.text)
            if not segment.is_styled:
                continue

            directive = StyleDirective(object_id=object_id, text_range=TextRange(start=start, end=offset))
            if segment.bold:
                directive.bold = True
                directive.fields.append("bold")
            if segment.italic:
                directive.italic = True
                directive.fields.append("italic")
            if segment.underline:
                directive.underline = True
                directive.fields.append("underline")
            if segment.font_size:
                directive.font_size = segment.font_size
                directive.fields.append("fontSize")
            directives.append(directive)
        return directives

    def build_text_block(
        self,
        object_id: str,
        page_object_id: str,
        box: BoxGeometry,
        segments: Sequence[StyledSegment],
        font_size: float,
        font_family: str = DEFAULT_FONT_FAMILY,
        bold: bool = False,
    ) -> List[Directive]:
        """Geometry, inserted text, base style, then per-segment styles."""
        text = "".join(segment.text for segment in segments)
        directives: List[Directive] = [
            self.geometry(object_id, page_object_id, box),
            InsertTextDirective(object_id=object_id, text=text),
            self.base_style(object_id, font_size, font_family, bold=bold),
        ]
        directives.extend(self.segment_styles(object_id, segments))
        return directives

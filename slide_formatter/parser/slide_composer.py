"""Compose parsed markdown into slide blocks with sizing and directives."""
from __future__ import annotations

import random
import string
import time
from collections import defaultdict
from typing import Callable, Dict, List, Optional

from slide_formatter.model.directive_model import (
    WHOLE_TEXT,
    AutofitDirective,
    BorderDirective,
    BulletDirective,
    CellFillDirective,
    CellLocation,
    CreateSlideDirective,
    Directive,
    InsertTextDirective,
    StyleDirective,
    TextRange,
)
from slide_formatter.model.document_model import ContentBlock, SlideModel
from slide_formatter.model.elements import BoxGeometry, ListItem, StyledSegment
from slide_formatter.model.layout_config import (
    BulletPreset,
    ContentKind,
    FormatterConfig,
    SlideLayout,
    TextType,
)
from slide_formatter.parser.directive_builder import DirectiveBuilder
from slide_formatter.parser.inline_parser import parse_inline, plain_text
from slide_formatter.parser.layout_calculator import LayoutCalculator
from slide_formatter.parser.list_parser import parse_list
from slide_formatter.parser.table_parser import parse_table
from slide_formatter.parser.text_partitioner import TextPartitioner
from slide_formatter.utils.logger import get_logger

LOGGER = get_logger(__name__)

HEADER_FILL_RGB = (0.9, 0.9, 0.9)
HEADER_FONT_SIZE_BOOST_PT = 2
LIST_INDENT = "  "
_BASE36_ALPHABET = string.digits + string.ascii_lowercase


class ContentError(ValueError):
    """Raised when markdown content cannot be turned into the requested block."""


def _to_base36(value: int) -> str:
    digits = []
    while True:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))


def generate_object_id(prefix: str = "obj") -> str:
    """Return an identifier like ``text_lq2k3x9a_4fz1c`` for a new page element."""
    timestamp = _to_base36(int(time.time() * 1000))
    suffix = "".join(random.choices(_BASE36_ALPHABET, k=5))
    return f"{prefix}_{timestamp}_{suffix}"


def truncate_text(text: str, max_length: int) -> str:
    """Shorten ``text`` to ``max_length`` characters plus ``...``.

    The cut moves back to the last space when that space lies within the final
    20% of the allowed length, so words are not split needlessly.
    """
    if len(text) <= max_length:
        return text

    truncated = text[:max_length]
    last_space = truncated.rfind(" ")
    if last_space > max_length * 0.8:
        return truncated[:last_space] + "..."
    return truncated + "..."


class SlideComposer:
    """Builds content blocks and slides from markdown using a formatter config."""

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        id_factory: Callable[[str], str] = generate_object_id,
    ) -> None:
        self._config = config or FormatterConfig()
        self._new_id = id_factory
        self._calculator = LayoutCalculator()
        self._builder = DirectiveBuilder()

    # ------------------------------------------------------------------
    # Public API
    def new_slide(
        self,
        title: str,
        layout: SlideLayout = SlideLayout.TITLE_AND_BODY,
        insertion_index: int = 1,
    ) -> SlideModel:
        """Empty slide carrying only its creation directive."""
        slide_id = self._new_id("slide")
        return SlideModel(
            object_id=slide_id,
            title=title,
            directives=[CreateSlideDirective(object_id=slide_id, insertion_index=insertion_index, layout=layout.value)],
        )

    def compose_text(
        self,
        slide_id: str,
        text: str,
        text_type: TextType = TextType.BODY,
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        font_size: Optional[float] = None,
        auto_fit: Optional[bool] = None,
    ) -> ContentBlock:
        """Lay out a markdown text box; an explicit ``font_size`` is used unchecked."""
        kind = ContentKind.TITLE if text_type is TextType.TITLE else ContentKind.BODY
        box = self._config.box_for(kind).replace(x=x, y=y, width=width, height=height)
        auto_fit = self._config.auto_fit if auto_fit is None else auto_fit

        segments = parse_inline(text)
        text_plain = plain_text(segments)

        if not font_size:
            if auto_fit:
                font_size = self._calculator.fit_in_box(text_plain, box, self._config.font_range_for(kind))
            else:
                font_size = self._config.font_range_for(kind).default

        object_id = self._new_id("text")
        directives = self._builder.build_text_block(
            object_id,
            slide_id,
            box,
            segments,
            font_size,
            self._config.font_family,
            bold=text_type is TextType.TITLE,
        )
        if auto_fit:
            directives.append(AutofitDirective(object_id=object_id))

        LOGGER.debug("Composed %s text block %s at %spt", text_type.value, object_id, font_size)
        return ContentBlock(
            element_type="text",
            object_id=object_id,
            page_object_id=slide_id,
            box=box,
            font_size=font_size,
            directives=directives,
            segments=segments,
            properties={"textType": text_type.value, "autoFit": auto_fit, "segmentCount": len(segments)},
        )

    def compose_list(
        self,
        slide_id: str,
        list_content: str,
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        bullet_preset: Optional[BulletPreset] = None,
    ) -> ContentBlock:
        """Lay out a bulleted or numbered list, with per-level presets for nesting."""
        box = self._config.box_for(ContentKind.LIST).replace(x=x, y=y, width=width, height=height)

        items = parse_list(list_content)
        if not items:
            LOGGER.warning("Rejected list content without items")
            raise ContentError("No valid list items found in the provided content")

        is_numbered = items[0].is_numbered
        preset = bullet_preset or self._config.bullet_preset or (
            BulletPreset.NUMBERED_DECIMAL if is_numbered else BulletPreset.BULLET_DISC_CIRCLE_SQUARE
        )

        list_text = "\n".join(LIST_INDENT * item.level + item.text for item in items)
        font_size = self._resolve_font_size(list_text, box, ContentKind.LIST)
        segments = [StyledSegment(text=list_text)]

        object_id = self._new_id("list")
        directives = self._builder.build_text_block(
            object_id, slide_id, box, segments, font_size, self._config.font_family
        )
        directives.append(BulletDirective(object_id=object_id, text_range=WHOLE_TEXT, preset=preset.value))

        has_nested = any(item.level > 0 for item in items)
        if has_nested:
            directives.extend(self._nested_bullets(object_id, items, preset, is_numbered))

        LOGGER.debug("Composed list %s with %d items", object_id, len(items))
        return ContentBlock(
            element_type="list",
            object_id=object_id,
            page_object_id=slide_id,
            box=box,
            font_size=font_size,
            directives=directives,
            segments=segments,
            list_items=items,
            properties={"bulletPreset": preset.value, "hasNestedItems": has_nested, "itemCount": len(items)},
        )

    def compose_table(
        self,
        slide_id: str,
        table_content: str,
        x: Optional[float] = None,
        y: Optional[float] = None,
        width: Optional[float] = None,
        height: Optional[float] = None,
        header_style: bool = True,
    ) -> ContentBlock:
        """Lay out a markdown table with optional bold, shaded header row."""
        table = parse_table(table_content)
        if table is None:
            LOGGER.warning("Rejected content that is not a markdown table")
            raise ContentError("Invalid table format. Please use markdown table syntax with | separators.")
        if table.column_count == 0:
            raise ContentError("Table must have at least one column and one row")

        default_box = self._config.box_for(ContentKind.TABLE)
        height = height or self._calculator.table_height(
            table.row_count, self._config.table_row_height, default_box.height
        )
        box = default_box.replace(x=x, y=y, width=width, height=height)

        font_range = self._config.font_range_for(ContentKind.TABLE)
        family = self._config.font_family
        object_id = self._new_id("table")
        columns = table.column_count

        directives: List[Directive] = [
            self._builder.geometry(object_id, slide_id, box, shape_type="TABLE", rows=table.row_count, columns=columns)
        ]

        cell_rows = [table.headers] + table.rows
        for row_index, row in enumerate(cell_rows):
            for column_index, value in enumerate(row):
                if value:
                    directives.append(
                        InsertTextDirective(
                            object_id=object_id, text=value, cell=CellLocation(row_index, column_index)
                        )
                    )

        if header_style:
            for column_index in range(columns):
                directives.append(
                    StyleDirective(
                        object_id=object_id,
                        text_range=WHOLE_TEXT,
                        bold=True,
                        font_size=font_range.default + HEADER_FONT_SIZE_BOOST_PT,
                        font_family=family,
                        cell=CellLocation(0, column_index),
                        fields=["bold", "fontSize", "fontFamily"],
                    )
                )
            directives.append(
                CellFillDirective(
                    object_id=object_id,
                    origin=CellLocation(0, 0),
                    row_span=1,
                    column_span=columns,
                    rgb=HEADER_FILL_RGB,
                )
            )

        for row_index in range(1, table.row_count):
            for column_index in range(columns):
                directives.append(
                    StyleDirective(
                        object_id=object_id,
                        text_range=WHOLE_TEXT,
                        font_size=font_range.default,
                        font_family=family,
                        cell=CellLocation(row_index, column_index),
                        fields=["fontSize", "fontFamily"],
                    )
                )

        directives.append(
            BorderDirective(
                object_id=object_id,
                origin=CellLocation(0, 0),
                row_span=table.row_count,
                column_span=columns,
            )
        )

        LOGGER.debug("Composed table %s with %dx%d cells", object_id, table.row_count, columns)
        return ContentBlock(
            element_type="table",
            object_id=object_id,
            page_object_id=slide_id,
            box=box,
            font_size=font_range.default,
            directives=directives,
            table=table,
            properties={"headerStyle": header_style, "rows": table.row_count, "columns": columns},
        )

    def compose_slides(
        self,
        title: str,
        content: str,
        layout: SlideLayout = SlideLayout.TITLE_AND_BODY,
        slide_index: int = 1,
    ) -> List[SlideModel]:
        """Create one or more title-and-content slides, splitting long content."""
        chunks = TextPartitioner(self._config.max_chunk_chars).partition(content)
        title_box = self._config.box_for(ContentKind.TITLE)
        body_box = self._config.box_for(ContentKind.BODY)
        family = self._config.font_family

        slides: List[SlideModel] = []
        for index, chunk in enumerate(chunks):
            current_title = title if index == 0 else f"{title} (cont. {index + 1})"
            slide = self.new_slide(current_title, layout=layout, insertion_index=slide_index + index)
            slide_id = slide.object_id
            title_id = self._new_id("title")
            content_id = self._new_id("content")

            title_segments = parse_inline(current_title)
            title_size = self._resolve_font_size(plain_text(title_segments), title_box, ContentKind.TITLE)
            slide.blocks.append(
                ContentBlock(
                    element_type="title",
                    object_id=title_id,
                    page_object_id=slide_id,
                    box=title_box,
                    font_size=title_size,
                    directives=self._builder.build_text_block(
                        title_id, slide_id, title_box, title_segments, title_size, family, bold=True
                    ),
                    segments=title_segments,
                )
            )

            if layout in (SlideLayout.TITLE_AND_BODY, SlideLayout.BLANK):
                content_segments = parse_inline(chunk)
                content_size = self._resolve_font_size(plain_text(content_segments), body_box, ContentKind.BODY)
                slide.blocks.append(
                    ContentBlock(
                        element_type="text",
                        object_id=content_id,
                        page_object_id=slide_id,
                        box=body_box,
                        font_size=content_size,
                        directives=self._builder.build_text_block(
                            content_id, slide_id, body_box, content_segments, content_size, family
                        ),
                        segments=content_segments,
                    )
                )

            slides.append(slide)

        LOGGER.debug("Composed %d slide(s) for %r", len(slides), title)
        return slides

    # ------------------------------------------------------------------
    # Helpers
    def _resolve_font_size(self, text: str, box: BoxGeometry, kind: ContentKind) -> float:
        font_range = self._config.font_range_for(kind)
        if not self._config.auto_fit:
            return font_range.default
        return self._calculator.fit_in_box(text, box, font_range)

    def _nested_bullets(
        self,
        object_id: str,
        items: List[ListItem],
        preset: BulletPreset,
        is_numbered: bool,
    ) -> List[BulletDirective]:
        ladder = [
            preset,
            BulletPreset.NUMBERED_ALPHA_LOWER if is_numbered else BulletPreset.BULLET_CIRCLE_HOLLOW,
            BulletPreset.NUMBERED_DECIMAL if is_numbered else BulletPreset.BULLET_DIAMOND_X,
        ]

        ranges_by_level: Dict[int, List[TextRange]] = defaultdict(list)
        offset = 0
        for item in items:
            line_length = len(LIST_INDENT * item.level + item.text)
            ranges_by_level[item.level].append(TextRange(start=offset, end=offset + line_length))
            offset += line_length + 1

        directives: List[BulletDirective] = []
        for level in sorted(ranges_by_level):
            if not 0 < level < len(ladder):
                continue
            for text_range in ranges_by_level[level]:
                directives.append(
                    BulletDirective(object_id=object_id, text_range=text_range, preset=ladder[level].value)
                )
        return directives

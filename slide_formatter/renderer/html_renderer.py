"""Render the deck model into an HTML preview."""
from __future__ import annotations

import html
from pathlib import Path
from typing import Dict, Iterable, List

from slide_formatter.model.document_model import ContentBlock, DeckModel, SlideModel
from slide_formatter.model.layout_config import DEFAULT_FONT_FAMILY, SLIDE_HEIGHT_PT, SLIDE_WIDTH_PT
from slide_formatter.renderer.utils import css_declarations, font_css, segment_to_html
from slide_formatter.utils.units import points_to_pixels


class HtmlRenderer:
    """Produce an absolutely positioned HTML page with one frame per slide."""

    def __init__(self, output_path: Path, font_family: str = DEFAULT_FONT_FAMILY) -> None:
        self._output_path = output_path
        self._font_family = font_family

    def render(self, model: DeckModel) -> None:
        html_text = self.build_html(model.slides)
        self._output_path.write_text(html_text, encoding="utf-8")

    def build_html(self, slides: Iterable[SlideModel]) -> str:
        frames = "\n".join(self._slide_to_div(slide) for slide in slides)
        width = points_to_pixels(SLIDE_WIDTH_PT)
        height = points_to_pixels(SLIDE_HEIGHT_PT)
        return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
  <meta charset=\"utf-8\" />
  <title>Slides Preview</title>
  <style>
    body {{ margin: 0; padding: 16px; background: #ddd; }}
    .slide {{ position: relative; width: {width}px; height: {height}px; margin: 0 auto 16px; background: #fff; }}
    .slide-box {{ position: absolute; white-space: pre-wrap; overflow: hidden; }}
    .slide-box table {{ border-collapse: collapse; width: 100%; }}
    .slide-box th, .slide-box td {{ border: 1px solid #000; padding: 2px 4px; }}
    .slide-box th {{ background: #e6e6e6; }}
  </style>
</head>
<body>
{frames}
</body>
</html>
"""

    def _slide_to_div(self, slide: SlideModel) -> str:
        boxes = "\n".join(self._block_to_div(block) for block in slide.blocks)
        return f"<div class=\"slide\" id=\"{html.escape(slide.object_id)}\">\n{boxes}\n</div>"

    def _block_to_div(self, block: ContentBlock) -> str:
        style: Dict[str, str] = {
            "left": f"{points_to_pixels(block.box.x)}px",
            "top": f"{points_to_pixels(block.box.y)}px",
            "width": f"{points_to_pixels(block.box.width)}px",
            "height": f"{points_to_pixels(block.box.height)}px",
        }
        style.update(font_css(block.font_size, self._font_family))
        if block.element_type == "title":
            style["font-weight"] = "700"

        if block.element_type == "list":
            content = self._list_html(block)
        elif block.element_type == "table":
            content = self._table_html(block)
        else:
            content = "".join(segment_to_html(segment) for segment in block.segments)

        return f"  <div class=\"slide-box\" style=\"{css_declarations(style)}\">{content}</div>"

    def _list_html(self, block: ContentBlock) -> str:
        tag = "ol" if block.list_items and block.list_items[0].is_numbered else "ul"
        items: List[str] = []
        for item in block.list_items:
            indent = f"margin-left: {item.level * 1.5}em"
            items.append(f"<li style=\"{indent}\">{html.escape(item.text)}</li>")
        return f"<{tag}>{''.join(items)}</{tag}>"

    def _table_html(self, block: ContentBlock) -> str:
        table = block.table
        if table is None:
            return ""
        header = "".join(f"<th>{html.escape(cell)}</th>" for cell in table.headers)
        rows = "".join(
            "<tr>" + "".join(f"<td>{html.escape(cell)}</td>" for cell in row) + "</tr>" for row in table.rows
        )
        return f"<table><tr>{header}</tr>{rows}</table>"

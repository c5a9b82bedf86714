"""Layout presets and formatter configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from slide_formatter.model.elements import BoxGeometry, FontRange

SLIDE_WIDTH_PT = 720.0  # 10"
SLIDE_HEIGHT_PT = 540.0  # 7.5"
DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_MAX_CHUNK_CHARS = 800
DEFAULT_TABLE_ROW_HEIGHT_PT = 40.0


class ContentKind(str, Enum):
    TITLE = "title"
    BODY = "body"
    LIST = "list"
    TABLE = "table"


class TextType(str, Enum):
    TITLE = "TITLE"
    BODY = "BODY"
    CAPTION = "CAPTION"


class SlideLayout(str, Enum):
    TITLE_AND_BODY = "TITLE_AND_BODY"
    TITLE_ONLY = "TITLE_ONLY"
    BLANK = "BLANK"


class BulletPreset(str, Enum):
    """Bullet glyph presets understood by the presentation service."""

    BULLET_DISC_CIRCLE_SQUARE = "BULLET_DISC_CIRCLE_SQUARE"
    BULLET_CIRCLE_HOLLOW = "BULLET_CIRCLE_HOLLOW"
    BULLET_DIAMOND_X = "BULLET_DIAMOND_X"
    NUMBERED_DECIMAL = "NUMBERED_DECIMAL"
    NUMBERED_ALPHA_LOWER = "NUMBERED_ALPHA_LOWER"


LAYOUT_DIMENSIONS: Dict[str, BoxGeometry] = {
    "title": BoxGeometry(x=50, y=50, width=620, height=80),
    "body": BoxGeometry(x=50, y=150, width=620, height=340),
    "full_slide": BoxGeometry(x=50, y=50, width=620, height=440),
}

FONT_SIZE_RANGES: Dict[ContentKind, FontRange] = {
    ContentKind.TITLE: FontRange(minimum=24, maximum=44, default=36),
    ContentKind.BODY: FontRange(minimum=12, maximum=24, default=18),
    ContentKind.LIST: FontRange(minimum=12, maximum=20, default=16),
    ContentKind.TABLE: FontRange(minimum=10, maximum=16, default=12),
}


def _default_boxes() -> Dict[ContentKind, BoxGeometry]:
    return {
        ContentKind.TITLE: LAYOUT_DIMENSIONS["title"],
        ContentKind.BODY: LAYOUT_DIMENSIONS["body"],
        ContentKind.LIST: LAYOUT_DIMENSIONS["body"],
        ContentKind.TABLE: LAYOUT_DIMENSIONS["body"],
    }


@dataclass(slots=True)
class FormatterConfig:
    """Options consumed by the composer; every field has a default."""

    boxes: Dict[ContentKind, BoxGeometry] = field(default_factory=_default_boxes)
    font_ranges: Dict[ContentKind, FontRange] = field(default_factory=lambda: dict(FONT_SIZE_RANGES))
    max_chunk_chars: int = DEFAULT_MAX_CHUNK_CHARS
    auto_fit: bool = True
    bullet_preset: Optional[BulletPreset] = None
    font_family: str = DEFAULT_FONT_FAMILY
    table_row_height: float = DEFAULT_TABLE_ROW_HEIGHT_PT

    def __post_init__(self) -> None:
        # hard chunks keep max_chunk_chars - 3 characters and must make progress
        if self.max_chunk_chars < 4:
            raise ValueError(f"max_chunk_chars must be at least 4, got {self.max_chunk_chars}")

    def box_for(self, kind: ContentKind) -> BoxGeometry:
        return self.boxes[kind]

    def font_range_for(self, kind: ContentKind) -> FontRange:
        return self.font_ranges[kind]

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FormatterConfig":
        """Build a config from plain values, e.g. a decoded JSON document.

        Recognized keys: ``boxes`` and ``font_ranges`` (keyed by content kind),
        ``max_chunk_chars``, ``auto_fit``, ``bullet_preset``, ``font_family`` and
        ``table_row_height``. Missing keys keep their defaults.
        """
        config = cls(max_chunk_chars=int(data.get("max_chunk_chars", DEFAULT_MAX_CHUNK_CHARS)))

        for kind_name, values in (data.get("boxes") or {}).items():
            kind = _parse_kind(kind_name)
            base = config.boxes[kind]
            config.boxes[kind] = BoxGeometry(
                x=float(values.get("x", base.x)),
                y=float(values.get("y", base.y)),
                width=float(values.get("width", base.width)),
                height=float(values.get("height", base.height)),
            )

        for kind_name, values in (data.get("font_ranges") or {}).items():
            kind = _parse_kind(kind_name)
            base_range = config.font_ranges[kind]
            config.font_ranges[kind] = FontRange(
                minimum=float(values.get("min", base_range.minimum)),
                maximum=float(values.get("max", base_range.maximum)),
                default=float(values.get("default", base_range.default)),
            )

        preset = data.get("bullet_preset")
        if preset is not None:
            try:
                config.bullet_preset = BulletPreset(preset)
            except ValueError as exc:
                raise ValueError(f"Unknown bullet preset: {preset}") from exc

        if "auto_fit" in data:
            config.auto_fit = bool(data["auto_fit"])
        if "font_family" in data:
            config.font_family = str(data["font_family"])
        if "table_row_height" in data:
            config.table_row_height = float(data["table_row_height"])
        return config


def _parse_kind(name: str) -> ContentKind:
    try:
        return ContentKind(name.lower())
    except ValueError as exc:
        raise ValueError(f"Unknown content kind: {name}") from exc

"""Aggregate model combining composed slides, blocks and their directives."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from slide_formatter.model.directive_model import Directive
from slide_formatter.model.elements import BoxGeometry, ListItem, StyledSegment, TableData


@dataclass(slots=True)
class ContentBlock:
    """A single container placed on a slide, with the content it was built from."""

    element_type: str
    object_id: str
    page_object_id: str
    box: BoxGeometry
    font_size: float
    directives: List[Directive] = field(default_factory=list)
    segments: List[StyledSegment] = field(default_factory=list)
    list_items: List[ListItem] = field(default_factory=list)
    table: Optional[TableData] = None
    properties: Dict[str, object] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.segments)


@dataclass(slots=True)
class SlideModel:
    """A slide and the blocks composed onto it."""

    object_id: str
    title: str
    blocks: List[ContentBlock] = field(default_factory=list)
    directives: List[Directive] = field(default_factory=list)

    def all_directives(self) -> List[Directive]:
        """Slide-level directives followed by each block's, in creation order."""
        ordered: List[Directive] = list(self.directives)
        for block in self.blocks:
            ordered.extend(block.directives)
        return ordered


@dataclass(slots=True)
class DeckModel:
    """Flattened deck representation that renderers consume."""

    slides: List[SlideModel] = field(default_factory=list)
    metadata: Dict[str, object] = field(default_factory=dict)

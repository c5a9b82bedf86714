"""Parse bold, italic and underline markdown spans into styled segments."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from slide_formatter.model.elements import StyledSegment

BOLD_PATTERN = re.compile(r"\*\*([^*]+)\*\*")
UNDERLINE_PATTERN = re.compile(r"__([^_]+)__")
# only searched between accepted bold and underline spans
ITALIC_PATTERN = re.compile(r"\*([^*]+)\*")


@dataclass(slots=True, frozen=True)
class SpanMatch:
    """Formatting span found in the source, with delimiters included in the offsets."""

    start: int
    end: int
    text: str
    style: str

    def overlaps(self, other: "SpanMatch") -> bool:
        return self.start < other.end and other.start < self.end


class InlineMarkdownParser:
    """Turn a markdown string into an ordered list of styled segments."""

    def __init__(self, markdown: str) -> None:
        self._markdown = markdown

    def parse(self) -> List[StyledSegment]:
        """Return contiguous segments whose texts concatenate to the plain text."""
        spans = self._collect_spans()
        if not spans:
            return [StyledSegment(text=self._markdown)]
        return self._build_segments(spans)

    # ------------------------------------------------------------------
    # Span discovery
    def _collect_spans(self) -> List[SpanMatch]:
        candidates = self._find(BOLD_PATTERN, "bold", 0, len(self._markdown))
        candidates += self._find(UNDERLINE_PATTERN, "underline", 0, len(self._markdown))
        # bold wins a tie with underline at the same offset
        candidates.sort(key=lambda span: (span.start, span.style != "bold"))

        accepted: List[SpanMatch] = []
        for candidate in candidates:
            if any(candidate.overlaps(span) for span in accepted):
                continue
            accepted.append(candidate)

        accepted.sort(key=lambda span: span.start)
        italic: List[SpanMatch] = []
        for gap_start, gap_end in self._gaps(accepted):
            italic.extend(self._find(ITALIC_PATTERN, "italic", gap_start, gap_end))

        return sorted(accepted + italic, key=lambda span: span.start)

    def _find(self, pattern: re.Pattern[str], style: str, start: int, end: int) -> List[SpanMatch]:
        # slice so matches cannot start or end inside an accepted span
        window = self._markdown[start:end]
        return [
            SpanMatch(start=start + match.start(), end=start + match.end(), text=match.group(1), style=style)
            for match in pattern.finditer(window)
        ]

    def _gaps(self, spans: Iterable[SpanMatch]) -> List[Tuple[int, int]]:
        gaps: List[Tuple[int, int]] = []
        cursor = 0
        for span in spans:
            if span.start > cursor:
                gaps.append((cursor, span.start))
            cursor = span.end
        if cursor < len(self._markdown):
            gaps.append((cursor, len(self._markdown)))
        return gaps

    # ------------------------------------------------------------------
    # Segment assembly
    def _build_segments(self, spans: List[SpanMatch]) -> List[StyledSegment]:
        segments: List[StyledSegment] = []
        cursor = 0
        for span in spans:
            if span.start > cursor:
                segments.append(StyledSegment(text=self._markdown[cursor:span.start]))
            segment = StyledSegment(text=span.text)
            setattr(segment, span.style, True)
            segments.append(segment)
            cursor = span.end

        if cursor < len(self._markdown):
            segments.append(StyledSegment(text=self._markdown[cursor:]))
        return segments


def parse_inline(markdown: str) -> List[StyledSegment]:
    """Convenience wrapper around :class:`InlineMarkdownParser`."""
    return InlineMarkdownParser(markdown).parse()


def plain_text(segments: Iterable[StyledSegment]) -> str:
    """Join segment texts back into the unformatted string."""
    return "".join(segment.text for segment in segments)

"""Split long text into slide-sized chunks along natural boundaries."""
from __future__ import annotations

from typing import List

from slide_formatter.model.layout_config import DEFAULT_MAX_CHUNK_CHARS
from slide_formatter.utils.logger import get_logger

LOGGER = get_logger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"
SENTENCE_SEPARATOR = ". "
ELLIPSIS = "..."


class TextPartitioner:
    """Break text into chunks of at most ``max_chunk_chars`` characters.

    Paragraphs are packed first; a paragraph that is too long on its own is
    split into sentences, and a sentence that is still too long is cut into
    hard chunks ending in ``...``. Separators at split points are consumed.
    """

    def __init__(self, max_chunk_chars: int = DEFAULT_MAX_CHUNK_CHARS) -> None:
        if max_chunk_chars <= len(ELLIPSIS):
            raise ValueError(f"max_chunk_chars must exceed {len(ELLIPSIS)}, got {max_chunk_chars}")
        self._limit = max_chunk_chars

    def partition(self, text: str) -> List[str]:
        if len(text) <= self._limit:
            return [text]

        chunks: List[str] = []
        current = ""

        for paragraph in text.split(PARAGRAPH_SEPARATOR):
            if self._fits_with(current, paragraph):
                current = self._join(current, paragraph, PARAGRAPH_SEPARATOR)
                continue

            if current:
                chunks.append(current)
                current = ""

            if len(paragraph) > self._limit:
                current = self._pack_sentences(paragraph, chunks)
            else:
                current = paragraph

        if current:
            chunks.append(current)

        LOGGER.debug("Partitioned %d characters into %d chunks", len(text), len(chunks))
        return chunks or [text]

    # ------------------------------------------------------------------
    # Boundary helpers
    def _pack_sentences(self, paragraph: str, chunks: List[str]) -> str:
        """Append closed sentence chunks to ``chunks`` and return the open remainder."""
        current = ""
        for sentence in paragraph.split(SENTENCE_SEPARATOR):
            if self._fits_with(current, sentence):
                current = self._join(current, sentence, SENTENCE_SEPARATOR)
                continue

            if current:
                chunks.append(self._close_sentence_chunk(current))
                current = ""

            if len(sentence) > self._limit:
                current = self._hard_chunk(sentence, chunks)
            else:
                current = sentence
        return current

    def _hard_chunk(self, sentence: str, chunks: List[str]) -> str:
        keep = self._limit - len(ELLIPSIS)
        while len(sentence) > self._limit:
            chunks.append(sentence[:keep] + ELLIPSIS)
            sentence = sentence[keep:]
        return sentence

    def _close_sentence_chunk(self, chunk: str) -> str:
        if chunk.endswith(".") or len(chunk) >= self._limit:
            return chunk
        return chunk + "."

    def _fits_with(self, current: str, piece: str) -> bool:
        # the separator allowance is counted even when the chunk is still empty
        return len(current) + len(piece) + 2 <= self._limit

    @staticmethod
    def _join(current: str, piece: str, separator: str) -> str:
        return f"{current}{separator}{piece}" if current else piece


def split_text(text: str, max_chunk_chars: int = DEFAULT_MAX_CHUNK_CHARS) -> List[str]:
    """Convenience wrapper around :class:`TextPartitioner`."""
    return TextPartitioner(max_chunk_chars).partition(text)

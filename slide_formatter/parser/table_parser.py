"""Parse GitHub-style pipe tables into header and row cells."""
from __future__ import annotations

import re
from typing import List, Optional

from slide_formatter.model.elements import TableData
from slide_formatter.utils.logger import get_logger

LOGGER = get_logger(__name__)

SEPARATOR_PATTERN = re.compile(r"^\|?[\s\-:|]+\|?$")


class TableParser:
    """Extract a :class:`TableData` from markdown, or ``None`` when it is not a table."""

    def __init__(self, markdown: str) -> None:
        self._markdown = markdown

    def parse(self) -> Optional[TableData]:
        lines = [line.strip() for line in self._markdown.split("\n") if line.strip()]
        if len(lines) < 2:
            return None

        header_line, separator_line = lines[0], lines[1]
        if "|" not in header_line or "|" not in separator_line:
            return None
        if not SEPARATOR_PATTERN.match(separator_line):
            return None

        headers = self._split_cells(header_line)
        column_count = len(headers)

        rows: List[List[str]] = []
        for line in lines[2:]:
            if "|" not in line:
                LOGGER.debug("Skipping table line without cell separators: %r", line)
                continue
            cells = self._split_cells(line)
            cells.extend([""] * (column_count - len(cells)))
            rows.append(cells[:column_count])

        return TableData(headers=headers, rows=rows)

    def _split_cells(self, line: str) -> List[str]:
        cells = [cell.strip() for cell in line.split("|")]
        # leading and trailing pipes leave one empty string at each end
        if cells and cells[0] == "":
            cells.pop(0)
        if cells and cells[-1] == "":
            cells.pop()
        return cells


def parse_table(markdown: str) -> Optional[TableData]:
    """Convenience wrapper around :class:`TableParser`."""
    return TableParser(markdown).parse()

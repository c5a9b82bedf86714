"""Parse indented bullet and numbered markdown lines into list items."""
from __future__ import annotations

import re
from typing import List

from slide_formatter.model.elements import ListItem

SPACES_PER_LEVEL = 2
BULLET_PATTERN = re.compile(r"^[-*+]\s+(.+)")
NUMBERED_PATTERN = re.compile(r"^(\d+)\.\s+(.+)")


class ListParser:
    """Converts markdown list text into flat items carrying a nesting level.

    Nesting is taken from indentation alone: levels may jump by more than one
    and numbering is never checked for order. Lines without a list marker are
    kept verbatim as plain items at their indentation level.
    """

    def __init__(self, markdown: str) -> None:
        self._markdown = markdown

    def parse(self) -> List[ListItem]:
        lines = [line for line in self._markdown.split("\n") if line.strip()]
        return [self._parse_line(line) for line in lines]

    def _parse_line(self, line: str) -> ListItem:
        trimmed = line.strip()
        leading_spaces = len(line) - len(line.lstrip())
        level = leading_spaces // SPACES_PER_LEVEL

        bullet = BULLET_PATTERN.match(trimmed)
        if bullet:
            return ListItem(text=bullet.group(1), level=level, is_numbered=False)

        numbered = NUMBERED_PATTERN.match(trimmed)
        if numbered:
            return ListItem(text=numbered.group(2), level=level, is_numbered=True)

        return ListItem(text=trimmed, level=level, is_numbered=False)


def parse_list(markdown: str) -> List[ListItem]:
    """Convenience wrapper around :class:`ListParser`."""
    return ListParser(markdown).parse()

"""Tests for markdown table parsing."""
import unittest

from slide_formatter.model.elements import TableData
from slide_formatter.parser.table_parser import TableParser, parse_table


class TableParserTest(unittest.TestCase):
    """Check header/separator detection and row normalization."""

    def test_simple_table(self) -> None:
        table = parse_table("| A | B |\n|---|---|\n| 1 | 2 |")
        self.assertEqual(table, TableData(headers=["A", "B"], rows=[["1", "2"]]))

    def test_single_line_is_not_a_table(self) -> None:
        self.assertIsNone(parse_table("just one line"))
        self.assertIsNone(parse_table(""))

    def test_second_line_must_be_separator(self) -> None:
        self.assertIsNone(parse_table("| A | B |\n| 1 | 2 |"))

    def test_lines_without_pipes_are_rejected(self) -> None:
        self.assertIsNone(parse_table("A B\n---"))
        self.assertIsNone(parse_table("| A | B |\n---"))

    def test_short_rows_are_padded(self) -> None:
        table = parse_table("| A | B | C |\n|---|---|---|\n| 1 |")
        assert table is not None
        self.assertEqual(table.rows, [["1", "", ""]])

    def test_long_rows_are_truncated(self) -> None:
        table = parse_table("| A | B |\n|:--|--:|\n| 1 | 2 | 3 |")
        assert table is not None
        self.assertEqual(table.rows, [["1", "2"]])

    def test_rows_without_pipes_are_skipped(self) -> None:
        table = TableParser("| A |\n|---|\nnot a row\n| x |").parse()
        assert table is not None
        self.assertEqual(table.rows, [["x"]])

    def test_outer_pipes_optional(self) -> None:
        table = parse_table("A | B\n--- | ---\n1 | 2")
        self.assertEqual(table, TableData(headers=["A", "B"], rows=[["1", "2"]]))

    def test_interior_empty_cells_are_kept(self) -> None:
        table = parse_table("| A | B | C |\n|---|---|---|\n| 1 |  | 3 |")
        assert table is not None
        self.assertEqual(table.rows, [["1", "", "3"]])

    def test_blank_lines_between_rows_ignored(self) -> None:
        table = parse_table("\n| A | B |\n\n| --- | --- |\n\n| 1 | 2 |\n\n| 3 | 4 |\n")
        assert table is not None
        self.assertEqual(table.rows, [["1", "2"], ["3", "4"]])

    def test_every_row_matches_header_width(self) -> None:
        markdown = "| H1 | H2 | H3 |\n| - | - | - |\n| a |\n| a | b | c | d | e |\n| a | b |\n|"
        table = parse_table(markdown)
        assert table is not None
        self.assertEqual(table.column_count, 3)
        self.assertEqual(table.row_count, 5)
        for row in table.rows:
            self.assertEqual(len(row), len(table.headers))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

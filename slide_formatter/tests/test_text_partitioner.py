"""Tests for splitting long text into slide-sized chunks."""
import unittest

from slide_formatter.parser.text_partitioner import TextPartitioner, split_text


class TextPartitionerTest(unittest.TestCase):
    """Paragraph, sentence and hard-chunk boundaries in priority order."""

    def test_text_that_fits_is_returned_unchanged(self) -> None:
        text = "a" * 800
        chunks = split_text(text)
        self.assertEqual(chunks, [text])

        text = "Line one.\n\nLine two."
        self.assertEqual(TextPartitioner(len(text)).partition(text), [text])

    def test_one_character_over_budget_splits(self) -> None:
        self.assertGreater(len(split_text("a" * 801)), 1)

    def test_hard_chunks_for_unbroken_text(self) -> None:
        chunks = split_text("A" * 2000, 800)
        self.assertEqual([len(chunk) for chunk in chunks], [800, 800, 406])
        self.assertTrue(chunks[0].endswith("..."))
        self.assertTrue(chunks[1].endswith("..."))
        self.assertEqual("".join(chunk.rstrip(".") for chunk in chunks), "A" * 2000)

    def test_paragraphs_are_packed_greedily(self) -> None:
        text = "aaaa\n\nbbbb\n\n" + "c" * 16
        self.assertEqual(TextPartitioner(20).partition(text), ["aaaa\n\nbbbb", "c" * 16])

    def test_long_paragraph_split_on_sentences(self) -> None:
        text = "First sentence here. Second sentence here. Third one"
        self.assertEqual(
            TextPartitioner(30).partition(text),
            ["First sentence here.", "Second sentence here.", "Third one"],
        )

    def test_hard_chunk_remainder_seeds_next_chunk(self) -> None:
        chunks = TextPartitioner(10).partition("abcdefghijklmnop. xy")
        self.assertEqual(chunks, ["abcdefg...", "hijklmnop.", "xy"])

    def test_trailing_period_not_added_past_budget(self) -> None:
        self.assertEqual(TextPartitioner(10).partition("abcdefghij. k"), ["abcdefghij", "k"])

    def test_chunks_never_exceed_budget(self) -> None:
        paragraphs = [
            "Short intro paragraph.",
            "This paragraph has several sentences. Each one is moderately long. "
            "Together they exceed the limit. So they must be split apart.",
            "x" * 130,
            "Closing words",
        ]
        text = "\n\n".join(paragraphs)
        for limit in (40, 64, 100):
            with self.subTest(limit=limit):
                chunks = TextPartitioner(limit).partition(text)
                self.assertGreater(len(chunks), 1)
                for chunk in chunks:
                    self.assertLessEqual(len(chunk), limit)
                    self.assertTrue(chunk)

    def test_limit_must_leave_room_for_ellipsis(self) -> None:
        with self.assertRaises(ValueError):
            TextPartitioner(3)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

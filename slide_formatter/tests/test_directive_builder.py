"""Tests for geometry and style directive assembly."""
import unittest

from slide_formatter.model.directive_model import (
    AffineTransform,
    GeometryDirective,
    InsertTextDirective,
    StyleDirective,
    TextRange,
)
from slide_formatter.model.elements import BoxGeometry, Dimensions, StyledSegment
from slide_formatter.parser.directive_builder import DirectiveBuilder
from slide_formatter.parser.inline_parser import parse_inline

BODY_BOX = BoxGeometry(x=50, y=150, width=620, height=340)


class DirectiveBuilderTest(unittest.TestCase):
    """Directives are assembled in order with running character offsets."""

    def setUp(self) -> None:
        self.builder = DirectiveBuilder()

    def test_geometry_uses_identity_scale(self) -> None:
        directive = self.builder.geometry("box1", "page1", BODY_BOX)
        self.assertEqual(directive.size, Dimensions(width=620, height=340))
        self.assertEqual(directive.transform, AffineTransform(translate_x=50, translate_y=150))
        self.assertEqual(directive.transform.scale_x, 1.0)
        self.assertEqual(directive.transform.unit, "PT")
        self.assertEqual(directive.shape_type, "TEXT_BOX")
        self.assertEqual(directive.page_object_id, "page1")

    def test_segment_ranges_follow_plain_text_offsets(self) -> None:
        segments = parse_inline("Hello **world** and *friend*")
        directives = self.builder.segment_styles("box1", segments)

        self.assertEqual(len(directives), 2)
        bold, italic = directives
        self.assertEqual(bold.text_range, TextRange(start=6, end=11))
        self.assertTrue(bold.bold)
        self.assertEqual(bold.fields, ["bold"])
        self.assertEqual(italic.text_range, TextRange(start=16, end=22))
        self.assertTrue(italic.italic)
        self.assertIsNone(italic.bold)
        self.assertEqual(italic.fields, ["italic"])

    def test_unstyled_segments_emit_nothing(self) -> None:
        segments = [StyledSegment(text="plain"), StyledSegment(text=" text")]
        self.assertEqual(self.builder.segment_styles("box1", segments), [])

    def test_explicit_font_size_becomes_a_field(self) -> None:
        segments = [StyledSegment(text="ab"), StyledSegment(text="big", font_size=30, underline=True)]
        (directive,) = self.builder.segment_styles("box1", segments)
        self.assertEqual(directive.text_range, TextRange(start=2, end=5))
        self.assertEqual(directive.fields, ["underline", "fontSize"])
        self.assertEqual(directive.font_size, 30)

    def test_text_block_order(self) -> None:
        segments = parse_inline("Hello **world**")
        directives = self.builder.build_text_block("box1", "page1", BODY_BOX, segments, 18)

        self.assertIsInstance(directives[0], GeometryDirective)
        self.assertIsInstance(directives[1], InsertTextDirective)
        self.assertEqual(directives[1].text, "Hello world")

        base = directives[2]
        self.assertIsInstance(base, StyleDirective)
        self.assertTrue(base.text_range.is_all)
        self.assertEqual(base.font_size, 18)
        self.assertEqual(base.font_family, "Arial")
        self.assertEqual(base.fields, ["fontSize", "fontFamily"])

        self.assertEqual(len(directives), 4)
        self.assertEqual(directives[3].text_range, TextRange(start=6, end=11))

    def test_bold_base_style(self) -> None:
        directive = self.builder.base_style("title1", 36, "Georgia", bold=True)
        self.assertTrue(directive.bold)
        self.assertEqual(directive.font_family, "Georgia")
        self.assertEqual(directive.fields, ["fontSize", "fontFamily", "bold"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

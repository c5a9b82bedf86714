"""Tests for converting directives into Slides API requests."""

import itertools
import unittest

from slide_formatter.model.directive_model import TextRange
from slide_formatter.model.document_model import DeckModel
from slide_formatter.parser.slide_composer import SlideComposer
from slide_formatter.renderer.slides_renderer import SlidesRequestRenderer


def counting_ids():
    counter = itertools.count(1)
    return lambda prefix: f"{prefix}_{next(counter)}"


class SlidesRequestRendererTest(unittest.TestCase):
    """Check the request shapes produced for each directive kind."""

    def setUp(self):
        self.composer = SlideComposer(id_factory=counting_ids())
        self.renderer = SlidesRequestRenderer()

    def test_text_block_requests(self):
        block = self.composer.compose_text("page1", "Hello **world**")
        requests = self.renderer.render_directives(block.directives)

        self.assertEqual(
            [next(iter(request)) for request in requests],
            ["createShape", "insertText", "updateTextStyle", "updateTextStyle", "updateShapeProperties"],
        )

        shape = requests[0]["createShape"]
        self.assertEqual(shape["shapeType"], "TEXT_BOX")
        self.assertEqual(shape["elementProperties"]["pageObjectId"], "page1")
        self.assertEqual(shape["elementProperties"]["size"]["width"], {"magnitude": 620, "unit": "PT"})
        self.assertEqual(shape["elementProperties"]["transform"]["translateX"], 50)
        self.assertEqual(shape["elementProperties"]["transform"]["scaleX"], 1.0)

        self.assertEqual(requests[1]["insertText"]["text"], "Hello world")
        self.assertEqual(requests[1]["insertText"]["insertionIndex"], 0)

        base = requests[2]["updateTextStyle"]
        self.assertEqual(base["textRange"], {"type": "ALL"})
        self.assertEqual(base["style"]["fontSize"], {"magnitude": 24, "unit": "PT"})
        self.assertEqual(base["fields"], "fontSize,fontFamily")

        bold = requests[3]["updateTextStyle"]
        self.assertEqual(bold["textRange"], {"type": "FIXED_RANGE", "startIndex": 6, "endIndex": 11})
        self.assertEqual(bold["style"], {"bold": True})
        self.assertEqual(bold["fields"], "bold")

        autofit = requests[4]["updateShapeProperties"]
        self.assertEqual(autofit["shapeProperties"]["autofit"]["autofitType"], "SHAPE_AUTOFIT")

    def test_emu_lengths(self):
        block = self.composer.compose_text("page1", "Hello")
        request = SlidesRequestRenderer(unit="EMU").render_directives(block.directives[:1])[0]
        transform = request["createShape"]["elementProperties"]["transform"]
        self.assertEqual(transform["translateX"], 635000)
        self.assertEqual(transform["unit"], "EMU")

    def test_table_requests_carry_cell_locations(self):
        block = self.composer.compose_table("page1", "| A | B |\n|---|---|\n| 1 | 2 |")
        requests = self.renderer.render_directives(block.directives)

        table = requests[0]["createTable"]
        self.assertEqual((table["rows"], table["columns"]), (2, 2))

        insert = requests[2]["insertText"]
        self.assertEqual(insert["cellLocation"], {"rowIndex": 0, "columnIndex": 1})
        self.assertEqual(insert["text"], "B")

        fill = requests[7]["updateTableCellProperties"]
        self.assertEqual(fill["tableRange"]["columnSpan"], 2)
        self.assertEqual(
            fill["tableCellProperties"]["tableCellBackgroundFill"]["solidFill"]["color"]["rgbColor"],
            {"red": 0.9, "green": 0.9, "blue": 0.9},
        )

        border = requests[-1]["updateTableBorderProperties"]
        self.assertEqual(border["borderPosition"], "ALL")
        self.assertEqual(border["tableRange"]["rowSpan"], 2)

    def test_list_bullets(self):
        block = self.composer.compose_list("page1", "- a\n  - b")
        requests = self.renderer.render_directives(block.directives)
        bullets = [request["createParagraphBullets"] for request in requests if "createParagraphBullets" in request]
        self.assertEqual(bullets[0]["textRange"], {"type": "ALL"})
        self.assertEqual(bullets[1]["textRange"], {"type": "FIXED_RANGE", "startIndex": 2, "endIndex": 5})
        self.assertEqual(bullets[1]["bulletPreset"], "BULLET_CIRCLE_HOLLOW")

    def test_render_batches_per_slide(self):
        slides = self.composer.compose_slides("Deck", "Body text")
        batches = self.renderer.render(DeckModel(slides=slides))
        self.assertEqual(len(batches), 1)
        create = batches[0][0]["createSlide"]
        self.assertEqual(create["slideLayoutReference"], {"predefinedLayout": "TITLE_AND_BODY"})
        self.assertEqual(create["insertionIndex"], 1)

    def test_fixed_range_helper(self):
        self.assertEqual(self.renderer._text_range(TextRange(start=0, end=3)),
                         {"type": "FIXED_RANGE", "startIndex": 0, "endIndex": 3})

    def test_invalid_input(self):
        with self.assertRaises(TypeError):
            self.renderer.render_directives([object()])
        with self.assertRaises(ValueError):
            SlidesRequestRenderer(unit="INCH")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()

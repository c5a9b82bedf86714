"""Entry-point for the markdown-to-slides formatting pipeline."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from slide_formatter.model.document_model import DeckModel
from slide_formatter.model.layout_config import DEFAULT_FONT_FAMILY, FormatterConfig, SlideLayout, TextType
from slide_formatter.parser.slide_composer import SlideComposer
from slide_formatter.renderer.html_renderer import HtmlRenderer
from slide_formatter.renderer.slides_renderer import SlidesRequestRenderer
from slide_formatter.utils.debug import DebugDumper
from slide_formatter.utils.logger import get_logger, set_verbosity

LOGGER = get_logger(__name__)

CONTENT_KINDS = ("slides", "text", "list", "table")


def load_config(config_path: Optional[Path]) -> FormatterConfig:
    """Read a JSON config file, or return the defaults when no path is given."""
    if config_path is None:
        return FormatterConfig()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    return FormatterConfig.from_mapping(json.loads(config_path.read_text(encoding="utf-8")))


def build_deck_model(
    markdown: str,
    title: str,
    config: Optional[FormatterConfig] = None,
    layout: SlideLayout = SlideLayout.TITLE_AND_BODY,
    kind: str = "slides",
    composer: Optional[SlideComposer] = None,
) -> DeckModel:
    """Compose markdown into a deck.

    ``slides`` splits the markdown across title-and-body slides; ``text``,
    ``list`` and ``table`` place a single block of that kind on one slide
    below a title.
    """
    if kind not in CONTENT_KINDS:
        raise ValueError(f"Unknown content kind: {kind}")

    config = config or FormatterConfig()
    composer = composer or SlideComposer(config)

    if kind == "slides":
        slides = composer.compose_slides(title, markdown, layout=layout)
    else:
        slide = composer.new_slide(title, layout=layout)
        slide_id = slide.object_id
        slide.blocks.append(composer.compose_text(slide_id, title, text_type=TextType.TITLE))
        if kind == "text":
            slide.blocks.append(composer.compose_text(slide_id, markdown))
        elif kind == "list":
            slide.blocks.append(composer.compose_list(slide_id, markdown))
        else:
            slide.blocks.append(composer.compose_table(slide_id, markdown))
        slides = [slide]

    return DeckModel(slides=slides, metadata={"title": title, "kind": kind, "contentLength": len(markdown)})


def render_outputs(
    model: DeckModel,
    output_dir: Path,
    *,
    html: bool = True,
    requests: bool = True,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> None:
    """Render the deck model into the requested formats."""
    output_dir.mkdir(parents=True, exist_ok=True)
    if html:
        HtmlRenderer(output_dir / "slides.html", font_family=font_family).render(model)
    if requests:
        batches = SlidesRequestRenderer().render(model)
        payload = [{"requests": batch} for batch in batches]
        (output_dir / "requests.json").write_text(json.dumps(payload, indent=2), encoding="utf-8")


def main(
    markdown_file: str,
    output_dir: Optional[str] = None,
    title: Optional[str] = None,
    config_file: Optional[str] = None,
    layout: str = SlideLayout.TITLE_AND_BODY.value,
    kind: str = "slides",
    html: bool = True,
) -> DeckModel:
    """Run the markdown → deck model → renderer pipeline."""
    markdown_path = Path(markdown_file).resolve()
    if not markdown_path.exists():
        raise FileNotFoundError(f"Markdown file not found: {markdown_path}")

    config = load_config(Path(config_file) if config_file else None)
    markdown = markdown_path.read_text(encoding="utf-8")

    LOGGER.info("Building deck model for %s", markdown_path.name)
    model = build_deck_model(
        markdown,
        title or markdown_path.stem,
        config=config,
        layout=SlideLayout(layout),
        kind=kind,
    )

    output_path = Path(output_dir).resolve() if output_dir else markdown_path.with_suffix("")
    LOGGER.info("Rendering %d slide(s) into %s", len(model.slides), output_path)
    render_outputs(model, output_path, html=html, font_family=config.font_family)

    DebugDumper(output_path / "debug").dump(model)
    return model


if __name__ == "__main__":  # pragma: no cover
    import argparse

    parser = argparse.ArgumentParser(description="Format markdown into slide layout and style directives")
    parser.add_argument("markdown_file", help="Path to the input markdown file")
    parser.add_argument("--output", help="Directory to write generated artifacts")
    parser.add_argument("--title", help="Slide title (defaults to the file name)")
    parser.add_argument("--config", help="JSON file with formatter options")
    parser.add_argument("--layout", choices=[item.value for item in SlideLayout], default=SlideLayout.TITLE_AND_BODY.value)
    parser.add_argument("--kind", choices=CONTENT_KINDS, default="slides", help="How to interpret the markdown")
    parser.add_argument("--no-html", action="store_true", help="Skip the HTML preview")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    set_verbosity(args.verbose)
    main(
        args.markdown_file,
        output_dir=args.output,
        title=args.title,
        config_file=args.config,
        layout=args.layout,
        kind=args.kind,
        html=not args.no_html,
    )

"""Render one side of a card stored as JSON.

Writes the composed HTML page and reports which media references the
side plays, in order.

Usage:
    uv run render-card card.json                     # front, HTML to stdout
    uv run render-card card.json --side back -o a.html
    uv run render-card card.json --side back --text  # plain text preview
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from selectolax.lexbor import LexborHTMLParser

from cardhtml import setup_logging
from cardhtml.config import get_settings, log_settings_source
from cardhtml.media.tag_pattern import strip_sounds
from cardhtml.models import Side, StaticCard
from cardhtml.render.card_html import CardHtml, HtmlGenerator
from cardhtml.render.side_resolver import InvalidSideRequestError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cardhtml.config import Settings
    from cardhtml.models import MediaReference

logger = logging.getLogger(__name__)

# HTML goes to stdout; everything for the user goes to stderr
console = Console(stderr=True)

EXIT_OK = 0
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="render-card",
        description="Render one side of a flashcard to HTML.",
    )
    parser.add_argument("card", type=Path, help="Card JSON file")
    parser.add_argument(
        "--side",
        choices=[side.value for side in Side],
        default=Side.FRONT.value,
        help="Side to render (default: front)",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="Write HTML here instead of stdout"
    )
    parser.add_argument(
        "--text",
        action="store_true",
        help="Print a plain text preview of the side",
    )
    parser.add_argument(
        "--no-replay-question",
        dest="replay_question",
        action="store_false",
        default=None,
        help="On the back, do not replay the front's audio",
    )
    return parser


def load_card(path: Path) -> StaticCard:
    """Load and validate a card JSON file.

    Raises:
        OSError: If the file cannot be read.
        ValidationError: If the JSON does not describe a card.
    """
    return StaticCard.model_validate_json(path.read_text(encoding="utf-8"))


def text_preview(html: str) -> str:
    """Visible text of a rendered page, sound references removed."""
    if not html:
        return ""
    tree = LexborHTMLParser(html)
    for node in tree.css("script, style"):
        node.decompose()
    root = tree.body or tree.root
    if root is None:
        return ""
    text = root.text(separator=" ", strip=True)
    return " ".join(strip_sounds(text).split())


def _playback_table(side: Side, queue: Sequence[MediaReference]) -> Table:
    table = Table(title=f"Playback on {side}")
    table.add_column("#", justify="right")
    table.add_column("File")
    table.add_column("Kind")
    for index, reference in enumerate(queue):
        kind = "video" if reference.is_video else "audio"
        table.add_row(str(index), reference.filename, kind)
    return table


def _resolve_queue(
    card_html: CardHtml, replay_question: bool
) -> tuple[MediaReference, ...]:
    """Playback queue, falling back to the side's own media.

    A card without precomputed front media cannot replay the front from
    the back; the back's own references are played instead.
    """
    try:
        return card_html.get_playback_queue(replay_question)
    except InvalidSideRequestError as e:
        logger.warning("Front media unavailable on back side: %s", e)
        console.print(
            "[yellow]Front media unknown for this card; "
            "playing back side only.[/]"
        )
        return card_html.get_sound_tags(card_html.side)


def render(args: argparse.Namespace, settings: Settings) -> int:
    """Render the requested side; return a process exit code."""
    try:
        card = load_card(args.card)
    except OSError as e:
        console.print(f"[red]Cannot read card file:[/] {e}")
        return EXIT_BAD_INPUT
    except ValidationError as e:
        console.print(f"[red]Invalid card file {args.card}:[/]")
        console.print(str(e), markup=False)
        return EXIT_BAD_INPUT

    side = Side(args.side)
    context = HtmlGenerator.from_settings(settings)
    card_html = CardHtml.create(card, side, context)
    html = card_html.get_template_html()

    if args.output is not None:
        try:
            args.output.write_text(html, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Cannot write output file:[/] {e}")
            return EXIT_BAD_INPUT
        console.print(f"Wrote [bold]{args.output}[/]")
    else:
        sys.stdout.write(html)

    replay_question = (
        settings.playback.replay_question
        if args.replay_question is None
        else args.replay_question
    )
    queue = _resolve_queue(card_html, replay_question)
    if queue:
        console.print(_playback_table(side, queue))
    else:
        console.print(f"[dim]No media on {side}.[/]")

    if args.text:
        console.print(text_preview(html), markup=False)

    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for ``render-card``."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings)
    log_settings_source(settings)
    sys.exit(render(args, settings))

"""Rendering of one card side into displayable HTML.

``CardHtml`` ties the pieces together for a single side rendering:

1. the side's expanded text is escaped, filtered and wrapped in the
   ``qa`` div (the display string);
2. media references are resolved through a ``SideResolver`` built for the
   displayed side, with front-side audio removed from the back;
3. the display string becomes the final page via ``CardTemplate``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cardhtml.media.filenames import escape_media_filenames
from cardhtml.media.tag_pattern import expand_sounds
from cardhtml.models import Side
from cardhtml.render.appearance import (
    MATHJAX_CARD_CLASS,
    CardAppearance,
    fix_bold_style,
)
from cardhtml.render.frontside import (
    FRONT_SIDE_MARKER,
    CardBackContent,
    embedded_front_references,
)
from cardhtml.render.mathjax import text_contains_mathjax
from cardhtml.render.side_resolver import SideResolver
from cardhtml.render.template import CardTemplate, mathjax_scripts

if TYPE_CHECKING:
    from cardhtml.config import Settings
    from cardhtml.models import MediaReference
    from cardhtml.render.protocol import BackContentProvider, Card, HtmlContext

logger = logging.getLogger(__name__)


@dataclass
class HtmlGenerator:
    """Default ``HtmlContext``: sound buttons, no type-answer processing."""

    card_template: CardTemplate = field(default_factory=CardTemplate)
    card_appearance: CardAppearance = field(default_factory=CardAppearance)
    front_side_marker: str = FRONT_SIDE_MARKER
    mathjax_script_base: str = "/assets/mathjax"

    @classmethod
    def from_settings(cls, settings: Settings) -> HtmlGenerator:
        render = settings.render
        template = (
            CardTemplate.from_path(render.card_template_path)
            if render.card_template_path is not None
            else CardTemplate()
        )
        return cls(
            card_template=template,
            card_appearance=CardAppearance.from_config(settings.appearance),
            front_side_marker=render.front_side_marker,
            mathjax_script_base=render.mathjax_script_base,
        )

    def expand_sounds(
        self,
        content: str,
        side: Side,
        embedded_front: tuple[MediaReference, ...] = (),
    ) -> str:
        return expand_sounds(content, side, embedded_front)

    def filter_type_answer(self, content: str, side: Side) -> str:
        return content

    def requires_mathjax(self, content: str) -> bool:
        return text_contains_mathjax(content)

    def scripts(self, requires_mathjax: bool) -> str:
        return mathjax_scripts(requires_mathjax, self.mathjax_script_base)


def enrich_with_qa_div(content: str) -> str:
    """Wrap *content* in the div marking where question/answer is displayed."""
    return f'<div id="qa">{content}</div>'


class CardHtml:
    """The renderable form of one side of a card.

    Args:
        content: Display string of *side*, before sound expansion.
        card_ord: Zero-based template ordinal of the card.
        context: Rendering collaborators.
        side: The side *content* was generated from.
        back_provider: Source of the back text, front audio removed.
        front_references: Front references, if already known.
        back_references: Back references, if already known.
        embedded_front_references: On the back, the front references the
            answer format embeds; their buttons replay the front's audio.
    """

    def __init__(
        self,
        content: str,
        card_ord: int,
        context: HtmlContext,
        side: Side,
        back_provider: BackContentProvider,
        front_references: tuple[MediaReference, ...] | None = None,
        back_references: tuple[MediaReference, ...] | None = None,
        embedded_front_references: tuple[MediaReference, ...] = (),
    ) -> None:
        self._content = content
        self._embedded_front = embedded_front_references
        self._ord = card_ord
        self._context = context
        self._side = side
        self._resolver = SideResolver(
            side,
            content,
            back_provider,
            front_references=front_references,
            back_references=back_references,
        )

    @classmethod
    def create(cls, card: Card, side: Side, context: HtmlContext) -> CardHtml:
        """Build the rendering of *side* for *card*."""
        embedded_front = (
            embedded_front_references(
                card.answer_format,
                card.front_rendered_text,
                context.front_side_marker,
            )
            if side is Side.BACK
            else ()
        )
        return cls(
            _display_string(card, side, context),
            card.ord,
            context,
            side,
            CardBackContent(card, context.front_side_marker),
            front_references=card.precomputed_references(Side.FRONT),
            back_references=card.precomputed_references(Side.BACK),
            embedded_front_references=embedded_front,
        )

    @property
    def side(self) -> Side:
        return self._side

    def get_sound_tags(self, side_for: Side) -> tuple[MediaReference, ...]:
        """Media references of *side_for*; see ``SideResolver.get_references``."""
        return self._resolver.get_references(side_for)

    def get_playback_queue(
        self, replay_question: bool = True
    ) -> tuple[MediaReference, ...]:
        """References to play when this side is shown.

        On the back, the front's references come first when
        *replay_question* is set.
        """
        if self._side is Side.BACK and replay_question:
            return self.get_sound_tags(Side.FRONT) + self.get_sound_tags(Side.BACK)
        return self.get_sound_tags(self._side)

    def get_template_html(self) -> str:
        content = self._get_content()
        requires_mathjax = self._context.requires_mathjax(content)

        style = self._context.card_appearance.style
        script = self._context.scripts(requires_mathjax)
        card_class = self._get_card_class(requires_mathjax)

        logger.debug("content card = \n %s", content)
        logger.debug("::style:: / %s", style)

        return self._context.card_template.render(content, style, script, card_class)

    def _get_content(self) -> str:
        content = self._context.expand_sounds(
            self._content, self._side, self._embedded_front
        )
        return fix_bold_style(content)

    def _get_card_class(self, requires_mathjax: bool) -> str:
        card_class = self._context.card_appearance.get_card_class(self._ord + 1)
        if requires_mathjax:
            return f"{card_class} {MATHJAX_CARD_CLASS}"
        return card_class


def _display_string(card: Card, side: Side, context: HtmlContext) -> str:
    """Side text as shown in the web view: media escaped, type-answer applied."""
    content = card.question_html() if side is Side.FRONT else card.answer_html()
    content = escape_media_filenames(content)
    content = context.filter_type_answer(content, side)
    logger.debug("%s: '%s'", side, content)
    return enrich_with_qa_div(content)

"""Protocols for the collaborators of the card renderer.

The renderer never expands templates or stores styles itself. Cards and
render contexts are accepted through these protocols, so ``StaticCard``,
``HtmlGenerator`` and test stubs can be used interchangeably.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cardhtml.models import MediaReference, Side
    from cardhtml.render.appearance import CardAppearance
    from cardhtml.render.template import CardTemplate


class BackContentProvider(Protocol):
    """Supplies the back's text on demand for media reference extraction."""

    def back_content_without_front_side(self) -> str:
        """Return the expanded back text with front-side audio removed.

        May be expensive; callers invoke it at most once per rendering.
        """
        ...


class Card(Protocol):
    """A card whose templates have been expanded by the template engine."""

    @property
    def ord(self) -> int:
        """Zero-based template ordinal."""
        ...

    @property
    def answer_format(self) -> str:
        """The answer template as entered by the user, without any parsing."""
        ...

    @property
    def front_rendered_text(self) -> str:
        """Front text as substituted for the front-side marker."""
        ...

    def question_html(self) -> str:
        """Expanded front text."""
        ...

    def answer_html(self) -> str:
        """Expanded back text."""
        ...

    def precomputed_references(
        self, side: Side
    ) -> tuple[MediaReference, ...] | None:
        """Media references already known for *side*, or None."""
        ...


class HtmlContext(Protocol):
    """Rendering inputs that are not part of the card."""

    @property
    def card_template(self) -> CardTemplate: ...

    @property
    def card_appearance(self) -> CardAppearance: ...

    @property
    def front_side_marker(self) -> str: ...

    def expand_sounds(
        self,
        content: str,
        side: Side,
        embedded_front: tuple[MediaReference, ...] = (),
    ) -> str:
        """Turn sound references into playable markup.

        *embedded_front* lists the front references copied into the back by
        the front-side marker; their buttons link to the front's audio.
        """
        ...

    def filter_type_answer(self, content: str, side: Side) -> str:
        """Apply type-in-the-answer processing to *content*."""
        ...

    def requires_mathjax(self, content: str) -> bool:
        """Whether *content* needs the MathJax scripts."""
        ...

    def scripts(self, requires_mathjax: bool) -> str:
        """Script block to include in the page."""
        ...

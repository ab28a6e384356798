"""Removal of audio duplicated into the back by ``{{FrontSide}}``.

When an answer template includes the front side, the back's expanded
text repeats every sound reference of the front. The front already owns
those references, so the first copy of each is removed from the back
before the back's own references are extracted. Later copies are ones the
back template introduced itself and are kept.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cardhtml.media.tag_pattern import extract_references, find_all

if TYPE_CHECKING:
    from cardhtml.models import MediaReference
    from cardhtml.render.protocol import Card

logger = logging.getLogger(__name__)

FRONT_SIDE_MARKER = "{{FrontSide}}"


def strip_front_side_audio(back_content: str, front_rendered_text: str) -> str:
    """Remove the first occurrence of each front reference from the back.

    Args:
        back_content: Expanded back text.
        front_rendered_text: Front text as it was embedded in the back.

    Returns:
        The back text with at most one occurrence of each distinct front
        reference removed. References missing from the back are ignored.
    """
    seen: set[str] = set()
    for match in find_all(front_rendered_text):
        tag = match.reference.tag
        if tag in seen:
            continue
        seen.add(tag)
        back_content = back_content.replace(tag, "", 1)
    return back_content


def remove_front_side_audio(
    answer_format: str,
    back_content: str,
    front_rendered_text: str,
    marker: str = FRONT_SIDE_MARKER,
) -> str:
    """Strip front-side audio from the back only if the format embeds it.

    Args:
        answer_format: The raw answer template.
        back_content: Expanded back text.
        front_rendered_text: Front text as it was embedded in the back.
        marker: The front-side inclusion placeholder.

    Returns:
        Stripped back text, or *back_content* unchanged when the answer
        format does not contain *marker*.
    """
    if marker not in answer_format:
        return back_content
    logger.debug("Answer format includes %s, removing front audio", marker)
    return strip_front_side_audio(back_content, front_rendered_text)


def embedded_front_references(
    answer_format: str,
    front_rendered_text: str,
    marker: str = FRONT_SIDE_MARKER,
) -> tuple[MediaReference, ...]:
    """References the answer format copies into the back via *marker*.

    Empty when the answer format does not embed the front side.
    """
    if marker not in answer_format:
        return ()
    return extract_references(front_rendered_text)


class CardBackContent:
    """``BackContentProvider`` reading the back text of a card."""

    def __init__(self, card: Card, marker: str = FRONT_SIDE_MARKER) -> None:
        self._card = card
        self._marker = marker

    def back_content_without_front_side(self) -> str:
        return remove_front_side_audio(
            self._card.answer_format,
            self._card.answer_html(),
            self._card.front_rendered_text,
            self._marker,
        )

"""Recognition of embedded ``[sound:...]`` references in card text.

Pure functions over a compiled pattern; no state is kept between calls.
Arbitrary text is accepted and text without references yields nothing.
"""

# Pattern: Functional Core (pure functions for tag detection and rewriting)

from __future__ import annotations

import html as html_module
import re
from typing import TYPE_CHECKING, NamedTuple

from cardhtml.models import MediaReference, Side

if TYPE_CHECKING:
    from collections.abc import Sequence

# Format: [sound:{filename}] for both audio and video media
SOUND_PATTERN = re.compile(r"\[sound:([^\[\]]*)\]")

# Side prefixes used in playsound: links
_SIDE_PREFIX: dict[Side, str] = {Side.FRONT: "q", Side.BACK: "a"}

_REPLAY_BUTTON = (
    '<a class="replay-button soundLink" href="playsound:{prefix}:{index}" '
    'title="{title}"><svg class="playImage" viewBox="0 0 64 64" '
    'version="1.1"><circle cx="32" cy="32" r="29" />'
    '<path d="M56.502,32.301l-37.502,20.101l0.329,-40.804l37.173,20.703Z" />'
    "</svg></a>"
)


class TagMatch(NamedTuple):
    """A located reference: ``span`` is the (start, end) offset in the text."""

    span: tuple[int, int]
    reference: MediaReference


def find_all(text: str) -> list[TagMatch]:
    """Find every sound reference in *text*, left to right.

    Args:
        text: Expanded card text, possibly containing HTML.

    Returns:
        One TagMatch per occurrence, in order of appearance. Empty when
        the text holds no references.
    """
    if not text:
        return []
    return [
        TagMatch(m.span(), MediaReference(tag=m.group(0), filename=m.group(1)))
        for m in SOUND_PATTERN.finditer(text)
    ]


def extract_references(text: str) -> tuple[MediaReference, ...]:
    """Return the media references of *text* in order of appearance."""
    return tuple(match.reference for match in find_all(text))


def expand_sounds(
    text: str,
    side: Side,
    embedded_front: Sequence[MediaReference] = (),
) -> str:
    """Replace each sound reference with a replay button.

    Buttons link to ``playsound:{q|a}:{index}`` where index counts the
    references of this side from zero.

    Args:
        text: Expanded text of *side*.
        side: The side *text* belongs to.
        embedded_front: On the back, the front's references as embedded by
            the front-side marker. The first occurrence of each links to its
            front index (``playsound:q:N``) and is not counted as a back
            reference. Ignored on the front.
    """
    prefix = _SIDE_PREFIX[side]
    counter = 0
    pending: dict[str, int] = {}
    if side is Side.BACK:
        for index, reference in enumerate(embedded_front):
            pending.setdefault(reference.tag, index)

    def replace(m: re.Match[str]) -> str:
        nonlocal counter
        title = html_module.escape(m.group(1), quote=True)
        front_index = pending.pop(m.group(0), None)
        if front_index is not None:
            return _REPLAY_BUTTON.format(
                prefix=_SIDE_PREFIX[Side.FRONT], index=front_index, title=title
            )
        button = _REPLAY_BUTTON.format(prefix=prefix, index=counter, title=title)
        counter += 1
        return button

    return SOUND_PATTERN.sub(replace, text)


def strip_sounds(text: str) -> str:
    """Remove every sound reference from *text*."""
    return SOUND_PATTERN.sub("", text)

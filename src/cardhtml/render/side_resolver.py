"""Per-side media reference resolution with lazy, memoised slots.

A resolver is built for the side being displayed and holds that side's
expanded text. Each side's references live in a slot that moves once from
``Unset`` to ``Supplied`` or ``Computed`` and never changes afterwards.

Resolution is deliberately asymmetric:

- the back of a card can always be derived from front state, by asking the
  ``BackContentProvider`` for the back text (expensive, done at most once);
- the front cannot be rebuilt from back state, so a back-side resolver can
  only answer for the front if the front references were supplied at
  construction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from cardhtml.media.tag_pattern import extract_references
from cardhtml.models import MediaReference, Side

if TYPE_CHECKING:
    from cardhtml.render.protocol import BackContentProvider

logger = logging.getLogger(__name__)


class InvalidSideRequestError(RuntimeError):
    """The front was requested from a back-side resolver without front data."""


@dataclass(frozen=True, slots=True)
class Unset:
    """Slot not populated yet."""


@dataclass(frozen=True, slots=True)
class Supplied:
    """References handed in at construction by an earlier rendering pass."""

    references: tuple[MediaReference, ...]


@dataclass(frozen=True, slots=True)
class Computed:
    """References extracted by this resolver."""

    references: tuple[MediaReference, ...]


SlotState: TypeAlias = Unset | Supplied | Computed


def _initial_slot(references: tuple[MediaReference, ...] | None) -> SlotState:
    if references is None:
        return Unset()
    return Supplied(tuple(references))


class SideResolver:
    """Resolve the media references of either side of one card rendering.

    Args:
        side: The side *content* was generated from.
        content: Expanded text of *side*.
        back_provider: Source of the back's text, front audio removed.
        front_references: Front references from a prior rendering pass.
        back_references: Back references from a prior rendering pass.
    """

    def __init__(
        self,
        side: Side,
        content: str,
        back_provider: BackContentProvider,
        *,
        front_references: tuple[MediaReference, ...] | None = None,
        back_references: tuple[MediaReference, ...] | None = None,
    ) -> None:
        self._side = side
        self._content = content
        self._back_provider = back_provider
        self._slots: dict[Side, SlotState] = {
            Side.FRONT: _initial_slot(front_references),
            Side.BACK: _initial_slot(back_references),
        }

    @property
    def side(self) -> Side:
        return self._side

    @property
    def content(self) -> str:
        return self._content

    def get_references(self, for_side: Side) -> tuple[MediaReference, ...]:
        """Return the ordered media references of *for_side*.

        Repeated calls return the same tuple object.

        Raises:
            InvalidSideRequestError: If the front is requested from a
                back-side resolver that was not given front references.
        """
        match self._slots[for_side]:
            case Supplied(references) | Computed(references):
                return references
            case Unset():
                pass

        if for_side is Side.FRONT and self._side is Side.BACK:
            logger.warning(
                "Front references requested from back-side resolver "
                "without supplied front references"
            )
            msg = "front references were not supplied to a back-side resolver"
            raise InvalidSideRequestError(msg)

        references = extract_references(self._source_text(for_side))
        self._slots[for_side] = Computed(references)
        logger.debug("Computed %d %s reference(s)", len(references), for_side)
        return references

    def _source_text(self, for_side: Side) -> str:
        if for_side is Side.FRONT:
            return self._content
        # The held back content still carries the front's audio when the
        # answer embeds the front side, so the back always comes from the
        # provider.
        logger.debug("Recomputing back content for reference extraction")
        return self._back_provider.back_content_without_front_side()

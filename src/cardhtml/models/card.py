"""Data models for card sides, media references and plain-data cards.

``Side`` and ``MediaReference`` are the values flowing through the
renderer. ``StaticCard`` is a pydantic model holding already-expanded
card text, used wherever a card comes from plain data (JSON files, tests).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import PurePosixPath

from pydantic import BaseModel, Field, model_validator

# Extensions played as video rather than audio
VIDEO_EXTENSIONS = frozenset(
    ("3gp", "avi", "flv", "m4v", "mkv", "mov", "mp4", "mpeg", "mpg", "ogv", "webm")
)


class Side(StrEnum):
    """The two faces of a flashcard."""

    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True, slots=True)
class MediaReference:
    """One ``[sound:...]`` occurrence in rendered card text.

    Attributes:
        tag: The full textual reference, e.g. ``[sound:a.mp3]``.
        filename: The media filename inside the tag, e.g. ``a.mp3``.
    """

    tag: str
    filename: str

    @classmethod
    def from_filename(cls, filename: str) -> MediaReference:
        return cls(tag=f"[sound:{filename}]", filename=filename)

    @property
    def is_video(self) -> bool:
        suffix = PurePosixPath(self.filename).suffix.lower().lstrip(".")
        return suffix in VIDEO_EXTENSIONS


class StaticCard(BaseModel):
    """A card whose template text has already been expanded.

    Attributes:
        ord: Zero-based template ordinal.
        question: Expanded front text, including ``[sound:...]`` tags.
        answer: Expanded back text; contains the front text when the
            answer format uses ``{{FrontSide}}``.
        answer_format: The raw, unparsed answer template.
        question_text: Front text as it was substituted for
            ``{{FrontSide}}``. Defaults to ``question``.
        css: Note type stylesheet.
        question_sounds: Filenames of the front's media, if already known.
        answer_sounds: Filenames of the back's media, if already known.
    """

    ord: int = Field(default=0, ge=0)
    question: str = ""
    answer: str = ""
    answer_format: str = ""
    question_text: str | None = None
    css: str = ""
    question_sounds: list[str] | None = None
    answer_sounds: list[str] | None = None

    @model_validator(mode="after")
    def _default_question_text(self) -> StaticCard:
        if self.question_text is None:
            self.question_text = self.question
        return self

    @property
    def front_rendered_text(self) -> str:
        return self.question_text or ""

    def question_html(self) -> str:
        return self._with_css(self.question)

    def answer_html(self) -> str:
        return self._with_css(self.answer)

    def _with_css(self, text: str) -> str:
        if not self.css:
            return text
        return f"<style>{self.css}</style>{text}"

    def precomputed_references(
        self, side: Side
    ) -> tuple[MediaReference, ...] | None:
        """Return the media references supplied for *side*, or None."""
        names = self.question_sounds if side is Side.FRONT else self.answer_sounds
        if names is None:
            return None
        return tuple(MediaReference.from_filename(name) for name in names)

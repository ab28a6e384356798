"""Data models for card rendering."""

from cardhtml.models.card import (
    VIDEO_EXTENSIONS,
    MediaReference,
    Side,
    StaticCard,
)

__all__ = [
    "VIDEO_EXTENSIONS",
    "MediaReference",
    "Side",
    "StaticCard",
]

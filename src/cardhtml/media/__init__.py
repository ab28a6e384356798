"""Media reference detection and media filename handling."""

from cardhtml.media.filenames import escape_media_filenames
from cardhtml.media.tag_pattern import (
    SOUND_PATTERN,
    TagMatch,
    expand_sounds,
    extract_references,
    find_all,
    strip_sounds,
)

__all__ = [
    "SOUND_PATTERN",
    "TagMatch",
    "escape_media_filenames",
    "expand_sounds",
    "extract_references",
    "find_all",
    "strip_sounds",
]

"""Detection of MathJax delimiters in card content."""

from __future__ import annotations

import re

# \( inline \) and \[ display \] delimiters, possibly spanning lines
_MATHJAX_PATTERN = re.compile(r"\\\(.*?\\\)|\\\[.*?\\\]", re.DOTALL)


def text_contains_mathjax(text: str) -> bool:
    """Return True if *text* holds a complete MathJax inline or display block."""
    return _MATHJAX_PATTERN.search(text) is not None

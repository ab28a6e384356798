"""Composition of the final card markup from a fixed page shell.

The shell holds four placeholders, each substituted verbatim:
``::content::``, ``::style::``, ``::script::`` and ``::class::``.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONTENT_PLACEHOLDER = "::content::"
STYLE_PLACEHOLDER = "::style::"
SCRIPT_PLACEHOLDER = "::script::"
CLASS_PLACEHOLDER = "::class::"

_PLACEHOLDER_PATTERN = re.compile(r"::(?:content|style|script|class)::")

DEFAULT_CARD_TEMPLATE = """<!doctype html>
<html class="mobile js">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
</head>
<body class="::class::">
<div id="content">
::content::
</div>
<style>
::style::
</style>
::script::
</body>
</html>
"""

_MATHJAX_SCRIPTS = (
    '        <script src="{base}/conf.js"> </script>\n'
    '        <script src="{base}/tex-chtml.js"> </script>'
)


def mathjax_scripts(requires_mathjax: bool, base: str = "/assets/mathjax") -> str:
    """Return the script block: empty, or the two MathJax inclusion lines."""
    if not requires_mathjax:
        return ""
    return _MATHJAX_SCRIPTS.format(base=base.rstrip("/"))


class CardTemplate:
    """A page shell into which rendered card parts are substituted."""

    def __init__(self, template: str = DEFAULT_CARD_TEMPLATE) -> None:
        self._template = template

    @classmethod
    def from_path(cls, path: Path) -> CardTemplate:
        """Load a shell from *path*. ``OSError`` propagates to the caller."""
        logger.info("Loading card template from %s", path)
        return cls(path.read_text(encoding="utf-8"))

    @property
    def template(self) -> str:
        return self._template

    def render(self, content: str, style: str, script: str, card_class: str) -> str:
        """Substitute the four card parts into the shell.

        Values are inserted in a single pass, so placeholder text inside
        *content* is never substituted again.
        """
        values = {
            CONTENT_PLACEHOLDER: content,
            STYLE_PLACEHOLDER: style,
            SCRIPT_PLACEHOLDER: script,
            CLASS_PLACEHOLDER: card_class,
        }
        return _PLACEHOLDER_PATTERN.sub(lambda m: values[m.group(0)], self._template)

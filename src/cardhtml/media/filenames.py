"""Percent-encoding of local media filenames referenced from card HTML.

Card fields store media filenames verbatim (spaces, ``#``, non-ASCII).
The web view resolves ``src`` attributes as URLs, so local names must be
encoded before display. Remote URLs and data URIs pass through unchanged.
"""

from __future__ import annotations

import html as html_module
import re
from urllib.parse import quote, unquote

# A media start tag; quoted values may contain ">"
_MEDIA_TAG_PATTERN = re.compile(
    r"<(?:img|audio|video|source)\b(?:[^>\"']|\"[^\"]*\"|'[^']*')*>",
    re.IGNORECASE,
)

# One name=value attribute. Quoted values are consumed whole, so text such
# as alt="src=x" never starts an attribute match.
_ATTRIBUTE_PATTERN = re.compile(
    r"(?P<lead>\s)(?P<name>[^\s=/>\"']+)(?P<eq>\s*=\s*)"
    r"(?:\"(?P<dq>[^\"]*)\"|'(?P<sq>[^']*)'|(?P<uq>[^\s\"'>]+))"
)

# Anything starting with a URL scheme (http:, https:, data:, file:, ...)
_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:")


def _escape_filename(value: str) -> str:
    if not value or _SCHEME_PATTERN.match(value) or value.startswith("//"):
        return value
    if unquote(value) != value:
        # Already escaped
        return value
    return quote(html_module.unescape(value), safe="/")


def escape_media_filenames(html: str) -> str:
    """Percent-encode local filenames in media ``src`` attributes.

    Only an attribute named exactly ``src`` is rewritten; ``data-src`` and
    attribute values that happen to contain ``src=`` are left alone.

    Args:
        html: Card HTML.

    Returns:
        HTML with ``img``/``audio``/``video``/``source`` sources escaped;
        the original quote style of each attribute is kept.
    """
    if not html or "src" not in html.lower():
        return html

    def replace_attribute(m: re.Match[str]) -> str:
        if m.group("name").lower() != "src":
            return m.group(0)
        prefix = f"{m.group('lead')}{m.group('name')}{m.group('eq')}"
        if m.group("dq") is not None:
            return f'{prefix}"{_escape_filename(m.group("dq"))}"'
        if m.group("sq") is not None:
            return f"{prefix}'{_escape_filename(m.group('sq'))}'"
        return f"{prefix}{_escape_filename(m.group('uq'))}"

    def replace_tag(m: re.Match[str]) -> str:
        return _ATTRIBUTE_PATTERN.sub(replace_attribute, m.group(0))

    return _MEDIA_TAG_PATTERN.sub(replace_tag, html)

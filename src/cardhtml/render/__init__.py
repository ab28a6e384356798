"""Card side rendering: markup composition and media reference resolution."""

from cardhtml.render.appearance import CardAppearance, fix_bold_style
from cardhtml.render.card_html import CardHtml, HtmlGenerator, enrich_with_qa_div
from cardhtml.render.frontside import (
    FRONT_SIDE_MARKER,
    CardBackContent,
    embedded_front_references,
    remove_front_side_audio,
    strip_front_side_audio,
)
from cardhtml.render.mathjax import text_contains_mathjax
from cardhtml.render.side_resolver import InvalidSideRequestError, SideResolver
from cardhtml.render.template import CardTemplate, mathjax_scripts

__all__ = [
    "FRONT_SIDE_MARKER",
    "CardAppearance",
    "CardBackContent",
    "CardHtml",
    "CardTemplate",
    "HtmlGenerator",
    "InvalidSideRequestError",
    "SideResolver",
    "embedded_front_references",
    "enrich_with_qa_div",
    "fix_bold_style",
    "mathjax_scripts",
    "remove_front_side_audio",
    "strip_front_side_audio",
    "text_contains_mathjax",
]

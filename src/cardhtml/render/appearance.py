"""Viewer styling: zoom CSS, card classes and bold weight fix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cardhtml.config import AppearanceConfig

MATHJAX_CARD_CLASS = "mathjax-needs-to-render"
NIGHT_MODE_CLASSES = "night_mode nightMode"


@dataclass(frozen=True)
class CardAppearance:
    """Appearance settings applied to every rendered card.

    Attributes:
        card_zoom: Text zoom in percent.
        image_zoom: Image zoom in percent.
        night_mode: Whether night mode classes are added to the card.
    """

    card_zoom: int = 100
    image_zoom: int = 100
    night_mode: bool = False

    @classmethod
    def from_config(cls, config: AppearanceConfig) -> CardAppearance:
        return cls(
            card_zoom=config.card_zoom,
            image_zoom=config.image_zoom,
            night_mode=config.night_mode,
        )

    @property
    def style(self) -> str:
        """CSS for the viewer, empty when both zoom levels are 100%."""
        rules: list[str] = []
        if self.card_zoom != 100:
            rules.append(f"body {{ zoom: {self.card_zoom / 100} }}")
        if self.image_zoom != 100:
            rules.append(
                f"img {{ zoom: {self.image_zoom / 100}; max-width: 100%; }}"
            )
        return "\n".join(rules)

    def get_card_class(self, one_based_ord: int) -> str:
        card_class = f"card card{one_based_ord}"
        if self.night_mode:
            card_class += f" {NIGHT_MODE_CLASSES}"
        return card_class


def fix_bold_style(content: str) -> str:
    """Render semi-bold (600) text as bold (700), which the web view supports."""
    return content.replace("font-weight:600;", "font-weight:700;")

"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from cardhtml.models import StaticCard
from cardhtml.render.card_html import HtmlGenerator

FRONT_SIDE_FORMAT = '{{FrontSide}}<hr id="answer">{{Back}}'


class CountingProvider:
    """``BackContentProvider`` stub recording how often it is asked."""

    def __init__(self, back_content: str = "") -> None:
        self.back_content = back_content
        self.calls = 0

    def back_content_without_front_side(self) -> str:
        self.calls += 1
        return self.back_content


@pytest.fixture
def provider() -> CountingProvider:
    return CountingProvider("A [sound:b.mp3]")


@pytest.fixture
def context() -> HtmlGenerator:
    return HtmlGenerator()


@pytest.fixture
def front_side_card() -> StaticCard:
    """A card whose answer embeds the front, audio on both sides."""
    return StaticCard(
        ord=0,
        question="Q [sound:a.mp3]",
        answer='Q [sound:a.mp3]<hr id="answer">A [sound:b.mp3]',
        answer_format=FRONT_SIDE_FORMAT,
    )

"""Shared pytest fixtures for deckstyle tests."""

import pytest

from deckstyle import create_context
from deckstyle.layouts import LayoutDefinition, LayoutRegistry, LayoutZone
from deckstyle.themes import DEFAULT_TOKENS, DesignTokens


@pytest.fixture
def registry() -> LayoutRegistry:
    """Return an empty layout registry."""
    return LayoutRegistry()


@pytest.fixture
def context():
    """Return a seeded design context, reset after the test."""
    ctx = create_context()
    yield ctx
    ctx.reset()


@pytest.fixture
def brand_tokens() -> DesignTokens:
    """Return default tokens with a key-level colour override."""
    return DEFAULT_TOKENS.model_copy(
        update={"colors": {**DEFAULT_TOKENS.colors, "primary": "#e11d48"}}
    )


def make_layout(name: str = "title", styles: str | None = None, **kwargs) -> LayoutDefinition:
    """Build a one-zone layout for registry tests."""
    return LayoutDefinition(
        name=name,
        description=kwargs.pop("description", f"{name} layout"),
        zones=kwargs.pop("zones", (LayoutZone(name="title", grid_area="title"),)),
        custom_styles=styles,
        **kwargs,
    )


@pytest.fixture
def layout_factory():
    """Return the one-zone layout factory."""
    return make_layout

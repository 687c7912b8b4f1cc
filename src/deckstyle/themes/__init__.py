"""
deckstyle theme system.

Usage:
    from deckstyle.themes import DEFAULT_TOKENS, Theme

    brand = DEFAULT_TOKENS.model_copy(
        update={"colors": {**DEFAULT_TOKENS.colors, "primary": "#e11d48"}}
    )
    theme = Theme("brand", brand)
    css = theme.to_css_string()
"""

from .css_generator import (
    CATEGORY_PREFIXES,
    GROUP_PREFIXES,
    generate_css_variables,
    generate_root_css,
)
from .presets import DEFAULT_TOKENS
from .theme import Theme
from .tokens import TOKEN_CATEGORIES, DesignTokens, TokenRegistry

__all__ = [
    # Tokens
    "TOKEN_CATEGORIES",
    "DesignTokens",
    "TokenRegistry",
    "DEFAULT_TOKENS",
    # Themes
    "Theme",
    # CSS generation
    "CATEGORY_PREFIXES",
    "GROUP_PREFIXES",
    "generate_css_variables",
    "generate_root_css",
]

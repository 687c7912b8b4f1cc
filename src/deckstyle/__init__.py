"""
deckstyle: layered design tokens, layouts and components for slide decks.

System, theme and deck authors each register tokens and layouts; deckstyle
resolves same-named layouts by priority and tier, flattens tokens into CSS
variables, injects layout styles once, and renders content blocks.

Usage:
    from deckstyle import create_context, CustomLayoutBuilder

    ctx = create_context()
    ctx.register_deck_layouts([
        CustomLayoutBuilder.create("title", "Deck title")
        .add_zone("title", "title")
        .set_custom_styles('.slide[data-layout="title"] { color: red; }')
        .build()
    ])
    layout = ctx.use_layout("title")
    css = ctx.stylesheet()
"""

from .components import ComponentRegistry, ComponentRenderer
from .config import EngineConfig, load_config
from .context import DesignContext, create_context
from .errors import (
    ConfigError,
    DeckStyleError,
    DuplicateZoneError,
    LayoutNotFoundError,
    LayoutValidationError,
    NotInitializedError,
    RendererNotFoundError,
    ThemeDocumentError,
)
from .layouts import (
    CustomLayoutBuilder,
    CustomLayoutDefinition,
    LayoutDefinition,
    LayoutRegistry,
    LayoutResolver,
    LayoutSource,
    LayoutZone,
)
from .loader import load_theme_document, theme_from_mapping
from .styles import MemoryStyleSink, StyleInjector, StyleSink
from .themes import DEFAULT_TOKENS, DesignTokens, Theme, TokenRegistry

__version__ = "0.1.0"

__all__ = [
    # Context
    "DesignContext",
    "create_context",
    "EngineConfig",
    "load_config",
    # Tokens and themes
    "DesignTokens",
    "DEFAULT_TOKENS",
    "TokenRegistry",
    "Theme",
    "load_theme_document",
    "theme_from_mapping",
    # Layouts
    "LayoutSource",
    "LayoutZone",
    "LayoutDefinition",
    "CustomLayoutDefinition",
    "LayoutRegistry",
    "LayoutResolver",
    "CustomLayoutBuilder",
    # Styles
    "StyleSink",
    "MemoryStyleSink",
    "StyleInjector",
    # Components
    "ComponentRegistry",
    "ComponentRenderer",
    # Errors
    "DeckStyleError",
    "NotInitializedError",
    "RendererNotFoundError",
    "LayoutValidationError",
    "DuplicateZoneError",
    "LayoutNotFoundError",
    "ThemeDocumentError",
    "ConfigError",
]

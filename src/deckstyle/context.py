"""
Design context: one owner for all render-time registries.

Replaces process-wide singletons. Build one per application or session,
pass it to whatever renders, and call ``reset()`` at teardown.

Control flow:
1. Authors register tokens, layouts and renderers at startup
2. Render time resolves layouts, injects their styles once, renders blocks
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from deckstyle.components import (
    Component,
    ComponentRegistry,
    ComponentRenderer,
    register_builtin_renderers,
)
from deckstyle.config import EngineConfig, configure_logging
from deckstyle.layouts import (
    LayoutDefinition,
    LayoutEntry,
    LayoutRegistry,
    LayoutResolver,
    LayoutSource,
    register_system_layouts,
)
from deckstyle.styles import MemoryStyleSink, StyleInjector, StyleSink
from deckstyle.themes import DEFAULT_TOKENS, Theme, TokenRegistry

logger = logging.getLogger(__name__)


class DesignContext:
    """Owns the token, layout and component registries plus style injection."""

    def __init__(
        self,
        config: EngineConfig | None = None,
        sink: StyleSink | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.tokens = TokenRegistry()
        self.layouts = LayoutRegistry(
            default_source=self.config.default_source,
            default_priority=self.config.default_priority,
        )
        self.components = ComponentRegistry()
        self.resolver = LayoutResolver(self.layouts)
        self.injector = StyleInjector(sink if sink is not None else MemoryStyleSink())
        self.renderer = ComponentRenderer(self.components)
        self._theme: Theme | None = None

    @property
    def theme(self) -> Theme | None:
        return self._theme

    # ── Registration ────────────────────────────────────────────────────

    def apply_theme(self, theme: Theme) -> None:
        """
        Register a theme's tokens and its layouts.

        Layouts always land at the theme tier. A layout keeps its own priority
        only when it was explicitly authored for the theme tier; otherwise it
        gets ``theme_priority``.
        """
        self.tokens.register_tokens(theme.get_tokens())
        for layout in theme.get_layouts():
            own_priority = layout.source is LayoutSource.THEME and layout.priority is not None
            self.layouts.register_layout(
                layout.name,
                layout,
                source=LayoutSource.THEME,
                priority=layout.priority if own_priority else self.config.theme_priority,
            )
        self._theme = theme
        self.injector.inject_theme(theme)
        logger.info("Applied theme %r (%d layouts)", theme.name, len(theme.get_layouts()))

    def register_deck_layouts(self, layouts: Iterable[LayoutDefinition]) -> list[LayoutEntry]:
        """Register deck layouts; definitions without source/priority get deck defaults."""
        entries: list[LayoutEntry] = []
        for layout in layouts:
            entries.append(
                self.layouts.register_layout(
                    layout.name,
                    layout,
                    source=layout.source or LayoutSource.DECK,
                    priority=(
                        layout.priority
                        if layout.priority is not None
                        else self.config.deck_priority
                    ),
                )
            )
        return entries

    # ── Render time ─────────────────────────────────────────────────────

    def resolve_layout(self, name: str) -> LayoutDefinition | None:
        return self.resolver.resolve(name)

    def use_layout(self, name: str) -> LayoutDefinition | None:
        """Resolve a layout and make sure its styles are in the sink."""
        layout = self.resolver.resolve(name)
        if layout is not None:
            self.injector.inject(layout, name)
        return layout

    def render_component(self, component: Component | Mapping[str, Any]) -> str:
        return self.renderer.render(component)

    def stylesheet(self) -> str:
        """Theme ``:root`` block followed by every injected layout style."""
        if self._theme is not None:
            self.injector.inject_theme(self._theme)
        return self.injector.sink.to_css()

    # ── Teardown ────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Clear every registry and injected style."""
        self.tokens.clear()
        self.layouts.clear()
        self.components.clear()
        self.resolver.clear_cache()
        self.injector.reset()
        self._theme = None
        logger.info("Design context reset")


def create_context(
    config: EngineConfig | None = None,
    sink: StyleSink | None = None,
) -> DesignContext:
    """
    Build a DesignContext seeded per configuration.

    Seeds default tokens, system layouts and built-in renderers unless the
    configuration switches them off.
    """
    config = config or EngineConfig()
    configure_logging(config.log_level)

    context = DesignContext(config, sink)
    # Private copy: token categories are plain dicts
    context.tokens.register_tokens(DEFAULT_TOKENS.model_copy(deep=True))
    if config.register_system_layouts:
        register_system_layouts(context.layouts)
    if config.register_builtin_components:
        register_builtin_renderers(context.components)
    return context

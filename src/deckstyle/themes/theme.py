"""
Theme: a named token snapshot plus theme-specific layouts.

A Theme does no merging. To build on another token set, copy it and overwrite
keys before constructing the Theme (see ``DesignTokens``). A Theme does not
register itself; ``DesignContext.apply_theme`` does that.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from deckstyle.layouts.models import LayoutDefinition

from .css_generator import generate_css_variables, generate_root_css
from .tokens import DesignTokens


class Theme:
    """
    Wraps a name, a token set and optional layouts.

    Example:
        theme = Theme("midnight", DEFAULT_TOKENS.model_copy(update={...}))
        css = theme.to_css_string()
    """

    def __init__(
        self,
        name: str,
        tokens: DesignTokens | Mapping[str, Any],
        layouts: Iterable[LayoutDefinition] | None = None,
    ) -> None:
        if isinstance(tokens, DesignTokens):
            tokens = tokens.model_copy(deep=True)
        else:
            tokens = DesignTokens.model_validate(tokens)
        self._name = name
        self._tokens = tokens
        self._layouts: tuple[LayoutDefinition, ...] = tuple(layouts or ())

    @property
    def name(self) -> str:
        return self._name

    @property
    def tokens(self) -> DesignTokens:
        return self._tokens

    def get_name(self) -> str:
        return self._name

    def get_tokens(self) -> DesignTokens:
        return self._tokens

    def get_layouts(self) -> list[LayoutDefinition]:
        return list(self._layouts)

    def get_css_variables(self) -> dict[str, str]:
        """Flatten this theme's tokens into ``--name: value`` pairs."""
        return generate_css_variables(self._tokens)

    def to_css_string(self) -> str:
        """Render the variables as a ``:root { ... }`` block."""
        return generate_root_css(self.get_css_variables())

    def __repr__(self) -> str:
        return f"Theme(name={self._name!r}, layouts={len(self._layouts)})"

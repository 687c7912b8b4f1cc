"""
Design token types and the token registry.

A token set has a fixed set of top-level categories. Keys inside a category
are free-form and may nest (``typography.fontSize.sm``).
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from deckstyle.errors import NotInitializedError

logger = logging.getLogger(__name__)

TOKEN_CATEGORIES = ("colors", "typography", "spacing", "borders", "shadows")


def _stringify_keys(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _stringify_keys(v) for k, v in value.items()}
    return value


class DesignTokens(BaseModel):
    """
    Design tokens for a deck.

    Example:
        DesignTokens(
            colors={"primary": "#3b82f6"},
            typography={"fontSize": {"sm": "0.875rem"}},
            spacing={4: "1rem"},
            borders={"radius": {"lg": "0.5rem"}},
            shadows={"sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)"},
        )

    To extend a token set, copy it and overwrite only what changes::

        brand = DEFAULT_TOKENS.model_copy(
            update={"colors": {**DEFAULT_TOKENS.colors, "primary": "#e11d48"}}
        )

    Replacing a whole category drops sibling keys not re-specified.
    """

    colors: dict[str, Any] = Field(default_factory=dict, description="Color tokens")
    typography: dict[str, Any] = Field(
        default_factory=dict,
        description="fontFamily, fontSize, fontWeight, lineHeight groups",
    )
    spacing: dict[str, Any] = Field(default_factory=dict, description="Spacing scale")
    borders: dict[str, Any] = Field(default_factory=dict, description="radius and width groups")
    shadows: dict[str, Any] = Field(default_factory=dict, description="Box shadows")
    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator(*TOKEN_CATEGORIES, mode="before")
    @classmethod
    def _normalise_keys(cls, value: Any) -> Any:
        return _stringify_keys(value) if isinstance(value, Mapping) else value

    def category(self, name: str) -> dict[str, Any]:
        if name not in TOKEN_CATEGORIES:
            raise KeyError(name)
        return getattr(self, name)


class TokenRegistry:
    """
    Holds the single currently-active token set.

    Registering replaces the whole set; nothing is merged.
    """

    def __init__(self) -> None:
        self._tokens: DesignTokens | None = None
        self._lock = threading.RLock()

    def register_tokens(self, tokens: DesignTokens) -> None:
        with self._lock:
            replaced = self._tokens is not None
            self._tokens = tokens
        logger.debug("Registered design tokens (replaced existing: %s)", replaced)

    def get_tokens(self) -> DesignTokens:
        """
        Get the currently registered tokens.

        Raises:
            NotInitializedError: If no tokens have been registered
        """
        with self._lock:
            if self._tokens is None:
                raise NotInitializedError("No tokens registered. Call register_tokens() first.")
            return self._tokens

    def has_tokens(self) -> bool:
        with self._lock:
            return self._tokens is not None

    def clear(self) -> None:
        with self._lock:
            self._tokens = None

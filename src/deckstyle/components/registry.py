"""
Component renderer registry.

Maps a content-type tag to a pure function from component data to markup.
Registering an existing tag replaces its renderer.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from deckstyle.errors import RendererNotFoundError

logger = logging.getLogger(__name__)

RendererFn = Callable[[Any], str]


class ComponentRegistry:
    """Thread-safe tag -> renderer table."""

    def __init__(self) -> None:
        self._renderers: dict[str, RendererFn] = {}
        self._lock = threading.RLock()

    def register(self, component_type: str, renderer: RendererFn) -> None:
        with self._lock:
            replaced = component_type in self._renderers
            self._renderers[component_type] = renderer
        logger.debug("Registered renderer for %r (replaced: %s)", component_type, replaced)

    def get_renderer(self, component_type: str) -> RendererFn:
        """
        Get the renderer for a component type.

        Raises:
            RendererNotFoundError: If no renderer is registered for the type
        """
        with self._lock:
            renderer = self._renderers.get(component_type)
            if renderer is None:
                raise RendererNotFoundError(component_type, list(self._renderers))
            return renderer

    def has_renderer(self, component_type: str) -> bool:
        with self._lock:
            return component_type in self._renderers

    def get_registered_types(self) -> list[str]:
        with self._lock:
            return list(self._renderers)

    def count(self) -> int:
        with self._lock:
            return len(self._renderers)

    def clear(self) -> None:
        with self._lock:
            self._renderers.clear()

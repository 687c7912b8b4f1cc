"""
Component rendering façade.

Built-in kinds are dispatched exhaustively by ``render_builtin``. The
registry is the open extension point: it dispatches purely on the ``type``
tag, and ``register_builtin_renderers`` seeds it with the built-ins so user
registrations can replace them.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, assert_never

from .callout import render_callout
from .code_block import render_code_block
from .image import render_image
from .lists import render_list
from .models import (
    BuiltinComponent,
    Callout,
    CodeBlock,
    Component,
    Image,
    ListBlock,
    parse_component,
)
from .registry import ComponentRegistry, RendererFn

logger = logging.getLogger(__name__)


def render_builtin(component: BuiltinComponent) -> str:
    """Render any built-in component kind."""
    if isinstance(component, CodeBlock):
        return render_code_block(component)
    if isinstance(component, ListBlock):
        return render_list(component)
    if isinstance(component, Callout):
        return render_callout(component)
    if isinstance(component, Image):
        return render_image(component)
    assert_never(component)


BUILTIN_RENDERERS: dict[str, RendererFn] = {
    "code-block": render_code_block,
    "list": render_list,
    "callout": render_callout,
    "image": render_image,
}


def register_builtin_renderers(registry: ComponentRegistry) -> None:
    for component_type, renderer in BUILTIN_RENDERERS.items():
        registry.register(component_type, renderer)


class ComponentRenderer:
    """
    Renders content blocks through a ComponentRegistry.

    Accepts component models or raw tagged mappings.
    """

    def __init__(self, registry: ComponentRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> ComponentRegistry:
        return self._registry

    def render(self, component: Component | Mapping[str, Any]) -> str:
        """
        Render a single component.

        Raises:
            RendererNotFoundError: If no renderer is registered for its type
        """
        model = parse_component(component)
        renderer = self._registry.get_renderer(model.type)
        return renderer(model)

    def render_many(self, components: Iterable[Component | Mapping[str, Any]]) -> str:
        return "\n".join(self.render(component) for component in components)

    def can_render(self, component_type: str) -> bool:
        return self._registry.has_renderer(component_type)

    def get_renderable_types(self) -> list[str]:
        return self._registry.get_registered_types()

"""
deckstyle content components.

Usage:
    from deckstyle.components import ComponentRegistry, ComponentRenderer
    from deckstyle.components import register_builtin_renderers

    registry = ComponentRegistry()
    register_builtin_renderers(registry)

    html = ComponentRenderer(registry).render(
        {"type": "code-block", "language": "python", "code": "print(1)"}
    )
"""

from .callout import render_callout
from .code_block import render_code_block
from .html import escape_html
from .image import render_image
from .lists import render_list
from .models import (
    BUILTIN_TYPES,
    BuiltinComponent,
    Callout,
    CodeBlock,
    Component,
    CustomComponent,
    Image,
    ListBlock,
    ListItem,
    parse_component,
)
from .registry import ComponentRegistry, RendererFn
from .renderer import (
    BUILTIN_RENDERERS,
    ComponentRenderer,
    register_builtin_renderers,
    render_builtin,
)

__all__ = [
    # Models
    "Component",
    "CodeBlock",
    "ListBlock",
    "ListItem",
    "Callout",
    "Image",
    "CustomComponent",
    "BuiltinComponent",
    "BUILTIN_TYPES",
    "parse_component",
    # Registry
    "ComponentRegistry",
    "RendererFn",
    # Rendering
    "ComponentRenderer",
    "BUILTIN_RENDERERS",
    "register_builtin_renderers",
    "render_builtin",
    "render_code_block",
    "render_list",
    "render_callout",
    "render_image",
    "escape_html",
]

"""
deckstyle layouts.

Usage:
    from deckstyle.layouts import CustomLayoutBuilder, LayoutRegistry, LayoutSource

    registry = LayoutRegistry()
    register_system_layouts(registry)

    hero = CustomLayoutBuilder.create("title", "Deck title").add_zone("title").build()
    registry.register_layout("title", hero)

    registry.get_layout("title")  # the deck definition (priority 100)
"""

from .builder import CustomLayoutBuilder
from .models import (
    CustomLayoutDefinition,
    LayoutDefinition,
    LayoutSource,
    LayoutZone,
    ZoneEdit,
)
from .presets import (
    SYSTEM_LAYOUTS,
    get_system_layout,
    list_system_layouts,
    register_system_layouts,
)
from .registry import LayoutEntry, LayoutRegistry
from .resolver import LayoutResolver
from .utils import (
    check_layout_compatibility,
    clone_layout,
    extend_layout,
    find_zone,
    get_zone_names,
    has_required_zones,
    merge_layouts,
    override_layout,
)

__all__ = [
    # Types
    "LayoutSource",
    "LayoutZone",
    "LayoutDefinition",
    "CustomLayoutDefinition",
    "ZoneEdit",
    # Registry and resolution
    "LayoutEntry",
    "LayoutRegistry",
    "LayoutResolver",
    # Building
    "CustomLayoutBuilder",
    # System layouts
    "SYSTEM_LAYOUTS",
    "get_system_layout",
    "list_system_layouts",
    "register_system_layouts",
    # Utilities
    "merge_layouts",
    "extend_layout",
    "override_layout",
    "clone_layout",
    "has_required_zones",
    "get_zone_names",
    "find_zone",
    "check_layout_compatibility",
]

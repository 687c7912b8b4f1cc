"""
Layout composition utilities.

Pure helpers for combining, extending and inspecting layout definitions.
LayoutResolver builds on them; they can also be used directly.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Literal

from .models import LayoutDefinition, LayoutZone

_GRID_FIELDS = (
    "grid_template_areas",
    "grid_template_columns",
    "grid_template_rows",
    "custom_styles",
)


def merge_layouts(
    layouts: list[LayoutDefinition],
    *,
    name: str | None = None,
    description: str | None = None,
    conflict_resolution: Literal["first", "last"] = "first",
) -> LayoutDefinition:
    """
    Merge layouts into one, keeping every unique zone.

    Args:
        layouts: Layouts to merge (at least one)
        name: Result name (default ``merged-<a>-<b>``)
        description: Result description
        conflict_resolution: Which zone wins on a name clash, and which
            layout supplies grid and style fields

    Returns:
        Merged layout definition
    """
    if not layouts:
        raise ValueError("merge_layouts requires at least one layout")

    zones: dict[str, LayoutZone] = {}
    for layout in layouts:
        for zone in layout.zones:
            if conflict_resolution == "first" and zone.name in zones:
                continue
            zones[zone.name] = zone

    base = layouts[-1] if conflict_resolution == "last" else layouts[0]
    names = [layout.name for layout in layouts]

    return LayoutDefinition(
        name=name or "merged-" + "-".join(names),
        description=description or "Merged from: " + ", ".join(names),
        zones=tuple(zones.values()),
        source=base.source,
        priority=base.priority,
        **{f: getattr(base, f) for f in _GRID_FIELDS},
    )


def apply_zone_edits(
    zones: Iterable[LayoutZone],
    *,
    remove: Iterable[str] = (),
    modify: Mapping[str, Mapping[str, Any]] | None = None,
) -> list[LayoutZone]:
    """Drop zones named in ``remove`` and patch fields of zones named in ``modify``."""
    removed = set(remove)
    modify = modify or {}
    result = []
    for zone in zones:
        if zone.name in removed:
            continue
        if zone.name in modify:
            zone = zone.model_copy(update=dict(modify[zone.name]))
        result.append(zone)
    return result


def extend_layout(
    base: LayoutDefinition,
    *,
    name: str | None = None,
    description: str | None = None,
    add_zones: Iterable[LayoutZone] = (),
    remove_zones: Iterable[str] = (),
    modify_zones: Mapping[str, Mapping[str, Any]] | None = None,
    **overrides: str | None,
) -> LayoutDefinition:
    """
    Extend a layout by removing, modifying, then adding zones.

    Grid and style keyword overrides fall back to the base layout's values.

    Raises:
        ValueError: If an added zone already exists
    """
    zones = apply_zone_edits(base.zones, remove=remove_zones, modify=modify_zones)
    for zone in add_zones:
        if any(existing.name == zone.name for existing in zones):
            raise ValueError(f'Zone "{zone.name}" already exists in the layout')
        zones.append(zone)

    return LayoutDefinition(
        name=name or f"{base.name}-extended",
        description=description or f"Extended from {base.name}",
        zones=tuple(zones),
        source=base.source,
        priority=base.priority,
        **_grid_fields(base, overrides),
    )


def override_layout(
    base: LayoutDefinition,
    *,
    name: str | None = None,
    description: str | None = None,
    zones: Mapping[str, LayoutZone] | None = None,
    **overrides: str | None,
) -> LayoutDefinition:
    """Replace or add zones by name while keeping the rest of ``base``."""
    merged = {zone.name: zone for zone in base.zones}
    merged.update(zones or {})
    return LayoutDefinition(
        name=name or base.name,
        description=description or base.description,
        zones=tuple(merged.values()),
        source=base.source,
        priority=base.priority,
        **_grid_fields(base, overrides),
    )


def _grid_fields(base: LayoutDefinition, overrides: Mapping[str, str | None]) -> dict[str, Any]:
    unknown = set(overrides) - set(_GRID_FIELDS)
    if unknown:
        raise TypeError(f"Unexpected layout fields: {sorted(unknown)}")
    return {f: overrides.get(f) or getattr(base, f) for f in _GRID_FIELDS}


def clone_layout(layout: LayoutDefinition) -> LayoutDefinition:
    return layout.model_copy(deep=True)


def has_required_zones(layout: LayoutDefinition, required_zones: Iterable[str]) -> bool:
    names = set(layout.zone_names())
    return all(required in names for required in required_zones)


def get_zone_names(layout: LayoutDefinition) -> list[str]:
    return layout.zone_names()


def find_zone(layout: LayoutDefinition, zone_name: str) -> LayoutZone | None:
    for zone in layout.zones:
        if zone.name == zone_name:
            return zone
    return None


def check_layout_compatibility(
    first: LayoutDefinition, second: LayoutDefinition
) -> tuple[bool, list[str]]:
    """
    Check two layouts for same-named zones with conflicting grid areas.

    Returns:
        ``(compatible, conflicts)``
    """
    conflicts: list[str] = []
    for zone in first.zones:
        other = find_zone(second, zone.name)
        if other and zone.grid_area and other.grid_area and zone.grid_area != other.grid_area:
            conflicts.append(
                f'Zone "{zone.name}" has conflicting grid_area: '
                f'"{zone.grid_area}" vs "{other.grid_area}"'
            )
    return not conflicts, conflicts

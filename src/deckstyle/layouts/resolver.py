"""
Layout resolver for deckstyle.

Expands the effective registry definition of a layout when it inherits from
other layouts:

1. ``extends``: take one base layout, remove, modify, then add zones
2. ``compose_from``: merge zones of several layouts, first one wins

A layout that extends its own name inherits from the best registration
ranked below itself, so a deck can restyle the system ``title`` layout
without copying it.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from deckstyle.errors import LayoutNotFoundError, LayoutValidationError

from .models import CustomLayoutDefinition, LayoutDefinition, LayoutZone
from .registry import LayoutEntry, LayoutRegistry
from .utils import apply_zone_edits

logger = logging.getLogger(__name__)

# (layout name, registration count, sequence of the effective entry)
_Dependency = tuple[str, int, int]


class LayoutResolver:
    """
    Resolves layouts against a LayoutRegistry, expanding inheritance.

    Results are cached per name and reused while every layout they were built
    from is unchanged, so repeated calls return the identical object.
    """

    def __init__(self, registry: LayoutRegistry) -> None:
        self._registry = registry
        # name -> (registry generation, dependencies, result)
        self._cache: dict[str, tuple[int, tuple[_Dependency, ...], LayoutDefinition]] = {}
        self._lock = threading.RLock()

    def resolve(self, name: str) -> LayoutDefinition | None:
        """
        Resolve ``name`` to a fully expanded definition.

        Returns:
            The expanded definition, or None if ``name`` was never registered

        Raises:
            LayoutNotFoundError: If an inherited layout is missing
            LayoutValidationError: If the inheritance chain is cyclic
        """
        with self._lock:
            cached = self._cache.get(name)
            if cached is not None and self._is_current(cached[0], cached[1]):
                logger.debug("Layout %r served from resolver cache", name)
                return cached[2]

            entry = self._registry.get_effective_entry(name)
            if entry is None:
                return None

            generation = self._registry.generation
            deps: list[_Dependency] = []
            result = self._resolve_entry(name, entry, deps, stack=[])
            self._cache[name] = (generation, tuple(deps), result)
            return result

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()

    # ── Internals ───────────────────────────────────────────────────────

    def _is_current(self, generation: int, deps: tuple[_Dependency, ...]) -> bool:
        if generation != self._registry.generation:
            return False
        for dep_name, count, sequence in deps:
            entries = self._registry.get_entries(dep_name)
            if len(entries) != count:
                return False
            effective = max(entries, key=LayoutEntry.sort_key)
            if effective.sequence != sequence:
                return False
        return True

    def _track(self, name: str, deps: list[_Dependency]) -> None:
        entries = self._registry.get_entries(name)
        effective = max(entries, key=LayoutEntry.sort_key)
        deps.append((name, len(entries), effective.sequence))

    def _resolve_entry(
        self,
        name: str,
        entry: LayoutEntry,
        deps: list[_Dependency],
        stack: list[tuple[str, int]],
    ) -> LayoutDefinition:
        self._track(name, deps)
        definition = entry.definition
        if not isinstance(definition, CustomLayoutDefinition) or not definition.inherits_zones():
            return definition

        key = (name, entry.sequence)
        if key in stack:
            chain = " -> ".join(n for n, _ in stack + [key])
            raise LayoutValidationError(f"Cyclic layout inheritance: {chain}")
        stack = stack + [key]

        if definition.extends:
            base = self._resolve_reference(definition.extends, name, entry, deps, stack)
            return self._extend(base, definition, entry)

        composed = [
            self._resolve_reference(ref, name, entry, deps, stack)
            for ref in definition.compose_from or ()
        ]
        return self._compose(composed, definition, entry)

    def _resolve_reference(
        self,
        ref: str,
        name: str,
        entry: LayoutEntry,
        deps: list[_Dependency],
        stack: list[tuple[str, int]],
    ) -> LayoutDefinition:
        if ref == name:
            lower = [
                candidate
                for candidate in self._registry.get_entries(name)
                if candidate.sort_key() < entry.sort_key()
            ]
            target = max(lower, key=LayoutEntry.sort_key) if lower else None
        else:
            target = self._registry.get_effective_entry(ref)

        if target is None:
            raise LayoutNotFoundError(ref, referenced_by=name)
        return self._resolve_entry(ref, target, deps, stack)

    def _extend(
        self,
        base: LayoutDefinition,
        custom: CustomLayoutDefinition,
        entry: LayoutEntry,
    ) -> LayoutDefinition:
        self._warn_unknown_modifications(custom, base.zones)
        edits = custom.zone_modifications()
        zones = apply_zone_edits(base.zones, remove=custom.remove_zones, modify=edits)
        zones = _upsert_zones(zones, custom.additional_zones)
        zones = _append_missing(zones, custom.zones)

        return LayoutDefinition(
            name=custom.name,
            description=custom.description or base.description,
            zones=tuple(zones),
            source=entry.source,
            priority=entry.priority,
            **_inherit_fields(custom, base),
        )

    def _compose(
        self,
        layouts: list[LayoutDefinition],
        custom: CustomLayoutDefinition,
        entry: LayoutEntry,
    ) -> LayoutDefinition:
        zones: list[LayoutZone] = []
        for layout in layouts:
            zones = _append_missing(zones, layout.zones)
        zones = _upsert_zones(zones, custom.zones)
        self._warn_unknown_modifications(custom, zones)
        edits = custom.zone_modifications()
        zones = apply_zone_edits(zones, remove=custom.remove_zones, modify=edits)
        zones = _upsert_zones(zones, custom.additional_zones)

        return LayoutDefinition(
            name=custom.name,
            description=custom.description,
            zones=tuple(zones),
            source=entry.source,
            priority=entry.priority,
            **_inherit_fields(custom, layouts[0] if layouts else None),
        )

    def _warn_unknown_modifications(
        self, custom: CustomLayoutDefinition, zones: tuple[LayoutZone, ...] | list[LayoutZone]
    ) -> None:
        present = {zone.name for zone in zones}
        for zone_name in custom.zone_modifications():
            if zone_name not in present:
                logger.warning(
                    "Layout %r modifies unknown zone %r; ignoring", custom.name, zone_name
                )


def _append_missing(zones: list[LayoutZone], extra: tuple[LayoutZone, ...]) -> list[LayoutZone]:
    names = {zone.name for zone in zones}
    result = list(zones)
    for zone in extra:
        if zone.name not in names:
            result.append(zone)
            names.add(zone.name)
    return result


def _upsert_zones(zones: list[LayoutZone], extra: tuple[LayoutZone, ...]) -> list[LayoutZone]:
    result = list(zones)
    for zone in extra:
        for index, existing in enumerate(result):
            if existing.name == zone.name:
                result[index] = zone
                break
        else:
            result.append(zone)
    return result


def _inherit_fields(
    custom: CustomLayoutDefinition, base: LayoutDefinition | None
) -> dict[str, Any]:
    fields = (
        "grid_template_areas",
        "grid_template_columns",
        "grid_template_rows",
        "custom_styles",
    )
    return {f: getattr(custom, f) or (getattr(base, f) if base else None) for f in fields}

"""
Fluent builder for deck- and theme-authored layouts.

The builder keeps a mutable draft and freezes it into a
``CustomLayoutDefinition`` on ``build()``. Zone names are checked as they are
added. Grid template strings are not checked against zone names; keeping
them consistent is the author's responsibility.

Example::

    layout = (
        CustomLayoutBuilder.create("hero", "Full-bleed hero")
        .add_zone("title", "title")
        .add_zone("media", "media")
        .set_grid_template_areas('"title" "media"')
        .build()
    )
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass, field

from deckstyle.errors import DuplicateZoneError, LayoutValidationError

from .models import CustomLayoutDefinition, LayoutSource, LayoutZone

DEFAULT_BUILDER_PRIORITY = 100


@dataclass
class _LayoutDraft:
    name: str
    description: str
    zones: list[LayoutZone] = field(default_factory=list)
    grid_template_areas: str | None = None
    grid_template_columns: str | None = None
    grid_template_rows: str | None = None
    custom_styles: str | None = None
    source: LayoutSource = LayoutSource.DECK
    priority: int | float = DEFAULT_BUILDER_PRIORITY
    extends: str | None = None
    compose_from: list[str] | None = None
    overrides: str | None = None
    additional_zones: list[LayoutZone] = field(default_factory=list)
    remove_zones: list[str] = field(default_factory=list)
    modify_zones: dict[str, dict[str, str | None]] = field(default_factory=dict)


class CustomLayoutBuilder:
    """Fluent constructor producing immutable layout definitions."""

    def __init__(self, name: str, description: str = "") -> None:
        self._draft = _LayoutDraft(name=name, description=description)

    @classmethod
    def create(cls, name: str, description: str = "") -> CustomLayoutBuilder:
        return cls(name, description)

    # ── Zones ───────────────────────────────────────────────────────────

    def add_zone(
        self,
        name: str,
        grid_area: str | None = None,
        description: str | None = None,
    ) -> CustomLayoutBuilder:
        """
        Append a zone.

        Raises:
            DuplicateZoneError: If ``name`` was already added to this draft
        """
        if any(zone.name == name for zone in self._draft.zones):
            raise DuplicateZoneError(name, self._draft.name)
        self._draft.zones.append(
            LayoutZone(name=name, grid_area=grid_area or None, description=description or None)
        )
        return self

    def add_zones(self, zones: Iterable[LayoutZone]) -> CustomLayoutBuilder:
        for zone in zones:
            self.add_zone(zone.name, zone.grid_area, zone.description)
        return self

    # ── Grid and styles (last call wins) ────────────────────────────────

    def set_grid_template_areas(self, areas: str) -> CustomLayoutBuilder:
        self._draft.grid_template_areas = areas
        return self

    def set_grid_template_columns(self, columns: str) -> CustomLayoutBuilder:
        self._draft.grid_template_columns = columns
        return self

    def set_grid_template_rows(self, rows: str) -> CustomLayoutBuilder:
        self._draft.grid_template_rows = rows
        return self

    def set_custom_styles(self, css: str) -> CustomLayoutBuilder:
        self._draft.custom_styles = css
        return self

    # ── Precedence ──────────────────────────────────────────────────────

    def set_priority(self, priority: int | float) -> CustomLayoutBuilder:
        self._draft.priority = priority
        return self

    def set_source(self, source: LayoutSource | str) -> CustomLayoutBuilder:
        self._draft.source = LayoutSource(source)
        return self

    # ── Inheritance ─────────────────────────────────────────────────────

    def extends(self, layout_name: str) -> CustomLayoutBuilder:
        self._draft.extends = layout_name
        return self

    def compose_from(self, layout_names: Iterable[str]) -> CustomLayoutBuilder:
        names = list(layout_names)
        if not names:
            raise LayoutValidationError("compose_from requires at least one layout name")
        self._draft.compose_from = names
        return self

    def overrides(self, layout_name: str) -> CustomLayoutBuilder:
        self._draft.overrides = layout_name
        return self

    def add_additional_zones(self, zones: Iterable[LayoutZone]) -> CustomLayoutBuilder:
        self._draft.additional_zones.extend(zones)
        return self

    def remove_zones(self, zone_names: Iterable[str]) -> CustomLayoutBuilder:
        self._draft.remove_zones.extend(zone_names)
        return self

    def modify_zone(self, zone_name: str, **changes: str | None) -> CustomLayoutBuilder:
        """Replace fields of an inherited zone, e.g. ``modify_zone("title", grid_area="hd")``."""
        unknown = set(changes) - {"grid_area", "description"}
        if unknown:
            raise LayoutValidationError(
                f"modify_zone accepts grid_area and description, got {sorted(unknown)}"
            )
        self._draft.modify_zones[zone_name] = dict(changes)
        return self

    # ── Finalisation ────────────────────────────────────────────────────

    def validate(self) -> list[str]:
        """Return a list of problems with the current draft (empty if valid)."""
        draft = self._draft
        errors: list[str] = []

        if not draft.name:
            errors.append("Layout name is required")

        inherits = bool(draft.extends or draft.compose_from)
        if not inherits and not draft.zones:
            errors.append("Layout must have at least one zone (unless extending or composing)")

        if draft.extends and draft.compose_from:
            errors.append("Layout cannot both extend and compose from other layouts")

        zone_names = {zone.name for zone in draft.zones}
        additional_names: set[str] = set()
        for zone in draft.additional_zones:
            if zone.name in additional_names:
                errors.append(f'Duplicate additional zone name: "{zone.name}"')
            additional_names.add(zone.name)
            if zone.name in zone_names:
                errors.append(f'Additional zone "{zone.name}" conflicts with existing zone')

        for removed in draft.remove_zones:
            if removed in additional_names:
                errors.append(f'Cannot both remove and add zone: "{removed}"')

        return errors

    def build(self) -> CustomLayoutDefinition:
        """
        Freeze the draft into an immutable definition.

        Raises:
            LayoutValidationError: Listing every problem found by ``validate()``
        """
        errors = self.validate()
        if errors:
            raise LayoutValidationError(
                "Layout validation failed:\n" + "\n".join(errors), problems=errors
            )

        draft = copy.deepcopy(self._draft)
        return CustomLayoutDefinition(
            name=draft.name,
            description=draft.description,
            zones=tuple(draft.zones),
            grid_template_areas=draft.grid_template_areas,
            grid_template_columns=draft.grid_template_columns,
            grid_template_rows=draft.grid_template_rows,
            custom_styles=draft.custom_styles,
            source=draft.source,
            priority=draft.priority,
            extends=draft.extends,
            compose_from=tuple(draft.compose_from) if draft.compose_from else None,
            overrides=draft.overrides,
            additional_zones=tuple(draft.additional_zones),
            remove_zones=tuple(draft.remove_zones),
            modify_zones=draft.modify_zones,
        )

    # ── Convenience constructors ────────────────────────────────────────

    @classmethod
    def simple(
        cls,
        name: str,
        description: str,
        zones: Iterable[LayoutZone],
        grid_template_areas: str,
    ) -> CustomLayoutDefinition:
        return (
            cls(name, description)
            .add_zones(zones)
            .set_grid_template_areas(grid_template_areas)
            .build()
        )

    @classmethod
    def extend(
        cls,
        name: str,
        base_layout: str,
        *,
        description: str | None = None,
        additional_zones: Iterable[LayoutZone] | None = None,
        remove_zones: Iterable[str] | None = None,
        modify_zones: dict[str, dict[str, str | None]] | None = None,
    ) -> CustomLayoutDefinition:
        builder = cls(name, description or f"Extended from {base_layout}").extends(base_layout)
        if additional_zones:
            builder.add_additional_zones(additional_zones)
        if remove_zones:
            builder.remove_zones(remove_zones)
        for zone_name, changes in (modify_zones or {}).items():
            builder.modify_zone(zone_name, **changes)
        return builder.build()

    @classmethod
    def compose(
        cls,
        name: str,
        description: str,
        from_layouts: Iterable[str],
        *,
        additional_zones: Iterable[LayoutZone] | None = None,
        remove_zones: Iterable[str] | None = None,
        grid_template_areas: str | None = None,
    ) -> CustomLayoutDefinition:
        builder = cls(name, description).compose_from(from_layouts)
        if additional_zones:
            builder.add_additional_zones(additional_zones)
        if remove_zones:
            builder.remove_zones(remove_zones)
        if grid_template_areas:
            builder.set_grid_template_areas(grid_template_areas)
        return builder.build()

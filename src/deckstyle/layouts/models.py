"""
Layout types for deckstyle.

A layout names the zones content is routed into and the raw CSS grid
template that positions them. Definitions are immutable once built.
"""

from __future__ import annotations

from enum import Enum

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from deckstyle.errors import LayoutValidationError


class LayoutSource(str, Enum):
    """Origin tier of a layout definition."""

    SYSTEM = "system"
    THEME = "theme"
    DECK = "deck"


# Tie-break order on equal priority: deck > theme > system
SOURCE_RANK: dict[LayoutSource, int] = {
    LayoutSource.SYSTEM: 0,
    LayoutSource.THEME: 1,
    LayoutSource.DECK: 2,
}


class LayoutZone(BaseModel):
    """
    A named placement slot within a layout.

    Example:
        LayoutZone(name="title", grid_area="title", description="Slide title")
    """

    name: str
    grid_area: str | None = None
    description: str | None = None
    model_config = ConfigDict(frozen=True)


class LayoutDefinition(BaseModel):
    """
    Layout definition specifying zones and their arrangement.

    ``source`` and ``priority`` are optional; the registry fills in its
    defaults when they are absent.
    """

    name: str
    description: str = ""
    zones: tuple[LayoutZone, ...] = Field(default_factory=tuple)
    grid_template_areas: str | None = None
    grid_template_columns: str | None = None
    grid_template_rows: str | None = None
    custom_styles: str | None = None
    source: LayoutSource | None = None
    priority: int | float | None = None
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_zones(self) -> LayoutDefinition:
        seen: set[str] = set()
        for zone in self.zones:
            if zone.name in seen:
                raise LayoutValidationError(
                    f'Duplicate zone name "{zone.name}" in layout "{self.name}"'
                )
            seen.add(zone.name)
        if not self.zones and not self.inherits_zones():
            raise LayoutValidationError(f'Layout "{self.name}" must have at least one zone')
        return self

    def inherits_zones(self) -> bool:
        """Whether zones may come from another layout instead of this one."""
        return False

    def zone_names(self) -> list[str]:
        return [zone.name for zone in self.zones]


class ZoneEdit(BaseModel):
    """Field replacements for one inherited zone; unset fields are left alone."""

    zone: str
    grid_area: str | None = None
    description: str | None = None
    model_config = ConfigDict(frozen=True, extra="forbid")

    def changes(self) -> dict[str, str | None]:
        return self.model_dump(exclude_unset=True, exclude={"zone"})


class CustomLayoutDefinition(LayoutDefinition):
    """
    Deck/theme-authored layout that may inherit from registered layouts.

    ``extends`` takes one base layout and edits its zones; ``compose_from``
    merges the zones of several layouts. Both are expanded by LayoutResolver.
    """

    extends: str | None = None
    compose_from: tuple[str, ...] | None = None
    overrides: str | None = None
    additional_zones: tuple[LayoutZone, ...] = Field(default_factory=tuple)
    remove_zones: tuple[str, ...] = Field(default_factory=tuple)
    modify_zones: tuple[ZoneEdit, ...] = Field(default_factory=tuple)

    @field_validator("modify_zones", mode="before")
    @classmethod
    def _edits_from_mapping(cls, value: Any) -> Any:
        # {"title": {"grid_area": "hero"}} -> (ZoneEdit(zone="title", grid_area="hero"),)
        if isinstance(value, Mapping):
            return tuple(
                {"zone": zone, **changes} if isinstance(changes, Mapping) else changes
                for zone, changes in value.items()
            )
        return value

    def inherits_zones(self) -> bool:
        return bool(self.extends or self.compose_from)

    def zone_modifications(self) -> dict[str, dict[str, str | None]]:
        """Fresh ``{zone: {field: value}}`` mapping of the zone edits."""
        return {edit.zone: edit.changes() for edit in self.modify_zones}

"""
Unit tests for LayoutResolver inheritance and composition.
"""

import logging

import pytest

from deckstyle.errors import LayoutNotFoundError, LayoutValidationError
from deckstyle.layouts import (
    CustomLayoutBuilder,
    LayoutRegistry,
    LayoutResolver,
    LayoutZone,
    register_system_layouts,
)


@pytest.fixture
def seeded() -> LayoutRegistry:
    registry = LayoutRegistry()
    register_system_layouts(registry)
    return registry


@pytest.fixture
def resolver(seeded) -> LayoutResolver:
    return LayoutResolver(seeded)


class TestPlainResolution:
    """Tests for layouts without inheritance."""

    def test_plain_layout_returned_unchanged(self, seeded, resolver):
        """Test a non-inheriting layout resolves to the registry object."""
        assert resolver.resolve("title") is seeded.get_layout("title")

    def test_unknown_layout_is_none(self, resolver):
        """Test an unregistered name resolves to None."""
        assert resolver.resolve("nope") is None


class TestExtends:
    """Tests for extends."""

    def test_extend_adds_and_removes_zones(self, seeded, resolver):
        """Test remove, modify and additional zones apply to the base."""
        layout = CustomLayoutBuilder.extend(
            "branded",
            "title",
            additional_zones=[LayoutZone(name="logo", grid_area="logo")],
            remove_zones=["subtitle"],
            modify_zones={"title": {"grid_area": "hero"}},
        )
        seeded.register_layout("branded", layout)

        resolved = resolver.resolve("branded")
        assert resolved.zone_names() == ["title", "logo"]
        assert resolved.zones[0].grid_area == "hero"
        assert resolved.grid_template_rows == "1fr auto auto 1fr"
        assert resolved.source.value == "deck"
        assert resolved.priority == 100

    def test_own_grid_overrides_base(self, seeded, resolver):
        """Test grid fields on the custom layout win over the base."""
        layout = (
            CustomLayoutBuilder.create("wide-code")
            .extends("code")
            .set_grid_template_columns("3fr")
            .build()
        )
        seeded.register_layout("wide-code", layout)

        resolved = resolver.resolve("wide-code")
        assert resolved.grid_template_columns == "3fr"
        assert resolved.grid_template_areas == seeded.get_layout("code").grid_template_areas

    def test_extend_own_name_uses_lower_registration(self, seeded, resolver):
        """Test a deck layout extending its own name inherits from the system one."""
        layout = (
            CustomLayoutBuilder.create("title", "Deck title")
            .extends("title")
            .add_zone("logo", "logo")
            .set_custom_styles('.slide[data-layout="title"] .zone-logo { width: 4rem; }')
            .build()
        )
        seeded.register_layout("title", layout)

        resolved = resolver.resolve("title")
        assert resolved.zone_names() == ["title", "subtitle", "logo"]
        assert resolved.description == "Deck title"
        assert "zone-logo" in resolved.custom_styles

    def test_missing_base_raises(self, seeded, resolver):
        """Test extending an unknown layout raises LayoutNotFoundError."""
        seeded.register_layout("orphan", CustomLayoutBuilder.extend("orphan", "ghost"))
        with pytest.raises(LayoutNotFoundError) as exc_info:
            resolver.resolve("orphan")
        assert exc_info.value.name == "ghost"
        assert exc_info.value.referenced_by == "orphan"

    def test_cycle_raises(self, seeded, resolver):
        """Test a cyclic extends chain is rejected."""
        seeded.register_layout("a", CustomLayoutBuilder.extend("a", "b"))
        seeded.register_layout("b", CustomLayoutBuilder.extend("b", "a"))
        with pytest.raises(LayoutValidationError, match="Cyclic"):
            resolver.resolve("a")

    def test_unknown_modification_warns(self, seeded, resolver, caplog):
        """Test modifying a zone the base lacks logs a warning."""
        seeded.register_layout(
            "x", CustomLayoutBuilder.extend("x", "title", modify_zones={"nope": {"grid_area": "z"}})
        )
        with caplog.at_level(logging.WARNING, logger="deckstyle"):
            resolver.resolve("x")
        assert "unknown zone 'nope'" in caplog.text


class TestCompose:
    """Tests for compose_from."""

    def test_compose_merges_first_wins(self, seeded, resolver):
        """Test zones are merged in order with the first layout winning."""
        layout = CustomLayoutBuilder.compose("mix", "Mix", ["two-column", "image-left"])
        seeded.register_layout("mix", layout)

        resolved = resolver.resolve("mix")
        assert resolved.zone_names() == ["title", "left", "right", "image", "content"]
        assert resolved.grid_template_columns == "1fr 1fr"

    def test_compose_applies_removals(self, seeded, resolver):
        """Test removals apply after merging."""
        layout = CustomLayoutBuilder.compose(
            "mix", "Mix", ["title", "code"], remove_zones=["subtitle"]
        )
        seeded.register_layout("mix", layout)
        assert resolver.resolve("mix").zone_names() == ["title", "code"]


class TestCaching:
    """Tests for resolver caching and invalidation."""

    def test_repeated_resolution_is_identical(self, seeded, resolver):
        """Test an expanded layout is cached."""
        seeded.register_layout("x", CustomLayoutBuilder.extend("x", "title"))
        assert resolver.resolve("x") is resolver.resolve("x")

    def test_new_registration_invalidates(self, seeded, resolver):
        """Test a new winning registration produces a new result."""
        seeded.register_layout("x", CustomLayoutBuilder.extend("x", "title"))
        first = resolver.resolve("x")
        seeded.register_layout(
            "x", CustomLayoutBuilder.extend("x", "title", remove_zones=["subtitle"])
        )
        second = resolver.resolve("x")
        assert second is not first
        assert second.zone_names() == ["title"]

    def test_base_change_invalidates(self, seeded, resolver):
        """Test overriding the base layout refreshes dependants."""
        seeded.register_layout("x", CustomLayoutBuilder.extend("x", "section"))
        assert resolver.resolve("x").zone_names() == ["heading"]

        override = CustomLayoutBuilder.create("section").add_zone("banner").build()
        seeded.register_layout("section", override)
        assert resolver.resolve("x").zone_names() == ["banner"]

    def test_registry_clear_invalidates(self, seeded, resolver):
        """Test clearing the registry directly never serves a stale result."""
        seeded.register_layout("x", CustomLayoutBuilder.extend("x", "title"))
        first = resolver.resolve("x")

        seeded.clear()
        register_system_layouts(seeded)
        seeded.register_layout(
            "x", CustomLayoutBuilder.extend("x", "title", remove_zones=["subtitle"])
        )

        second = resolver.resolve("x")
        assert second is not first
        assert second.zone_names() == ["title"]

    def test_registry_clear_bumps_generation(self, registry):
        """Test every clear() advances the registry generation."""
        before = registry.generation
        registry.clear()
        assert registry.generation == before + 1

"""
Unit tests for layout composition utilities and system layouts.
"""

import pytest

from deckstyle.errors import LayoutValidationError
from deckstyle.layouts import (
    SYSTEM_LAYOUTS,
    LayoutDefinition,
    LayoutRegistry,
    LayoutSource,
    LayoutZone,
    check_layout_compatibility,
    clone_layout,
    extend_layout,
    find_zone,
    get_system_layout,
    get_zone_names,
    has_required_zones,
    list_system_layouts,
    merge_layouts,
    override_layout,
    register_system_layouts,
)


def _layout(name, *zones, **kwargs):
    return LayoutDefinition(
        name=name,
        zones=tuple(LayoutZone(name=z, grid_area=z) for z in zones),
        **kwargs,
    )


class TestLayoutDefinition:
    """Tests for definition-level validation."""

    def test_duplicate_zone_names_rejected(self):
        """Test zone names must be unique within a layout."""
        with pytest.raises(LayoutValidationError):
            _layout("x", "a", "a")

    def test_zones_required(self):
        """Test a plain layout needs at least one zone."""
        with pytest.raises(LayoutValidationError):
            LayoutDefinition(name="x")


class TestMergeLayouts:
    """Tests for merge_layouts."""

    def test_first_wins(self):
        """Test the first zone definition is kept on conflict."""
        a = LayoutDefinition(
            name="a",
            zones=(LayoutZone(name="title", grid_area="top"),),
            grid_template_columns="1fr",
        )
        b = _layout("b", "title", "body", grid_template_columns="2fr")
        merged = merge_layouts([a, b])

        assert merged.name == "merged-a-b"
        assert merged.description == "Merged from: a, b"
        assert merged.zone_names() == ["title", "body"]
        assert find_zone(merged, "title").grid_area == "top"
        assert merged.grid_template_columns == "1fr"

    def test_last_wins(self):
        """Test conflict_resolution="last" takes later zones and grid."""
        a = LayoutDefinition(name="a", zones=(LayoutZone(name="title", grid_area="top"),))
        b = _layout("b", "title", grid_template_columns="2fr")
        merged = merge_layouts([a, b], name="m", conflict_resolution="last")

        assert merged.name == "m"
        assert find_zone(merged, "title").grid_area == "title"
        assert merged.grid_template_columns == "2fr"

    def test_empty_input_rejected(self):
        """Test merging nothing is an error."""
        with pytest.raises(ValueError):
            merge_layouts([])


class TestExtendAndOverride:
    """Tests for extend_layout and override_layout."""

    def test_extend_layout(self):
        """Test remove, modify and add apply in order."""
        base = _layout("base", "title", "subtitle", grid_template_rows="auto")
        extended = extend_layout(
            base,
            add_zones=[LayoutZone(name="logo")],
            remove_zones=["subtitle"],
            modify_zones={"title": {"description": "Heading"}},
            grid_template_rows="auto 1fr",
        )
        assert extended.name == "base-extended"
        assert extended.zone_names() == ["title", "logo"]
        assert find_zone(extended, "title").description == "Heading"
        assert extended.grid_template_rows == "auto 1fr"

    def test_extend_rejects_existing_zone(self):
        """Test adding a zone that already exists raises."""
        with pytest.raises(ValueError):
            extend_layout(_layout("base", "title"), add_zones=[LayoutZone(name="title")])

    def test_extend_rejects_unknown_field(self):
        """Test unknown keyword overrides are rejected."""
        with pytest.raises(TypeError):
            extend_layout(_layout("base", "title"), colour="red")

    def test_override_layout(self):
        """Test zones are replaced by name and new ones appended."""
        base = _layout("base", "title", "body")
        result = override_layout(
            base,
            zones={
                "body": LayoutZone(name="body", grid_area="main"),
                "aside": LayoutZone(name="aside"),
            },
        )
        assert result.name == "base"
        assert result.zone_names() == ["title", "body", "aside"]
        assert find_zone(result, "body").grid_area == "main"


class TestInspection:
    """Tests for the read-only helpers."""

    def test_clone_is_equal_but_distinct(self):
        """Test clone_layout returns an equal copy."""
        base = _layout("base", "title")
        clone = clone_layout(base)
        assert clone == base
        assert clone is not base

    def test_required_zones(self):
        """Test has_required_zones checks every name."""
        base = _layout("base", "title", "body")
        assert has_required_zones(base, ["title"])
        assert not has_required_zones(base, ["title", "image"])

    def test_zone_names_and_find(self):
        """Test zone name listing and lookup."""
        base = _layout("base", "title", "body")
        assert get_zone_names(base) == ["title", "body"]
        assert find_zone(base, "missing") is None

    def test_compatibility(self):
        """Test same-named zones with different grid areas conflict."""
        a = LayoutDefinition(name="a", zones=(LayoutZone(name="title", grid_area="top"),))
        b = _layout("b", "title")
        compatible, conflicts = check_layout_compatibility(a, b)
        assert not compatible
        assert "conflicting grid_area" in conflicts[0]
        assert check_layout_compatibility(b, b) == (True, [])


class TestSystemLayouts:
    """Tests for built-in layouts."""

    def test_all_system_layouts_present(self):
        """Test the built-in set is complete."""
        assert list_system_layouts() == [
            "title",
            "section",
            "content",
            "two-column",
            "comparison",
            "quote",
            "code",
            "image-left",
            "image-right",
            "split-40-60",
            "split-60-40",
        ]

    @pytest.mark.parametrize("name", list(SYSTEM_LAYOUTS))
    def test_zone_grid_areas_appear_in_template(self, name):
        """Test every built-in zone's grid area is named in its template."""
        layout = get_system_layout(name)
        for zone in layout.zones:
            assert zone.grid_area in layout.grid_template_areas

    def test_register_at_system_tier(self):
        """Test built-ins register at system tier with priority 0."""
        registry = LayoutRegistry()
        register_system_layouts(registry)
        entry = registry.get_effective_entry("comparison")
        assert entry.source is LayoutSource.SYSTEM
        assert entry.priority == 0
        assert registry.count() == len(SYSTEM_LAYOUTS)

    def test_unknown_system_layout(self):
        """Test an unknown built-in is None."""
        assert get_system_layout("nope") is None

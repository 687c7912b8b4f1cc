"""
Built-in system layouts.

These are registered at the system tier with priority 0, so any theme or
deck layout of the same name takes precedence.
"""

from __future__ import annotations

from .models import LayoutDefinition, LayoutSource, LayoutZone
from .registry import LayoutRegistry


def _zone(name: str, description: str) -> LayoutZone:
    return LayoutZone(name=name, grid_area=name, description=description)


# =============================================================================
# Single-column layouts
# =============================================================================

TITLE_LAYOUT = LayoutDefinition(
    name="title",
    description="Centered title and subtitle layout for opening slides",
    zones=(
        _zone("title", "Main title text"),
        _zone("subtitle", "Optional subtitle or supporting text"),
    ),
    grid_template_areas='"." "title" "subtitle" "."',
    grid_template_columns="1fr",
    grid_template_rows="1fr auto auto 1fr",
)

SECTION_LAYOUT = LayoutDefinition(
    name="section",
    description="Full-screen centered heading for section dividers",
    zones=(_zone("heading", "Main section heading text"),),
    grid_template_areas='"." "heading" "."',
    grid_template_columns="1fr",
    grid_template_rows="1fr auto 1fr",
)

CONTENT_LAYOUT = LayoutDefinition(
    name="content",
    description="Single content area with title for standard slides",
    zones=(
        _zone("title", "Slide title"),
        _zone("content", "Main content area"),
    ),
    grid_template_areas='"title" "content"',
    grid_template_columns="1fr",
    grid_template_rows="auto 1fr",
)

QUOTE_LAYOUT = LayoutDefinition(
    name="quote",
    description="Large centered quote with attribution",
    zones=(
        _zone("quote", "Main quote text"),
        _zone("attribution", "Quote attribution or source"),
    ),
    grid_template_areas='"." "quote" "attribution" "."',
    grid_template_columns="1fr",
    grid_template_rows="1fr auto auto 1fr",
)

CODE_LAYOUT = LayoutDefinition(
    name="code",
    description="Code-optimized layout with large code area",
    zones=(
        _zone("title", "Brief code title or description"),
        _zone("code", "Code content area"),
    ),
    grid_template_areas='"title" "code"',
    grid_template_columns="1fr",
    grid_template_rows="auto 1fr",
)

# =============================================================================
# Two-column layouts
# =============================================================================

TWO_COLUMN_LAYOUT = LayoutDefinition(
    name="two-column",
    description="Equal-width two-column layout with title",
    zones=(
        _zone("title", "Slide title"),
        _zone("left", "Left column content"),
        _zone("right", "Right column content"),
    ),
    grid_template_areas='"title title" "left right"',
    grid_template_columns="1fr 1fr",
    grid_template_rows="auto 1fr",
)

COMPARISON_LAYOUT = LayoutDefinition(
    name="comparison",
    description="Side-by-side comparison with labels",
    zones=(
        _zone("title", "Slide title"),
        _zone("left-label", "Label for left column"),
        _zone("left", "Left column content"),
        _zone("right-label", "Label for right column"),
        _zone("right", "Right column content"),
    ),
    grid_template_areas='"title title" "left-label right-label" "left right"',
    grid_template_columns="1fr 1fr",
    grid_template_rows="auto auto 1fr",
)

IMAGE_LEFT_LAYOUT = LayoutDefinition(
    name="image-left",
    description="Image on left (40%), content on right (60%)",
    zones=(
        _zone("title", "Slide title"),
        _zone("image", "Image content (left side)"),
        _zone("content", "Text content (right side)"),
    ),
    grid_template_areas='"title title" "image content"',
    grid_template_columns="2fr 3fr",
    grid_template_rows="auto 1fr",
)

IMAGE_RIGHT_LAYOUT = LayoutDefinition(
    name="image-right",
    description="Content on left (60%), image on right (40%)",
    zones=(
        _zone("title", "Slide title"),
        _zone("content", "Text content (left side)"),
        _zone("image", "Image content (right side)"),
    ),
    grid_template_areas='"title title" "content image"',
    grid_template_columns="3fr 2fr",
    grid_template_rows="auto 1fr",
)

SPLIT_40_60_LAYOUT = LayoutDefinition(
    name="split-40-60",
    description="Asymmetric two-column layout with 40/60 split",
    zones=(
        _zone("title", "Slide title"),
        _zone("left", "Left column content (40%)"),
        _zone("right", "Right column content (60%)"),
    ),
    grid_template_areas='"title title" "left right"',
    grid_template_columns="2fr 3fr",
    grid_template_rows="auto 1fr",
)

SPLIT_60_40_LAYOUT = LayoutDefinition(
    name="split-60-40",
    description="Asymmetric two-column layout with 60/40 split",
    zones=(
        _zone("title", "Slide title"),
        _zone("left", "Left column content (60%)"),
        _zone("right", "Right column content (40%)"),
    ),
    grid_template_areas='"title title" "left right"',
    grid_template_columns="3fr 2fr",
    grid_template_rows="auto 1fr",
)


SYSTEM_LAYOUTS: dict[str, LayoutDefinition] = {
    layout.name: layout
    for layout in (
        TITLE_LAYOUT,
        SECTION_LAYOUT,
        CONTENT_LAYOUT,
        TWO_COLUMN_LAYOUT,
        COMPARISON_LAYOUT,
        QUOTE_LAYOUT,
        CODE_LAYOUT,
        IMAGE_LEFT_LAYOUT,
        IMAGE_RIGHT_LAYOUT,
        SPLIT_40_60_LAYOUT,
        SPLIT_60_40_LAYOUT,
    )
}


def get_system_layout(name: str) -> LayoutDefinition | None:
    """Get a built-in layout by name, or None if unknown."""
    return SYSTEM_LAYOUTS.get(name)


def list_system_layouts() -> list[str]:
    return list(SYSTEM_LAYOUTS)


def register_system_layouts(registry: LayoutRegistry) -> None:
    """Register every built-in layout at the system tier, priority 0."""
    for name, layout in SYSTEM_LAYOUTS.items():
        registry.register_layout(name, layout, source=LayoutSource.SYSTEM, priority=0)

"""
Component types for content blocks.

Every content block is a tagged object ``{"type": <tag>, ...fields}``. The
built-in kinds form a closed discriminated union; any other tag parses as a
``CustomComponent`` and is rendered through the open registry.

Field names are snake_case in Python and camelCase on the wire
(``showLineNumbers``); both spellings are accepted.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class Component(BaseModel):
    """Base for all content blocks."""

    type: str
    id: str | None = None
    class_name: str | None = None
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Built-in kinds
# =============================================================================


class CodeBlock(Component):
    """
    Code listing with optional line numbers, highlighting, caption and copy button.

    Example:
        CodeBlock(language="python", code="print('hi')", show_line_numbers=True)
    """

    type: Literal["code-block"] = "code-block"
    language: str
    code: str
    show_line_numbers: bool = False
    highlight_lines: tuple[int, ...] = ()
    caption: str | None = None
    show_copy_button: bool = False


class ListItem(BaseModel):
    text: str
    checked: bool = False
    children: tuple[ListItem, ...] = ()
    model_config = ConfigDict(frozen=True)


class ListBlock(Component):
    """Bullet, numbered or checklist list with unlimited nesting."""

    type: Literal["list"] = "list"
    variant: Literal["bullet", "numbered", "checklist"] = "bullet"
    items: tuple[ListItem, ...] = ()


class Callout(Component):
    """Highlighted message box; warning and error callouts are announced as alerts."""

    type: Literal["callout"] = "callout"
    callout_type: Literal["info", "warning", "success", "error"] = "info"
    title: str | None = None
    content: str


class Image(Component):
    type: Literal["image"] = "image"
    src: str
    alt: str
    fit_mode: Literal["contain", "cover", "original"] = "contain"
    caption: str | None = None
    lazy_load: bool = False


BuiltinComponent = Annotated[
    CodeBlock | ListBlock | Callout | Image,
    Field(discriminator="type"),
]

BUILTIN_TYPES: tuple[str, ...] = ("code-block", "list", "callout", "image")

_builtin_adapter: TypeAdapter[Any] = TypeAdapter(BuiltinComponent)


# =============================================================================
# Extension kinds
# =============================================================================


class CustomComponent(Component):
    """User-registered kind; unknown fields are kept as extras."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


def parse_component(data: Component | Mapping[str, Any]) -> Component:
    """
    Parse a tagged mapping into a component model.

    Built-in tags validate against their model; anything else becomes a
    ``CustomComponent``. Models are returned unchanged.

    Raises:
        pydantic.ValidationError: If the data does not fit the tagged model
    """
    if isinstance(data, Component):
        return data
    if data.get("type") in BUILTIN_TYPES:
        return _builtin_adapter.validate_python(dict(data))
    return CustomComponent.model_validate(dict(data))

"""HTML escaping shared by the component renderers."""

from __future__ import annotations

# Order matters: "&" first so later entities are not double-escaped
_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(unsafe: str) -> str:
    """Escape text for element content and double-quoted attribute values."""
    for char, entity in _ENTITIES:
        unsafe = unsafe.replace(char, entity)
    return unsafe


def class_attr(*classes: str | None) -> str:
    """Join non-empty class names into an escaped ``class`` value."""
    return escape_html(" ".join(c for c in classes if c))


def id_attr(element_id: str | None) -> str:
    return f' id="{escape_html(element_id)}"' if element_id else ""

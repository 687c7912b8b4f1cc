"""
List renderer: bullet, numbered and checklist variants with nesting.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator

from .html import class_attr, escape_html, id_attr
from .models import ListBlock, ListItem


def render_list(component: ListBlock) -> str:
    """
    Render a ListBlock to HTML.

    Checklist checkbox ids derive from the list id (or ``list``) and the
    item's position, so the same input always renders the same markup.
    """
    tag = "ol" if component.variant == "numbered" else "ul"
    counter = itertools.count(1)
    id_base = component.id or "list"

    items_html = "\n".join(
        _render_item(item, component.variant, 0, counter, id_base) for item in component.items
    )
    container_class = class_attr(
        "list-container", f"list-{component.variant}", component.class_name
    )

    return f"""<div class="{container_class}"{id_attr(component.id)}>
  <{tag} class="list list-level-0">
{items_html}
  </{tag}>
</div>"""


def _render_item(
    item: ListItem,
    variant: str,
    level: int,
    counter: Iterator[int],
    id_base: str,
) -> str:
    text = escape_html(item.text)
    child_tag = "ol" if variant == "numbered" else "ul"
    checkbox_id = ""
    if variant == "checklist":
        # Parents take their number before their children
        checkbox_id = escape_html(f"{id_base}-checkbox-{next(counter)}")

    children = ""
    if item.children:
        nested = "\n".join(
            _render_item(child, variant, level + 1, counter, id_base) for child in item.children
        )
        children = (
            f'\n<{child_tag} class="list-nested list-nested-level-{level + 1}">\n'
            f"{nested}\n</{child_tag}>"
        )

    if variant == "checklist":
        checked = " checked" if item.checked else ""
        return f"""<li class="list-item list-item-checklist">
  <input type="checkbox" id="{checkbox_id}" class="list-checkbox"{checked} disabled>
  <label for="{checkbox_id}" class="list-label">{text}</label>{children}
</li>"""

    return f'<li class="list-item">{text}{children}</li>'

"""
Callout renderer: info, warning, success and error message boxes.
"""

from __future__ import annotations

from .html import class_attr, escape_html, id_attr
from .models import Callout

_ICON_OPEN = (
    '<svg class="callout-icon" width="24" height="24" viewBox="0 0 24 24" fill="none" '
    'xmlns="http://www.w3.org/2000/svg">'
)

CALLOUT_ICONS: dict[str, str] = {
    "info": _ICON_OPEN
    + '<circle cx="12" cy="12" r="10" stroke="currentColor" stroke-width="2"/>'
    '<path d="M12 16V12M12 8H12.01" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round"/></svg>',
    "warning": _ICON_OPEN
    + '<path d="M12 2L2 20H22L12 2Z" stroke="currentColor" stroke-width="2" '
    'stroke-linejoin="round"/>'
    '<path d="M12 10V14M12 17H12.01" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round"/></svg>',
    "success": _ICON_OPEN
    + '<circle cx="12" cy="12" r="10" stroke="currentColor" stroke-width="2"/>'
    '<path d="M8 12L11 15L16 9" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round"/></svg>',
    "error": _ICON_OPEN
    + '<circle cx="12" cy="12" r="10" stroke="currentColor" stroke-width="2"/>'
    '<path d="M15 9L9 15M9 9L15 15" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round"/></svg>',
}

# Announced immediately by screen readers
_ALERT_TYPES = frozenset({"warning", "error"})


def render_callout(component: Callout) -> str:
    """Render a Callout to HTML."""
    kind = component.callout_type
    icon = CALLOUT_ICONS.get(kind, CALLOUT_ICONS["info"])
    role = "alert" if kind in _ALERT_TYPES else "status"

    title_html = ""
    if component.title:
        title_html = f'<div class="callout-title">{escape_html(component.title)}</div>'

    container_class = class_attr("callout-container", f"callout-{kind}", component.class_name)

    return f"""<div class="{container_class}"{id_attr(component.id)} role="{role}">
  <div class="callout-header">
    {icon}
    {title_html}
  </div>
  <div class="callout-content">
    {escape_html(component.content)}
  </div>
</div>"""

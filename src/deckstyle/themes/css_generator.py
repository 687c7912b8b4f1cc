"""
CSS generator for deckstyle themes.

Flattens a token tree into CSS custom properties. Variable names join the
path from category to leaf with hyphens. Every key on the path is
kebab-cased; the category itself is replaced by its entry in
``CATEGORY_PREFIXES`` and the known groups by ``GROUP_PREFIXES``.
Typography has an empty prefix, so its keys name themselves:

    colors.primary            -> --color-primary
    typography.fontFamily.sans -> --font-family-sans
    typography.fontSize.sm    -> --font-size-sm
    spacing.4                 -> --spacing-4
    borders.radius.lg         -> --border-radius-lg
    shadows.sm                -> --shadow-sm
    colors.primaryDark        -> --color-primary-dark
    typography.letterSpacing  -> --letter-spacing

Categories are visited in the fixed order of ``TOKEN_CATEGORIES`` and keys in
insertion order, so output is identical on every call.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .tokens import TOKEN_CATEGORIES, DesignTokens

# Prefix for leaves directly under a category
CATEGORY_PREFIXES: dict[str, str] = {
    "colors": "color",
    "typography": "",
    "spacing": "spacing",
    "borders": "border",
    "shadows": "shadow",
}

# Prefix for known nested groups
GROUP_PREFIXES: dict[tuple[str, str], str] = {
    ("typography", "fontFamily"): "font-family",
    ("typography", "fontSize"): "font-size",
    ("typography", "fontWeight"): "font-weight",
    ("typography", "lineHeight"): "line-height",
    ("borders", "radius"): "border-radius",
    ("borders", "width"): "border-width",
}

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def kebab_case(name: str) -> str:
    """``letterSpacing`` -> ``letter-spacing``."""
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def _join(*parts: str) -> str:
    return "-".join(part for part in parts if part)


def generate_css_variables(tokens: DesignTokens) -> dict[str, str]:
    """
    Flatten tokens into CSS custom properties.

    Leaves that are missing (``None`` or empty string) are skipped.

    Args:
        tokens: Token set to flatten

    Returns:
        Mapping of ``--name`` to value, in traversal order
    """
    variables: dict[str, str] = {}
    for category in TOKEN_CATEGORIES:
        prefix = CATEGORY_PREFIXES[category]
        for key, value in tokens.category(category).items():
            if isinstance(value, Mapping):
                group = GROUP_PREFIXES.get((category, key)) or _join(prefix, kebab_case(key))
                _flatten(group, value, variables)
            else:
                _emit(_join(prefix, kebab_case(key)), value, variables)
    return variables


def _flatten(path: str, group: Mapping[str, Any], out: dict[str, str]) -> None:
    for key, value in group.items():
        name = _join(path, kebab_case(str(key)))
        if isinstance(value, Mapping):
            _flatten(name, value, out)
        else:
            _emit(name, value, out)


def _emit(name: str, value: Any, out: dict[str, str]) -> None:
    if value is None or value == "":
        return
    out[f"--{name}"] = _format_value(value)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def generate_root_css(variables: Mapping[str, str], indent: int = 2) -> str:
    """
    Wrap variables in a ``:root`` block, one declaration per line.

    Args:
        variables: Ordered ``--name`` to value mapping
        indent: Spaces before each declaration

    Returns:
        CSS string ending with ``}``
    """
    prefix = " " * indent
    lines = [":root {"]
    for name, value in variables.items():
        lines.append(f"{prefix}{name}: {value};")
    lines.append("}")
    return "\n".join(lines)

"""
Theme document parsing.

A theme document is YAML text::

    name: midnight
    tokens:
      colors:
        primary: "#a78bfa"
      typography:
        fontSize:
          base: 1.125rem
    layouts:
      - name: title
        description: Midnight title
        zones:
          - {name: title, grid_area: title}
        custom_styles: |
          .slide[data-layout="title"] { text-align: left; }

The caller reads the file; this module only parses text. Layout entries
accept the builder's inheritance fields (``extends``, ``compose_from``, ...).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import yaml
from pydantic import ValidationError

from deckstyle.errors import LayoutValidationError, ThemeDocumentError
from deckstyle.layouts.models import CustomLayoutDefinition
from deckstyle.themes.theme import Theme
from deckstyle.themes.tokens import DesignTokens

logger = logging.getLogger(__name__)


def load_theme_document(text: str) -> Theme:
    """
    Parse a YAML theme document into a Theme.

    Raises:
        ThemeDocumentError: If the YAML or its contents are invalid
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ThemeDocumentError(f"Invalid YAML in theme document: {e}") from e

    if not data or not isinstance(data, dict):
        raise ThemeDocumentError("Empty or invalid theme document")

    return theme_from_mapping(data)


def theme_from_mapping(data: Mapping[str, Any]) -> Theme:
    """Build a Theme from an already-parsed mapping."""
    name = data.get("name")
    if not name or not isinstance(name, str):
        raise ThemeDocumentError("Theme document requires a string 'name'")

    raw_layouts = data.get("layouts") or []
    if not isinstance(raw_layouts, list):
        raise ThemeDocumentError(f"Theme {name!r}: 'layouts' must be a list")

    try:
        tokens = DesignTokens.model_validate(data.get("tokens") or {})
        layouts = [CustomLayoutDefinition.model_validate(item) for item in raw_layouts]
    except ValidationError as e:
        raise ThemeDocumentError(f"Invalid theme document {name!r}: {e}") from e
    except LayoutValidationError as e:
        raise ThemeDocumentError(f"Invalid layout in theme {name!r}: {e}") from e

    logger.debug("Parsed theme document %r with %d layouts", name, len(layouts))
    return Theme(name, tokens, layouts)

"""
Error types for the deckstyle resolution and injection engine.
"""


class DeckStyleError(Exception):
    """Base exception for all deckstyle errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotInitializedError(DeckStyleError):
    """
    Raised when state is read before anything was registered.

    Examples:
    - TokenRegistry.get_tokens() before register_tokens()
    """

    pass


class RendererNotFoundError(DeckStyleError):
    """Raised when no renderer is registered for a component type."""

    def __init__(self, component_type: str, available: list[str]):
        self.component_type = component_type
        self.available = available
        listing = ", ".join(available) if available else "(none)"
        super().__init__(
            f'No renderer registered for component type "{component_type}". '
            f"Available types: {listing}"
        )


class LayoutValidationError(DeckStyleError):
    """
    Raised when a layout definition or builder draft is invalid.

    Examples:
    - Layout without zones
    - Both extends and compose_from set
    - Cyclic extends chain
    """

    def __init__(self, message: str, problems: list[str] | None = None):
        self.problems = problems or []
        super().__init__(message)


class DuplicateZoneError(LayoutValidationError):
    """Raised when a zone name is added twice to the same layout draft."""

    def __init__(self, zone_name: str, layout_name: str):
        self.zone_name = zone_name
        self.layout_name = layout_name
        super().__init__(f'Zone "{zone_name}" already exists in layout "{layout_name}"')


class LayoutNotFoundError(DeckStyleError):
    """Raised when a layout referenced by extends/compose_from is not registered."""

    def __init__(self, name: str, referenced_by: str | None = None):
        self.name = name
        self.referenced_by = referenced_by
        message = f'Layout "{name}" not found in any tier (deck, theme, or system)'
        if referenced_by:
            message += f' (referenced by "{referenced_by}")'
        super().__init__(message)


class ThemeDocumentError(DeckStyleError):
    """Raised when a theme document cannot be parsed or validated."""

    pass


class ConfigError(DeckStyleError):
    """Raised when engine configuration text is invalid."""

    pass

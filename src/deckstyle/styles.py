"""
Style injection for resolved layouts.

A layout's ``custom_styles`` reach the shared style sink at most once per
distinct effective definition. Entries are keyed by the name the layout was
looked up under (``layout:<name>``; the theme block uses ``:root``) and
fingerprinted by content; a changed fingerprint replaces the entry, an
unchanged one is a no-op. Styles are trusted, pre-scoped CSS and are not
validated or rewritten.
"""

from __future__ import annotations

import hashlib
import logging
import threading
from typing import TYPE_CHECKING, Protocol

from deckstyle.layouts.models import LayoutDefinition

if TYPE_CHECKING:
    from deckstyle.themes.theme import Theme

logger = logging.getLogger(__name__)

ROOT_STYLE_KEY = ":root"
LAYOUT_KEY_PREFIX = "layout:"


class StyleSink(Protocol):
    """Destination for injected stylesheet text (e.g. a document's style store)."""

    def upsert(self, key: str, css: str) -> None: ...

    def remove(self, key: str) -> None: ...

    def to_css(self) -> str: ...


class MemoryStyleSink:
    """Ordered in-memory style store. Replacing a key keeps its position."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}

    def upsert(self, key: str, css: str) -> None:
        self._entries[key] = css

    def remove(self, key: str) -> None:
        self._entries.pop(key, None)

    def get(self, key: str) -> str | None:
        return self._entries.get(key)

    @property
    def entries(self) -> dict[str, str]:
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def to_css(self) -> str:
        return "\n\n".join(self._entries.values())


def layout_style_key(name: str) -> str:
    """Sink key for a layout's styles, kept apart from ``ROOT_STYLE_KEY``."""
    return f"{LAYOUT_KEY_PREFIX}{name}"


def style_fingerprint(name: str, css: str) -> str:
    """SHA-256 of name and CSS, first 16 hex chars."""
    digest = hashlib.sha256(f"{name}\x00{css}".encode()).hexdigest()
    return digest[:16]


class StyleInjector:
    """
    Idempotently materializes layout styles into a StyleSink.

    Thread-safe.
    """

    def __init__(self, sink: StyleSink | None = None) -> None:
        self._sink: StyleSink = sink if sink is not None else MemoryStyleSink()
        self._injected: dict[str, str] = {}
        self._lock = threading.RLock()

    @property
    def sink(self) -> StyleSink:
        return self._sink

    def inject(self, layout: LayoutDefinition, name: str | None = None) -> bool:
        """
        Ensure ``layout.custom_styles`` is the sink entry for a layout name.

        Args:
            layout: Resolved layout definition
            name: Name the layout was looked up under (default ``layout.name``)

        Returns:
            True if the sink was written or cleared, False if nothing changed
        """
        return self._apply(layout_style_key(name or layout.name), layout.custom_styles)

    def inject_theme(self, theme: Theme) -> bool:
        """Ensure the theme's ``:root`` block is in the sink."""
        return self._apply(ROOT_STYLE_KEY, theme.to_css_string())

    def is_injected(self, name: str) -> bool:
        """Whether styles are currently injected for layout ``name``."""
        with self._lock:
            return layout_style_key(name) in self._injected

    def reset(self) -> None:
        """Remove every entry this injector wrote and forget them."""
        with self._lock:
            for key in list(self._injected):
                self._sink.remove(key)
            self._injected.clear()

    def _apply(self, key: str, css: str | None) -> bool:
        with self._lock:
            previous = self._injected.get(key)

            if not css:
                if previous is None:
                    return False
                self._sink.remove(key)
                del self._injected[key]
                logger.info("Removed styles for %r (effective definition has none)", key)
                return True

            fingerprint = style_fingerprint(key, css)
            if previous == fingerprint:
                logger.debug("Styles for %r already injected", key)
                return False

            self._sink.upsert(key, css)
            self._injected[key] = fingerprint
            if previous is None:
                logger.info("Injected styles for %r", key)
            else:
                logger.info("Re-injected styles for %r (definition changed)", key)
            return True

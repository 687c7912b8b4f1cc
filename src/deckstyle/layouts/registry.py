"""
Layout registry with tiered precedence.

Every registration is kept. ``get_layout`` picks the effective definition:

1. highest ``priority``
2. on equal priority, source tier ``deck > theme > system``
3. on equal priority and tier, the most recent registration

Entries are never evicted except by ``clear()``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass

from .models import SOURCE_RANK, LayoutDefinition, LayoutSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutEntry:
    """One registration of a layout name."""

    definition: LayoutDefinition
    source: LayoutSource
    priority: int | float
    sequence: int

    def sort_key(self) -> tuple[int | float, int, int]:
        return (self.priority, SOURCE_RANK[self.source], self.sequence)


class LayoutRegistry:
    """
    Holds every registered layout definition keyed by name.

    Thread-safe. Each registration receives a monotonic ``sequence`` used
    only for tie-breaking.
    """

    def __init__(
        self,
        default_source: LayoutSource = LayoutSource.SYSTEM,
        default_priority: int | float = 0,
    ) -> None:
        self._default_source = default_source
        self._default_priority = default_priority
        self._entries: dict[str, list[LayoutEntry]] = {}
        self._lock = threading.RLock()
        self._seq = 0
        self._generation = 0

    def register_layout(
        self,
        name: str,
        definition: LayoutDefinition,
        *,
        source: LayoutSource | str | None = None,
        priority: int | float | None = None,
    ) -> LayoutEntry:
        """
        Append a registration under ``name``.

        Explicit ``source``/``priority`` win over the definition's own fields,
        which win over the registry defaults.

        Returns:
            The stored entry
        """
        if source is None:
            source = definition.source or self._default_source
        if priority is None:
            priority = (
                definition.priority if definition.priority is not None else self._default_priority
            )

        with self._lock:
            self._seq += 1
            entry = LayoutEntry(
                definition=definition,
                source=LayoutSource(source),
                priority=priority,
                sequence=self._seq,
            )
            self._entries.setdefault(name, []).append(entry)

        logger.debug(
            "Registered layout %r (source=%s, priority=%s, seq=%d)",
            name,
            entry.source.value,
            entry.priority,
            entry.sequence,
        )
        return entry

    @property
    def generation(self) -> int:
        """Incremented by every ``clear()``."""
        with self._lock:
            return self._generation

    def get_layout(self, name: str) -> LayoutDefinition | None:
        """Get the effective definition for ``name``, or None if never registered."""
        entry = self.get_effective_entry(name)
        return entry.definition if entry is not None else None

    def get_effective_entry(self, name: str) -> LayoutEntry | None:
        with self._lock:
            entries = self._entries.get(name)
            if not entries:
                return None
            return max(entries, key=LayoutEntry.sort_key)

    def get_entries(self, name: str) -> list[LayoutEntry]:
        """Snapshot of every registration for ``name`` in registration order."""
        with self._lock:
            return list(self._entries.get(name, ()))

    def has_layout(self, name: str) -> bool:
        with self._lock:
            return name in self._entries

    def get_layout_names(self) -> list[str]:
        """Registered names in first-registration order."""
        with self._lock:
            return list(self._entries)

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._entries.clear()
            self._generation += 1
        logger.debug("Layout registry cleared")

"""Cache statistics."""

from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(slots=True)
class CacheStats:
    """Counters for a single cache, accumulated over its lifetime.

    Attributes:
        hits: Lookups answered from the cache.
        misses: Lookups that fell through to the collaborator.
        evictions: Dead entries removed on access.
        loads: Entries inserted from the collaborator (rebuild, fallback or load).
        transitions: Scene transitions that actually changed the tracked scene.
    """

    hits: int = 0
    misses: int = 0
    evictions: int = 0
    loads: int = 0
    transitions: int = 0

    def to_dict(self) -> dict[str, int]:
        """Convert to a plain dictionary (for logging or reporting)."""
        return asdict(self)

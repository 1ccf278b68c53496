"""Mapping-backed resource loader.

Usage:
    loader = MappingResourceLoader({ResourceId("audio.se", "click_sfx"): clip})
    cache = KeyedResourceCache(loader)
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping
from typing import Any

from scenecache.core.identity import ResourceId


class MappingResourceLoader:
    """Serves resources from an in-memory mapping and counts load calls.

    Args:
        resources: Initial resources keyed by identifier.
    """

    def __init__(self, resources: Mapping[ResourceId, Any] | None = None) -> None:
        self._resources: dict[ResourceId, Any] = dict(resources or {})
        self.load_calls: Counter[ResourceId] = Counter()

    def add(self, resource_id: ResourceId, resource: Any) -> None:
        """Register (or replace) a resource."""
        self._resources[resource_id] = resource

    def load(self, resource_id: ResourceId) -> Any | None:
        """Return the registered resource, or None if unknown."""
        self.load_calls[resource_id] += 1
        return self._resources.get(resource_id)

    @property
    def total_calls(self) -> int:
        """Number of load() calls across all ids."""
        return sum(self.load_calls.values())

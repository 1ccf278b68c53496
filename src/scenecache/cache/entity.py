"""Entity-by-name cache scoped to the active scene.

The cache is rebuilt in full on every scene transition and repairs itself
when a cached entity has been destroyed since it was stored.

Usage:
    cache = EntityCache(graph)
    cache.on_scene_loaded(SceneId("Menu"))
    button = cache.get("PlayButton")
    clickable = cache.get_typed("PlayButton", Clickable)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeVar

from scenecache.cache.models import CacheStats
from scenecache.core.identity import SceneId
from scenecache.core.wiring import Ready, Wiring, require, wire
from scenecache.graph.protocol import SceneGraph

T = TypeVar("T")

logger = logging.getLogger(__name__)


class EntityCache:
    """Maps entity name to entity reference for the currently loaded scene.

    Names are not unique in a scene graph. During a rebuild the entity
    visited last in pre-order traversal wins.

    Args:
        graph: Scene graph accessor. May be bound later with bind().
    """

    def __init__(self, graph: SceneGraph | None = None) -> None:
        self._graph: Wiring[SceneGraph] = wire(graph, "scene graph")
        self._entities: dict[str, Any] = {}
        self._current_scene: SceneId | None = None
        self.stats = CacheStats()

    def bind(self, graph: SceneGraph) -> None:
        """Provide the scene graph accessor."""
        self._graph = Ready(graph)

    @property
    def current_scene(self) -> SceneId | None:
        """Scene the cache was last populated for."""
        return self._current_scene

    def on_scene_loaded(self, scene_id: SceneId) -> None:
        """Invalidate and rebuild for ``scene_id``. No-op if it is already current.

        Raises:
            UninitializedCollaboratorError: If no scene graph is bound.
        """
        graph = require(self._graph, "EntityCache")
        if scene_id == self._current_scene:
            return

        self._entities.clear()
        self._current_scene = scene_id
        self.stats.transitions += 1
        try:
            self._rebuild(graph)
        except Exception:
            # Never leave a partial map behind; back to Empty/Stale.
            self._entities.clear()
            self._current_scene = None
            raise
        logger.debug("Entity cache rebuilt for %s: %d names", scene_id, len(self._entities))

    def _rebuild(self, graph: SceneGraph) -> None:
        roots = graph.active_scene_roots()
        if not roots:
            logger.debug("No active scene roots, entity cache left empty")
            return

        stack = list(reversed(roots))
        while stack:
            entity = stack.pop()
            name = graph.name_of(entity)
            if name in self._entities:
                logger.debug("Entity name %r is not unique, keeping the later one", name)
            self._entities[name] = entity
            self.stats.loads += 1
            stack.extend(reversed(graph.children(entity)))

    def get(self, name: str) -> Any | None:
        """Resolve a name to a live entity reference.

        A cached reference to a destroyed entity is evicted, and the name is
        looked up again through the scene graph.

        Returns:
            Entity reference, or None if no live entity has that name.

        Raises:
            UninitializedCollaboratorError: If no scene graph is bound.
        """
        graph = require(self._graph, "EntityCache")
        entity = self._entities.get(name)
        if entity is not None:
            if graph.is_alive(entity):
                self.stats.hits += 1
                return entity
            del self._entities[name]
            self.stats.evictions += 1
            logger.debug("Evicted destroyed entity %r", name)

        self.stats.misses += 1
        entity = graph.find_by_name(name)
        if entity is None:
            return None
        self._entities[name] = entity
        self.stats.loads += 1
        return entity

    def get_typed(self, name: str, capability: type[T]) -> T | None:
        """Resolve a name and fetch a capability of the given type from it.

        Returns:
            The capability, or None if the entity or the capability is absent.
        """
        entity = self.get(name)
        if entity is None:
            return None
        graph = require(self._graph, "EntityCache")
        return graph.get_capability(entity, capability)

    def names(self) -> Iterator[str]:
        """Iterate cached names (entries may be dead until next accessed)."""
        return iter(list(self._entities))

    def __contains__(self, name: object) -> bool:
        return name in self._entities

    def __len__(self) -> int:
        return len(self._entities)

"""Scene transition fan-out.

The host calls notify_scene_loaded() once per completed scene load, after
the new scene's graph is queryable and before any lookups against it.

Usage:
    coordinator = SceneTransitionCoordinator(entity_cache, resource_cache)
    coordinator.notify_scene_loaded(SceneId("Menu"))

    # Or wire everything from settings
    coordinator = SceneTransitionCoordinator.from_settings(graph, loader, settings)
"""

from __future__ import annotations

import logging

from scenecache.cache.entity import EntityCache
from scenecache.cache.resource import KeyedResourceCache
from scenecache.config.settings import SceneCacheSettings
from scenecache.core.identity import SceneId
from scenecache.graph.protocol import SceneGraph
from scenecache.resources.protocol import ResourceLoader

logger = logging.getLogger(__name__)


class SceneTransitionCoordinator:
    """Single entry point that drives both caches on a scene transition.

    Synchronous: returns only once both caches have handled the scene.
    """

    def __init__(self, entities: EntityCache, resources: KeyedResourceCache) -> None:
        self._entities = entities
        self._resources = resources

    @classmethod
    def from_settings(
        cls,
        graph: SceneGraph,
        loader: ResourceLoader,
        settings: SceneCacheSettings | None = None,
    ) -> SceneTransitionCoordinator:
        """Build both caches from settings (defaults to SceneCacheSettings())."""
        settings = settings or SceneCacheSettings()
        resources = KeyedResourceCache(
            loader,
            settings.declaration_table(),
            initial_scene=settings.initial_scene_id(),
        )
        return cls(EntityCache(graph), resources)

    @property
    def entities(self) -> EntityCache:
        return self._entities

    @property
    def resources(self) -> KeyedResourceCache:
        return self._resources

    def notify_scene_loaded(self, scene_id: SceneId) -> None:
        """Pre-warm resources and rebuild the entity cache for ``scene_id``.

        Raises:
            ResourceLoadError: If a declared resource is missing. The entity
                cache is still refreshed before the error propagates.
            UninitializedCollaboratorError: If either cache is not wired.
        """
        logger.info("Scene loaded: %s", scene_id)
        try:
            self._resources.on_scene_loaded(scene_id)
        finally:
            self._entities.on_scene_loaded(scene_id)

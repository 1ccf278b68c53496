"""Keyed resource cache with scene-driven pre-warming.

Loaded resources are scene-independent: entries are added, never removed.
A Scene Declaration Table names the resources each scene needs, which are
loaded eagerly when that scene becomes active.

Usage:
    declarations = {SceneId("Menu"): {ResourceId("audio.se", "click_sfx")}}
    cache = KeyedResourceCache(loader, declarations)
    cache.on_scene_loaded(SceneId("Menu"))
    clip = cache.get(ResourceId("audio.se", "click_sfx"))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from scenecache.cache.models import CacheStats
from scenecache.core.errors import SceneCacheError
from scenecache.core.identity import ResourceId, SceneId
from scenecache.core.wiring import Ready, Wiring, require, wire
from scenecache.resources.protocol import ResourceLoader

logger = logging.getLogger(__name__)

DeclarationTable: TypeAlias = Mapping[SceneId, Iterable[ResourceId]]
"""Scene -> resources that scene needs pre-warmed."""


class ResourceLoadError(SceneCacheError):
    """Raised when the loader cannot resolve an identifier that must exist.

    Identifiers are generated from the asset layout, so a miss means a
    build or deployment defect. It is never retried.
    """

    def __init__(self, resource_id: ResourceId, reason: str = "not found") -> None:
        super().__init__(f"Resource {resource_id} could not be loaded: {reason}")
        self.resource_id = resource_id


class KeyedResourceCache:
    """Memoizes loaded resources by identifier.

    Args:
        loader: Resource loader. May be bound later with bind().
        declarations: Scene Declaration Table. None disables pre-warming.
        initial_scene: Scene to pre-warm during construction (needs a loader).
    """

    def __init__(
        self,
        loader: ResourceLoader | None = None,
        declarations: DeclarationTable | None = None,
        initial_scene: SceneId | None = None,
    ) -> None:
        self._loader: Wiring[ResourceLoader] = wire(loader, "resource loader")
        self._declarations: dict[SceneId, tuple[ResourceId, ...]] = {
            scene: tuple(dict.fromkeys(ids)) for scene, ids in (declarations or {}).items()
        }
        self._resources: dict[ResourceId, Any] = {}
        self._current_scene: SceneId | None = None
        self.stats = CacheStats()
        if initial_scene is not None:
            self.on_scene_loaded(initial_scene)

    def bind(self, loader: ResourceLoader) -> None:
        """Provide the resource loader."""
        self._loader = Ready(loader)

    @property
    def current_scene(self) -> SceneId | None:
        """Scene most recently pre-warmed."""
        return self._current_scene

    def declared_for(self, scene_id: SceneId) -> tuple[ResourceId, ...]:
        """Resources declared for a scene, in declaration order."""
        return self._declarations.get(scene_id, ())

    def on_scene_loaded(self, scene_id: SceneId) -> None:
        """Pre-warm every resource declared for ``scene_id``. No-op if already current.

        Raises:
            ResourceLoadError: If a declared resource cannot be loaded. Resources
                loaded before the failure stay cached.
            UninitializedCollaboratorError: If no loader is bound.
        """
        loader = require(self._loader, "KeyedResourceCache")
        if scene_id == self._current_scene:
            return

        self._current_scene = scene_id
        self.stats.transitions += 1
        for resource_id in self.declared_for(scene_id):
            if resource_id not in self._resources:
                self._load(loader, resource_id)
        logger.debug("Resource cache pre-warmed for %s: %d cached", scene_id, len(self))

    def get(self, resource_id: ResourceId) -> Any | None:
        """Return the cached resource, or None. Never calls the loader."""
        resource = self._resources.get(resource_id)
        if resource is None:
            self.stats.misses += 1
        else:
            self.stats.hits += 1
        return resource

    def get_or_load(self, resource_id: ResourceId) -> Any:
        """Return the cached resource, loading it on first use.

        Raises:
            ResourceLoadError: If the loader does not know the identifier.
            UninitializedCollaboratorError: If no loader is bound.
        """
        resource = self._resources.get(resource_id)
        if resource is not None:
            self.stats.hits += 1
            return resource
        self.stats.misses += 1
        return self._load(require(self._loader, "KeyedResourceCache"), resource_id)

    def put(self, resource_id: ResourceId, resource: Any) -> None:
        """Insert a resource loaded elsewhere. Replaces an existing entry for the id."""
        if resource is None:
            raise ValueError(f"Cannot cache None for {resource_id}")
        self._resources[resource_id] = resource

    def _load(self, loader: ResourceLoader, resource_id: ResourceId) -> Any:
        resource = loader.load(resource_id)
        if resource is None:
            logger.error("Resource %s not found by loader", resource_id)
            raise ResourceLoadError(resource_id)
        self._resources[resource_id] = resource
        self.stats.loads += 1
        logger.debug("Loaded resource %s", resource_id)
        return resource

    def __contains__(self, resource_id: object) -> bool:
        return resource_id in self._resources

    def __len__(self) -> int:
        return len(self._resources)

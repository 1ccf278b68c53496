"""scenecache: scene-scoped lookup caches over a host scene graph.

Usage:
    from scenecache import (
        EntityCache, KeyedResourceCache, LocalSceneGraph,
        MappingResourceLoader, ResourceId, SceneId, SceneTransitionCoordinator,
    )

    graph = LocalSceneGraph()
    loader = MappingResourceLoader({ResourceId("audio.se", "click_sfx"): clip})
    coordinator = SceneTransitionCoordinator(
        EntityCache(graph),
        KeyedResourceCache(loader, {SceneId("Menu"): {ResourceId("audio.se", "click_sfx")}}),
    )

    graph.load_scene(SceneId("Menu"))
    coordinator.notify_scene_loaded(SceneId("Menu"))
    coordinator.entities.get("PlayButton")
"""

__version__ = "0.1.0"

# Caches
from scenecache.cache import (
    CacheStats,
    DeclarationTable,
    EntityCache,
    KeyedResourceCache,
    ResourceLoadError,
    SceneTransitionCoordinator,
)

# Config
from scenecache.config import SceneCacheSettings

# Core primitives
from scenecache.core import (
    EntityId,
    ResourceId,
    SceneCacheError,
    SceneId,
    UninitializedCollaboratorError,
)

# Collaborators
from scenecache.graph import LocalSceneGraph, SceneGraph
from scenecache.resources import MappingResourceLoader, ResourceLoader

__all__ = [
    # Version
    "__version__",
    # Core
    "EntityId",
    "ResourceId",
    "SceneId",
    # Errors
    "SceneCacheError",
    "ResourceLoadError",
    "UninitializedCollaboratorError",
    # Caches
    "CacheStats",
    "DeclarationTable",
    "EntityCache",
    "KeyedResourceCache",
    "SceneTransitionCoordinator",
    # Collaborators
    "LocalSceneGraph",
    "MappingResourceLoader",
    "ResourceLoader",
    "SceneGraph",
    # Config
    "SceneCacheSettings",
]

"""Scene-scoped caches and the transition coordinator."""

from scenecache.cache.coordinator import SceneTransitionCoordinator
from scenecache.cache.entity import EntityCache
from scenecache.cache.models import CacheStats
from scenecache.cache.resource import DeclarationTable, KeyedResourceCache, ResourceLoadError

__all__ = [
    "CacheStats",
    "DeclarationTable",
    "EntityCache",
    "KeyedResourceCache",
    "ResourceLoadError",
    "SceneTransitionCoordinator",
]

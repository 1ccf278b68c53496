"""Identity: scene, resource and entity identifiers."""

from scenecache.core.identity.models import DEFAULT_NAMESPACE, EntityId, ResourceId, SceneId

__all__ = [
    "DEFAULT_NAMESPACE",
    "EntityId",
    "ResourceId",
    "SceneId",
]

"""Core primitives: identifiers, errors and collaborator wiring.

Architecture Note:
    core/ holds stateless building blocks. Stateful services live in
    graph/, resources/ and cache/.
"""

from scenecache.core.errors import SceneCacheError
from scenecache.core.identity import DEFAULT_NAMESPACE, EntityId, ResourceId, SceneId
from scenecache.core.wiring import (
    Ready,
    Uninitialized,
    UninitializedCollaboratorError,
    Wiring,
    is_ready,
    require,
    wire,
)

__all__ = [
    # Identity
    "DEFAULT_NAMESPACE",
    "EntityId",
    "ResourceId",
    "SceneId",
    # Errors
    "SceneCacheError",
    "UninitializedCollaboratorError",
    # Wiring
    "Ready",
    "Uninitialized",
    "Wiring",
    "is_ready",
    "require",
    "wire",
]

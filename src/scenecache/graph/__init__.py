"""Scene graph access: protocol and in-memory implementation."""

from scenecache.graph.allocator import EntityAllocator
from scenecache.graph.local import LocalSceneGraph
from scenecache.graph.protocol import SceneGraph

__all__ = [
    "EntityAllocator",
    "LocalSceneGraph",
    "SceneGraph",
]

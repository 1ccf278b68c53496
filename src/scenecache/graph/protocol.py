"""Scene graph accessor protocol.

The host environment owns the scene graph. The entity cache only reads it
through this interface, so any host (a game engine binding, a test fake,
LocalSceneGraph) can sit behind it.

Entity references are opaque: the cache stores them and hands them back,
nothing more.

Usage:
    graph = LocalSceneGraph()
    cache = EntityCache(graph)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class SceneGraph(Protocol):
    """Read access to the active scene's entity hierarchy."""

    def active_scene_roots(self) -> Sequence[Any]:
        """Root entities of the active scene. Empty if no scene is loaded."""
        ...

    def find_by_name(self, name: str) -> Any | None:
        """Search the active scene for a live entity called ``name``."""
        ...

    def children(self, entity: Any) -> Sequence[Any]:
        """Direct children of ``entity``, in hierarchy order."""
        ...

    def is_alive(self, entity: Any) -> bool:
        """Check whether ``entity`` still refers to a live entity."""
        ...

    def name_of(self, entity: Any) -> str:
        """Name of ``entity``. Not guaranteed unique within a scene."""
        ...

    def get_capability(self, entity: Any, capability: type[T]) -> T | None:
        """Get the capability (component/behavior) of the given type attached to ``entity``."""
        ...

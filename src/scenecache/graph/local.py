"""In-memory scene graph.

A self-contained host for the caches: scenes hold a forest of named
entities, each carrying typed capabilities. Useful for tests, tools and
headless runs where no engine is present.

Usage:
    graph = LocalSceneGraph()
    menu = SceneId("Menu")
    canvas = graph.spawn("Canvas", scene=menu)
    button = graph.spawn("PlayButton", Clickable(), parent=canvas)
    graph.load_scene(menu)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar, cast

from scenecache.core.identity import EntityId, SceneId
from scenecache.graph.allocator import EntityAllocator

T = TypeVar("T")

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _EntityRecord:
    name: str
    scene: SceneId
    parent: EntityId | None = None
    children: list[EntityId] = field(default_factory=list)
    capabilities: dict[type, Any] = field(default_factory=dict)


class LocalSceneGraph:
    """Dict-backed scene graph implementing the SceneGraph protocol.

    Structure:
        _records[entity] = name, scene, parent, children, capabilities
        _roots[scene] = root entities in spawn order

    Only the active scene is visible through the SceneGraph methods;
    other scenes keep their entities but are not traversed or searched.
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._records: dict[EntityId, _EntityRecord] = {}
        self._roots: dict[SceneId, list[EntityId]] = {}
        self._active: SceneId | None = None

    # Host-side mutation

    @property
    def active_scene(self) -> SceneId | None:
        """Currently loaded scene, or None."""
        return self._active

    def load_scene(self, scene_id: SceneId) -> None:
        """Make ``scene_id`` the active scene. A scene with no entities is valid."""
        self._roots.setdefault(scene_id, [])
        self._active = scene_id
        logger.debug("Scene %s is now active", scene_id)

    def unload(self) -> None:
        """Leave no scene active."""
        self._active = None

    def spawn(
        self,
        name: str,
        *capabilities: Any,
        parent: EntityId | None = None,
        scene: SceneId | None = None,
    ) -> EntityId:
        """Create a named entity, as a root of ``scene`` or a child of ``parent``.

        Args:
            name: Entity name. Duplicates are allowed.
            *capabilities: Capability instances to attach, keyed by type.
            parent: Parent entity; the new entity joins the parent's scene.
            scene: Scene for a root entity. Defaults to the active scene.

        Returns:
            Handle of the new entity.

        Raises:
            KeyError: If ``parent`` has been destroyed.
            ValueError: If no scene is given and none is active.
        """
        if parent is not None:
            scene = self._record(parent).scene
        elif scene is None:
            if self._active is None:
                raise ValueError("No scene given and no scene is active")
            scene = self._active

        entity = self._allocator.allocate()
        record = _EntityRecord(name=name, scene=scene, parent=parent)
        for capability in capabilities:
            record.capabilities[type(capability)] = capability
        self._records[entity] = record

        if parent is None:
            self._roots.setdefault(scene, []).append(entity)
        else:
            self._records[parent].children.append(entity)
        return entity

    def destroy(self, entity: EntityId) -> None:
        """Destroy an entity and its whole subtree. Destroying a dead entity is a no-op."""
        if not self.is_alive(entity):
            return
        record = self._records[entity]
        for child in list(record.children):
            self.destroy(child)

        if record.parent is None:
            self._roots[record.scene].remove(entity)
        else:
            self._records[record.parent].children.remove(entity)
        del self._records[entity]
        self._allocator.deallocate(entity)

    def add_capability(self, entity: EntityId, capability: Any) -> None:
        """Attach or replace a capability on an entity."""
        self._record(entity).capabilities[type(capability)] = capability

    # SceneGraph protocol

    def active_scene_roots(self) -> Sequence[EntityId]:
        """Root entities of the active scene, in spawn order."""
        if self._active is None:
            return ()
        return tuple(self._roots.get(self._active, ()))

    def find_by_name(self, name: str) -> EntityId | None:
        """First entity named ``name`` in pre-order over the active scene."""
        for entity in self._walk():
            if self._records[entity].name == name:
                return entity
        return None

    def children(self, entity: EntityId) -> Sequence[EntityId]:
        """Direct children of an entity.

        Raises:
            KeyError: If the entity has been destroyed.
        """
        return tuple(self._record(entity).children)

    def is_alive(self, entity: EntityId) -> bool:
        """Check if the handle refers to an existing entity."""
        return entity in self._records and self._allocator.is_alive(entity)

    def name_of(self, entity: EntityId) -> str:
        """Name of an entity.

        Raises:
            KeyError: If the entity has been destroyed.
        """
        return self._record(entity).name

    def get_capability(self, entity: EntityId, capability: type[T]) -> T | None:
        """Capability of the given type, or None if absent or the entity is dead.

        An exact type match wins; otherwise the first attached capability that
        is an instance of ``capability`` (a subclass) is returned.
        """
        if not self.is_alive(entity):
            return None
        capabilities = self._records[entity].capabilities
        if capability in capabilities:
            return cast(T, capabilities[capability])
        for instance in capabilities.values():
            if isinstance(instance, capability):
                return instance
        return None

    # Internals

    def _record(self, entity: EntityId) -> _EntityRecord:
        if not self.is_alive(entity):
            raise KeyError(f"Entity {entity} has been destroyed")
        return self._records[entity]

    def _walk(self) -> Iterator[EntityId]:
        """Pre-order traversal of the active scene."""
        stack = list(reversed(self.active_scene_roots()))
        while stack:
            entity = stack.pop()
            yield entity
            stack.extend(reversed(self._records[entity].children))

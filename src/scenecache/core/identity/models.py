"""Identifier models.

Usage:
    scene = SceneId("Menu")
    clip = ResourceId("audio.se", "click_sfx")
    clip = ResourceId.parse("audio.se/click_sfx")
    entity = EntityId(index=42, generation=1)
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_NAMESPACE = "default"


@dataclass(frozen=True, slots=True, order=True)
class SceneId:
    """Loadable scene, identified by name. Equality is by value."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, order=True)
class ResourceId:
    """Loadable resource within a namespace (e.g. ``audio.se``)."""

    namespace: str
    name: str

    @classmethod
    def parse(cls, text: str, default_namespace: str = DEFAULT_NAMESPACE) -> ResourceId:
        """Build a ResourceId from its ``namespace/name`` text form.

        The last ``/`` separates namespace from name, so names never contain one.
        A bare ``name`` lands in ``default_namespace``.

        Raises:
            ValueError: If the name part is empty.
        """
        namespace, sep, name = text.strip().rpartition("/")
        if not sep:
            namespace = default_namespace
        if not name:
            raise ValueError(f"Resource identifier has no name: {text!r}")
        return cls(namespace=namespace or default_namespace, name=name)

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True, slots=True)
class EntityId:
    """Lightweight entity handle with generation for safe slot reuse.

    A handle is dead once its slot has been recycled, i.e. the slot's
    generation moved past the handle's.
    """

    index: int = 0
    generation: int = 0

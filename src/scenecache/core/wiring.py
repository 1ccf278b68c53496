"""Collaborator wiring state.

A cache holds each collaborator as an explicit tag instead of a nullable
field, so using it before it is wired fails loudly.

Usage:
    state: Wiring[SceneGraph] = Uninitialized("scene graph")
    state = Ready(graph)
    graph = require(state)  # raises UninitializedCollaboratorError when not Ready
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from scenecache.core.errors import SceneCacheError

T = TypeVar("T")


class UninitializedCollaboratorError(SceneCacheError):
    """Raised when a cache is used before its collaborator was provided."""

    pass


@dataclass(frozen=True, slots=True)
class Uninitialized:
    """No collaborator yet. ``role`` names what is missing, for error messages."""

    role: str


@dataclass(frozen=True, slots=True)
class Ready(Generic[T]):
    """Collaborator available."""

    collaborator: T


Wiring: TypeAlias = Uninitialized | Ready[T]


def wire(collaborator: T | None, role: str) -> Wiring[T]:
    """Tag an optional constructor argument."""
    if collaborator is None:
        return Uninitialized(role)
    return Ready(collaborator)


def require(state: Wiring[T], owner: str = "cache") -> T:
    """Unwrap a Ready collaborator.

    Raises:
        UninitializedCollaboratorError: If the state is Uninitialized.
    """
    if isinstance(state, Ready):
        return state.collaborator
    raise UninitializedCollaboratorError(f"{owner} used before its {state.role} was provided")


def is_ready(state: Wiring[object]) -> bool:
    """Check whether a collaborator has been provided."""
    return isinstance(state, Ready)

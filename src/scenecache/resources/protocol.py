"""Resource loader protocol.

The loader turns a ResourceId into an in-memory resource (an audio clip,
a texture, ...). Where resources physically live is the loader's business.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from scenecache.core.identity import ResourceId


@runtime_checkable
class ResourceLoader(Protocol):
    """Loads resources by identifier."""

    def load(self, resource_id: ResourceId) -> Any | None:
        """Load a resource.

        Returns:
            The loaded resource, or None if nothing exists under that id.
        """
        ...

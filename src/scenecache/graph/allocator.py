"""Entity allocation service.

EntityAllocator manages entity handle lifecycle for LocalSceneGraph.
"""

from __future__ import annotations

from scenecache.core.identity import EntityId


class EntityAllocator:
    """Allocates entity handles with generation tracking for recycling.

    Maintains a free list of released slot indices with incremented
    generations, so a handle to a destroyed entity never matches the
    entity that later reuses its slot.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> EntityId:
        """Allocate a handle, reusing recycled slots when available.

        Returns:
            Newly allocated EntityId.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            return EntityId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return EntityId(index=index, generation=0)

    def deallocate(self, entity: EntityId) -> None:
        """Return a handle's slot for reuse with incremented generation.

        Args:
            entity: Handle to release.

        Raises:
            ValueError: If the handle is already dead.
        """
        if not self.is_alive(entity):
            raise ValueError(f"Cannot deallocate dead entity {entity}")

        new_gen = entity.generation + 1
        self._generations[entity.index] = new_gen
        self._free_list.append((entity.index, new_gen))

    def is_alive(self, entity: EntityId) -> bool:
        """Check if a handle is still valid (its slot not recycled).

        Returns:
            True if the handle's generation matches its slot's generation.
        """
        return self._generations.get(entity.index, -1) == entity.generation

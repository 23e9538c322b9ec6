"""Hands out entity ids and keeps each entity's component mask."""

import sys
from collections import deque

from fumo.engine_constants import MAX_COMPONENTS, MAX_ENTITY_IDS, EcsError


class EntityManager:
    """Recycles entity ids in FIFO order and stores their component masks."""

    def __init__(self) -> None:
        self.living_entity_count = 0
        self._available_entity_ids: deque[int] = deque(range(MAX_ENTITY_IDS))
        self._component_masks = [0] * MAX_ENTITY_IDS

    @staticmethod
    def _check_entity_id(entity_id: int) -> None:
        if not 0 <= entity_id < MAX_ENTITY_IDS:
            raise EcsError(f"entity id {entity_id} exceeds MAX_ENTITY_IDS")

    @staticmethod
    def _check_component_id(component_id: int) -> None:
        if not 0 <= component_id < MAX_COMPONENTS:
            raise EcsError(f"component id {component_id} exceeds MAX_COMPONENTS")

    def create_entity(self) -> int:
        """Return a fresh entity id."""
        if self.living_entity_count + 1 >= MAX_ENTITY_IDS:
            raise EcsError("too many living entities")
        self.living_entity_count += 1
        return self._available_entity_ids.popleft()

    def destroy_entity(self, entity_id: int) -> None:
        """Clear the entity's mask and queue its id for reuse."""
        self._check_entity_id(entity_id)
        self._component_masks[entity_id] = 0
        self._available_entity_ids.append(entity_id)
        self.living_entity_count -= 1

    def add_to_component_mask(self, entity_id: int, component_id: int) -> None:
        """Set the bit of ``component_id`` in the entity's mask."""
        self._check_entity_id(entity_id)
        self._check_component_id(component_id)
        self._component_masks[entity_id] |= 1 << component_id

    def remove_from_component_mask(self, entity_id: int, component_id: int) -> None:
        """Clear the bit of ``component_id`` in the entity's mask."""
        self._check_entity_id(entity_id)
        self._check_component_id(component_id)
        bit = 1 << component_id
        if not self._component_masks[entity_id] & bit:
            raise EcsError(
                f"component {component_id} wasn't in the mask of entity {entity_id}"
            )
        self._component_masks[entity_id] ^= bit

    def get_component_mask(self, entity_id: int) -> int:
        """Return the entity's component mask."""
        self._check_entity_id(entity_id)
        return self._component_masks[entity_id]

    def debug_print(self) -> None:
        """Write the manager's state to standard error."""
        print(f"living_entity_count ---> {self.living_entity_count}", file=sys.stderr)
        print(
            f"available_entity_ids ---> {list(self._available_entity_ids)}",
            file=sys.stderr,
        )
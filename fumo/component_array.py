"""Packed storage of one component type, indexed by entity id."""

from typing import Generic, TypeVar

from fumo.engine_constants import MAX_ENTITY_IDS, EcsError

T = TypeVar("T")


class ComponentArray(Generic[T]):
    """Keeps components of one type densely packed; removal moves the last into the gap."""

    def __init__(self, capacity: int = MAX_ENTITY_IDS) -> None:
        self._capacity = capacity
        self._components: list[T] = []
        self._index_to_entity: list[int] = []
        self._entity_to_index: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entity_to_index

    def add_component_data(self, entity_id: int, component: T) -> None:
        """Store ``component`` for ``entity_id`` at the end of the packed array."""
        if entity_id in self._entity_to_index:
            raise EcsError(f"component added twice for entity {entity_id}")
        if len(self._components) >= self._capacity:
            raise EcsError("component array is full")
        self._entity_to_index[entity_id] = len(self._components)
        self._index_to_entity.append(entity_id)
        self._components.append(component)

    def remove_component_data(self, entity_id: int) -> None:
        """Remove the component of ``entity_id``, keeping the array packed."""
        if entity_id not in self._entity_to_index:
            raise EcsError(f"removing non-existent component of entity {entity_id}")
        removed_index = self._entity_to_index.pop(entity_id)
        last_component = self._components.pop()
        last_entity = self._index_to_entity.pop()
        if removed_index < len(self._components):
            self._components[removed_index] = last_component
            self._index_to_entity[removed_index] = last_entity
            self._entity_to_index[last_entity] = removed_index

    def get_component_data(self, entity_id: int) -> T:
        """Return the component stored for ``entity_id``."""
        try:
            return self._components[self._entity_to_index[entity_id]]
        except KeyError:
            raise EcsError(
                f"entity {entity_id} does not have this component"
            ) from None

    def entity_destroyed(self, entity_id: int) -> None:
        """Drop the entity's component if it has one."""
        if entity_id in self._entity_to_index:
            self.remove_component_data(entity_id)
"""Containers that give names to entities owning a single component."""

from typing import Any, Generic, TypeVar

from fumo.engine_constants import EcsError

T = TypeVar("T")


class NamedComponentContainer(Generic[T]):
    """Maps names to entities of ``state.ecs`` that each own one ``T`` component.

    Removing a name does not destroy the entity behind it.
    """

    def __init__(self, component_type: type, state: Any) -> None:
        self._component_type = component_type
        self._state = state
        self._named_entity_ids: dict[str, int] = {}

    def __contains__(self, entity_name: object) -> bool:
        return entity_name in self._named_entity_ids

    def __len__(self) -> int:
        return len(self._named_entity_ids)

    def add_component_by_name(self, entity_name: str, component: T) -> int:
        """Create an entity owning ``component`` and name it; return its id.

        A name that is already taken keeps the entity it had.
        """
        if type(component) is not self._component_type:
            raise EcsError(
                "cannot add an entity with a component of a different type "
                f"to a {self._component_type.__name__} container"
            )
        ecs = self._state.ecs
        ecs.check_for_component(self._component_type, None)
        entity_id = ecs.create_entity()
        ecs.entity_add_component(entity_id, component)
        self._named_entity_ids.setdefault(entity_name, entity_id)
        return entity_id

    def remove_component_by_name(self, entity_name: str) -> None:
        """Forget ``entity_name``; the entity itself stays alive."""
        try:
            del self._named_entity_ids[entity_name]
        except KeyError:
            raise EcsError(
                f"{entity_name!r} wasn't in this "
                f"{self._component_type.__name__} container"
            ) from None

    def get_component_by_name(self, entity_name: str) -> T:
        """Return the component of the entity named ``entity_name``."""
        try:
            entity_id = self._named_entity_ids[entity_name]
        except KeyError:
            raise EcsError(
                f"{entity_name!r} hasn't been added to this "
                f"{self._component_type.__name__} container"
            ) from None
        return self._state.ecs.get_component(self._component_type, entity_id)
"""Registry of component types and their packed storage arrays."""

import sys
from typing import Any

from fumo.component_array import ComponentArray
from fumo.engine_constants import MAX_COMPONENTS, EcsError, System


class ComponentManager:
    """Assigns each registered component type an id and owns its storage."""

    def __init__(self) -> None:
        self._component_ids: dict[type, int] = {}
        self._component_arrays: dict[type, ComponentArray[Any]] = {}

    def _array(self, component_type: type) -> ComponentArray[Any]:
        try:
            return self._component_arrays[component_type]
        except KeyError:
            raise EcsError(
                f"component {component_type.__name__} was never registered"
            ) from None

    def register_component(self, component_type: type) -> None:
        """Register ``component_type`` and give it the next free id."""
        if component_type in self._component_ids:
            raise EcsError(f"already added component {component_type.__name__}")
        if len(self._component_ids) >= MAX_COMPONENTS:
            raise EcsError("too many component types")
        self._component_ids[component_type] = len(self._component_ids)
        self._component_arrays[component_type] = ComponentArray()

    def get_component_id(self, component_type: type) -> int:
        """Return the id used for ``component_type`` in component masks."""
        try:
            return self._component_ids[component_type]
        except KeyError:
            raise EcsError(
                f"forgot to register component {component_type.__name__}, "
                "or asked for a system"
            ) from None

    def get_component(self, component_type: type, entity_id: int) -> Any:
        """Return the ``component_type`` component of ``entity_id``."""
        return self._array(component_type).get_component_data(entity_id)

    def check_for_component(self, component_type: type, entity_id: int) -> None:
        """Raise unless ``component_type`` has been registered."""
        self._array(component_type)

    def add_component(self, entity_id: int, component: Any) -> None:
        """Attach ``component`` to ``entity_id``."""
        if isinstance(component, System):
            raise EcsError("cannot register a system as a component")
        self._array(type(component)).add_component_data(entity_id, component)

    def remove_component(self, component_type: type, entity_id: int) -> int:
        """Detach the ``component_type`` component of ``entity_id``; return its id."""
        self._array(component_type).remove_component_data(entity_id)
        return self._component_ids[component_type]

    def notify_destroyed_entity(self, entity_id: int) -> None:
        """Remove the destroyed entity from every component array."""
        for component_array in self._component_arrays.values():
            component_array.entity_destroyed(entity_id)

    def debug_print(self) -> None:
        """Write each component array's size to standard error."""
        summary = {
            component_type.__name__: len(array)
            for component_type, array in self._component_arrays.items()
        }
        print(f"component_arrays ---> {summary}", file=sys.stderr)
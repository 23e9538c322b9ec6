"""The entity-component-system core tying entities, components and systems together."""

from typing import Any

from fumo.component_manager import ComponentManager
from fumo.engine_constants import System
from fumo.entity_manager import EntityManager
from fumo.entity_query import EntityQuery
from fumo.system_manager import SystemManager


class Ecs:
    """Coordinates the entity, component and system managers."""

    def __init__(self) -> None:
        self._entity_manager = EntityManager()
        self._component_manager = ComponentManager()
        self._system_manager = SystemManager()

    def create_entity(self) -> int:
        """Return a new entity id."""
        return self._entity_manager.create_entity()

    def destroy_entity(self, entity_id: int) -> None:
        """Destroy the entity, its components and its system memberships."""
        self._entity_manager.destroy_entity(entity_id)
        self._component_manager.notify_destroyed_entity(entity_id)
        self._system_manager.notify_destroyed_entity(entity_id)

    def register_component(self, component_type: type) -> None:
        """Make ``component_type`` usable as a component."""
        self._component_manager.register_component(component_type)

    def entity_add_component(self, entity_id: int, component: Any) -> None:
        """Attach ``component`` to the entity and update the systems."""
        self._component_manager.add_component(entity_id, component)
        component_id = self.get_component_id(type(component))
        self._entity_manager.add_to_component_mask(entity_id, component_id)
        component_mask = self._entity_manager.get_component_mask(entity_id)
        self._system_manager.entity_component_mask_changed(entity_id, component_mask)

    def entity_remove_component(self, component_type: type, entity_id: int) -> int:
        """Detach the entity's ``component_type`` component; return the new mask."""
        component_id = self._component_manager.remove_component(
            component_type, entity_id
        )
        self._entity_manager.remove_from_component_mask(entity_id, component_id)
        component_mask = self._entity_manager.get_component_mask(entity_id)
        self._system_manager.entity_component_mask_changed(entity_id, component_mask)
        return component_mask

    def get_component(self, component_type: type, entity_id: int) -> Any:
        """Return the entity's ``component_type`` component."""
        return self._component_manager.get_component(component_type, entity_id)

    def check_for_component(self, component_type: type, entity_id: int) -> None:
        """Raise unless ``component_type`` is registered."""
        self._component_manager.check_for_component(component_type, entity_id)

    def get_component_id(self, component_type: type) -> int:
        """Return the mask bit index of ``component_type``."""
        return self._component_manager.get_component_id(component_type)

    def get_component_mask(self, entity_id: int) -> int:
        """Return the entity's component mask."""
        return self._entity_manager.get_component_mask(entity_id)

    def register_system(
        self, system_type: type, entity_query: EntityQuery, system: System
    ) -> None:
        """Register a system that tracks entities matching ``entity_query``."""
        self._system_manager.register_system(system_type, entity_query, system)

    def add_unregistered_system(self, system_type: type, system: System) -> None:
        """Store a system that tracks no entities."""
        self._system_manager.add_unregistered_system(system_type, system)

    def get_system(self, system_type: type) -> System:
        """Return the stored system of ``system_type``."""
        return self._system_manager.get_system(system_type)

    def debug_print(self) -> None:
        """Write the state of all managers to standard error."""
        self._component_manager.debug_print()
        self._entity_manager.debug_print()
        self._system_manager.debug_print()
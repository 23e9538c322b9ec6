"""Registry of systems and the entity queries that feed them."""

import sys

from fumo.engine_constants import EcsError, System
from fumo.entity_query import EntityQuery


class SystemManager:
    """Keeps systems by type and updates their entity sets as masks change."""

    def __init__(self) -> None:
        self._entity_queries: dict[type, EntityQuery] = {}
        self._systems: dict[type, System] = {}
        self._unregistered_systems: dict[type, System] = {}

    def register_system(
        self, system_type: type, entity_query: EntityQuery, system: System
    ) -> None:
        """Register ``system`` so that entities matching ``entity_query`` reach it."""
        if system_type in self._systems:
            raise EcsError(f"registered system {system_type.__name__} twice")
        self._systems[system_type] = system
        self._entity_queries[system_type] = entity_query

    def add_unregistered_system(self, system_type: type, system: System) -> None:
        """Store ``system`` without an entity query; it receives no entity updates."""
        if system_type in self._unregistered_systems:
            raise EcsError(
                f"added unregistered system {system_type.__name__} twice"
            )
        self._unregistered_systems[system_type] = system

    def get_system(self, system_type: type) -> System:
        """Return the system stored for ``system_type``."""
        if system_type in self._unregistered_systems:
            return self._unregistered_systems[system_type]
        if system_type in self._systems:
            return self._systems[system_type]
        raise EcsError(
            f"system {system_type.__name__} hasn't been added or registered"
        )

    def notify_destroyed_entity(self, entity_id: int) -> None:
        """Drop the destroyed entity from every registered system."""
        for system in self._systems.values():
            system.sys_entities.discard(entity_id)

    def entity_component_mask_changed(
        self, entity_id: int, component_mask: int
    ) -> None:
        """Add or remove ``entity_id`` from each registered system per its query."""
        for system_type, system in self._systems.items():
            if self._entity_queries[system_type].filter(component_mask):
                system.sys_entities.add(entity_id)
            else:
                system.sys_entities.discard(entity_id)

    def debug_print(self) -> None:
        """Write the names of all stored systems to standard error."""
        registered = [system_type.__name__ for system_type in self._systems]
        unregistered = [
            system_type.__name__ for system_type in self._unregistered_systems
        ]
        print(f"all_systems ---> {registered}", file=sys.stderr)
        print(f"unregistered_systems ---> {unregistered}", file=sys.stderr)
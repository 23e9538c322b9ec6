"""The ECS front end that also runs scheduled systems in priority order."""

import sys
from typing import Any

from fumo.ecs import Ecs
from fumo.engine_constants import MAX_ENTITY_IDS, NO_ENTITY_FOUND, EcsError, System
from fumo.entity_query import EntityQuery


class SchedulerECS:
    """Owns the ECS and a priority schedule of systems run once per frame.

    The schedule holds at most one system per priority: scheduling a system
    whose priority is already taken leaves the schedule unchanged.
    """

    def __init__(self) -> None:
        self._ecs = Ecs()
        self._scheduled: dict[int, System] = {}
        self._scheduled_systems_debug: dict[type, System] = {}
        self._entity_ids_debug: list[int] = [0] * MAX_ENTITY_IDS

    # entities

    def create_entity(self) -> int:
        """Return a new entity id."""
        entity_id = self._ecs.create_entity()
        self._entity_ids_debug[entity_id] = entity_id
        return entity_id

    def destroy_entity(self, entity_id: int) -> None:
        """Destroy the entity and everything attached to it."""
        self._ecs.destroy_entity(entity_id)
        self._entity_ids_debug[entity_id] = NO_ENTITY_FOUND

    # components

    def register_component(self, component_type: type) -> None:
        """Make ``component_type`` usable as a component."""
        self._ecs.register_component(component_type)

    def entity_add_component(self, entity_id: int, component: Any) -> None:
        """Attach ``component`` to the entity."""
        self._ecs.entity_add_component(entity_id, component)

    def entity_remove_component(self, component_type: type, entity_id: int) -> int:
        """Detach the entity's ``component_type`` component; return the new mask."""
        return self._ecs.entity_remove_component(component_type, entity_id)

    def get_component(self, component_type: type, entity_id: int) -> Any:
        """Return the entity's ``component_type`` component."""
        return self._ecs.get_component(component_type, entity_id)

    def check_for_component(self, component_type: type, entity_id: int) -> None:
        """Raise unless ``component_type`` is registered."""
        self._ecs.check_for_component(component_type, entity_id)

    def get_component_id(self, component_type: type) -> int:
        """Return the mask bit index of ``component_type``."""
        return self._ecs.get_component_id(component_type)

    # systems

    def _schedule(self, system: System) -> bool:
        if system.priority in self._scheduled:
            return False
        self._scheduled[system.priority] = system
        return True

    def _unschedule(self, system: System) -> bool:
        if self._scheduled.get(system.priority) is not system:
            return False
        del self._scheduled[system.priority]
        return True

    @property
    def scheduled_systems(self) -> tuple[System, ...]:
        """The scheduled systems in the order they run."""
        return tuple(self._scheduled[p] for p in sorted(self._scheduled))

    def register_system(
        self, system_type: type, priority: int, entity_query: EntityQuery, *args: Any
    ) -> System:
        """Create, register and schedule a system fed by ``entity_query``."""
        system = system_type(*args)
        self._ecs.register_system(system_type, entity_query, system)
        system.priority = priority
        self._schedule(system)
        self._scheduled_systems_debug[system_type] = system
        return system

    def register_system_unscheduled(
        self, system_type: type, entity_query: EntityQuery, *args: Any
    ) -> System:
        """Create and register a system that run_systems never calls."""
        system = system_type(*args)
        self._ecs.register_system(system_type, entity_query, system)
        return system

    def add_unregistered_system(
        self, system_type: type, priority: int, *args: Any
    ) -> System:
        """Create and schedule a system that tracks no entities."""
        system = system_type(*args)
        self._ecs.add_unregistered_system(system_type, system)
        system.priority = priority
        self._schedule(system)
        self._scheduled_systems_debug[system_type] = system
        return system

    def add_unregistered_system_unscheduled(
        self, system_type: type, *args: Any
    ) -> System:
        """Create a system that tracks no entities and is not run each frame."""
        system = system_type(*args)
        self._ecs.add_unregistered_system(system_type, system)
        return system

    def run_systems(self) -> None:
        """Call every scheduled system once, lowest priority first."""
        for system in self.scheduled_systems:
            system.sys_call()

    def get_system(self, system_type: type) -> System:
        """Return the system of ``system_type``, registered or not."""
        return self._ecs.get_system(system_type)

    def make_component_mask(self, *args: type) -> int:
        """Return the mask with the bits of all given component types set."""
        component_mask = 0
        for component_type in args:
            if isinstance(component_type, type) and issubclass(component_type, System):
                raise EcsError(
                    "cannot add a system to another system's component mask"
                )
            component_mask |= 1 << self.get_component_id(component_type)
        return component_mask

    def filter(self, entity_id: int, entity_query: EntityQuery) -> bool:
        """Return whether the entity matches ``entity_query``."""
        return entity_query.filter(self._ecs.get_component_mask(entity_id))

    def debug_print(self) -> None:
        """Write the whole ECS state to standard error."""
        print(f"all_entity_ids_debug ---> {self._entity_ids_debug}", file=sys.stderr)
        print(file=sys.stderr)
        self._ecs.debug_print()
        print(file=sys.stderr)
        self.debug_print_scheduler()
        print("\n", file=sys.stderr)

    def debug_print_scheduler(self) -> None:
        """Write the schedule and each scheduled system's priority to standard error."""
        order = [type(system).__name__ for system in self.scheduled_systems]
        print(f"system_scheduler ---> {order}", file=sys.stderr)
        for system_type, system in self._scheduled_systems_debug.items():
            print(f"{system_type.__name__} -----> {system.priority}", file=sys.stderr)
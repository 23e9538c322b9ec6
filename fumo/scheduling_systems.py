"""A system that lets other systems wake and sleep scheduled systems."""

import weakref

from fumo.engine_constants import EcsError, System
from fumo.scheduler_ecs import SchedulerECS


class SchedulerSystemECS(System):
    """Adds systems to and removes them from its scheduler's run order."""

    def __init__(self, parent_ecs: SchedulerECS) -> None:
        super().__init__()
        self._parent_ecs = weakref.ref(parent_ecs)

    def _parent(self) -> SchedulerECS:
        parent = self._parent_ecs()
        if parent is None:
            raise EcsError("the scheduler of this system no longer exists")
        return parent

    def sys_call(self) -> None:
        """Do nothing; this system only acts when asked."""

    def awake_system(self, system_type: type) -> None:
        """Schedule the system of ``system_type`` so that it runs each frame."""
        parent = self._parent()
        parent._schedule(parent.get_system(system_type))

    def sleep_system(self, system_type: type) -> None:
        """Take the system of ``system_type`` out of the run order."""
        parent = self._parent()
        if not parent._unschedule(parent.get_system(system_type)):
            raise EcsError(f"system {system_type.__name__} wasn't awake/scheduled")
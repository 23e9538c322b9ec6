"""Limits, sentinel values and the system base class of the ECS core."""

from abc import ABC, abstractmethod

MAX_ENTITY_IDS = 100
NO_ENTITY_FOUND = 69420

MAX_COMPONENTS = 64
MAX_SYSTEMS = 64

NO_PRIORITY = 42069
MAX_PRIORITY = MAX_SYSTEMS


class EcsError(Exception):
    """Raised when the entity-component-system is used in a way it does not allow."""


class System(ABC):
    """Base class of every system: a set of tracked entities plus a per-frame call."""

    def __init__(self) -> None:
        self.sys_entities: set[int] = set()
        self.awake = True
        self.priority = NO_PRIORITY

    @abstractmethod
    def sys_call(self) -> None:
        """Run the system's work for one frame."""
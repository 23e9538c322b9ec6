"""Entity queries: a component mask combined with a matching rule."""

from dataclasses import dataclass
from enum import Enum, auto

from fumo.engine_constants import EcsError


class Filter(Enum):
    """How an entity's component mask is compared with a query's mask.

    ALL: every queried component must be present.
    ANY: at least one queried component must be present.
    ONLY: exactly the queried components must be present.
    NONE: none of the queried components may be present.
    """

    ALL = auto()
    ANY = auto()
    ONLY = auto()
    NONE = auto()


@dataclass(frozen=True)
class EntityQuery:
    """Selects entities whose component masks satisfy a filter."""

    component_mask: int
    component_filter: Filter

    def filter(self, entity_mask: int) -> bool:
        """Return whether an entity with ``entity_mask`` matches this query."""
        wanted = self.component_mask
        if self.component_filter is Filter.ALL:
            return (entity_mask & wanted) == wanted
        if self.component_filter is Filter.ANY:
            return (entity_mask & wanted) != 0
        if self.component_filter is Filter.ONLY:
            return entity_mask == wanted
        if self.component_filter is Filter.NONE:
            return (entity_mask & wanted) == 0
        raise EcsError(f"unknown component filter: {self.component_filter!r}")
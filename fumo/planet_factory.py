"""Systems that spawn entities, and the planet factory of the level editor."""

from typing import Any, Optional

from fumo.components import Body, CircleShape, GravityField, Render, Vector2
from fumo.engine_constants import System
from fumo.settings import DEFAULT_PLANET_RADIUS, DEFAULT_RADIUS, Color, random_planet_color

DEFAULT_GRAV_STRENGTH = 9.8 * 6


class EntityFactory(System):
    """Base of systems that spawn entities."""


class PlanetFactory(EntityFactory):
    """Creates planets in ``state.ecs`` and remembers the default ones it made.

    Only planets made by ``create_default_planet`` are tracked, so they can be
    removed again without touching the rest of the level.
    """

    def __init__(self, state: Any, rng: Optional[Any] = None) -> None:
        super().__init__()
        self._state = state
        self._rng = rng

    def sys_call(self) -> None:
        """Do nothing; planets are made on request."""

    def _spawn(
        self,
        radius: float,
        velocity: Vector2,
        position: Vector2,
        color: Color,
        grav_radius: float,
        grav_strength: float,
    ) -> int:
        ecs = self._state.ecs
        entity_id = ecs.create_entity()
        ecs.entity_add_component(entity_id, Body(position=position, velocity=velocity))
        ecs.entity_add_component(entity_id, Render(color=color))
        ecs.entity_add_component(entity_id, CircleShape(radius=radius))
        ecs.entity_add_component(
            entity_id,
            GravityField(gravity_radius=grav_radius, gravity_strength=grav_strength),
        )
        return entity_id

    def create_planet(
        self,
        radius: float,
        mass: float,
        velocity: Vector2,
        position: Vector2,
        color: Color,
        grav_radius: float,
        grav_strength: float,
    ) -> int:
        """Create a planet; ``mass`` is accepted but planets use fixed gravity."""
        return self._spawn(radius, velocity, position, color, grav_radius, grav_strength)

    def create_default_planet(self, position: Vector2) -> int:
        """Create a resting planet of default size in a random colour and track it."""
        entity_id = self._spawn(
            DEFAULT_RADIUS,
            Vector2(),
            position,
            random_planet_color(self._rng),
            DEFAULT_PLANET_RADIUS,
            DEFAULT_GRAV_STRENGTH,
        )
        self.sys_entities.add(entity_id)
        return entity_id

    def delete_planet(self, entity_id: int) -> None:
        """Destroy the planet and stop tracking it."""
        self._state.ecs.destroy_entity(entity_id)
        self.sys_entities.discard(entity_id)

    def delete_all_planets(self) -> None:
        """Destroy every planet this factory tracks."""
        for entity_id in sorted(self.sys_entities):
            self._state.ecs.destroy_entity(entity_id)
        self.sys_entities.clear()
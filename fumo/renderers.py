"""Systems that draw entities to the screen."""

from typing import Any

import pygame

from fumo.components import Body, CircleShape, Render
from fumo.engine_constants import System


class PlanetRenderer(System):
    """Draws every tracked entity as a filled circle on ``state.screen``."""

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Draw all planets."""
        self.draw_planet()

    def draw_planet(self) -> None:
        """Draw each tracked entity's circle in its render colour."""
        ecs = self._state.ecs
        for entity_id in sorted(self.sys_entities):
            body = ecs.get_component(Body, entity_id)
            circle_shape = ecs.get_component(CircleShape, entity_id)
            render = ecs.get_component(Render, entity_id)
            pygame.draw.circle(
                self._state.screen,
                tuple(render.color),
                (body.position.x, body.position.y),
                circle_shape.radius,
            )
"""Collision handling between the player and circular planets."""

from typing import Any

from fumo.components import Body, CircleShape
from fumo.engine_constants import System

_OVERLAP_CORRECTION = 1.0


class CircleCollisionHandler(System):
    """Pushes the player out of every tracked circle it overlaps.

    ``state`` provides ``ecs`` and ``player_id``.
    """

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Do nothing; the collision runner drives this system."""

    def check_collisions_with_player(self) -> None:
        """Resolve the player's overlap with each tracked circle."""
        for circle_entity_id in sorted(self.sys_entities):
            self.check_collision_with_player(circle_entity_id, self._state.player_id)

    def check_collision_with_player(self, circle_entity_id: int, entity_id: int) -> None:
        """Resolve the overlap of ``entity_id`` with one circle, if any."""
        ecs = self._state.ecs
        player_body = ecs.get_component(Body, entity_id)
        circle_body = ecs.get_component(Body, circle_entity_id)
        player_shape = ecs.get_component(CircleShape, entity_id)
        circle_shape = ecs.get_component(CircleShape, circle_entity_id)
        distance = circle_body.position.distance_to(player_body.position)
        if distance < player_shape.radius + circle_shape.radius:
            self.solve_collision_player(
                circle_body, player_body, circle_shape, player_shape
            )

    def solve_collision_player(
        self,
        other_body: Body,
        player_body: Body,
        other_shape: CircleShape,
        player_shape: CircleShape,
    ) -> None:
        """Move the player away from ``other_body`` until the circles just touch."""
        distance = other_body.position.distance_to(player_body.position)
        impact = other_body.position - player_body.position
        overlap = player_shape.radius + other_shape.radius - distance
        push = impact.normalized() * (overlap * _OVERLAP_CORRECTION)
        player_body.position = player_body.position - push


class PlayerCollisionRunner(System):
    """Runs the player's collision checks once per frame."""

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Check the player's collisions."""
        self.check_collisions()

    def check_collisions(self) -> None:
        """Resolve the player's collisions with circular planets."""
        handler = self._state.ecs.get_system(CircleCollisionHandler)
        handler.check_collisions_with_player()
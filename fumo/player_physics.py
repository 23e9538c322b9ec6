"""Gravity and jump physics of the player around circular planets."""

import math
from typing import Any

from fumo.components import Body, CircleShape, GravityField
from fumo.engine_constants import System

_GROUND_CORRECTION = 2.0
_GRAVITY_SCALING = 1000.0
_JUMP_PHASE_STEPS = 10
_JUMP_RISE_DAMPING = -20.0
_JUMP_FALL_BOOST = 5000.0


def apply_jump_smoothing(entity_body: Body, frametime: float) -> bool:
    """Shape the rise and fall of a jump; return whether a jump is under way."""
    if not entity_body.jumping:
        return False
    if entity_body.going_up:
        entity_body.iterations += 1
        entity_body.scale_velocity(
            _JUMP_RISE_DAMPING / (entity_body.iterations * frametime)
        )
        if entity_body.iterations == _JUMP_PHASE_STEPS:
            entity_body.going_up = False
            entity_body.going_down = True
            entity_body.iterations = 0
    if entity_body.going_down:
        entity_body.iterations += 1
        entity_body.scale_velocity(
            _JUMP_FALL_BOOST * entity_body.iterations * frametime
        )
        if entity_body.iterations == _JUMP_PHASE_STEPS:
            entity_body.jumping = False
            entity_body.going_down = False
            entity_body.iterations = 0
    return True


class CirclePhysicsHandler(System):
    """Applies the gravity of tracked circular planets to a body.

    ``state`` provides ``ecs`` and ``frametime``.
    """

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Do nothing; the player physics runner drives this system."""

    def find_gravity_field(self, entity_body: Body, entity_shape: CircleShape) -> None:
        """Apply the gravity of every planet whose field holds the body."""
        ecs = self._state.ecs
        for circle_id in sorted(self.sys_entities):
            circle_body = ecs.get_component(Body, circle_id)
            circle_shape = ecs.get_component(CircleShape, circle_id)
            circle_grav_field = ecs.get_component(GravityField, circle_id)

            distance = circle_body.position.distance_to(entity_body.position)
            radius_sum = entity_shape.radius + circle_shape.radius
            gravity_radius_sum = radius_sum + circle_grav_field.gravity_radius

            entity_body.touching_ground = distance < radius_sum + _GROUND_CORRECTION
            if distance < gravity_radius_sum:
                self.update_gravity(circle_grav_field, circle_body, entity_body)

    def update_gravity(
        self, circle_grav_field: GravityField, circle_body: Body, entity_body: Body
    ) -> None:
        """Turn the body towards the planet and pull it down or keep it grounded."""
        gravity_direction = (circle_body.position - entity_body.position).normalized()
        entity_body.gravity_direction = gravity_direction
        x_direction = entity_body._x_direction()
        entity_body.rotation = math.degrees(math.atan2(x_direction.y, x_direction.x))

        frametime = self._state.frametime
        if apply_jump_smoothing(entity_body, frametime):
            return

        if not entity_body.touching_ground:
            acceleration = (
                gravity_direction * circle_grav_field.gravity_strength * _GRAVITY_SCALING
            )
            entity_body.velocity = entity_body.velocity + acceleration * frametime
        else:
            entity_body.velocity = x_direction * entity_body.velocity.dot(x_direction)


class PlayerPhysicsRunner(System):
    """Runs gravity and movement of the player once per frame.

    ``state`` provides ``ecs``, ``frametime`` and ``player_id``.
    """

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Run the player's physics."""
        self.run_physics()

    def run_physics(self) -> None:
        """Apply planet gravity to the player, then move it."""
        ecs = self._state.ecs
        player_body = ecs.get_component(Body, self._state.player_id)
        player_shape = ecs.get_component(CircleShape, self._state.player_id)
        ecs.get_system(CirclePhysicsHandler).find_gravity_field(
            player_body, player_shape
        )
        player_body.position = (
            player_body.position + player_body.velocity * self._state.frametime
        )
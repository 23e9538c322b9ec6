"""General purpose systems: body movement and debugging."""

from typing import Any

from fumo.components import Body, Vector2
from fumo.engine_constants import System

MOVEMENT_SCALING = 15000.0
JUMP_SCALING = 25000.0


class BodyMovement(System):
    """Moves bodies; ``state.frametime`` scales every change."""

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    @property
    def _frametime(self) -> float:
        return self._state.frametime

    def sys_call(self) -> None:
        """Do nothing; other systems call the movement methods."""

    def move_towards(self, body: Body, target: Body) -> None:
        """Set the velocity towards ``target``, growing with squared distance."""
        self.move_towards_position(body, target.position)

    def move_towards_position(self, body: Body, position: Vector2) -> None:
        """Set the velocity towards ``position``, growing with squared distance."""
        direction = (position - body.position).normalized()
        sqr_distance = position.distance_sqr_to(body.position)
        body.velocity = direction * sqr_distance * self._frametime

    def update_position(self, body: Body) -> None:
        """Move the body by its velocity over one frame."""
        body.position = body.position + body.velocity * self._frametime

    def reset_velocity(self, body: Body) -> None:
        """Stop the body."""
        body.velocity = Vector2()

    def move_vertically(self, body: Body, amount: float) -> None:
        """Push the body against its gravity direction by ``amount``."""
        body.velocity = body.velocity - (
            body.gravity_direction * amount * MOVEMENT_SCALING * self._frametime
        )

    def move_horizontally(self, body: Body, amount: float) -> None:
        """Push the body across its gravity direction by ``amount``."""
        gravity = body.gravity_direction
        x_direction = Vector2(gravity.y, -gravity.x)
        body.velocity = body.velocity + (
            x_direction * amount * MOVEMENT_SCALING * self._frametime
        )

    def jump(self, body: Body) -> None:
        """Kick the body away from its gravity source and start a jump."""
        body.velocity = body.velocity + (
            -body.gravity_direction * JUMP_SCALING * self._frametime
        )
        body.jumping = True
        body.going_up = True


class Debugger(System):
    """Prints the state of ``state.ecs`` to standard error."""

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Print the ECS state."""
        self.global_debug()

    def global_debug(self) -> None:
        """Print the ECS state."""
        self._state.ecs.debug_print()
"""Systems that create the player, read its input and reset it each frame."""

from typing import Any, Collection

import pygame

from fumo.components import AnimationInfo, Body, CircleShape, PlayerFlag, Render, Vector2
from fumo.engine_constants import System
from fumo.settings import SCREEN_CENTER, Color
from fumo.sprites import AnimationPlayer
from fumo.systems import BodyMovement

PLAYER_RADIUS = 66.0
PLAYER_RENDER_COLOR = Color(50, 50, 50, 100)

_CONTROL_KEYS = (
    pygame.K_SPACE,
    pygame.K_DOWN,
    pygame.K_UP,
    pygame.K_LEFT,
    pygame.K_RIGHT,
)


class PlayerInitializer(System):
    """Creates the player entity in ``state.ecs``."""

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Do nothing; the player is created once at start-up."""

    def initialize_player(self) -> int:
        """Create the player entity with all its components; return its id."""
        ecs = self._state.ecs
        player_id = ecs.create_entity()
        ecs.entity_add_component(player_id, PlayerFlag())
        ecs.entity_add_component(player_id, Render(color=PLAYER_RENDER_COLOR))
        ecs.entity_add_component(player_id, CircleShape(radius=PLAYER_RADIUS))
        ecs.entity_add_component(
            player_id,
            Body(
                position=Vector2(*SCREEN_CENTER),
                velocity=Vector2(),
                smooth_jump_buffer=1.0,
            ),
        )
        ecs.entity_add_component(player_id, AnimationInfo())
        return player_id


class PlayerInputHandler(System):
    """Moves and animates the player from the keyboard.

    ``state`` provides ``ecs``, ``frametime`` and ``player_id``.
    """

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Read the keyboard and handle the held keys."""
        pressed = pygame.key.get_pressed()
        self.handle_input({key for key in _CONTROL_KEYS if pressed[key]})

    def handle_input(self, keys: Collection[int]) -> None:
        """Act on the pygame key codes in ``keys``, which are held down."""
        ecs = self._state.ecs
        body_movement = ecs.get_system(BodyMovement)
        animation_player = ecs.get_system(AnimationPlayer)
        player_body = ecs.get_component(Body, self._state.player_id)
        player_animation = ecs.get_component(AnimationInfo, self._state.player_id)

        idle = True
        if pygame.K_SPACE in keys and player_body.touching_ground:
            body_movement.jump(player_body)
            idle = False
        if pygame.K_DOWN in keys:
            body_movement.move_vertically(player_body, -1.0)
            idle = False
        if pygame.K_UP in keys:
            body_movement.move_vertically(player_body, 1.0)
            idle = False
        if pygame.K_LEFT in keys:
            animation_player.play(player_animation, "sprint")
            body_movement.move_horizontally(player_body, -1.0)
            idle = False
        if pygame.K_RIGHT in keys:
            animation_player.play(player_animation, "sprint")
            body_movement.move_horizontally(player_body, 1.0)
            idle = False

        if idle:
            animation_player.play(player_animation, "idle")
        body_movement.update_position(player_body)


class PlayerEndFrameUpdater(System):
    """Resets the player's per-frame state at the end of each frame."""

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Run the end-of-frame update."""
        self.end_of_frame_update()

    def end_of_frame_update(self) -> None:
        """Reset the player's state."""
        self.reset_state()

    def reset_state(self) -> None:
        """Stop the player."""
        ecs = self._state.ecs
        player_body = ecs.get_component(Body, self._state.player_id)
        ecs.get_system(BodyMovement).reset_velocity(player_body)
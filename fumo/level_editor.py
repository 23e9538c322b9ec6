"""Mouse and keyboard controls for placing, moving and resizing planets."""

from dataclasses import dataclass
from typing import Any

import pygame

from fumo.components import Body, CircleShape, Vector2
from fumo.engine_constants import System
from fumo.planet_factory import PlanetFactory
from fumo.settings import GREEN, MOUSE_RADIUS
from fumo.systems import BodyMovement, Debugger

SHRINK_FACTOR = 0.6666
GROW_FACTOR = 1.5

_EDITOR_KEYS = (pygame.K_s, pygame.K_d, pygame.K_r, pygame.K_1, pygame.K_LSHIFT)


@dataclass(frozen=True)
class EditorInput:
    """One frame of editor input.

    ``pressed`` holds keys that went down this frame, ``held`` keys that are down.
    """

    mouse_position: Vector2
    mouse_left_down: bool = False
    pressed: frozenset = frozenset()
    held: frozenset = frozenset()


class InputHandlerLevelEditor(System):
    """Edits the planets under the mouse cursor.

    ``state`` provides ``ecs``, ``frametime`` and ``screen`` (which may be None).
    """

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state
        self._previous_keys: frozenset = frozenset()

    def sys_call(self) -> None:
        """Read the mouse and keyboard and act on them."""
        key_state = pygame.key.get_pressed()
        held = frozenset(key for key in _EDITOR_KEYS if key_state[key])
        pressed = held - self._previous_keys
        self._previous_keys = held
        self.handle_input(
            EditorInput(
                mouse_position=Vector2(*pygame.mouse.get_pos()),
                mouse_left_down=bool(pygame.mouse.get_pressed()[0]),
                pressed=pressed,
                held=held,
            )
        )

    def handle_input(self, editor_input: EditorInput) -> None:
        """Perform the single editor action that ``editor_input`` asks for."""
        pressed = editor_input.pressed
        mouse = editor_input.mouse_position
        if editor_input.mouse_left_down:
            self._move_planet(mouse)
        elif pygame.K_s in pressed:
            self._spawn_planet(mouse)
        elif pygame.K_LSHIFT in editor_input.held:
            if pygame.K_d in pressed:
                self._delete_all_created_planets()
            elif pygame.K_r in pressed:
                self._resize_planet(mouse, SHRINK_FACTOR)
        elif pygame.K_d in pressed:
            self._delete_created_planet(mouse)
        elif pygame.K_r in pressed:
            self._resize_planet(mouse, GROW_FACTOR)
        elif pygame.K_1 in pressed:
            self._debug_print()

    def _draw_cursor(self, mouse: Vector2) -> None:
        screen = getattr(self._state, "screen", None)
        if screen is not None:
            pygame.draw.circle(
                screen, tuple(GREEN), (mouse.x, mouse.y), MOUSE_RADIUS, width=1
            )

    def _planets_under(self, mouse: Vector2, entity_ids):
        ecs = self._state.ecs
        for entity_id in sorted(entity_ids):
            body = ecs.get_component(Body, entity_id)
            circle_shape = ecs.get_component(CircleShape, entity_id)
            if MOUSE_RADIUS + circle_shape.radius > mouse.distance_to(body.position):
                yield entity_id, body, circle_shape

    def _debug_print(self) -> None:
        self._state.ecs.get_system(Debugger).global_debug()

    def _spawn_planet(self, mouse: Vector2) -> None:
        self._draw_cursor(mouse)
        self._state.ecs.get_system(PlanetFactory).create_default_planet(mouse)

    def _resize_planet(self, mouse: Vector2, resize: float) -> None:
        self._draw_cursor(mouse)
        for _, _, circle_shape in self._planets_under(mouse, self.sys_entities):
            circle_shape.radius *= resize
            return

    def _delete_created_planet(self, mouse: Vector2) -> None:
        factory = self._state.ecs.get_system(PlanetFactory)
        self._draw_cursor(mouse)
        for entity_id, _, _ in self._planets_under(mouse, factory.sys_entities):
            factory.delete_planet(entity_id)
            return

    def _delete_all_created_planets(self) -> None:
        self._state.ecs.get_system(PlanetFactory).delete_all_planets()

    def _move_planet(self, mouse: Vector2) -> None:
        self._draw_cursor(mouse)
        for _, body, _ in self._planets_under(mouse, self.sys_entities):
            self._state.ecs.get_system(BodyMovement).move_towards_position(body, mouse)
            body.position = body.position + body.velocity * self._state.frametime
            return
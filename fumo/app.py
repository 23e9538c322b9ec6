"""Start-up: component and system registration, texture loading and the game loop."""

import argparse
from pathlib import Path
from typing import Any, Optional, Sequence, Union

import pygame

from fumo.components import (
    AnimationInfo,
    Body,
    CircleShape,
    GravityField,
    PlayerFlag,
    Render,
    SpriteSheet2D,
)
from fumo.engine_constants import MAX_PRIORITY
from fumo.entity_query import EntityQuery, Filter
from fumo.global_state import GlobalState
from fumo.level_editor import InputHandlerLevelEditor
from fumo.planet_factory import PlanetFactory
from fumo.player_collisions import CircleCollisionHandler, PlayerCollisionRunner
from fumo.player_physics import CirclePhysicsHandler, PlayerPhysicsRunner
from fumo.player_systems import PlayerEndFrameUpdater, PlayerInitializer, PlayerInputHandler
from fumo.renderers import PlanetRenderer
from fumo.scheduling_systems import SchedulerSystemECS
from fumo.settings import BLACK, SCREEN_HEIGHT, SCREEN_WIDTH
from fumo.sprites import AnimationPlayer, AnimationRenderer
from fumo.systems import BodyMovement, Debugger

WINDOW_TITLE = "THIS... is a BUCKET."
TARGET_FPS = 60
PLAYER_SPRITE_DIR = "The_Dude_Free"

# file name, sheet name, frame count, base frame speed
_PLAYER_SHEETS = (
    ("Jump.png", "jump", 5, 6),
    ("Idle.png", "idle", 4, 8),
    ("Land.png", "land", 4, 6),
    ("Sprint.png", "sprint", 8, 6),
    ("Walk.png", "walk", 8, 6),
)


def register_components(state: Any) -> None:
    """Register every component type the game uses."""
    for component_type in (Body, Render, CircleShape, GravityField, PlayerFlag, AnimationInfo):
        state.ecs.register_component(component_type)


def _register_agnostic_systems(state: Any) -> None:
    ecs = state.ecs
    ecs.add_unregistered_system_unscheduled(PlayerInitializer, state)
    ecs.add_unregistered_system_unscheduled(AnimationPlayer, state.sprite_manager)
    ecs.add_unregistered_system_unscheduled(SchedulerSystemECS, ecs)
    ecs.add_unregistered_system_unscheduled(BodyMovement, state)
    ecs.add_unregistered_system_unscheduled(PlanetFactory, state)
    ecs.add_unregistered_system_unscheduled(Debugger, state)


def _register_physics_collision_systems(state: Any) -> None:
    ecs = state.ecs
    planet_query = EntityQuery(
        ecs.make_component_mask(Body, CircleShape, GravityField), Filter.ALL
    )
    ecs.register_system_unscheduled(CircleCollisionHandler, planet_query, state)
    ecs.register_system_unscheduled(CirclePhysicsHandler, planet_query, state)


def _register_scheduled_systems(state: Any) -> None:
    ecs = state.ecs
    ecs.register_system(
        AnimationRenderer,
        69,
        EntityQuery(ecs.make_component_mask(Body, AnimationInfo), Filter.ALL),
        state,
    )
    ecs.add_unregistered_system(PlayerInputHandler, 0, state)
    ecs.register_system(
        InputHandlerLevelEditor,
        1,
        EntityQuery(
            ecs.make_component_mask(Body, Render, CircleShape, GravityField), Filter.ONLY
        ),
        state,
    )
    ecs.add_unregistered_system(PlayerPhysicsRunner, 2, state)
    ecs.add_unregistered_system(PlayerCollisionRunner, 3, state)
    ecs.register_system(
        PlanetRenderer,
        4,
        EntityQuery(ecs.make_component_mask(Body, Render, CircleShape), Filter.ALL),
        state,
    )
    ecs.add_unregistered_system(PlayerEndFrameUpdater, MAX_PRIORITY - 1, state)


def register_systems(state: Any) -> None:
    """Create and register every system, scheduled or not."""
    _register_agnostic_systems(state)
    _register_physics_collision_systems(state)
    _register_scheduled_systems(state)


def register_all_to_ecs(state: Any) -> None:
    """Register all components, then all systems."""
    register_components(state)
    register_systems(state)


def load_player_textures(state: Any, assets_dir: Union[str, Path] = "assets") -> None:
    """Load the player's sprite sheets from ``assets_dir`` and register them."""
    sheet_dir = Path(assets_dir) / PLAYER_SPRITE_DIR
    for file_name, sheet_name, frame_count, frame_speed in _PLAYER_SHEETS:
        path = sheet_dir / file_name
        if not path.is_file():
            raise FileNotFoundError(f"sprite sheet not found: {path}")
        state.sprite_manager.register_sprite(
            SpriteSheet2D(
                texture_sheet=pygame.image.load(str(path)),
                sprite_sheet_name=sheet_name,
                sprite_frame_count=frame_count,
                base_frame_speed=frame_speed,
            )
        )


def initialize_all_textures(state: Any, assets_dir: Union[str, Path] = "assets") -> None:
    """Load every texture the game needs."""
    load_player_textures(state, assets_dir)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run the game until it is closed."""
    parser = argparse.ArgumentParser(prog="fumo", description="A small planet platformer.")
    parser.add_argument(
        "--assets", type=Path, default=Path("assets"), help="directory holding the sprites"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        state = GlobalState()
        state.initialize()
        initialize_all_textures(state, args.assets)
        register_all_to_ecs(state)
        state.setup_game_state()

        state.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    running = False
            state.screen.fill(tuple(BLACK))
            state.frametime = clock.tick(TARGET_FPS) / 1000.0
            state.ecs.run_systems()
            pygame.display.flip()

        state.destroy_and_unload_game()
    finally:
        pygame.quit()
    return 0
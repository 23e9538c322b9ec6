"""The game-wide state shared by all systems."""

from dataclasses import dataclass
from typing import Any, Optional

from fumo.engine_constants import EcsError
from fumo.player_systems import PlayerInitializer
from fumo.scheduler_ecs import SchedulerECS
from fumo.sprites import SpriteManager


@dataclass
class GlobalState:
    """Frame time, the ECS, the sprite registry, the player id and the screen."""

    frametime: float = 0.0
    ecs: Optional[SchedulerECS] = None
    sprite_manager: Optional[SpriteManager] = None
    player_id: Optional[int] = None
    screen: Optional[Any] = None

    def initialize(self) -> None:
        """Create a fresh ECS and sprite registry."""
        self.ecs = SchedulerECS()
        self.sprite_manager = SpriteManager()

    def setup_game_state(self) -> None:
        """Create the player through the registered PlayerInitializer."""
        if self.ecs is None:
            raise EcsError("the global state has not been initialized")
        self.player_id = self.ecs.get_system(PlayerInitializer).initialize_player()

    def destroy_and_unload_game(self) -> None:
        """Release every loaded texture."""
        if self.sprite_manager is not None:
            self.sprite_manager.unload_all_textures()
"""Sprite-sheet registry, the animation player and the animation renderer."""

from dataclasses import replace
from typing import Any

import pygame

from fumo.components import NO_SHEET, AnimationInfo, Body, SpriteSheet2D
from fumo.engine_constants import EcsError, System

SPRITE_SCALING = 2.5


class SpriteManager:
    """Holds every sprite sheet of the game by name."""

    def __init__(self) -> None:
        self._sprite_sheets: dict[str, SpriteSheet2D] = {}

    def __contains__(self, sprite_name: object) -> bool:
        return sprite_name in self._sprite_sheets

    def register_sprite(self, sprite_sheet: SpriteSheet2D) -> None:
        """Add ``sprite_sheet`` under its own name."""
        name = sprite_sheet.sprite_sheet_name
        if name in self._sprite_sheets:
            raise EcsError(f"sprite {name!r} has already been registered")
        self._sprite_sheets[name] = sprite_sheet

    def get_sprite_sheet(self, sprite_name: str) -> SpriteSheet2D:
        """Return the sprite sheet registered as ``sprite_name``."""
        try:
            return self._sprite_sheets[sprite_name]
        except KeyError:
            raise EcsError(f"sprite {sprite_name!r} hasn't been registered") from None

    def get_sprite_texture(self, sprite_name: str) -> Any:
        """Return the texture of the sprite sheet registered as ``sprite_name``."""
        return self.get_sprite_sheet(sprite_name).texture_sheet

    def unload_all_textures(self) -> None:
        """Release every registered sprite sheet and its texture."""
        self._sprite_sheets.clear()


class AnimationPlayer(System):
    """Advances, replaces and queues the animations stored in AnimationInfo."""

    def __init__(self, sprite_manager: SpriteManager) -> None:
        super().__init__()
        self._sprite_manager = sprite_manager

    def sys_call(self) -> None:
        """Do nothing; animations advance when played."""

    def play(self, animation_info: AnimationInfo, animation_name: str) -> None:
        """Advance ``animation_name`` by one frame, switching to it if needed."""
        sprite_sheet = self._sprite_manager.get_sprite_sheet(animation_name)
        if animation_info.current_sheet_name == animation_name:
            self._advance_animation(animation_info)
            return
        self._replace_animation(animation_info, sprite_sheet)

    def queue(self, animation_info: AnimationInfo, animation_name: str) -> None:
        """Append ``animation_name`` to be played after the current animation."""
        sprite_sheet = self._sprite_manager.get_sprite_sheet(animation_name)
        if (
            len(animation_info.sheet_rect_vector) == 1
            and animation_info.current_sheet_name == NO_SHEET
        ):
            self._replace_animation(animation_info, sprite_sheet)
        animation_info.sheet_rect_vector.append(
            (animation_name, sprite_sheet.base_region_rect)
        )

    def pause(self, animation_info: AnimationInfo) -> None:
        """Reset the current animation to its first frame."""
        if animation_info.current_sheet_name == NO_SHEET:
            return
        sprite_sheet = self._sprite_manager.get_sprite_sheet(
            animation_info.current_sheet_name
        )
        animation_info.frame_progress = 0
        animation_info.sub_counter = 0
        animation_info.current_region_rect = sprite_sheet.base_region_rect

    def _advance_animation(self, animation_info: AnimationInfo) -> None:
        animation_info.sub_counter += 1
        if animation_info.sub_counter >= animation_info.frame_speed:
            animation_info.sub_counter = 0
            animation_info.frame_progress += 1
            rect = animation_info.current_region_rect
            animation_info.current_region_rect = replace(rect, x=rect.x + rect.width)

        if animation_info.sprite_frame_count == animation_info.frame_progress:
            animation_info.frame_progress = 0
            animation_info.current_region_rect = replace(
                animation_info.current_region_rect, x=0.0
            )
            if len(animation_info.sheet_rect_vector) > 1:
                animation_info.sheet_rect_vector.pop(0)
                sprite_sheet = self._sprite_manager.get_sprite_sheet(
                    animation_info.sheet_rect_vector[0][0]
                )
                self._load_sheet(animation_info, sprite_sheet)

    def _replace_animation(
        self, animation_info: AnimationInfo, sprite_sheet: SpriteSheet2D
    ) -> None:
        animation_info.sheet_rect_vector[0] = (
            sprite_sheet.sprite_sheet_name,
            sprite_sheet.base_region_rect,
        )
        animation_info.frame_progress = 0
        self._load_sheet(animation_info, sprite_sheet)

    @staticmethod
    def _load_sheet(animation_info: AnimationInfo, sprite_sheet: SpriteSheet2D) -> None:
        animation_info.frame_speed = sprite_sheet.base_frame_speed
        animation_info.sprite_frame_count = sprite_sheet.sprite_frame_count
        animation_info.current_sheet_name = sprite_sheet.sprite_sheet_name
        animation_info.current_region_rect = sprite_sheet.base_region_rect


class AnimationRenderer(System):
    """Draws the current animation frame of every tracked entity.

    ``state`` provides ``ecs``, ``sprite_manager`` and the target ``screen``.
    """

    def __init__(self, state: Any) -> None:
        super().__init__()
        self._state = state

    def sys_call(self) -> None:
        """Draw all animations."""
        self.draw_animations()

    def draw_animations(self) -> None:
        """Draw each tracked entity's current frame centred on its body."""
        ecs = self._state.ecs
        for entity_id in sorted(self.sys_entities):
            animation_info = ecs.get_component(AnimationInfo, entity_id)
            texture = self._state.sprite_manager.get_sprite_texture(
                animation_info.current_sheet_name
            )
            body = ecs.get_component(Body, entity_id)
            self._draw_animation(animation_info, texture, body)

    def _draw_animation(
        self, animation_info: AnimationInfo, texture: Any, body: Body
    ) -> None:
        region = animation_info.current_region_rect
        source = pygame.Rect(
            int(region.x), int(region.y), int(region.width), int(region.height)
        ).clip(texture.get_rect())
        frame = texture.subsurface(source)
        size = (
            round(region.width * SPRITE_SCALING),
            round(region.height * SPRITE_SCALING),
        )
        image = pygame.transform.scale(frame, size)
        if body.rotation:
            # Screen y grows downwards, so a clockwise angle is negative here.
            image = pygame.transform.rotate(image, -body.rotation)
        target = image.get_rect(center=(body.position.x, body.position.y))
        self._state.screen.blit(image, target)
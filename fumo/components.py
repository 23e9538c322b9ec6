"""Plain data components and the 2D vector and rectangle types they use."""

import math
from dataclasses import dataclass, field
from typing import Any, Protocol

from fumo.settings import SCREEN_CENTER, Color

NO_SHEET = "NO_SHEET"


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: object) -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vector2":
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: object) -> "Vector2":
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vector2(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale: object) -> "Vector2":
        if not isinstance(scale, (int, float)):
            return NotImplemented
        return Vector2(self.x / scale, self.y / scale)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self):
        return iter((self.x, self.y))

    def dot(self, other: "Vector2") -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        """Return the Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector2":
        """Return the unit vector in this direction, or the zero vector."""
        length = self.length()
        if length > 0:
            return Vector2(self.x / length, self.y / length)
        return Vector2()

    def distance_to(self, other: "Vector2") -> float:
        """Return the distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_sqr_to(self, other: "Vector2") -> float:
        """Return the squared distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass
class Body:
    """Position, motion and orientation of an entity."""

    iterations: int = 0
    count: int = 0
    position: Vector2 = field(default_factory=lambda: Vector2(*SCREEN_CENTER))
    velocity: Vector2 = field(default_factory=Vector2)
    gravity_direction: Vector2 = field(default_factory=lambda: Vector2(0.0, -1.0))
    touching_ground: bool = False
    jumping: bool = False
    going_up: bool = False
    going_down: bool = False
    smooth_jump_buffer: float = 0.0
    rotation: float = 0.0

    def _x_direction(self) -> Vector2:
        return Vector2(self.gravity_direction.y, -self.gravity_direction.x)

    def get_y_velocity(self) -> Vector2:
        """Return the velocity's component along the gravity direction."""
        return self.gravity_direction * self.velocity.dot(self.gravity_direction)

    def get_dot_y_velocity(self) -> float:
        """Return the velocity's signed magnitude along the gravity direction."""
        return self.velocity.dot(self.gravity_direction)

    def get_dot_x_velocity(self) -> float:
        """Return the velocity's signed magnitude across the gravity direction."""
        return self.velocity.dot(self._x_direction())

    def scale_velocity(self, scale: float) -> None:
        """Add ``scale`` times the gravity direction to the velocity."""
        self.velocity = self.velocity + self.gravity_direction * scale


@dataclass
class GravityField:
    """A gravity field, its radius counted from the surface of its owner."""

    gravity_radius: float
    gravity_strength: float


@dataclass
class CircleShape:
    radius: float


@dataclass
class Render:
    color: Color


@dataclass
class PlayerFlag:
    """Marks the entity that is the player."""


@dataclass
class AnimationInfo:
    """Playback state of an entity's sprite-sheet animation and its queue."""

    sheet_rect_vector: list[tuple[str, Rectangle]] = field(
        default_factory=lambda: [(NO_SHEET, Rectangle())]
    )
    frame_progress: int = 0
    frame_speed: int = 0
    sprite_frame_count: int = 0
    current_sheet_name: str = NO_SHEET
    current_region_rect: Rectangle = field(default_factory=Rectangle)
    sub_counter: int = 0


class Texture(Protocol):
    def get_size(self) -> tuple[int, int]: ...


@dataclass
class SpriteSheet2D:
    """A texture holding equally wide animation frames side by side."""

    texture_sheet: Any
    sprite_sheet_name: str
    sprite_frame_count: int
    base_frame_speed: int = 0
    base_region_rect: Rectangle = field(init=False)

    def __post_init__(self) -> None:
        if self.sprite_frame_count <= 0:
            raise ValueError("a sprite sheet needs at least one frame")
        width, height = self.texture_sheet.get_size()
        self.base_region_rect = Rectangle(
            0.0, 0.0, float(width) / self.sprite_frame_count, float(height)
        )


@dataclass
class Sprite2D:
    texture: Any
    sprite_name: str
    region_rect: Rectangle
"""Screen size, tuning values and the colour palette of the game."""

import random
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b, self.a))


SCREEN_WIDTH = 1025
SCREEN_HEIGHT = 1000
SCREEN_CENTER = (SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)

GRAVITY = 9.81
GRAVITATIONAL_CONSTANT = 0.6
SCALING_FACTOR = 1
FONT_SIZE = 20

MOUSE_RADIUS = 40.0
COLOR_COUNT = 18
DEFAULT_MASS = 600000.0
DEFAULT_RADIUS = 50.0
DEFAULT_PLANET_RADIUS = 5000.0
MAX_FALL_VELOCITY = 500.0

LIGHTGRAY = Color(200, 200, 200)
GRAY = Color(130, 130, 130)
DARKGRAY = Color(80, 80, 80)
YELLOW = Color(253, 249, 0)
GOLD = Color(255, 203, 0)
ORANGE = Color(255, 161, 0)
PINK = Color(255, 109, 194)
RED = Color(230, 41, 55)
MAROON = Color(190, 33, 55)
GREEN = Color(0, 228, 48)
LIME = Color(0, 158, 47)
SKYBLUE = Color(102, 191, 255)
BLUE = Color(0, 121, 241)
PURPLE = Color(200, 122, 255)
VIOLET = Color(135, 60, 190)
BEIGE = Color(211, 176, 131)
BROWN = Color(127, 106, 79)
DARKBROWN = Color(76, 63, 47)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
BLANK = Color(0, 0, 0, 0)

PLAYER_COLOR = ORANGE

# The palette holds COLOR_COUNT slots; the last one is a transparent blank.
ALL_COLORS: tuple[Color, ...] = (
    LIGHTGRAY,
    GRAY,
    DARKGRAY,
    YELLOW,
    GOLD,
    PINK,
    RED,
    MAROON,
    GREEN,
    LIME,
    SKYBLUE,
    BLUE,
    PURPLE,
    VIOLET,
    BEIGE,
    BROWN,
    DARKBROWN,
    BLANK,
)


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def random_planet_color(rng: Optional[_RandomSource] = None) -> Color:
    """Pick one of the palette's COLOR_COUNT slots at random."""
    source = rng if rng is not None else random
    return ALL_COLORS[source.randint(0, COLOR_COUNT - 1)]
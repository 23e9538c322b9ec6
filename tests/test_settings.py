import random

import pytest

from fumo.settings import (
    ALL_COLORS,
    BLANK,
    COLOR_COUNT,
    Color,
    random_planet_color,
)


class _FixedRng:
    def __init__(self, choose_high: bool) -> None:
        self.choose_high = choose_high
        self.bounds: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.bounds.append((a, b))
        return b if self.choose_high else a


def test_color_iterates_as_rgba():
    assert tuple(Color(255, 161, 0, 255)) == (255, 161, 0, 255)


def test_color_rejects_out_of_range_channel():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_random_planet_color_uses_full_palette_range():
    rng = _FixedRng(choose_high=True)
    color = random_planet_color(rng)
    assert rng.bounds == [(0, COLOR_COUNT - 1)]
    assert color == BLANK


def test_random_planet_color_lowest_slot_is_first_color():
    assert random_planet_color(_FixedRng(choose_high=False)) == ALL_COLORS[0]


def test_random_planet_color_with_seeded_rng_is_reproducible():
    first = [random_planet_color(random.Random(7)) for _ in range(3)]
    second = [random_planet_color(random.Random(7)) for _ in range(3)]
    assert first == second
    assert all(color in ALL_COLORS for color in first)


def test_random_planet_color_without_rng_returns_palette_member():
    assert random_planet_color() in ALL_COLORS
"""A small entity-component-system engine and a pygame gravity platformer built on it."""

__version__ = "0.1.0"
"""Jointed-chain snakes that chase food and collide in a 2D world, with a pygame window."""

__version__ = "0.1.0"
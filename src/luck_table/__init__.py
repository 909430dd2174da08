"""Rarity chances vs luck multiplier tables."""

__version__ = "1.0.0"

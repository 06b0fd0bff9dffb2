"""Taiga: per-tick decision core for grid-bound predators and prey."""

__version__ = "1.0.0"

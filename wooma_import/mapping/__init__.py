"""Wooma schema mapping."""

from .wooma_mapper import WoomaMapper, map_to_wooma

__all__ = ["WoomaMapper", "map_to_wooma"]

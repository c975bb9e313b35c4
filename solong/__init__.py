"""Tile-based game: collect every plant, dodge the enemies, reach the exit."""

__version__ = "0.1.0"
__all__ = ["model", "mapcheck", "tilemap", "game", "display"]
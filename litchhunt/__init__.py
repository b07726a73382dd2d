"""A text-mode dungeon crawl: hunt the litch through a grid of rooms, traps and undead."""

__version__ = "1.0.0"
__all__ = ["__version__"]
"""A small top-down arena shooter: clear each room of zombies, then reach the portal."""

__version__ = "0.1.0"
"""A side-scrolling jump-and-dodge arcade game with a menu, coins and a character store."""

__version__ = "0.1.0"
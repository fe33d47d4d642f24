"""A small arcade: a game menu, Snake and Nibbler, with curses and pygame displays."""

__version__ = "1.0.0"
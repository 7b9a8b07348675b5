"""A two-player arcade hub set in a space cantina, with snake, rhythm, ship and duck fishing mini-games."""

__version__ = "0.1.0"
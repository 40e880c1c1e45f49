"""A turn-based console role-playing battle between a hero and a big bear."""

__version__ = "0.1.0"
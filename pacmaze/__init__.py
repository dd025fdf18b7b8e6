"""A maze-chasing arcade game with a name prompt, a score board and saved records."""

__version__ = "0.1.0"
__all__ = ["__version__"]
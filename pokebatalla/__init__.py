"""Turn-based Pokémon battles between two trainers, with replies in Spanish."""

__version__ = "0.1.0"
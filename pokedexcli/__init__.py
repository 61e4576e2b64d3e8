"""Interactive command-line Pokedex with a caching PokeAPI client."""

__version__ = "0.1.0"
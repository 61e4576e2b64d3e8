"""The commands understood by the Pokedex shell."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable
from dataclasses import dataclass, field

from pokedexcli.pokeapi import Client, PokemonInfo

CATCH_THRESHOLD = 50


class CommandError(Exception):
    """A command could not do what was asked of it."""


@dataclass
class Config:
    """State shared between commands during one shell session."""

    client: Client
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    caught_pokemon: dict[str, PokemonInfo] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named shell command and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def command_help(cfg: Config, *args: str) -> None:
    """Print a short description of every command."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")
    print()


def command_catch(cfg: Config, *args: str) -> None:
    """Try to catch the named Pokemon; harder for more experienced ones."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    name = args[0]
    pokemon = cfg.client.get_pokemon(name)
    if pokemon.base_experience <= 0:
        raise CommandError(f"{name} has no base experience")
    if cfg.rng.randrange(pokemon.base_experience) > CATCH_THRESHOLD:
        raise CommandError(f"failed to catch {name}")
    print(f"{name} was caught!")
    print("You may now inspect it with the inspect command.")
    cfg.caught_pokemon[name] = pokemon


def command_inspect(cfg: Config, *args: str) -> None:
    """Print the details of a caught Pokemon."""
    if len(args) != 1:
        raise CommandError("you must provide a pokemon name")
    name = args[0]
    pokemon = cfg.caught_pokemon.get(name)
    if pokemon is None:
        raise CommandError("you have not caught that pokemon")
    print(f"Name:{name}")
    print(f"Height:{pokemon.height}")
    print(f"Weight:{pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"-{stat.stat.name}: {stat.base_stat}")
    print("Types:")
    for kind in pokemon.types:
        print(f"- {kind.type.name}")


def command_pokedex(cfg: Config, *args: str) -> None:
    """List the names of every caught Pokemon."""
    if not cfg.caught_pokemon:
        raise CommandError("you have not caught any pokemon")
    print("Your Pokedex:")
    for name in cfg.caught_pokemon:
        print(f"- {name}")


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokemon that can be met in a location area."""
    if len(args) != 1:
        raise CommandError("you must provide a location name")
    location = cfg.client.get_location(args[0])
    print(f"Exploring {location.name}...")
    print("Found Pokemon: ")
    for pokemon in location.pokemon_encounters:
        print(f" - {pokemon.name}")


def _show_page(cfg: Config, url: str | None) -> None:
    page = cfg.client.list_locations(url)
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(cfg: Config, *args: str) -> None:
    """Print the next page of location areas."""
    _show_page(cfg, cfg.next_locations_url)


def command_mapb(cfg: Config, *args: str) -> None:
    """Print the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("you're on the first page")
    _show_page(cfg, cfg.prev_locations_url)


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye, release the client and leave the program."""
    print("Closing the Pokedex... Goodbye!")
    sys.stdout.flush()
    cfg.client.close()
    sys.exit(0)


def get_commands() -> dict[str, Command]:
    """Return every command, keyed by the word that starts it."""
    return {
        "help": Command("help", "Displays a help message", command_help),
        "catch": Command("catch <pokemon_name>", "catch a pokemon", command_catch),
        "inspect": Command(
            "inspect <pokemon_name>", "prints out pokemons details", command_inspect
        ),
        "pokedex": Command("pokedex", "Lists all pokemon in Pokedex", command_pokedex),
        "explore": Command(
            "explore <location_name>", "Explore a location", command_explore
        ),
        "map": Command("map", "Get the next page of locations", command_map),
        "mapb": Command("mapb", "Get the previous page of locations", command_mapb),
        "exit": Command("exit", "Exit the Pokedex", command_exit),
    }
"""The commands the Pokedex prompt understands."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Protocol

from pokedexcli.models import ShallowPokemon
from pokedexcli.pokeapi import Client, PokeAPIError


class CommandError(Exception):
    """Raised when a command cannot do what was asked of it."""


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Config:
    """State shared by every command during a session."""

    client: Client
    next_url: str | None = None
    previous_url: str | None = None
    caught_pokemon: dict[str, ShallowPokemon] = field(default_factory=dict)
    rng: _RandomSource = field(default_factory=random.Random)


Callback = Callable[[Config, str], None]


@dataclass(frozen=True)
class CliCommand:
    """A named command, its help text and what it runs."""

    name: str
    description: str
    callback: Callback
    needs_argument: bool = False


def command_help(cfg: Config, arg: str = "") -> None:
    """Print the list of commands."""
    print()
    print("Welcome to the Pokedex!")
    print("Usage:")
    print()
    for cmd in get_commands().values():
        print(f"{cmd.name}: {cmd.description}")
    print()


def command_exit(cfg: Config, arg: str = "") -> None:
    """Say goodbye and end the program."""
    print("Closing the Pokedex... Goodbye!")
    raise SystemExit(0)


def _show_locations(cfg: Config, page_url: str | None) -> None:
    page = cfg.client.list_locations(page_url)
    cfg.next_url = page.next
    cfg.previous_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(cfg: Config, arg: str = "") -> None:
    """Print the next page of location areas."""
    _show_locations(cfg, cfg.next_url)


def command_mapb(cfg: Config, arg: str = "") -> None:
    """Print the previous page of location areas."""
    if cfg.previous_url is None:
        raise CommandError("You are on the first page")
    _show_locations(cfg, cfg.previous_url)


def command_explore(cfg: Config, location_name: str) -> None:
    """Print the Pokemon found in a location area."""
    print(f"Exploring {location_name}...")
    explore = cfg.client.explore_location(location_name)
    print("Found Pokemon!")
    for pokemon in explore.pokemon_encounters:
        print(f"- {pokemon.name}")


def command_catch(cfg: Config, poke_name: str) -> None:
    """Throw a Pokeball; stronger Pokemon escape more often."""
    print(f"Throwing a Pokeball at {poke_name}...")
    try:
        pokemon = cfg.client.pokemon_stats(poke_name)
    except PokeAPIError as exc:
        raise CommandError(
            "There was trouble looking up the Pokemon you typed in"
        ) from exc
    if pokemon.base_experience <= 0:
        raise CommandError(f"{poke_name} cannot be caught")
    if cfg.rng.randrange(pokemon.base_experience) < 100:
        print(f"{poke_name} was caught!")
        cfg.caught_pokemon[pokemon.name] = pokemon
        print("You may now inspect it with the inspect command.")
    else:
        print(f"{poke_name} escaped!")


def command_inspect(cfg: Config, poke_name: str) -> None:
    """Print the Pokedex record of a caught Pokemon."""
    if poke_name not in cfg.caught_pokemon:
        print("You have not caught that Pokemon")
    pokemon = cfg.caught_pokemon.get(poke_name, ShallowPokemon())

    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.stat.name}: {stat.base_stat}")
    print("Type:" if len(pokemon.types) == 1 else "Types:")
    for poke_type in pokemon.types:
        print(f"  -{poke_type.name}")


def command_pokedex(cfg: Config, arg: str = "") -> None:
    """Print the names of every caught Pokemon."""
    if not cfg.caught_pokemon:
        print("Go catch some Pokemon!")
        return
    print("Your Pokedex:")
    for name in cfg.caught_pokemon:
        print(f"  -{name}")


def get_commands() -> dict[str, CliCommand]:
    """Return every command keyed by its name."""
    commands = [
        CliCommand("help", "Displays a help message", command_help),
        CliCommand("exit", "Exit the Pokedex", command_exit),
        CliCommand("map", "Get the next 20 locations", command_map),
        CliCommand("mapb", "Get the previous 20 locations", command_mapb),
        CliCommand(
            "explore",
            "Explore a region to find the natural Pokemon",
            command_explore,
            needs_argument=True,
        ),
        CliCommand(
            "catch", "Try to catch a pokemon!", command_catch, needs_argument=True
        ),
        CliCommand(
            "inspect",
            "Look at a Pokemon's Pokedex record",
            command_inspect,
            needs_argument=True,
        ),
        CliCommand("pokedex", "See what you have in your Pokedex", command_pokedex),
    ]
    return {cmd.name: cmd for cmd in commands}
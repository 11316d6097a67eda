"""Data shapes returned by the PokeAPI endpoints used by the Pokedex."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

JsonInput = Union[str, bytes, bytearray, Mapping]


@dataclass(frozen=True)
class NamedResource:
    """A name together with the API URL that describes it."""

    name: str = ""
    url: str = ""


@dataclass(frozen=True)
class ShallowLocations:
    """One page of location areas."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)


@dataclass(frozen=True)
class ShallowExplore:
    """The Pokemon that can be encountered in a location area."""

    pokemon_encounters: list[NamedResource] = field(default_factory=list)


@dataclass(frozen=True)
class PokemonStat:
    """A base stat value and the stat it belongs to."""

    base_stat: int = 0
    stat: NamedResource = field(default_factory=NamedResource)


@dataclass(frozen=True)
class ShallowPokemon:
    """The parts of a Pokemon record the Pokedex shows."""

    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[NamedResource] = field(default_factory=list)


def _load(data: JsonInput) -> Mapping[str, Any]:
    if isinstance(data, (str, bytes, bytearray)):
        data = json.loads(data)
    return _obj(data, "document")


def _obj(value: Any, what: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"expected an object for {what}")
    return value


def _list(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"expected an array for {what}")
    return value


def _str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"expected a string for {what}")
    return value


def _opt_str(value: Any, what: str) -> str | None:
    if value is None:
        return None
    return _str(value, what)


def _int(value: Any, what: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer for {what}")
    return value


def _resource(value: Any, what: str) -> NamedResource:
    obj = _obj(value, what)
    return NamedResource(
        name=_str(obj.get("name"), f"{what}.name"),
        url=_str(obj.get("url"), f"{what}.url"),
    )


def parse_locations(data: JsonInput) -> ShallowLocations:
    """Parse a location-area list page."""
    obj = _load(data)
    return ShallowLocations(
        count=_int(obj.get("count"), "count"),
        next=_opt_str(obj.get("next"), "next"),
        previous=_opt_str(obj.get("previous"), "previous"),
        results=[
            _resource(item, "results")
            for item in _list(obj.get("results"), "results")
        ],
    )


def parse_explore(data: JsonInput) -> ShallowExplore:
    """Parse a location-area detail record."""
    obj = _load(data)
    encounters = _list(obj.get("pokemon_encounters"), "pokemon_encounters")
    return ShallowExplore(
        pokemon_encounters=[
            _resource(
                _obj(encounter, "pokemon_encounters").get("pokemon"),
                "pokemon_encounters.pokemon",
            )
            for encounter in encounters
        ]
    )


def parse_pokemon(data: JsonInput) -> ShallowPokemon:
    """Parse a Pokemon record."""
    obj = _load(data)
    stats = [
        PokemonStat(
            base_stat=_int(_obj(item, "stats").get("base_stat"), "stats.base_stat"),
            stat=_resource(_obj(item, "stats").get("stat"), "stats.stat"),
        )
        for item in _list(obj.get("stats"), "stats")
    ]
    types = [
        _resource(_obj(item, "types").get("type"), "types.type")
        for item in _list(obj.get("types"), "types")
    ]
    return ShallowPokemon(
        name=_str(obj.get("name"), "name"),
        base_experience=_int(obj.get("base_experience"), "base_experience"),
        height=_int(obj.get("height"), "height"),
        weight=_int(obj.get("weight"), "weight"),
        stats=stats,
        types=types,
    )
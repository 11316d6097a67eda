"""Client for the PokeAPI with a response cache."""

from __future__ import annotations

import urllib.error
import urllib.request
from typing import Callable, TypeVar

from pokedexcli.cache import Cache
from pokedexcli.models import (
    ShallowExplore,
    ShallowLocations,
    ShallowPokemon,
    parse_explore,
    parse_locations,
    parse_pokemon,
)

BASE_URL = "https://pokeapi.co/api/v2"

Fetcher = Callable[[str, float], bytes]
T = TypeVar("T")


class PokeAPIError(Exception):
    """Raised when a PokeAPI request cannot be made or understood."""


def _http_get(url: str, timeout: float) -> bytes:
    with urllib.request.urlopen(url, timeout=timeout) as response:
        return response.read()


class Client:
    """Fetches PokeAPI resources, caching raw bodies by URL."""

    def __init__(
        self,
        timeout: float = 5.0,
        *,
        cache_interval: float = 5.0,
        fetch: Fetcher | None = None,
    ) -> None:
        self.timeout = timeout
        self.cache = Cache(cache_interval)
        self._fetch = fetch or _http_get

    def list_locations(self, page_url: str | None = None) -> ShallowLocations:
        """Return a page of location areas, the first page if no URL is given."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._get(url, parse_locations)

    def explore_location(self, location_name: str | None) -> ShallowExplore:
        """Return the Pokemon encounters of a named location area."""
        if location_name is None:
            raise PokeAPIError("There needs to be a location name")
        return self._get(f"{BASE_URL}/location-area/{location_name}", parse_explore)

    def pokemon_stats(self, poke_name: str) -> ShallowPokemon:
        """Return the record of a named Pokemon."""
        if not poke_name:
            raise PokeAPIError("There needs to be a Pokemon name")
        return self._get(f"{BASE_URL}/pokemon/{poke_name}", parse_pokemon)

    def _get(self, url: str, parse: Callable[[bytes], T]) -> T:
        cached = self.cache.get(url)
        if cached is not None:
            try:
                return parse(cached)
            except ValueError as exc:
                raise PokeAPIError(str(exc)) from exc

        try:
            data = self._fetch(url, self.timeout)
        except (urllib.error.URLError, OSError, ValueError) as exc:
            raise PokeAPIError(f"request to {url} failed: {exc}") from exc

        try:
            result = parse(data)
        except ValueError as exc:
            raise PokeAPIError(f"invalid response from {url}: {exc}") from exc
        self.cache.add(url, data)
        return result
"""Client and data types for the PokeAPI."""

from __future__ import annotations

import json
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pokedexcli.cache import Cache

BASE_URL = "https://pokeapi.co/api/v2"

Fetcher = Callable[[str, float], bytes]


def _mapping(value: Any, what: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what}: expected an object")
    return value


def _sequence(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what}: expected an array")
    return value


def _int(obj: dict[str, Any], key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected an integer")
    return value


def _bool(obj: dict[str, Any], key: str) -> bool:
    value = obj.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"{key}: expected a boolean")
    return value


def _str(obj: dict[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected a string")
    return value


def _optional_str(obj: dict[str, Any], key: str) -> str | None:
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key}: expected a string or null")
    return value


def _decode(data: bytes | str) -> dict[str, Any]:
    return _mapping(json.loads(data), "response")


@dataclass(frozen=True)
class NamedResource:
    """A name together with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_json(cls, value: Any, what: str = "resource") -> NamedResource:
        obj = _mapping(value, what)
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass(frozen=True)
class PokemonStat:
    base_stat: int
    effort: int
    stat: NamedResource


@dataclass(frozen=True)
class PokemonType:
    slot: int
    type: NamedResource


@dataclass
class PokemonInfo:
    """A Pokemon as described by the ``/pokemon`` endpoint."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    is_default: bool = False
    order: int = 0
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)
    abilities: list[NamedResource] = field(default_factory=list)
    forms: list[NamedResource] = field(default_factory=list)
    moves: list[NamedResource] = field(default_factory=list)
    species: NamedResource = field(default_factory=NamedResource)
    location_area_encounters: str = ""
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


@dataclass
class LocationPage:
    """One page of the location-area listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)


@dataclass
class Location:
    """A location area and the Pokemon that can be met there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[NamedResource] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict, repr=False)


def parse_pokemon(data: bytes | str) -> PokemonInfo:
    """Parse a JSON ``/pokemon`` response; raise ValueError if malformed."""
    obj = _decode(data)
    stats = [
        PokemonStat(
            base_stat=_int(s, "base_stat"),
            effort=_int(s, "effort"),
            stat=NamedResource.from_json(s.get("stat"), "stat"),
        )
        for s in (_mapping(v, "stats") for v in _sequence(obj.get("stats"), "stats"))
    ]
    types = [
        PokemonType(
            slot=_int(t, "slot"),
            type=NamedResource.from_json(t.get("type"), "type"),
        )
        for t in (_mapping(v, "types") for v in _sequence(obj.get("types"), "types"))
    ]

    def nested(key: str, inner: str) -> list[NamedResource]:
        return [
            NamedResource.from_json(_mapping(item, key).get(inner), inner)
            for item in _sequence(obj.get(key), key)
        ]

    return PokemonInfo(
        id=_int(obj, "id"),
        name=_str(obj, "name"),
        base_experience=_int(obj, "base_experience"),
        height=_int(obj, "height"),
        weight=_int(obj, "weight"),
        is_default=_bool(obj, "is_default"),
        order=_int(obj, "order"),
        stats=stats,
        types=types,
        abilities=nested("abilities", "ability"),
        forms=[NamedResource.from_json(f, "forms") for f in _sequence(obj.get("forms"), "forms")],
        moves=nested("moves", "move"),
        species=NamedResource.from_json(obj.get("species"), "species"),
        location_area_encounters=_str(obj, "location_area_encounters"),
        raw=obj,
    )


def parse_location(data: bytes | str) -> Location:
    """Parse a JSON ``/location-area/<name>`` response."""
    obj = _decode(data)
    encounters = [
        NamedResource.from_json(_mapping(e, "pokemon_encounters").get("pokemon"), "pokemon")
        for e in _sequence(obj.get("pokemon_encounters"), "pokemon_encounters")
    ]
    return Location(
        id=_int(obj, "id"),
        name=_str(obj, "name"),
        game_index=_int(obj, "game_index"),
        location=NamedResource.from_json(obj.get("location"), "location"),
        pokemon_encounters=encounters,
        raw=obj,
    )


def parse_location_page(data: bytes | str) -> LocationPage:
    """Parse a JSON ``/location-area`` listing page."""
    obj = _decode(data)
    return LocationPage(
        count=_int(obj, "count"),
        next=_optional_str(obj, "next"),
        previous=_optional_str(obj, "previous"),
        results=[
            NamedResource.from_json(r, "results")
            for r in _sequence(obj.get("results"), "results")
        ],
    )


def _http_get(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, method="GET")
    with urllib.request.urlopen(request, timeout=timeout) as response:
        return response.read()


class Client:
    """Fetches PokeAPI resources, caching single-resource lookups."""

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        *,
        fetch: Fetcher | None = None,
    ) -> None:
        self.timeout = timeout
        self.cache = Cache(cache_interval)
        self._fetch = fetch or _http_get

    def _cached(self, url: str, parse: Callable[[bytes], Any]) -> Any:
        data = self.cache.get(url)
        if data is not None:
            return parse(data)
        data = self._fetch(url, self.timeout)
        result = parse(data)
        self.cache.add(url, data)
        return result

    def get_location(self, location_name: str) -> Location:
        return self._cached(f"{BASE_URL}/location-area/{location_name}", parse_location)

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return parse_location_page(self._fetch(url, self.timeout))

    def get_pokemon(self, name: str) -> PokemonInfo:
        return self._cached(f"{BASE_URL}/pokemon/{name}", parse_pokemon)

    def close(self) -> None:
        self.cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
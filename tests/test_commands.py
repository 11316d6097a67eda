import json

import pytest

from pokedexcli.commands import (
    CommandError,
    Config,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_map,
    command_mapb,
    command_pokedex,
    get_commands,
)
from pokedexcli.pokeapi import BASE_URL, Client, PokeAPIError

FIRST_PAGE = f"{BASE_URL}/location-area"
SECOND_PAGE = f"{BASE_URL}/location-area?offset=20&limit=20"

PIKACHU = {
    "name": "pikachu",
    "base_experience": 50,
    "height": 4,
    "weight": 60,
    "stats": [
        {"base_stat": 35, "stat": {"name": "hp", "url": ""}},
        {"base_stat": 55, "stat": {"name": "attack", "url": ""}},
    ],
    "types": [{"type": {"name": "electric", "url": ""}}],
}

MEWTWO = {
    "name": "mewtwo",
    "base_experience": 340,
    "height": 20,
    "weight": 1220,
    "stats": [],
    "types": [
        {"type": {"name": "psychic", "url": ""}},
        {"type": {"name": "fighting", "url": ""}},
    ],
}

RESPONSES = {
    FIRST_PAGE: {
        "count": 2,
        "next": SECOND_PAGE,
        "previous": None,
        "results": [{"name": "canalave-city-area", "url": ""}],
    },
    SECOND_PAGE: {
        "count": 2,
        "next": None,
        "previous": FIRST_PAGE,
        "results": [{"name": "eterna-city-area", "url": ""}],
    },
    f"{BASE_URL}/location-area/pastoria-city-area": {
        "pokemon_encounters": [
            {"pokemon": {"name": "tentacool", "url": ""}},
            {"pokemon": {"name": "magikarp", "url": ""}},
        ]
    },
    f"{BASE_URL}/pokemon/pikachu": PIKACHU,
    f"{BASE_URL}/pokemon/mewtwo": MEWTWO,
}


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return min(self.value, stop - 1)


@pytest.fixture
def cfg():
    def fetch(url, timeout):
        if url not in RESPONSES:
            raise OSError(f"no route to {url}")
        return json.dumps(RESPONSES[url]).encode()

    client = Client(fetch=fetch)
    yield Config(client=client, rng=_FixedRng(0))
    client.cache.close()


def _lines(capsys):
    return capsys.readouterr().out.splitlines()


def test_get_commands_names_and_arguments():
    commands = get_commands()
    assert list(commands) == [
        "help", "exit", "map", "mapb", "explore", "catch", "inspect", "pokedex",
    ]
    assert {name for name, cmd in commands.items() if cmd.needs_argument} == {
        "explore", "catch", "inspect",
    }
    assert all(name == cmd.name for name, cmd in commands.items())


def test_help_lists_every_command(cfg, capsys):
    command_help(cfg, "")
    lines = _lines(capsys)
    assert "Welcome to the Pokedex!" in lines
    assert "Usage:" in lines
    for cmd in get_commands().values():
        assert f"{cmd.name}: {cmd.description}" in lines


def test_exit_says_goodbye(cfg, capsys):
    with pytest.raises(SystemExit) as info:
        command_exit(cfg, "")
    assert info.value.code == 0
    assert _lines(capsys) == ["Closing the Pokedex... Goodbye!"]


def test_map_pages_forward_and_back(cfg, capsys):
    command_map(cfg, "")
    assert _lines(capsys) == ["canalave-city-area"]
    assert cfg.next_url == SECOND_PAGE
    assert cfg.previous_url is None

    command_map(cfg, "")
    assert _lines(capsys) == ["eterna-city-area"]
    assert cfg.next_url is None
    assert cfg.previous_url == FIRST_PAGE

    command_mapb(cfg, "")
    assert _lines(capsys) == ["canalave-city-area"]
    assert cfg.next_url == SECOND_PAGE


def test_mapb_on_first_page(cfg):
    with pytest.raises(CommandError, match="You are on the first page"):
        command_mapb(cfg, "")


def test_explore_lists_encounters(cfg, capsys):
    command_explore(cfg, "pastoria-city-area")
    assert _lines(capsys) == [
        "Exploring pastoria-city-area...",
        "Found Pokemon!",
        "- tentacool",
        "- magikarp",
    ]


def test_explore_unknown_location(cfg):
    with pytest.raises(PokeAPIError):
        command_explore(cfg, "nowhere")


def test_catch_weak_pokemon_is_caught(cfg, capsys):
    command_catch(cfg, "pikachu")
    assert _lines(capsys) == [
        "Throwing a Pokeball at pikachu...",
        "pikachu was caught!",
        "You may now inspect it with the inspect command.",
    ]
    assert cfg.caught_pokemon["pikachu"].weight == 60


def test_catch_high_roll_escapes(cfg, capsys):
    cfg.rng = _FixedRng(300)
    command_catch(cfg, "mewtwo")
    assert _lines(capsys)[-1] == "mewtwo escaped!"
    assert "mewtwo" not in cfg.caught_pokemon


def test_catch_unknown_pokemon(cfg):
    with pytest.raises(
        CommandError, match="There was trouble looking up the Pokemon you typed in"
    ):
        command_catch(cfg, "missingno")
    assert cfg.caught_pokemon == {}


def test_inspect_caught_pokemon(cfg, capsys):
    command_catch(cfg, "pikachu")
    capsys.readouterr()
    command_inspect(cfg, "pikachu")
    assert _lines(capsys) == [
        "Name: pikachu",
        "Height: 4",
        "Weight: 60",
        "Stats:",
        "  -hp: 35",
        "  -attack: 55",
        "Type:",
        "  -electric",
    ]


def test_inspect_plural_types(cfg, capsys):
    command_catch(cfg, "mewtwo")
    capsys.readouterr()
    command_inspect(cfg, "mewtwo")
    lines = _lines(capsys)
    assert lines[-3:] == ["Types:", "  -psychic", "  -fighting"]


def test_inspect_uncaught(cfg, capsys):
    command_inspect(cfg, "pikachu")
    lines = _lines(capsys)
    assert lines[0] == "You have not caught that Pokemon"
    assert "Name: " in lines


def test_pokedex_empty(cfg, capsys):
    command_pokedex(cfg, "")
    assert _lines(capsys) == ["Go catch some Pokemon!"]


def test_pokedex_lists_caught(cfg, capsys):
    command_catch(cfg, "pikachu")
    command_catch(cfg, "mewtwo")
    capsys.readouterr()
    command_pokedex(cfg, "")
    lines = _lines(capsys)
    assert lines[0] == "Your Pokedex:"
    assert sorted(lines[1:]) == ["  -mewtwo", "  -pikachu"]
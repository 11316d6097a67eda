"""The interactive Pokedex prompt."""

from __future__ import annotations

from pokedexcli.commands import CommandError, Config, get_commands
from pokedexcli.pokeapi import Client, PokeAPIError

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case the text and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config) -> None:
    """Read commands from standard input until it ends or exit is run."""
    cfg.caught_pokemon = {}
    commands = get_commands()
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return

        words = clean_input(line)
        if not words:
            continue

        command = commands.get(words[0])
        if command is None:
            print("Unknown command")
            continue

        if command.needs_argument:
            if len(words) == 1:
                print("Missing argument for command")
                continue
            try:
                command.callback(cfg, words[1])
            except (CommandError, PokeAPIError) as exc:
                print(exc)
            continue

        try:
            command.callback(cfg, "")
        except (CommandError, PokeAPIError):
            pass


def main(argv: list[str] | None = None) -> int:
    """Start the Pokedex prompt."""
    client = Client(timeout=5.0)
    try:
        start_repl(Config(client=client))
    finally:
        client.cache.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""The interactive Pokedex shell and its entry point."""

from __future__ import annotations

import sys
from typing import TextIO

from pokedexcli.commands import CommandError, Config, get_commands
from pokedexcli.pokeapi import Client

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into words."""
    return text.lower().split()


def start_repl(cfg: Config, stdin: TextIO | None = None) -> None:
    """Read commands line by line and run them until input ends."""
    stream = stdin if stdin is not None else sys.stdin
    commands = get_commands()
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            return
        words = clean_input(line)
        if not words:
            continue
        name, *args = words
        command = commands.get(name)
        if command is None:
            print(f"Your command was: {name}")
            continue
        try:
            command.callback(cfg, *args)
        except (CommandError, OSError, ValueError) as err:
            print(err)


def main(argv: list[str] | None = None) -> int:
    """Start the Pokedex shell on standard input."""
    with Client(timeout=5.0, cache_interval=300.0) as client:
        start_repl(Config(client=client), sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
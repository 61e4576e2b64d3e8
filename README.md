# pokedexcli

An interactive Pokedex for the terminal. You can page through location areas, explore them to see which Pokemon can be met there, try to catch Pokemon and inspect the ones you have caught. All data comes from the public PokeAPI over HTTP. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Usage

Start the shell:

```
pokedexcli
```

You then see the prompt `Pokedex > `. Each line is lower-cased and split on whitespace. The first word picks the command, and the other words are its arguments. The commands are:

| Command | What it does |
|---|---|
| `help` | Prints every command with a short description |
| `map` | Prints the next page of location areas |
| `mapb` | Prints the previous page of location areas |
| `explore <location_name>` | Lists the Pokemon that can be met in a location area |
| `catch <pokemon_name>` | Tries to catch a Pokemon |
| `inspect <pokemon_name>` | Prints the name, height, weight, stats and types of a caught Pokemon |
| `pokedex` | Lists every Pokemon you have caught |
| `exit` | Prints a goodbye and leaves the program |

An unknown word is echoed back as `Your command was: <word>`. When a command fails, for example because of a missing argument, a network error or a malformed response, its message is printed and the shell keeps running. The shell also ends when its input runs out, for example when you press Ctrl-D.

To catch a Pokemon, the shell draws a random number below the Pokemon's base experience. The catch succeeds when that number is 50 or less, so Pokemon with more base experience are harder to catch. `mapb` on the first page reports `you're on the first page`.

Example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
 - tentacool
 ...
Pokedex > catch tentacool
tentacool was caught!
You may now inspect it with the inspect command.
Pokedex > pokedex
Your Pokedex:
- tentacool
```

## Caching

Lookups of a single Pokemon (`catch`) and of a single location area (`explore`) are kept in an in-memory cache. A background thread removes entries older than five minutes. The location listing used by `map` and `mapb` is fetched again every time.

## Using the library

`pokedexcli.pokeapi.Client` fetches resources and can be used as a context manager. `Client.close()` stops its cache's background thread.

```python
from pokedexcli.pokeapi import Client

with Client(timeout=5.0, cache_interval=300.0) as client:
    page = client.list_locations(None)
    for area in page.results:
        print(area.name)

    pokemon = client.get_pokemon("pikachu")
    print(pokemon.height, pokemon.weight)

    location = client.get_location("canalave-city-area")
    print([p.name for p in location.pokemon_encounters])
```

- `get_pokemon(name)` returns a `PokemonInfo`.
- `get_location(location_name)` returns a `Location`.
- `list_locations(page_url)` returns a `LocationPage` with `count`, `next`, `previous` and `results`.

The keyword argument `fetch` replaces the HTTP call with any callable that takes `(url, timeout)` and returns the response body as bytes. The functions `parse_pokemon`, `parse_location` and `parse_location_page` turn JSON text into these objects and raise `ValueError` on malformed data.

`pokedexcli.cache.Cache(interval)` is the expiring byte cache used by the client. It offers these methods:

- `add(key, value)`
- `get(key)`, which returns `None` when the key is missing
- `reap(now, interval)`
- `close()`

The shell itself can be driven from Python through `pokedexcli.repl.start_repl(cfg, stdin)` with a `pokedexcli.commands.Config`. The word lists come from `get_commands()` in the same module.

## Limitations

Caught Pokemon exist only for the length of a session. Nothing is saved to disk, and the Pokedex starts empty each time.

## Development

```
pip install -e ".[test]"
pytest
```
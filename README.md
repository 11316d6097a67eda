# pokedexcli

An interactive Pokedex for the terminal. You can page through location
areas, explore them for wild Pokemon, and try to catch and inspect Pokemon.
All data comes from the public PokeAPI. Raw responses are cached in memory
for five seconds, so paging back and forth quickly does not repeat requests.
Only the standard library is needed.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedexcli
```

You can also start it with `python -m pokedexcli.repl`.

At the `Pokedex > ` prompt, each line is lower-cased and split on
whitespace. The first word picks the command. These are the commands:

| Command              | What it does                                    |
|----------------------|-------------------------------------------------|
| `help`               | Displays a help message                         |
| `exit`               | Exit the Pokedex                                |
| `map`                | Get the next 20 locations                       |
| `mapb`               | Get the previous 20 locations                   |
| `explore <area>`     | Explore a region to find the natural Pokemon    |
| `catch <pokemon>`    | Try to catch a pokemon!                         |
| `inspect <pokemon>`  | Look at a Pokemon's Pokedex record              |
| `pokedex`            | See what you have in your Pokedex               |

What the prompt does with other input:

- For a command it does not know, it prints `Unknown command`.
- `explore`, `catch` and `inspect` need an argument. If it is missing, the
  prompt prints `Missing argument for command`. Only the first argument is
  used.
- When one of these three commands fails, it prints the error message.
- When `map`, `mapb`, `help` or `pokedex` fails, nothing is printed. One case
  is running `mapb` on the first page.
- The prompt ends when you run `exit` or when standard input ends.

About catching: a Pokemon with a higher base experience escapes more often.
A caught Pokemon is stored under its name, and `inspect` shows its height,
weight, base stats and types.

Example session:

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon!
- tentacool
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
You may now inspect it with the inspect command.
Pokedex > inspect tentacool
```

## Using it as a library

- `pokedexcli.pokeapi.Client(timeout=5.0, *, cache_interval=5.0, fetch=None)`
  has three methods, and each one returns a parsed record:
  - `list_locations(page_url=None)`
  - `explore_location(location_name)`
  - `pokemon_stats(poke_name)`

  When a request fails or a response cannot be understood, the method raises
  `PokeAPIError`. The `fetch` argument takes a callable `(url, timeout) -> bytes`
  that is used in place of the built-in HTTP request. The client's cache is
  available as `client.cache`.
- `pokedexcli.cache.Cache(interval)` is a thread-safe byte cache whose entries
  expire after `interval` seconds. It has these methods:
  - `add(key, val)` stores a value.
  - `get(key)` returns the stored bytes, or `None`.
  - `reap()` removes expired entries.
  - `close()` stops the background thread that calls `reap()`.

  A `Cache` also supports `len()` and `in`, and it can be used as a context
  manager.
- `pokedexcli.models` holds the record types `ShallowLocations`,
  `ShallowExplore`, `ShallowPokemon`, `PokemonStat` and `NamedResource`. It
  also holds `parse_locations`, `parse_explore` and `parse_pokemon`, which
  accept a JSON string, JSON bytes or a mapping.
- `pokedexcli.commands` provides `Config`, `get_commands()` and the individual
  command functions. `pokedexcli.repl` provides `clean_input(text)`,
  `start_repl(cfg)` and `main()`.

## What it does not do

The Pokedex is kept only in memory. Caught Pokemon are not saved anywhere,
and they are lost when the prompt ends.

## Development

```
pip install -e .[test]
pytest
```
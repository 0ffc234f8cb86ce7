# cslib

Small data structures and helpers for teaching programs. Pure Python, no
third-party dependencies.

## Modules

- `cslib.grid`: `Grid(n_rows, n_cols, default)` is a fixed-size two-dimensional
  array. Elements are read and written as `grid[row, col]` or `grid[row][col]`,
  or with `get` / `set`; out-of-range indices (negative ones included) raise
  `IndexError`. `resize` discards the contents, `Grid.from_rows` builds a grid
  from equally long rows, iteration is row-major, and `str(grid)` gives
  `{{a, b}, {c, d}}`.
- `cslib.hashmap`: `HashMap` is a chained hash table keyed through
  `cslib.hashing.hash_code`. It offers `put`, `get(key, default)`,
  `contains_key`, `remove`, `clear`, `keys`, `values`, `items`, `map_all`,
  `copy` and the usual mapping operators; `map[key]` raises `KeyError` for a
  missing key. Its string form is `{key:value, ...}`.
- `cslib.hashing`: `hash_code(key)` gives a deterministic, nonnegative code for
  strings, integers, floats, lists, tuples and sets; `hash_collection(items)`
  combines the codes of items in order.
- `cslib.lexicon`: `Lexicon` is a case-insensitive word list with `contains`,
  `contains_prefix`, `add`, `clear`, `map_all` and `copy`. It iterates in
  alphabetical order and loads either a text file (one word per line) or a
  binary DAWG file; a missing or malformed file raises `LexiconError`.
- `cslib.gtypes`: the frozen value types `GPoint`, `GDimension` and
  `GRectangle` (with `is_empty`, `contains(x, y)` and `contains_point`),
  plus `real_to_string` and a `hash_code` for these types.
- `cslib.point`: `Point`, an integer x-y pair whose string form is `(x,y)`.
- `cslib.colors`: `convert_color_to_rgb` accepts a color name (case, spaces and
  underscores ignored, e.g. `"Dark Gray"`) or a `"#rrggbb"` string and returns
  a packed RGB integer, `-1` for the empty string; `convert_rgb_to_color` turns
  it back into `"#RRGGBB"`. Unknown or malformed colors raise `ErrorException`.
- `cslib.randomness`: `random_integer`, `random_real`, `random_chance` and
  `set_random_seed`, drawing from one shared, time-seeded source.
- `cslib.simpio`: `get_integer`, `get_real` and `get_line` prompt on standard
  output and read standard input; the numeric ones re-prompt until a line holds
  a single valid value and raise `EOFError` at end of input.
- `cslib.startup`: `main_wrapper(main, argv)` calls `main(argv)`. An
  `ErrorException` is printed to standard error as `Error: <message>` and
  gives exit status 1; any other exception is described by
  `describe_exception` on standard error and raised again.

## Installation

```
pip install .
```

## Examples

```python
from cslib.grid import Grid
from cslib.lexicon import Lexicon
from cslib.colors import convert_color_to_rgb, convert_rgb_to_color

grid = Grid(2, 3, 0)
grid[1, 2] = 7
print(grid)                                # {{0, 0, 0}, {0, 0, 7}}

words = Lexicon()
words.add("Zoo")
print("ZOO" in words)                      # True
print(words.contains_prefix("z"))          # True

print(convert_color_to_rgb("Dark Gray"))   # 5855577
print(convert_rgb_to_color(0xFF00FF))      # #FF00FF
```

## What it does not do

There is no graphics window, drawing surface, event handling or sound
playback: the color conversions and geometry types are plain values for use
elsewhere. The package has no command-line program of its own.

## Running the tests

```
pip install .[test]
pytest
```
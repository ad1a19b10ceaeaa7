# catsworld

A small tile-based puzzle game. You walk a cat around a walled map, pick up
every item, and once the last one is collected the exit lets you out. Each
successful step prints the running move count to standard output.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
catsworld path/to/level.ber
```

`python -m catsworld.render path/to/level.ber` does the same.

The window is titled "Cats world" and takes the size of the screen. Move with
`W`, `A`, `S` and `D`; press `Escape` or close the window to quit (exit
status 0). Walls, the enemy and the exit while items remain all block a step.
Reaching the exit after the last item ends the game with exit status 1.

The command exits with status 1 without opening a window when it is not given
exactly one argument, when the map is rejected (the reason is printed to
standard error after a line reading `Error`), when the map does not fit on the
screen at 64 pixels per tile, or when a texture cannot be loaded.

### Textures

Tiles are drawn from a directory named `textures` in the current working
directory. It must hold 64×64 images named `wall.xpm`, `floor.xpm`,
`item.xpm`, `player.xpm`, `exit.xpm` and `enemy.xpm`. No textures come with
the package; supply your own.

## Map files

A map is a plain text file, one row per line, every line ending with a
newline (the last one included). It is built from these characters:

| Char | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | floor       |
| `C`  | collectible |
| `P`  | player      |
| `E`  | exit        |
| `M`  | enemy       |

A map is rejected with a `MapError` when:

- any other character appears;
- the lines are not all the same length, or rows are shorter than four tiles;
- there is not exactly one `P` and exactly one `E`, or there is no `C`;
- there is no `M`;
- the first and last rows are not all walls, or a middle row does not start
  and end with a wall;
- some collectible, the exit or the enemy cannot be reached from the player.

Example:

```
11111111
1P0C0M01
10110001
1C0000E1
11111111
```

## Using it as a library

```python
from catsworld.gamemap import GameMap, MapError
from catsworld.game import Direction, Game, MoveResult

try:
    level = GameMap.from_file("level.ber")
except MapError as err:
    print(err)
else:
    print(level.player_position())   # (row, column)

game = Game.from_file("level.ber")
result = game.move(Direction.RIGHT)  # MoveResult.BLOCKED, MOVED or WON
print(game.moves, game.game_map.items)
```

`Game.from_lines` and `GameMap.from_lines` take the map as a list of lines,
newlines included. Once a move returns `MoveResult.WON` the game is finished
and further moves raise `RuntimeError`. `catsworld.gamemap` also exposes the
individual checks (`measure_length`, `check_chars`, `count_tiles`,
`find_tile`, `flood_fill`, `check_limits`, `check_after`, `validate_paths`).

`catsworld.render` holds the `Renderer` class, `texture_path`, `fits_screen`
and `key_to_direction`.

The package also ships the small helpers the game is built on:
`catsworld.textops` (`split_words`, `trim`, `substring`, `join`, ...),
`catsworld.chars` (`atoi`, `itoa`, character classes),
`catsworld.memory` (`memset`, `memcpy`, `memmove`, ... on `bytearray`),
`catsworld.linereader` (`LineReader`, `read_lines`),
`catsworld.linkedlist` (`LinkedList`) and
`catsworld.printf` (`format_printf`, `printf`, `put_str`, ...).

```python
from catsworld.textops import split_words
from catsworld.printf import format_printf

split_words("  one two  three ", " ")   # ['one', 'two', 'three']
format_printf("%s has %d moves\n", "cat", 12)
```

## What it does not do

The enemy never moves and touching it does not end the game; it is only a
tile that blocks the player and must be reachable on the map. There are no
levels, menus, scores or saved games, and no textures are included.
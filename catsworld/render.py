"""Window drawing, keyboard handling and the command entry point."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from catsworld.game import Direction, Game, MoveResult  # noqa: E402
from catsworld.gamemap import GameMap, MapError  # noqa: E402
from catsworld.printf import printf  # noqa: E402

TILE_SIZE = 64
WINDOW_TITLE = "Cats world"
DEFAULT_TEXTURES = "textures"

_TEXTURE_FILES = {
    "1": "wall.xpm",
    "0": "floor.xpm",
    "C": "item.xpm",
    "P": "player.xpm",
    "E": "exit.xpm",
    "M": "enemy.xpm",
}

_KEY_DIRECTIONS = {
    ord("w"): Direction.UP,
    ord("a"): Direction.LEFT,
    ord("s"): Direction.DOWN,
    ord("d"): Direction.RIGHT,
}


def texture_path(tile: str, root: str | os.PathLike[str] = DEFAULT_TEXTURES) -> Path:
    """Return the image file drawn for a tile."""
    try:
        name = _TEXTURE_FILES[tile]
    except KeyError:
        raise ValueError(f"no texture for tile {tile!r}") from None
    return Path(root) / name


def fits_screen(game_map: GameMap, width: int, height: int) -> bool:
    """True if the whole map can be drawn on a screen of the given size."""
    return game_map.length * TILE_SIZE <= width and game_map.height * TILE_SIZE <= height


def key_to_direction(key: int | str) -> Direction | None:
    """Return the direction bound to a key code, or None."""
    if isinstance(key, str):
        if len(key) != 1:
            return None
        key = ord(key)
    return _KEY_DIRECTIONS.get(key)


class Renderer:
    """Draws a game in a window and drives it from the keyboard."""

    def __init__(self, game: Game, textures_dir: str | os.PathLike[str] = DEFAULT_TEXTURES) -> None:
        self.game = game
        self.textures_dir = Path(textures_dir)
        if not self.textures_dir.is_dir():
            raise FileNotFoundError(f"textures directory not found: {self.textures_dir}")
        self._textures: dict[str, pygame.Surface] = {}
        self._surface: pygame.Surface | None = None

    def _texture(self, tile: str) -> pygame.Surface:
        image = self._textures.get(tile)
        if image is None:
            image = pygame.image.load(str(texture_path(tile, self.textures_dir)))
            if image.get_size() != (TILE_SIZE, TILE_SIZE):
                raise ValueError(
                    f"texture for tile {tile!r} must be {TILE_SIZE}x{TILE_SIZE}"
                )
            self._textures[tile] = image
        return image

    def _window(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("renderer has no window; call run()")
        return self._surface

    def _blit(self, surface: pygame.Surface, row: int, col: int) -> pygame.Rect:
        tile = self.game.game_map.tile(row, col)
        return surface.blit(self._texture(tile), (col * TILE_SIZE, row * TILE_SIZE))

    def draw(self) -> None:
        """Draw every tile of the map."""
        surface = self._window()
        for row, cells in enumerate(self.game.game_map.grid):
            for col in range(len(cells)):
                self._blit(surface, row, col)
        pygame.display.flip()

    def redraw(self, cells: Iterable[Sequence[int]]) -> None:
        """Draw again the given (row, column) cells."""
        surface = self._window()
        rects = [self._blit(surface, row, col) for row, col in cells]
        pygame.display.update(rects)

    def run(self) -> int:
        """Open the window and play until it closes; return the exit status."""
        pygame.init()
        try:
            info = pygame.display.Info()
            width, height = info.current_w, info.current_h
            if not fits_screen(self.game.game_map, width, height):
                return 1
            self._surface = pygame.display.set_mode((width, height))
            pygame.display.set_caption(WINDOW_TITLE)
            self.draw()
            while True:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return 0
                direction = key_to_direction(event.key)
                if direction is None:
                    continue
                before = self.game.player
                result = self.game.move(direction)
                if result is MoveResult.BLOCKED:
                    continue
                self.redraw([before, self.game.player])
                printf("%d\n", self.game.moves)
                sys.stdout.flush()
                if result is MoveResult.WON:
                    # Reaching the exit ends the program with status 1.
                    return 1
        finally:
            self._surface = None
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        game = Game.from_file(args[0])
    except MapError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    try:
        return Renderer(game).run()
    except (OSError, ValueError, pygame.error) as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
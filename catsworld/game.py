"""Game state and the rules for moving the player around a map."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from catsworld.gamemap import (
    ENEMY,
    EXIT,
    FLOOR,
    ITEM,
    PLAYER,
    GameMap,
    MapError,
    find_tile,
    validate_paths,
)


class Direction(Enum):
    """A step on the grid as (row delta, column delta)."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


class MoveResult(Enum):
    """What a move attempt did."""

    BLOCKED = "blocked"
    MOVED = "moved"
    WON = "won"


@dataclass
class Game:
    """A running game: the map, where the player and the enemy stand, and the move count."""

    game_map: GameMap
    player: tuple[int, int]
    enemy: tuple[int, int]
    moves: int = 0
    finished: bool = False

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> Game:
        """Load a map file and start a game on it."""
        return cls._start(GameMap.from_file(path))

    @classmethod
    def from_lines(cls, lines: Sequence[str]) -> Game:
        """Start a game on a map given as lines, newlines included."""
        return cls._start(GameMap.from_lines(lines))

    @classmethod
    def _start(cls, game_map: GameMap) -> Game:
        player = game_map.player_position()
        enemy = find_tile(game_map.grid, ENEMY)
        if enemy is None:
            raise MapError("map has no enemy")
        if not validate_paths(game_map.grid, *player):
            raise MapError("bad map: not closed or not every tile reachable")
        return cls(game_map=game_map, player=player, enemy=enemy)

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one step.

        Floor and collectibles can be stepped on; the exit only once every
        collectible is taken, which wins the game. Anything else blocks.
        """
        if not isinstance(direction, Direction):
            raise TypeError(f"expected a Direction, got {type(direction).__name__}")
        if self.finished:
            raise RuntimeError("the game is over")
        row, col = self.player
        d_row, d_col = direction.delta
        target = (row + d_row, col + d_col)
        tile = self.game_map.tile(*target)
        if tile in (FLOOR, ITEM):
            if tile == ITEM:
                self.game_map.items -= 1
            self._step_to(target)
            return MoveResult.MOVED
        if tile == EXIT and self.game_map.items == 0:
            self._step_to(target)
            self.finished = True
            return MoveResult.WON
        return MoveResult.BLOCKED

    def _step_to(self, target: tuple[int, int]) -> None:
        self.game_map.set_tile(*self.player, FLOOR)
        self.game_map.set_tile(*target, PLAYER)
        self.player = target
        self.moves += 1
"""The maze, its items and the rules of one game of chasing and eating."""

from __future__ import annotations

import enum
import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field

ROWS = 24
COLS = 32
TILE_SIZE = 30

FOOD_COUNT = 10
FOOD_POINTS = 10
GHOST_POINTS = 50
GHOST_COUNT = 5
STARTING_LIVES = 3
POWER_UP_SECONDS = 10
COLLISION_COOLDOWN_SECONDS = 1
MOUTH_FRAMES = 10
GHOST_FRAMES = 17

GHOST_DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Tile(enum.IntEnum):
    """What a cell of the maze holds."""

    FLOOR = 0
    WALL = 1
    FOOD = 2
    CHERRY = 3
    APPLE = 4
    MUSHROOM = 5
    PEPPER = 6
    VOID = 9


_LAYOUT = (
    "11111111111111111111111111111111",
    "10000000111000000000011100000001",
    "10111110000011111111000001111101",
    "10100000101000000001010100000101",
    "10101111101111111101010111110101",
    "10100000001000000001010000000101",
    "10111111111011111111110111111101",
    "10000000000000000000000000000001",
    "10111111011111111111101111111101",
    "10000000000000000000000000000001",
    "11111011111111110111111110111111",
    "10000000000000000000000000000001",
    "10111111011111111111110111111101",
    "10100000000000000000000000000101",
    "10101111111111101111111111110101",
    "10000000000000000000000000000001",
    "11111101111101111101111110111111",
    "10000000111000000000011100000001",
    "10111110000011111111000001111101",
    "10100000101000000001010100000101",
    "10101111101111111101010111110101",
    "10100000001000000001010000000101",
    "11111111111111111111111111111111",
    "99999999999999999999999999999999",
)


def initial_map() -> list[list[Tile]]:
    """Return a fresh copy of the empty maze, indexed ``[y][x]``."""
    return [[Tile(int(ch)) for ch in line] for line in _LAYOUT]


def _in_bounds(x: int, y: int) -> bool:
    return 0 <= x < COLS and 0 <= y < ROWS


class Board:
    """The maze grid together with the source of randomness used to fill it."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.cells = initial_map()

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at column ``x``, row ``y``."""
        if not _in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the maze")
        return self.cells[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Put ``tile`` at column ``x``, row ``y``."""
        if not _in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside the maze")
        self.cells[y][x] = Tile(tile)

    def is_open(self, x: int, y: int) -> bool:
        """Return whether a character may stand on the cell."""
        return _in_bounds(x, y) and self.cells[y][x] != Tile.WALL

    def _free_cells(self) -> int:
        return sum(row.count(Tile.FLOOR) for row in self.cells)

    def place_random(self, count: int, tile: Tile) -> None:
        """Put ``tile`` on ``count`` randomly chosen floor cells."""
        if count > self._free_cells():
            raise ValueError(f"not enough floor cells to place {count} tiles")
        placed = 0
        while placed < count:
            y = self.rng.randint(0, ROWS - 1)
            x = self.rng.randint(0, COLS - 1)
            if self.cells[y][x] == Tile.FLOOR:
                self.cells[y][x] = Tile(tile)
                placed += 1

    def random_free_cell(self) -> tuple[int, int]:
        """Return the ``(x, y)`` of a randomly chosen floor cell."""
        if not self._free_cells():
            raise ValueError("the maze has no floor cell left")
        while True:
            x = self.rng.randint(0, COLS - 1)
            y = self.rng.randint(0, ROWS - 1)
            if self.cells[y][x] == Tile.FLOOR:
                return x, y


@dataclass
class Pacman:
    """The player's character."""

    x: int
    y: int
    dx: int = 0
    dy: int = 0
    lives: int = STARTING_LIVES
    mouth_open: bool = True
    frame_counter: int = 0
    score: int = 0
    speed: int = 0

    def steer(self, dx: int, dy: int) -> None:
        """Aim at a unit direction; the step grows with the current speed."""
        step = 1 + self.speed
        self.dx = dx * step
        self.dy = dy * step


@dataclass
class Ghost:
    """A wandering ghost."""

    x: int
    y: int
    dx: int = 0
    dy: int = 0
    frame_counter: int = 0
    visible: bool = False


@dataclass
class _Timer:
    active: bool = False
    started: int = 0


class Game:
    """State and rules of one game."""

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.board = Board(self.rng)
        self.pacman = Pacman(0, 0)
        self.ghosts: list[Ghost] = []
        self._cherry = _Timer()
        self._pepper = _Timer()
        self.remaining_foods = FOOD_COUNT
        self.last_collision = 0
        self.game_over = False
        self.reset()

    @property
    def cherry_mode(self) -> bool:
        """Whether ghosts can currently be eaten."""
        return self._cherry.active

    @property
    def pepper_mode(self) -> bool:
        """Whether the pepper's speed boost is active."""
        return self._pepper.active

    def _now(self) -> int:
        return int(self.clock())

    def reset(self) -> None:
        """Start a new game on a freshly stocked maze."""
        self.board = Board(self.rng)
        self.game_over = False
        self._cherry = _Timer()
        self._pepper = _Timer()
        self.remaining_foods = FOOD_COUNT
        self.last_collision = 0
        self.board.place_random(FOOD_COUNT, Tile.FOOD)
        for item in (Tile.CHERRY, Tile.APPLE, Tile.MUSHROOM, Tile.PEPPER):
            self.board.place_random(1, item)
        self.pacman = Pacman(*self.board.random_free_cell())
        self.ghosts = [Ghost(*self.board.random_free_cell()) for _ in range(GHOST_COUNT)]

    def animate_pacman(self) -> None:
        """Open and close the mouth, unless a cherry holds it open."""
        if self._cherry.active:
            return
        self.pacman.frame_counter += 1
        if self.pacman.frame_counter >= MOUTH_FRAMES:
            self.pacman.mouth_open = not self.pacman.mouth_open
            self.pacman.frame_counter = 0

    def move_pacman(self) -> None:
        """Apply the pending step unless it ends in a wall, then clear it."""
        p = self.pacman
        if self.board.is_open(p.x + p.dx, p.y + p.dy):
            p.x += p.dx
            p.y += p.dy
        p.dx = 0
        p.dy = 0

    def move_ghost(self, ghost: Ghost) -> None:
        """Every few frames, try a step in a random direction."""
        ghost.frame_counter += 1
        if ghost.frame_counter < GHOST_FRAMES:
            return
        dx, dy = GHOST_DIRECTIONS[self.rng.randint(0, len(GHOST_DIRECTIONS) - 1)]
        if self.board.is_open(ghost.x + dx, ghost.y + dy):
            ghost.x += dx
            ghost.y += dy
        ghost.frame_counter = 0

    def check_foods(self) -> None:
        """Consume whatever item lies under the player."""
        p = self.pacman
        tile = self.board.tile_at(p.x, p.y)
        if tile == Tile.FOOD:
            p.score += FOOD_POINTS
            self.board.set_tile(p.x, p.y, Tile.FLOOR)
            self.remaining_foods -= 1
            if self.remaining_foods == 0:
                self.remaining_foods = FOOD_COUNT
                self.board.place_random(FOOD_COUNT, Tile.FOOD)
        elif tile == Tile.CHERRY:
            self._cherry = _Timer(True, self._now())
            self.board.set_tile(p.x, p.y, Tile.FLOOR)
            p.mouth_open = True
        elif tile == Tile.APPLE:
            p.lives += 1
            self.board.set_tile(p.x, p.y, Tile.FLOOR)
        elif tile == Tile.MUSHROOM:
            p.lives -= 1
            self.board.set_tile(p.x, p.y, Tile.FLOOR)
        elif tile == Tile.PEPPER:
            p.speed += 1
            self.board.set_tile(p.x, p.y, Tile.FLOOR)
            self._pepper = _Timer(True, self._now())

    def update_cherry_mode(self) -> None:
        """End cherry mode once it has lasted long enough."""
        if not self._cherry.active:
            return
        if self._now() - self._cherry.started >= POWER_UP_SECONDS:
            self._cherry.active = False
            self.pacman.mouth_open = False
        else:
            self.pacman.mouth_open = True

    def update_pepper_mode(self) -> None:
        """Take back the pepper's speed boost once it has lasted long enough."""
        if self._pepper.active and self._now() - self._pepper.started >= POWER_UP_SECONDS:
            self._pepper.active = False
            self.pacman.speed -= 1

    def resolve_collisions(self) -> None:
        """Eat ghosts in cherry mode; otherwise lose a life on contact."""
        now = self._now()
        p = self.pacman
        if self._cherry.active:
            for ghost in self.ghosts:
                if ghost.visible and (ghost.x, ghost.y) == (p.x, p.y):
                    ghost.visible = False
                    p.score += GHOST_POINTS
            return
        if now - self.last_collision < COLLISION_COOLDOWN_SECONDS:
            return
        if any(g.visible and (g.x, g.y) == (p.x, p.y) for g in self.ghosts):
            p.lives -= 1
            self.last_collision = now
        for ghost in self.ghosts:
            ghost.visible = True

    def check_game_over(self) -> bool:
        """Mark the game over once the player has no lives left."""
        if self.pacman.lives <= 0:
            self.game_over = True
        return self.game_over

    def step(self, direction: tuple[int, int] | None = None) -> bool:
        """Advance one frame, steering the player if a direction is given."""
        if self.game_over:
            return True
        self.animate_pacman()
        if direction is not None:
            self.pacman.steer(*direction)
        self.move_pacman()
        for ghost in self.ghosts:
            self.move_ghost(ghost)
        self.check_foods()
        self.update_cherry_mode()
        self.update_pepper_mode()
        self.resolve_collisions()
        return self.check_game_over()
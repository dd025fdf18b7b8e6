"""The gameplay screen: draws the maze and feeds input into the game rules."""

from __future__ import annotations

import os
import random
import sys
import time
from collections.abc import Callable
from pathlib import Path

import pygame

from pacmaze.board import COLS, ROWS, TILE_SIZE, Game, Tile
from pacmaze.screen import (
    BLACK,
    LIGHT_BLUE,
    LIGHTGRAY,
    NAVY,
    FrameInput,
    Key,
    Screen,
    Session,
)

FOOD_COLOR = (204, 204, 0)
MUSIC_START_SECONDS = 2.0
MUSIC_RESTART_SECONDS = 5.0

_ITEM_SPRITES: dict[Tile, tuple[str, float]] = {
    Tile.CHERRY: ("items/cherry.png", 2.0),
    Tile.APPLE: ("items/apple1.png", 1.0),
    Tile.MUSHROOM: ("items/mushroom.png", 2.0),
    Tile.PEPPER: ("items/pepper.png", 1.8),
}
_PACMAN_CLOSED = "sprites/pac/pacClosed.png"
_PACMAN_WIDE = "sprites/pac/pacWide.png"
_GHOST_SPRITES = (
    "sprites/ghosts/blue/blue0.png",
    "sprites/ghosts/clyde/clyde4.png",
    "sprites/ghosts/inky/inky2.png",
    "sprites/ghosts/pinky/pinky1.png",
    "sprites/ghosts/blue/blue3.png",
)
_MUSIC_FILE = "background.mp3"

# Checked in this order; the first pressed key wins.
_STEERING: tuple[tuple[Key, tuple[int, int]], ...] = (
    (Key.UP, (0, -1)),
    (Key.DOWN, (0, 1)),
    (Key.LEFT, (-1, 0)),
    (Key.RIGHT, (1, 0)),
)


def _load_image(path: Path, scale: float = 1.0) -> pygame.Surface | None:
    try:
        image = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError) as exc:
        print(f"WARNING: could not load image {path}: {exc}", file=sys.stderr)
        return None
    if scale != 1.0:
        width, height = image.get_size()
        image = pygame.transform.scale(image, (round(width * scale), round(height * scale)))
    return image


class GameplayScreen(Screen):
    """Runs one game, ending when the player runs out of lives or presses ESC."""

    def __init__(
        self,
        session: Session,
        assets_dir: str | os.PathLike = "../assets",
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.session = session
        self.assets_dir = Path(assets_dir)
        self.game = Game(rng, clock)
        self._items: dict[Tile, pygame.Surface | None] = {}
        self._pacman_closed: pygame.Surface | None = None
        self._pacman_wide: pygame.Surface | None = None
        self._ghosts: list[pygame.Surface | None] = []
        self._music = False
        self._escaped = False

    def init(self) -> None:
        self.game.reset()
        self._escaped = False
        self._items = {
            tile: _load_image(self.assets_dir / name, scale)
            for tile, (name, scale) in _ITEM_SPRITES.items()
        }
        self._pacman_closed = _load_image(self.assets_dir / _PACMAN_CLOSED)
        self._pacman_wide = _load_image(self.assets_dir / _PACMAN_WIDE)
        self._ghosts = [_load_image(self.assets_dir / name) for name in _GHOST_SPRITES]
        self._start_music()

    def _start_music(self) -> None:
        path = self.assets_dir / _MUSIC_FILE
        if not path.is_file():
            return
        try:
            pygame.mixer.init()
            pygame.mixer.music.load(os.fspath(path))
            pygame.mixer.music.play(start=MUSIC_START_SECONDS)
        except pygame.error as exc:
            print(f"WARNING: could not play music {path}: {exc}", file=sys.stderr)
            return
        self._music = True

    def _steering(self, frame: FrameInput) -> tuple[int, int] | None:
        return next((d for key, d in _STEERING if frame.is_pressed(key)), None)

    def update(self, frame: FrameInput) -> None:
        if not self.game.game_over:
            if self.game.step(self._steering(frame)):
                self.session.add_record(self.game.pacman.score)
            if self._music and not pygame.mixer.music.get_busy():
                pygame.mixer.music.play(start=MUSIC_RESTART_SECONDS)
        if frame.is_pressed(Key.ESCAPE):
            self.session.add_record(self.game.pacman.score)
            self._escaped = True

    def draw(self, surface: pygame.Surface) -> None:
        for y in range(ROWS):
            for x in range(COLS):
                self._draw_cell(surface, x, y, self.game.board.tile_at(x, y))

        pacman = self.game.pacman
        self._draw_text(surface, f"Your Score: {pacman.score}", (100, 690), 25, LIGHTGRAY)
        self._draw_text(surface, f" lives remaining: {pacman.lives}", (400, 690), 25, LIGHTGRAY)

        sprite = self._pacman_wide if pacman.mouth_open else self._pacman_closed
        if sprite is not None:
            surface.blit(sprite, (pacman.x * TILE_SIZE, pacman.y * TILE_SIZE))
        for ghost, ghost_sprite in zip(self.game.ghosts, self._ghosts):
            if ghost.visible and ghost_sprite is not None:
                surface.blit(ghost_sprite, (ghost.x * TILE_SIZE, ghost.y * TILE_SIZE))

    def _draw_cell(self, surface: pygame.Surface, x: int, y: int, tile: Tile) -> None:
        left, top = x * TILE_SIZE, y * TILE_SIZE
        rect = pygame.Rect(left, top, TILE_SIZE, TILE_SIZE)
        if tile == Tile.WALL:
            surface.fill(LIGHT_BLUE, rect)
        elif tile == Tile.VOID:
            surface.fill(BLACK, rect)
        else:
            surface.fill(NAVY, rect)
        if tile == Tile.FOOD:
            pygame.draw.circle(surface, FOOD_COLOR, (left + 15, top + 15), 8)
        item = self._items.get(tile)
        if item is not None:
            surface.blit(item, (left, top))

    def unload(self) -> None:
        self._pacman_closed = None
        self._pacman_wide = None
        self._ghosts = []
        if self._music:
            pygame.mixer.music.stop()
            pygame.mixer.music.unload()
            pygame.mixer.quit()
            self._music = False

    def finish(self) -> bool:
        return self._escaped or self.game.game_over
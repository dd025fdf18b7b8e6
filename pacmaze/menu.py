"""The main menu: start a game, show the scores or quit."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from pacmaze.gameplay import _load_image
from pacmaze.screen import GRAY, RAYWHITE, WHITE, YELLOW, FrameInput, GameScreen, Key, Screen

OPTIONS = ("1. Start Game", "2. Score", "3. Exit")
_TARGETS: tuple[GameScreen | None, ...] = (GameScreen.NAME, GameScreen.SCORE, None)


class MenuScreen(Screen):
    """Lets the player pick where to go next.

    ``finish`` returns the chosen screen, ``GameScreen.MENU`` while nothing
    has been chosen, or ``None`` when the player asked to quit.
    """

    def __init__(self, assets_dir: str | os.PathLike = "../assets") -> None:
        self.assets_dir = Path(assets_dir)
        self.selected = 0
        self._choice: GameScreen | None = GameScreen.MENU
        self._background: pygame.Surface | None = None

    def init(self) -> None:
        self._background = _load_image(self.assets_dir / "background4.jpg", 1.4)
        self.selected = 0
        self._choice = GameScreen.MENU

    def update(self, frame: FrameInput) -> None:
        if frame.is_pressed(Key.DOWN):
            self.selected += 1
        if frame.is_pressed(Key.UP):
            self.selected -= 1
        self.selected = min(max(self.selected, 0), len(OPTIONS) - 1)
        if frame.is_pressed(Key.ENTER):
            self._choice = _TARGETS[self.selected]

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(RAYWHITE)
        if self._background is not None:
            surface.blit(self._background, (-40, -250))
        self._draw_text(surface, "< PAC-MAN >", (230, 100), 80, WHITE)
        for index, label in enumerate(OPTIONS):
            color = YELLOW if index == self.selected else GRAY
            self._draw_text(surface, label, (380, 200 + index * 50), 35, color)

    def unload(self) -> None:
        self._background = None

    def finish(self) -> GameScreen | None:
        return self._choice
"""Shared screen vocabulary: screen identifiers, per-frame input and the session."""

from __future__ import annotations

import abc
import enum
import functools
from dataclasses import dataclass, field

import pygame

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RAYWHITE: Color = (245, 245, 245)
LIGHTGRAY: Color = (200, 200, 200)
GRAY: Color = (130, 130, 130)
DARKGRAY: Color = (80, 80, 80)
YELLOW: Color = (253, 249, 0)
RED: Color = (230, 41, 55)
MAROON: Color = (190, 33, 55)
NAVY: Color = (0, 0, 90)
LIGHT_BLUE: Color = (173, 216, 230)


class GameScreen(enum.IntEnum):
    """Identifiers of the game's screens."""

    MENU = 0
    SCORE = 1
    GAMEPLAY = 2
    ENDING = 3
    NAME = 4


class Key(enum.Enum):
    """Keys the screens react to."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    ENTER = enum.auto()
    BACKSPACE = enum.auto()
    ESCAPE = enum.auto()


@dataclass(frozen=True)
class FrameInput:
    """Input gathered during one frame."""

    pressed: frozenset[Key] = frozenset()
    text: str = ""
    mouse: tuple[float, float] | None = None

    def is_pressed(self, key: Key) -> bool:
        """Return whether ``key`` went down during this frame."""
        return key in self.pressed


@dataclass
class Session:
    """The player's name and last score, shared between screens."""

    name: str = ""
    score: int = 0

    def add_name(self, name: str) -> None:
        """Remember the player's name."""
        self.name = name

    def add_record(self, score: int) -> None:
        """Remember the score of the game just played."""
        self.score = score


@functools.lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Screen(abc.ABC):
    """One screen of the game, driven frame by frame."""

    def init(self) -> None:
        """Prepare the screen before it is shown; nothing to do by default."""

    @abc.abstractmethod
    def update(self, frame: FrameInput) -> None:
        """Advance the screen by one frame."""

    @abc.abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the screen onto ``surface``."""

    def unload(self) -> None:
        """Release what the screen holds; nothing to do by default."""

    @abc.abstractmethod
    def finish(self):
        """Report whether (or where) the screen wants to leave."""

    def _draw_text(
        self,
        surface: pygame.Surface,
        text: str,
        position: tuple[int, int],
        size: int,
        color: Color,
    ) -> None:
        if not text:
            return
        surface.blit(_font(size).render(text, True, color), position)
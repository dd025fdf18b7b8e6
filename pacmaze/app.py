"""The application: switches between screens and runs the main loop."""

from __future__ import annotations

import argparse
from collections.abc import Mapping
from dataclasses import dataclass

import pygame

from pacmaze.ending import EndingScreen
from pacmaze.gameplay import GameplayScreen
from pacmaze.menu import MenuScreen
from pacmaze.name_entry import NameScreen
from pacmaze.scoreboard import ScoreScreen
from pacmaze.screen import BLACK, WHITE, FrameInput, GameScreen, Key, Screen, Session

SCREEN_WIDTH = 960
SCREEN_HEIGHT = 720
TITLE = "PacMan Game - Ava"
FPS = 60
FADE_STEP = 0.05

# Where each screen goes once it reports that it is finished.
_NEXT: dict[GameScreen, GameScreen] = {
    GameScreen.NAME: GameScreen.GAMEPLAY,
    GameScreen.GAMEPLAY: GameScreen.ENDING,
    GameScreen.SCORE: GameScreen.MENU,
    GameScreen.ENDING: GameScreen.MENU,
}

_KEYMAP = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}


@dataclass
class Transition:
    """A fade to black and back between two screens."""

    alpha: float = 0.0
    active: bool = False
    fade_out: bool = False
    source: GameScreen | None = None
    target: GameScreen | None = None

    def start(self, source: GameScreen, target: GameScreen) -> None:
        """Begin fading from ``source`` towards ``target``."""
        self.active = True
        self.source = source
        self.target = target

    def update(self) -> GameScreen | None:
        """Advance the fade; return the target at the moment the screen is black."""
        if not self.fade_out:
            self.alpha += FADE_STEP
            if self.alpha >= 1.0:
                self.alpha = 1.0
                self.fade_out = True
                return self.target
            return None
        self.alpha -= FADE_STEP
        if self.alpha <= 0:
            self.alpha = 0.0
            self.fade_out = False
            self.active = False
            self.source = None
            self.target = None
        return None


class App:
    """Holds the screens and which one is showing."""

    def __init__(
        self,
        screens: Mapping[GameScreen, Screen],
        initial: GameScreen = GameScreen.MENU,
    ) -> None:
        self.screens = dict(screens)
        self.current = initial
        self.transition = Transition()
        self.running = True
        self.screens[initial].init()

    def change_to(self, screen: GameScreen) -> None:
        """Unload the current screen and initialise ``screen`` at once."""
        previous = self.screens.get(self.current)
        if previous is not None:
            previous.unload()
        following = self.screens.get(screen)
        if following is not None:
            following.init()
        self.current = screen

    def transition_to(self, screen: GameScreen) -> None:
        """Fade over to ``screen``."""
        self.transition.start(self.current, screen)

    def update(self, frame: FrameInput) -> None:
        """Advance the showing screen, or the fade, by one frame."""
        if self.transition.active:
            target = self.transition.update()
            if target is not None:
                self.current = target
            return
        screen = self.screens.get(self.current)
        if screen is None:
            return
        screen.update(frame)
        result = screen.finish()
        if self.current == GameScreen.MENU:
            if result is None:
                self.running = False
            elif result != GameScreen.MENU:
                self.change_to(GameScreen(result))
        elif result and self.current in _NEXT:
            self.change_to(_NEXT[self.current])

    def draw(self, surface: pygame.Surface) -> None:
        """Render the showing screen and any fade on top of it."""
        surface.fill(WHITE)
        screen = self.screens.get(self.current)
        if screen is not None:
            screen.draw(surface)
        if self.transition.active:
            veil = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            veil.fill((*BLACK, round(self.transition.alpha * 255)))
            surface.blit(veil, (0, 0))

    def _gather_input(self) -> FrameInput:
        pressed: set[Key] = set()
        text: list[str] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                key = _KEYMAP.get(event.key)
                if key is Key.ESCAPE:
                    # ESC is also the window's exit key.
                    self.running = False
                if key is not None:
                    pressed.add(key)
            elif event.type == pygame.TEXTINPUT:
                text.append(event.text)
        mouse = pygame.mouse.get_pos() if pygame.mouse.get_focused() else None
        return FrameInput(frozenset(pressed), "".join(text), mouse)

    def run(self) -> None:
        """Open the window and run frames until it is closed."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(TITLE)
            clock = pygame.time.Clock()
            while self.running:
                frame = self._gather_input()
                if not self.running:
                    break
                self.update(frame)
                self.draw(surface)
                pygame.display.flip()
                clock.tick(FPS)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(description="A maze chase game.")
    parser.add_argument("--assets", default="../assets", help="directory holding images and music")
    parser.add_argument("--data", default=".", help="directory for the score files")
    args = parser.parse_args(argv)

    session = Session()
    screens: dict[GameScreen, Screen] = {
        GameScreen.MENU: MenuScreen(args.assets),
        GameScreen.NAME: NameScreen(session),
        GameScreen.GAMEPLAY: GameplayScreen(session, args.assets),
        GameScreen.SCORE: ScoreScreen(args.data),
        GameScreen.ENDING: EndingScreen(session, args.data),
    }
    App(screens).run()
    return 0
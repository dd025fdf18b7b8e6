"""The name entry screen: a text box for the player's name."""

from __future__ import annotations

import pygame

from pacmaze.screen import (
    DARKGRAY,
    GRAY,
    LIGHTGRAY,
    MAROON,
    RED,
    FrameInput,
    Key,
    Screen,
    Session,
    _font,
)

MAX_INPUT_CHARS = 15
TEXT_BOX = pygame.Rect(960 // 2 - 400, 300, 800, 80)


def _inside(point: tuple[float, float] | None, box: pygame.Rect) -> bool:
    if point is None:
        return False
    x, y = point
    return box.x <= x < box.x + box.width and box.y <= y < box.y + box.height


def _set_cursor(cursor: int) -> None:
    try:
        pygame.mouse.set_cursor(cursor)
    except pygame.error:
        pass


class NameScreen(Screen):
    """Collects the player's name while the mouse is over the text box."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.name = ""
        self.mouse_on_text = False
        self.frames_counter = 0
        self._entered = False

    def init(self) -> None:
        self._entered = False

    def update(self, frame: FrameInput) -> None:
        on_text = _inside(frame.mouse, TEXT_BOX)
        if on_text != self.mouse_on_text:
            _set_cursor(pygame.SYSTEM_CURSOR_IBEAM if on_text else pygame.SYSTEM_CURSOR_ARROW)
        self.mouse_on_text = on_text

        if on_text:
            for char in frame.text:
                if 32 <= ord(char) <= 125 and len(self.name) < MAX_INPUT_CHARS:
                    self.name += char
            if frame.is_pressed(Key.BACKSPACE):
                self.name = self.name[:-1]
            self.frames_counter += 1
        else:
            self.frames_counter = 0

        if frame.is_pressed(Key.ENTER):
            self.session.add_name(self.name)
            self._entered = True

    def draw(self, surface: pygame.Surface) -> None:
        self._draw_text(surface, "PLACE MOUSE OVER INPUT BOX!", (230, 250), 30, GRAY)
        surface.fill(LIGHTGRAY, TEXT_BOX)
        pygame.draw.rect(surface, RED if self.mouse_on_text else DARKGRAY, TEXT_BOX, 1)
        self._draw_text(surface, self.name, (TEXT_BOX.x + 5, TEXT_BOX.y + 8), 40, MAROON)
        counter = f"INPUT CHARS: {len(self.name)}/{MAX_INPUT_CHARS}"
        self._draw_text(surface, counter, (360, 390), 20, DARKGRAY)

        if not self.mouse_on_text:
            return
        if len(self.name) < MAX_INPUT_CHARS:
            if (self.frames_counter // 20) % 2 == 0:
                width = _font(40).size(self.name)[0] if self.name else 0
                position = (TEXT_BOX.x + 8 + width, TEXT_BOX.y + 12)
                self._draw_text(surface, "_", position, 40, MAROON)
        else:
            self._draw_text(surface, "Press BACKSPACE to delete chars...", (230, 440), 20, GRAY)

    def unload(self) -> None:
        """The name screen holds no resources to release."""

    def finish(self) -> bool:
        return self._entered
"""The ending screen: shows the result and saves it on ENTER."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from datetime import datetime

import pygame

from pacmaze.records import ScoreRecord, format_timestamp, save_record
from pacmaze.screen import GRAY, LIGHTGRAY, NAVY, YELLOW, FrameInput, Key, Screen, Session


class EndingScreen(Screen):
    """Shows the player's score and stores it when ENTER is pressed."""

    def __init__(
        self,
        session: Session,
        directory: str | os.PathLike = ".",
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.session = session
        self.directory = directory
        self.clock = clock
        self.time_string = format_timestamp(clock())
        self._finished = False

    def init(self) -> None:
        self.time_string = format_timestamp(self.clock())
        self._finished = False

    def update(self, frame: FrameInput) -> None:
        if frame.is_pressed(Key.ENTER):
            record = ScoreRecord(self.session.name, self.session.score, self.time_string)
            try:
                save_record(record, self.directory)
            except OSError as exc:
                print(f"Error opening file: {exc}", file=sys.stderr)
            self._finished = True

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(NAVY)
        self._draw_text(surface, "< Ending Board >", (200, 30), 70, LIGHTGRAY)
        summary = f"Score : {self.session.score}, Date and Time: {self.time_string}"
        self._draw_text(surface, summary, (50, 280), 30, YELLOW)
        self._draw_text(surface, self.session.name, (50, 200), 40, YELLOW)
        self._draw_text(surface, "Press ENTER to return", (70, 520), 30, GRAY)

    def unload(self) -> None:
        """The ending screen holds no resources to release."""

    def finish(self) -> bool:
        return self._finished
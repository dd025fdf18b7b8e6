"""The score board screen: lists the saved records."""

from __future__ import annotations

import os
from pathlib import Path

import pygame

from pacmaze.records import BINARY_FILE, MAX_RECORDS, ScoreRecord, read_records
from pacmaze.screen import DARKGRAY, LIGHT_BLUE, NAVY, FrameInput, Key, Screen


class ScoreScreen(Screen):
    """Shows up to ten saved records until ENTER is pressed."""

    def __init__(self, directory: str | os.PathLike = ".") -> None:
        self.directory = directory
        self.records: list[ScoreRecord] = []
        self._finished = False

    def init(self) -> None:
        self._finished = False
        try:
            self.records = read_records(Path(self.directory) / BINARY_FILE, MAX_RECORDS)
        except OSError:
            self.records = []

    def update(self, frame: FrameInput) -> None:
        if frame.is_pressed(Key.ENTER):
            self._finished = True

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(LIGHT_BLUE)
        for row, record in enumerate(self.records):
            y = 140 + row * 45
            text = f"Score : {record.score}, Date and Time: {record.time_string}"
            self._draw_text(surface, text, (250, y), 25, NAVY)
            self._draw_text(surface, record.name, (50, y), 25, NAVY)
        if self.records:
            self._draw_text(surface, "< SCORE BOARD >", (200, 40), 64, DARKGRAY)

    def unload(self) -> None:
        """The score board holds no resources to release."""

    def finish(self) -> bool:
        return self._finished
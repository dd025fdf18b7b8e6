import random

import pygame
import pytest

from pacmaze.board import STARTING_LIVES, TILE_SIZE, Tile
from pacmaze.gameplay import FOOD_COLOR, GameplayScreen
from pacmaze.screen import LIGHT_BLUE, NAVY, FrameInput, Key, Session


@pytest.fixture
def screen(tmp_path):
    gameplay = GameplayScreen(Session(), tmp_path, random.Random(7), lambda: 1000.0)
    gameplay.init()
    return gameplay


def _place_pacman(screen, x, y):
    screen.game.pacman.x = x
    screen.game.pacman.y = y
    for cx, cy in ((x, y), (x + 1, y)):
        screen.game.board.set_tile(cx, cy, Tile.FLOOR)


def test_fresh_game_is_not_finished(screen):
    assert screen.finish() is False
    assert screen.game.pacman.lives == STARTING_LIVES


def test_right_key_moves_pacman(screen):
    _place_pacman(screen, 1, 1)
    screen.update(FrameInput(pressed=frozenset({Key.RIGHT})))
    assert (screen.game.pacman.x, screen.game.pacman.y) == (2, 1)


def test_up_takes_priority_over_right(screen):
    _place_pacman(screen, 1, 1)
    screen.update(FrameInput(pressed=frozenset({Key.UP, Key.RIGHT})))
    # Up from (1, 1) runs into the outer wall, so Pac-Man stays put.
    assert (screen.game.pacman.x, screen.game.pacman.y) == (1, 1)


def test_escape_finishes_and_records_score(screen):
    screen.game.pacman.score = 40
    screen.update(FrameInput(pressed=frozenset({Key.ESCAPE})))
    assert screen.finish() is True
    assert screen.session.score == screen.game.pacman.score


def test_running_out_of_lives_ends_the_game(screen):
    screen.game.pacman.lives = 0
    screen.game.pacman.score = 70
    screen.update(FrameInput())
    assert screen.finish() is True
    assert screen.session.score == screen.game.pacman.score


def test_init_starts_a_new_game(screen):
    screen.game.pacman.lives = 0
    screen.update(FrameInput())
    screen.init()
    assert screen.finish() is False
    assert screen.game.pacman.lives == STARTING_LIVES


def test_draw_paints_walls_floor_and_food(screen):
    surface = pygame.Surface((960, 720))
    screen.draw(surface)
    assert tuple(surface.get_at((5, 5)))[:3] == LIGHT_BLUE
    cells = screen.game.board.cells
    food = next((x, y) for y, row in enumerate(cells) for x, t in enumerate(row) if t == Tile.FOOD)
    centre = (food[0] * TILE_SIZE + 15, food[1] * TILE_SIZE + 15)
    assert tuple(surface.get_at(centre))[:3] == FOOD_COLOR
    corner = (food[0] * TILE_SIZE + 1, food[1] * TILE_SIZE + 1)
    assert tuple(surface.get_at(corner))[:3] == NAVY
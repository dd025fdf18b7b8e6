import pygame
import pytest

from pacmaze.app import App, Transition
from pacmaze.screen import BLACK, WHITE, FrameInput, GameScreen, Screen


class FakeScreen(Screen):
    def __init__(self, result):
        self.result = result
        self.calls = []

    def init(self):
        self.calls.append("init")

    def update(self, frame):
        self.calls.append("update")

    def draw(self, surface):
        self.calls.append("draw")

    def unload(self):
        self.calls.append("unload")

    def finish(self):
        return self.result


@pytest.fixture
def screens():
    made = {screen: FakeScreen(False) for screen in GameScreen}
    made[GameScreen.MENU].result = GameScreen.MENU
    return made


@pytest.fixture
def app(screens):
    return App(screens)


def test_initial_screen_is_initialised(app, screens):
    assert app.current == GameScreen.MENU
    assert screens[GameScreen.MENU].calls == ["init"]


def test_change_to_unloads_and_inits(app, screens):
    app.change_to(GameScreen.SCORE)
    assert app.current == GameScreen.SCORE
    assert screens[GameScreen.MENU].calls == ["init", "unload"]
    assert screens[GameScreen.SCORE].calls == ["init"]


def test_menu_choice_switches_screen(app, screens):
    screens[GameScreen.MENU].result = GameScreen.NAME
    app.update(FrameInput())
    assert app.current == GameScreen.NAME
    assert screens[GameScreen.NAME].calls == ["init"]


def test_menu_without_choice_stays(app, screens):
    app.update(FrameInput())
    assert app.current == GameScreen.MENU
    assert app.running is True


def test_menu_quit_stops_app(app, screens):
    screens[GameScreen.MENU].result = None
    app.update(FrameInput())
    assert app.running is False


@pytest.mark.parametrize(
    "source, expected",
    [
        (GameScreen.NAME, GameScreen.GAMEPLAY),
        (GameScreen.GAMEPLAY, GameScreen.ENDING),
        (GameScreen.SCORE, GameScreen.MENU),
        (GameScreen.ENDING, GameScreen.MENU),
    ],
)
def test_finished_screens_follow_the_flow(app, screens, source, expected):
    app.change_to(source)
    screens[source].result = True
    app.update(FrameInput())
    assert app.current == expected


def test_unfinished_screen_stays(app, screens):
    app.change_to(GameScreen.GAMEPLAY)
    app.update(FrameInput())
    assert app.current == GameScreen.GAMEPLAY
    assert screens[GameScreen.GAMEPLAY].calls == ["init", "update"]


def test_transition_fades_in_then_out():
    fade = Transition()
    fade.start(GameScreen.MENU, GameScreen.SCORE)
    reached = [fade.update() for _ in range(25)]
    assert GameScreen.SCORE in reached
    assert reached.count(GameScreen.SCORE) == 1
    for _ in range(25):
        fade.update()
    assert fade.active is False
    assert fade.alpha == 0.0
    assert fade.target is None


def test_app_transition_switches_without_updating_screens(app, screens):
    app.transition_to(GameScreen.SCORE)
    for _ in range(25):
        app.update(FrameInput())
        if app.current == GameScreen.SCORE:
            break
    assert app.current == GameScreen.SCORE
    assert app.transition.alpha == 1.0
    assert "update" not in screens[GameScreen.MENU].calls


def test_draw_clears_to_white_and_fades_to_black(app, screens):
    surface = pygame.Surface((64, 48))
    app.draw(surface)
    assert tuple(surface.get_at((3, 3)))[:3] == WHITE
    assert screens[GameScreen.MENU].calls[-1] == "draw"
    app.transition_to(GameScreen.SCORE)
    while app.transition.alpha < 1.0:
        app.update(FrameInput())
    app.draw(surface)
    assert tuple(surface.get_at((3, 3)))[:3] == BLACK
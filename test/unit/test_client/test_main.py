"""
Tests for the play screen wiring: event routing, the result dialog and startup helpers.
"""

import random
from pathlib import Path

import pygame
import pytest

from conftest import FakeChecker, ManualWorker
from doodle_dash.ai.quality_check import QualityCheckError
from doodle_dash.client import main
from doodle_dash.client.game import GameController, GameState
from doodle_dash.client.main import (
    build_play_ui,
    compute_layout,
    dispatch_play_event,
    draw_play,
    pixel_ratio_for,
    resolve_env_path,
)
from doodle_dash.client.ui import ToastManager
from doodle_dash.client.ui.canvas import DoodleCanvas

SCREEN = (1280, 800)


def click(ui, controller, pos):
    for event in (
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1),
        pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1),
    ):
        dispatch_play_event(event, ui, controller)


def drag(ui, controller, start, end):
    for event in (
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=start, button=1),
        pygame.event.Event(pygame.MOUSEMOTION, pos=end, rel=(0, 0), buttons=(1, 0, 0)),
        pygame.event.Event(pygame.MOUSEBUTTONUP, pos=end, button=1),
    ):
        dispatch_play_event(event, ui, controller)


@pytest.fixture
def play(request):
    checker = getattr(request, "param", None) or FakeChecker()
    worker = ManualWorker()
    canvas = DoodleCanvas(compute_layout(SCREEN)["canvas"])
    ctl = GameController(canvas, checker, worker=worker, duration=60, rng=random.Random(7))
    ui = build_play_ui(SCREEN, ctl, ToastManager())
    return ctl, worker, ui


def test_try_again_ignored_while_loading(play):
    ctl, _, ui = play
    ctl.start()
    ctl.submit()
    assert ctl.is_loading and ctl.is_result_open
    click(ui, ctl, ui["dialog"].try_again.rect.center)
    assert ctl.session_id == 1
    assert ctl.state is GameState.FINISHED
    assert ui["dialog"].try_again.disabled


def test_open_dialog_blocks_canvas(play):
    ctl, _, ui = play
    ctl.start()
    ctl.submit()
    # re-enable the canvas so only the dialog stands between the drag and the bitmap
    ctl.canvas.disabled = False
    before = ctl.canvas.to_png_bytes()
    rect = ctl.canvas.rect
    drag(ui, ctl, (rect.left + 10, rect.top + 10), (rect.left + 60, rect.top + 40))
    assert not ctl.canvas.is_drawing
    assert ctl.canvas.to_png_bytes() == before


def test_try_again_after_verdict_starts_new_round(play):
    ctl, worker, ui = play
    ctl.start()
    ctl.submit()
    worker.run_all()
    ctl.poll()
    assert not ctl.is_loading
    assert ctl.ai_result.feedback == "Lovely cat!"
    click(ui, ctl, ui["dialog"].try_again.rect.center)
    assert ctl.state is GameState.PLAYING
    assert ctl.session_id == 2
    assert not ctl.is_result_open


@pytest.mark.parametrize("play", [FakeChecker(error=QualityCheckError("model unavailable"))], indirect=True)
def test_failure_reopens_footer_buttons(play):
    ctl, worker, ui = play
    ctl.start()
    ctl.submit()
    worker.run_all()
    ctl.poll()
    assert not ctl.is_result_open
    click(ui, ctl, ui["buttons"]["new_game"].rect.center)
    assert ctl.state is GameState.PLAYING
    assert ctl.session_id == 2


def test_timeout_disables_clear_and_submit_on_next_frame(play):
    ctl, _, ui = play
    ctl.start()
    screen = pygame.Surface(SCREEN)
    draw_play(screen, ui, ctl)
    assert not ui["buttons"]["submit"].disabled
    for _ in range(60):
        ctl.tick()
    assert ctl.state is GameState.FINISHED
    draw_play(screen, ui, ctl)
    assert ui["buttons"]["submit"].disabled
    assert ui["buttons"]["clear"].disabled
    assert not ui["buttons"]["new_game"].disabled


@pytest.mark.parametrize(
    "surface, window, expected",
    [
        ((2560, 1600), (1280, 800), 2.0),
        ((1280, 800), (1280, 800), 1.0),
        ((640, 400), (1280, 800), 1.0),
        ((1280, 800), (0, 0), 1.0),
    ],
)
def test_pixel_ratio_for(surface, window, expected):
    assert pixel_ratio_for(surface, window) == expected


def test_env_path_prefers_checkout(monkeypatch, tmp_path):
    env = tmp_path / ".env"
    env.write_text("OPENAI_API_KEY=sk-test\n")
    monkeypatch.setattr(main, "ENV_PATH", env)
    assert resolve_env_path() == str(env)


def test_env_path_falls_back_to_working_directory(monkeypatch, tmp_path):
    project = tmp_path / "project"
    nested = project / "sub"
    nested.mkdir(parents=True)
    env = project / ".env"
    env.write_text("OPENAI_API_KEY=sk-test\n")
    monkeypatch.setattr(main, "ENV_PATH", tmp_path / "missing" / ".env")
    monkeypatch.chdir(nested)
    assert Path(resolve_env_path()).resolve() == env.resolve()

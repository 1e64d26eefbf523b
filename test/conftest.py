"""
Pytest configuration and shared fixtures for Doodle Dash.
"""

import os
import random
import sys
from types import SimpleNamespace

# Headless SDL so pygame works without a display or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add src to path for testing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pygame  # noqa: E402
import pytest  # noqa: E402

from doodle_dash.ai.quality_check import DoodleQualityCheckOutput  # noqa: E402
from doodle_dash.client.game import GameController  # noqa: E402
from doodle_dash.client.ui.canvas import DoodleCanvas  # noqa: E402
from doodle_dash.client.worker import BackgroundWorker  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


class FakeChecker:
    """Records every image it is asked to judge."""

    def __init__(self, result=None, error=None):
        self.calls = []
        self.result = result or DoodleQualityCheckOutput(isScribble=False, feedback="Lovely cat!")
        self.error = error

    def check(self, photo_data_uri):
        self.calls.append(photo_data_uri)
        if self.error is not None:
            raise self.error
        return self.result


class ManualWorker(BackgroundWorker):
    """Holds jobs until run_all() so tests control when results arrive."""

    def __init__(self):
        super().__init__(threaded=False)
        self.jobs = []

    def submit(self, job_id, fn, *args):
        self.jobs.append((job_id, fn, args))

    def run_all(self):
        jobs, self.jobs = self.jobs, []
        for job_id, fn, args in jobs:
            self._run(job_id, fn, args)


class FakeCompletions:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def make_fake_client(content=None, error=None):
    completions = FakeCompletions(content=content, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions)), completions


@pytest.fixture
def canvas():
    return DoodleCanvas(pygame.Rect(0, 0, 160, 90))


@pytest.fixture
def checker():
    return FakeChecker()


@pytest.fixture
def controller(canvas, checker):
    notes = []
    ctl = GameController(
        canvas,
        checker,
        worker=BackgroundWorker(threaded=False),
        duration=60,
        rng=random.Random(7),
        notify=lambda title, text: notes.append((title, text)),
    )
    ctl.notes = notes
    return ctl

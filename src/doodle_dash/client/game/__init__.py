"""
客户端游戏逻辑模块

Game controller for one player's timed doodle rounds:
- state machine idle -> playing -> finished -> playing ...
- prompt selection and the per-second countdown
- submission of the exported canvas to the quality check

The controller holds no pygame drawing code; the UI layer reads its
attributes every frame and forwards button presses to it.
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Protocol, Sequence, Tuple

from doodle_dash.ai.quality_check import DoodleQualityCheckOutput
from doodle_dash.client.ui.canvas import DoodleCanvas
from doodle_dash.client.worker import BackgroundWorker, JobResult
from doodle_dash.shared.constants import (
    COLORS,
    ERROR_TEXT,
    ERROR_TITLE,
    GAME_DURATION,
    GREAT_TITLE,
    IDLE_PROMPT,
    LOADING_TEXT,
    LOADING_TITLE,
    MAX_LINE_WIDTH,
    MIN_LINE_WIDTH,
    SCRIBBLE_TITLE,
    TICK_MS,
)
from doodle_dash.shared.prompts import PROMPTS

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


class GameState(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    FINISHED = "finished"


class QualityChecker(Protocol):
    def check(self, photo_data_uri: str) -> DoodleQualityCheckOutput:
        ...


class GameController:
    """Owns the session and orchestrates canvas, countdown and quality check."""

    def __init__(
        self,
        canvas: DoodleCanvas,
        checker: QualityChecker,
        *,
        worker: Optional[BackgroundWorker] = None,
        duration: int = GAME_DURATION,
        prompts: Sequence[str] = PROMPTS,
        rng: Optional[random.Random] = None,
        notify: Optional[Callable[[str, str], None]] = None,
    ) -> None:
        if not prompts:
            raise ValueError("prompts must not be empty")
        self.canvas = canvas
        self.checker = checker
        self.worker = worker or BackgroundWorker()
        self.duration = max(0, int(duration))
        self.prompts = list(prompts)
        self._rng = rng or random.Random()
        # // 错误提示回调：(title, description)，由 UI 层显示为 toast
        self._notify = notify

        self.state = GameState.IDLE
        self.prompt = IDLE_PROMPT
        self.time_left = self.duration
        self.color: Color = canvas.color
        self.line_width = canvas.line_width
        # // 每次开局递增，用于识别并丢弃过期的检查结果
        self.session_id = 0
        self.ai_result: Optional[DoodleQualityCheckOutput] = None
        self.is_loading = False
        self.is_result_open = False
        self._elapsed_ms = 0

        self.canvas.disabled = True

    # 游戏控制
    def start(self) -> None:
        """Start (or restart) a round: new prompt, blank canvas, full timer."""
        self.session_id += 1
        self.state = GameState.PLAYING
        self.prompt = self._rng.choice(self.prompts)
        self.canvas.clear()
        self.canvas.disabled = False
        self.time_left = self.duration
        self._elapsed_ms = 0
        self.is_result_open = False
        self.is_loading = False
        self.ai_result = None
        logger.info("Round %d started, prompt=%r", self.session_id, self.prompt)

    def tick(self) -> None:
        """One countdown second. Reaching zero submits exactly once."""
        if self.state is not GameState.PLAYING:
            return
        self.time_left = max(0, self.time_left - 1)
        if self.time_left == 0:
            self.submit()

    def update(self, dt_ms: int) -> None:
        """Advance the countdown by ``dt_ms`` of wall time."""
        if self.state is not GameState.PLAYING:
            return
        self._elapsed_ms += max(0, int(dt_ms))
        while self._elapsed_ms >= TICK_MS and self.state is GameState.PLAYING:
            self._elapsed_ms -= TICK_MS
            self.tick()

    def submit(self) -> None:
        """Finish the round and send the current bitmap to the quality check."""
        if self.state is not GameState.PLAYING:
            return
        self.state = GameState.FINISHED
        self._elapsed_ms = 0
        self.canvas.end_stroke()
        self.canvas.disabled = True

        image = self.canvas.export_image()
        self.is_loading = True
        self.is_result_open = True
        logger.info("Round %d submitted with %ds left", self.session_id, self.time_left)
        self.worker.submit(self.session_id, self.checker.check, image)

    def poll(self) -> None:
        """Apply finished quality checks; results from older rounds are dropped."""
        for job in self.worker.drain():
            self._apply_result(job)

    def _apply_result(self, job: JobResult) -> None:
        if job.job_id != self.session_id:
            logger.info("Discarding stale quality check for round %d (current round %d)", job.job_id, self.session_id)
            return
        self.is_loading = False
        if not job.ok:
            logger.error("AI check failed", exc_info=job.error)
            self.is_result_open = False
            self.ai_result = None
            if self._notify:
                try:
                    self._notify(ERROR_TITLE, ERROR_TEXT)
                except Exception:
                    logger.exception("notify callback failed")
            return
        self.ai_result = job.value
        logger.info("Round %d judged is_scribble=%s", job.job_id, job.value.is_scribble)

    # 画笔与画布
    def set_color(self, color: Color) -> None:
        color = tuple(color)  # type: ignore[assignment]
        if color not in COLORS:
            raise ValueError(f"color {color!r} is not in the palette")
        self.color = color
        self.canvas.color = color

    def set_line_width(self, width: int) -> None:
        self.line_width = max(MIN_LINE_WIDTH, min(MAX_LINE_WIDTH, int(width)))
        self.canvas.line_width = self.line_width

    def clear_canvas(self) -> None:
        if self.state is GameState.PLAYING:
            self.canvas.clear()

    def download(self, directory: Optional[Path] = None) -> Path:
        return self.canvas.download(self.prompt, directory)

    # 视图数据
    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 0.0
        return self.time_left / self.duration

    @property
    def result_title(self) -> str:
        if self.is_loading:
            return LOADING_TITLE
        if self.ai_result is None:
            return ""
        return SCRIBBLE_TITLE if self.ai_result.is_scribble else GREAT_TITLE

    @property
    def result_description(self) -> str:
        if self.is_loading:
            return LOADING_TEXT
        return self.ai_result.feedback if self.ai_result else ""


__all__ = [
    "GameState",
    "GameController",
    "QualityChecker",
]

"""
画布组件

Freehand drawing surface. Pointer and touch events are translated into
segments that are rasterized straight onto a backing ``pygame.Surface``;
the bitmap is the only record of what has been drawn.
"""

from __future__ import annotations

import base64
import io
import logging
import re
from pathlib import Path
from typing import Optional, Tuple, Union

import pygame

from doodle_dash.shared.constants import (
    BACKGROUND_COLOR,
    BLACK,
    DEFAULT_DOWNLOAD_NAME,
    DEFAULT_LINE_WIDTH,
    LIGHT_GRAY,
    PNG_MIME,
)

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]
Point = Tuple[float, float]

_WHITESPACE_RE = re.compile(r"\s")
_SEPARATOR_RE = re.compile(r"[\\/]")


def sanitize_filename(name: str) -> str:
    """Turn a prompt into a download file name: whitespace -> ``_``, plus ``.png``."""
    base = _SEPARATOR_RE.sub("_", _WHITESPACE_RE.sub("_", name or ""))
    return f"{base or DEFAULT_DOWNLOAD_NAME}.png"


class DoodleCanvas:
    """Raster drawing surface with a logical coordinate space.

    ``rect`` is where the canvas sits on screen in logical pixels. The
    backing surface is ``pixel_ratio`` times larger so strokes stay crisp on
    scaled displays; every point and width is multiplied by the ratio when
    rasterized.
    """

    def __init__(
        self,
        rect: pygame.Rect,
        pixel_ratio: float = 1.0,
        color: Color = BLACK,
        line_width: int = DEFAULT_LINE_WIDTH,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.pixel_ratio = max(float(pixel_ratio), 1.0)
        self.color: Color = tuple(color)  # type: ignore[assignment]
        self.line_width = int(line_width)
        self.disabled = False
        # 笔划状态：是否正在绘制以及上一个逻辑坐标
        self.is_drawing = False
        self._last: Optional[Point] = None
        self.surface = pygame.Surface(self.backing_size)
        self.clear()

    @property
    def backing_size(self) -> Tuple[int, int]:
        return (round(self.rect.width * self.pixel_ratio), round(self.rect.height * self.pixel_ratio))

    # 绘图流程
    def begin_stroke(self, pos: Point) -> None:
        """Start a path at a canvas-relative point. Nothing is drawn yet."""
        if self.disabled:
            return
        self._last = (float(pos[0]), float(pos[1]))
        self.is_drawing = True

    def extend_stroke(self, pos: Point) -> None:
        """Extend the current path and rasterize the new segment immediately."""
        if not self.is_drawing or self.disabled or self._last is None:
            return
        p = (float(pos[0]), float(pos[1]))
        self._rasterize_segment(self._last, p)
        self._last = p

    def end_stroke(self) -> None:
        self.is_drawing = False
        self._last = None

    def _rasterize_segment(self, start: Point, end: Point) -> None:
        r = self.pixel_ratio
        a = (start[0] * r, start[1] * r)
        b = (end[0] * r, end[1] * r)
        width = max(1, round(self.line_width * r))
        pygame.draw.line(self.surface, self.color, a, b, width)
        # round caps/joins
        if width > 2:
            radius = width / 2
            pygame.draw.circle(self.surface, self.color, a, radius)
            pygame.draw.circle(self.surface, self.color, b, radius)

    # 输入事件
    def to_canvas_coords(self, screen_pos: Point) -> Point:
        return (screen_pos[0] - self.rect.x, screen_pos[1] - self.rect.y)

    def _finger_pos(self, event: pygame.event.Event) -> Point:
        # Finger events are normalised to the window; pygame reports them in [0, 1].
        display = pygame.display.get_surface() if pygame.display.get_init() else None
        width, height = display.get_size() if display else self.rect.size
        return (event.x * width, event.y * height)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Translate one pygame event. Returns True when the event was consumed."""
        if self.disabled:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.begin_stroke(self.to_canvas_coords(event.pos))
                return True
        elif event.type == pygame.FINGERDOWN:
            pos = self._finger_pos(event)
            if self.rect.collidepoint(pos):
                self.begin_stroke(self.to_canvas_coords(pos))
                return True
        elif event.type in (pygame.MOUSEMOTION, pygame.FINGERMOTION):
            if not self.is_drawing:
                return False
            pos = event.pos if event.type == pygame.MOUSEMOTION else self._finger_pos(event)
            if not self.rect.collidepoint(pos):
                # pointer left the canvas
                self.end_stroke()
                return True
            self.extend_stroke(self.to_canvas_coords(pos))
            return True
        elif event.type in (pygame.MOUSEBUTTONUP, pygame.FINGERUP, pygame.WINDOWLEAVE):
            if self.is_drawing:
                self.end_stroke()
                return True
        return False

    # 画布操作
    def clear(self) -> None:
        """Fill with the background colour, dropping every stroke."""
        self.end_stroke()
        self.surface.fill(BACKGROUND_COLOR)

    def to_png_bytes(self) -> bytes:
        buf = io.BytesIO()
        pygame.image.save(self.surface, buf, "png")
        return buf.getvalue()

    def export_image(self) -> str:
        """Current bitmap as a ``data:image/png;base64,...`` URI."""
        encoded = base64.b64encode(self.to_png_bytes()).decode("ascii")
        return f"data:{PNG_MIME};base64,{encoded}"

    def download(self, name: str = DEFAULT_DOWNLOAD_NAME, directory: Optional[Union[str, Path]] = None) -> Path:
        """Save the bitmap as a PNG named after ``name`` and return the path."""
        target_dir = Path(directory) if directory is not None else Path.cwd()
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / sanitize_filename(name)
        path.write_bytes(self.to_png_bytes())
        logger.info("Saved doodle to %s", path)
        return path

    # 渲染
    def render(self, screen: pygame.Surface) -> None:
        if self.surface.get_size() == self.rect.size:
            screen.blit(self.surface, self.rect.topleft)
        else:
            screen.blit(pygame.transform.smoothscale(self.surface, self.rect.size), self.rect.topleft)
        pygame.draw.rect(screen, LIGHT_GRAY, self.rect, 2)


__all__ = ["DoodleCanvas", "sanitize_filename"]

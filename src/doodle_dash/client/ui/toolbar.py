"""
工具栏组件

Brush controls shown under the canvas: a colour palette and a line-width
slider. Both report changes through callbacks and hold no game state.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence, Tuple

import pygame

from doodle_dash.shared.constants import (
    COLORS,
    DEFAULT_LINE_WIDTH,
    LIGHT_GRAY,
    MAX_LINE_WIDTH,
    MIN_LINE_WIDTH,
    PRIMARY,
)

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


class ColorPalette:
    """Row of round colour swatches; clicking one selects it."""

    def __init__(
        self,
        topleft: Tuple[int, int],
        colors: Sequence[Color] = COLORS,
        swatch_size: int = 24,
        gap: int = 8,
        on_select: Optional[Callable[[Color], None]] = None,
    ) -> None:
        self.colors: List[Color] = [tuple(c) for c in colors]  # type: ignore[misc]
        self.selected: Color = self.colors[0]
        self.on_select = on_select
        self.swatch_size = swatch_size
        self.gap = gap
        self.swatches: List[pygame.Rect] = []
        self.layout(topleft)

    def layout(self, topleft: Tuple[int, int]) -> None:
        x, y = topleft
        step = self.swatch_size + self.gap
        self.swatches = [pygame.Rect(x + i * step, y, self.swatch_size, self.swatch_size) for i in range(len(self.colors))]

    @property
    def rect(self) -> pygame.Rect:
        return self.swatches[0].unionall(self.swatches[1:])

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        for color, swatch in zip(self.colors, self.swatches):
            if swatch.collidepoint(event.pos):
                self.select(color)
                return True
        return False

    def select(self, color: Color) -> None:
        self.selected = tuple(color)  # type: ignore[assignment]
        if self.on_select:
            try:
                self.on_select(self.selected)
            except Exception:
                logger.exception("palette callback failed")

    def draw(self, screen: pygame.Surface) -> None:
        radius = self.swatch_size // 2
        for color, swatch in zip(self.colors, self.swatches):
            if color == self.selected:
                pygame.draw.circle(screen, PRIMARY, swatch.center, radius + 3)
            pygame.draw.circle(screen, color, swatch.center, radius)


class WidthSlider:
    """Horizontal integer slider for the brush width (1..20, step 1)."""

    def __init__(
        self,
        rect: pygame.Rect,
        min_value: int = MIN_LINE_WIDTH,
        max_value: int = MAX_LINE_WIDTH,
        value: int = DEFAULT_LINE_WIDTH,
        on_change: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.min_value = min_value
        self.max_value = max_value
        self.value = self._clamp(value)
        self.on_change = on_change
        self.dragging = False

    def _clamp(self, value: int) -> int:
        return max(self.min_value, min(self.max_value, int(value)))

    def value_at(self, x: float) -> int:
        span = max(1, self.rect.width)
        frac = (x - self.rect.left) / span
        frac = max(0.0, min(1.0, frac))
        return self._clamp(round(self.min_value + frac * (self.max_value - self.min_value)))

    def knob_x(self) -> int:
        frac = (self.value - self.min_value) / max(1, self.max_value - self.min_value)
        return int(self.rect.left + frac * self.rect.width)

    def set_value(self, value: int) -> None:
        value = self._clamp(value)
        if value == self.value:
            return
        self.value = value
        if self.on_change:
            try:
                self.on_change(value)
            except Exception:
                logger.exception("slider callback failed")

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.inflate(0, 16).collidepoint(event.pos):
                self.dragging = True
                self.set_value(self.value_at(event.pos[0]))
                return True
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            self.set_value(self.value_at(event.pos[0]))
            return True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.dragging:
            self.dragging = False
            return True
        return False

    def draw(self, screen: pygame.Surface) -> None:
        track = pygame.Rect(self.rect.left, self.rect.centery - 3, self.rect.width, 6)
        pygame.draw.rect(screen, LIGHT_GRAY, track, border_radius=3)
        filled = pygame.Rect(track.left, track.top, self.knob_x() - track.left, track.height)
        pygame.draw.rect(screen, PRIMARY, filled, border_radius=3)
        pygame.draw.circle(screen, (255, 255, 255), (self.knob_x(), self.rect.centery), 9)
        pygame.draw.circle(screen, PRIMARY, (self.knob_x(), self.rect.centery), 9, 2)


__all__ = ["ColorPalette", "WidthSlider"]

"""
HUD 与结果对话框

Header with prompt, countdown and progress bar, plus the modal result
dialog shown while the doodle is checked and after the verdict arrives.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import pygame

from doodle_dash.client.ui.button import Button, load_font
from doodle_dash.shared.constants import (
    DESTRUCTIVE,
    GRAY,
    LIGHT_GRAY,
    PRIMARY,
    PROMPT_LABEL,
    SUCCESS,
    TRY_AGAIN_TEXT,
)


def wrap_text(text: str, font: pygame.font.Font, max_width: int) -> List[str]:
    """Greedy word wrap so each line renders within ``max_width`` pixels."""
    lines: List[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}".strip()
        if current and font.size(candidate)[0] > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


class HudRenderer:
    """Header bar: prompt on the left, seconds left on the right, progress below."""

    def __init__(self, rect: pygame.Rect) -> None:
        self.rect = pygame.Rect(rect)
        self._label_font = load_font(18)
        self._prompt_font = load_font(32, bold=True)
        self._timer_font = load_font(32, bold=True)

    def render(self, screen: pygame.Surface, prompt: str, time_left: int, progress: float) -> None:
        pygame.draw.rect(screen, (245, 245, 245), self.rect)
        x, y = self.rect.left + 12, self.rect.top + 8

        label = self._label_font.render(PROMPT_LABEL, True, GRAY)
        screen.blit(label, (x, y))
        title = self._prompt_font.render(prompt, True, (20, 20, 20))
        screen.blit(title, (x, y + label.get_height() + 2))

        timer = self._timer_font.render(f"{int(time_left)}s", True, PRIMARY)
        screen.blit(timer, timer.get_rect(topright=(self.rect.right - 12, y + 6)))

        # 进度条
        bar = pygame.Rect(x, self.rect.bottom - 18, self.rect.width - 24, 10)
        pygame.draw.rect(screen, LIGHT_GRAY, bar, border_radius=5)
        filled = bar.copy()
        filled.width = int(bar.width * max(0.0, min(1.0, progress)))
        if filled.width > 0:
            pygame.draw.rect(screen, PRIMARY, filled, border_radius=5)


class ResultDialog:
    """Modal card with the verdict; "Try Again" appears once loading ends."""

    def __init__(self, screen_size: Tuple[int, int], on_try_again=None) -> None:
        w, h = 520, 260
        self.rect = pygame.Rect((screen_size[0] - w) // 2, (screen_size[1] - h) // 2, w, h)
        self._title_font = load_font(28, bold=True)
        self._body_font = load_font(20)
        self.try_again = Button(
            pygame.Rect(self.rect.right - 164, self.rect.bottom - 60, 140, 40),
            TRY_AGAIN_TEXT,
            on_click=on_try_again,
        )
        self._dots = 0

    def handle_event(self, event: pygame.event.Event, is_loading: bool) -> bool:
        self.try_again.disabled = is_loading
        return self.try_again.handle_event(event)

    def render(
        self,
        screen: pygame.Surface,
        title: str,
        description: str,
        is_loading: bool,
        is_scribble: Optional[bool] = None,
    ) -> None:
        # 半透明遮罩
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        screen.blit(overlay, (0, 0))

        pygame.draw.rect(screen, (255, 255, 255), self.rect, border_radius=12)
        x, y = self.rect.left + 24, self.rect.top + 24

        color = (20, 20, 20)
        if not is_loading and is_scribble is not None:
            color = DESTRUCTIVE if is_scribble else SUCCESS
            pygame.draw.circle(screen, color, (x + 10, y + 16), 10)
            x += 30
        elif is_loading:
            self._dots = (self._dots + 1) % 60
            angle_rect = pygame.Rect(x, y + 6, 20, 20)
            pygame.draw.arc(screen, PRIMARY, angle_rect, self._dots / 10.0, self._dots / 10.0 + 4.5, 3)
            x += 30
        title_surf = self._title_font.render(title, True, color)
        screen.blit(title_surf, (x, y))

        y += title_surf.get_height() + 16
        for line in wrap_text(description, self._body_font, self.rect.width - 48):
            surf = self._body_font.render(line, True, GRAY)
            screen.blit(surf, (self.rect.left + 24, y))
            y += self._body_font.get_linesize()

        if not is_loading:
            self.try_again.draw(screen)


__all__ = ["HudRenderer", "ResultDialog", "wrap_text"]

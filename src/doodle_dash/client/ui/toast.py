import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import pygame

from doodle_dash.client.ui.button import load_font
from doodle_dash.shared.constants import DESTRUCTIVE, TOAST_DURATION


@dataclass
class Toast:
    title: str
    description: str
    destructive: bool
    expires_at: float


class ToastManager:
    """Transient notifications stacked in the bottom-right corner."""

    def __init__(self, duration: float = TOAST_DURATION, clock: Callable[[], float] = time.monotonic) -> None:
        self.duration = duration
        self._clock = clock
        self.toasts: List[Toast] = []
        self._title_font: Optional[pygame.font.Font] = None
        self._body_font: Optional[pygame.font.Font] = None

    def show(self, title: str, description: str = "", destructive: bool = False) -> None:
        self.toasts.append(Toast(title, description, destructive, self._clock() + self.duration))

    def error(self, title: str, description: str = "") -> None:
        self.show(title, description, destructive=True)

    def active(self) -> List[Toast]:
        now = self._clock()
        self.toasts = [t for t in self.toasts if t.expires_at > now]
        return list(self.toasts)

    def draw(self, screen: pygame.Surface) -> None:
        toasts = self.active()
        if not toasts:
            return
        if self._title_font is None:
            self._title_font = load_font(20, bold=True)
            self._body_font = load_font(18)
        w, h = 380, 64
        x = screen.get_width() - w - 16
        y = screen.get_height() - 16
        for toast in reversed(toasts):
            y -= h + 8
            rect = pygame.Rect(x, y, w, h)
            bg = DESTRUCTIVE if toast.destructive else (40, 40, 40)
            pygame.draw.rect(screen, bg, rect, border_radius=8)
            title = self._title_font.render(toast.title, True, (255, 255, 255))
            screen.blit(title, (rect.x + 12, rect.y + 8))
            body = self._body_font.render(toast.description, True, (255, 255, 255))
            screen.blit(body, (rect.x + 12, rect.y + 12 + title.get_height()))

import logging
from typing import Callable, Optional, Tuple

import pygame

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


def load_font(size: int, font_name: Optional[str] = None, bold: bool = False) -> pygame.font.Font:
    """Load a system font, falling back to pygame's default font."""
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.SysFont(font_name, size, bold=bold)
    except Exception:
        return pygame.font.Font(None, size)


class Button:
    """
    A clickable rounded button.

    Supports separate background (`bg_color`) and text (`fg_color`) colors,
    an optional hover background and a disabled state that greys the button
    out and ignores clicks.
    """

    def __init__(
        self,
        rect: pygame.Rect,
        text: str,
        bg_color: Color = (59, 130, 246),
        fg_color: Color = (255, 255, 255),
        hover_bg_color: Optional[Color] = None,
        font_size: int = 22,
        font_name: Optional[str] = None,
        on_click: Optional[Callable[[], None]] = None,
    ):
        self.rect = pygame.Rect(rect)
        self.text = text
        self.bg_color = bg_color
        self.hover_bg_color = hover_bg_color
        self.fg_color = fg_color
        self.font = load_font(font_size, font_name, bold=True)
        # 按钮状态
        self.pressed: bool = False
        self.hovered: bool = False
        self.disabled: bool = False
        self.on_click: Optional[Callable[[], None]] = on_click

        self.text_surface = self.font.render(text, True, self.fg_color)
        self.text_rect = self.text_surface.get_rect(center=self.rect.center)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle mouse events. Returns True when the button fired.

        - MOUSEMOTION: update hovered state
        - MOUSEBUTTONDOWN (left): set pressed when hovered
        - MOUSEBUTTONUP (left): if pressed and still hovered, trigger click
        """
        if self.disabled:
            self.pressed = False
            return False
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.pressed:
                self.pressed = False
                if self.rect.collidepoint(event.pos):
                    self.click()
                    return True
        return False

    def click(self) -> None:
        if self.disabled or not self.on_click:
            return
        try:
            self.on_click()
        except Exception:
            logger.exception("Button %r callback failed", self.text)

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the button with a shadow and rounded corners."""
        current_bg = self.bg_color
        if self.disabled:
            current_bg = tuple(c // 2 + 100 for c in self.bg_color)
        elif self.hovered and self.hover_bg_color:
            current_bg = self.hover_bg_color

        # 按下时阴影变短、文本右下偏移，模拟凹陷
        shadow_offset = 1 if self.pressed else 3
        shadow_rect = self.rect.move(shadow_offset, shadow_offset)
        pygame.draw.rect(screen, (150, 150, 150), shadow_rect, border_radius=8)
        pygame.draw.rect(screen, current_bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, (100, 100, 100), self.rect, 1, border_radius=8)

        pos = self.text_rect.move(2, 2) if self.pressed else self.text_rect
        screen.blit(self.text_surface, pos)

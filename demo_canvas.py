#!/usr/bin/env python3
"""
画布功能演示脚本

Manual sandbox for the drawing canvas:
1. Drag with the mouse to draw
2. Keys 1-9 pick a palette colour, +/- change the line width
3. C clears, S saves the doodle to the current directory
4. D toggles disabled mode, ESC quits
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

import pygame  # noqa: E402

from doodle_dash.client.ui.canvas import DoodleCanvas  # noqa: E402
from doodle_dash.shared.constants import COLORS  # noqa: E402

logging.basicConfig(level=logging.INFO)


def demo_canvas() -> None:
    pygame.init()
    screen = pygame.display.set_mode((800, 520))
    pygame.display.set_caption("Canvas demo | drag to draw, C clear, S save, ESC quit")

    canvas = DoodleCanvas(pygame.Rect(40, 40, 720, 405))
    clock = pygame.time.Clock()
    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_c:
                    canvas.clear()
                elif event.key == pygame.K_s:
                    print(f"saved {canvas.download('canvas demo')}")
                elif event.key == pygame.K_d:
                    canvas.disabled = not canvas.disabled
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    canvas.line_width = min(20, canvas.line_width + 1)
                elif event.key == pygame.K_MINUS:
                    canvas.line_width = max(1, canvas.line_width - 1)
                elif pygame.K_1 <= event.key <= pygame.K_9:
                    canvas.color = COLORS[event.key - pygame.K_1]
            else:
                canvas.handle_event(event)

        screen.fill((245, 248, 255))
        canvas.render(screen)
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    demo_canvas()

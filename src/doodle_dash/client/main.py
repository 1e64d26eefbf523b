"""
客户端主程序入口

Opens the Doodle Dash window and runs the pygame event loop.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Tuple

import pygame
from dotenv import find_dotenv, load_dotenv

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

from doodle_dash.ai.quality_check import DoodleQualityChecker  # noqa: E402
from doodle_dash.client.game import GameController, GameState  # noqa: E402
from doodle_dash.client.ui import (  # noqa: E402
    Button,
    ColorPalette,
    DoodleCanvas,
    HudRenderer,
    ResultDialog,
    ToastManager,
    WidthSlider,
    load_font,
)
from doodle_dash.shared.constants import (  # noqa: E402
    CANVAS_ASPECT,
    DESTRUCTIVE,
    FPS,
    GRAY,
    PRIMARY,
    START_TEXT,
    TAGLINE_TEXT,
    TITLE_TEXT,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)

# Project root in a source checkout (src/doodle_dash/client/main.py -> project)
ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = ROOT / ".env"

PAD = 16
HEADER_H = 90
FOOTER_H = 64


def download_dir() -> Path:
    """Where downloaded doodles go: ~/Downloads when present, else the cwd."""
    downloads = Path.home() / "Downloads"
    return downloads if downloads.is_dir() else Path.cwd()


def resolve_env_path() -> str:
    """The checkout's .env, else the nearest .env above the working directory."""
    if ENV_PATH.is_file():
        return str(ENV_PATH)
    # installed from a wheel: ROOT points into site-packages
    return find_dotenv(usecwd=True)


def pixel_ratio_for(surface_size: Tuple[int, int], window_size: Tuple[int, int]) -> float:
    """Drawable pixels per window pixel, never below 1."""
    if window_size[0] <= 0:
        return 1.0
    return max(1.0, surface_size[0] / window_size[0])


def detect_pixel_ratio(screen: pygame.Surface) -> float:
    """Backing pixels per logical pixel for the current window.

    pygame hands back a display surface the size of the window, so with a
    plain ``set_mode`` this is 1.0 on every platform; the canvas still
    accepts a larger ratio when one is passed in explicitly.
    """
    try:
        window_size = pygame.display.get_window_size()
    except pygame.error:
        return 1.0
    return pixel_ratio_for(screen.get_size(), window_size)


def compute_layout(screen_size: Tuple[int, int]) -> Dict[str, pygame.Rect]:
    """Header, 16:9 canvas and footer rects stacked in the window."""
    sw, sh = screen_size
    header = pygame.Rect(PAD, PAD, sw - PAD * 2, HEADER_H)
    avail_w = sw - PAD * 2
    avail_h = sh - HEADER_H - FOOTER_H - PAD * 4
    aw, ah = CANVAS_ASPECT
    w = min(avail_w, avail_h * aw // ah)
    h = w * ah // aw
    canvas = pygame.Rect((sw - w) // 2, header.bottom + PAD, w, h)
    footer = pygame.Rect(PAD, canvas.bottom + PAD, sw - PAD * 2, FOOTER_H)
    return {"header": header, "canvas": canvas, "footer": footer}


def build_idle_ui(screen_size: Tuple[int, int], on_start) -> Dict[str, Any]:
    sw, sh = screen_size
    start = Button(pygame.Rect((sw - 240) // 2, sh // 2 + 40, 240, 56), START_TEXT, font_size=28, on_click=on_start)
    return {
        "title_font": load_font(72, bold=True),
        "tagline_font": load_font(24),
        "start": start,
    }


def draw_idle(screen: pygame.Surface, ui: Dict[str, Any]) -> None:
    sw, sh = screen.get_size()
    title = ui["title_font"].render(TITLE_TEXT, True, PRIMARY)
    screen.blit(title, title.get_rect(center=(sw // 2, sh // 2 - 80)))
    tagline = ui["tagline_font"].render(TAGLINE_TEXT, True, GRAY)
    screen.blit(tagline, tagline.get_rect(center=(sw // 2, sh // 2 - 10)))
    ui["start"].draw(screen)


def build_play_ui(screen_size: Tuple[int, int], controller: GameController, toasts: ToastManager) -> Dict[str, Any]:
    """Create header, toolbar and dialog widgets wired to the controller."""
    rects = compute_layout(screen_size)
    footer = rects["footer"]
    cy = footer.centery

    palette = ColorPalette((footer.left, cy - 12), on_select=controller.set_color)
    palette.selected = controller.color
    slider_left = palette.rect.right + 40
    slider = WidthSlider(pygame.Rect(slider_left, cy - 10, 200, 20), value=controller.line_width, on_change=controller.set_line_width)

    def _on_download() -> None:
        try:
            path = controller.download(download_dir())
        except OSError as exc:
            logger.error("Download failed: %s", exc)
            toasts.error("Error", "Could not save the doodle.")
            return
        toasts.show("Saved", path.name)

    bw, bh, gap = 110, 40, 10
    x = footer.right
    buttons: Dict[str, Button] = {}
    for key, text, cb, color in (
        ("new_game", "New Game", controller.start, PRIMARY),
        ("submit", "Submit", controller.submit, (34, 197, 94)),
        ("download", "Download", _on_download, (100, 116, 139)),
        ("clear", "Clear", controller.clear_canvas, DESTRUCTIVE),
    ):
        x -= bw
        buttons[key] = Button(pygame.Rect(x, cy - bh // 2, bw, bh), text, bg_color=color, font_size=20, on_click=cb)
        x -= gap

    return {
        "hud": HudRenderer(rects["header"]),
        "palette": palette,
        "slider": slider,
        "buttons": buttons,
        "dialog": ResultDialog(screen_size, on_try_again=controller.start),
    }


def sync_button_states(ui: Dict[str, Any], controller: GameController) -> None:
    """Clear and Submit only work while a round is running."""
    playing = controller.state is GameState.PLAYING
    ui["buttons"]["clear"].disabled = not playing
    ui["buttons"]["submit"].disabled = not playing


def dispatch_play_event(event: pygame.event.Event, ui: Dict[str, Any], controller: GameController) -> None:
    """Route one event: the open dialog is modal, otherwise widgets then canvas."""
    if controller.is_result_open:
        ui["dialog"].handle_event(event, controller.is_loading)
        return
    sync_button_states(ui, controller)
    for button in ui["buttons"].values():
        if button.handle_event(event):
            return
    if ui["palette"].handle_event(event) or ui["slider"].handle_event(event):
        return
    controller.canvas.handle_event(event)


def draw_play(screen: pygame.Surface, ui: Dict[str, Any], controller: GameController) -> None:
    sync_button_states(ui, controller)
    ui["hud"].render(screen, controller.prompt, controller.time_left, controller.progress)
    controller.canvas.render(screen)
    ui["palette"].draw(screen)
    ui["slider"].draw(screen)
    for button in ui["buttons"].values():
        button.draw(screen)
    if controller.is_result_open:
        is_scribble = controller.ai_result.is_scribble if controller.ai_result else None
        ui["dialog"].render(
            screen,
            controller.result_title,
            controller.result_description,
            controller.is_loading,
            is_scribble,
        )


def main() -> None:
    """Start the Pygame client and run the main loop."""
    logger.info("%s", "=" * 50)
    logger.info("Doodle Dash starting...")
    logger.info("%s", "=" * 50)

    env_path = resolve_env_path()
    if env_path:
        load_dotenv(env_path)
        logger.info("Loaded environment from %s", env_path)
    try:
        pygame.init()
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)

        toasts = ToastManager()
        rects = compute_layout(screen.get_size())
        canvas = DoodleCanvas(rects["canvas"], pixel_ratio=detect_pixel_ratio(screen))
        controller = GameController(canvas, DoodleQualityChecker(), notify=toasts.error)
        idle_ui = build_idle_ui(screen.get_size(), controller.start)
        play_ui = build_play_ui(screen.get_size(), controller, toasts)

        clock = pygame.time.Clock()
        running = True
        while running:
            dt_ms = clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                    running = False
                    break
                if controller.state is GameState.IDLE:
                    idle_ui["start"].handle_event(event)
                else:
                    dispatch_play_event(event, play_ui, controller)

            controller.update(dt_ms)
            controller.poll()

            screen.fill((250, 250, 250))
            if controller.state is GameState.IDLE:
                draw_idle(screen, idle_ui)
            else:
                draw_play(screen, play_ui, controller)
            toasts.draw(screen)
            pygame.display.flip()
    except Exception as exc:
        logger.error("Client error: %s", exc, exc_info=True)
    finally:
        pygame.quit()
        logger.info("Doodle Dash closed")


if __name__ == "__main__":
    main()

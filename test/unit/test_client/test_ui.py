"""
Tests for the brush controls, buttons, toasts and layout helpers.
"""

import pygame

from doodle_dash.client.main import compute_layout
from doodle_dash.client.ui import Button, ColorPalette, ToastManager, WidthSlider, load_font
from doodle_dash.client.ui.hud import wrap_text
from doodle_dash.shared.constants import COLORS, WINDOW_HEIGHT, WINDOW_WIDTH


def click(pos):
    return [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1),
        pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1),
    ]


def test_palette_click_selects_color():
    picked = []
    palette = ColorPalette((0, 0), on_select=picked.append)
    target = palette.swatches[4]
    assert palette.handle_event(click(target.center)[0])
    assert palette.selected == COLORS[4]
    assert picked == [COLORS[4]]


def test_palette_click_outside_ignored():
    palette = ColorPalette((0, 0))
    assert not palette.handle_event(click((999, 999))[0])
    assert palette.selected == COLORS[0]


def test_slider_maps_position_to_width():
    values = []
    slider = WidthSlider(pygame.Rect(100, 0, 190, 20), on_change=values.append)
    assert slider.value_at(100) == 1
    assert slider.value_at(290) == 20
    assert slider.value_at(0) == 1
    assert slider.value_at(1000) == 20
    slider.handle_event(click((200, 10))[0])
    assert slider.value == 11
    assert slider.dragging
    slider.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(1000, 10), rel=(0, 0), buttons=(1, 0, 0)))
    assert slider.value == 20
    slider.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(100, 10), rel=(0, 0), buttons=(1, 0, 0)))
    assert slider.value == 1
    assert values == [11, 20, 1]
    slider.handle_event(click((100, 10))[1])
    assert not slider.dragging


def test_button_fires_on_release_inside():
    hits = []
    button = Button(pygame.Rect(0, 0, 100, 40), "Go", on_click=lambda: hits.append(1))
    down, up = click((50, 20))
    button.handle_event(down)
    assert button.handle_event(up)
    assert hits == [1]


def test_disabled_button_does_not_fire():
    hits = []
    button = Button(pygame.Rect(0, 0, 100, 40), "Go", on_click=lambda: hits.append(1))
    button.disabled = True
    for event in click((50, 20)):
        button.handle_event(event)
    assert hits == []


def test_failing_callback_is_contained():
    def boom():
        raise RuntimeError("bad handler")

    button = Button(pygame.Rect(0, 0, 100, 40), "Go", on_click=boom)
    button.click()


def test_toasts_expire():
    now = [100.0]
    toasts = ToastManager(duration=2.0, clock=lambda: now[0])
    toasts.error("Error", "Could not check doodle quality.")
    [toast] = toasts.active()
    assert toast.destructive
    now[0] = 102.5
    assert toasts.active() == []


def test_wrap_text_fits_width():
    font = load_font(20)
    text = "Our AI art critic is examining your work. Please wait a moment."
    lines = wrap_text(text, font, 200)
    assert len(lines) > 1
    assert " ".join(lines) == text
    assert all(font.size(line)[0] <= 200 or " " not in line for line in lines)


def test_layout_canvas_is_16_by_9():
    rects = compute_layout((WINDOW_WIDTH, WINDOW_HEIGHT))
    canvas = rects["canvas"]
    assert abs(canvas.width * 9 - canvas.height * 16) < 16
    assert rects["header"].bottom <= canvas.top
    assert canvas.bottom <= rects["footer"].top
    assert rects["footer"].bottom <= WINDOW_HEIGHT

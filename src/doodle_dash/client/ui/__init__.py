"""
用户界面模块

Pygame widgets for the Doodle Dash client:
- DoodleCanvas: raster drawing surface (input translation + export/download)
- ColorPalette / WidthSlider: brush controls
- HudRenderer / ResultDialog: header with countdown and the verdict dialog
- ToastManager: transient notifications
- Button: clickable rounded button

Widgets only render and report input through callbacks; game state lives in
`doodle_dash.client.game.GameController`.
"""

from .button import Button, load_font
from .canvas import DoodleCanvas, sanitize_filename
from .hud import HudRenderer, ResultDialog
from .toast import ToastManager
from .toolbar import ColorPalette, WidthSlider

__all__ = [
    "Button",
    "load_font",
    "DoodleCanvas",
    "sanitize_filename",
    "HudRenderer",
    "ResultDialog",
    "ToastManager",
    "ColorPalette",
    "WidthSlider",
]

"""
客户端模块

Pygame client for Doodle Dash.

模块组成：
- game: GameController state machine (prompt, countdown, submission)
- ui: canvas and widgets (palette, slider, HUD, result dialog, toasts)
- worker: background runner for the quality-check call

入口提示：
- run `doodle-dash` (or `python -m doodle_dash.client.main`) to start the client
"""

from . import game, ui, worker

__all__ = ["game", "ui", "worker"]

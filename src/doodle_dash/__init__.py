"""
Doodle Dash

A timed sketch challenge built with Pygame: draw the prompt before the clock
runs out and an AI art critic tells you whether it is a doodle or a scribble.
"""

__version__ = "0.1.0"
__author__ = "Doodle Dash Team"
__license__ = "MIT"

# 导出主要组件
from . import ai, client, shared

__all__ = ["ai", "client", "shared", "__version__"]

"""
共享模块

Code shared by the client and the quality check:
- constants: window size, palette, line widths, game duration, UI strings
- prompts: the fixed list of drawing prompts
"""

from . import constants, prompts

__all__ = ["constants", "prompts"]

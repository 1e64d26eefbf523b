"""
AI 模块

The doodle quality check: one structured chat-completions call that decides
whether a doodle is just scribbles and returns feedback for the player.
"""

from .quality_check import (
    DoodleQualityChecker,
    DoodleQualityCheckInput,
    DoodleQualityCheckOutput,
    QualityCheckError,
    doodle_quality_check,
)

__all__ = [
    "DoodleQualityChecker",
    "DoodleQualityCheckInput",
    "DoodleQualityCheckOutput",
    "QualityCheckError",
    "doodle_quality_check",
]

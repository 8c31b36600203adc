"""
SpamGuard core module.

Contains the checker abstraction and the pipeline that combines checkers.
"""

from spamguard.core.checker import (
    Checker,
    CheckerParams,
    CheckDecision,
    CheckResult,
    ModerationResult,
    CheckerError,
)
from spamguard.core.pipeline import ModerationPipeline

__all__ = [
    "Checker",
    "CheckerParams",
    "CheckDecision",
    "CheckResult",
    "ModerationResult",
    "CheckerError",
    "ModerationPipeline",
]

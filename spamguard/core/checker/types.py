"""
Core types for the checker system.

Defines the enums and dataclasses passed between checkers and the
moderation pipeline.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class CheckDecision(Enum):
    """Outcome of a single checker invocation."""

    PASS = "pass"        # Checker allowed the comment
    BLOCK = "block"      # Checker rejected the comment
    ABSTAIN = "abstain"  # Checker could not reach a decision


@dataclass(frozen=True)
class CheckerParams:
    """
    The submitted comment, as seen by checkers.

    Frozen: checkers read these fields but never modify them.
    """

    user_name: str
    user_email: str
    content: str
    user_url: str = ""
    user_ip: str = ""
    user_agent: str = ""
    referer: str = ""
    page_key: str = ""


@dataclass
class CheckResult:
    """Result recorded by the pipeline for one checker."""

    decision: CheckDecision
    checker_name: str
    message: Optional[str] = None


@dataclass
class ModerationResult:
    """Combined result of running every checker in a pipeline."""

    allowed: bool
    results: List[CheckResult] = field(default_factory=list)
    blocked_by: Optional[str] = None

    @property
    def abstained(self) -> List[str]:
        """Names of checkers that could not reach a decision."""
        return [
            r.checker_name for r in self.results if r.decision == CheckDecision.ABSTAIN
        ]

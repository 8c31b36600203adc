"""
Checker module for SpamGuard.

Provides the Checker abstraction shared by every anti-spam strategy,
along with the types and errors passed across it.
"""

from .checker import Checker
from .errors import (
    CheckerConfigError,
    CheckerError,
    EmptyResponseError,
    RequestBuildError,
    ResponseDecodeError,
    SpamGuardError,
    TransportError,
    UpstreamError,
)
from .types import (
    CheckDecision,
    CheckerParams,
    CheckResult,
    ModerationResult,
)

__all__ = [
    # Types
    "CheckDecision",
    "CheckerParams",
    "CheckResult",
    "ModerationResult",
    # Errors
    "SpamGuardError",
    "CheckerError",
    "CheckerConfigError",
    "RequestBuildError",
    "TransportError",
    "ResponseDecodeError",
    "UpstreamError",
    "EmptyResponseError",
    # Classes
    "Checker",
]

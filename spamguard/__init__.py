"""
SpamGuard - Pluggable anti-spam checks for comment systems.

Runs submitted comments through a pipeline of checkers. Built-in checkers:
- ai: Asks a hosted language model to PASS or BLOCK the comment
- keywords: Blocks comments containing configured keywords

Quick Start:
    Configure via environment variables:
    ```bash
    export SPAMGUARD_AI__ENABLED=true
    export OPENAI_API_KEY=sk-...
    spamguard check --name alice --email alice@example.com --content "Nice post!"
    ```

    Or programmatically:
    ```python
    from spamguard import AIChecker, CheckerParams

    checker = AIChecker(api_key="sk-...", model="gpt-4o-mini")
    passed = await checker.check(
        CheckerParams(user_name="alice", user_email="alice@example.com",
                      content="Nice post!")
    )
    ```

Using the pipeline:
    ```python
    from spamguard import ModerationPipeline, SpamGuardSettings

    pipeline = ModerationPipeline.from_settings(SpamGuardSettings())
    result = await pipeline.check(params)

    if not result.allowed:
        print("Comment rejected by:", result.blocked_by)
    ```
"""

__version__ = "0.1.0"

# Core configuration
from spamguard.config.settings import SpamGuardSettings

# Checker abstraction and pipeline
from spamguard.core import (
    Checker,
    CheckerParams,
    CheckDecision,
    CheckResult,
    ModerationResult,
    CheckerError,
    ModerationPipeline,
)

# Built-in checkers
from spamguard.checkers import (
    AIChecker,
    KeywordsChecker,
    CheckerRegistry,
    register_checker,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "SpamGuardSettings",
    # Core
    "Checker",
    "CheckerParams",
    "CheckDecision",
    "CheckResult",
    "ModerationResult",
    "CheckerError",
    "ModerationPipeline",
    # Checkers
    "AIChecker",
    "KeywordsChecker",
    "CheckerRegistry",
    "register_checker",
]

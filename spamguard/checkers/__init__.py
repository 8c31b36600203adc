"""
Checker implementations for SpamGuard.

Importing this package registers the built-in checkers:
- ai: Hosted language model verdict (PASS / BLOCK)
- keywords: Keyword list match on comment content

Custom checkers become available once decorated with @register_checker.
"""

from spamguard.checkers.registry import CheckerRegistry, register_checker

# Import built-in checkers to trigger registration
from spamguard.checkers.keywords import KeywordsChecker
from spamguard.checkers.ai import AIChecker

__all__ = [
    "CheckerRegistry",
    "register_checker",
    "KeywordsChecker",
    "AIChecker",
]

"""
AI checker package.

Provides a checker that asks a hosted language model (any
OpenAI-compatible chat completion endpoint) to PASS or BLOCK a comment.

Usage:
    from spamguard.checkers.ai import AIChecker

    checker = AIChecker(api_key="sk-...", model="gpt-4o-mini")
    passed = await checker.check(params)
"""

# Import checker to trigger @register_checker("ai")
from spamguard.checkers.ai.checker import AIChecker

from spamguard.checkers.ai.client import (
    AI_REQUEST_TIMEOUT,
    DEFAULT_AI_HOST,
    ChatCompletionClient,
    normalize_host,
)
from spamguard.checkers.ai.parser import parse_verdict
from spamguard.checkers.ai.prompts import build_moderation_prompt

__all__ = [
    "AIChecker",
    "ChatCompletionClient",
    "AI_REQUEST_TIMEOUT",
    "DEFAULT_AI_HOST",
    "normalize_host",
    "parse_verdict",
    "build_moderation_prompt",
]

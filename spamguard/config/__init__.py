"""Configuration management for SpamGuard."""

from spamguard.config.settings import (
    SpamGuardSettings,
    AICheckerConfig,
    KeywordsConfig,
)

__all__ = [
    "SpamGuardSettings",
    "AICheckerConfig",
    "KeywordsConfig",
]

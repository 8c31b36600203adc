"""
Verdict parsing for AI moderation replies.

Matching is a loose substring test, not an exact match: models often wrap
the token in extra words ("I think this should be BLOCKED"). Replies that
contain neither token fail open and let the comment through.
"""

import logging

logger = logging.getLogger(__name__)

PASS_TOKEN = "PASS"
BLOCK_TOKEN = "BLOCK"


def parse_verdict(response: str) -> bool:
    """Map a raw model reply to a verdict (True = pass, False = block)."""
    normalized = response.strip().upper()

    if PASS_TOKEN in normalized:
        return True

    if BLOCK_TOKEN in normalized:
        return False

    logger.warning(f"[AI] Unclear response, defaulting to pass: {normalized}")
    return True

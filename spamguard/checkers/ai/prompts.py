"""
Deterministic moderation prompt for the AI checker.

The prompt is NOT LLM-generated. It uses str.format() with the comment
fields, so the same comment always produces a byte-identical prompt.

The author name, email and content are interpolated verbatim. This is a
trust boundary: a comment body can attempt prompt injection against the
instructions above it. Callers who want to harden it can fence the user
fields in delimiters and instruct the model to treat fenced text as data.
"""

from spamguard.core.checker import CheckerParams

# Categories that should get a comment blocked, in prompt order
BLOCK_CATEGORIES = (
    "Spam or advertising",
    "Hate speech or discrimination",
    "Harassment or personal attacks",
    "Pornographic or sexually explicit content",
    "Violence or threats",
    "Illegal content",
    "Meaningless or gibberish text",
    "Excessive profanity",
)

MODERATION_PROMPT_TEMPLATE = (
    "You are a content moderation assistant. Your task is to determine if the "
    "following comment should be approved or blocked.\n"
    "\n"
    "A comment should be BLOCKED if it contains:\n"
    "{categories}\n"
    "\n"
    "Comment Information:\n"
    "- Author: {user_name}\n"
    "- Email: {user_email}\n"
    "- Content: {content}\n"
    "\n"
    'Respond with ONLY one word: "PASS" if the comment should be approved, '
    'or "BLOCK" if it should be blocked.'
)


def build_moderation_prompt(params: CheckerParams) -> str:
    """Build the moderation prompt for one comment."""
    categories = "\n".join(f"- {c}" for c in BLOCK_CATEGORIES)
    return MODERATION_PROMPT_TEMPLATE.format(
        categories=categories,
        user_name=params.user_name,
        user_email=params.user_email,
        content=params.content,
    )

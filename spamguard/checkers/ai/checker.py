"""
AI-backed checker.

Asks a hosted language model whether a comment should be accepted,
using an OpenAI-compatible chat completion endpoint.
"""

import logging
from typing import Optional

import httpx

from spamguard.checkers.registry import register_checker
from spamguard.core.checker import Checker, CheckerParams

from .client import AI_REQUEST_TIMEOUT, ChatCompletionClient, normalize_host
from .parser import parse_verdict
from .prompts import build_moderation_prompt

logger = logging.getLogger(__name__)


@register_checker("ai")
class AIChecker(Checker):
    """
    Checker that delegates the decision to a remote language model.

    Holds no session state after construction, so a single instance can
    serve concurrent ``check`` calls. Network and protocol failures are
    raised as ``CheckerError`` (abstention); a reply the parser cannot
    classify passes the comment.

    Example:
        checker = AIChecker(api_key="sk-...", model="gpt-4o-mini")
        passed = await checker.check(params)
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        host: Optional[str] = None,
        *,
        timeout: float = AI_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            api_key: Bearer token for the endpoint
            model: Model identifier sent with every request
            host: Endpoint host or base URL; defaults to the OpenAI API
            timeout: Overall request ceiling in seconds
            transport: Optional httpx transport (used by tests)
        """
        self._client = ChatCompletionClient(
            api_key=api_key,
            model=model,
            host=normalize_host(host),
            timeout=timeout,
            transport=transport,
        )

    @property
    def name(self) -> str:
        return "ai"

    @property
    def model(self) -> str:
        return self._client.model

    @property
    def host(self) -> str:
        return self._client.host

    @property
    def api_url(self) -> str:
        return self._client.api_url

    async def check(self, params: CheckerParams) -> bool:
        prompt = build_moderation_prompt(params)

        response = await self._client.complete(prompt)

        logger.debug(f"[AI] Moderation response: {response}")

        return parse_verdict(response)

    def __repr__(self) -> str:
        return f"<AIChecker model={self.model!r} host={self.host!r}>"

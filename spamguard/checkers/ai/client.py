"""
Chat completion client for the AI checker.

Provides a thin async wrapper around httpx for one-shot calls to an
OpenAI-compatible ``/v1/chat/completions`` endpoint. Every failure is
raised as a distinct ``CheckerError`` subclass; nothing is retried.
"""

import asyncio
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from spamguard.core.checker import (
    EmptyResponseError,
    RequestBuildError,
    ResponseDecodeError,
    TransportError,
    UpstreamError,
)

from .models import ChatCompletionRequest, ChatCompletionResponse, ChatMessage

logger = logging.getLogger(__name__)

DEFAULT_AI_HOST = "api.openai.com"

# Overall ceiling (seconds) for one request, connect through body read
AI_REQUEST_TIMEOUT = 30.0

CHAT_COMPLETIONS_PATH = "/v1/chat/completions"


def normalize_host(host: Optional[str]) -> str:
    """
    Reduce a configured host to a bare authority.

    Accepts either a hostname or a full base URL:
    ``"https://foo.bar/"``, ``"http://foo.bar"`` and ``"foo.bar"`` all
    become ``"foo.bar"``. Empty input falls back to DEFAULT_AI_HOST.

    Only one trailing slash is removed; ``"foo.bar//"`` keeps the second.
    """
    if not host:
        host = DEFAULT_AI_HOST
    if host.endswith("/"):
        host = host[:-1]
    for scheme in ("https://", "http://"):
        if host.startswith(scheme):
            host = host[len(scheme):]
            break
    return host


class ChatCompletionClient:
    """Async client for a single chat completion round-trip.

    Always speaks TLS, regardless of the scheme the host was configured
    with. The API key is sent as a bearer token and never logged.

    Example:
        client = ChatCompletionClient(api_key="sk-...", model="gpt-4o-mini",
                                      host="api.openai.com")
        text = await client.complete("Say PASS")
    """

    def __init__(
        self,
        api_key: str,
        model: str,
        host: str,
        timeout: float = AI_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._api_key = api_key
        self.model = model
        self.host = host
        self.timeout = timeout
        self._transport = transport

    @property
    def api_url(self) -> str:
        return f"https://{self.host}{CHAT_COMPLETIONS_PATH}"

    async def complete(self, prompt: str) -> str:
        """Send ``prompt`` as a single user message and return the reply text.

        Raises:
            RequestBuildError: If the request could not be serialized or built
            TransportError: On connection, TLS, timeout or body read failure
            ResponseDecodeError: If the response body is not a valid envelope
            UpstreamError: If the service returned an error payload
            EmptyResponseError: If the service returned no choices
        """
        try:
            return await asyncio.wait_for(self._complete(prompt), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise TransportError(
                f"failed to call AI API: timed out after {self.timeout}s"
            ) from e

    async def _complete(self, prompt: str) -> str:
        body = self._serialize(prompt)

        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                request = client.build_request(
                    "POST",
                    self.api_url,
                    content=body,
                    headers={
                        "Content-Type": "application/json",
                        "Authorization": f"Bearer {self._api_key}",
                    },
                )
            except (httpx.InvalidURL, UnicodeEncodeError) as e:
                # Header values must be ASCII, so a non-ASCII key fails here
                raise RequestBuildError(f"failed to create request: {e}") from e

            try:
                response = await client.send(request, stream=True)
            except httpx.HTTPError as e:
                raise TransportError(f"failed to call AI API: {e}") from e

            try:
                raw = await response.aread()
            except httpx.HTTPError as e:
                raise TransportError(f"failed to read response: {e}") from e
            finally:
                await response.aclose()

        logger.debug(
            f"[AI] {self.api_url} responded {response.status_code} ({len(raw)} bytes)"
        )
        return self._extract_content(raw)

    def _serialize(self, prompt: str) -> bytes:
        try:
            payload = ChatCompletionRequest(
                model=self.model,
                messages=[ChatMessage(role="user", content=prompt)],
            )
            return payload.model_dump_json().encode("utf-8")
        except (ValueError, TypeError) as e:
            raise RequestBuildError(f"failed to marshal request: {e}") from e

    def _extract_content(self, raw: bytes) -> str:
        """Decode the envelope and return the first choice's text."""
        try:
            envelope = ChatCompletionResponse.model_validate_json(raw)
        except ValidationError as e:
            raise ResponseDecodeError(f"failed to unmarshal response: {e}") from e

        if envelope.error is not None:
            raise UpstreamError(envelope.error.message)

        if not envelope.choices:
            raise EmptyResponseError("no response from AI API")

        return envelope.choices[0].message.content or ""

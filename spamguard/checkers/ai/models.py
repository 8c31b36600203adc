"""
Wire models for the chat completion endpoint.

Only the fields the AI checker reads are modelled; everything else in
the upstream payload is ignored.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ChatMessage(BaseModel):
    """A single chat message."""

    role: str = "user"
    content: Optional[str] = None


class ChatCompletionRequest(BaseModel):
    """Request body for POST /v1/chat/completions."""

    model: str
    messages: List[ChatMessage]


class Choice(BaseModel):
    """One candidate completion."""

    message: ChatMessage = Field(default_factory=ChatMessage)


class ErrorPayload(BaseModel):
    """Error body reported by the upstream service."""

    message: str = ""


class ChatCompletionResponse(BaseModel):
    """
    Response envelope.

    Either ``choices`` is populated (success) or ``error`` is set.
    """

    choices: List[Choice] = Field(default_factory=list)
    error: Optional[ErrorPayload] = None

"""Schemas for the chat, history and reset endpoints."""

from typing import Literal

from pydantic import BaseModel, Field


class Message(BaseModel):
    """One transcript entry. Roles form a closed set."""

    role: Literal["system", "user", "bot"]
    content: str


class ChatRequest(BaseModel):
    """Request body for POST /chat. Session id travels in the x-session-id header or sessionId query."""

    message: str | None = Field(None, description="User message; required and non-empty.")


class ChatReply(BaseModel):
    content: str = Field(..., description="AI reply, or a fallback text when the provider failed.")
    sessionId: str


class ChatResponse(BaseModel):
    """Response for POST /chat."""

    reply: ChatReply

    model_config = {
        "json_schema_extra": {
            "examples": [{"reply": {"content": "Hello! How can I help?", "sessionId": "2f1c0a9e-4b7d-4c1e-9a53-6f0d2b8e7c11"}}]
        }
    }


class HistoryResponse(BaseModel):
    """Response for GET /history."""

    sessionId: str
    history: list[Message]


class ResetResponse(BaseModel):
    """Response for POST /reset."""

    message: str
    sessionId: str

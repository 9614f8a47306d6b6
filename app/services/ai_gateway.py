"""
AI gateway: send one user message to Google Gemini generateContent and extract the reply.

call_gemini returns a GatewayResult (text or error kind + message) and never raises.
get_ai_response turns that result into the string shown to the user. No conversation
history is forwarded: every call carries only the current message.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from app.core.config import (
    GEMINI_API_BASE,
    GEMINI_API_KEY,
    GEMINI_API_TIMEOUT,
    GEMINI_MODEL,
    NO_RESPONSE_REPLY,
    UNAVAILABLE_REPLY,
)
from app.core.errors import GatewayErrorKind

logger = logging.getLogger(__name__)


@dataclass
class GatewayResult:
    """Outcome of one provider call: text on success, error kind and detail otherwise."""

    text: str | None = None
    error: GatewayErrorKind | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def gemini_url() -> str:
    return f"{GEMINI_API_BASE}/models/{GEMINI_MODEL}:generateContent"


def build_payload(message: str) -> dict[str, Any]:
    """Single content block with a single text part."""
    return {"contents": [{"parts": [{"text": message}]}]}


def extract_reply(data: Any) -> GatewayResult:
    """Read candidates[0].content.parts[0].text from a generateContent response body."""
    if not isinstance(data, dict):
        return GatewayResult(error=GatewayErrorKind.MALFORMED, detail=f"unexpected body: {data!r}"[:500])
    candidates = data.get("candidates")
    if not candidates:
        return GatewayResult(error=GatewayErrorKind.NO_CANDIDATES, detail=f"unexpected body: {data!r}"[:500])
    first = candidates[0] if isinstance(candidates, list) else None
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return GatewayResult(error=GatewayErrorKind.MALFORMED, detail=f"no content parts: {first!r}"[:500])
    part = parts[0] if parts else None
    text = part.get("text") if isinstance(part, dict) else None
    if not text:
        return GatewayResult(error=GatewayErrorKind.EMPTY, detail="first candidate has no text")
    if not isinstance(text, str):
        return GatewayResult(error=GatewayErrorKind.MALFORMED, detail=f"non-text part: {part!r}"[:500])
    return GatewayResult(text=text)


def call_gemini(message: str, client: httpx.Client | None = None) -> GatewayResult:
    """
    POST one message to Gemini and classify the outcome.
    Uses the given client (tests pass one with a mock transport) or a short-lived one.
    """
    logger.info("[ai_gateway] IN  message_len=%d model=%s", len(message), GEMINI_MODEL)
    payload = build_payload(message)
    headers = {"Content-Type": "application/json"}
    params = {"key": GEMINI_API_KEY}
    try:
        if client is None:
            with httpx.Client(timeout=GEMINI_API_TIMEOUT) as own_client:
                response = own_client.post(gemini_url(), json=payload, headers=headers, params=params)
        else:
            response = client.post(gemini_url(), json=payload, headers=headers, params=params)
    except httpx.RequestError as e:
        return GatewayResult(error=GatewayErrorKind.TRANSPORT, detail=f"{type(e).__name__}: {e}")
    if response.is_error:
        return GatewayResult(
            error=GatewayErrorKind.HTTP_STATUS,
            detail=f"status {response.status_code}: {response.text[:500]}",
        )
    try:
        data = response.json()
    except ValueError:
        return GatewayResult(error=GatewayErrorKind.MALFORMED, detail=f"non-JSON body: {response.text[:500]}")
    result = extract_reply(data)
    if result.ok:
        logger.info("[ai_gateway] OUT response_len=%d", len(result.text or ""))
    return result


def get_ai_response(message: str, client: httpx.Client | None = None) -> str:
    """Return the AI reply, or a fallback string. Never raises for provider-side failures."""
    result = call_gemini(message, client=client)
    if result.ok:
        return result.text or NO_RESPONSE_REPLY
    if result.error is GatewayErrorKind.EMPTY:
        logger.warning("[ai_gateway] empty reply: %s", result.detail)
        return NO_RESPONSE_REPLY
    logger.error("[ai_gateway] API error (%s): %s", result.error.value, result.detail)
    return UNAVAILABLE_REPLY

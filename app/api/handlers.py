"""
API handlers: call the gateway and the session store, map failures to HTTP.

Responsibility: Bridge HTTP types and services. Lives in the API layer so the
gateway stays free of FastAPI/HTTP types.
"""

import logging

from app.core.errors import ApiError
from app.core.session_store import SessionStore
from app.schemas.chat import ChatReply, ChatResponse
from app.services.ai_gateway import get_ai_response

logger = logging.getLogger(__name__)


def handle_chat(message: str, session_id: str, store: SessionStore) -> ChatResponse:
    """
    Append the user message, ask the AI, append the bot reply. Provider failures come back
    as fallback text; anything else unexpected becomes a 500.
    """
    logger.info("[api:chat] IN  session_id=%s message_len=%d", session_id[:16], len(message))
    store.append(session_id, "user", message)
    try:
        reply = get_ai_response(message)
        store.append(session_id, "bot", reply)
    except Exception as e:
        logger.exception("Error during chat")
        raise ApiError(500, "Internal server error.") from e
    logger.info("[api:chat] OUT reply_len=%d", len(reply))
    return ChatResponse(reply=ChatReply(content=reply, sessionId=session_id))

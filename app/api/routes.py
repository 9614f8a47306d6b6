"""
API route aggregator: register endpoints; no logic, only delegate to handlers and the store.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from app.api.handlers import handle_chat
from app.api.session import resolve_session_id
from app.core.config import LIVENESS_TEXT
from app.core.errors import ApiError
from app.core.session_store import SessionStore, get_session_store
from app.schemas.chat import ChatRequest, ChatResponse, HistoryResponse, ResetResponse

logger = logging.getLogger(__name__)
router = APIRouter()


# --- System ---

@router.get("/", tags=["system"], response_class=PlainTextResponse)
def root() -> str:
    return LIVENESS_TEXT


# --- Chat ---

@router.post(
    "/chat",
    response_model=ChatResponse,
    tags=["chat"],
    summary="Send a message to the AI",
    description="Session id via x-session-id header or sessionId query; generated when absent. 400 if message is missing.",
)
def post_chat(
    request: Request,
    body: ChatRequest | None = None,
    store: SessionStore = Depends(get_session_store),
) -> ChatResponse:
    message = body.message if body else None
    if not message:
        raise ApiError(400, "Message is required.")
    session_id = resolve_session_id(request, store)
    return handle_chat(message, session_id, store)


@router.get("/history", response_model=HistoryResponse, tags=["chat"], summary="Conversation history for the session")
def get_history(request: Request, store: SessionStore = Depends(get_session_store)) -> HistoryResponse:
    session_id = resolve_session_id(request, store)
    return HistoryResponse(sessionId=session_id, history=store.get_history(session_id))


@router.post("/reset", response_model=ResetResponse, tags=["chat"], summary="Reset the session to the system message")
def post_reset(request: Request, store: SessionStore = Depends(get_session_store)) -> ResetResponse:
    session_id = resolve_session_id(request, store)
    store.replace(session_id)
    logger.info("[api:reset] session_id=%s", session_id[:16])
    return ResetResponse(message="Conversation has been reset.", sessionId=session_id)

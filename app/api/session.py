"""
Session resolution: pick the session id for a request and make sure the session exists.
"""

import uuid

from fastapi import Request

from app.core.session_store import SessionStore

SESSION_HEADER = "x-session-id"
SESSION_QUERY_PARAM = "sessionId"


def resolve_session_id(request: Request, store: SessionStore) -> str:
    """
    Header first, then query parameter, else a fresh UUID4. Client-supplied ids are
    trusted as-is (no ownership check). Never fails; may create the session.
    """
    session_id = request.headers.get(SESSION_HEADER) or request.query_params.get(SESSION_QUERY_PARAM)
    if not session_id:
        session_id = str(uuid.uuid4())
    store.get_or_create(session_id)
    return session_id

"""
In-memory chat session store. Keyed by session_id; lives for the process lifetime only.
"""

import logging
import threading

from app.core.config import SYSTEM_PROMPT

logger = logging.getLogger(__name__)


def _system_message() -> dict[str, str]:
    return {"role": "system", "content": SYSTEM_PROMPT}


class SessionStore:
    """Thread-safe mapping of session_id -> list of {"role", "content"} messages."""

    def __init__(self) -> None:
        self._sessions: dict[str, list[dict[str, str]]] = {}
        self._lock = threading.Lock()

    def get_or_create(self, session_id: str) -> bool:
        """Ensure the session exists, seeded with the system message. Returns True if it was created."""
        with self._lock:
            if session_id in self._sessions:
                return False
            self._sessions[session_id] = [_system_message()]
        logger.info("[session_store:get_or_create] Creating new session for ID: %s", session_id[:16])
        return True

    def append(self, session_id: str, role: str, content: str) -> None:
        """Append one message to the session's history (creating the session if needed)."""
        with self._lock:
            history = self._sessions.setdefault(session_id, [_system_message()])
            history.append({"role": role, "content": content})
        logger.info("[session_store:append] session_id=%s role=%s content_len=%d", session_id[:16], role, len(content))

    def replace(self, session_id: str) -> None:
        """Replace the session's history with a fresh system message only."""
        with self._lock:
            self._sessions[session_id] = [_system_message()]
        logger.info("[session_store:replace] session_id=%s", session_id[:16])

    def get_history(self, session_id: str) -> list[dict[str, str]]:
        """Return chat history for the session (copy so caller cannot mutate store)."""
        with self._lock:
            out = [dict(m) for m in self._sessions.get(session_id, [])]
        logger.info("[session_store:get_history] IN  session_id=%s OUT messages=%d", session_id[:16], len(out))
        return out


_store = SessionStore()


def get_session_store() -> SessionStore:
    """FastAPI dependency returning the process-wide store."""
    return _store

# evaluation/exceptions.py
"""Custom exceptions for interview session handling."""


class SessionError(Exception):
    """Base exception for session failures."""

    def __init__(self, message: str, session_id: str = "N/A"):
        self.message = message
        self.session_id = session_id
        super().__init__(f"[SessionID: {session_id}] {message}")


class SessionSealedError(SessionError):
    """Raised when frames or transcript are pushed after recording stopped."""
    pass

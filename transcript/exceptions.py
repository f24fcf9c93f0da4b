# transcript/exceptions.py
"""Custom exceptions for the proofreading service client."""


class ProofreadError(Exception):
    """Base exception for proofreading failures."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ProofreadRequestError(ProofreadError):
    """Raised when the sentence to proofread is empty or too long."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class ProofreadConfigurationError(ProofreadError):
    """Raised when the service credentials are not configured."""
    pass


class ProofreadServiceError(ProofreadError):
    """Raised on transport, HTTP, payload or explicit service errors."""
    pass

"""
Client for the Japanese proofreading (kousei) service.

Sends a JSON-RPC request and turns the response into Suggestion objects.
Every failure is raised as a ProofreadError subclass so callers can fall
back locally; raw upstream errors never leave this module.
"""

import re
import logging
from typing import Any, Dict, List, Optional, Sequence

import requests
from pydantic import ValidationError

from .constants import MAX_SENTENCE_CHARS
from .exceptions import (
    ProofreadConfigurationError,
    ProofreadRequestError,
    ProofreadServiceError,
)
from .models import Suggestion, parse_rule

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://jlp.yahooapis.jp/KouseiService/V2/kousei"
_CONTROL_CHARS = re.compile(r"[\x00-\x1F\x7F]")


def strip_control_chars(text: str) -> str:
    return _CONTROL_CHARS.sub("", text)


def sanitize_sentence(sentence: Optional[str], max_chars: int = MAX_SENTENCE_CHARS) -> str:
    """
    Remove control characters and enforce the length limit.

    Raises:
        ProofreadRequestError: if the sentence is empty or too long
    """
    if not sentence:
        raise ProofreadRequestError("Sentence to proofread is required.")
    cleaned = strip_control_chars(sentence)
    if not cleaned:
        raise ProofreadRequestError("Sentence to proofread is required.")
    if len(cleaned) > max_chars:
        raise ProofreadRequestError(
            f"Sentence is too long. Please limit it to {max_chars} characters."
        )
    return cleaned


def parse_suggestions(payload: Dict[str, Any]) -> List[Suggestion]:
    """
    Extract suggestions from a service response body.

    Raises:
        ProofreadServiceError: if the body carries an `error` field or is not an object
    """
    if not isinstance(payload, dict):
        raise ProofreadServiceError("Unexpected response from the proofreading service.")
    if payload.get("error"):
        raise ProofreadServiceError(f"Proofreading service returned an error: {payload['error']}")

    result = payload.get("result")
    if not isinstance(result, dict):
        return []
    raw_items = result.get("suggestions") or []

    suggestions: List[Suggestion] = []
    for item in raw_items:
        try:
            suggestions.append(Suggestion.model_validate(item))
        except ValidationError as e:
            logger.warning(f"Dropping malformed suggestion {item!r}: {e.error_count()} errors")
    return suggestions


class ProofreadClient:
    """Blocking client for the proofreading service (one call, no retry)."""

    def __init__(
        self,
        app_id: Optional[str],
        api_url: str = DEFAULT_API_URL,
        timeout: float = 10.0,
        max_chars: int = MAX_SENTENCE_CHARS,
        session: Optional[requests.Session] = None,
    ):
        self.app_id = app_id
        self.api_url = api_url
        self.timeout = timeout
        self.max_chars = max_chars
        self._http = session or requests.Session()

    def proofread(self, sentence: str, rules: Optional[Sequence[str]] = None) -> List[Suggestion]:
        """
        Ask the service for suggestions on `sentence`.

        Args:
            sentence: Text to proofread
            rules: Optional rule tags; only suggestions for these rules are kept

        Returns:
            Suggestions with offsets into the sanitized sentence

        Raises:
            ProofreadRequestError: empty or too long sentence
            ProofreadConfigurationError: no application id configured
            ProofreadServiceError: transport, HTTP or payload failure
        """
        if not self.app_id:
            raise ProofreadConfigurationError(
                "Proofreading app id is not configured. Set PRIVATE_YAHOO_APP_ID."
            )
        q = sanitize_sentence(sentence, self.max_chars)

        body = {
            "id": "1",
            "jsonrpc": "2.0",
            "method": "jlp.kouseiservice.kousei",
            "params": {"q": q},
        }
        headers = {
            "Content-Type": "application/json",
            "User-Agent": f"Yahoo AppID: {self.app_id}",
        }

        try:
            response = self._http.post(self.api_url, json=body, headers=headers, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Proofreading request failed: {e}")
            raise ProofreadServiceError("Failed to reach the proofreading service.") from e

        if not response.ok:
            logger.error(f"Proofreading service error: {response.status_code} {response.reason}: {response.text[:200]}")
            raise ProofreadServiceError(
                "An error occurred while communicating with the proofreading service."
            )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(f"Proofreading service returned invalid JSON: {e}")
            raise ProofreadServiceError("Invalid response from the proofreading service.") from e

        suggestions = parse_suggestions(payload)
        if rules:
            wanted = {parse_rule(r) for r in rules}
            suggestions = [s for s in suggestions if s.rule in wanted]
        logger.debug(f"Proofreading returned {len(suggestions)} suggestions")
        return suggestions

    def close(self) -> None:
        self._http.close()

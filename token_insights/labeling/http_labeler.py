"""HTTP text labeler backed by the Gemini generateContent endpoint."""

import json
import os
import socket
from collections.abc import Mapping
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

import structlog

from ..config.defaults import LabelerParams
from ..errors import CollaboratorUnavailableError
from .base import LabelKind, LabelRequest, TextLabeler, normalize_label

logger = structlog.get_logger(__name__)

ANALYSIS_WORDS = (
    "ascending, descending, random, sequential, clustered, sparse, balanced, unbalanced, "
    "simple, complex, ordered, chaotic, uniform, diverse, numeric, alphabetic, mixed, sorted, "
    "unsorted, positive, negative, even, odd, prime, composite, fibonacci, arithmetic, "
    "geometric, linear, repeating, unique, duplicate, stable, volatile, regular, irregular"
)

SENTIMENT_WORDS = (
    "positive, negative, neutral, optimistic, pessimistic, stable, volatile, growing, "
    "declining, strong, weak, balanced, imbalanced, clear, unclear, steady, turbulent, "
    "consistent, erratic, reliable, unreliable, robust, fragile, dynamic, static"
)

RECOMMENDATION_WORDS = (
    "optimize, simplify, expand, reduce, validate, restructure, normalize, standardize, "
    "clean, filter, sort, group, analyze, visualize, aggregate, summarize, investigate, "
    "explore, monitor, track, measure, evaluate, improve, balance, stabilize, merge, split"
)


def build_prompt(request: LabelRequest) -> str:
    """Render the one-word prompt for a label request."""
    summary = request.summary

    if request.kind is LabelKind.ANALYSIS:
        return (
            "Analyze this data and provide ONLY ONE WORD that best describes the overall "
            f"pattern or characteristic. Choose from: {ANALYSIS_WORDS}.\n"
            f"Numbers: {summary.get('numbers', [])}, Alphabets: {summary.get('alphabets', [])}"
        )

    if request.kind is LabelKind.SENTIMENT:
        return (
            "Based on this data analysis, provide ONLY ONE WORD describing the data sentiment "
            f"or trend. Choose from: {SENTIMENT_WORDS}.\n"
            f"- Numbers count: {len(summary.get('numbers', []))}\n"
            f"- Alphabets count: {len(summary.get('alphabets', []))}\n"
            f"- Has mathematical patterns: {'yes' if summary.get('has_math') else 'no'}\n"
            f"- File included: {'yes' if summary.get('file_valid') else 'no'}"
        )

    return (
        "Given this data analysis, provide ONLY ONE WORD as the top recommendation. "
        f"Choose from: {RECOMMENDATION_WORDS}.\n"
        f"- Data complexity: {summary.get('complexity', 'unknown')}\n"
        f"- Quality score: {summary.get('quality', 'unknown')}\n"
        f"- Pattern type: {summary.get('patterns', 'unknown')}"
    )


class HttpTextLabeler(TextLabeler):
    """Labels data summaries through a Gemini-compatible REST endpoint."""

    def __init__(self, params: LabelerParams, api_key: Optional[str], name: str = "gemini"):
        super().__init__(name)
        self.params = params
        self.api_key = api_key

    @classmethod
    def from_params(cls, params: LabelerParams,
                    environ: Optional[Mapping[str, str]] = None) -> "HttpTextLabeler":
        """Create a labeler reading the API key from the configured environment variable."""
        environ = os.environ if environ is None else environ
        return cls(params, environ.get(params.api_key_env) or None)

    @property
    def available(self) -> bool:
        return self.params.enabled and bool(self.api_key)

    @property
    def url(self) -> str:
        return f"{self.params.endpoint.rstrip('/')}/{quote(self.params.model)}:generateContent"

    def label(self, request: LabelRequest) -> str:
        """Request a one-word label over HTTP."""
        if not self.available:
            raise CollaboratorUnavailableError(
                f"{self.params.api_key_env} not configured",
                collaborator=self.name
            )

        reply = self._post({"contents": [{"parts": [{"text": build_prompt(request)}]}]})
        return normalize_label(self._extract_text(reply), request.kind)

    def _post(self, body: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON body and decode the JSON reply."""
        data = json.dumps(body).encode('utf-8')
        headers = {
            'Content-Type': 'application/json',
            'Content-Length': str(len(data)),
            'User-Agent': 'token-insights/1.0',
            'x-goog-api-key': self.api_key or "",
        }

        req = Request(self.url, data=data, headers=headers, method="POST")

        try:
            with urlopen(req, timeout=self.params.timeout_seconds) as response:
                return json.loads(response.read().decode('utf-8'))

        except HTTPError as e:
            logger.warning(
                "Labeler HTTP error",
                labeler=self.name,
                error_code=e.code,
                error_reason=str(e.reason)
            )
            raise CollaboratorUnavailableError(
                f"HTTP {e.code}: {e.reason}",
                collaborator=self.name,
                retryable=e.code >= 500
            )

        except (OSError, URLError, socket.timeout) as e:
            logger.warning(
                "Labeler network error",
                labeler=self.name,
                error=str(e)
            )
            raise CollaboratorUnavailableError(
                f"Network error: {str(e)}",
                collaborator=self.name,
                retryable=True
            )

        except json.JSONDecodeError as e:
            logger.warning(
                "Labeler returned invalid JSON",
                labeler=self.name,
                error=str(e)
            )
            raise CollaboratorUnavailableError(
                f"Invalid JSON reply: {str(e)}",
                collaborator=self.name
            )

    def _extract_text(self, reply: dict[str, Any]) -> str:
        """Pull the first candidate's text out of a generateContent reply."""
        try:
            parts = reply["candidates"][0]["content"]["parts"]
            return "".join(part.get("text", "") for part in parts)
        except (KeyError, IndexError, TypeError) as e:
            raise CollaboratorUnavailableError(
                f"Unexpected reply shape: {str(e)}",
                collaborator=self.name
            )

"""Pytest configuration and shared fixtures."""

from typing import Any, Optional

import pytest

from token_insights.engine import InsightEngine
from token_insights.errors import CollaboratorUnavailableError
from token_insights.labeling.base import LabelKind, LabelRequest, TextLabeler


class StubLabeler(TextLabeler):
    """Labeler answering from a fixed table and recording its calls."""

    def __init__(self, words: Optional[dict[LabelKind, str]] = None):
        super().__init__("stub")
        self.words = words or {
            LabelKind.ANALYSIS: "ascending",
            LabelKind.SENTIMENT: "positive",
            LabelKind.RECOMMENDATION: "sort",
        }
        self.requests: list[LabelRequest] = []

    def label(self, request: LabelRequest) -> str:
        self.requests.append(request)
        return self.words[request.kind]


class FailingLabeler(TextLabeler):
    """Labeler whose every call fails with the given exception."""

    def __init__(self, error: Optional[Exception] = None):
        super().__init__("failing")
        self.error = error or CollaboratorUnavailableError("service down", collaborator="failing")

    def label(self, request: LabelRequest) -> str:
        raise self.error


@pytest.fixture
def mixed_tokens() -> list[Any]:
    """Mixed request tokens including ones that must be dropped."""
    return ["1", "2", "a", "b", "3", "hello", "$", "Z", 4, " 5 ", "12a"]


@pytest.fixture
def stub_labeler() -> StubLabeler:
    return StubLabeler()


@pytest.fixture
def failing_labeler() -> FailingLabeler:
    return FailingLabeler()


@pytest.fixture
def engine() -> InsightEngine:
    """Engine with default configuration and no labeler."""
    return InsightEngine()

"""Base classes for the text labeling collaborator."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class LabelKind(Enum):
    """Kinds of one-word labels the collaborator can produce."""
    ANALYSIS = "analysis"
    SENTIMENT = "sentiment"
    RECOMMENDATION = "recommendation"


# Labels used when no collaborator is configured or it is unreachable
UNAVAILABLE_LABELS: dict[LabelKind, str] = {
    LabelKind.ANALYSIS: "unavailable",
    LabelKind.SENTIMENT: "neutral",
    LabelKind.RECOMMENDATION: "optimize",
}

# Labels used when a configured collaborator fails a single call
ERROR_LABELS: dict[LabelKind, str] = {
    LabelKind.ANALYSIS: "error",
    LabelKind.SENTIMENT: "unknown",
    LabelKind.RECOMMENDATION: "review",
}

# Used when the collaborator answers with no usable word
EMPTY_REPLY_LABELS: dict[LabelKind, str] = {
    LabelKind.ANALYSIS: "complex",
    LabelKind.SENTIMENT: "neutral",
    LabelKind.RECOMMENDATION: "optimize",
}

_NON_LETTERS = re.compile(r"[^a-z]")


@dataclass(frozen=True)
class LabelRequest:
    """One labeling call: which label to produce and the summary to base it on."""
    kind: LabelKind
    summary: dict[str, Any] = field(default_factory=dict)


def normalize_label(text: str, kind: LabelKind) -> str:
    """
    Reduce a free-text reply to one lowercase word.

    Args:
        text: Raw collaborator reply
        kind: Label kind, used to pick the empty-reply default

    Returns:
        First word with non-letters stripped, or the kind's default
    """
    words = text.strip().lower().split()
    word = _NON_LETTERS.sub("", words[0]) if words else ""
    return word or EMPTY_REPLY_LABELS[kind]


class TextLabeler(ABC):
    """Interface of the optional text labeling collaborator."""

    def __init__(self, name: str):
        self.name = name

    @property
    def available(self) -> bool:
        """Whether the collaborator is configured and worth calling."""
        return True

    @abstractmethod
    def label(self, request: LabelRequest) -> str:
        """
        Produce a one-word label for a data summary.

        Args:
            request: Label kind and summary

        Returns:
            A single lowercase word

        Raises:
            CollaboratorUnavailableError: If the collaborator cannot answer
        """
        pass


class FallbackLabeler(TextLabeler):
    """Offline labeler returning the documented fallback words."""

    def __init__(self, name: str = "fallback"):
        super().__init__(name)

    @property
    def available(self) -> bool:
        return False

    def label(self, request: LabelRequest) -> str:
        return UNAVAILABLE_LABELS[request.kind]

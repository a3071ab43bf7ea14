"""Optional one-word text labeling collaborator"""

from .base import (
    ERROR_LABELS,
    UNAVAILABLE_LABELS,
    FallbackLabeler,
    LabelKind,
    LabelRequest,
    TextLabeler,
    normalize_label,
)
from .http_labeler import HttpTextLabeler

__all__ = [
    "ERROR_LABELS",
    "UNAVAILABLE_LABELS",
    "FallbackLabeler",
    "HttpTextLabeler",
    "LabelKind",
    "LabelRequest",
    "TextLabeler",
    "normalize_label",
]

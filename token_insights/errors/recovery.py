"""
Recovery strategy classifications for error handling.

These errors allow continued operation with reduced functionality.
"""

from typing import Optional


class GracefulDegradationError(Exception):
    """Base for errors that allow continued operation with reduced functionality."""

    def __init__(self, message: str, degraded_functionality: Optional[str] = None,
                 fallback_strategy: Optional[str] = None, **kwargs):
        super().__init__(message)
        self.degraded_functionality = degraded_functionality
        self.fallback_strategy = fallback_strategy
        self.allows_degradation = True


class CollaboratorUnavailableError(GracefulDegradationError):
    """External labeling service is unreachable, unconfigured or failing."""

    def __init__(self, message: str, collaborator: Optional[str] = None,
                 retryable: bool = False, **kwargs):
        kwargs.setdefault("degraded_functionality", "text_labels")
        kwargs.setdefault("fallback_strategy", "fallback_labels")
        super().__init__(message, **kwargs)
        self.collaborator = collaborator
        self.retryable = retryable

"""
System failure error classifications for unrecoverable errors.

These exceptions represent defects or misconfiguration that an analysis
cannot work around.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class AnalysisError(SystemFailureError):
    """Unexpected failure inside one analysis stage."""

    def __init__(self, message: str, stage: Optional[str] = None,
                 calculation_input: Optional[dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.stage = stage
        self.calculation_input = calculation_input


class ConfigurationError(SystemFailureError):
    """Configuration values failed validation."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field

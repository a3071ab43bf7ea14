"""
Error classification system for the token insight pipeline.

This module provides a structured exception hierarchy separating recoverable
data issues, unrecoverable failures and collaborator degradation.
"""

from .data_quality import (
    DataQualityError,
    EmptyInputError,
    InsufficientDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    AnalysisError,
    ConfigurationError,
)
from .recovery import (
    GracefulDegradationError,
    CollaboratorUnavailableError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "EmptyInputError",
    "InsufficientDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "AnalysisError",
    "ConfigurationError",
    # Recovery Categories
    "GracefulDegradationError",
    "CollaboratorUnavailableError",
]

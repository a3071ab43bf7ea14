"""
Logging configuration and utilities for the token insight pipeline.
"""
from .config import configure_logging, get_analysis_logger, get_logger, log_stage_result

__all__ = ["configure_logging", "get_logger", "get_analysis_logger", "log_stage_result"]

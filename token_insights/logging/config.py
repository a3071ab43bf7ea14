"""
Structured logging setup for the token insight pipeline.

Every module logs through structlog key/value events. Applications call
configure_logging() once at startup; library code only asks for loggers.
"""
import logging
import sys
from typing import IO, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor


def _base_processors(include_timestamp: bool, include_caller: bool) -> list[Processor]:
    """Processors applied to every event before rendering."""
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ))

    return processors


def _renderer(format_json: bool) -> Processor:
    if format_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list[Processor]] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """
    Route structlog through the standard library at the given level.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Render JSON lines instead of console output
        include_timestamp: Add an ISO UTC timestamp to each event
        include_caller: Add module, function and line of the call site
        extra_processors: Processors run after the base chain, before rendering
        stream: Output stream, stdout by default
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = _base_processors(include_timestamp, include_caller)
    processors.extend(extra_processors or [])
    processors.append(_renderer(format_json))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Logger for a module, typically called with __name__."""
    return structlog.get_logger(name)


def get_analysis_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to the analysis subsystem, used for per-stage events."""
    return get_logger(name).bind(subsystem="analysis")


def log_stage_result(
    logger: FilteringBoundLogger,
    stage: str,
    produced: bool,
    reason: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one analysis stage.

    Suppressed stages (empty or short buckets) are expected and logged at
    debug level; produced stages are logged at debug level too so that a
    normal request stays quiet at INFO.

    Args:
        logger: Structlog logger instance
        stage: Name of the stage (math, stats, anomalies, ...)
        produced: Whether the stage produced a block
        reason: Why the stage was suppressed
        context: Additional context data
    """
    bound_logger = logger.bind(
        stage=stage,
        stage_result="PRODUCED" if produced else "SUPPRESSED",
    )

    if reason:
        bound_logger = bound_logger.bind(reason=reason)

    if context:
        bound_logger = bound_logger.bind(context=context)

    if produced:
        bound_logger.debug("Stage produced")
    else:
        bound_logger.debug("Stage suppressed")

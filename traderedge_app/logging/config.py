"""
Centralized logging configuration for the TraderEdge sizing engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..data.models import SizingOutcome


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Route structlog output through standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add caller information if requested
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Final renderer
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_sizing_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with position sizing context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for sizing decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="position_sizing",
        audit_trail=True
    )


def log_calculation(
    logger: FilteringBoundLogger,
    symbol: str,
    outcome: "SizingOutcome",
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a sizing outcome with standardized format.

    Valid outcomes are logged at debug level with the headline figures,
    invalid ones at warning level with the reason.

    Args:
        logger: Structlog logger instance
        symbol: Symbol that was sized
        outcome: Result of the calculation
        context: Additional context data
    """
    bound_logger = logger.bind(
        symbol=symbol,
        sizing_result="OK" if outcome.success else "INVALID",
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome.success and outcome.result is not None:
        result = outcome.result
        bound_logger.debug(
            "Position sized",
            instrument_type=result.instrument_type.value,
            lot_size=result.lot_size,
            potential_loss=result.potential_loss,
            potential_profit=result.potential_profit,
            risk_reward=result.risk_reward,
            matches_user_preference=result.matches_user_preference,
        )
    else:
        bound_logger.warning("Position sizing rejected", reason=outcome.reason)

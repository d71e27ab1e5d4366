"""
Error classification for position sizing.

Trade input problems are data quality errors: the calculator reports them as
an invalid outcome instead of raising, and only explicit ``unwrap()`` callers
see the exception. Configuration faults are unrecoverable.
"""

from .data_quality import (
    DataQualityError,
    InvalidTradeParametersError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "InvalidTradeParametersError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]

"""
Utilities Package - Logging and Exception Handling
"""
from .logging import get_logger, setup_logging
from .exceptions import (
    RiskCheckError,
    UnknownConditionError,
    MissingFactorError,
    InvalidValueError,
    EmptySelectionError,
    HistoryError,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "RiskCheckError",
    "UnknownConditionError",
    "MissingFactorError",
    "InvalidValueError",
    "EmptySelectionError",
    "HistoryError",
]

"""
Custom Exception Hierarchy

Provides specific exception types for the scoring, recommendation and
symptom-matching entry points with structured error information.
"""
from typing import Optional, Dict, Any


class RiskCheckError(Exception):
    """Base exception for all risk check errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for caller-facing responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class UnknownConditionError(RiskCheckError):
    """Condition identifier is not in the catalog."""

    def __init__(
        self,
        condition_id: str,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"Unknown condition: {condition_id!r}",
            code="UNKNOWN_CONDITION",
            details={"condition_id": condition_id, **(details or {})}
        )
        self.condition_id = condition_id


class MissingFactorError(RiskCheckError):
    """A measurement required by the condition's rules is absent."""

    def __init__(
        self,
        factor: str,
        condition: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=f"Missing measurement '{factor}' for condition '{condition}'",
            code="MISSING_FACTOR",
            details={"factor": factor, "condition": condition, **(details or {})}
        )
        self.factor = factor
        self.condition = condition


class InvalidValueError(RiskCheckError):
    """A measurement value cannot be scored (non-numeric or non-finite)."""

    def __init__(
        self,
        message: str,
        factor: str = "unknown",
        value: Any = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="INVALID_VALUE",
            details={"factor": factor, "value": repr(value), **(details or {})}
        )
        self.factor = factor
        self.value = value


class EmptySelectionError(RiskCheckError):
    """Symptom matcher was called without any selected symptoms."""

    def __init__(
        self,
        message: str = "Please select at least one symptom.",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="EMPTY_SELECTION",
            details=details
        )


class HistoryError(RiskCheckError):
    """Errors while loading or saving prediction history."""

    def __init__(
        self,
        message: str,
        location: str = "unknown",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            code="HISTORY_ERROR",
            details={"location": location, **(details or {})}
        )
        self.location = location

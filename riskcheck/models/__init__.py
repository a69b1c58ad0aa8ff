"""
Pydantic schemas for caller-facing input and persisted history.
"""
from .measurements import (
    MeasurementInput,
    DiabetesInput,
    HeartDiseaseInput,
    HypertensionInput,
    INPUT_SCHEMAS,
    parse_measurements,
)
from .history import HistoryEntry

__all__ = [
    "MeasurementInput",
    "DiabetesInput",
    "HeartDiseaseInput",
    "HypertensionInput",
    "INPUT_SCHEMAS",
    "parse_measurements",
    "HistoryEntry",
]

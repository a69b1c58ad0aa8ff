"""
Services - assessment orchestration and history sinks
"""
from .assessment import Assessment, AssessmentService
from .history import HistorySink, IdGenerator, InMemoryHistory, JsonFileHistory, make_entry

__all__ = [
    "Assessment",
    "AssessmentService",
    "HistorySink",
    "IdGenerator",
    "InMemoryHistory",
    "JsonFileHistory",
    "make_entry",
]

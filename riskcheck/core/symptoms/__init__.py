"""
Symptom Matcher
"""
from .matcher import SymptomMatch, SymptomMatcher

__all__ = [
    "SymptomMatch",
    "SymptomMatcher",
]

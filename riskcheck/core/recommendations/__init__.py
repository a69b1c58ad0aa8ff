"""
Recommendation Generator

Tier- and measurement-conditioned advisory text per condition.
"""
from .advisories import Advisory, ConditionAdvisories, ADVISORY_TABLE, TIER_PREFIX
from .generator import RecommendationGenerator

__all__ = [
    "Advisory",
    "ConditionAdvisories",
    "ADVISORY_TABLE",
    "TIER_PREFIX",
    "RecommendationGenerator",
]

"""
riskcheck - rule-based disease risk scoring.

Package-level entry points use the built-in catalog:

    import riskcheck

    result = riskcheck.score_condition("diabetes", {...})
    advice = riskcheck.get_recommendations("diabetes", result.tier, {...})
    matches = riskcheck.match_symptoms(["Chest pain", "Dizziness"])
    options = riskcheck.list_all_symptoms()
"""
from typing import Any, Dict, Iterable, List, Mapping, Union

from riskcheck.core.bmi import bmi_category, compute_bmi
from riskcheck.core.catalog import DEFAULT_CATALOG, Condition
from riskcheck.core.scoring import RiskTier, ScoreResult
from riskcheck.core.symptoms import SymptomMatch
from riskcheck.services import Assessment, AssessmentService
from riskcheck.utils import (
    RiskCheckError,
    UnknownConditionError,
    MissingFactorError,
    InvalidValueError,
    EmptySelectionError,
    HistoryError,
)

__version__ = "1.0.0"

_service = AssessmentService(DEFAULT_CATALOG)


def score_condition(condition_id: Union[str, Condition], measurements: Mapping[str, Any]) -> ScoreResult:
    return _service.score_condition(condition_id, measurements)


def get_recommendations(
    condition_id: Union[str, Condition],
    tier: Union[RiskTier, str],
    measurements: Mapping[str, Any],
) -> List[str]:
    return _service.get_recommendations(condition_id, tier, measurements)


def match_symptoms(selected: Iterable[str]) -> Dict[str, SymptomMatch]:
    return _service.match_symptoms(selected)


def list_all_symptoms() -> List[str]:
    return _service.list_all_symptoms()


__all__ = [
    "score_condition",
    "get_recommendations",
    "match_symptoms",
    "list_all_symptoms",
    "compute_bmi",
    "bmi_category",
    "Assessment",
    "AssessmentService",
    "RiskTier",
    "ScoreResult",
    "SymptomMatch",
    "RiskCheckError",
    "UnknownConditionError",
    "MissingFactorError",
    "InvalidValueError",
    "EmptySelectionError",
    "HistoryError",
]

"""
Condition Catalog

Static conditions, their weighted risk factor rules and symptom lists.
"""
from .base import Condition, Derivation, RiskFactorRule, RuleKind
from .conditions import DIABETES, HEART_DISEASE, HYPERTENSION, BUILTIN_CONDITIONS
from .registry import Catalog, DEFAULT_CATALOG

__all__ = [
    "Condition",
    "Derivation",
    "RiskFactorRule",
    "RuleKind",
    "DIABETES",
    "HEART_DISEASE",
    "HYPERTENSION",
    "BUILTIN_CONDITIONS",
    "Catalog",
    "DEFAULT_CATALOG",
]

"""
Risk Scoring

Usage:
    from riskcheck.core.scoring import RiskScorer

    result = RiskScorer().score("diabetes", measurements)
    print(result.score, result.tier.value)
"""
from .scorer import (
    RiskScorer,
    ScoreResult,
    FactorContribution,
    RiskTier,
    classify_tier,
    factor_contribution,
    LOW_UPPER,
    MODERATE_UPPER,
)

__all__ = [
    "RiskScorer",
    "ScoreResult",
    "FactorContribution",
    "RiskTier",
    "classify_tier",
    "factor_contribution",
    "LOW_UPPER",
    "MODERATE_UPPER",
]

"""
Advisory tables per condition.

Each condition has an ordered list of conditional advisories (fired by a
check on one measurement) followed by general advice that is always given.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from riskcheck.core.scoring import RiskTier
from riskcheck.utils.numeric import as_number


@dataclass(frozen=True)
class Advisory:
    """Advice given when ``applies(measurements[factor])`` is true."""
    factor: str
    applies: Callable[[Any], bool]
    text: str


@dataclass(frozen=True)
class ConditionAdvisories:
    conditional: Tuple[Advisory, ...] = ()
    general: Tuple[str, ...] = ()


def above(limit: float) -> Callable[[Any], bool]:
    return lambda value: as_number(value) > limit


def below(limit: float) -> Callable[[Any], bool]:
    return lambda value: as_number(value) < limit


def equals(level: str) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, str) and value.strip().lower() == level


# ── Tier prefixes (inserted ahead of everything else) ─────────────────────────
TIER_PREFIX: Dict[RiskTier, str] = {
    RiskTier.HIGH:     "Consult with a healthcare professional immediately",
    RiskTier.MODERATE: "Schedule a health checkup within the next month",
}


# ── Per-condition tables ──────────────────────────────────────────────────────
ADVISORY_TABLE: Dict[str, ConditionAdvisories] = {
    "diabetes": ConditionAdvisories(
        conditional=(
            Advisory("bmi", above(30), "Focus on weight management through diet and exercise"),
            Advisory("glucose", above(100), "Monitor blood glucose levels regularly"),
            Advisory("bp_systolic", above(140), "Control blood pressure through lifestyle changes"),
        ),
        general=(
            "Follow a balanced diet with limited processed sugars",
            "Engage in regular physical activity (150 minutes per week)",
        ),
    ),
    "heart": ConditionAdvisories(
        conditional=(
            Advisory("cholesterol", above(240), "Work on lowering cholesterol through diet and medication if needed"),
            Advisory("bp_systolic", above(140), "Monitor and control blood pressure"),
            Advisory("max_heart_rate", below(100), "Consult a cardiologist about your heart rate"),
        ),
        general=(
            "Include omega-3 rich foods in your diet",
            "Quit smoking and limit alcohol consumption",
        ),
    ),
    "hypertension": ConditionAdvisories(
        conditional=(
            Advisory("bmi", above(25), "Maintain a healthy weight"),
            Advisory("salt_intake", equals("high"), "Reduce sodium intake to less than 2g per day"),
            Advisory("stress", equals("high"), "Practice stress management techniques"),
            Advisory("exercise", equals("low"), "Increase physical activity to at least 150 minutes per week"),
        ),
        general=(
            "Monitor blood pressure regularly",
        ),
    ),
}

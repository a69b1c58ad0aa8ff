"""
Built-in condition definitions.

Weights, thresholds and symptom lists for the three screened conditions.
Weights within a condition happen to sum to 1.0 here; nothing downstream
relies on that.
"""
from __future__ import annotations

from riskcheck.core.bmi import compute_bmi
from .base import Condition, Derivation, RiskFactorRule

# Shared categorical scales
_YES_NO       = {"yes": 1.0, "no": 0.0}
_HIGH_IS_BAD  = {"high": 1.0, "moderate": 0.5, "low": 0.0}
_LOW_IS_BAD   = {"low": 1.0, "moderate": 0.5, "high": 0.0}


DIABETES = Condition(
    id="diabetes",
    name="Diabetes",
    factors={
        "age":            RiskFactorRule.greater_than(0.15, 45),
        "bmi":            RiskFactorRule.greater_than(0.25, 30),
        "glucose":        RiskFactorRule.greater_than(0.30, 100),
        "bp_systolic":    RiskFactorRule.greater_than(0.20, 140),
        "family_history": RiskFactorRule.categorical(0.10, _YES_NO),
    },
    symptoms=(
        "Excessive thirst",
        "Frequent urination",
        "Unexplained weight loss",
        "Fatigue",
        "Blurred vision",
        "Slow healing wounds",
    ),
)


HEART_DISEASE = Condition(
    id="heart",
    name="Heart Disease",
    factors={
        "age":            RiskFactorRule.greater_than(0.20, 50),
        "cholesterol":    RiskFactorRule.greater_than(0.25, 240),
        "bp_systolic":    RiskFactorRule.greater_than(0.20, 140),
        "max_heart_rate": RiskFactorRule.less_than(0.15, 100),
        # Any presentation other than typical angina still counts for half.
        "chest_pain":     RiskFactorRule.categorical(0.20, {"typical": 1.0}, default=0.5),
    },
    symptoms=(
        "Chest pain",
        "Shortness of breath",
        "Irregular heartbeat",
        "Fatigue",
        "Swelling in legs",
        "Dizziness",
    ),
)


HYPERTENSION = Condition(
    id="hypertension",
    name="Hypertension",
    factors={
        "age":         RiskFactorRule.greater_than(0.20, 40),
        "bmi":         RiskFactorRule.greater_than(0.25, 25),
        "salt_intake": RiskFactorRule.categorical(0.20, _HIGH_IS_BAD),
        "stress":      RiskFactorRule.categorical(0.15, _HIGH_IS_BAD),
        "exercise":    RiskFactorRule.categorical(0.20, _LOW_IS_BAD),
    },
    symptoms=(
        "Headaches",
        "Dizziness",
        "Chest pain",
        "Shortness of breath",
        "Nosebleeds",
        "Vision problems",
    ),
    derivations=(
        Derivation("bmi", ("weight", "height"), compute_bmi),
    ),
)


BUILTIN_CONDITIONS = (DIABETES, HEART_DISEASE, HYPERTENSION)

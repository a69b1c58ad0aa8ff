"""
Pytest Configuration and Fixtures

Shared fixtures for risk scoring tests.
"""
import pytest
import numpy as np
from pathlib import Path
import sys
from typing import Any, Dict

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from riskcheck.core.catalog import Catalog, Condition, RiskFactorRule
from riskcheck.services import AssessmentService, InMemoryHistory


@pytest.fixture
def diabetes_high() -> Dict[str, Any]:
    """Every diabetes threshold exceeded."""
    return {
        "age": 50,
        "bmi": 32,
        "glucose": 110,
        "bp_systolic": 150,
        "family_history": "yes",
    }


@pytest.fixture
def diabetes_minimal() -> Dict[str, Any]:
    """Near-zero diabetes measurements."""
    return {
        "age": 1,
        "bmi": 1,
        "glucose": 1,
        "bp_systolic": 1,
        "family_history": "no",
    }


@pytest.fixture
def heart_measurements() -> Dict[str, Any]:
    return {
        "age": 60,
        "cholesterol": 200,
        "bp_systolic": 120,
        "max_heart_rate": 150,
        "chest_pain": "atypical",
    }


@pytest.fixture
def hypertension_measurements() -> Dict[str, Any]:
    """Weight and height instead of bmi (bmi ≈ 22.86)."""
    return {
        "age": 30,
        "weight": 70,
        "height": 175,
        "salt_intake": "moderate",
        "stress": "low",
        "exercise": "high",
    }


@pytest.fixture
def toy_catalog() -> Catalog:
    """Small catalog that does not exist in the built-ins."""
    return Catalog([
        Condition(
            id="toy",
            name="Toy Condition",
            factors={
                "level": RiskFactorRule.greater_than(0.5, 10),
                "reserve": RiskFactorRule.less_than(0.25, 4),
                "answer": RiskFactorRule.categorical(0.25, {"bad": 1.0, "meh": 0.5}),
            },
            symptoms=("Itching", "Sneezing"),
        ),
    ])


@pytest.fixture
def history() -> InMemoryHistory:
    return InMemoryHistory()


@pytest.fixture
def service(history) -> AssessmentService:
    ids = iter(range(1, 1000))
    return AssessmentService(history=history, id_generator=lambda: next(ids))


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for property-style tests."""
    return np.random.default_rng(20241019)

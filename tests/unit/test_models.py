"""
Unit Tests for Input Schemas and BMI Helpers
"""
import numpy as np
import pytest
from pydantic import ValidationError

from riskcheck.core.bmi import bmi_category, compute_bmi
from riskcheck.models import (
    DiabetesInput, HeartDiseaseInput, HypertensionInput, HistoryEntry, parse_measurements,
)
from riskcheck.utils import InvalidValueError, UnknownConditionError


class TestComputeBmi:
    """Tests for the BMI calculator."""

    def test_known_value(self):
        assert compute_bmi(70, 175) == pytest.approx(22.857, abs=1e-3)

    @pytest.mark.parametrize("weight,height", [(70, 0), (0, 175), (-70, 175), (70, float("inf"))])
    def test_rejects_non_positive_or_infinite(self, weight, height):
        with pytest.raises(InvalidValueError):
            compute_bmi(weight, height)

    def test_rejects_text(self):
        with pytest.raises(InvalidValueError):
            compute_bmi("70", 175)

    def test_accepts_numpy_ints(self):
        assert compute_bmi(np.int64(70), np.int64(175)) == pytest.approx(22.857, abs=1e-3)

    @pytest.mark.parametrize("bmi,category", [
        (17.0, "Underweight"),
        (18.5, "Normal"),
        (24.9, "Normal"),
        (25.0, "Overweight"),
        (29.9, "Overweight"),
        (30.0, "Obese"),
    ])
    def test_categories(self, bmi, category):
        assert bmi_category(bmi) == category


class TestMeasurementInputs:
    """Tests for pydantic input schemas."""

    def test_diabetes_coerces_form_strings(self):
        data = DiabetesInput(
            age="50", bmi="32.5", glucose="110", bp_systolic="150", family_history="Yes"
        ).to_measurements()

        assert data == {
            "age": 50,
            "bmi": 32.5,
            "glucose": 110,
            "bp_systolic": 150,
            "family_history": "yes",
        }

    def test_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            DiabetesInput(age=200, bmi=30, glucose=100, bp_systolic=120, family_history="no")

    def test_unknown_categorical_rejected(self):
        with pytest.raises(ValidationError):
            HeartDiseaseInput(
                age=60, cholesterol=200, bp_systolic=120, max_heart_rate=150, chest_pain="sharp"
            )

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            DiabetesInput(
                age=50, bmi=30, glucose=100, bp_systolic=120, family_history="no", shoe_size=44
            )

    def test_hypertension_adds_bmi(self):
        data = HypertensionInput(
            age=30, weight=70, height=175, salt_intake="High", stress="low", exercise="moderate"
        ).to_measurements()

        assert data["bmi"] == pytest.approx(22.857, abs=1e-3)
        assert data["salt_intake"] == "high"

    def test_parse_measurements_dispatch(self):
        data = parse_measurements("HEART", {
            "age": 60,
            "cholesterol": 250,
            "bp_systolic": 150,
            "max_heart_rate": 90,
            "chest_pain": "typical",
        })
        assert data["chest_pain"] == "typical"

    def test_parse_measurements_unknown_condition(self):
        with pytest.raises(UnknownConditionError):
            parse_measurements("asthma", {})


class TestHistoryEntry:
    """Tests for the persisted history shape."""

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            HistoryEntry(
                id=1, condition_name="Diabetes", score=101, tier="High",
                measurements={}, timestamp="2026-01-01T00:00:00Z",
            )

    def test_round_trip_json(self):
        entry = HistoryEntry(
            id=1, condition_name="Diabetes", score=42, tier="Moderate",
            measurements={"age": 50}, timestamp="2026-01-01T00:00:00Z",
        )
        restored = HistoryEntry.model_validate_json(entry.model_dump_json())
        assert restored == entry

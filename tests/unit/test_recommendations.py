"""
Unit Tests for the Recommendation Generator

Tests for conditional advisories, general advice and tier prefixes.
"""
import pytest

from riskcheck.core.recommendations import (
    Advisory, ConditionAdvisories, RecommendationGenerator, TIER_PREFIX,
)
from riskcheck.core.recommendations.advisories import above, below, equals
from riskcheck.core.scoring import RiskTier
from riskcheck.utils import InvalidValueError, MissingFactorError, UnknownConditionError

IMMEDIATE = "Consult with a healthcare professional immediately"
CHECKUP = "Schedule a health checkup within the next month"


@pytest.fixture
def generator() -> RecommendationGenerator:
    return RecommendationGenerator()


class TestPredicates:
    """Tests for the advisory predicate helpers."""

    def test_above_is_strict(self):
        assert above(30)(30.1)
        assert not above(30)(30)

    def test_below_is_strict(self):
        assert below(100)(99)
        assert not below(100)(100)

    def test_equals_normalises_text(self):
        assert equals("high")(" High ")
        assert not equals("high")("moderate")
        assert not equals("high")(None)

    def test_predicates_reject_text(self):
        with pytest.raises(InvalidValueError):
            above(30)("32")


class TestRecommendationGenerator:
    """Tests for per-condition advisory lists."""

    def test_diabetes_high_full_list(self, generator, diabetes_high):
        recs = generator.recommend("diabetes", RiskTier.HIGH, diabetes_high)

        assert recs == [
            IMMEDIATE,
            "Focus on weight management through diet and exercise",
            "Monitor blood glucose levels regularly",
            "Control blood pressure through lifestyle changes",
            "Follow a balanced diet with limited processed sugars",
            "Engage in regular physical activity (150 minutes per week)",
        ]

    def test_low_tier_has_no_prefix(self, generator, diabetes_minimal):
        recs = generator.recommend("diabetes", RiskTier.LOW, diabetes_minimal)

        assert recs == [
            "Follow a balanced diet with limited processed sugars",
            "Engage in regular physical activity (150 minutes per week)",
        ]

    def test_moderate_prefix_first(self, generator, hypertension_measurements):
        recs = generator.recommend("hypertension", RiskTier.MODERATE, hypertension_measurements)

        assert recs == [CHECKUP, "Monitor blood pressure regularly"]

    def test_prefix_preserves_order_of_rest(self, generator, diabetes_high):
        without = generator.recommend("diabetes", RiskTier.LOW, diabetes_high)
        with_prefix = generator.recommend("diabetes", RiskTier.HIGH, diabetes_high)

        assert with_prefix[0] == IMMEDIATE
        assert with_prefix[1:] == without

    def test_heart_low_max_heart_rate(self, generator, heart_measurements):
        heart_measurements["max_heart_rate"] = 90
        recs = generator.recommend("heart", RiskTier.HIGH, heart_measurements)

        assert recs == [
            IMMEDIATE,
            "Consult a cardiologist about your heart rate",
            "Include omega-3 rich foods in your diet",
            "Quit smoking and limit alcohol consumption",
        ]

    def test_hypertension_categorical_triggers(self, generator, hypertension_measurements):
        hypertension_measurements.update(
            weight=95, salt_intake="high", stress="High", exercise="low"
        )
        recs = generator.recommend("hypertension", "Low", hypertension_measurements)

        assert recs == [
            "Maintain a healthy weight",
            "Reduce sodium intake to less than 2g per day",
            "Practice stress management techniques",
            "Increase physical activity to at least 150 minutes per week",
            "Monitor blood pressure regularly",
        ]

    def test_tier_accepts_string(self, generator, diabetes_high):
        recs = generator.recommend("diabetes", "Moderate", diabetes_high)
        assert recs[0] == CHECKUP

    def test_invalid_tier(self, generator, diabetes_high):
        with pytest.raises(ValueError):
            generator.recommend("diabetes", "Extreme", diabetes_high)

    def test_missing_measurement(self, generator, diabetes_high):
        del diabetes_high["bmi"]
        with pytest.raises(MissingFactorError) as exc_info:
            generator.recommend("diabetes", RiskTier.LOW, diabetes_high)
        assert exc_info.value.factor == "bmi"

    def test_text_measurement_names_factor(self, generator, diabetes_high):
        diabetes_high["bmi"] = "32"
        with pytest.raises(InvalidValueError) as exc_info:
            generator.recommend("diabetes", RiskTier.LOW, diabetes_high)
        assert exc_info.value.factor == "bmi"
        assert exc_info.value.details["condition"] == "diabetes"

    def test_unknown_condition(self, generator, diabetes_high):
        with pytest.raises(UnknownConditionError):
            generator.recommend("asthma", RiskTier.LOW, diabetes_high)

    def test_condition_without_table(self, toy_catalog):
        generator = RecommendationGenerator(toy_catalog)
        assert generator.recommend("toy", RiskTier.HIGH, {}) == [TIER_PREFIX[RiskTier.HIGH]]

    def test_custom_table(self, toy_catalog):
        table = {
            "toy": ConditionAdvisories(
                conditional=(Advisory("level", above(10), "Lower the level"),),
                general=("Stay curious",),
            )
        }
        generator = RecommendationGenerator(toy_catalog, table=table)

        assert generator.recommend("toy", RiskTier.LOW, {"level": 11}) == [
            "Lower the level", "Stay curious"
        ]
        assert generator.recommend("toy", RiskTier.LOW, {"level": 3}) == ["Stay curious"]

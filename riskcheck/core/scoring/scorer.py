"""
Risk Scorer

Turns a measurement record into a bounded 0-100 score and a risk tier for
one catalog condition.

Per factor the rule kind decides the 0-1 contribution:
    greater-than   1 if value > threshold, else value / threshold
    less-than      1 if value < threshold, else threshold / value
    categorical    mapped level, or the rule default when unrecognized

Contributions are weighted and summed; the x100 scaling and the clamp to
[0, 100] happen once on the total. Individual contributions are NOT clamped,
so a value far outside the expected domain can push one factor above its
weight.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from riskcheck.core.catalog import Catalog, Condition, DEFAULT_CATALOG, RiskFactorRule, RuleKind
from riskcheck.utils import MissingFactorError, get_logger
from riskcheck.utils.numeric import as_number, round_half_up

logger = get_logger(__name__)

# ── Tier bands ────────────────────────────────────────────────────────────────
LOW_UPPER      = 30     # score < 30          -> Low
MODERATE_UPPER = 60     # 30 <= score < 60    -> Moderate, >= 60 -> High

SCORE_MIN = 0
SCORE_MAX = 100


class RiskTier(str, Enum):
    """Discrete risk classification of a 0-100 score."""
    LOW      = "Low"
    MODERATE = "Moderate"
    HIGH     = "High"


def classify_tier(score: float) -> RiskTier:
    if score < LOW_UPPER:
        return RiskTier.LOW
    if score < MODERATE_UPPER:
        return RiskTier.MODERATE
    return RiskTier.HIGH


@dataclass
class FactorContribution:
    """How one risk factor fed into the score."""
    factor: str
    value: Any
    contribution: float      # unweighted, normally 0-1
    weight: float

    @property
    def weighted(self) -> float:
        return self.contribution * self.weight

    @property
    def label(self) -> str:
        # "bp_systolic" -> "Bp Systolic"
        return self.factor.replace("_", " ").title()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "factor": self.factor,
            "label": self.label,
            "value": self.value,
            "contribution": round(self.contribution, 4),
            "weight": self.weight,
            "weighted": round(self.weighted, 2),
        }


@dataclass
class ScoreResult:
    """Score, tier and per-factor breakdown for one condition."""
    condition_id: str
    condition_name: str
    score: int
    tier: RiskTier
    contributions: List[FactorContribution] = field(default_factory=list)

    @property
    def weighted_contributions(self) -> Dict[str, float]:
        return {c.factor: c.weighted for c in self.contributions}

    def breakdown(self) -> List[Dict[str, Any]]:
        """Chart-ready rows in catalog factor order."""
        return [c.to_dict() for c in self.contributions]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "condition_id": self.condition_id,
            "condition": self.condition_name,
            "score": self.score,
            "tier": self.tier.value,
            "breakdown": self.breakdown(),
        }


# ── Per-factor evaluation ─────────────────────────────────────────────────────

def factor_contribution(rule: RiskFactorRule, value: Any, factor: str = "unknown") -> float:
    """
    Unweighted contribution of a single measurement under ``rule``.

    Raises:
        InvalidValueError: numeric rule given a non-numeric or non-finite value.
    """
    if rule.kind is RuleKind.GREATER_THAN:
        x = as_number(value, factor)
        return 1.0 if x > rule.threshold else x / rule.threshold

    if rule.kind is RuleKind.LESS_THAN:
        x = as_number(value, factor)
        if x < rule.threshold:
            return 1.0
        return rule.threshold / x

    key = value.strip().lower() if isinstance(value, str) else value
    if key in rule.levels:
        return rule.levels[key]
    logger.debug(
        f"Unrecognized value {value!r} for categorical factor '{factor}', "
        f"using default contribution {rule.default}"
    )
    return rule.default


# ── Scorer ────────────────────────────────────────────────────────────────────

class RiskScorer:
    """
    Scores measurement records against catalog conditions.

    Stateless apart from the catalog reference; the same inputs always give
    the same ScoreResult.
    """

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog or DEFAULT_CATALOG

    def score(
        self,
        condition: Union[str, Condition],
        measurements: Mapping[str, Any],
    ) -> ScoreResult:
        """
        Score ``measurements`` for ``condition``.

        Args:
            condition: Condition id, display name or Condition instance.
            measurements: Factor name -> value. Derived fields (e.g. bmi from
                          weight and height) are filled in when absent.

        Raises:
            UnknownConditionError: condition is not in the catalog.
            MissingFactorError: a factor's measurement is absent.
            InvalidValueError: a numeric measurement is unusable.
        """
        cond = self.catalog.get_condition(condition)
        resolved = cond.with_derived(measurements)

        missing = [name for name in cond.factors if name not in resolved]
        if missing:
            raise MissingFactorError(
                missing[0],
                condition=cond.id,
                details={"missing": missing},
            )

        contributions: List[FactorContribution] = []
        total = 0.0
        for name, rule in cond.factors.items():
            value = resolved[name]
            contribution = factor_contribution(rule, value, factor=name)
            item = FactorContribution(
                factor=name,
                value=value,
                contribution=contribution,
                weight=rule.weight,
            )
            contributions.append(item)
            total += item.weighted
            logger.debug(
                f"RiskScorer [{cond.id}] {name}={value!r} -> "
                f"{contribution:.3f} x {rule.weight} = {item.weighted:.3f}"
            )

        # Clamp before rounding; a huge negative total overflows to -inf.
        score = round_half_up(max(SCORE_MIN, min(total * 100, SCORE_MAX)))
        tier = classify_tier(score)

        logger.info(f"RiskScorer [{cond.id}]: score={score} tier={tier.value}")
        return ScoreResult(
            condition_id=cond.id,
            condition_name=cond.name,
            score=score,
            tier=tier,
            contributions=contributions,
        )

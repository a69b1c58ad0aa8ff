"""
Assessment Service

Runs the full prediction flow for one condition:

    measurements -> RiskScorer -> tier -> RecommendationGenerator -> Assessment

and, when a history sink is attached, records the result. Symptom matching
and the symptom list are exposed here too so callers have one entry point.

Usage:
    from riskcheck.services import AssessmentService, InMemoryHistory

    service = AssessmentService(history=InMemoryHistory())
    assessment = service.assess("diabetes", measurements)
    print(assessment.score, assessment.tier.value, assessment.recommendations)
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from riskcheck.core.catalog import Catalog, Condition, DEFAULT_CATALOG
from riskcheck.core.recommendations import RecommendationGenerator
from riskcheck.core.scoring import RiskScorer, RiskTier, ScoreResult
from riskcheck.core.symptoms import SymptomMatch, SymptomMatcher
from riskcheck.utils import get_logger
from .history import HistorySink, IdGenerator, make_entry

logger = get_logger(__name__)


@dataclass
class Assessment:
    """Everything a results view needs for one scored condition."""
    condition_id: str
    condition_name: str
    score: int
    tier: RiskTier
    recommendations: List[str] = field(default_factory=list)
    breakdown: List[Dict[str, Any]] = field(default_factory=list)
    measurements: Dict[str, Any] = field(default_factory=dict)
    history_id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "condition_id": self.condition_id,
            "condition": self.condition_name,
            "score": self.score,
            "tier": self.tier.value,
            "recommendations": self.recommendations,
            "breakdown": self.breakdown,
            "measurements": self.measurements,
            "history_id": self.history_id,
        }


class AssessmentService:
    """
    Facade over the scorer, recommender and symptom matcher.

    Holds no per-call state; the only side effect is the optional history
    append after a successful assessment.
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        history: Optional[HistorySink] = None,
        id_generator: Optional[Callable[[], int]] = None,
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        self.scorer = RiskScorer(self.catalog)
        self.recommender = RecommendationGenerator(self.catalog)
        self.matcher = SymptomMatcher(self.catalog)
        self.history = history
        self._next_id = id_generator or IdGenerator()

    # ── Entry points ──────────────────────────────────────────────────────
    def score_condition(
        self,
        condition_id: Union[str, Condition],
        measurements: Mapping[str, Any],
    ) -> ScoreResult:
        return self.scorer.score(condition_id, measurements)

    def get_recommendations(
        self,
        condition_id: Union[str, Condition],
        tier: Union[RiskTier, str],
        measurements: Mapping[str, Any],
    ) -> List[str]:
        return self.recommender.recommend(condition_id, tier, measurements)

    def match_symptoms(self, selected: Iterable[str]) -> Dict[str, SymptomMatch]:
        return self.matcher.match(selected)

    def list_all_symptoms(self) -> List[str]:
        return self.catalog.get_all_symptoms()

    # ── Full flow ─────────────────────────────────────────────────────────
    def assess(
        self,
        condition_id: Union[str, Condition],
        measurements: Mapping[str, Any],
    ) -> Assessment:
        """
        Score, classify and advise for one condition.

        Errors from scoring propagate before anything is recorded, so a
        failed call never leaves a history entry behind.
        """
        condition = self.catalog.get_condition(condition_id)
        resolved = condition.with_derived(measurements)

        result = self.scorer.score(condition, resolved)
        recommendations = self.recommender.recommend(condition, result.tier, resolved)

        assessment = Assessment(
            condition_id=condition.id,
            condition_name=condition.name,
            score=result.score,
            tier=result.tier,
            recommendations=recommendations,
            breakdown=result.breakdown(),
            measurements=resolved,
        )

        if self.history is not None:
            entry = make_entry(
                self._next_id(),
                condition.name,
                result.score,
                result.tier.value,
                resolved,
            )
            self.history.append(entry)
            assessment.history_id = entry.id
            logger.debug(f"AssessmentService: recorded history entry {entry.id}")

        logger.info(
            f"AssessmentService [{condition.id}]: {result.score} ({result.tier.value}), "
            f"{len(recommendations)} recommendation(s)"
        )
        return assessment

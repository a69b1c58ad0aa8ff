"""
Recommendation Generator

Builds the ordered advisory list for a scored condition: a tier prefix
(High / Moderate only), then conditional advice in table order, then the
condition's general advice.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from riskcheck.core.catalog import Catalog, Condition, DEFAULT_CATALOG
from riskcheck.core.scoring import RiskTier
from riskcheck.utils import InvalidValueError, MissingFactorError, get_logger
from .advisories import ADVISORY_TABLE, ConditionAdvisories, TIER_PREFIX

logger = get_logger(__name__)


class RecommendationGenerator:
    """Stateless lookup of advisories for a condition, tier and record."""

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        table: Optional[Dict[str, ConditionAdvisories]] = None,
    ):
        self.catalog = catalog or DEFAULT_CATALOG
        self.table = ADVISORY_TABLE if table is None else table

    def recommend(
        self,
        condition: Union[str, Condition],
        tier: Union[RiskTier, str],
        measurements: Mapping[str, Any],
    ) -> List[str]:
        """
        Return advisories for ``condition`` at ``tier``.

        Raises:
            UnknownConditionError: condition is not in the catalog.
            MissingFactorError: a conditional advisory's measurement is absent.
            ValueError: tier is not Low, Moderate or High.
        """
        cond = self.catalog.get_condition(condition)
        tier = RiskTier(tier)
        resolved = cond.with_derived(measurements)

        advisories = self.table.get(cond.id)
        if advisories is None:
            logger.debug(f"RecommendationGenerator: no advisory table for {cond.id}")
            advisories = ConditionAdvisories()

        recommendations: List[str] = []
        for advisory in advisories.conditional:
            if advisory.factor not in resolved:
                raise MissingFactorError(advisory.factor, condition=cond.id)
            value = resolved[advisory.factor]
            try:
                fired = advisory.applies(value)
            except InvalidValueError as exc:
                raise InvalidValueError(
                    f"Measurement '{advisory.factor}' must be a finite number",
                    factor=advisory.factor,
                    value=value,
                    details={"condition": cond.id},
                ) from exc
            if fired:
                recommendations.append(advisory.text)
        recommendations.extend(advisories.general)

        prefix = TIER_PREFIX.get(tier)
        if prefix:
            recommendations.insert(0, prefix)

        logger.debug(
            f"RecommendationGenerator [{cond.id}/{tier.value}]: "
            f"{len(recommendations)} advisory item(s)"
        )
        return recommendations

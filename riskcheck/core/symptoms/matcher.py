"""
Symptom Matcher

Compares a selection of symptoms against every catalog condition and
reports how much of each condition's symptom list was selected.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from riskcheck.core.catalog import Catalog, DEFAULT_CATALOG
from riskcheck.utils import EmptySelectionError, get_logger
from riskcheck.utils.numeric import round_half_up

logger = get_logger(__name__)


@dataclass
class SymptomMatch:
    """Overlap between the selection and one condition's symptoms."""
    match_count: int
    match_percentage: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "match_count": self.match_count,
            "match_percentage": self.match_percentage,
        }


class SymptomMatcher:

    def __init__(self, catalog: Optional[Catalog] = None):
        self.catalog = catalog or DEFAULT_CATALOG

    def match(self, selected: Iterable[str]) -> Dict[str, SymptomMatch]:
        """
        Match selected symptoms against the catalog.

        Returns:
            Condition display name -> SymptomMatch, in catalog order.
            Conditions with no overlap are left out.

        Raises:
            EmptySelectionError: nothing was selected.
        """
        if isinstance(selected, str):
            selected = [selected]
        chosen = set(selected)
        if not chosen:
            raise EmptySelectionError()

        analysis: Dict[str, SymptomMatch] = {}
        for condition in self.catalog:
            if not condition.symptoms:
                continue
            matched = sum(1 for symptom in condition.symptoms if symptom in chosen)
            if matched == 0:
                continue
            analysis[condition.name] = SymptomMatch(
                match_count=matched,
                match_percentage=round_half_up(matched / len(condition.symptoms) * 100),
            )

        logger.info(
            f"SymptomMatcher: {len(chosen)} symptom(s) selected, "
            f"{len(analysis)} condition(s) matched"
        )
        return analysis

"""
Condition Catalog

Read-only lookup over a fixed set of conditions.

Usage:
    from riskcheck.core.catalog import DEFAULT_CATALOG

    condition = DEFAULT_CATALOG.get_condition("diabetes")
    symptoms = DEFAULT_CATALOG.get_all_symptoms()
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Union

from riskcheck.utils import UnknownConditionError, get_logger
from .base import Condition
from .conditions import BUILTIN_CONDITIONS

logger = get_logger(__name__)


class Catalog:
    """
    Immutable registry of conditions, iterated in definition order.

    Conditions can be looked up by id or display name, case-insensitively.
    """

    def __init__(self, conditions: Iterable[Condition]):
        self._conditions: Dict[str, Condition] = {}
        self._by_name: Dict[str, Condition] = {}
        for condition in conditions:
            key = condition.id.lower()
            if key in self._conditions:
                raise ValueError(f"duplicate condition id {condition.id!r}")
            self._conditions[key] = condition
            self._by_name[condition.name.lower()] = condition
        logger.debug(f"Catalog loaded with {len(self._conditions)} condition(s)")

    def __iter__(self):
        return iter(self._conditions.values())

    def __len__(self) -> int:
        return len(self._conditions)

    def __contains__(self, condition_id: str) -> bool:
        key = str(condition_id).lower()
        return key in self._conditions or key in self._by_name

    def list_conditions(self) -> List[Condition]:
        return list(self._conditions.values())

    def get_condition(self, condition: Union[str, Condition]) -> Condition:
        """
        Resolve a condition id, display name or Condition instance.

        Raises:
            UnknownConditionError: if nothing in the catalog matches.
        """
        if isinstance(condition, Condition):
            return condition
        key = str(condition).strip().lower()
        found = self._conditions.get(key) or self._by_name.get(key)
        if found is None:
            raise UnknownConditionError(
                str(condition),
                details={"available": [c.id for c in self._conditions.values()]},
            )
        return found

    def get_all_symptoms(self) -> List[str]:
        """Unique symptoms across all conditions, in first-seen order."""
        seen = {}
        for condition in self._conditions.values():
            for symptom in condition.symptoms:
                seen.setdefault(symptom, None)
        return list(seen)


DEFAULT_CATALOG = Catalog(BUILTIN_CONDITIONS)

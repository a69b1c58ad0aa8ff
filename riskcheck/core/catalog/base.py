"""
Condition Catalog — Base Types

Defines the immutable data contracts the catalog is built from. A condition
owns its risk factors, each with a tagged rule the scorer dispatches on, so
new conditions never require scorer changes.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple


class RuleKind(str, Enum):
    """
    How a risk factor turns a measurement into a 0-1 contribution.

    GREATER_THAN – risk rises with the value (age, glucose, blood pressure)
    LESS_THAN    – risk rises as the value falls (max heart rate)
    CATEGORICAL  – fixed contribution per discrete answer ("yes", "high")
    """
    GREATER_THAN = "greater-than"
    LESS_THAN    = "less-than"
    CATEGORICAL  = "categorical"


@dataclass(frozen=True)
class RiskFactorRule:
    """
    A single weighted risk factor rule.

    Numeric rules carry a ``threshold``; categorical rules carry ``levels``
    (value -> contribution) and a ``default`` for unrecognized values.
    """
    kind: RuleKind
    weight: float
    threshold: Optional[float] = None
    levels: Mapping[str, float] = field(default_factory=dict)
    default: float = 0.0

    def __post_init__(self):
        if not 0 < self.weight <= 1:
            raise ValueError(f"weight must be in (0, 1], got {self.weight}")
        if self.kind is RuleKind.CATEGORICAL:
            if not self.levels:
                raise ValueError("categorical rule requires at least one level")
        elif self.threshold is None:
            raise ValueError(f"{self.kind.value} rule requires a threshold")
        elif self.threshold == 0:
            raise ValueError(f"{self.kind.value} rule threshold must be non-zero")
        object.__setattr__(self, "levels", MappingProxyType(dict(self.levels)))

    # ── Constructors ──────────────────────────────────────────────────────
    @classmethod
    def greater_than(cls, weight: float, threshold: float) -> "RiskFactorRule":
        return cls(RuleKind.GREATER_THAN, weight, threshold=threshold)

    @classmethod
    def less_than(cls, weight: float, threshold: float) -> "RiskFactorRule":
        return cls(RuleKind.LESS_THAN, weight, threshold=threshold)

    @classmethod
    def categorical(
        cls,
        weight: float,
        levels: Mapping[str, float],
        default: float = 0.0,
    ) -> "RiskFactorRule":
        return cls(RuleKind.CATEGORICAL, weight, levels=levels, default=default)

    @property
    def is_numeric(self) -> bool:
        return self.kind is not RuleKind.CATEGORICAL


@dataclass(frozen=True)
class Derivation:
    """A measurement computed from other measurements when not supplied."""
    name: str                                  # e.g. "bmi"
    inputs: Tuple[str, ...]                    # e.g. ("weight", "height")
    compute: Callable[..., float]              # called with inputs in order


@dataclass(frozen=True)
class Condition:
    """
    One scorable condition.

    ``factors`` preserves definition order; that order drives the score
    breakdown and any chart built from it.
    """
    id: str
    name: str
    factors: Mapping[str, RiskFactorRule]
    symptoms: Tuple[str, ...] = ()
    derivations: Tuple[Derivation, ...] = ()

    def __post_init__(self):
        if len(set(self.symptoms)) != len(self.symptoms):
            raise ValueError(f"duplicate symptoms in condition {self.id!r}")
        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))
        object.__setattr__(self, "symptoms", tuple(self.symptoms))
        object.__setattr__(self, "derivations", tuple(self.derivations))

    @property
    def factor_names(self) -> Tuple[str, ...]:
        return tuple(self.factors)

    def with_derived(self, measurements: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Return a copy of ``measurements`` with derived fields filled in.

        A derivation runs only when its target is absent and all of its
        inputs are present; supplied values always win.
        """
        resolved = dict(measurements)
        for derivation in self.derivations:
            if derivation.name in resolved:
                continue
            if all(key in resolved for key in derivation.inputs):
                resolved[derivation.name] = derivation.compute(
                    *(resolved[key] for key in derivation.inputs)
                )
        return resolved

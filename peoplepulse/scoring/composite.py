"""
Weighted Composite Scoring

Generic building blocks shared by the People Pulse Index and the corruption
sentiment engine:

- Piecewise step curves that map a raw indicator onto a 0-100 score
- Weighted blends that tolerate missing sub-scores
- A two-level composite scorer (factors -> categories -> index)
- Tier scales that turn a score into a categorical label

Raw indicators are not range-checked. Out-of-range values run through the
same curves and may push intermediate or final scores outside [0, 100];
callers decide whether to clamp.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from ..errors import PulseInputError, WeightConfigError

logger = logging.getLogger("peoplepulse.scoring.composite")

Curve = Callable[[float], float]


# =============================================================================
# Numeric helpers
# =============================================================================

def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from the floor, the way dashboards display scores."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def coerce_number(name: str, value: Any) -> Optional[float]:
    """
    Validate one raw indicator.

    Returns None for missing values (None, NaN, +/-inf) and a float otherwise.
    Raises PulseInputError when the value is not a real number at all.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise PulseInputError(
            f"Indicator '{name}' must be a real number, got {type(value).__name__}"
        )
    number = float(value)
    if not math.isfinite(number):
        return None
    return number


def completeness_confidence(values: Mapping[str, Optional[float]], fields: Sequence[str]) -> int:
    """Percentage of expected fields that hold finite numbers."""
    if not fields:
        return 0
    valid = sum(1 for name in fields if values.get(name) is not None)
    return int(round_half_up(valid / len(fields) * 100))


# =============================================================================
# Step curves
# =============================================================================

@dataclass(frozen=True)
class Band:
    """
    One step of a piecewise curve.

    A bound of None is open-ended. Bounds are inclusive unless the matching
    ``include_*`` flag is False.
    """
    low: Optional[float]
    high: Optional[float]
    score: float
    include_low: bool = True
    include_high: bool = True

    def contains(self, value: float) -> bool:
        if self.low is not None:
            if value < self.low or (value == self.low and not self.include_low):
                return False
        if self.high is not None:
            if value > self.high or (value == self.high and not self.include_high):
                return False
        return True


class StepCurve:
    """
    Piecewise step normalization.

    Bands are tested in order; the first band containing the value wins.
    Values outside every band go through ``fallback``.
    """

    def __init__(
        self,
        bands: Sequence[Band],
        fallback: Curve,
        transform: Optional[Curve] = None,
    ):
        self.bands = tuple(bands)
        self.fallback = fallback
        self.transform = transform

    def __call__(self, value: float) -> float:
        x = self.transform(value) if self.transform else value
        for band in self.bands:
            if band.contains(x):
                return band.score
        return self.fallback(x)


def linear(intercept: float, slope: float, floor: Optional[float] = 0.0) -> Curve:
    """Return ``max(floor, intercept + slope * x)``."""

    def _curve(x: float) -> float:
        score = intercept + slope * x
        return score if floor is None else max(floor, score)

    return _curve


# =============================================================================
# Weighted blends
# =============================================================================

def _validate_weights(weights: Mapping[str, float]) -> Dict[str, float]:
    checked: Dict[str, float] = {}
    for name, weight in weights.items():
        w = coerce_number(name, weight)
        if w is None or w < 0:
            raise WeightConfigError(f"Weight '{name}' must be a non-negative number, got {weight!r}")
        checked[name] = w
    if checked and sum(checked.values()) <= 0:
        raise WeightConfigError("At least one weight must be positive")
    return checked


class WeightedBlend:
    """
    Weighted sum over named sub-scores.

    When some sub-scores are missing the remaining weights are scaled up so
    they still carry the full weight of the blend. A blend with no scores
    present returns None.
    """

    def __init__(self, weights: Mapping[str, float]):
        self.weights = _validate_weights(weights)
        self.total_weight = sum(self.weights.values())

    def combine(self, scores: Mapping[str, Optional[float]]) -> Optional[float]:
        value = 0.0
        present_weight = 0.0
        present = 0
        for name, weight in self.weights.items():
            score = scores.get(name)
            if score is None or (isinstance(score, float) and math.isnan(score)):
                continue
            value += score * weight
            present_weight += weight
            present += 1

        if present == 0 or present_weight == 0:
            return None
        if present < len(self.weights):
            value *= self.total_weight / present_weight
        return value


# =============================================================================
# Composite scorer
# =============================================================================

@dataclass(frozen=True)
class Category:
    """A named group of factors, blended by ``weights`` after normalization."""
    name: str
    weights: Mapping[str, float]
    curves: Mapping[str, Curve] = field(default_factory=dict)


@dataclass(frozen=True)
class CompositeBreakdown:
    """Raw output of a CompositeScorer run, before rounding or labelling."""
    index: float
    components: Dict[str, Optional[float]]
    confidence: int
    missing: Tuple[str, ...] = ()


class CompositeScorer:
    """
    Two-level weighted composite.

    Each raw factor is normalized by its category's curve (identity when no
    curve is registered), blended into a category score, and category scores
    are blended into the index with ``category_weights``.
    """

    def __init__(self, categories: Sequence[Category], category_weights: Mapping[str, float]):
        names = [c.name for c in categories]
        unknown = set(category_weights) - set(names)
        if unknown:
            raise WeightConfigError(f"Unknown categories in weights: {sorted(unknown)}")

        self.categories = tuple(categories)
        self._blends = {c.name: WeightedBlend(c.weights) for c in categories}
        self._index_blend = WeightedBlend({n: category_weights.get(n, 0.0) for n in names})

    @property
    def category_weights(self) -> Dict[str, float]:
        return dict(self._index_blend.weights)

    @property
    def fields(self) -> Tuple[str, ...]:
        """All factor names in declaration order."""
        out: List[str] = []
        for category in self.categories:
            out.extend(category.weights)
        return tuple(out)

    def with_weights(self, **weights: float) -> "CompositeScorer":
        """Return a copy with some category weights replaced."""
        unknown = set(weights) - {c.name for c in self.categories}
        if unknown:
            raise WeightConfigError(f"Unknown categories in weights: {sorted(unknown)}")
        merged = {**self.category_weights, **weights}
        return CompositeScorer(self.categories, merged)

    def normalize(self, values: Mapping[str, Any]) -> Dict[str, Optional[float]]:
        """Validate raw factors and push them through their curves."""
        normalized: Dict[str, Optional[float]] = {}
        for category in self.categories:
            for name in category.weights:
                raw = coerce_number(name, values.get(name))
                if raw is None:
                    normalized[name] = None
                    continue
                curve = category.curves.get(name)
                normalized[name] = curve(raw) if curve else raw
        return normalized

    def score(self, values: Mapping[str, Any]) -> CompositeBreakdown:
        if not isinstance(values, Mapping):
            raise PulseInputError(f"Factors must be a mapping, got {type(values).__name__}")

        raw = {name: coerce_number(name, values.get(name)) for name in self.fields}
        normalized = self.normalize(values)

        components: Dict[str, Optional[float]] = {}
        for category in self.categories:
            components[category.name] = self._blends[category.name].combine(normalized)

        index = self._index_blend.combine(components)
        missing = tuple(name for name in self.fields if raw[name] is None)
        if missing:
            logger.debug(f"Composite scored with missing factors: {', '.join(missing)}")

        return CompositeBreakdown(
            index=0.0 if index is None else index,
            components=components,
            confidence=completeness_confidence(raw, self.fields),
            missing=missing,
        )


# =============================================================================
# Tier scales
# =============================================================================

class TierScale:
    """
    Ordered threshold classifier.

    ``tiers`` is a sequence of (threshold, label) pairs, highest first. A value
    lands in the first tier whose threshold it reaches (``>=``; ``>`` when
    ``strict``). Anything below every threshold, or NaN, gets ``default``.
    """

    def __init__(self, tiers: Iterable[Tuple[float, str]], default: str, strict: bool = False):
        self.tiers = tuple(sorted(tiers, key=lambda t: t[0], reverse=True))
        self.default = default
        self.strict = strict

    @property
    def boundaries(self) -> Tuple[float, ...]:
        return tuple(sorted(t[0] for t in self.tiers))

    @property
    def labels(self) -> Tuple[str, ...]:
        """Labels from lowest to highest tier."""
        return (self.default,) + tuple(label for _, label in reversed(self.tiers))

    def classify(self, value: float) -> str:
        for threshold, label in self.tiers:
            if value > threshold or (not self.strict and value == threshold):
                return label
        return self.default

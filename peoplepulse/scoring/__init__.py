"""
Composite scoring: the generic weighted scorer and the People Pulse Index.
"""

from .composite import (
    Band,
    StepCurve,
    WeightedBlend,
    Category,
    CompositeBreakdown,
    CompositeScorer,
    TierScale,
    round_half_up,
)

from .ppi import (
    PPICalculator,
    PPICategory,
    PPIFactors,
    PPIResult,
    Trend,
    compute_ppi,
    history_frame,
)

__all__ = [
    # Composite
    "Band", "StepCurve", "WeightedBlend", "Category", "CompositeBreakdown",
    "CompositeScorer", "TierScale", "round_half_up",
    # PPI
    "PPICalculator", "PPICategory", "PPIFactors", "PPIResult", "Trend",
    "compute_ppi", "history_frame",
]

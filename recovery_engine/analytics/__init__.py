"""Recovery analytics — modifiers, compound fatigue, condition score, recommendation."""

from recovery_engine.analytics.condition import compute_condition_score, hrv_z_score
from recovery_engine.analytics.fatigue import compute_compound_fatigue
from recovery_engine.analytics.modifiers import calculate_modifiers
from recovery_engine.analytics.recommendation import recommend_workout

__all__ = [
    "calculate_modifiers",
    "compute_compound_fatigue",
    "compute_condition_score",
    "hrv_z_score",
    "recommend_workout",
]

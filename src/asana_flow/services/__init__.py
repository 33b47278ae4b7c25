"""Scoring and aggregation services."""

from .body_map import analyze_body_map
from .recovery import analyze, recommend_recovery
from .sequencer import (
    ScoringWeights,
    SequenceRecommender,
    recommend,
    recommend_cooldown,
    recommend_start,
)
from .warmup import generate_cooldown, generate_warmup

__all__ = [
    "analyze",
    "analyze_body_map",
    "generate_cooldown",
    "generate_warmup",
    "recommend",
    "recommend_cooldown",
    "recommend_recovery",
    "recommend_start",
    "ScoringWeights",
    "SequenceRecommender",
]

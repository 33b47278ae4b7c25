"""Data models for asana-flow."""

from .body_map import BodyMapReport, PoseCount, RegionFocus
from .history import PracticeLog, PracticeRecord
from .poses import COMMON_POSES, Category, Pose
from .recommendation import Recommendation, SessionContext
from .recovery import (
    PracticeAnalysis,
    RecoveryRecommendation,
    RecoveryType,
    RegionActivity,
)
from .regions import BodyRegion, Side
from .sequence import GeneratedSequence, SequenceItem

__all__ = [
    "BodyMapReport",
    "BodyRegion",
    "Category",
    "COMMON_POSES",
    "GeneratedSequence",
    "Pose",
    "PoseCount",
    "PracticeAnalysis",
    "PracticeLog",
    "PracticeRecord",
    "Recommendation",
    "RecoveryRecommendation",
    "RecoveryType",
    "RegionActivity",
    "RegionFocus",
    "SequenceItem",
    "SessionContext",
    "Side",
]

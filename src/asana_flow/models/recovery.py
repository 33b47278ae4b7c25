"""Recovery analysis models and the flat recovery region vocabulary.

The recovery vocabulary is coarser than the canonical
body-map taxonomy in ``regions.py``; the two are not reconciled.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Mapping

# Flat region vocabulary tracked by the recovery analyzer
RECOVERY_REGIONS: tuple[str, ...] = (
    "back",
    "core",
    "hamstrings",
    "hips",
    "shoulders",
    "chest",
    "legs",
    "arms",
    "spine",
    "neck",
    "glutes",
    "ankles",
    "wrists",
)

# Counter-poses that help a heavily worked region recover
RECOVERY_POSES: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "back": ("Child's Pose", "Cat-Cow Stretch", "Supine Twist", "Knees to Chest"),
        "shoulders": (
            "Thread the Needle",
            "Eagle Arms",
            "Cow Face Arms",
            "Shoulder Rolls",
        ),
        "hips": ("Reclined Pigeon", "Happy Baby", "Butterfly Pose", "Supine Hip Circles"),
        "hamstrings": (
            "Reclined Hand to Big Toe",
            "Supine Leg Stretch",
            "Seated Forward Fold",
        ),
        "core": ("Supine Twist", "Reclined Butterfly", "Savasana"),
        "legs": ("Legs Up the Wall", "Reclined Hand to Big Toe", "Happy Baby"),
        "neck": ("Neck Rolls", "Ear to Shoulder", "Supported Fish Pose"),
        "chest": ("Supported Fish Pose", "Thread the Needle", "Supine Twist"),
        "spine": ("Cat-Cow Stretch", "Supine Twist", "Child's Pose", "Sphinx Pose"),
    }
)

# General restorative poses used to fill out a suggestion list
RESTORATIVE_POSES: tuple[str, ...] = (
    "Child's Pose",
    "Savasana",
    "Legs Up the Wall",
    "Reclined Butterfly",
    "Supported Bridge",
    "Supine Twist",
    "Happy Baby",
    "Reclined Pigeon",
)

NO_PRACTICE_SENTINEL = 999


class RecoveryType(str, Enum):
    """Kind of recovery day being suggested."""

    REST = "rest"
    GENTLE = "gentle"
    RESTORATIVE = "restorative"
    ACTIVE_RECOVERY = "active_recovery"


@dataclass
class RegionActivity:
    """How much a recovery region was worked in the analysis window."""

    region: str
    count: int = 0
    intensity: int = 0  # 0-100, relative to the busiest region
    last_worked: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "region": self.region,
            "count": self.count,
            "intensity": self.intensity,
            "last_worked": self.last_worked.isoformat() if self.last_worked else None,
        }


@dataclass
class PracticeAnalysis:
    """Summary of recent practice load."""

    total_sessions: int = 0
    total_minutes: float = 0
    average_session_length: int = 0
    days_since_last_practice: int = NO_PRACTICE_SENTINEL
    region_activity: list[RegionActivity] = field(default_factory=list)
    category_distribution: dict[str, int] = field(default_factory=dict)
    intensity_score: int = 0
    needs_rest: bool = False
    rest_reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_sessions": self.total_sessions,
            "total_minutes": self.total_minutes,
            "average_session_length": self.average_session_length,
            "days_since_last_practice": self.days_since_last_practice,
            "region_activity": [a.to_dict() for a in self.region_activity],
            "category_distribution": self.category_distribution,
            "intensity_score": self.intensity_score,
            "needs_rest": self.needs_rest,
            "rest_reasons": self.rest_reasons,
        }


@dataclass
class RecoveryRecommendation:
    """Suggested rest or recovery practice."""

    type: RecoveryType
    title: str
    description: str
    suggested_poses: list[str] = field(default_factory=list)
    suggested_duration: int = 20  # Minutes
    focus_areas: list[str] = field(default_factory=list)
    avoid_areas: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
            "suggested_poses": self.suggested_poses,
            "suggested_duration": self.suggested_duration,
            "focus_areas": self.focus_areas,
            "avoid_areas": self.avoid_areas,
        }

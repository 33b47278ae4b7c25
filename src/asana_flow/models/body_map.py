"""Body map coverage report models."""

from dataclasses import dataclass, field
from datetime import datetime

from .regions import BodyRegion, Side


@dataclass
class PoseCount:
    """A pose's contribution to a region."""

    pose_id: str
    name: str
    count: int

    def to_dict(self) -> dict:
        return {"pose_id": self.pose_id, "name": self.name, "count": self.count}


@dataclass
class RegionFocus:
    """Practice coverage for one canonical region."""

    region: BodyRegion
    label: str
    side: Side
    practice_count: int = 0
    percentage: int = 0  # Share of total practices, regions may overlap
    intensity: int = 0  # 0-100, relative to the busiest region
    last_practiced: datetime | None = None
    top_poses: list[PoseCount] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "region": self.region.value,
            "label": self.label,
            "side": self.side.value,
            "practice_count": self.practice_count,
            "percentage": self.percentage,
            "intensity": self.intensity,
            "last_practiced": (
                self.last_practiced.isoformat() if self.last_practiced else None
            ),
            "top_poses": [p.to_dict() for p in self.top_poses],
        }


@dataclass
class BodyMapReport:
    """Per-region focus map for a practice window.

    Percentages are not constrained to sum to 100: a pose targeting several
    regions credits each of them with its full count.
    """

    regions: dict[BodyRegion, RegionFocus]
    total_practices: int = 0
    balance_score: int = 100  # 100 = perfectly symmetric front/back
    front_focus: int = 50
    back_focus: int = 50
    recommendations: list[str] = field(default_factory=list)
    window_days: int = 30

    def get_region(self, region: BodyRegion | str) -> RegionFocus:
        """Look up a region by enum or id string."""
        return self.regions[BodyRegion(region)]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_practices": self.total_practices,
            "regions": {
                region.value: focus.to_dict() for region, focus in self.regions.items()
            },
            "balance_score": self.balance_score,
            "front_focus": self.front_focus,
            "back_focus": self.back_focus,
            "recommendations": self.recommendations,
            "window_days": self.window_days,
        }

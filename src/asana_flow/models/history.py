"""Practice history records supplied by the data-access layer.

Timestamps are held as naive UTC. Aware values are converted on the way in
so that offset and offset-free history can be compared.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .poses import Pose


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def utc_now() -> datetime:
    """Current time as naive UTC."""
    return to_naive_utc(datetime.now(timezone.utc))


def _parse_datetime(value: str | datetime | None) -> datetime | None:
    if value is None:
        return None
    if not isinstance(value, datetime):
        # fromisoformat only accepts "Z" from Python 3.11
        if value.endswith(("Z", "z")):
            value = value[:-1] + "+00:00"
        value = datetime.fromisoformat(value)
    return to_naive_utc(value)


@dataclass
class PracticeRecord:
    """Per-pose mastery totals joined with the pose's target regions.

    Negative counts and durations are clamped to zero.
    """

    pose_id: str
    pose_name: str
    target_regions: list[str]
    practice_count: int
    total_duration_seconds: int = 0
    last_practiced: datetime | None = None

    def __post_init__(self):
        self.practice_count = max(0, int(self.practice_count))
        self.total_duration_seconds = max(0, int(self.total_duration_seconds))
        self.last_practiced = _parse_datetime(self.last_practiced)

    @classmethod
    def from_pose(
        cls,
        pose: Pose,
        practice_count: int,
        total_duration_seconds: int = 0,
        last_practiced: datetime | None = None,
    ) -> "PracticeRecord":
        """Build a record from a catalog pose and its history totals."""
        return cls(
            pose_id=pose.id,
            pose_name=pose.name_english,
            target_regions=list(pose.target_regions),
            practice_count=practice_count,
            total_duration_seconds=total_duration_seconds,
            last_practiced=last_practiced,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "pose_id": self.pose_id,
            "pose_name": self.pose_name,
            "target_regions": self.target_regions,
            "practice_count": self.practice_count,
            "total_duration_seconds": self.total_duration_seconds,
            "last_practiced": (
                self.last_practiced.isoformat() if self.last_practiced else None
            ),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PracticeRecord":
        """Create from dictionary."""
        return cls(
            pose_id=str(data["pose_id"]),
            pose_name=data.get("pose_name", str(data["pose_id"])),
            target_regions=list(data.get("target_regions") or []),
            practice_count=data.get("practice_count", 0),
            total_duration_seconds=data.get("total_duration_seconds", 0),
            last_practiced=_parse_datetime(data.get("last_practiced")),
        )


@dataclass
class PracticeLog:
    """A single logged practice session."""

    duration_minutes: float
    created_at: datetime
    poses: list[str] | None = field(default_factory=list)  # Pose names or ids

    def __post_init__(self):
        self.duration_minutes = max(0, self.duration_minutes)
        self.created_at = _parse_datetime(self.created_at)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "duration_minutes": self.duration_minutes,
            "created_at": self.created_at.isoformat(),
            "poses": self.poses,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PracticeLog":
        """Create from dictionary."""
        return cls(
            duration_minutes=data.get("duration_minutes", 0),
            created_at=_parse_datetime(data["created_at"]),
            poses=data.get("poses"),
        )

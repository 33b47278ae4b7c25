"""Generated warm-up and cool-down sequence models."""

from dataclasses import dataclass, field

from .poses import Pose


@dataclass
class SequenceItem:
    """A pose placed in a generated sequence."""

    pose: Pose
    duration: int  # Seconds
    purpose: str

    def to_dict(self) -> dict:
        return {
            "pose_id": self.pose.id,
            "pose": self.pose.to_dict(),
            "duration": self.duration,
            "purpose": self.purpose,
        }


@dataclass
class GeneratedSequence:
    """A short sequence built around a main program."""

    items: list[SequenceItem] = field(default_factory=list)
    total_duration: int = 0  # Seconds
    description: str = ""

    @property
    def pose_ids(self) -> list[str]:
        return [item.pose.id for item in self.items]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "items": [item.to_dict() for item in self.items],
            "total_duration": self.total_duration,
            "description": self.description,
        }

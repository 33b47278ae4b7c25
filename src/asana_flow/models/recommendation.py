"""Session context and next-pose recommendation models."""

from dataclasses import dataclass, field

from .poses import Pose


def clamp_progress(value: float) -> float:
    """Clamp session progress into [0, 1]."""
    return max(0.0, min(1.0, float(value)))


@dataclass
class SessionContext:
    """State of an in-progress practice session.

    session_progress outside [0, 1] is clamped rather than rejected.
    """

    current_pose: Pose | None = None
    session_poses: list[Pose] = field(default_factory=list)  # Oldest first
    session_progress: float = 0.0
    goals: list[str] = field(default_factory=list)

    def __post_init__(self):
        self.session_progress = clamp_progress(self.session_progress)


@dataclass
class Recommendation:
    """A ranked candidate for the next pose."""

    pose: Pose
    score: float
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "pose": self.pose.to_dict(),
            "score": self.score,
            "reasons": self.reasons,
        }

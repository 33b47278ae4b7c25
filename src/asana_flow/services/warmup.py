"""Warm-up and cool-down sequence generation around a main program."""

from collections import Counter
from dataclasses import dataclass, field

from ..models.poses import Category, Pose
from ..models.sequence import GeneratedSequence, SequenceItem
from ..utils.scoring import round_half_up

# Warm-up pose categories, in order of priority
WARMUP_CATEGORIES: tuple[Category, ...] = (
    Category.SEATED,
    Category.SUPINE,
    Category.PRONE,
    Category.STANDING,
)

MOBILITY_PATTERNS: tuple[str, ...] = ("cat", "cow", "stretch", "circle")
BACKBEND_PREP_PATTERNS: tuple[str, ...] = ("cobra", "sphinx", "bridge")
TWIST_PATTERNS: tuple[str, ...] = ("supine", "reclined", "twist")

# English name fragments of poses suited to winding down
COOLDOWN_POSE_PATTERNS: tuple[str, ...] = (
    "corpse",
    "savasana",
    "child",
    "supine",
    "reclined",
    "twist",
    "forward",
    "seated",
    "butterfly",
    "happy baby",
    "legs up",
)


@dataclass
class ProgramFocus:
    """What a main program works on."""

    categories: list[Category] = field(default_factory=list)  # Most frequent first
    regions: list[str] = field(default_factory=list)  # Top 5 target tags
    difficulty: float = 1.0
    has_inversions: bool = False
    has_backbends: bool = False


def analyze_program_focus(program_poses: list[Pose]) -> ProgramFocus:
    """Summarize categories, target regions and difficulty of a program."""
    if not program_poses:
        return ProgramFocus()

    category_counts = Counter(pose.category for pose in program_poses)
    region_counts = Counter(
        tag.lower() for pose in program_poses for tag in pose.target_regions
    )

    return ProgramFocus(
        categories=[category for category, _ in category_counts.most_common()],
        regions=[region for region, _ in region_counts.most_common(5)],
        difficulty=sum(pose.difficulty for pose in program_poses) / len(program_poses),
        has_inversions=Category.INVERSION in category_counts,
        has_backbends=Category.BACK_BEND in category_counts,
    )


def find_matching_poses(
    catalog: list[Pose] | tuple[Pose, ...],
    categories: tuple[Category, ...] | None = None,
    name_patterns: tuple[str, ...] | None = None,
    max_difficulty: float | None = None,
    regions: list[str] | None = None,
    exclude: set[str] | None = None,
) -> list[Pose]:
    """Filter the catalog by category, difficulty and name/region hints.

    Category, difficulty and exclusion are hard filters. When name patterns
    or regions are given, a pose must match at least one of them.
    """
    exclude = exclude or set()
    matches = []

    for pose in catalog:
        if pose.id in exclude:
            continue
        if categories and pose.category not in categories:
            continue
        if max_difficulty and pose.difficulty > max_difficulty:
            continue

        if not name_patterns and not regions:
            matches.append(pose)
            continue

        name = pose.name_english.lower()
        if name_patterns and any(pattern.lower() in name for pattern in name_patterns):
            matches.append(pose)
            continue

        if regions:
            pose_regions = {tag.lower() for tag in pose.target_regions}
            if any(region.lower() in pose_regions for region in regions):
                matches.append(pose)

    return matches


class _SequenceBuilder:
    """Accumulates items while tracking total time and used poses."""

    def __init__(self, target_seconds: int, exclude: set[str]):
        self.target_seconds = target_seconds
        self.items: list[SequenceItem] = []
        self.total = 0
        self._exclude = set(exclude)

    @property
    def used(self) -> set[str]:
        return self._exclude | {item.pose.id for item in self.items}

    def add(self, pose: Pose, duration: int, purpose: str, budget_fraction: float) -> None:
        if self.total >= self.target_seconds * budget_fraction:
            return
        self.items.append(SequenceItem(pose=pose, duration=duration, purpose=purpose))
        self.total += duration


def generate_warmup(
    program_poses: list[Pose],
    catalog: list[Pose] | tuple[Pose, ...],
    target_minutes: int = 5,
) -> GeneratedSequence:
    """Build a warm-up that prepares the body for the program's main poses."""
    focus = analyze_program_focus(program_poses)
    builder = _SequenceBuilder(
        target_minutes * 60, {pose.id for pose in program_poses}
    )

    # Centering
    for pose in find_matching_poses(
        catalog,
        categories=(Category.SEATED, Category.SUPINE),
        max_difficulty=2,
        exclude=builder.used,
    )[:2]:
        builder.add(pose, min(30, pose.duration_seconds), "Centering & breath awareness", 0.3)

    # Joint mobility around the program's focus regions
    for pose in find_matching_poses(
        catalog,
        name_patterns=MOBILITY_PATTERNS,
        max_difficulty=2,
        regions=focus.regions,
        exclude=builder.used,
    )[:2]:
        builder.add(pose, min(45, pose.duration_seconds), "Joint mobility & preparation", 0.6)

    # Preparatory poses
    for pose in find_matching_poses(
        catalog,
        categories=WARMUP_CATEGORIES,
        max_difficulty=min(3, focus.difficulty),
        regions=focus.regions,
        exclude=builder.used,
    )[:3]:
        builder.add(pose, min(45, pose.duration_seconds), "Building heat & preparation", 1.0)

    if focus.has_backbends:
        prep = find_matching_poses(
            catalog,
            name_patterns=BACKBEND_PREP_PATTERNS,
            max_difficulty=2,
            exclude=builder.used,
        )
        if prep:
            builder.add(prep[0], 30, "Backbend preparation", 1.0)

    regions = " & ".join(focus.regions[:2]) or "the whole body"
    return GeneratedSequence(
        items=builder.items,
        total_duration=builder.total,
        description=f"{round_half_up(builder.total / 60)} minute warm-up focusing on {regions}",
    )


def generate_cooldown(
    program_poses: list[Pose],
    catalog: list[Pose] | tuple[Pose, ...],
    target_minutes: int = 5,
) -> GeneratedSequence:
    """Build a cool-down of counter-poses, twists and final relaxation."""
    focus = analyze_program_focus(program_poses)
    builder = _SequenceBuilder(
        target_minutes * 60, {pose.id for pose in program_poses}
    )

    # Counter-poses for the worked areas
    for pose in find_matching_poses(
        catalog,
        categories=(Category.SUPINE, Category.SEATED),
        regions=focus.regions,
        max_difficulty=2,
        exclude=builder.used,
    )[:2]:
        builder.add(pose, min(45, pose.duration_seconds), "Counter-pose & release", 0.4)

    for pose in find_matching_poses(
        catalog,
        categories=(Category.TWIST,),
        name_patterns=TWIST_PATTERNS,
        max_difficulty=2,
        exclude=builder.used,
    )[:1]:
        builder.add(pose, min(60, pose.duration_seconds), "Spinal release & relaxation", 0.6)

    for pose in find_matching_poses(
        catalog,
        name_patterns=COOLDOWN_POSE_PATTERNS,
        max_difficulty=1,
        exclude=builder.used,
    )[:2]:
        builder.add(pose, min(60, pose.duration_seconds), "Deep relaxation", 0.85)

    # Always close with corpse pose when the catalog has one
    savasana = next(
        (
            pose
            for pose in catalog
            if "corpse" in pose.name_english.lower()
            or "savasana" in pose.name_native.lower()
        ),
        None,
    )
    if savasana and savasana.id not in builder.used:
        remaining = max(60, builder.target_seconds - builder.total)
        duration = min(remaining, 120)
        builder.items.append(
            SequenceItem(pose=savasana, duration=duration, purpose="Final relaxation")
        )
        builder.total += duration

    return GeneratedSequence(
        items=builder.items,
        total_duration=builder.total,
        description=f"{round_half_up(builder.total / 60)} minute cool-down with relaxation",
    )

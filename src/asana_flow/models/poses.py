"""Pose definitions, category tables and the built-in pose library."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 10


class Category(str, Enum):
    """Pose classifications used for flow and intensity weighting."""

    STANDING = "STANDING"
    SEATED = "SEATED"
    PRONE = "PRONE"
    SUPINE = "SUPINE"
    INVERSION = "INVERSION"
    BALANCE = "BALANCE"
    TWIST = "TWIST"
    FORWARD_BEND = "FORWARD_BEND"
    BACK_BEND = "BACK_BEND"


def clamp_difficulty(value: int) -> int:
    """Clamp a difficulty rating into the 1-10 scale."""
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, int(value)))


@dataclass(frozen=True)
class Pose:
    """A catalog pose. Reference data, never mutated by the engine."""

    id: str
    name_english: str
    name_native: str
    category: Category
    difficulty: int
    target_regions: tuple[str, ...] = ()
    duration_seconds: int = 30  # Default hold, used by warm-up/cool-down builder

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name_english": self.name_english,
            "name_native": self.name_native,
            "category": self.category.value,
            "difficulty": self.difficulty,
            "target_regions": list(self.target_regions),
            "duration_seconds": self.duration_seconds,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Pose":
        """Create from dictionary.

        Difficulty is clamped into range; an unknown category raises ValueError.
        """
        return cls(
            id=str(data["id"]),
            name_english=data["name_english"],
            name_native=data.get("name_native", ""),
            category=Category(str(data["category"]).upper()),
            difficulty=clamp_difficulty(data.get("difficulty", MIN_DIFFICULTY)),
            target_regions=tuple(data.get("target_regions") or ()),
            duration_seconds=max(0, int(data.get("duration_seconds", 30))),
        )


# Category flow preferences: which categories follow well from another.
# Asymmetric: STANDING -> SEATED is not SEATED -> STANDING.
_FLOW_PREFERENCES: dict[Category, tuple[tuple[Category, ...], ...]] = {
    Category.STANDING: (
        (Category.STANDING, Category.BALANCE, Category.FORWARD_BEND, Category.TWIST),
        (Category.SEATED, Category.PRONE),
        (Category.SUPINE, Category.INVERSION),
    ),
    Category.SEATED: (
        (Category.SEATED, Category.FORWARD_BEND, Category.TWIST),
        (Category.PRONE, Category.SUPINE),
        (Category.STANDING, Category.INVERSION),
    ),
    Category.PRONE: (
        (Category.PRONE, Category.BACK_BEND, Category.SUPINE),
        (Category.SEATED,),
        (Category.STANDING, Category.INVERSION),
    ),
    Category.SUPINE: (
        (Category.SUPINE, Category.TWIST, Category.FORWARD_BEND),
        (Category.SEATED, Category.PRONE),
        (Category.STANDING, Category.INVERSION),
    ),
    Category.INVERSION: (
        (Category.STANDING, Category.SEATED, Category.SUPINE),
        (Category.FORWARD_BEND,),
        (Category.BACK_BEND, Category.INVERSION),
    ),
    Category.BALANCE: (
        (Category.STANDING, Category.FORWARD_BEND),
        (Category.SEATED, Category.BALANCE),
        (Category.PRONE, Category.SUPINE, Category.INVERSION),
    ),
    Category.TWIST: (
        (Category.FORWARD_BEND, Category.SEATED, Category.SUPINE),
        (Category.STANDING, Category.TWIST),
        (Category.BACK_BEND, Category.INVERSION),
    ),
    Category.FORWARD_BEND: (
        (Category.BACK_BEND, Category.TWIST, Category.SEATED, Category.SUPINE),
        (Category.STANDING, Category.FORWARD_BEND),
        (Category.INVERSION,),
    ),
    Category.BACK_BEND: (
        (Category.FORWARD_BEND, Category.TWIST, Category.SUPINE),
        (Category.PRONE, Category.STANDING),
        (Category.BACK_BEND, Category.INVERSION),
    ),
}

FLOW_GOOD = 1.0
FLOW_NEUTRAL = 0.6
FLOW_AVOID = 0.2
FLOW_UNLISTED = 0.5


def _build_flow_table() -> Mapping[tuple[Category, Category], float]:
    table: dict[tuple[Category, Category], float] = {}
    for source, (good, neutral, avoid) in _FLOW_PREFERENCES.items():
        for target in Category:
            if target in good:
                table[(source, target)] = FLOW_GOOD
            elif target in neutral:
                table[(source, target)] = FLOW_NEUTRAL
            elif target in avoid:
                table[(source, target)] = FLOW_AVOID
            else:
                table[(source, target)] = FLOW_UNLISTED
    return MappingProxyType(table)


# (from, to) -> transition score in [0, 1]
CATEGORY_FLOW: Mapping[tuple[Category, Category], float] = _build_flow_table()

# Relative load of a pose category (1-5 scale)
CATEGORY_INTENSITY: Mapping[Category, int] = MappingProxyType(
    {
        Category.STANDING: 3,
        Category.SEATED: 2,
        Category.PRONE: 2,
        Category.SUPINE: 1,
        Category.INVERSION: 4,
        Category.BALANCE: 4,
        Category.TWIST: 2,
        Category.FORWARD_BEND: 2,
        Category.BACK_BEND: 4,
    }
)
DEFAULT_CATEGORY_INTENSITY = 2


# Built-in pose library, used when no catalog file is available
COMMON_POSES: tuple[Pose, ...] = (
    # Standing
    Pose(
        id="mountain",
        name_english="Mountain Pose",
        name_native="Tadasana",
        category=Category.STANDING,
        difficulty=1,
        target_regions=("legs", "core", "spine"),
        duration_seconds=30,
    ),
    Pose(
        id="warrior-1",
        name_english="Warrior I",
        name_native="Virabhadrasana I",
        category=Category.STANDING,
        difficulty=2,
        target_regions=("legs", "hips", "shoulders"),
        duration_seconds=45,
    ),
    Pose(
        id="warrior-2",
        name_english="Warrior II",
        name_native="Virabhadrasana II",
        category=Category.STANDING,
        difficulty=2,
        target_regions=("legs", "hips", "arms"),
        duration_seconds=45,
    ),
    Pose(
        id="triangle",
        name_english="Triangle Pose",
        name_native="Trikonasana",
        category=Category.STANDING,
        difficulty=3,
        target_regions=("hamstrings", "hips", "spine"),
        duration_seconds=45,
    ),
    Pose(
        id="chair",
        name_english="Chair Pose",
        name_native="Utkatasana",
        category=Category.STANDING,
        difficulty=3,
        target_regions=("quadriceps", "glutes", "core"),
        duration_seconds=30,
    ),
    # Balance
    Pose(
        id="tree",
        name_english="Tree Pose",
        name_native="Vrksasana",
        category=Category.BALANCE,
        difficulty=2,
        target_regions=("legs", "ankles", "core"),
        duration_seconds=30,
    ),
    Pose(
        id="eagle",
        name_english="Eagle Pose",
        name_native="Garudasana",
        category=Category.BALANCE,
        difficulty=4,
        target_regions=("shoulders", "upper back", "ankles"),
        duration_seconds=30,
    ),
    Pose(
        id="crow",
        name_english="Crow Pose",
        name_native="Bakasana",
        category=Category.BALANCE,
        difficulty=6,
        target_regions=("arms", "wrists", "core"),
        duration_seconds=20,
    ),
    # Seated
    Pose(
        id="easy",
        name_english="Easy Pose",
        name_native="Sukhasana",
        category=Category.SEATED,
        difficulty=1,
        target_regions=("hips", "spine"),
        duration_seconds=60,
    ),
    Pose(
        id="butterfly",
        name_english="Butterfly Pose",
        name_native="Baddha Konasana",
        category=Category.SEATED,
        difficulty=1,
        target_regions=("hips", "groin"),
        duration_seconds=60,
    ),
    Pose(
        id="neck-stretch",
        name_english="Seated Neck Stretch",
        name_native="Greeva Sanchalana",
        category=Category.SEATED,
        difficulty=1,
        target_regions=("neck", "shoulders"),
        duration_seconds=30,
    ),
    Pose(
        id="cow-face",
        name_english="Cow Face Pose",
        name_native="Gomukhasana",
        category=Category.SEATED,
        difficulty=3,
        target_regions=("shoulders", "hips", "chest"),
        duration_seconds=45,
    ),
    # Forward bends
    Pose(
        id="seated-forward-bend",
        name_english="Seated Forward Bend",
        name_native="Paschimottanasana",
        category=Category.FORWARD_BEND,
        difficulty=2,
        target_regions=("hamstrings", "lower back", "spine"),
        duration_seconds=60,
    ),
    Pose(
        id="standing-forward-fold",
        name_english="Standing Forward Fold",
        name_native="Uttanasana",
        category=Category.FORWARD_BEND,
        difficulty=2,
        target_regions=("hamstrings", "calves"),
        duration_seconds=45,
    ),
    # Prone
    Pose(
        id="cat-cow",
        name_english="Cat-Cow Stretch",
        name_native="Marjaryasana-Bitilasana",
        category=Category.PRONE,
        difficulty=1,
        target_regions=("spine", "back", "core"),
        duration_seconds=45,
    ),
    Pose(
        id="sphinx",
        name_english="Sphinx Pose",
        name_native="Salamba Bhujangasana",
        category=Category.PRONE,
        difficulty=1,
        target_regions=("lower back", "chest"),
        duration_seconds=45,
    ),
    Pose(
        id="plank",
        name_english="Plank Pose",
        name_native="Phalakasana",
        category=Category.PRONE,
        difficulty=3,
        target_regions=("core", "arms", "wrists"),
        duration_seconds=30,
    ),
    # Back bends
    Pose(
        id="cobra",
        name_english="Cobra Pose",
        name_native="Bhujangasana",
        category=Category.BACK_BEND,
        difficulty=2,
        target_regions=("back", "chest", "shoulders"),
        duration_seconds=30,
    ),
    Pose(
        id="bridge",
        name_english="Bridge Pose",
        name_native="Setu Bandha Sarvangasana",
        category=Category.BACK_BEND,
        difficulty=2,
        target_regions=("glutes", "back", "chest"),
        duration_seconds=45,
    ),
    Pose(
        id="wheel",
        name_english="Wheel Pose",
        name_native="Urdhva Dhanurasana",
        category=Category.BACK_BEND,
        difficulty=7,
        target_regions=("back", "shoulders", "wrists", "chest"),
        duration_seconds=20,
    ),
    # Twists
    Pose(
        id="seated-twist",
        name_english="Half Lord of the Fishes",
        name_native="Ardha Matsyendrasana",
        category=Category.TWIST,
        difficulty=3,
        target_regions=("spine", "hips", "core"),
        duration_seconds=45,
    ),
    Pose(
        id="supine-twist",
        name_english="Supine Twist",
        name_native="Supta Matsyendrasana",
        category=Category.TWIST,
        difficulty=1,
        target_regions=("spine", "lower back", "glutes"),
        duration_seconds=60,
    ),
    # Supine
    Pose(
        id="childs-pose",
        name_english="Child's Pose",
        name_native="Balasana",
        category=Category.SUPINE,
        difficulty=1,
        target_regions=("back", "hips", "knees"),
        duration_seconds=60,
    ),
    Pose(
        id="happy-baby",
        name_english="Happy Baby",
        name_native="Ananda Balasana",
        category=Category.SUPINE,
        difficulty=1,
        target_regions=("hips", "lower back", "hamstrings"),
        duration_seconds=60,
    ),
    Pose(
        id="legs-up-the-wall",
        name_english="Legs Up the Wall",
        name_native="Viparita Karani",
        category=Category.SUPINE,
        difficulty=1,
        target_regions=("legs", "lower back"),
        duration_seconds=120,
    ),
    Pose(
        id="reclined-butterfly",
        name_english="Reclined Butterfly",
        name_native="Supta Baddha Konasana",
        category=Category.SUPINE,
        difficulty=1,
        target_regions=("hips", "chest"),
        duration_seconds=90,
    ),
    Pose(
        id="corpse",
        name_english="Corpse Pose",
        name_native="Savasana",
        category=Category.SUPINE,
        difficulty=1,
        target_regions=("full body",),
        duration_seconds=300,
    ),
    # Inversions
    Pose(
        id="downward-dog",
        name_english="Downward-Facing Dog",
        name_native="Adho Mukha Svanasana",
        category=Category.INVERSION,
        difficulty=2,
        target_regions=("hamstrings", "shoulders", "calves"),
        duration_seconds=45,
    ),
    Pose(
        id="shoulder-stand",
        name_english="Shoulder Stand",
        name_native="Salamba Sarvangasana",
        category=Category.INVERSION,
        difficulty=5,
        target_regions=("shoulders", "neck", "core"),
        duration_seconds=60,
    ),
    Pose(
        id="headstand",
        name_english="Headstand",
        name_native="Salamba Sirsasana",
        category=Category.INVERSION,
        difficulty=7,
        target_regions=("shoulders", "core", "arms"),
        duration_seconds=60,
    ),
)

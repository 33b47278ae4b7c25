"""Tests for data models."""

from datetime import datetime, timedelta, timezone

import pytest

from asana_flow.models.body_map import PoseCount
from asana_flow.models.history import PracticeLog, PracticeRecord, to_naive_utc
from asana_flow.models.poses import (
    CATEGORY_FLOW,
    CATEGORY_INTENSITY,
    COMMON_POSES,
    FLOW_AVOID,
    FLOW_GOOD,
    FLOW_NEUTRAL,
    Category,
    Pose,
)
from asana_flow.models.recommendation import Recommendation, SessionContext
from asana_flow.models.regions import (
    REGION_INFO,
    BodyRegion,
    Side,
    map_region_tag,
    map_region_tags,
    normalize_region_tag,
)
from asana_flow.models.sequence import GeneratedSequence, SequenceItem


class TestPose:
    """Tests for Pose model."""

    def test_pose_to_dict(self):
        """Test pose serialization."""
        pose = Pose(
            id="cobra",
            name_english="Cobra Pose",
            name_native="Bhujangasana",
            category=Category.BACK_BEND,
            difficulty=2,
            target_regions=("back", "chest"),
        )
        data = pose.to_dict()

        assert data["id"] == "cobra"
        assert data["category"] == "BACK_BEND"
        assert data["target_regions"] == ["back", "chest"]
        assert data["duration_seconds"] == 30

    def test_pose_from_dict(self):
        """Test pose deserialization."""
        data = {
            "id": "tree",
            "name_english": "Tree Pose",
            "name_native": "Vrksasana",
            "category": "balance",
            "difficulty": 2,
            "target_regions": ["legs", "ankles"],
        }
        pose = Pose.from_dict(data)

        assert pose.category == Category.BALANCE
        assert pose.target_regions == ("legs", "ankles")
        assert Pose.from_dict(pose.to_dict()) == pose

    def test_difficulty_clamped(self):
        """Test out-of-range difficulty is clamped."""
        base = {"id": "x", "name_english": "X", "category": "SEATED"}
        assert Pose.from_dict({**base, "difficulty": 14}).difficulty == 10
        assert Pose.from_dict({**base, "difficulty": -2}).difficulty == 1

    def test_unknown_category(self):
        """Test unknown categories are rejected."""
        with pytest.raises(ValueError):
            Pose.from_dict({"id": "x", "name_english": "X", "category": "FLYING"})

    def test_common_poses_populated(self):
        """Test that the built-in library is usable."""
        ids = [p.id for p in COMMON_POSES]

        assert len(ids) == len(set(ids))
        assert "mountain" in ids
        assert "corpse" in ids
        assert {p.category for p in COMMON_POSES} == set(Category)
        assert all(1 <= p.difficulty <= 10 for p in COMMON_POSES)


class TestCategoryTables:
    """Tests for category flow and intensity tables."""

    def test_flow_is_asymmetric(self):
        """Test direction matters in category flow."""
        assert CATEGORY_FLOW[(Category.STANDING, Category.SEATED)] == FLOW_NEUTRAL
        assert CATEGORY_FLOW[(Category.SEATED, Category.STANDING)] == FLOW_AVOID

    def test_flow_examples(self):
        """Test a few well-known transitions."""
        assert CATEGORY_FLOW[(Category.STANDING, Category.BALANCE)] == FLOW_GOOD
        assert CATEGORY_FLOW[(Category.STANDING, Category.INVERSION)] == FLOW_AVOID
        assert CATEGORY_FLOW[(Category.BACK_BEND, Category.FORWARD_BEND)] == FLOW_GOOD

    def test_flow_table_complete(self):
        """Test every category pair has a score."""
        assert len(CATEGORY_FLOW) == len(Category) ** 2

    def test_tables_read_only(self):
        """Test static tables cannot be modified."""
        with pytest.raises(TypeError):
            CATEGORY_INTENSITY[Category.SUPINE] = 5

    def test_intensity_weights(self):
        """Test category load weights."""
        assert CATEGORY_INTENSITY[Category.STANDING] == 3
        assert CATEGORY_INTENSITY[Category.SUPINE] == 1
        assert CATEGORY_INTENSITY[Category.INVERSION] == 4


class TestRegions:
    """Tests for the canonical region taxonomy."""

    def test_sixteen_regions(self):
        """Test every region has display info."""
        assert len(BodyRegion) == 16
        assert set(REGION_INFO) == set(BodyRegion)
        assert REGION_INFO[BodyRegion.CORE].label == "Core/Abs"
        assert REGION_INFO[BodyRegion.HIPS].side == Side.BOTH

    def test_normalize_region_tag(self):
        """Test tag normalization."""
        assert normalize_region_tag("  Upper Back ") == "upper_back"
        assert normalize_region_tag("hip-flexors") == "hip_flexors"
        assert normalize_region_tag("Full Body") == "full_body"

    def test_map_region_tag(self):
        """Test tag mapping and fan-out."""
        assert map_region_tag("Quads") == (BodyRegion.QUADRICEPS,)
        assert map_region_tag("back") == (BodyRegion.UPPER_BACK, BodyRegion.LOWER_BACK)
        assert map_region_tag("aura") == ()

    def test_map_region_tags_deduplicates(self):
        """Test several tags keep first-seen order without duplicates."""
        regions = map_region_tags(["legs", "hamstrings", "core"])
        assert regions == [
            BodyRegion.QUADRICEPS,
            BodyRegion.HAMSTRINGS,
            BodyRegion.CALVES,
            BodyRegion.CORE,
        ]

    def test_custom_mapping(self):
        """Test the tag table can be replaced."""
        mapping = {"torso": (BodyRegion.CHEST, BodyRegion.CORE)}
        assert map_region_tags(["torso", "back"], mapping) == [
            BodyRegion.CHEST,
            BodyRegion.CORE,
        ]


class TestHistory:
    """Tests for practice history models."""

    def test_record_clamps_negatives(self):
        """Test negative counts and durations become zero."""
        record = PracticeRecord("tree", "Tree Pose", ["legs"], -3, -60)
        assert record.practice_count == 0
        assert record.total_duration_seconds == 0

    def test_record_from_dict(self):
        """Test record deserialization with ISO timestamps."""
        record = PracticeRecord.from_dict(
            {
                "pose_id": "tree",
                "practice_count": 4,
                "last_practiced": "2024-06-10T08:30:00",
            }
        )
        assert record.pose_name == "tree"
        assert record.target_regions == []
        assert record.last_practiced == datetime(2024, 6, 10, 8, 30)

    @pytest.mark.parametrize(
        "value",
        ["2024-06-10T08:30:00Z", "2024-06-10T10:30:00+02:00", "2024-06-10T08:30:00+00:00"],
    )
    def test_offset_timestamps_become_naive_utc(self, value):
        """Test "Z" and offset timestamps are stored as naive UTC."""
        record = PracticeRecord.from_dict(
            {"pose_id": "tree", "practice_count": 1, "last_practiced": value}
        )
        assert record.last_practiced == datetime(2024, 6, 10, 8, 30)
        assert record.last_practiced.tzinfo is None

    def test_aware_datetime_normalized_on_init(self):
        """Test aware datetimes passed directly are converted too."""
        created = datetime(2024, 6, 10, 3, 30, tzinfo=timezone(timedelta(hours=-5)))
        log = PracticeLog(30, created, ["tree"])

        assert log.created_at == datetime(2024, 6, 10, 8, 30)
        assert log.to_dict()["created_at"] == "2024-06-10T08:30:00"

    def test_to_naive_utc(self):
        """Test naive values pass through unchanged."""
        naive = datetime(2024, 6, 10, 8, 30)
        assert to_naive_utc(naive) is naive
        assert to_naive_utc(datetime(2024, 6, 10, 8, 30, tzinfo=timezone.utc)) == naive

    def test_record_from_pose(self, tree):
        """Test building a record from a catalog pose."""
        record = PracticeRecord.from_pose(tree, 5)
        assert record.pose_name == "Tree Pose"
        assert record.target_regions == ["legs", "ankles"]
        assert record.to_dict()["last_practiced"] is None

    def test_log_round_trip(self, now):
        """Test log serialization."""
        log = PracticeLog(duration_minutes=-5, created_at=now, poses=["tree"])
        assert log.duration_minutes == 0

        restored = PracticeLog.from_dict(log.to_dict())
        assert restored.created_at == now
        assert restored.poses == ["tree"]

    def test_log_requires_timestamp(self):
        """Test missing created_at is rejected."""
        with pytest.raises(KeyError):
            PracticeLog.from_dict({"duration_minutes": 30})


class TestSessionModels:
    """Tests for session and output models."""

    def test_session_defaults(self):
        """Test an empty session context."""
        context = SessionContext()
        assert context.current_pose is None
        assert context.session_poses == []
        assert context.session_progress == 0.0
        assert context.goals == []

    def test_recommendation_to_dict(self, tree):
        """Test recommendation serialization."""
        data = Recommendation(tree, 0.8, ["New pose to try"]).to_dict()
        assert data["pose"]["id"] == "tree"
        assert data["score"] == 0.8
        assert data["reasons"] == ["New pose to try"]

    def test_generated_sequence(self, tree, mountain):
        """Test sequence helpers."""
        sequence = GeneratedSequence(
            items=[
                SequenceItem(mountain, 30, "Centering & breath awareness"),
                SequenceItem(tree, 45, "Building heat & preparation"),
            ],
            total_duration=75,
            description="1 minute warm-up focusing on legs",
        )
        assert sequence.pose_ids == ["mountain", "tree"]
        assert sequence.to_dict()["items"][1]["pose_id"] == "tree"

    def test_pose_count_to_dict(self):
        """Test pose contribution serialization."""
        assert PoseCount("tree", "Tree Pose", 3).to_dict() == {
            "pose_id": "tree",
            "name": "Tree Pose",
            "count": 3,
        }

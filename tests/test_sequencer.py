"""Tests for next-pose recommendation scoring."""

import pytest

from asana_flow.models.poses import COMMON_POSES, Category, Pose
from asana_flow.models.recommendation import SessionContext
from asana_flow.services.sequencer import (
    COOLDOWN_CATEGORIES,
    ScoringWeights,
    SequenceRecommender,
    recommend,
    recommend_cooldown,
    recommend_start,
)
from asana_flow.utils.pose_utils import find_pose


@pytest.fixture
def recommender():
    return SequenceRecommender()


@pytest.fixture
def hamstring_fold():
    return Pose(
        id="seated-forward-bend",
        name_english="Seated Forward Bend",
        name_native="Paschimottanasana",
        category=Category.FORWARD_BEND,
        difficulty=3,
        target_regions=("hamstrings",),
    )


def _contexts(catalog):
    """A spread of session states over a catalog."""
    first, second, third = catalog[0], catalog[1], catalog[2]
    return [
        SessionContext(),
        SessionContext(current_pose=first, session_poses=[first], session_progress=0.2),
        SessionContext(
            current_pose=second,
            session_poses=[first, second],
            session_progress=0.6,
            goals=["balance"],
        ),
        SessionContext(
            current_pose=third,
            session_poses=[first, second, third, first, third],
            session_progress=0.95,
            goals=["flexibility", "relaxation"],
        ),
    ]


class TestRecommendInvariants:
    """Properties that hold for every input."""

    @pytest.mark.parametrize("limit", [0, 1, 3, 5, 100])
    def test_limit_and_current_excluded(self, recommender, limit):
        """Test output never exceeds limit and never repeats the current pose."""
        catalog = list(COMMON_POSES)
        for context in _contexts(catalog):
            results = recommender.recommend(catalog, context, limit)

            assert len(results) <= limit
            if context.current_pose:
                assert context.current_pose.id not in [r.pose.id for r in results]

    def test_score_and_reason_bounds(self, recommender):
        """Test scores stay in [0, 1] with at most two reasons."""
        catalog = list(COMMON_POSES)
        for context in _contexts(catalog):
            for r in recommender.recommend(catalog, context, len(catalog)):
                assert 0 <= r.score <= 1
                assert len(r.reasons) <= 2

    def test_sorted_by_score_then_id(self, recommender):
        """Test descending score order with ascending id tie-break."""
        catalog = list(COMMON_POSES)
        for context in _contexts(catalog):
            results = recommender.recommend(catalog, context, len(catalog))
            keys = [(-r.score, r.pose.id) for r in results]
            assert keys == sorted(keys)

    def test_negative_limit_returns_nothing(self, recommender, flow_catalog):
        """Test a negative limit is treated as zero."""
        assert recommender.recommend(flow_catalog, SessionContext(), -3) == []

    def test_empty_catalog(self, recommender):
        """Test empty catalog gives no recommendations."""
        assert recommender.recommend([], SessionContext()) == []

    def test_catalog_of_only_current_pose(self, recommender, mountain):
        """Test nothing is left once the current pose is excluded."""
        context = SessionContext(current_pose=mountain, session_poses=[mountain])
        assert recommender.recommend([mountain], context) == []


class TestScenarios:
    """End-to-end ranking scenarios."""

    def test_flow_bias(self, flow_catalog, mountain, headstand):
        """Test natural follow-ups outrank an awkward inversion early on."""
        context = SessionContext(
            current_pose=mountain, session_poses=[mountain], session_progress=0.2
        )
        scores = {r.pose.id: r.score for r in recommend(flow_catalog, context, 10)}

        assert "mountain" not in scores
        assert scores["tree"] == pytest.approx(0.925, abs=0.006)
        assert scores["warrior-1"] == scores["tree"]
        assert scores["headstand"] == pytest.approx(0.545, abs=0.006)
        assert max(scores["tree"], scores["warrior-1"]) > scores[headstand.id]

    def test_flow_bias_tie_breaks_by_id(self, flow_catalog, mountain):
        """Test equal scores come back in pose id order."""
        context = SessionContext(
            current_pose=mountain, session_poses=[mountain], session_progress=0.2
        )
        ids = [r.pose.id for r in recommend(flow_catalog, context, 2)]
        assert ids == ["tree", "warrior-1"]

    def test_goal_affinity(self, flow_catalog, hamstring_fold):
        """Test a flexibility goal lifts a hamstring forward bend into the top 3."""
        catalog = flow_catalog + [hamstring_fold]

        without_goal = [r.pose.id for r in recommend(catalog, SessionContext(), 3)]
        assert hamstring_fold.id not in without_goal

        results = recommend(catalog, SessionContext(goals=["Flexibility"]), 3)
        by_id = {r.pose.id: r for r in results}

        assert hamstring_fold.id in by_id
        assert "Matches your flexibility goal" in by_id[hamstring_fold.id].reasons

    def test_goal_affinity_builtin_library(self):
        """Test flexibility poses surface from the built-in library."""
        results = recommend(COMMON_POSES, SessionContext(goals=["flexibility"]))
        assert any(
            r.pose.category == Category.FORWARD_BEND
            or any(t in ("hamstrings", "hips") for t in r.pose.target_regions)
            for r in results
        )

    def test_unknown_goal_is_neutral(self, flow_catalog):
        """Test unknown goals change nothing."""
        plain = recommend(flow_catalog, SessionContext(), 4)
        unknown = recommend(flow_catalog, SessionContext(goals=["levitation"]), 4)
        assert [(r.pose.id, r.score) for r in plain] == [
            (r.pose.id, r.score) for r in unknown
        ]


class TestStartRecommendations:
    """Tests for opening pose recommendations."""

    def test_start_bonus(self, flow_catalog):
        """Test STANDING poses get the opener bonus and reason."""
        results = recommend_start(flow_catalog, 4)
        by_id = {r.pose.id: r for r in results}

        assert results[0].pose.id == "mountain"
        assert by_id["mountain"].score == pytest.approx(0.85)
        assert by_id["mountain"].reasons == ["Good starting pose", "Gentle way to begin"]
        assert "Good starting pose" not in by_id["tree"].reasons

    def test_start_matches_empty_context(self, flow_catalog):
        """Test recommend_start is recommend with an empty session."""
        assert recommend_start(flow_catalog) == recommend(flow_catalog, SessionContext())


class TestCooldownRecommendations:
    """Tests for closing pose recommendations."""

    def test_filters_gentle_poses(self):
        """Test only easy supine, seated and forward-bend poses are returned."""
        session = [find_pose(name) for name in ("warrior-2", "triangle", "butterfly")]
        results = recommend_cooldown(COMMON_POSES, session, 20)

        assert results
        for r in results:
            assert r.pose.difficulty <= 2
            assert r.pose.category in COOLDOWN_CATEGORIES
        assert "butterfly" not in [r.pose.id for r in results]

    def test_cooling_down_reason(self):
        """Test late-session difficulty reason wording."""
        session = [find_pose("headstand")]
        results = recommend_cooldown(COMMON_POSES, session, 20)

        corpse = next(r for r in results if r.pose.id == "corpse")
        assert "Good for cooling down" in corpse.reasons

    def test_empty_session(self):
        """Test cool-down works without any session poses."""
        results = recommend_cooldown(COMMON_POSES, [], 3)
        assert len(results) == 3


class TestSubScores:
    """Tests for individual scoring factors."""

    def test_target_difficulty_by_phase(self, recommender, tree):
        """Test target difficulty follows the session phase."""
        early = SessionContext(current_pose=tree, session_progress=0.2)
        middle = SessionContext(current_pose=tree, session_progress=0.6)
        late = SessionContext(current_pose=tree, session_progress=0.8)

        assert recommender._target_difficulty(early) == 3
        assert recommender._target_difficulty(middle) == 2
        assert recommender._target_difficulty(late) == 1
        assert recommender._target_difficulty(SessionContext()) == 1

    def test_target_difficulty_clamped(self, recommender):
        """Test target never exceeds the top of the scale."""
        hardest = Pose("x", "X", "", Category.INVERSION, 10)
        context = SessionContext(current_pose=hardest, session_progress=0.1)
        assert recommender._target_difficulty(context) == 10

    def test_variety_recovers_with_distance(self, recommender, mountain, tree, warrior_1):
        """Test repeat penalty fades as more poses follow."""
        assert recommender._variety_score(mountain, []) == 1.0
        assert recommender._variety_score(mountain, [mountain]) == pytest.approx(0.3)
        assert recommender._variety_score(mountain, [mountain, tree]) == pytest.approx(0.58)
        assert recommender._variety_score(
            mountain, [mountain, tree, warrior_1]
        ) == pytest.approx(0.748)

    def test_variety_uses_most_recent_use(self, recommender, mountain, tree):
        """Test only the latest occurrence counts."""
        score = recommender._variety_score(mountain, [mountain, tree, mountain])
        assert score == pytest.approx(0.3)

    def test_progress_clamped(self, mountain):
        """Test out-of-range progress is clamped."""
        assert SessionContext(session_progress=1.5).session_progress == 1.0
        assert SessionContext(session_progress=-0.2).session_progress == 0.0

    def test_custom_weights(self, flow_catalog, mountain):
        """Test weights can isolate a single factor."""
        weights = ScoringWeights(flow=1.0, difficulty=0.0, variety=0.0, goal=0.0)
        context = SessionContext(current_pose=mountain, session_poses=[mountain])
        scores = {r.pose.id: r.score for r in recommend(flow_catalog, context, 10, weights)}

        assert scores["tree"] == 1.0
        assert scores["headstand"] == 0.2

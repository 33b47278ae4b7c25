"""Next-pose recommendation scoring.

Each candidate pose gets four sub-scores in [0, 1]:

- flow: how naturally its category follows the current pose's category
- difficulty: closeness to the difficulty the session phase calls for
- variety: penalty for poses already used, fading as the session moves on
- goal: boost when the pose serves one of the practitioner's goals

The weighted average (plus a flat bonus for opening poses when nothing has
been practiced yet) is the recommendation score.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..models.poses import (
    CATEGORY_FLOW,
    FLOW_UNLISTED,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    Category,
    Pose,
)
from ..models.recommendation import Recommendation, SessionContext
from ..utils.scoring import clamp

NEUTRAL_SCORE = 0.5

# Session phases, by fraction of the planned session completed
EARLY_SESSION_END = 0.5
LATE_SESSION_START = 0.7
COOLDOWN_TARGET_DIFFICULTY = 1
DIFFICULTY_SPAN = MAX_DIFFICULTY - MIN_DIFFICULTY

# Variety: a just-used pose scores REPEAT_PENALTY, recovering toward 1.0
REPEAT_PENALTY = 0.3
VARIETY_DECAY = 0.6

START_CATEGORIES = frozenset({Category.STANDING, Category.SEATED})

COOLDOWN_CATEGORIES = frozenset({Category.SUPINE, Category.SEATED, Category.FORWARD_BEND})
COOLDOWN_MAX_DIFFICULTY = 2
COOLDOWN_PROGRESS = 0.9


@dataclass(frozen=True)
class ScoringWeights:
    """Relative weight of each sub-score in the final recommendation score."""

    flow: float = 0.35
    difficulty: float = 0.30
    variety: float = 0.20
    goal: float = 0.15
    start_bonus: float = 0.1  # Added for STANDING/SEATED openers

    @property
    def total(self) -> float:
        return self.flow + self.difficulty + self.variety + self.goal


@dataclass(frozen=True)
class GoalAffinity:
    """Categories and region keywords that serve a practice goal."""

    categories: frozenset[Category]
    region_keywords: tuple[str, ...] = ()


GOAL_AFFINITIES: Mapping[str, GoalAffinity] = MappingProxyType(
    {
        "flexibility": GoalAffinity(
            frozenset({Category.FORWARD_BEND, Category.BACK_BEND, Category.TWIST}),
            ("hamstring", "hip", "back", "shoulder"),
        ),
        "strength": GoalAffinity(
            frozenset({Category.BACK_BEND, Category.INVERSION, Category.PRONE}),
            ("core", "back"),
        ),
        "balance": GoalAffinity(frozenset({Category.BALANCE})),
        "focus": GoalAffinity(frozenset({Category.BALANCE})),
        "energy": GoalAffinity(frozenset({Category.INVERSION})),
        "relaxation": GoalAffinity(frozenset({Category.TWIST, Category.SUPINE})),
    }
)


@dataclass
class SubScores:
    """Individual scoring factors for one candidate."""

    flow: float
    difficulty: float
    variety: float
    goal: float
    matched_goal: str | None = None

    def weighted(self, weights: ScoringWeights) -> float:
        total = (
            self.flow * weights.flow
            + self.difficulty * weights.difficulty
            + self.variety * weights.variety
            + self.goal * weights.goal
        )
        return total / (weights.total or 1)


class SequenceRecommender:
    """Ranks catalog poses as the next step of a practice session."""

    def __init__(
        self,
        weights: ScoringWeights | None = None,
        flow_table: Mapping[tuple[Category, Category], float] = CATEGORY_FLOW,
        goal_affinities: Mapping[str, GoalAffinity] = GOAL_AFFINITIES,
    ):
        self.weights = weights or ScoringWeights()
        self.flow_table = flow_table
        self.goal_affinities = goal_affinities

    def recommend(
        self,
        catalog: list[Pose] | tuple[Pose, ...],
        context: SessionContext,
        limit: int = 5,
    ) -> list[Recommendation]:
        """Rank candidate poses for what comes next.

        Args:
            catalog: Poses to choose from
            context: Current session state
            limit: Maximum number of recommendations

        Returns:
            Recommendations sorted by score (descending), ties by pose id
        """
        if limit <= 0:
            return []

        current = context.current_pose
        recommendations: list[Recommendation] = []

        for pose in catalog:
            if current and pose.id == current.id:
                continue

            scores = self._score(pose, context)
            score = scores.weighted(self.weights)
            reasons: list[str] = []

            if current is None and pose.category in START_CATEGORIES:
                score += self.weights.start_bonus
                reasons.append("Good starting pose")

            reasons.extend(self._reasons(scores, context))

            recommendations.append(
                Recommendation(
                    pose=pose,
                    score=round(clamp(score, 0.0, 1.0), 2),
                    reasons=reasons[:2],
                )
            )

        recommendations.sort(key=lambda r: (-r.score, r.pose.id))
        return recommendations[:limit]

    def recommend_start(
        self,
        catalog: list[Pose] | tuple[Pose, ...],
        limit: int = 5,
    ) -> list[Recommendation]:
        """Recommend opening poses for an empty session."""
        return self.recommend(catalog, SessionContext(session_progress=0.0), limit)

    def recommend_cooldown(
        self,
        catalog: list[Pose] | tuple[Pose, ...],
        session_poses: list[Pose],
        limit: int = 5,
    ) -> list[Recommendation]:
        """Recommend gentle closing poses.

        Only easy SUPINE, SEATED and FORWARD_BEND poses are considered. The
        last session pose acts as the current pose and is never returned.
        """
        gentle = [
            pose
            for pose in catalog
            if pose.difficulty <= COOLDOWN_MAX_DIFFICULTY
            and pose.category in COOLDOWN_CATEGORIES
        ]
        context = SessionContext(
            current_pose=session_poses[-1] if session_poses else None,
            session_poses=list(session_poses),
            session_progress=COOLDOWN_PROGRESS,
        )
        return self.recommend(gentle, context, limit)

    def _score(self, pose: Pose, context: SessionContext) -> SubScores:
        matched_goal = self._matched_goal(pose, context.goals)
        return SubScores(
            flow=self._flow_score(context.current_pose, pose),
            difficulty=self._difficulty_score(pose, context),
            variety=self._variety_score(pose, context.session_poses),
            goal=1.0 if matched_goal else NEUTRAL_SCORE,
            matched_goal=matched_goal,
        )

    def _flow_score(self, current: Pose | None, candidate: Pose) -> float:
        if current is None:
            return NEUTRAL_SCORE
        return self.flow_table.get((current.category, candidate.category), FLOW_UNLISTED)

    def _target_difficulty(self, context: SessionContext) -> int:
        current = context.current_pose
        progress = context.session_progress

        if current is None or progress > LATE_SESSION_START:
            target = COOLDOWN_TARGET_DIFFICULTY
        elif progress < EARLY_SESSION_END:
            target = current.difficulty + 1
        else:
            target = current.difficulty

        return int(clamp(target, MIN_DIFFICULTY, MAX_DIFFICULTY))

    def _difficulty_score(self, candidate: Pose, context: SessionContext) -> float:
        target = self._target_difficulty(context)
        distance = abs(candidate.difficulty - target)
        return clamp(1 - distance / DIFFICULTY_SPAN, 0.0, 1.0)

    def _variety_score(self, candidate: Pose, session_poses: list[Pose]) -> float:
        last_index = None
        for i, pose in enumerate(session_poses):
            if pose.id == candidate.id:
                last_index = i

        if last_index is None:
            return 1.0

        # 1 means it was the most recent pose
        poses_since = len(session_poses) - last_index
        return 1 - (1 - REPEAT_PENALTY) * VARIETY_DECAY ** (poses_since - 1)

    def _matched_goal(self, pose: Pose, goals: list[str]) -> str | None:
        tags = [tag.lower() for tag in pose.target_regions]

        for goal in goals:
            goal_key = goal.strip().lower()
            affinity = self.goal_affinities.get(goal_key)
            if affinity is None:
                continue

            if pose.category in affinity.categories:
                return goal_key

            for keyword in affinity.region_keywords:
                if any(keyword in tag for tag in tags):
                    return goal_key

        return None

    def _reasons(self, scores: SubScores, context: SessionContext) -> list[str]:
        """Explain the two strongest above-neutral sub-scores."""
        ranked = sorted(
            [
                ("flow", scores.flow),
                ("difficulty", scores.difficulty),
                ("variety", scores.variety),
                ("goal", scores.goal),
            ],
            key=lambda item: item[1],
            reverse=True,
        )

        reasons = []
        for factor, value in ranked:
            if value <= NEUTRAL_SCORE:
                continue
            reasons.append(self._render_reason(factor, scores, context))
            if len(reasons) == 2:
                break
        return reasons

    def _render_reason(
        self, factor: str, scores: SubScores, context: SessionContext
    ) -> str:
        if factor == "flow":
            return "Flows well from your last pose"

        if factor == "difficulty":
            if context.current_pose is None:
                return "Gentle way to begin"
            if context.session_progress > LATE_SESSION_START:
                return "Good for cooling down"
            if context.session_progress < EARLY_SESSION_END:
                return "Builds gradually on your last pose"
            return "Keeps a steady intensity"

        if factor == "variety":
            if scores.variety >= 1.0:
                return "New pose to try"
            return "Worth revisiting after a break"

        return f"Matches your {scores.matched_goal} goal"


def recommend(
    catalog: list[Pose] | tuple[Pose, ...],
    context: SessionContext,
    limit: int = 5,
    weights: ScoringWeights | None = None,
) -> list[Recommendation]:
    """Convenience function to rank next-pose candidates."""
    return SequenceRecommender(weights).recommend(catalog, context, limit)


def recommend_start(
    catalog: list[Pose] | tuple[Pose, ...],
    limit: int = 5,
) -> list[Recommendation]:
    """Convenience function to recommend opening poses."""
    return SequenceRecommender().recommend_start(catalog, limit)


def recommend_cooldown(
    catalog: list[Pose] | tuple[Pose, ...],
    session_poses: list[Pose],
    limit: int = 5,
) -> list[Recommendation]:
    """Convenience function to recommend cool-down poses."""
    return SequenceRecommender().recommend_cooldown(catalog, session_poses, limit)

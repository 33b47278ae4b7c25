"""Recent-practice load analysis and rest recommendations.

Uses the flat recovery region vocabulary from ``models.recovery``, not the
canonical body-map taxonomy.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from ..models.history import PracticeLog, to_naive_utc, utc_now
from ..models.poses import CATEGORY_INTENSITY, DEFAULT_CATEGORY_INTENSITY, Category, Pose
from ..models.recovery import (
    NO_PRACTICE_SENTINEL,
    RECOVERY_POSES,
    RECOVERY_REGIONS,
    RESTORATIVE_POSES,
    PracticeAnalysis,
    RecoveryRecommendation,
    RecoveryType,
    RegionActivity,
)
from ..utils.pose_utils import build_pose_index, normalize_pose_name
from ..utils.scoring import relative_intensity, round_half_up

# Rest triggers, evaluated over a one-week window
SESSION_LIMIT = 6
MINUTES_LIMIT = 300
HEAVY_REGION_INTENSITY = 70
HEAVY_REGION_LIMIT = 3
HIGH_INTENSITY_SCORE = 70
FORCED_REST_SCORE = 80
REST_REASONS_NEEDED = 2

RESTORATIVE_SCORE = 60
GENTLE_SCORE = 40
FOCUS_AREA_MAX_INTENSITY = 30
AVOID_AREA_MIN_INTENSITY = 60
MAX_AREAS = 3
MAX_SUGGESTED_POSES = 8

# type -> (title, description, minutes)
RECOVERY_PLANS: Mapping[RecoveryType, tuple[str, str, int]] = MappingProxyType(
    {
        RecoveryType.REST: (
            "Full Rest Day",
            "Your body has been working hard. Take a complete rest day with "
            "optional gentle stretching.",
            10,
        ),
        RecoveryType.RESTORATIVE: (
            "Restorative Practice",
            "Focus on passive, supported poses to help your body recover and restore.",
            25,
        ),
        RecoveryType.GENTLE: (
            "Gentle Flow",
            "A light, mindful practice focusing on mobility and breath work.",
            30,
        ),
        RecoveryType.ACTIVE_RECOVERY: (
            "Active Recovery Day",
            "Light movement to maintain flexibility while allowing recovery.",
            20,
        ),
    }
)


def calculate_intensity_score(
    total_intensity: float, total_sessions: int, total_minutes: float
) -> int:
    """Blend per-session load, weekly volume and weekly frequency into 0-100."""
    load = total_intensity / (total_sessions * 5 or 1) * 20
    volume = total_minutes / 7 * 0.5
    frequency = total_sessions / 7 * 30
    return min(100, round_half_up(load + volume + frequency))


def analyze(
    logs: list[PracticeLog],
    catalog: list[Pose] | tuple[Pose, ...],
    now: datetime | None = None,
    intensity_weights: Mapping[Category, int] = CATEGORY_INTENSITY,
) -> PracticeAnalysis:
    """Analyze recent practice logs.

    Args:
        logs: Practice sessions in the analysis window (typically 7 days)
        catalog: Poses used to resolve the names recorded in each log
        now: Reference time for days-since-last-practice (defaults to the
            current UTC time)
        intensity_weights: Per-category load weights

    Returns:
        PracticeAnalysis with load metrics and rest reasons
    """
    now = utc_now() if now is None else to_naive_utc(now)

    pose_index = build_pose_index(catalog)
    activity = {region: RegionActivity(region=region) for region in RECOVERY_REGIONS}
    category_counts: dict[str, int] = {}
    total_intensity = 0

    for log in logs:
        for name in log.poses or []:
            pose = pose_index.get(normalize_pose_name(str(name)))
            if pose is None:
                continue

            for tag in pose.target_regions:
                region = activity.get(tag.strip().lower())
                if region is None:
                    continue
                region.count += 1
                if region.last_worked is None or log.created_at > region.last_worked:
                    region.last_worked = log.created_at

            category_counts[pose.category.value] = (
                category_counts.get(pose.category.value, 0) + 1
            )
            total_intensity += intensity_weights.get(
                pose.category, DEFAULT_CATEGORY_INTENSITY
            )

    total_sessions = len(logs)
    total_minutes = sum(log.duration_minutes for log in logs)
    average_session_length = (
        round_half_up(total_minutes / total_sessions) if total_sessions else 0
    )

    if logs:
        last_practice = max(log.created_at for log in logs)
        days_since_last_practice = max(0, (now - last_practice).days)
    else:
        days_since_last_practice = NO_PRACTICE_SENTINEL

    max_count = max(a.count for a in activity.values())
    for region in activity.values():
        region.intensity = relative_intensity(region.count, max_count)
    region_activity = sorted(activity.values(), key=lambda a: a.intensity, reverse=True)

    intensity_score = calculate_intensity_score(
        total_intensity, total_sessions, total_minutes
    )

    rest_reasons: list[str] = []
    heavy_regions = [a for a in region_activity if a.intensity > HEAVY_REGION_INTENSITY]

    if total_sessions >= SESSION_LIMIT:
        rest_reasons.append("You've practiced 6+ times in the last 7 days")
    if total_minutes >= MINUTES_LIMIT:
        rest_reasons.append("Over 5 hours of practice in the last week")
    if len(heavy_regions) >= HEAVY_REGION_LIMIT:
        names = ", ".join(a.region for a in heavy_regions[:3])
        rest_reasons.append(
            f"{len(heavy_regions)} body areas are heavily worked: {names}"
        )
    if intensity_score > HIGH_INTENSITY_SCORE:
        rest_reasons.append("High overall intensity score")

    needs_rest = (
        len(rest_reasons) >= REST_REASONS_NEEDED or intensity_score > FORCED_REST_SCORE
    )

    return PracticeAnalysis(
        total_sessions=total_sessions,
        total_minutes=total_minutes,
        average_session_length=average_session_length,
        days_since_last_practice=days_since_last_practice,
        region_activity=region_activity,
        category_distribution=category_counts,
        intensity_score=intensity_score,
        needs_rest=needs_rest,
        rest_reasons=rest_reasons,
    )


def recommend_recovery(
    analysis: PracticeAnalysis,
    recovery_poses: Mapping[str, tuple[str, ...]] = RECOVERY_POSES,
    restorative_poses: tuple[str, ...] = RESTORATIVE_POSES,
) -> RecoveryRecommendation:
    """Pick a recovery day type and the poses to fill it."""
    if analysis.needs_rest or analysis.intensity_score > FORCED_REST_SCORE:
        recovery_type = RecoveryType.REST
    elif analysis.intensity_score > RESTORATIVE_SCORE:
        recovery_type = RecoveryType.RESTORATIVE
    elif analysis.intensity_score > GENTLE_SCORE:
        recovery_type = RecoveryType.GENTLE
    else:
        recovery_type = RecoveryType.ACTIVE_RECOVERY

    title, description, duration = RECOVERY_PLANS[recovery_type]

    focus_areas = [
        a.region
        for a in analysis.region_activity
        if 0 < a.intensity < FOCUS_AREA_MAX_INTENSITY
    ][:MAX_AREAS]
    avoid_areas = [
        a.region
        for a in analysis.region_activity
        if a.intensity > AVOID_AREA_MIN_INTENSITY
    ][:MAX_AREAS]

    suggested_poses: list[str] = []
    for region in avoid_areas:
        for pose_name in recovery_poses.get(region, ()):
            if pose_name not in suggested_poses:
                suggested_poses.append(pose_name)

    for pose_name in restorative_poses:
        if len(suggested_poses) >= MAX_SUGGESTED_POSES:
            break
        if pose_name not in suggested_poses:
            suggested_poses.append(pose_name)

    return RecoveryRecommendation(
        type=recovery_type,
        title=title,
        description=description,
        suggested_poses=suggested_poses[:MAX_SUGGESTED_POSES],
        suggested_duration=duration,
        focus_areas=focus_areas,
        avoid_areas=avoid_areas,
    )

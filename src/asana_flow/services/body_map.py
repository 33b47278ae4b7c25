"""Body-map aggregation of practice history.

Every record credits its full practice count to each canonical region its
pose maps to. A pose tagged ["back", "core"] with 10 practices adds 10 to
upper_back, lower_back and core, and only 10 to the total, so region
percentages overlap.
"""

from datetime import datetime, timedelta
from typing import Mapping

from ..models.body_map import BodyMapReport, PoseCount, RegionFocus
from ..models.history import PracticeRecord, to_naive_utc
from ..models.regions import (
    LOWER_BODY_REGIONS,
    REGION_INFO,
    REGION_TAG_MAPPING,
    UPPER_BODY_REGIONS,
    BodyRegion,
    Side,
    map_region_tags,
)
from ..utils.scoring import percentage_of, relative_intensity, round_half_up

IMBALANCE_THRESHOLD = 65
NEGLECTED_INTENSITY = 10
MAX_NEGLECTED_NOTICE = 3
HIGH_FOCUS_INTENSITY = 80
UPPER_LOWER_RATIO = 2
TOP_POSES_PER_REGION = 3
MAX_RECOMMENDATIONS = 3


def analyze_body_map(
    records: list[PracticeRecord],
    window_days: int = 30,
    now: datetime | None = None,
    tag_mapping: Mapping[str, tuple[BodyRegion, ...]] = REGION_TAG_MAPPING,
) -> BodyMapReport:
    """Aggregate practice records into a per-region focus report.

    Args:
        records: Practice totals per pose, already joined with target regions
        window_days: Length of the analysis window in days
        now: When given, records last practiced outside the window (or never)
            are ignored; otherwise records are assumed pre-filtered
        tag_mapping: Free-text tag to canonical region table

    Returns:
        BodyMapReport covering all canonical regions
    """
    window_days = max(0, window_days)
    if now is not None:
        start = to_naive_utc(now) - timedelta(days=window_days)
        records = [
            r for r in records if r.last_practiced is not None and r.last_practiced >= start
        ]

    regions: dict[BodyRegion, RegionFocus] = {
        region: RegionFocus(region=region, label=info.label, side=info.side)
        for region, info in REGION_INFO.items()
    }
    # pose_id -> PoseCount, insertion order breaks ties in the top-poses list
    contributions: dict[BodyRegion, dict[str, PoseCount]] = {
        region: {} for region in regions
    }

    total_practices = 0
    for record in records:
        total_practices += record.practice_count

        for region in map_region_tags(record.target_regions, tag_mapping):
            focus = regions[region]
            focus.practice_count += record.practice_count

            if record.last_practiced and (
                focus.last_practiced is None or record.last_practiced > focus.last_practiced
            ):
                focus.last_practiced = record.last_practiced

            pose_counts = contributions[region]
            if record.pose_id in pose_counts:
                pose_counts[record.pose_id].count += record.practice_count
            else:
                pose_counts[record.pose_id] = PoseCount(
                    pose_id=record.pose_id,
                    name=record.pose_name,
                    count=record.practice_count,
                )

    max_count = max(focus.practice_count for focus in regions.values())
    front_total = 0.0
    back_total = 0.0

    for region, focus in regions.items():
        focus.percentage = percentage_of(focus.practice_count, total_practices)
        focus.intensity = relative_intensity(focus.practice_count, max_count)
        focus.top_poses = sorted(
            contributions[region].values(), key=lambda p: p.count, reverse=True
        )[:TOP_POSES_PER_REGION]

        if focus.side == Side.FRONT:
            front_total += focus.practice_count
        elif focus.side == Side.BACK:
            back_total += focus.practice_count
        else:
            front_total += focus.practice_count / 2
            back_total += focus.practice_count / 2

    side_total = front_total + back_total
    if side_total > 0:
        front_focus = round_half_up(front_total / side_total * 100)
        back_focus = round_half_up(back_total / side_total * 100)
    else:
        front_focus = back_focus = 50
    balance_score = max(0, min(100, 100 - abs(front_focus - back_focus)))

    return BodyMapReport(
        regions=regions,
        total_practices=total_practices,
        balance_score=balance_score,
        front_focus=front_focus,
        back_focus=back_focus,
        recommendations=generate_recommendations(regions, front_focus, back_focus),
        window_days=window_days,
    )


def generate_recommendations(
    regions: dict[BodyRegion, RegionFocus],
    front_focus: int,
    back_focus: int,
) -> list[str]:
    """Build up to three coaching notes, most important first."""
    recommendations: list[str] = []

    if front_focus > IMBALANCE_THRESHOLD:
        recommendations.append(
            "Your practice is front-focused. Try adding more backbends and "
            "posterior chain poses."
        )
    elif back_focus > IMBALANCE_THRESHOLD:
        recommendations.append(
            "Your practice is back-focused. Consider adding more forward folds "
            "and core work."
        )

    neglected = [
        focus.label
        for focus in regions.values()
        if 0 < focus.intensity < NEGLECTED_INTENSITY
    ]
    if 0 < len(neglected) <= MAX_NEGLECTED_NOTICE:
        recommendations.append(
            f"Consider adding more poses targeting: {', '.join(neglected)}."
        )

    high_focus = [
        focus.label for focus in regions.values() if focus.intensity > HIGH_FOCUS_INTENSITY
    ]
    if high_focus:
        recommendations.append(
            f"Great focus on {' and '.join(high_focus)}! Ensure adequate rest "
            "between sessions."
        )

    upper_total = sum(regions[r].practice_count for r in UPPER_BODY_REGIONS)
    lower_total = sum(regions[r].practice_count for r in LOWER_BODY_REGIONS)
    if upper_total > lower_total * UPPER_LOWER_RATIO:
        recommendations.append("Add more lower body work for better balance.")
    elif lower_total > upper_total * UPPER_LOWER_RATIO:
        recommendations.append("Add more upper body work for better balance.")

    return recommendations[:MAX_RECOMMENDATIONS]

"""Utilities for pose name normalization and catalog lookup."""

import re

from ..models.poses import COMMON_POSES, Category, Pose


def normalize_pose_name(name: str) -> str:
    """Normalize a pose name or id for comparison.

    Lowercases, strips and collapses internal whitespace.
    """
    normalized = name.lower().strip()
    return re.sub(r"\s+", " ", normalized)


def build_pose_index(catalog: list[Pose] | tuple[Pose, ...]) -> dict[str, Pose]:
    """Index a catalog by normalized English name, native name and id.

    The first pose claiming a key wins, so catalog order decides collisions.
    """
    index: dict[str, Pose] = {}
    for pose in catalog:
        for key in (pose.name_english, pose.name_native, pose.id):
            if key:
                index.setdefault(normalize_pose_name(key), pose)
    return index


def find_pose(
    name: str,
    catalog: list[Pose] | tuple[Pose, ...] | None = None,
) -> Pose | None:
    """Find a pose by English name, native name or id, case-insensitively.

    Args:
        name: Pose name or id as entered by the user
        catalog: Poses to search (defaults to COMMON_POSES)

    Returns:
        The matching Pose or None
    """
    if catalog is None:
        catalog = COMMON_POSES
    return build_pose_index(catalog).get(normalize_pose_name(name))


def categorize_poses(
    poses: list[Pose] | tuple[Pose, ...],
) -> dict[str, list[Pose]]:
    """Group poses by category.

    Returns a dictionary with every category value as a key.
    """
    result: dict[str, list[Pose]] = {category.value: [] for category in Category}

    for pose in poses:
        result[pose.category.value].append(pose)

    return result

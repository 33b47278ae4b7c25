"""Canonical body-region taxonomy used for coverage reporting."""

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Side(str, Enum):
    """Which side of the body a region sits on."""

    FRONT = "front"
    BACK = "back"
    BOTH = "both"


class BodyRegion(str, Enum):
    """Canonical body regions shown on the body map."""

    # Front body
    NECK = "neck"
    SHOULDERS = "shoulders"
    CHEST = "chest"
    CORE = "core"
    ARMS = "arms"
    WRISTS = "wrists"
    HIPS = "hips"
    QUADRICEPS = "quadriceps"
    KNEES = "knees"
    ANKLES = "ankles"
    # Back body
    UPPER_BACK = "upper_back"
    LOWER_BACK = "lower_back"
    SPINE = "spine"
    GLUTES = "glutes"
    HAMSTRINGS = "hamstrings"
    CALVES = "calves"


@dataclass(frozen=True)
class RegionInfo:
    """Display metadata for a canonical region."""

    label: str
    side: Side


REGION_INFO: Mapping[BodyRegion, RegionInfo] = MappingProxyType(
    {
        BodyRegion.NECK: RegionInfo("Neck", Side.FRONT),
        BodyRegion.SHOULDERS: RegionInfo("Shoulders", Side.BOTH),
        BodyRegion.CHEST: RegionInfo("Chest", Side.FRONT),
        BodyRegion.CORE: RegionInfo("Core/Abs", Side.FRONT),
        BodyRegion.ARMS: RegionInfo("Arms", Side.BOTH),
        BodyRegion.WRISTS: RegionInfo("Wrists", Side.BOTH),
        BodyRegion.HIPS: RegionInfo("Hips", Side.BOTH),
        BodyRegion.QUADRICEPS: RegionInfo("Quadriceps", Side.FRONT),
        BodyRegion.KNEES: RegionInfo("Knees", Side.BOTH),
        BodyRegion.ANKLES: RegionInfo("Ankles", Side.BOTH),
        BodyRegion.UPPER_BACK: RegionInfo("Upper Back", Side.BACK),
        BodyRegion.LOWER_BACK: RegionInfo("Lower Back", Side.BACK),
        BodyRegion.SPINE: RegionInfo("Spine", Side.BACK),
        BodyRegion.GLUTES: RegionInfo("Glutes", Side.BACK),
        BodyRegion.HAMSTRINGS: RegionInfo("Hamstrings", Side.BACK),
        BodyRegion.CALVES: RegionInfo("Calves", Side.BACK),
    }
)

UPPER_BODY_REGIONS: tuple[BodyRegion, ...] = (
    BodyRegion.NECK,
    BodyRegion.SHOULDERS,
    BodyRegion.CHEST,
    BodyRegion.ARMS,
    BodyRegion.WRISTS,
    BodyRegion.UPPER_BACK,
)

LOWER_BODY_REGIONS: tuple[BodyRegion, ...] = (
    BodyRegion.HIPS,
    BodyRegion.QUADRICEPS,
    BodyRegion.HAMSTRINGS,
    BodyRegion.GLUTES,
    BodyRegion.CALVES,
    BodyRegion.ANKLES,
)

# Normalized free-text tag -> canonical regions.
# A tag may fan out to several regions; each one is credited in full.
REGION_TAG_MAPPING: Mapping[str, tuple[BodyRegion, ...]] = MappingProxyType(
    {
        "neck": (BodyRegion.NECK,),
        "shoulders": (BodyRegion.SHOULDERS,),
        "chest": (BodyRegion.CHEST,),
        "core": (BodyRegion.CORE,),
        "abs": (BodyRegion.CORE,),
        "abdominals": (BodyRegion.CORE,),
        "arms": (BodyRegion.ARMS,),
        "biceps": (BodyRegion.ARMS,),
        "triceps": (BodyRegion.ARMS,),
        "forearms": (BodyRegion.ARMS,),
        "wrists": (BodyRegion.WRISTS,),
        "hands": (BodyRegion.WRISTS,),
        "hips": (BodyRegion.HIPS,),
        "hip_flexors": (BodyRegion.HIPS,),
        "quadriceps": (BodyRegion.QUADRICEPS,),
        "quads": (BodyRegion.QUADRICEPS,),
        "thighs": (BodyRegion.QUADRICEPS, BodyRegion.HAMSTRINGS),
        "knees": (BodyRegion.KNEES,),
        "ankles": (BodyRegion.ANKLES,),
        "feet": (BodyRegion.ANKLES,),
        "upper_back": (BodyRegion.UPPER_BACK,),
        "back": (BodyRegion.UPPER_BACK, BodyRegion.LOWER_BACK),
        "lower_back": (BodyRegion.LOWER_BACK,),
        "spine": (BodyRegion.SPINE,),
        "glutes": (BodyRegion.GLUTES,),
        "buttocks": (BodyRegion.GLUTES,),
        "hamstrings": (BodyRegion.HAMSTRINGS,),
        "calves": (BodyRegion.CALVES,),
        "legs": (BodyRegion.QUADRICEPS, BodyRegion.HAMSTRINGS, BodyRegion.CALVES),
        "full_body": tuple(BodyRegion),
    }
)


def normalize_region_tag(tag: str) -> str:
    """Normalize a free-text region tag.

    Lowercases and replaces every character outside [a-z0-9_] with an
    underscore, so "Upper Back" and "upper-back" both become "upper_back".
    """
    return re.sub(r"[^a-z0-9_]", "_", tag.strip().lower())


def map_region_tag(
    tag: str,
    mapping: Mapping[str, tuple[BodyRegion, ...]] = REGION_TAG_MAPPING,
) -> tuple[BodyRegion, ...]:
    """Map a free-text tag to canonical regions.

    Unknown tags map to an empty tuple rather than raising.
    """
    return mapping.get(normalize_region_tag(tag), ())


def map_region_tags(
    tags: list[str] | tuple[str, ...],
    mapping: Mapping[str, tuple[BodyRegion, ...]] = REGION_TAG_MAPPING,
) -> list[BodyRegion]:
    """Map several tags, keeping first-seen order and dropping duplicates."""
    regions: list[BodyRegion] = []
    for tag in tags:
        for region in map_region_tag(tag, mapping):
            if region not in regions:
                regions.append(region)
    return regions

"""Pose catalog and practice history loaders from JSON snapshots."""

import json
from pathlib import Path

from ..models.history import PracticeLog, PracticeRecord
from ..models.poses import COMMON_POSES, Pose
from ..utils.pose_utils import build_pose_index, normalize_pose_name

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"


def get_data_dir() -> Path:
    """Get the data directory path."""
    return DATA_DIR


def get_catalog_json_path(data_dir: Path | None = None) -> Path:
    """Get the path to the pose catalog JSON file."""
    if data_dir is None:
        data_dir = DATA_DIR
    return data_dir / "poses.json"


def _read_entries(path: Path, key: str) -> list[dict]:
    with open(path) as f:
        data = json.load(f)
    # Accept either {"<key>": [...]} or a bare list
    if isinstance(data, list):
        return data
    return data.get(key, [])


def load_catalog(path: Path | None = None) -> list[Pose]:
    """Load the pose catalog.

    Falls back to COMMON_POSES when the file does not exist.

    Args:
        path: Catalog file, defaults to data/poses.json

    Returns:
        List of Pose objects
    """
    if path is None:
        path = get_catalog_json_path()
    if not path.exists():
        return list(COMMON_POSES)

    poses = []
    for entry in _read_entries(path, "poses"):
        try:
            poses.append(Pose.from_dict(entry))
        except (ValueError, KeyError, TypeError) as e:
            # Skip invalid poses but report them
            print(f"Warning: Skipping invalid pose {entry.get('id', 'unknown')}: {e}")
            continue

    return poses


def load_practice_records(path: Path, catalog: list[Pose]) -> list[PracticeRecord]:
    """Load per-pose practice totals from a JSON file."""
    return parse_practice_records(_read_entries(path, "records"), catalog)


def parse_practice_records(
    entries: list[dict], catalog: list[Pose]
) -> list[PracticeRecord]:
    """Build practice records and join them with catalog regions.

    Entries may carry their own target_regions; otherwise the pose is looked
    up in the catalog. Entries for unknown poses keep no regions.
    """
    index = build_pose_index(catalog)
    records = []

    for entry in entries:
        try:
            record = PracticeRecord.from_dict(entry)
        except (ValueError, KeyError, TypeError) as e:
            print(f"Warning: Skipping invalid practice record: {e}")
            continue

        pose = index.get(normalize_pose_name(record.pose_id))
        if pose is not None:
            if not record.target_regions:
                record.target_regions = list(pose.target_regions)
            if "pose_name" not in entry:
                record.pose_name = pose.name_english
        records.append(record)

    return records


def load_practice_logs(path: Path) -> list[PracticeLog]:
    """Load logged practice sessions from a JSON file."""
    return parse_practice_logs(_read_entries(path, "logs"))


def parse_practice_logs(entries: list[dict]) -> list[PracticeLog]:
    """Build practice logs, skipping malformed entries."""
    logs = []
    for entry in entries:
        try:
            logs.append(PracticeLog.from_dict(entry))
        except (ValueError, KeyError, TypeError) as e:
            print(f"Warning: Skipping invalid practice log: {e}")
            continue
    return logs

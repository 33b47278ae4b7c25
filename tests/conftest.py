"""Pytest configuration and fixtures."""

import json
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from asana_flow.models.history import PracticeLog
from asana_flow.models.poses import Category, Pose


@pytest.fixture
def temp_dir():
    """Create a temporary directory for JSON snapshots."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def now():
    """Fixed reference time for window calculations."""
    return datetime(2024, 6, 15, 12, 0)


@pytest.fixture
def mountain():
    return Pose(
        id="mountain",
        name_english="Mountain Pose",
        name_native="Tadasana",
        category=Category.STANDING,
        difficulty=1,
        target_regions=("legs", "core"),
    )


@pytest.fixture
def tree():
    return Pose(
        id="tree",
        name_english="Tree Pose",
        name_native="Vrksasana",
        category=Category.BALANCE,
        difficulty=2,
        target_regions=("legs", "ankles"),
    )


@pytest.fixture
def warrior_1():
    return Pose(
        id="warrior-1",
        name_english="Warrior I",
        name_native="Virabhadrasana I",
        category=Category.STANDING,
        difficulty=2,
        target_regions=("legs", "shoulders"),
    )


@pytest.fixture
def headstand():
    return Pose(
        id="headstand",
        name_english="Headstand",
        name_native="Salamba Sirsasana",
        category=Category.INVERSION,
        difficulty=5,
        target_regions=("shoulders", "core"),
    )


@pytest.fixture
def flow_catalog(mountain, tree, warrior_1, headstand):
    """Small catalog with one pose per flow outcome."""
    return [mountain, tree, warrior_1, headstand]


@pytest.fixture
def standing_logs(now, mountain):
    """Six hour-long sessions of one STANDING pose over the last week."""
    return [
        PracticeLog(
            duration_minutes=60,
            created_at=now - timedelta(days=day),
            poses=[mountain.name_english],
        )
        for day in range(6)
    ]


@pytest.fixture
def write_json(temp_dir):
    """Write data to a JSON file in the temporary directory."""

    def _write(name: str, data) -> Path:
        path = temp_dir / name
        path.write_text(json.dumps(data))
        return path

    return _write

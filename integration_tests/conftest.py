"""Pytest configuration for integration tests."""

import json
from datetime import datetime, timedelta, timezone

import pytest


# Mark all tests in this directory as integration tests
def pytest_collection_modifyitems(items):
    """Add integration marker to all tests in this directory."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def history_file(tmp_path):
    """Per-pose practice totals as the data layer would export them.

    Crow pose was last practiced years ago and falls outside any window.
    """
    recent = (datetime.now(timezone.utc) - timedelta(days=2)).isoformat()
    path = tmp_path / "history.json"
    path.write_text(
        json.dumps(
            {
                "records": [
                    {"pose_id": "cobra", "practice_count": 10, "last_practiced": recent},
                    {"pose_id": "warrior-2", "practice_count": 4, "last_practiced": recent},
                    {"pose_id": "tree", "practice_count": 2, "last_practiced": recent},
                    {
                        "pose_id": "crow",
                        "practice_count": 50,
                        "last_practiced": "2020-01-01T00:00:00Z",
                    },
                ]
            }
        )
    )
    return path


@pytest.fixture
def write_history(tmp_path):
    """Write a list of practice records to a history snapshot."""

    def _write(records: list[dict]):
        path = tmp_path / "snapshot.json"
        path.write_text(json.dumps({"records": records}))
        return path

    return _write


@pytest.fixture
def heavy_week():
    """Six hour-long Mountain Pose sessions in the past week."""
    now = datetime.now()
    return [
        {
            "duration_minutes": 60,
            "created_at": (now - timedelta(days=day)).isoformat(),
            "poses": ["Mountain Pose"],
        }
        for day in range(6)
    ]


@pytest.fixture
def logs_file(tmp_path, heavy_week):
    path = tmp_path / "logs.json"
    path.write_text(json.dumps({"logs": heavy_week}))
    return path

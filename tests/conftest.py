"""Pytest fixtures and configuration for test suite."""
import os
import tempfile
from datetime import datetime

import pytest


@pytest.fixture
def now():
    """Fixed reference time for date formatting tests."""
    return datetime(2026, 10, 17, 12, 0)


@pytest.fixture
def squat_logs():
    """Three Squat logs; 225 is the personal record."""
    return [
        {"exercise": "Squat", "calculated_one_rm": 200.0},
        {"exercise": "Squat", "calculated_one_rm": 225.0},
        {"exercise": "Squat", "calculated_one_rm": 210.0},
    ]


@pytest.fixture
def sample_log_data():
    """Sample log entry payload for testing."""
    return {
        "id": "test-log-123",
        "date": datetime(2025, 10, 1, 18, 30),
        "exercise": "Squat",
        "weight": 225.0,
        "reps": 5,
        "sets": 3,
        "calculated_one_rm": 262.5,
        "one_rm_formula": "epley",
        "notes": "Felt strong",
    }


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database for testing."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    os.unlink(path)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def mock_env_sqlite(temp_db, monkeypatch):
    """Mock environment for SQLite mode."""
    monkeypatch.setenv("DB_PATH", temp_db)
    return temp_db

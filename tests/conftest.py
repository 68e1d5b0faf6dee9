"""Shared pytest fixtures and configuration."""

import pytest
import tempfile
from pathlib import Path

from raft_snapshots.settings import SnapshotsSettings


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def valid_settings():
    """Settings with snapshots enabled and every field in range."""
    return SnapshotsSettings(
        min_entries_to_snapshot=1000,
        snapshot_check_interval=60_000,
        snapshots_directory="/var/lib/raft/snapshots",
    )


@pytest.fixture
def sample_agent_config():
    """Full agent configuration holding a snapshots block."""
    return {
        "cluster": {"self": "agent0", "members": ["agent0", "agent1", "agent2"]},
        "snapshots": {
            "minEntriesToSnapshot": 500,
            "snapshotCheckInterval": 30_000,
            "snapshotsDirectory": "data/snapshots",
        },
    }


@pytest.fixture
def write_config(temp_dir):
    """Write text to a config file in the temporary directory."""

    def _write(content: str, name: str = "config.yaml") -> Path:
        path = temp_dir / name
        path.write_text(content)
        return path

    return _write

"""Validated snapshot configuration for a replicated consensus log."""

from raft_snapshots.constants import SNAPSHOTS_DISABLED
from raft_snapshots.policy import EveryNEntries, SnapshotPolicy, SnapshotsDisabled
from raft_snapshots.settings import SnapshotsSettings
from raft_snapshots.violations import (
    ConfigFileError,
    InvalidSnapshotsConfigError,
    SnapshotsConfigError,
    ValidationViolation,
)

__all__ = [
    "SNAPSHOTS_DISABLED",
    "ConfigFileError",
    "EveryNEntries",
    "InvalidSnapshotsConfigError",
    "SnapshotPolicy",
    "SnapshotsConfigError",
    "SnapshotsDisabled",
    "SnapshotsSettings",
    "ValidationViolation",
]

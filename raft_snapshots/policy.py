"""Tagged form of the minEntriesToSnapshot sentinel encoding."""

from pydantic import BaseModel, ConfigDict, Field

from raft_snapshots.constants import (
    MIN_ENTRIES_TO_SNAPSHOT_CEIL,
    MIN_ENTRIES_TO_SNAPSHOT_FLOOR,
    SNAPSHOTS_DISABLED,
)


class SnapshotsDisabled(BaseModel):
    """Never snapshot based on the number of committed entries."""

    model_config = ConfigDict(frozen=True)


class EveryNEntries(BaseModel):
    """Snapshot once at least `count` committed entries are in the log."""

    model_config = ConfigDict(frozen=True)

    count: int = Field(
        ge=MIN_ENTRIES_TO_SNAPSHOT_FLOOR, le=MIN_ENTRIES_TO_SNAPSHOT_CEIL
    )


SnapshotPolicy = SnapshotsDisabled | EveryNEntries


def policy_from_min_entries(min_entries_to_snapshot: int) -> SnapshotPolicy:
    """Convert the sentinel encoding into a tagged policy.

    Args:
        min_entries_to_snapshot: SNAPSHOTS_DISABLED or a committed-entry count

    Returns:
        SnapshotPolicy: SnapshotsDisabled for the sentinel, EveryNEntries otherwise

    Raises:
        pydantic.ValidationError: If the count is out of range
    """
    if min_entries_to_snapshot == SNAPSHOTS_DISABLED:
        return SnapshotsDisabled()
    return EveryNEntries(count=min_entries_to_snapshot)


def min_entries_from_policy(policy: SnapshotPolicy) -> int:
    """Convert a tagged policy back into the sentinel encoding.

    Args:
        policy: Policy to encode

    Returns:
        int: SNAPSHOTS_DISABLED, or the policy's entry count
    """
    if isinstance(policy, SnapshotsDisabled):
        return SNAPSHOTS_DISABLED
    return policy.count

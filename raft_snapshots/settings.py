"""Snapshot settings for the replicated log.

Controls when the log is compacted into a snapshot and where snapshot files
are kept. Binding is permissive: any integer or string is accepted and stored
as given, including on attribute assignment. Range checks live in
`SnapshotsSettings.validate()`, which the loader must call before the
settings are handed to the snapshotter.
"""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator

from raft_snapshots.constants import (
    DEFAULT_SNAPSHOTS_DIRECTORY,
    MIN_ENTRIES_TO_SNAPSHOT_CEIL,
    MIN_ENTRIES_TO_SNAPSHOT_FLOOR,
    ONE_SECOND,
    SNAPSHOT_CHECK_INTERVAL,
    SNAPSHOTS_DISABLED,
    TWELVE_HOURS,
)
from raft_snapshots.policy import (
    SnapshotPolicy,
    min_entries_from_policy,
    policy_from_min_entries,
)
from raft_snapshots.violations import InvalidSnapshotsConfigError, ValidationViolation

MIN_ENTRIES_TO_SNAPSHOT = "minEntriesToSnapshot"
SNAPSHOT_CHECK_INTERVAL_KEY = "snapshotCheckInterval"
SNAPSHOTS_DIRECTORY = "snapshotsDirectory"


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count or interval
    return isinstance(value, int) and not isinstance(value, bool)


class SnapshotsSettings(BaseModel):
    """Snapshot settings loaded from the `snapshots` configuration block.

    Attribute names are snake_case; the structured-config keys are the
    camelCase aliases (`minEntriesToSnapshot`, `snapshotCheckInterval`,
    `snapshotsDirectory`). Either form is accepted on input.

    Instances are mutable until validated. Callers must not mutate a
    validated instance that is shared between threads.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    # Either SNAPSHOTS_DISABLED or a committed-entry count
    min_entries_to_snapshot: int = Field(
        default=SNAPSHOTS_DISABLED, alias=MIN_ENTRIES_TO_SNAPSHOT
    )
    # Milliseconds; still carries a value when snapshots are disabled
    snapshot_check_interval: int = Field(
        default=SNAPSHOT_CHECK_INTERVAL, alias=SNAPSHOT_CHECK_INTERVAL_KEY
    )
    # Absolute, or relative to the working directory
    snapshots_directory: str = Field(
        default=DEFAULT_SNAPSHOTS_DIRECTORY, alias=SNAPSHOTS_DIRECTORY
    )

    @field_validator("min_entries_to_snapshot", "snapshot_check_interval", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be an integer, not a boolean")
        return value

    def validate(self) -> list[ValidationViolation]:
        """Check every field against its constraint.

        Returns:
            list[ValidationViolation]: All violations in field declaration
                order, empty when the settings are valid
        """
        violations: list[ValidationViolation] = []

        if not _is_int(self.min_entries_to_snapshot):
            violations.append(
                ValidationViolation(
                    field=MIN_ENTRIES_TO_SNAPSHOT,
                    value=self.min_entries_to_snapshot,
                    rule="must be an integer",
                )
            )
        elif self.min_entries_to_snapshot != SNAPSHOTS_DISABLED and not (
            MIN_ENTRIES_TO_SNAPSHOT_FLOOR
            <= self.min_entries_to_snapshot
            <= MIN_ENTRIES_TO_SNAPSHOT_CEIL
        ):
            violations.append(
                ValidationViolation(
                    field=MIN_ENTRIES_TO_SNAPSHOT,
                    value=self.min_entries_to_snapshot,
                    rule=(
                        f"must be between {MIN_ENTRIES_TO_SNAPSHOT_FLOOR} and "
                        f"{MIN_ENTRIES_TO_SNAPSHOT_CEIL}, or {SNAPSHOTS_DISABLED} "
                        "to disable snapshots"
                    ),
                )
            )

        if not _is_int(self.snapshot_check_interval):
            violations.append(
                ValidationViolation(
                    field=SNAPSHOT_CHECK_INTERVAL_KEY,
                    value=self.snapshot_check_interval,
                    rule="must be an integer",
                )
            )
        elif not ONE_SECOND <= self.snapshot_check_interval <= TWELVE_HOURS:
            violations.append(
                ValidationViolation(
                    field=SNAPSHOT_CHECK_INTERVAL_KEY,
                    value=self.snapshot_check_interval,
                    rule=f"must be between {ONE_SECOND} and {TWELVE_HOURS} milliseconds",
                )
            )

        if not isinstance(self.snapshots_directory, str) or not self.snapshots_directory:
            violations.append(
                ValidationViolation(
                    field=SNAPSHOTS_DIRECTORY,
                    value=self.snapshots_directory,
                    rule="must be a non-empty string",
                )
            )

        return violations

    def is_valid(self) -> bool:
        return not self.validate()

    def require_valid(self) -> Self:
        """Return the settings unchanged if valid.

        Raises:
            InvalidSnapshotsConfigError: With every violation found
        """
        violations = self.validate()
        if violations:
            raise InvalidSnapshotsConfigError(violations)
        return self

    @classmethod
    def build(cls, **values: Any) -> Self:
        """Construct settings and validate them in one step.

        Args:
            **values: Field values keyed by attribute name or config key

        Raises:
            InvalidSnapshotsConfigError: If any field is out of range
        """
        return cls(**values).require_valid()

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> Self:
        """Bind a structured-config mapping without range checks."""
        return cls.model_validate(dict(config))

    def to_config(self) -> dict[str, Any]:
        """Render the settings keyed by their structured-config names."""
        return self.model_dump(by_alias=True)

    @property
    def snapshots_enabled(self) -> bool:
        return self.min_entries_to_snapshot != SNAPSHOTS_DISABLED

    @property
    def snapshot_policy(self) -> SnapshotPolicy:
        """Tagged form of `min_entries_to_snapshot`.

        Raises:
            pydantic.ValidationError: If the entry count is out of range
        """
        return policy_from_min_entries(self.min_entries_to_snapshot)

    @snapshot_policy.setter
    def snapshot_policy(self, policy: SnapshotPolicy) -> None:
        self.min_entries_to_snapshot = min_entries_from_policy(policy)

    def _key(self) -> tuple[int, int, str]:
        return (
            self.min_entries_to_snapshot,
            self.snapshot_check_interval,
            self.snapshots_directory,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SnapshotsSettings):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return (
            f"SnapshotsSettings{{{MIN_ENTRIES_TO_SNAPSHOT}={self.min_entries_to_snapshot}, "
            f"{SNAPSHOT_CHECK_INTERVAL_KEY}={self.snapshot_check_interval}, "
            f"{SNAPSHOTS_DIRECTORY}={self.snapshots_directory}}}"
        )

"""Validation violations and configuration errors."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ValidationViolation(BaseModel):
    """A field whose current value breaks its constraint.

    Attributes:
        field: Structured-config name of the field (e.g. ``snapshotsDirectory``)
        value: The offending value
        rule: Human-readable description of the violated constraint
    """

    model_config = ConfigDict(frozen=True)

    field: str
    value: Any
    rule: str

    def __str__(self) -> str:
        return f"{self.field}: {self.rule} (got {self.value!r})"


class SnapshotsConfigError(Exception):
    """Base exception for snapshot configuration failures."""


class InvalidSnapshotsConfigError(SnapshotsConfigError):
    """Exception raised when a snapshots configuration fails validation.

    Carries every violation found, not just the first one.
    """

    def __init__(self, violations: list[ValidationViolation]) -> None:
        self.violations = list(violations)
        lines = "\n".join(f"  {violation}" for violation in self.violations)
        super().__init__(
            f"Invalid snapshots config ({len(self.violations)} violation(s)):\n{lines}"
        )


class ConfigFileError(SnapshotsConfigError):
    """Exception raised when a config file does not hold a mapping."""

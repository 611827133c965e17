"""Engine exceptions.

Raised at single-column seams; batch operations catch them and report a
ColumnError per failing variable instead of aborting the batch.
"""

from statsctl.core.models.base import ColumnError, ColumnKind, ErrorKind


class StatsctlError(Exception):
    """Base class for engine errors."""

    error_kind: ErrorKind

    def __init__(self, variable: str, message: str):
        self.variable = variable
        self.message = message
        super().__init__(message)

    def to_column_error(self) -> ColumnError:
        """Convert to the data form carried in batch results."""
        return ColumnError(variable=self.variable, error=self.error_kind, message=self.message)


class SchemaError(StatsctlError):
    """Requested variable is not in the table."""

    error_kind = ErrorKind.SCHEMA

    def __init__(self, variable: str):
        super().__init__(variable, f"Column '{variable}' not found")


class TypeMismatchError(StatsctlError):
    """Numeric-only operation requested on a non-numeric column."""

    error_kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, variable: str, kind: ColumnKind):
        self.kind = kind
        super().__init__(
            variable,
            f"Column '{variable}' is {kind.value}, a Numeric column is required",
        )

    def to_column_error(self) -> ColumnError:
        return ColumnError(
            variable=self.variable,
            error=self.error_kind,
            message=self.message,
            kind=self.kind,
        )

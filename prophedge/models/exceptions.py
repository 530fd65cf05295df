"""
Custom exception classes for the challenge planner.

This module defines the domain-specific exception raised when a planner
configuration cannot support a computation, such as dividing by a zero
per-trade risk or simulating zero trials.

Advisory problems (contradictory but computable inputs) are reported as
warnings by the planner and never raise.
"""

from typing import Any


class ConfigurationError(Exception):
    """
    Raised when a configuration value makes a computation undefined.

    This exception indicates inputs the engine refuses to compute with,
    such as:
    - Zero or negative per-trade risk (risk limits divide by it)
    - Zero minimum trading days (the average daily pace divides by it)
    - Zero or negative daily target in a phase projection
    - Zero or negative Monte Carlo trial count
    - Schema violations while loading a configuration record

    Attributes:
        message: Human-readable error description.
        field: Name of the offending configuration field, if known.
        value: The offending value, if known.

    Examples:
        >>> raise ConfigurationError(
        ...     "Per-trade risk must be positive",
        ...     field="prop_risk",
        ...     value=0.0,
        ... )
        Traceback (most recent call last):
        ...
        ConfigurationError: Per-trade risk must be positive (field=prop_risk, value=0.0)
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Error description.
            field: Configuration field that caused the error.
            value: Value of that field.
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value

    def __str__(self) -> str:
        """Return string representation of the error."""
        parts = []
        if self.field is not None:
            parts.append(f"field={self.field}")
        if self.value is not None:
            parts.append(f"value={self.value}")
        if parts:
            return f"{self.message} ({', '.join(parts)})"
        return self.message

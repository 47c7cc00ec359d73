from __future__ import annotations

from typing import Iterable


class NetfenceError(Exception):
    """Base class for netfence exceptions."""


class PatternValidationError(NetfenceError, ValueError):
    """Raised when a single allowlist entry is not a valid host pattern."""

    def __init__(self, entry: str, reason: str) -> None:
        self.entry = entry
        self.reason = reason
        super().__init__(f'Invalid host pattern "{entry}": {reason}')


class ConfigurationError(NetfenceError):
    """Raised when the allowlist variable holds one or more invalid entries.

    Callers must treat this as fatal: no isolation argument is produced.
    """

    def __init__(self, variable: str, errors: Iterable[str]) -> None:
        self.variable = variable
        self.errors = list(errors)
        lines = "".join(f"\n  - {error}" for error in self.errors)
        super().__init__(f"Invalid {variable}:{lines}")

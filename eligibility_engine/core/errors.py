"""Engine exceptions."""
from __future__ import annotations

from typing import Any


class ScoringError(Exception):
    """Base exception for the scoring engine"""


class InvalidInputError(ScoringError):
    """A numeric input field is NaN or infinite"""

    def __init__(self, field: str, value: Any):
        self.field = field
        self.value = value
        super().__init__(f"Invalid value for '{field}': {value!r} (must be a finite number)")

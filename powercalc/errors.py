"""Exceptions raised by the sample size engine."""

from __future__ import annotations


class DomainError(ValueError):
    """Raised when a probability lies outside the open interval (0, 1)."""


class InvalidParameterError(ValueError):
    """Raised when a design cannot produce a defined sample size."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field}={value!r}: {reason}")

"""Custom exception hierarchy for the Tameer estimator."""

from __future__ import annotations


class TameerError(Exception):
    """Base exception for all Tameer errors."""


class InvalidInputError(TameerError):
    """Raised when project inputs violate a domain constraint.

    These are deliberately not ``ValueError`` subclasses so that pydantic
    validators let them through unwrapped.
    """


class InvalidUnitError(InvalidInputError):
    """Raised when an area unit is not one of Marla, Kanal or SqFt."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unrecognized unit type {value!r}; expected one of Marla, Kanal, SqFt"
        )


class InvalidEnumValueError(InvalidInputError):
    """Raised when an enumerated input field holds an unknown value."""

    def __init__(self, field: str, value: object, allowed: list[str]) -> None:
        self.field = field
        self.value = value
        self.allowed = allowed
        super().__init__(
            f"Invalid value {value!r} for '{field}'; "
            f"expected one of {', '.join(allowed)}"
        )


class MissingPriceDataWarning(UserWarning):
    """A material has no row in the price table; a default price was used."""

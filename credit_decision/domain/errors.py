"""Error types raised by ingestion and entity construction."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when an inbound payload cannot be coerced into typed entities.

    Attributes:
        field_name: Dotted path of the offending payload field.
    """

    def __init__(self, field_name: str, message: str):
        """Initialize validation error with offending field context.

        Args:
            field_name: Dotted path of the offending payload field.
            message: Human-readable failure description.

        Returns:
            None: Initializer does not return a value.

        Raises:
            RuntimeError: This initializer does not raise runtime errors.
        """

        super().__init__(f"{field_name}: {message}")
        self.field_name = field_name
        self.message = message


class ContractViolationError(ValueError):
    """Raised when an entity is constructed with values outside its contract."""


__all__ = ["ContractViolationError", "ValidationError"]

"""Errors raised by field-element construction and arithmetic."""

from __future__ import annotations


class FieldElementError(Exception):
    """Base class for field-element contract violations.

    Each subclass carries a fixed message and no other payload.
    """

    message = "Field element error"

    def __init__(self, *args: object) -> None:
        # args are ignored so pickle and copy can rebuild the instance
        super().__init__(self.message)


class DifferentFieldsError(FieldElementError):
    """Raised when a binary operation mixes elements of different primes."""

    message = "Cannot operate on elements from different fields"


class InvalidElementError(FieldElementError):
    """Raised when ``num`` falls outside ``[0, prime)``."""

    message = "Element is not in valid field range"

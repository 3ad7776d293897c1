"""FieldElement – an immutable element of the prime field F_p.

Construction validates ``0 <= num < prime``; ``prime`` itself is trusted.
Binary operations require both operands to share the same ``prime`` and
raise ``DifferentFieldsError`` otherwise.  Operators ``+ - * / **`` bind
to the named methods ``add``, ``sub``, ``mul``, ``div`` and ``pow``.

Two unchecked edge cases are kept as-is:

  pow with a negative exponent   -> FieldElement(1, p)
  division by the zero element   -> FieldElement(0, p)

Fields are strict ints: strings and floats are rejected by pydantic with a
``ValidationError`` rather than coerced.  ``model_copy`` re-runs the range
check; ``model_construct`` skips all validation and must only be fed values
already known to be in range.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, model_validator

from primefield.crypto import field
from primefield.errors import DifferentFieldsError, InvalidElementError


class FieldElement(BaseModel):
    """A residue ``num`` modulo ``prime``."""

    model_config = ConfigDict(frozen=True, strict=True)

    num: int
    prime: int

    def __init__(self, num: int, prime: int) -> None:
        super().__init__(num=num, prime=prime)

    @model_validator(mode="after")
    def _check_range(self) -> "FieldElement":
        if self.num >= self.prime or self.num < 0:
            raise InvalidElementError()
        return self

    @classmethod
    def new(cls, num: int, prime: int) -> "FieldElement":
        """Validating constructor; raises ``InvalidElementError``."""
        return cls(num, prime)

    def model_copy(self, *, update: Dict[str, Any] | None = None, deep: bool = False) -> "FieldElement":
        copied = super().model_copy(update=update, deep=deep)
        return self.__class__(copied.num, copied.prime)

    def __repr__(self) -> str:
        return f"FieldElement_{self.prime}({self.num})"

    def __str__(self) -> str:
        return repr(self)

    def _check_same_field(self, other: "FieldElement") -> None:
        if self.prime != other.prime:
            raise DifferentFieldsError()

    # ---------- named operations ----------

    def add(self, other: "FieldElement") -> "FieldElement":
        self._check_same_field(other)
        return self.__class__(field.add(self.num, other.num, self.prime), self.prime)

    def sub(self, other: "FieldElement") -> "FieldElement":
        self._check_same_field(other)
        return self.__class__(field.sub(self.num, other.num, self.prime), self.prime)

    def mul(self, other: "FieldElement") -> "FieldElement":
        self._check_same_field(other)
        return self.__class__(field.mul(self.num, other.num, self.prime), self.prime)

    def pow(self, exponent: int) -> "FieldElement":
        """``num ** exponent mod prime``; never fails on a valid element."""
        return self.__class__(field.pow_mod(self.num, exponent, self.prime), self.prime)

    def div(self, other: "FieldElement") -> "FieldElement":
        """Multiply by the Fermat inverse ``other ** (p - 2)``.

        ``other`` must be non-zero; a zero divisor silently yields zero.
        """
        self._check_same_field(other)
        other_inv = other.pow(self.prime - 2)
        return self.__class__(field.mul(self.num, other_inv.num, self.prime), self.prime)

    def neg(self) -> "FieldElement":
        """Additive inverse."""
        return self.__class__(field.neg(self.num, self.prime), self.prime)

    def inverse(self) -> "FieldElement":
        """Multiplicative inverse (unchecked for zero, like ``div``)."""
        return self.__class__(field.inv(self.num, self.prime), self.prime)

    def is_zero(self) -> bool:
        return self.num == 0

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    # ---------- operator bindings ----------

    def __add__(self, other: Any) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other: Any) -> "FieldElement":
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.div(other)

    def __pow__(self, exponent: Any) -> "FieldElement":
        if not isinstance(exponent, int):
            return NotImplemented
        return self.pow(exponent)

    def __neg__(self) -> "FieldElement":
        return self.neg()

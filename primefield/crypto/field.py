"""Prime-field arithmetic F_p over plain ints.

Inputs are assumed already reduced into [0, prime); every result is.
``prime`` is trusted to be prime and is never checked.
"""

from __future__ import annotations


def add(a: int, b: int, prime: int) -> int:
    """Field addition."""
    return (a + b) % prime


def sub(a: int, b: int, prime: int) -> int:
    """Field subtraction."""
    d = (a - b) % prime
    # Redundant for Python ints, kept so the result never depends on the sign of %.
    return (d + prime) % prime


def mul(a: int, b: int, prime: int) -> int:
    """Field multiplication."""
    return (a * b) % prime


def pow_mod(base: int, exponent: int, prime: int) -> int:
    """Square-and-multiply ``base ** exponent mod prime``.

    A negative exponent never enters the loop and yields 1.
    """
    result = 1
    base = reduce(base, prime)
    while exponent > 0:
        if exponent % 2 == 1:
            result = (result * base) % prime
        base = (base * base) % prime
        exponent //= 2
    return result


def inv(a: int, prime: int) -> int:
    """Multiplicative inverse via Fermat's little theorem (p is prime).

    Unchecked: the inverse of 0 comes out as 0.
    """
    return pow_mod(a, prime - 2, prime)


def neg(a: int, prime: int) -> int:
    """Additive inverse."""
    return (-a) % prime


def reduce(a: int, prime: int) -> int:
    """Reduce an integer into [0, prime)."""
    return a % prime

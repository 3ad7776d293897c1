#!/usr/bin/env python3
"""primefield demo.

Usage:
    python -m primefield.demo.run_demo

Builds a = FieldElement(2, 19) and b = FieldElement(7, 19) and prints
a + b, a - b, a * b, a / b and a ** 3, one per line.  With the default
prime the output is:

    FieldElement_19(9)
    FieldElement_19(14)
    FieldElement_19(14)
    FieldElement_19(3)
    FieldElement_19(8)
"""

from __future__ import annotations

from typing import List

from primefield.config import DEMO_A_NUM, DEMO_B_NUM, DEMO_EXPONENT, DEMO_PRIME
from primefield.crypto.element import FieldElement


def sample_results(prime: int = DEMO_PRIME) -> List[FieldElement]:
    """Return the five demo results in print order."""
    a = FieldElement.new(DEMO_A_NUM, prime)
    b = FieldElement.new(DEMO_B_NUM, prime)
    return [
        a + b,
        a - b,   # 2 - 7 = -5 = 14 (mod 19)
        a * b,
        a / b,   # 2 * 7^-1 = 2 * 11 = 22 = 3 (mod 19)
        a.pow(DEMO_EXPONENT),
    ]


def main() -> None:
    for result in sample_results():
        print(result)


if __name__ == "__main__":
    main()

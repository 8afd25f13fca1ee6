"""Balancer Fixed Point (Bfp) math.

18-decimal fixed-point arithmetic matching Balancer's FixedPoint.sol
rounding rules (mulDown/mulUp/divDown/divUp). All values are stored as
integers scaled by 10^18; nothing here touches floating point.
"""

from __future__ import annotations

from decimal import Decimal
from typing import ClassVar

from stablejoin.safe_int import DivisionByZero

__all__ = [
    "Bfp",
    "ONE_18",
    "AMP_PRECISION",
    "mul_down",
    "mul_up",
    "div_down",
    "div_up",
]

ONE_18 = 10**18

# Stable pool amplification is stored on-chain multiplied by this factor
AMP_PRECISION = 1000


def mul_down(a: int, b: int) -> int:
    """Multiply two fixed-point values, rounding down."""
    return (a * b) // ONE_18


def mul_up(a: int, b: int) -> int:
    """Multiply two fixed-point values, rounding up."""
    product = a * b
    if product == 0:
        return 0
    return (product - 1) // ONE_18 + 1


def div_down(a: int, b: int) -> int:
    """Divide two fixed-point values, rounding down."""
    if b == 0:
        raise DivisionByZero(detail="Bfp division by zero")
    return (a * ONE_18) // b


def div_up(a: int, b: int) -> int:
    """Divide two fixed-point values, rounding up."""
    if b == 0:
        raise DivisionByZero(detail="Bfp division by zero")
    if a == 0:
        return 0
    return (a * ONE_18 - 1) // b + 1


class Bfp:
    """18-decimal fixed-point number stored as int.

    Example: 1.5 is stored as 1_500_000_000_000_000_000
    """

    ONE: ClassVar[int] = ONE_18

    __slots__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value

    @classmethod
    def from_decimal(cls, d: Decimal) -> Bfp:
        """Create from an exact decimal, truncating below 10^-18.

        Raises:
            ValueError: If d is negative
        """
        if d < 0:
            raise ValueError(f"Bfp.from_decimal requires non-negative input, got {d}")
        return cls(int(d * cls.ONE))

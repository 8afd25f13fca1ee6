"""Safe integer wrapper for arithmetic on pool balances and BPT amounts.

SafeInt makes the stable math fail loudly instead of producing a wrong
amount:
- Division by zero raises DivisionByZero
- Subtraction underflow raises Underflow
- uint256 overflow is caught on conversion

Every error is a MathematicalError, so a failed mint computation surfaces
to the caller with a stable code instead of a silent zero.

Usage pattern:
    from stablejoin.safe_int import S

    def ratio(a: int, b: int) -> int:
        sa, sb = S(a), S(b)
        return (sa * ONE_18 // sb).value
"""

from __future__ import annotations

from stablejoin.errors import BalancerErrorCode, MathematicalError

UINT256_MAX = 2**256 - 1


class SafeIntError(MathematicalError, ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    default_code = BalancerErrorCode.DIVISION_BY_ZERO


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    default_code = BalancerErrorCode.UNDERFLOW


class Uint256Overflow(SafeIntError):
    """Value does not fit in uint256."""

    default_code = BalancerErrorCode.UINT256_OVERFLOW


class SafeInt:
    """Non-negative integer with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(detail=f"{self._value} - {other_val}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(detail=f"{other} - {self._value}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division rounding down.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(detail=f"{self._value} // 0")
        return SafeInt(self._value // other_val)

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Integer division rounding up.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(detail=f"ceil({self._value} / 0)")
        if self._value == 0:
            return SafeInt(0)
        return SafeInt((self._value - 1) // other_val + 1)

    def div(self, other: SafeInt | int, round_up: bool) -> SafeInt:
        """Divide with the rounding direction chosen at runtime."""
        if round_up:
            return self.ceiling_div(other)
        return self // other

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def to_uint256(self) -> int:
        """Convert to int, validating uint256 bounds.

        Raises:
            Uint256Overflow: If value is negative or exceeds 2^256-1
        """
        if self._value < 0 or self._value > UINT256_MAX:
            raise Uint256Overflow(detail=str(self._value))
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


S = SafeInt

__all__ = [
    "UINT256_MAX",
    "SafeInt",
    "S",
    "SafeIntError",
    "DivisionByZero",
    "Underflow",
    "Uint256Overflow",
]

"""Balancer error classes.

Every error carries a stable machine-checkable code (``BalancerErrorCode``)
and a human-readable message. Input errors are raised before any arithmetic
runs; mathematical errors come out of the stable math and are fatal for the
call that raised them.
"""

from __future__ import annotations

from enum import Enum


class BalancerErrorCode(str, Enum):
    """Stable error codes shared by the core and the HTTP layer."""

    INPUT_LENGTH_MISMATCH = "INPUT_LENGTH_MISMATCH"
    TOKEN_MISMATCH = "TOKEN_MISMATCH"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_SLIPPAGE = "INVALID_SLIPPAGE"
    MISSING_DECIMALS = "MISSING_DECIMALS"
    MISSING_AMP = "MISSING_AMP"
    UNSUPPORTED_POOL_TYPE = "UNSUPPORTED_POOL_TYPE"
    UNSUPPORTED_NETWORK = "UNSUPPORTED_NETWORK"
    STABLE_INVARIANT_DIDNT_CONVERGE = "STABLE_INVARIANT_DIDNT_CONVERGE"
    ZERO_SUPPLY = "ZERO_SUPPLY"
    ZERO_BALANCE = "ZERO_BALANCE"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    UNDERFLOW = "UNDERFLOW"
    UINT256_OVERFLOW = "UINT256_OVERFLOW"


_MESSAGES: dict[BalancerErrorCode, str] = {
    BalancerErrorCode.INPUT_LENGTH_MISMATCH: "input length mismatch",
    BalancerErrorCode.TOKEN_MISMATCH: "token mismatch",
    BalancerErrorCode.INVALID_AMOUNT: "invalid amount",
    BalancerErrorCode.INVALID_SLIPPAGE: "slippage must be an integer number of basis points in [0, 10000]",
    BalancerErrorCode.MISSING_DECIMALS: "missing decimals",
    BalancerErrorCode.MISSING_AMP: "missing amp",
    BalancerErrorCode.UNSUPPORTED_POOL_TYPE: "unsupported pool type",
    BalancerErrorCode.UNSUPPORTED_NETWORK: "unsupported network",
    BalancerErrorCode.STABLE_INVARIANT_DIDNT_CONVERGE: "stable invariant did not converge",
    BalancerErrorCode.ZERO_SUPPLY: "pool has zero total supply",
    BalancerErrorCode.ZERO_BALANCE: "pool balance must be positive",
    BalancerErrorCode.DIVISION_BY_ZERO: "division by zero",
    BalancerErrorCode.UNDERFLOW: "subtraction underflow",
    BalancerErrorCode.UINT256_OVERFLOW: "value exceeds uint256",
}


class BalancerError(Exception):
    """Base error for stable pool operations.

    Attributes:
        code: Machine-checkable error code
        detail: Optional extra context appended to the message
    """

    default_code: BalancerErrorCode = BalancerErrorCode.INPUT_LENGTH_MISMATCH

    def __init__(self, code: BalancerErrorCode | None = None, detail: str | None = None) -> None:
        self.code = code if code is not None else self.default_code
        self.detail = detail
        message = self.get_message(self.code)
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)

    @staticmethod
    def get_message(code: BalancerErrorCode) -> str:
        """Return the canonical message for an error code."""
        return _MESSAGES[code]


class InputError(BalancerError):
    """Caller-correctable input error, raised before any arithmetic."""

    pass


class MathematicalError(BalancerError):
    """Stable math failure. No partial or approximate result is returned."""

    default_code = BalancerErrorCode.DIVISION_BY_ZERO


class StableInvariantDidNotConverge(MathematicalError):
    """Fixed-point iteration for stable invariant D did not converge."""

    default_code = BalancerErrorCode.STABLE_INVARIANT_DIDNT_CONVERGE


__all__ = [
    "BalancerErrorCode",
    "BalancerError",
    "InputError",
    "MathematicalError",
    "StableInvariantDidNotConverge",
]

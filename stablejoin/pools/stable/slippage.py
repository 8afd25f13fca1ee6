"""Slippage tolerance in basis points."""

from __future__ import annotations

from stablejoin.constants import SLIPPAGE_BPS_BASE
from stablejoin.errors import BalancerErrorCode, InputError


def parse_slippage(value: str | int) -> int:
    """Parse a slippage tolerance in basis points ("1" = 0.01%, "100" = 1%).

    Raises:
        InputError: INVALID_SLIPPAGE unless value is an integer in [0, 10000]
    """
    if isinstance(value, bool):
        raise InputError(BalancerErrorCode.INVALID_SLIPPAGE, repr(value))
    if isinstance(value, int):
        bps = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        bps = int(value)
    else:
        raise InputError(BalancerErrorCode.INVALID_SLIPPAGE, repr(value))

    if not 0 <= bps <= SLIPPAGE_BPS_BASE:
        raise InputError(BalancerErrorCode.INVALID_SLIPPAGE, repr(value))
    return bps


def sub_slippage(amount: int, slippage_bps: int) -> int:
    """Minimum acceptable amount: floor(amount * (1 - bps / 10000)).

    Non-increasing in ``slippage_bps`` and equal to ``amount`` at 0.
    """
    return amount * (SLIPPAGE_BPS_BASE - slippage_bps) // SLIPPAGE_BPS_BASE

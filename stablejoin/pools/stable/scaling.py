"""Amount scaling between token decimals and the pool's 18-decimal scale.

All conversions are exact integer operations. Upscaling a token with fewer
than 18 decimals multiplies by a power of ten; a token with more than 18
decimals is truncated toward zero.
"""

from __future__ import annotations

import re

from stablejoin.errors import BalancerErrorCode, InputError

POOL_DECIMALS = 18

_DECIMAL_RE = re.compile(r"^(\d+)(?:\.(\d+))?$", re.ASCII)


def parse_fixed(value: str, decimals: int) -> int:
    """Convert a human decimal string to an integer in ``decimals`` units.

    ``parse_fixed("1.5", 6) == 1_500_000``. Trailing fractional zeros are
    ignored; any other digit beyond ``decimals`` is an error, never rounded.

    Raises:
        InputError: INVALID_AMOUNT for malformed, negative, or over-precise values
    """
    match = _DECIMAL_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InputError(BalancerErrorCode.INVALID_AMOUNT, repr(value))

    whole, fraction = match.group(1), (match.group(2) or "").rstrip("0")
    if len(fraction) > decimals:
        raise InputError(
            BalancerErrorCode.INVALID_AMOUNT,
            f"{value} has more than {decimals} fractional digits",
        )
    return int(whole) * 10**decimals + int(fraction.ljust(decimals, "0") or "0")


def parse_amount(value: str | int) -> int:
    """Parse an integer amount string (token native units).

    Raises:
        InputError: INVALID_AMOUNT if the value is not a non-negative integer
    """
    if isinstance(value, int) and not isinstance(value, bool):
        amount = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        amount = int(value)
    else:
        raise InputError(BalancerErrorCode.INVALID_AMOUNT, repr(value))
    if amount < 0:
        raise InputError(BalancerErrorCode.INVALID_AMOUNT, repr(value))
    return amount


def _require_decimals(decimals: int | None) -> int:
    if decimals is None:
        raise InputError(BalancerErrorCode.MISSING_DECIMALS)
    return decimals


def upscale(amount: int, decimals: int | None) -> int:
    """Scale a token-native amount up to the pool's 18-decimal scale.

    Raises:
        InputError: MISSING_DECIMALS if decimals is None
    """
    decimals = _require_decimals(decimals)
    if decimals <= POOL_DECIMALS:
        return amount * 10 ** (POOL_DECIMALS - decimals)
    return amount // 10 ** (decimals - POOL_DECIMALS)


def upscale_amounts(amounts: list[int], decimals: list[int | None]) -> list[int]:
    """Upscale index-aligned amounts."""
    return [upscale(a, d) for a, d in zip(amounts, decimals, strict=True)]


def scale(value: str, decimals: int | None) -> str:
    """Human decimal string to an integer string at the pool's 18-decimal scale.

    ``scale("1.5", 6) == "1500000000000000000"``. Exact for up to 18 decimals;
    digits beyond the 18th are truncated for tokens with more decimals.

    Raises:
        InputError: MISSING_DECIMALS or INVALID_AMOUNT
    """
    decimals = _require_decimals(decimals)
    return str(upscale(parse_fixed(value, decimals), decimals))

"""Price impact of stable pool joins and exits.

Price impact compares the BPT actually received (or paid) against the BPT a
frictionless deposit of the same tokens would be worth at the pool's
current spot prices. Values are 18-decimal fixed point.
"""

from __future__ import annotations

from stablejoin.errors import BalancerErrorCode, MathematicalError
from stablejoin.math.fixed_point import AMP_PRECISION, ONE_18, div_down, div_up, mul_down
from stablejoin.safe_int import S

from .stable_math import calculate_invariant


def bpt_spot_price(
    amp: int,
    balances: list[int],
    bpt_supply: int,
    token_index: int,
    invariant: int | None = None,
) -> int:
    """Marginal BPT minted per unit of token ``token_index``.

    This is dBPT/dx_i = supply * (dD/dx_i) / D, with dD/dx_i obtained from the
    implicit derivative of the invariant. With alpha = A*n and
    g = alpha - AMP_PRECISION:

        partial_x  = 2*alpha*x + alpha*S - g*D
        -partial_D = (n+1) * AMP_PRECISION * D_P + g*x

    where S is the sum of the other balances and D_P = D^n / (n^(n-1) * prod(others)).

    Args:
        amp: Amplification parameter (scaled by AMP_PRECISION)
        balances: Pool balances (18 decimals)
        bpt_supply: BPT total supply (18 decimals)
        token_index: Index of the token being priced
        invariant: Precomputed invariant, computed (rounded down) if omitted

    Raises:
        IndexError: If token_index is out of range
        MathematicalError: If the pool state makes the derivative undefined
    """
    n_coins = len(balances)
    if token_index < 0 or token_index >= n_coins:
        raise IndexError(f"token_index {token_index} out of range for {n_coins} tokens")

    d = S(invariant if invariant is not None else calculate_invariant(amp, balances))

    sum_others = S(0)
    d_p = d // n_coins
    for i, balance in enumerate(balances):
        if i != token_index:
            sum_others = sum_others + balance
            d_p = (d_p * d) // (S(n_coins) * balance)

    x = S(balances[token_index])
    alpha = S(amp) * n_coins
    gamma = alpha - AMP_PRECISION

    partial_x = S(2) * alpha * x + alpha * sum_others - gamma * d
    minus_partial_d = d_p * (n_coins + 1) * AMP_PRECISION + gamma * x

    return div_up(((partial_x * bpt_supply) // minus_partial_d).value, d.value)


def bpt_zero_price_impact(
    amp: int,
    balances: list[int],
    bpt_supply: int,
    amounts: list[int],
) -> int:
    """BPT value of ``amounts`` at spot prices (no fees, no slippage).

    Raises:
        MathematicalError: INPUT_LENGTH_MISMATCH if amounts and balances differ in length
    """
    if len(amounts) != len(balances):
        raise MathematicalError(
            BalancerErrorCode.INPUT_LENGTH_MISMATCH,
            f"{len(amounts)} amounts for {len(balances)} balances",
        )

    invariant = calculate_invariant(amp, balances)
    total = 0
    for i, amount in enumerate(amounts):
        price = bpt_spot_price(amp, balances, bpt_supply, i, invariant=invariant)
        total += mul_down(price, amount)
    return total


def calc_price_impact(bpt_amount: int, bpt_zero_price_impact: int, is_join: bool) -> int:
    """Fractional value lost relative to a frictionless trade.

    Join: 1 - bpt_out / bpt_zero_pi (receiving less BPT than ideal).
    Exit: bpt_in / bpt_zero_pi - 1 (paying more BPT than ideal).

    The result is not clamped; a negative value means the given BPT amount
    beats the frictionless one.
    """
    ratio = div_down(bpt_amount, bpt_zero_price_impact)
    if is_join:
        return ONE_18 - ratio
    return ratio - ONE_18


__all__ = [
    "bpt_spot_price",
    "bpt_zero_price_impact",
    "calc_price_impact",
]

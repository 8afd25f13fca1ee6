"""Balancer stable pool math.

Invariant and join calculations for stable (StableSwap/Curve-style) pools,
matching Balancer V2 StableMath.sol. Balances and amounts are 18-decimal
integers; ``amp`` is already multiplied by AMP_PRECISION.

IMPORTANT: All intermediate arithmetic uses SafeInt so that a division by
zero or an underflow raises a MathematicalError instead of producing a
wrong amount.
"""

from __future__ import annotations

from stablejoin.errors import BalancerErrorCode, MathematicalError, StableInvariantDidNotConverge
from stablejoin.math.fixed_point import AMP_PRECISION, ONE_18, div_down, mul_down
from stablejoin.safe_int import S

# Maximum iterations for the invariant fixed-point solve
_STABLE_MAX_ITERATIONS = 255


def calculate_invariant(amp: int, balances: list[int], round_up: bool = False) -> int:
    """Calculate the StableSwap invariant D by fixed-point iteration.

    Algorithm:
        1. Initial guess: D = sum(balances)
        2. P_D = n * b_0 * prod(n * b_j / D)
        3. D = (n*D^2 + A*n*S*P_D) / ((n+1)*D + (A*n - 1)*P_D)
        4. Stop when |D_new - D_old| <= 1 wei

    ``round_up`` selects the rounding direction of every division, so that
    callers can bound the invariant from either side.

    Args:
        amp: Amplification parameter (scaled by AMP_PRECISION=1000)
        balances: Token balances scaled to 18 decimals
        round_up: Round intermediate divisions up instead of down

    Returns:
        The invariant D

    Raises:
        StableInvariantDidNotConverge: If iteration doesn't converge
        MathematicalError: ZERO_BALANCE if any balance is zero
    """
    n_coins = len(balances)
    if n_coins == 0:
        return 0

    for i, balance in enumerate(balances):
        if balance <= 0:
            raise MathematicalError(BalancerErrorCode.ZERO_BALANCE, f"balance at index {i}")

    sum_balances = S(sum(balances))
    invariant = sum_balances
    amp_times_total = S(amp) * n_coins

    for _ in range(_STABLE_MAX_ITERATIONS):
        p_d = S(balances[0]) * n_coins
        for balance in balances[1:]:
            p_d = (p_d * balance * n_coins).div(invariant, round_up)

        prev_invariant = invariant

        numerator = S(n_coins) * invariant * invariant + (amp_times_total * sum_balances * p_d).div(
            AMP_PRECISION, round_up
        )
        # amp is at least 1, so amp_times_total >= AMP_PRECISION
        denominator = S(n_coins + 1) * invariant + ((amp_times_total - AMP_PRECISION) * p_d).div(
            AMP_PRECISION, not round_up
        )
        invariant = numerator.div(denominator, round_up)

        if invariant > prev_invariant:
            if invariant - prev_invariant <= 1:
                return invariant.value
        elif prev_invariant - invariant <= 1:
            return invariant.value

    raise StableInvariantDidNotConverge(detail=f"no convergence after {_STABLE_MAX_ITERATIONS} iterations")


def calc_bpt_out_given_exact_tokens_in(
    amp: int,
    balances: list[int],
    amounts_in: list[int],
    bpt_total_supply: int,
    swap_fee: int,
) -> int:
    """Calculate BPT minted for an exact multi-token deposit.

    The part of each deposit that keeps the pool's current proportions is
    fee-free; the excess over that proportion pays the swap fee, as if it
    had been swapped in. BPT out is rounded down throughout.

    Algorithm:
        1. weight_i = b_i / sum(b); ratio_i = (b_i + a_i) / b_i
        2. ideal ratio R = sum(ratio_i * weight_i)
        3. For ratio_i > R, taxable = a_i - b_i * (R - 1) pays swap_fee
        4. D  = invariant(balances), rounded up
           D' = invariant(balances + net amounts), rounded down
        5. bpt_out = supply * (D'/D - 1), or 0 if D' <= D

    Args:
        amp: Amplification parameter (scaled by AMP_PRECISION)
        balances: Current pool balances (18 decimals)
        amounts_in: Deposit amounts, index-aligned with balances (18 decimals)
        bpt_total_supply: Current BPT supply (18 decimals)
        swap_fee: Swap fee as 18-decimal fixed point

    Returns:
        BPT amount minted

    Raises:
        MathematicalError: ZERO_SUPPLY if the pool has no BPT supply
        StableInvariantDidNotConverge: If either invariant solve fails
    """
    if len(balances) != len(amounts_in):
        raise MathematicalError(
            BalancerErrorCode.INPUT_LENGTH_MISMATCH,
            f"{len(amounts_in)} amounts for {len(balances)} balances",
        )
    if bpt_total_supply == 0:
        raise MathematicalError(BalancerErrorCode.ZERO_SUPPLY)

    sum_balances = sum(balances)

    balance_ratios_with_fee = []
    invariant_ratio_with_fees = 0
    for balance, amount_in in zip(balances, amounts_in, strict=True):
        current_weight = div_down(balance, sum_balances)
        ratio = div_down(balance + amount_in, balance)
        balance_ratios_with_fee.append(ratio)
        invariant_ratio_with_fees += mul_down(ratio, current_weight)

    new_balances = []
    for balance, amount_in, ratio in zip(balances, amounts_in, balance_ratios_with_fee, strict=True):
        if ratio > invariant_ratio_with_fees:
            non_taxable_amount = mul_down(balance, (S(invariant_ratio_with_fees) - ONE_18).value)
            taxable_amount = (S(amount_in) - non_taxable_amount).value
            amount_in_without_fee = non_taxable_amount + mul_down(taxable_amount, ONE_18 - swap_fee)
        else:
            amount_in_without_fee = amount_in
        new_balances.append(balance + amount_in_without_fee)

    current_invariant = calculate_invariant(amp, balances, round_up=True)
    new_invariant = calculate_invariant(amp, new_balances, round_up=False)

    invariant_ratio = div_down(new_invariant, current_invariant)
    if invariant_ratio > ONE_18:
        return mul_down(bpt_total_supply, invariant_ratio - ONE_18)
    return 0


__all__ = [
    "calculate_invariant",
    "calc_bpt_out_given_exact_tokens_in",
]

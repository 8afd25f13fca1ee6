"""Stable pool join controller.

Binds an immutable pool snapshot and a network configuration, and builds
join transactions and price impact figures against that snapshot. Nothing
here performs I/O; the same controller can serve any number of callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property

import structlog

from stablejoin.config import NetworkConfig
from stablejoin.constants import NATIVE_ASSET
from stablejoin.errors import BalancerErrorCode, InputError
from stablejoin.math.fixed_point import AMP_PRECISION, Bfp
from stablejoin.models.join import JoinPoolAttributes, JoinPoolRequest, JoinResult
from stablejoin.models.pool import PoolSnapshot
from stablejoin.models.types import normalize_address

from .encoding import StablePoolEncoder, encode_join_pool
from .price_impact import bpt_zero_price_impact, calc_price_impact
from .scaling import parse_amount, parse_fixed, scale, upscale_amounts
from .slippage import parse_slippage, sub_slippage
from .stable_math import calc_bpt_out_given_exact_tokens_in

logger = structlog.get_logger()

BPT_DECIMALS = 18


@dataclass(frozen=True)
class StablePoolState:
    """Pool snapshot parsed into the integers the stable math works on.

    Attributes:
        balances: Balances scaled to 18 decimals, in pool order
        decimals: Token decimals, in pool order
        amp: Amplification parameter multiplied by AMP_PRECISION
        total_supply: BPT supply (18 decimals)
        swap_fee: Swap fee as 18-decimal fixed point
    """

    balances: tuple[int, ...]
    decimals: tuple[int, ...]
    amp: int
    total_supply: int
    swap_fee: int


class StablePoolController:
    """Join builder for one stable pool snapshot."""

    def __init__(self, pool: PoolSnapshot, network_config: NetworkConfig) -> None:
        self.pool = pool
        self.network_config = network_config

    @cached_property
    def state(self) -> StablePoolState:
        """Parsed pool state.

        Raises:
            InputError: MISSING_DECIMALS or MISSING_AMP when the snapshot lacks them
        """
        decimals = []
        for token in self.pool.tokens:
            if token.decimals is None:
                raise InputError(BalancerErrorCode.MISSING_DECIMALS, token.address)
            decimals.append(token.decimals)
        if self.pool.amp is None:
            raise InputError(BalancerErrorCode.MISSING_AMP, self.pool.id)

        balances = tuple(int(scale(token.balance, d)) for token, d in zip(self.pool.tokens, decimals, strict=True))
        return StablePoolState(
            balances=balances,
            decimals=tuple(decimals),
            amp=int(self.pool.amp * AMP_PRECISION),
            total_supply=parse_fixed(self.pool.total_shares, BPT_DECIMALS),
            swap_fee=Bfp.from_decimal(self.pool.swap_fee).value,
        )

    def _check_length(self, count: int, *others: int) -> None:
        expected = len(self.pool.tokens_list)
        if any(n != expected for n in (count, *others)):
            logger.debug(
                "stable_join_rejected",
                pool_id=self.pool.id,
                reason="input_length_mismatch",
                expected=expected,
                received=[count, *others],
            )
            raise InputError(
                BalancerErrorCode.INPUT_LENGTH_MISMATCH,
                f"pool has {expected} tokens, got {[count, *others]}",
            )

    def _pool_indices(self, tokens_in: list[str]) -> list[int]:
        """Map each caller token to its pool index.

        The zero address is matched against the wrapped native asset.

        Raises:
            InputError: TOKEN_MISMATCH for unknown or repeated tokens
        """
        wrapped_native = normalize_address(self.network_config.wrapped_native_asset)
        indices = []
        for token in tokens_in:
            lookup = wrapped_native if normalize_address(token) == NATIVE_ASSET else token
            index = self.pool.token_index(lookup)
            if index is None or index in indices:
                raise InputError(BalancerErrorCode.TOKEN_MISMATCH, token)
            indices.append(index)
        return indices

    def build_join(
        self,
        joiner: str,
        tokens_in: list[str],
        amounts_in: list[str],
        slippage: str,
    ) -> JoinResult:
        """Build a Vault.joinPool transaction for an exact-tokens-in join.

        Args:
            joiner: Address that sends the tokens and receives the BPT
            tokens_in: Token addresses, one per pool token, in any order.
                The zero address stands for the native asset.
            amounts_in: Integer amounts in each token's native decimals,
                aligned with tokens_in
            slippage: Tolerance in basis points ("1" = 0.01%)

        Returns:
            JoinResult whose data encodes exactly the returned min_bpt_out

        Raises:
            InputError: INPUT_LENGTH_MISMATCH (checked first), TOKEN_MISMATCH,
                INVALID_SLIPPAGE, INVALID_AMOUNT, MISSING_DECIMALS, MISSING_AMP
            MathematicalError: If the stable math fails
        """
        self._check_length(len(tokens_in), len(amounts_in))

        indices = self._pool_indices(tokens_in)
        slippage_bps = parse_slippage(slippage)

        n_tokens = len(indices)
        assets: list[str] = list(self.pool.tokens_list)
        raw_amounts = [0] * n_tokens
        value = 0
        for token, amount, index in zip(tokens_in, amounts_in, indices, strict=True):
            raw_amounts[index] = parse_amount(amount)
            if normalize_address(token) == NATIVE_ASSET:
                assets[index] = NATIVE_ASSET
                value = raw_amounts[index]
        if not any(raw_amounts):
            raise InputError(BalancerErrorCode.INVALID_AMOUNT, "all join amounts are zero")

        state = self.state
        scaled_amounts = upscale_amounts(raw_amounts, list(state.decimals))

        expected_bpt_out = calc_bpt_out_given_exact_tokens_in(
            state.amp,
            list(state.balances),
            scaled_amounts,
            state.total_supply,
            state.swap_fee,
        )
        min_bpt_out = sub_slippage(expected_bpt_out, slippage_bps)

        user_data = StablePoolEncoder.join_exact_tokens_in_for_bpt_out(raw_amounts, min_bpt_out)
        attributes = JoinPoolAttributes(
            pool_id=self.pool.id,
            sender=joiner,
            recipient=joiner,
            join_pool_request=JoinPoolRequest(
                assets=tuple(assets),
                max_amounts_in=tuple(raw_amounts),
                user_data=user_data,
                from_internal_balance=False,
            ),
        )
        data = encode_join_pool(attributes)

        logger.debug(
            "stable_join_built",
            pool_id=self.pool.id,
            joiner=joiner,
            expected_bpt_out=expected_bpt_out,
            min_bpt_out=min_bpt_out,
            slippage_bps=slippage_bps,
        )

        return JoinResult(
            to=self.network_config.vault,
            data=data,
            min_bpt_out=str(min_bpt_out),
            expected_bpt_out=str(expected_bpt_out),
            attributes=attributes,
            value=value,
        )

    def calc_price_impact(self, amounts_in: list[str], bpt_amount: str, is_join: bool) -> str:
        """Price impact of trading ``amounts_in`` for ``bpt_amount`` BPT.

        Args:
            amounts_in: Integer token amounts in native decimals, in pool order
            bpt_amount: BPT received (join) or paid (exit), e.g. min_bpt_out
            is_join: Join (True) or exit (False) direction

        Returns:
            Price impact as an 18-decimal fixed-point integer string

        Raises:
            InputError: INPUT_LENGTH_MISMATCH (checked first) or INVALID_AMOUNT
            MathematicalError: If the stable math fails
        """
        self._check_length(len(amounts_in))

        raw_amounts = [parse_amount(a) for a in amounts_in]
        bpt = parse_amount(bpt_amount)

        state = self.state
        bpt_zero_pi = bpt_zero_price_impact(
            state.amp,
            list(state.balances),
            state.total_supply,
            upscale_amounts(raw_amounts, list(state.decimals)),
        )
        price_impact = calc_price_impact(bpt, bpt_zero_pi, is_join)

        logger.debug(
            "stable_price_impact",
            pool_id=self.pool.id,
            bpt_amount=bpt,
            bpt_zero_price_impact=bpt_zero_pi,
            price_impact=price_impact,
            is_join=is_join,
        )
        return str(price_impact)

"""Balancer stable pool joins.

- scaling: token decimals <-> 18-decimal pool scale
- stable_math: invariant and BPT-out calculation
- slippage: basis-point tolerance
- encoding: Vault.joinPool calldata
- price_impact: spot-price based price impact
- controller: StablePoolController tying them together
"""

from .controller import StablePoolController, StablePoolState
from .encoding import StablePoolEncoder, StablePoolJoinKind, encode_join_pool
from .price_impact import bpt_spot_price, bpt_zero_price_impact, calc_price_impact
from .scaling import parse_amount, parse_fixed, scale, upscale, upscale_amounts
from .slippage import parse_slippage, sub_slippage
from .stable_math import calc_bpt_out_given_exact_tokens_in, calculate_invariant

__all__ = [
    # Controller
    "StablePoolController",
    "StablePoolState",
    # Stable math
    "calculate_invariant",
    "calc_bpt_out_given_exact_tokens_in",
    # Price impact
    "bpt_spot_price",
    "bpt_zero_price_impact",
    "calc_price_impact",
    # Scaling
    "parse_fixed",
    "parse_amount",
    "scale",
    "upscale",
    "upscale_amounts",
    # Slippage
    "parse_slippage",
    "sub_slippage",
    # Encoding
    "StablePoolEncoder",
    "StablePoolJoinKind",
    "encode_join_pool",
]

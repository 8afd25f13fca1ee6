"""Test helpers module for shared test utilities.

- constants: Token, pool and account addresses
- factories: Pool snapshot and amount factory functions
"""

from tests.helpers.constants import (
    DAI,
    JOINER,
    STABAL3_ADDRESS,
    STABAL3_ID,
    USDC,
    USDT,
    VAULT,
    WETH,
    WSTETH,
)
from tests.helpers.factories import amounts_from_balances, make_pool

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "WSTETH",
    "STABAL3_ID",
    "STABAL3_ADDRESS",
    "JOINER",
    "VAULT",
    # Factories
    "make_pool",
    "amounts_from_balances",
]

"""Protocol constants for Balancer stable pool joins.

Centralizes well-known addresses and protocol parameters.
"""

from stablejoin.models.types import ZERO_ADDRESS, is_valid_address


def _validate_address(name: str, address: str) -> str:
    """Validate an address at import time to catch typos early.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Balancer V2 Vault, same address on every supported chain
BALANCER_VAULT = _validate_address("Vault", "0xba12222222228d8ba445958a75a0704d566bf2c8")

# The zero address stands for the chain's native asset in join requests
NATIVE_ASSET = ZERO_ADDRESS

# Slippage is expressed in basis points
SLIPPAGE_BPS_BASE = 10_000

# Wrapped native assets (lowercase)
WETH_MAINNET = _validate_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
WMATIC_POLYGON = _validate_address("WMATIC", "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270")
WETH_ARBITRUM = _validate_address("WETH", "0x82af49447d8a07e3bd95bd0d56f35241523fbab1")

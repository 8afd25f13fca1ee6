"""Network configuration for join building."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import IntEnum

from stablejoin.constants import BALANCER_VAULT, WETH_ARBITRUM, WETH_MAINNET, WMATIC_POLYGON
from stablejoin.errors import BalancerErrorCode, InputError


class Network(IntEnum):
    """Supported chains, keyed by chain id."""

    MAINNET = 1
    POLYGON = 137
    ARBITRUM = 42161


@dataclass(frozen=True)
class NetworkConfig:
    """Addresses a controller needs to build transactions on one chain.

    Attributes:
        chain_id: EIP-155 chain id
        vault: Balancer Vault address (the ``to`` of every join)
        wrapped_native_asset: Token the zero address is matched against
    """

    chain_id: int
    vault: str
    wrapped_native_asset: str


NETWORK_CONFIGS: dict[Network, NetworkConfig] = {
    Network.MAINNET: NetworkConfig(
        chain_id=Network.MAINNET,
        vault=BALANCER_VAULT,
        wrapped_native_asset=WETH_MAINNET,
    ),
    Network.POLYGON: NetworkConfig(
        chain_id=Network.POLYGON,
        vault=BALANCER_VAULT,
        wrapped_native_asset=WMATIC_POLYGON,
    ),
    Network.ARBITRUM: NetworkConfig(
        chain_id=Network.ARBITRUM,
        vault=BALANCER_VAULT,
        wrapped_native_asset=WETH_ARBITRUM,
    ),
}


def get_network_config(network: Network | int | str) -> NetworkConfig:
    """Look up the configuration for a network.

    Args:
        network: Network enum, chain id, or lowercase name (e.g. "mainnet")

    Raises:
        InputError: UNSUPPORTED_NETWORK if the network is unknown
    """
    try:
        if isinstance(network, str) and not network.isdigit():
            key = Network[network.upper()]
        else:
            key = Network(int(network))
    except (KeyError, ValueError) as err:
        raise InputError(BalancerErrorCode.UNSUPPORTED_NETWORK, str(network)) from err
    return NETWORK_CONFIGS[key]


# API server settings from environment variables with sensible defaults
HOST = os.environ.get("STABLEJOIN_HOST", "0.0.0.0")
PORT = int(os.environ.get("STABLEJOIN_PORT", "8000"))
DEBUG = os.environ.get("STABLEJOIN_DEBUG", "false").lower() in ("true", "1", "yes")
SUPPORTED_NETWORKS = frozenset(
    name.strip().lower()
    for name in os.environ.get("STABLEJOIN_SUPPORTED_NETWORKS", "mainnet,polygon,arbitrum").split(",")
    if name.strip()
)

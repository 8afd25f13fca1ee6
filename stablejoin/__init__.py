"""Join transaction builder for Balancer stable pools."""

from stablejoin.config import Network, NetworkConfig, get_network_config
from stablejoin.errors import (
    BalancerError,
    BalancerErrorCode,
    InputError,
    MathematicalError,
    StableInvariantDidNotConverge,
)
from stablejoin.models import JoinResult, PoolSnapshot, PoolToken
from stablejoin.pools import Pools, StablePoolController

__version__ = "0.1.0"
__all__ = [
    "Pools",
    "StablePoolController",
    "PoolSnapshot",
    "PoolToken",
    "JoinResult",
    "Network",
    "NetworkConfig",
    "get_network_config",
    "BalancerError",
    "BalancerErrorCode",
    "InputError",
    "MathematicalError",
    "StableInvariantDidNotConverge",
    "__version__",
]

"""Pool controllers."""

from __future__ import annotations

from stablejoin.config import NetworkConfig
from stablejoin.errors import BalancerErrorCode, InputError
from stablejoin.models.pool import PoolSnapshot
from stablejoin.pools.stable import StablePoolController


class Pools:
    """Factory binding a pool snapshot and network configuration to a controller."""

    @staticmethod
    def wrap(pool: PoolSnapshot, network_config: NetworkConfig) -> StablePoolController:
        """Return a controller for ``pool``.

        Raises:
            InputError: UNSUPPORTED_POOL_TYPE for pools outside the stable family
        """
        if not pool.is_stable:
            raise InputError(BalancerErrorCode.UNSUPPORTED_POOL_TYPE, pool.pool_type)
        return StablePoolController(pool, network_config)


__all__ = ["Pools", "StablePoolController"]

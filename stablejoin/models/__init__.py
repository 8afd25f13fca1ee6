"""Data models for pool snapshots and join transactions."""

from stablejoin.models.join import JoinPoolAttributes, JoinPoolRequest, JoinResult
from stablejoin.models.pool import PoolSnapshot, PoolToken
from stablejoin.models.types import Address, Bytes32, Uint256

__all__ = [
    # Types
    "Address",
    "Bytes32",
    "Uint256",
    # Pool snapshot
    "PoolSnapshot",
    "PoolToken",
    # Join transaction
    "JoinPoolRequest",
    "JoinPoolAttributes",
    "JoinResult",
]

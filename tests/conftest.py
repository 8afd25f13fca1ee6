"""Pytest configuration and fixtures."""

import json
from pathlib import Path

import pytest

from stablejoin.config import NetworkConfig, get_network_config
from stablejoin.models.pool import PoolSnapshot
from stablejoin.pools import Pools, StablePoolController

FIXTURES_DIR = Path(__file__).parent / "fixtures"
POOLS_DIR = FIXTURES_DIR / "pools"


def load_pool_fixture(name: str) -> PoolSnapshot:
    """Load a pool snapshot fixture by name.

    Args:
        name: Fixture name (e.g., "stabal3")

    Returns:
        Parsed PoolSnapshot
    """
    path = POOLS_DIR / f"{name}.json"
    with open(path) as f:
        data = json.load(f)
    return PoolSnapshot.model_validate(data)


@pytest.fixture
def stabal3_raw() -> dict:
    """The staBAL3 snapshot as raw JSON, for API requests."""
    with open(POOLS_DIR / "stabal3.json") as f:
        return json.load(f)


@pytest.fixture
def stabal3_pool() -> PoolSnapshot:
    """Balancer USD Stable Pool (DAI/USDC/USDT) snapshot."""
    return load_pool_fixture("stabal3")


@pytest.fixture
def mainnet_config() -> NetworkConfig:
    return get_network_config("mainnet")


@pytest.fixture
def controller(stabal3_pool: PoolSnapshot, mainnet_config: NetworkConfig) -> StablePoolController:
    """Controller bound to the staBAL3 snapshot on mainnet."""
    return Pools.wrap(stabal3_pool, mainnet_config)

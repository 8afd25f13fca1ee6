"""Tests for network configuration lookup."""

import pytest
from fastapi import HTTPException

from stablejoin.api import endpoints
from stablejoin.config import NETWORK_CONFIGS, Network, get_network_config
from stablejoin.constants import BALANCER_VAULT, WETH_ARBITRUM, WETH_MAINNET, WMATIC_POLYGON
from stablejoin.errors import BalancerErrorCode, InputError


class TestGetNetworkConfig:
    """Tests for get_network_config."""

    @pytest.mark.parametrize("network", ["mainnet", "MAINNET", 1, "1", Network.MAINNET])
    def test_mainnet_lookups(self, network):
        """Names, chain ids and chain id strings resolve to the same entry."""
        config = get_network_config(network)
        assert config.chain_id == 1
        assert config.vault == BALANCER_VAULT
        assert config.wrapped_native_asset == WETH_MAINNET

    @pytest.mark.parametrize(
        "network,wrapped",
        [("polygon", WMATIC_POLYGON), ("137", WMATIC_POLYGON), ("arbitrum", WETH_ARBITRUM), (42161, WETH_ARBITRUM)],
    )
    def test_wrapped_native_asset(self, network, wrapped):
        assert get_network_config(network).wrapped_native_asset == wrapped

    def test_every_network_uses_the_vault(self):
        assert {config.vault for config in NETWORK_CONFIGS.values()} == {BALANCER_VAULT}

    @pytest.mark.parametrize("network", ["goerli", 5, "5", ""])
    def test_unknown_network(self, network):
        with pytest.raises(InputError) as exc_info:
            get_network_config(network)
        assert exc_info.value.code == BalancerErrorCode.UNSUPPORTED_NETWORK


class TestSupportedNetworks:
    """STABLEJOIN_SUPPORTED_NETWORKS restricts which networks the API serves."""

    def test_enabled_network_resolves(self, monkeypatch):
        monkeypatch.setattr(endpoints, "SUPPORTED_NETWORKS", frozenset({"mainnet"}))
        assert endpoints._network_config("1").chain_id == Network.MAINNET

    @pytest.mark.parametrize("network", ["polygon", "137"])
    def test_disabled_network_is_404(self, monkeypatch, network):
        """A known network outside the enabled set is rejected by name or chain id."""
        monkeypatch.setattr(endpoints, "SUPPORTED_NETWORKS", frozenset({"mainnet"}))
        with pytest.raises(HTTPException) as exc_info:
            endpoints._network_config(network)
        assert exc_info.value.status_code == 404

    def test_unknown_network_is_404(self):
        with pytest.raises(HTTPException) as exc_info:
            endpoints._network_config("goerli")
        assert exc_info.value.status_code == 404

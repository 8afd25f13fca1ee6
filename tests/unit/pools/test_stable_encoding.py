"""Tests for joinPool calldata encoding."""

from eth_abi import decode  # type: ignore[attr-defined]

from stablejoin.models.join import JoinPoolAttributes, JoinPoolRequest
from stablejoin.pools.stable import StablePoolEncoder, StablePoolJoinKind, encode_join_pool
from stablejoin.pools.stable.encoding import JOIN_POOL_ARG_TYPES, JOIN_POOL_SELECTOR
from tests.helpers import DAI, JOINER, STABAL3_ID, USDC, USDT


def _decode_call(data: str) -> tuple:
    assert data.startswith("0x" + JOIN_POOL_SELECTOR.hex())
    return decode(JOIN_POOL_ARG_TYPES, bytes.fromhex(data[10:]))


class TestStablePoolEncoder:
    """Tests for the userData encoder."""

    def test_exact_tokens_in_layout(self) -> None:
        user_data = StablePoolEncoder.join_exact_tokens_in_for_bpt_out([1, 2, 3], 42)
        kind, amounts, min_bpt_out = decode(["uint256", "uint256[]", "uint256"], user_data)
        assert kind == StablePoolJoinKind.EXACT_TOKENS_IN_FOR_BPT_OUT == 1
        assert list(amounts) == [1, 2, 3]
        assert min_bpt_out == 42


class TestEncodeJoinPool:
    """Tests for Vault.joinPool calldata."""

    def _attributes(self, min_bpt_out: int = 7) -> JoinPoolAttributes:
        amounts = (10**18, 10**6, 2 * 10**6)
        return JoinPoolAttributes(
            pool_id=STABAL3_ID,
            sender=JOINER,
            recipient=JOINER,
            join_pool_request=JoinPoolRequest(
                assets=(DAI, USDC, USDT),
                max_amounts_in=amounts,
                user_data=StablePoolEncoder.join_exact_tokens_in_for_bpt_out(list(amounts), min_bpt_out),
            ),
        )

    def test_selector(self) -> None:
        data = encode_join_pool(self._attributes())
        assert data[:10] == "0xb95cac28"

    def test_arguments_round_trip(self) -> None:
        pool_id, sender, recipient, request = _decode_call(encode_join_pool(self._attributes()))
        assets, max_amounts_in, user_data, from_internal_balance = request

        assert "0x" + pool_id.hex() == STABAL3_ID
        assert sender.lower() == JOINER
        assert recipient.lower() == JOINER
        assert [a.lower() for a in assets] == [DAI, USDC, USDT]
        assert list(max_amounts_in) == [10**18, 10**6, 2 * 10**6]
        assert from_internal_balance is False
        assert decode(["uint256", "uint256[]", "uint256"], user_data)[2] == 7

    def test_checksummed_addresses_accepted(self) -> None:
        """Mixed-case input encodes the same bytes as lowercase."""
        attributes = self._attributes()
        upper = JoinPoolAttributes(
            pool_id=attributes.pool_id,
            sender="0x" + JOINER[2:].upper(),
            recipient="0x" + JOINER[2:].upper(),
            join_pool_request=attributes.join_pool_request,
        )
        assert encode_join_pool(upper) == encode_join_pool(attributes)

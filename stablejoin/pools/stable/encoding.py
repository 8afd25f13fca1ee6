"""Calldata encoding for Balancer Vault joins on stable pools."""

from __future__ import annotations

from enum import IntEnum

from eth_abi import encode  # type: ignore[attr-defined]

from stablejoin.models.join import JoinPoolAttributes
from stablejoin.models.types import normalize_address

# joinPool(bytes32,address,address,(address[],uint256[],bytes,bool))
JOIN_POOL_SELECTOR = bytes.fromhex("b95cac28")

JOIN_POOL_ARG_TYPES = ["bytes32", "address", "address", "(address[],uint256[],bytes,bool)"]


class StablePoolJoinKind(IntEnum):
    """Join kinds understood by StablePool.onJoinPool."""

    INIT = 0
    EXACT_TOKENS_IN_FOR_BPT_OUT = 1
    TOKEN_IN_FOR_EXACT_BPT_OUT = 2


class StablePoolEncoder:
    """Encodes the pool-specific ``userData`` of a join request."""

    @staticmethod
    def join_exact_tokens_in_for_bpt_out(amounts_in: list[int], min_bpt_out: int) -> bytes:
        """Join with exact token amounts, reverting below ``min_bpt_out``.

        Args:
            amounts_in: Token amounts in native decimals, in pool order
            min_bpt_out: BPT floor enforced by the pool
        """
        return encode(
            ["uint256", "uint256[]", "uint256"],
            [StablePoolJoinKind.EXACT_TOKENS_IN_FOR_BPT_OUT.value, amounts_in, min_bpt_out],
        )


def _address_bytes(address: str) -> bytes:
    return bytes.fromhex(normalize_address(address)[2:])


def encode_join_pool(attributes: JoinPoolAttributes) -> str:
    """Encode Vault.joinPool calldata.

    Returns:
        0x-prefixed calldata hex
    """
    request = attributes.join_pool_request
    encoded_args = encode(
        JOIN_POOL_ARG_TYPES,
        [
            bytes.fromhex(attributes.pool_id[2:]),
            _address_bytes(attributes.sender),
            _address_bytes(attributes.recipient),
            (
                [_address_bytes(asset) for asset in request.assets],
                list(request.max_amounts_in),
                request.user_data,
                request.from_internal_balance,
            ),
        ],
    )
    return "0x" + (JOIN_POOL_SELECTOR + encoded_args).hex()


__all__ = [
    "JOIN_POOL_SELECTOR",
    "JOIN_POOL_ARG_TYPES",
    "StablePoolJoinKind",
    "StablePoolEncoder",
    "encode_join_pool",
]

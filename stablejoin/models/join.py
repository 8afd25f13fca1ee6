"""Join transaction data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JoinPoolRequest:
    """The Vault's JoinPoolRequest struct.

    Attributes:
        assets: Token addresses in pool order
        max_amounts_in: Upper bound per asset, in token native decimals
        user_data: Pool-specific encoded join payload
        from_internal_balance: Pull tokens from Vault internal balance
    """

    assets: tuple[str, ...]
    max_amounts_in: tuple[int, ...]
    user_data: bytes
    from_internal_balance: bool = False


@dataclass(frozen=True)
class JoinPoolAttributes:
    """Arguments of Vault.joinPool, in call order."""

    pool_id: str
    sender: str
    recipient: str
    join_pool_request: JoinPoolRequest


@dataclass(frozen=True)
class JoinResult:
    """A ready-to-submit join transaction.

    ``to`` and ``data`` form the complete transaction body. ``min_bpt_out`` is
    the floor the pool enforces on-chain and is identical to the minimum
    encoded inside ``data``.
    """

    to: str
    data: str
    min_bpt_out: str
    expected_bpt_out: str
    attributes: JoinPoolAttributes
    value: int = 0
    function_name: str = "joinPool"

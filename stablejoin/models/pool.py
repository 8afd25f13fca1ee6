"""Pydantic models for pool snapshots.

A snapshot is the immutable view of a pool at a given block, in the shape
returned by the Balancer subgraph (camelCase keys, human decimal strings).
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from stablejoin.models.types import Address, Bytes32, normalize_address

# Pool types that share the stable invariant and can be joined here
STABLE_POOL_TYPES = frozenset({"Stable"})


class PoolToken(BaseModel):
    """A token held by the pool.

    Attributes:
        address: Token address
        decimals: Token decimals. None when the data provider did not know them.
        balance: Pool balance as a human decimal string (e.g. "1234.56")
        symbol: Optional display symbol
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    address: Address
    # Exotic tokens can exceed 18 decimals, 77 is the uint256 limit
    decimals: int | None = Field(default=None, ge=0, le=77)
    balance: str = Field(pattern=r"^\d+(\.\d+)?$")
    symbol: str | None = None


class PoolSnapshot(BaseModel):
    """Immutable pool state supplied by the chain data provider.

    ``tokens`` and ``tokens_list`` are index-aligned and both follow the
    on-chain registration order, which the join math and calldata rely on.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: Bytes32
    address: Address
    pool_type: str = Field(alias="poolType")
    swap_fee: Decimal = Field(alias="swapFee", ge=0, lt=1)
    amp: Decimal | None = Field(default=None, gt=0)
    total_shares: str = Field(alias="totalShares", pattern=r"^\d+(\.\d+)?$")
    tokens_list: tuple[Address, ...] = Field(alias="tokensList")
    tokens: tuple[PoolToken, ...]

    @model_validator(mode="after")
    def _check_token_alignment(self) -> PoolSnapshot:
        if len(self.tokens) != len(self.tokens_list):
            raise ValueError(
                f"tokens ({len(self.tokens)}) and tokensList ({len(self.tokens_list)}) differ in length"
            )
        for i, (token, listed) in enumerate(zip(self.tokens, self.tokens_list, strict=True)):
            if normalize_address(token.address) != normalize_address(listed):
                raise ValueError(f"tokens[{i}] ({token.address}) is not tokensList[{i}] ({listed})")
        return self

    @property
    def is_stable(self) -> bool:
        """Whether the pool uses the stable invariant."""
        return self.pool_type in STABLE_POOL_TYPES

    def token_index(self, address: str) -> int | None:
        """Return the pool index of a token, or None if the pool does not hold it."""
        target = normalize_address(address)
        for i, listed in enumerate(self.tokens_list):
            if normalize_address(listed) == target:
                return i
        return None

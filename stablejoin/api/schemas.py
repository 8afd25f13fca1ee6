"""Request and response models for the HTTP API."""

from pydantic import BaseModel, Field

from stablejoin.models.pool import PoolSnapshot
from stablejoin.models.types import Address, Uint256


class JoinRequest(BaseModel):
    """Body of POST /{network}/join."""

    pool: PoolSnapshot
    joiner: Address
    tokens_in: list[Address] = Field(alias="tokensIn")
    amounts_in: list[Uint256] = Field(alias="amountsIn")
    slippage: str = Field(description="Tolerance in basis points")

    model_config = {"populate_by_name": True}


class JoinResponse(BaseModel):
    """A ready-to-submit join transaction."""

    to: Address
    data: str
    value: Uint256
    min_bpt_out: Uint256 = Field(alias="minBPTOut")
    expected_bpt_out: Uint256 = Field(alias="expectedBPTOut")

    model_config = {"populate_by_name": True}


class PriceImpactRequest(BaseModel):
    """Body of POST /{network}/price-impact."""

    pool: PoolSnapshot
    amounts_in: list[Uint256] = Field(alias="amountsIn")
    bpt_amount: Uint256 = Field(alias="bptAmount")
    is_join: bool = Field(default=True, alias="isJoin")

    model_config = {"populate_by_name": True}


class PriceImpactResponse(BaseModel):
    """Price impact as an 18-decimal fixed-point integer string."""

    price_impact: str = Field(alias="priceImpact")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Error body for BalancerError failures."""

    code: str
    message: str

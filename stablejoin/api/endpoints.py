"""API endpoints for join building."""

import asyncio

import structlog
from fastapi import APIRouter, HTTPException

from stablejoin.config import SUPPORTED_NETWORKS, Network, NetworkConfig, get_network_config
from stablejoin.errors import InputError
from stablejoin.pools import Pools

from .schemas import JoinRequest, JoinResponse, PriceImpactRequest, PriceImpactResponse

logger = structlog.get_logger()

router = APIRouter()


def _network_config(network: str) -> NetworkConfig:
    """Resolve a network path parameter, 404 if unknown or disabled."""
    try:
        config = get_network_config(network)
    except InputError as err:
        raise HTTPException(status_code=404, detail=str(err)) from err
    if Network(config.chain_id).name.lower() not in SUPPORTED_NETWORKS:
        raise HTTPException(status_code=404, detail=f"Unsupported network: {network}")
    return config


@router.post("/{network}/join", response_model=JoinResponse, response_model_by_alias=True)
async def build_join(network: str, request: JoinRequest) -> JoinResponse:
    """Build a joinPool transaction for an exact-tokens-in join.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Unknown network: 404
        - BalancerError: 400 with {code, message} (see main.py)
    """
    config = _network_config(network)
    logger.info(
        "join_requested",
        network=network,
        pool_id=request.pool.id,
        token_count=len(request.tokens_in),
        slippage=request.slippage,
    )

    controller = Pools.wrap(request.pool, config)
    # Invariant solves are CPU-bound, keep them off the event loop
    loop = asyncio.get_event_loop()
    result = await loop.run_in_executor(
        None,
        controller.build_join,
        request.joiner,
        request.tokens_in,
        request.amounts_in,
        request.slippage,
    )
    return JoinResponse(
        to=result.to,
        data=result.data,
        value=str(result.value),
        min_bpt_out=result.min_bpt_out,
        expected_bpt_out=result.expected_bpt_out,
    )


@router.post("/{network}/price-impact", response_model=PriceImpactResponse, response_model_by_alias=True)
async def price_impact(network: str, request: PriceImpactRequest) -> PriceImpactResponse:
    """Price impact of a join or exit against the supplied pool snapshot."""
    config = _network_config(network)
    logger.info(
        "price_impact_requested",
        network=network,
        pool_id=request.pool.id,
        is_join=request.is_join,
    )

    controller = Pools.wrap(request.pool, config)
    loop = asyncio.get_event_loop()
    value = await loop.run_in_executor(
        None,
        controller.calc_price_impact,
        request.amounts_in,
        request.bpt_amount,
        request.is_join,
    )
    return PriceImpactResponse(price_impact=value)

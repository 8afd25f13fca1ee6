"""FastAPI application for the stable join builder.

Note: The API is stateless; every request carries the pool snapshot it
should be evaluated against.
"""

import structlog
import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from stablejoin import __version__
from stablejoin.config import DEBUG, HOST, PORT
from stablejoin.errors import BalancerError
from stablejoin.logging_config import configure_logging

from .endpoints import router
from .schemas import ErrorResponse

logger = structlog.get_logger()

app = FastAPI(
    title="Stable Join Builder",
    description="Builds Balancer stable pool join transactions and price impact",
    version=__version__,
)


@app.exception_handler(BalancerError)
async def balancer_error_handler(request: Request, exc: BalancerError) -> JSONResponse:
    """Surface BalancerError code and message verbatim as a 400."""
    logger.warning(
        "request_failed",
        path=request.url.path,
        code=exc.code.value,
        message=str(exc),
    )
    body = ErrorResponse(code=exc.code.value, message=str(exc))
    return JSONResponse(status_code=400, content=body.model_dump())


app.include_router(router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


def run() -> None:
    """Run the API server.

    Configuration via environment variables:
    - STABLEJOIN_HOST: Host to bind to (default: 0.0.0.0)
    - STABLEJOIN_PORT: Port to bind to (default: 8000)
    - STABLEJOIN_DEBUG: Enable debug logging and reload mode (default: false)
    - STABLEJOIN_SUPPORTED_NETWORKS: Comma-separated network names
    """
    configure_logging(verbose=DEBUG)
    uvicorn.run(
        "stablejoin.api.main:app",
        host=HOST,
        port=PORT,
        reload=DEBUG,
    )


if __name__ == "__main__":
    run()

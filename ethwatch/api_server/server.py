"""
FastAPI server: builds the ethwatch application.

The EthereumParser context object is created in the lifespan from settings
(unless one is injected, e.g. by tests) and stored on app.state.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ethwatch import __version__
from ethwatch.api_server.middleware import install_error_handlers, install_request_logging
from ethwatch.api_server.routes import router
from ethwatch.config import get_settings
from ethwatch.eth_listener.parser import EthereumParser
from ethwatch.ethwatch_logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the parser from settings if none was injected; close it on shutdown."""
    owned: EthereumParser | None = None
    if getattr(app.state, "parser", None) is None:
        settings = get_settings()
        owned = EthereumParser(
            rpc_url=settings.eth_rpc_url,
            timeout_sec=settings.rpc_timeout_sec,
        )
        app.state.parser = owned
    logger.info("api_started", subscriptions=app.state.parser.subscription_count())

    yield

    if owned is not None:
        owned.close()
        app.state.parser = None
    logger.info("api_stopped")


def create_app(parser: EthereumParser | None = None) -> FastAPI:
    """Build the FastAPI app; pass a parser to bypass settings (tests, embedding)."""
    app = FastAPI(
        title="ethwatch API",
        description="Subscribe Ethereum addresses and poll their recent transactions.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.parser = parser
    install_request_logging(app)
    install_error_handlers(app)
    app.include_router(router)
    return app

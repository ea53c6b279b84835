"""
Main entrypoint: ethwatch HTTP API under uvicorn.

Env: ETH_RPC_URL, ETH_RPC_TIMEOUT_SEC, API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT
(optionally from .env at the project root).

Equivalent: uvicorn ethwatch.api_server.app:app --host 0.0.0.0 --port 3000
"""

import uvicorn

# Configure structured JSON logging before other imports that may log
from ethwatch.ethwatch_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Start the FastAPI server in the main thread."""
    from ethwatch.api_server.app import app
    from ethwatch.config import get_settings

    settings = get_settings()
    logger.info(
        "main_server_starting",
        host=settings.api_host,
        port=settings.api_port,
        rpc_url=settings.eth_rpc_url,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level)


if __name__ == "__main__":
    main()

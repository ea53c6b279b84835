"""
API route definitions: REST endpoints.

- GET  /current_block            latest chain height (stale on upstream failure)
- POST /subscribe                add an address to the registry
- GET  /transactions?address=    recent transactions for a subscribed address
- GET  /health                   liveness probe; no upstream call
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel, Field, ValidationError

from ethwatch.eth_listener.parser import EthereumParser
from ethwatch.ethwatch_logging import get_logger

logger = get_logger(__name__)

router = APIRouter()

SUBSCRIBED_MESSAGE = "Address subscribed successfully"
MSG_INVALID_BODY = "Invalid request body"


def get_parser(request: Request) -> EthereumParser:
    """Dependency: the app-scoped EthereumParser (set at startup)."""
    parser = getattr(request.app.state, "parser", None)
    if parser is None:
        raise RuntimeError("EthereumParser not initialised; app lifespan did not run")
    return parser


# -----------------------------------------------------------------------------
# Request / response models
# -----------------------------------------------------------------------------


class CurrentBlockResponse(BaseModel):
    current_block: int = Field(..., description="Last known chain height")


class SubscribeRequest(BaseModel):
    """POST /subscribe body."""

    address: str = Field("", description="Ethereum address (any case)")


class SubscribeResponse(BaseModel):
    message: str


class TransactionsResponse(BaseModel):
    """GET /transactions response: upstream transaction objects, newest block first."""

    transactions: list[dict[str, Any]] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str
    subscriptions: int
    current_block: int = Field(..., description="Cached chain height; no RPC call is made")


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------


@router.get("/current_block", response_model=CurrentBlockResponse)
def current_block(parser: EthereumParser = Depends(get_parser)) -> CurrentBlockResponse:
    return CurrentBlockResponse(current_block=parser.get_current_block())


@router.post("/subscribe", response_model=SubscribeResponse)
async def subscribe(
    request: Request,
    parser: EthereumParser = Depends(get_parser),
) -> SubscribeResponse:
    """
    Register an address. Idempotent; the address is stored lowercased.

    The body is decoded as JSON whatever the Content-Type header says, so
    ``curl -d '{"address": "0x..."}'`` (form-encoded by default) works.
    """
    raw = await request.body()
    try:
        body = SubscribeRequest.model_validate_json(raw)
    except ValidationError as e:
        logger.info(
            "subscribe_invalid_body",
            content_type=request.headers.get("content-type"),
            error_count=e.error_count(),
        )
        raise HTTPException(status_code=400, detail=MSG_INVALID_BODY) from e
    address = body.address.strip()
    if not address:
        raise HTTPException(status_code=400, detail="Address is required")
    parser.subscribe(address)
    return SubscribeResponse(message=SUBSCRIBED_MESSAGE)


@router.get("/transactions", response_model=TransactionsResponse)
def transactions(
    address: str = Query("", description="Subscribed Ethereum address"),
    parser: EthereumParser = Depends(get_parser),
) -> TransactionsResponse:
    """
    Return transactions from the last 10 blocks where address is sender or recipient.

    An address that was never subscribed gets an empty list, same as a
    subscribed address with no recent activity.
    """
    address = address.strip()
    if not address:
        raise HTTPException(status_code=400, detail="Address query parameter is required")
    txs = parser.get_transactions(address)
    return TransactionsResponse(transactions=[tx.to_dict() for tx in txs])


@router.get("/health", response_model=HealthResponse)
def health(parser: EthereumParser = Depends(get_parser)) -> HealthResponse:
    """Liveness probe: API is up."""
    return HealthResponse(
        status="ok",
        subscriptions=parser.subscription_count(),
        current_block=parser.fetcher.current_block,
    )

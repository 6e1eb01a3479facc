"""
API route aggregator: register endpoints; no logic — only delegate to handlers.
"""

from collections.abc import Iterator

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.handlers import handle_analyze
from app.core.config import Settings
from app.schemas.query import AnalyzeResponse, ErrorResponse

router = APIRouter()

# Every method is routed here so non-POST calls get a JSON 405 from the handler.
ANALYZE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> Iterator[httpx.Client]:
    """One outbound client per request, closed when the response is sent."""
    client = httpx.Client(transport=request.app.state.transport)
    try:
        yield client
    finally:
        client.close()


# --- System ---

@router.get("/", tags=["system"])
def root():
    return {"status": "BSSC query relay running"}


@router.get("/health", tags=["system"])
def health():
    return {"ok": True}


# --- Query relay ---

@router.api_route(
    "/api/analyze",
    methods=ANALYZE_METHODS,
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
    tags=["query"],
    summary="Analyze a BSSC address, transaction hash, or question",
    description="POST {query}; address-like queries get a live balance lookup before the model is asked. 405 on non-POST, 400 on missing query, 500 on provider or server failure.",
)
async def post_analyze(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.Client = Depends(get_http_client),
) -> JSONResponse:
    return await handle_analyze(request, settings, client)

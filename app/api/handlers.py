"""
API handlers: read request data, call the relay, map results/errors to HTTP.

Responsibility: Bridge HTTP types and services. Marshalling and exception-to-HTTP mapping.
Lives in the API layer so services stay free of FastAPI/HTTP types.
"""

import logging

import httpx
from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.config import Settings
from app.core.errors import InvalidMethodError, MissingQueryError, ProviderError, RelayError
from app.schemas.query import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from app.services.relay_service import analyze

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "AI request failed due to a severe server issue."


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def relay_error_response(exc: RelayError) -> JSONResponse:
    return error_response(exc.status_code, exc.message)


async def read_query(request: Request) -> str:
    """Pull a non-blank query out of the JSON body or raise MissingQueryError."""
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        raise MissingQueryError()
    try:
        parsed = AnalyzeRequest.model_validate(body)
    except ValidationError as e:
        raise MissingQueryError() from e
    if not parsed.query.strip():
        raise MissingQueryError()
    return parsed.query


async def handle_analyze(request: Request, settings: Settings, client: httpx.Client) -> JSONResponse:
    """
    Validate method and body, run the relay in the threadpool, and map the outcome
    to exactly one JSON response: {answer} on success, {error} otherwise.
    """
    try:
        if request.method != "POST":
            raise InvalidMethodError()
        query = await read_query(request)
    except (InvalidMethodError, MissingQueryError) as e:
        logger.info("[api:analyze] rejected method=%s status=%d", request.method, e.status_code)
        return relay_error_response(e)

    try:
        answer = await run_in_threadpool(analyze, query, settings, client)
    except (MissingQueryError, ProviderError) as e:
        return relay_error_response(e)
    except Exception:
        logger.exception("[api:analyze] relay failed")
        return error_response(500, GENERIC_FAILURE)

    return JSONResponse(content=AnalyzeResponse(answer=answer).model_dump())

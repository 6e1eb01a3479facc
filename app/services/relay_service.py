"""
Relay: orchestrate classification, balance lookup, and answer generation.

Responsibility: Turn one query into at most one RPC call and one generation call,
and produce the final answer. Called by the API; no HTTP types here.
"""

import logging

import httpx

from app.agent.llm import build_generation_request, generate
from app.core.config import Settings
from app.core.errors import MissingQueryError
from app.services.balance import get_balance_context
from app.services.classifier import is_address_like

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = "No response from the model."


def analyze(query: str | None, settings: Settings, client: httpx.Client) -> str:
    """
    Answer a query. Raises MissingQueryError for blank input; ProviderError and
    NetworkFailureError from the generation call propagate to the caller.
    """
    if not query or not query.strip():
        raise MissingQueryError()

    address_like = is_address_like(query)
    logger.info("[relay] IN  query_len=%d address_like=%s", len(query), address_like)

    context = get_balance_context(query, settings, client) if address_like else ""

    request = build_generation_request(query, context)
    result = generate(request, settings, client)
    if not result.ok:
        logger.warning("[relay] no text from model (%s); using fallback", result.malformed.reason)
        return FALLBACK_ANSWER

    logger.info("[relay] OUT answer_len=%d", len(result.text))
    return result.text

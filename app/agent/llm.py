"""
Agent LLM: Gemini generateContent over HTTP.

build_generation_request() assembles the request; generate() sends it and decodes
the first candidate's text. Transport failures and provider-reported errors raise;
a success envelope without text comes back as a MalformedResponse, not an exception.
"""

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel

from app.agent.prompts import GOOGLE_SEARCH_TOOL, SYSTEM_INSTRUCTION, build_user_prompt
from app.core.config import Settings
from app.core.errors import NetworkFailureError, ProviderError

logger = logging.getLogger(__name__)


class GenerationRequest(BaseModel):
    """One generateContent call. tools is None when search grounding is off."""

    prompt: str
    system_instruction: str = SYSTEM_INSTRUCTION
    tools: list[dict[str, Any]] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "contents": [{"parts": [{"text": self.prompt}]}],
            "systemInstruction": {"parts": [{"text": self.system_instruction}]},
        }
        if self.tools is not None:
            payload["tools"] = self.tools
        return payload


@dataclass(frozen=True)
class MalformedResponse:
    """Success envelope that did not contain candidates[0].content.parts[0].text."""

    reason: str


@dataclass(frozen=True)
class GenerationResult:
    """Either decoded text or a MalformedResponse; exactly one is set."""

    text: str | None = None
    malformed: MalformedResponse | None = None

    @property
    def ok(self) -> bool:
        return self.malformed is None


def grounding_enabled(query: str) -> bool:
    """
    Search-grounding policy: always on.

    Address lookups benefit too (the RPC call may have failed, or the user pasted
    a transaction hash that merely looks like an address).
    """
    return True


def build_generation_request(query: str, context: str) -> GenerationRequest:
    tools = [GOOGLE_SEARCH_TOOL] if grounding_enabled(query) else None
    return GenerationRequest(prompt=build_user_prompt(query, context), tools=tools)


def extract_text(data: dict[str, Any]) -> GenerationResult:
    """Walk candidates[0].content.parts[0].text; report which step was missing."""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return GenerationResult(malformed=MalformedResponse("no candidates"))
    content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
    if not isinstance(content, dict):
        return GenerationResult(malformed=MalformedResponse("candidate has no content"))
    parts = content.get("parts")
    if not isinstance(parts, list) or not parts or not isinstance(parts[0], dict):
        return GenerationResult(malformed=MalformedResponse("content has no parts"))
    text = parts[0].get("text")
    if not isinstance(text, str) or not text:
        return GenerationResult(malformed=MalformedResponse("first part has no text"))
    return GenerationResult(text=text)


def generate(request: GenerationRequest, settings: Settings, client: httpx.Client) -> GenerationResult:
    """Send one generateContent request. Raises ProviderError or NetworkFailureError."""
    url = f"{settings.gemini_base_url}/models/{settings.gemini_model}:generateContent"
    logger.info(
        "[llm] IN  model=%s prompt_len=%d grounding=%s",
        settings.gemini_model,
        len(request.prompt),
        request.tools is not None,
    )
    try:
        response = client.post(
            url,
            params={"key": settings.gemini_api_key},
            json=request.to_payload(),
            timeout=settings.llm_timeout,
        )
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error("[llm] request failed: %s", e)
        raise NetworkFailureError(f"Generation request failed: {e}") from e

    error = data.get("error") if isinstance(data, dict) else None
    if error:
        message = error.get("message") if isinstance(error, dict) else None
        logger.error("[llm] Gemini API error: %s", error)
        raise ProviderError(message or str(error))
    if response.status_code != 200:
        logger.error("[llm] Gemini API status %s: %s", response.status_code, response.text[:200])
        raise ProviderError(f"HTTP {response.status_code}")

    result = extract_text(data) if isinstance(data, dict) else GenerationResult(
        malformed=MalformedResponse("body is not an object")
    )
    if result.ok:
        logger.info("[llm] OUT response_len=%d", len(result.text))
    else:
        logger.warning("[llm] malformed response: %s", result.malformed.reason)
    return result

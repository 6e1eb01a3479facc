"""
Shared fixtures: settings pointing at fake hosts and a scriptable mock of both upstreams.
"""

import json
from typing import Any

import httpx
import pytest

from app.core.config import Settings

RPC_HOST = "rpc.test"
GEMINI_HOST = "gemini.test"

ADDRESS = "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7"


def gemini_text(text: str) -> dict[str, Any]:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def echo_prompt(payload: dict[str, Any]) -> dict[str, Any]:
    return gemini_text(payload["contents"][0]["parts"][0]["text"])


class FakeUpstreams:
    """
    Routes requests by host. rpc/gemini may be a JSON body, a callable taking the
    request payload, or an exception to raise.
    """

    def __init__(self, rpc: Any = None, gemini: Any = None, gemini_status: int = 200) -> None:
        self.rpc = rpc
        self.gemini = gemini
        self.gemini_status = gemini_status
        self.rpc_calls: list[dict[str, Any]] = []
        self.gemini_calls: list[httpx.Request] = []

    def _reply(self, reply: Any, request: httpx.Request, payload: dict[str, Any], status: int = 200) -> httpx.Response:
        if isinstance(reply, type) and issubclass(reply, httpx.RequestError):
            raise reply("upstream down", request=request)
        if callable(reply):
            reply = reply(payload)
        return httpx.Response(status, json=reply)

    def handler(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content) if request.content else {}
        if request.url.host == RPC_HOST:
            self.rpc_calls.append(payload)
            return self._reply(self.rpc, request, payload)
        if request.url.host == GEMINI_HOST:
            self.gemini_calls.append(request)
            return self._reply(self.gemini, request, payload, self.gemini_status)
        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.Client:
        return httpx.Client(transport=self.transport())

    @property
    def last_gemini_payload(self) -> dict[str, Any]:
        return json.loads(self.gemini_calls[-1].content)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key="test-key",
        gemini_model="gemini-test",
        gemini_base_url=f"http://{GEMINI_HOST}/v1beta",
        rpc_url=f"http://{RPC_HOST}",
    )

"""
Tests for the UI's relay client (no Streamlit runtime needed).
"""

from unittest.mock import MagicMock, patch

import requests

from app.ui import ask_relay


def _response(body) -> MagicMock:
    r = MagicMock()
    r.json.return_value = body
    return r


def test_answer_shown_verbatim() -> None:
    with patch("app.ui.requests.post", return_value=_response({"answer": "Balance is 2.5"})) as post:
        assert ask_relay("http://relay", "q") == "Balance is 2.5"
    post.assert_called_once()
    assert post.call_args.args[0] == "http://relay/api/analyze"
    assert post.call_args.kwargs["json"] == {"query": "q"}


def test_error_shown_with_prefix() -> None:
    with patch("app.ui.requests.post", return_value=_response({"error": "Missing query parameter."})):
        assert ask_relay("http://relay", "q") == "Serverless Function Error: Missing query parameter."


def test_missing_answer() -> None:
    with patch("app.ui.requests.post", return_value=_response({})):
        assert ask_relay("http://relay", "q").startswith("Error: Could not retrieve a response.")


def test_connection_failure() -> None:
    with patch("app.ui.requests.post", side_effect=requests.ConnectionError("refused")):
        assert ask_relay("http://relay", "q").startswith("Critical Error: Failed to connect")

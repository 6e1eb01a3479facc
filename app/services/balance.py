"""
BSSC balance lookup over JSON-RPC.

Responsibility: turn an address into a human-readable context line for the prompt.
Failures never escape: the caller always gets a string, either the balance or a
warning the model can relay to the user.
"""

import logging

import httpx

from app.core.config import LAMPORTS_PER_TOKEN, TOKEN_NAME, Settings

logger = logging.getLogger(__name__)

RPC_FAILED_WARNING = "Warning: RPC call to BSSC endpoint failed. No live balance data available."


def format_amount(lamports: int) -> str:
    """Lamports to display units, in plain decimal with trailing zeros dropped."""
    whole, frac = divmod(lamports, LAMPORTS_PER_TOKEN)
    if not frac:
        return str(whole)
    return f"{whole}.{frac:09d}".rstrip("0")


def get_balance_context(address: str, settings: Settings, client: httpx.Client) -> str:
    """Call getBalance for the address and return the context line (or a warning)."""
    payload = {
        "jsonrpc": "2.0",
        "id": 1,
        "method": "getBalance",
        "params": [address],
    }
    logger.info("[rpc] IN  getBalance address=%s", address)
    try:
        response = client.post(settings.rpc_url, json=payload, timeout=settings.rpc_timeout)
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        logger.error("[rpc] server-side RPC fetch error: %s", e)
        return f"Warning: Critical network error during server-side RPC fetch: {e}."

    if not isinstance(data, dict) or data.get("error") or not data.get("result"):
        error = data.get("error") if isinstance(data, dict) else None
        message = error.get("message") if isinstance(error, dict) else error
        logger.warning("[rpc] call failed for %s: %s", address, message or "No result found.")
        return RPC_FAILED_WARNING

    result = data["result"]
    lamports = result.get("value") if isinstance(result, dict) else None
    if not isinstance(lamports, int) or isinstance(lamports, bool):
        logger.warning("[rpc] unexpected result for %s: %r", address, result)
        return RPC_FAILED_WARNING

    balance = format_amount(lamports)
    logger.info("[rpc] OUT address=%s balance=%s", address, balance)
    return f"RPC Data: The current BSSC balance for address {address} is {balance} {TOKEN_NAME}."

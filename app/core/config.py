"""
Application configuration (env, settings, constants).

Responsibility: Centralize config loading, environment variables, and app-wide
constants. The relay never reads the environment itself: load_settings() builds a
Settings object once at startup and it is passed down explicitly.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

# BSSC JSON-RPC endpoint (Solana fork)
BSSC_RPC_URL: str = "https://bssc-rpc.bssc.live"

# 1 BSSC = 1,000,000,000 lamports (Solana standard)
LAMPORTS_PER_TOKEN: int = 1_000_000_000
TOKEN_NAME: str = "BSSC Testnet Faucet Token"

# Gemini generateContent
GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"
GEMINI_MODEL: str = "gemini-2.5-flash-preview-09-2025"

# API timeouts (seconds)
RPC_API_TIMEOUT: float = 15.0
LLM_API_TIMEOUT: float = 60.0

# Origins allowed to call the relay from a browser
DEFAULT_CORS_ORIGINS: tuple[str, ...] = ("http://localhost:8501", "http://localhost:5173")


class Settings(BaseModel):
    """Everything the relay needs from the outside world."""

    gemini_api_key: str = Field("", repr=False)
    gemini_model: str = GEMINI_MODEL
    gemini_base_url: str = GEMINI_API_BASE
    rpc_url: str = BSSC_RPC_URL
    rpc_timeout: float = RPC_API_TIMEOUT
    llm_timeout: float = LLM_API_TIMEOUT
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _env(name: str, default: str) -> str:
    return os.getenv(name, default).strip() or default


def load_settings() -> Settings:
    """Build Settings from environment variables (and .env, loaded at import)."""
    origins = os.getenv("CORS_ORIGINS", "").strip()
    return Settings(
        # Empty key is allowed; the hosting environment may inject auth instead.
        gemini_api_key=os.getenv("GEMINI_API_KEY", "").strip(),
        gemini_model=_env("GEMINI_MODEL", GEMINI_MODEL),
        gemini_base_url=_env("GEMINI_API_BASE", GEMINI_API_BASE).rstrip("/"),
        rpc_url=_env("BSSC_RPC_URL", BSSC_RPC_URL),
        cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else list(DEFAULT_CORS_ORIGINS),
    )

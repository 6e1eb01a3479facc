# Run from project root: uvicorn app.main:app --reload

import logging

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router
from app.core.config import Settings, load_settings

logging.basicConfig(level=logging.INFO)


def create_app(settings: Settings | None = None, transport: httpx.BaseTransport | None = None) -> FastAPI:
    """Build the relay app. Tests inject settings and a mock transport for the upstream APIs."""
    settings = settings or load_settings()
    app = FastAPI(title="BSSC Query Relay")
    app.state.settings = settings
    app.state.transport = transport
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.include_router(router)
    return app


app = create_app()

"""FastAPI application entrypoint. Run with: python run_api.py."""
import logging
import os
from pathlib import Path

# Load .env before app code reads SUPABASE_*, NVIDIA_*, SOLANA_RPC_URL etc.
from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=True)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.routes import router
from app.core.config import get_settings

logging.basicConfig(level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO))
_log = logging.getLogger(__name__)

# Keep HTTP client libs quiet; their DEBUG output includes auth headers
for _name in ("httpx", "httpcore", "hpack"):
    logging.getLogger(_name).setLevel(logging.WARNING)


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title=settings.api_title, version=settings.api_version)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["POST", "OPTIONS", "GET"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.include_router(router)
    if not settings.supabase_enabled:
        _log.warning("SUPABASE_URL / SUPABASE_SERVICE_ROLE_KEY not set: rename and agent-kit requests will fail.")
    return app


app = create_app()

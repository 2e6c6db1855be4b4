"""CORS configuration driven by BACKEND_CORS_ORIGINS."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings


def parse_origins(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def configure_cors(app: FastAPI, raw_origins: str | None = None) -> None:
    origins = parse_origins(raw_origins if raw_origins is not None else settings.BACKEND_CORS_ORIGINS)
    if not origins:
        return
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

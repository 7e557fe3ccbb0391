# api/main.py
from dotenv import load_dotenv
import os

env = os.getenv("APP_ENV", "local")
if env == "local":
    load_dotenv(".env.local")
else:
    load_dotenv(".env")

from typing import Optional
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.search import get_search_settings
from api.middleware.rate_limit import RateLimitMiddleware
from api.routers import health, search, smart_search
from config.settings import SearchSettings

logger = logging.getLogger(__name__)

LOCAL_ORIGINS = ["http://localhost:3000", "http://localhost:5173", "http://localhost:9002"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Starting Paper Search Backend")
    yield
    logger.info("🛑 Shutting down Paper Search Backend")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[SearchSettings] = None) -> FastAPI:
    """
    Build the API. Passing `settings` pins them for every request instead
    of re-reading the environment.
    """
    effective = settings or SearchSettings.from_env()
    configure_logging(effective.log_level)

    app = FastAPI(
        title="Paper Search API",
        version="1.0.0",
        description="Multi-source academic paper search: Semantic Scholar, OpenAlex, arXiv, CORE and PubMed.",
        lifespan=lifespan
    )

    if settings is not None:
        app.dependency_overrides[get_search_settings] = lambda: settings

    if effective.rate_limit_per_minute > 0:
        app.middleware("http")(RateLimitMiddleware(effective.rate_limit_per_minute))

    # CORS Configuration
    if effective.app_env == "local":
        origins = LOCAL_ORIGINS
    else:
        # Production origins from environment variable
        origins = effective.allowed_origins

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(search.router, tags=["Search"])
    app.include_router(smart_search.router, tags=["Smart Search"])

    @app.get("/")
    async def root():
        return {"message": "Paper Search Backend Running Successfully 🚀"}

    return app


app = create_app()

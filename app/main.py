"""FastAPI application factory: entry point for Shelfmark."""

import logging
import random
from collections.abc import Iterable
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.adapters.recommender.popular_random import PopularRandomRecommender
from app.adapters.storage.local import LocalCatalogSource
from app.api.errors import register_error_handlers
from app.api.routes.books import router as books_router
from app.config import Settings, settings
from app.domain.catalog import Catalog
from app.domain.models import Book
from app.services.catalog import CatalogService

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


def build_catalog_service(books: Iterable[Book], config: Settings = settings) -> CatalogService:
    """Wire a catalog, its recommender and the service from settings."""
    rng = random.Random(config.recommendation_seed)
    recommender = PopularRandomRecommender(
        rng=rng,
        popular_count=config.recommendation_popular_count,
        total_count=config.recommendation_total_count,
    )
    return CatalogService(
        Catalog(books),
        recommender,
        loan_period=timedelta(days=config.loan_period_days),
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: load the catalog unless one was injected."""
    logger.info("%s starting up...", settings.app_name)
    if getattr(app.state, "catalog_service", None) is None:
        books = await LocalCatalogSource(settings.catalog_path).load()
        app.state.catalog_service = build_catalog_service(books)
    logger.info("Catalog size: %d", len(app.state.catalog_service.catalog))
    logger.info(
        "Recommendations: %d popular of %d",
        settings.recommendation_popular_count,
        settings.recommendation_total_count,
    )
    yield
    logger.info("%s shutting down...", settings.app_name)


def create_app(catalog_service: CatalogService | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""
    application = FastAPI(
        title=settings.app_name,
        description="Lending inventory with popularity-based recommendations",
        version="1.0.0",
        lifespan=lifespan,
    )
    application.state.catalog_service = catalog_service

    # ── Middleware ──────────────────────────────────
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Errors ─────────────────────────────────────
    register_error_handlers(application)

    # ── Routes ─────────────────────────────────────
    application.include_router(books_router)

    # ── Health Check ───────────────────────────────
    @application.get("/health", tags=["System"])
    async def health() -> dict[str, str]:
        return {"status": "healthy", "service": "shelfmark"}

    return application


app = create_app()

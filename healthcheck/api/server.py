"""FastAPI server for the integration health sample app."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from healthcheck.api.health_routes import health_router
from healthcheck.api.routes import BOOKSTORE, POKEMON, router
from healthcheck.books.store import BookStore
from healthcheck.config import settings
from healthcheck.health.engine import IntegrationRegistry
from healthcheck.health.loader import register_from_file
from healthcheck.pokemon.client import PokemonClient

logger = logging.getLogger(__name__)


def build_registry() -> IntegrationRegistry:
    """Registry with integrations from integrations.yaml, or the built-in pair."""
    registry = IntegrationRegistry()
    path = Path(settings.integrations_file) if settings.integrations_file else None
    if register_from_file(registry, path) == 0:
        logger.info("No integrations declared, registering built-in defaults")
        registry.register_integration(BOOKSTORE, "database")
        registry.register_integration(POKEMON, "api")
    return registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize shared resources on startup."""
    registry = build_registry()
    app.state.integrations = registry
    logger.info("Tracking %d integrations: %s", len(registry), ", ".join(registry.names()))

    # Sample database integration
    book_store: BookStore | None = None
    try:
        book_store = BookStore(db_path=settings.books_db_path or None)
    except Exception:
        logger.warning("Book store unavailable, /book will report bookstore errors", exc_info=True)
    app.state.book_store = book_store

    # Sample API integration
    pokemon_client = PokemonClient(
        base_url=settings.pokemon_api_url,
        timeout=settings.pokemon_timeout,
    )
    app.state.pokemon_client = pokemon_client

    yield

    # Shutdown
    await pokemon_client.close()
    if book_store is not None:
        book_store.close()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Integration Health Check",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(router)
    app.include_router(health_router)

    return app


app = create_app()
